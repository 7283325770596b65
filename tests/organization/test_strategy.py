"""Tests for folder strategy."""

import arrow
import pytest

from autofolders.core.config import JournalSettings, PlacementCheck
from autofolders.organization.strategy import FolderStrategy


@pytest.fixture
def strategy() -> FolderStrategy:
    """Strategy filing under journal/YYYY/MM."""
    return FolderStrategy(base_folder="journal", yearly_format="YYYY", monthly_format="MM")


class TestTargetFolder:
    """Test target folder generation."""

    def test_year_month(self, strategy: FolderStrategy) -> None:
        """Test base/year/month nesting."""
        assert strategy.target_folder(arrow.Arrow(2025, 1, 15)) == "journal/2025/01"

    def test_default_month_format(self) -> None:
        """Test the default MM-YYYY month folder."""
        strategy = FolderStrategy.from_settings(JournalSettings(base_journal_folder="1 - journal"))

        assert strategy.target_folder(arrow.Arrow(2025, 2, 3)) == "1 - journal/2025/02-2025"

    def test_named_months(self) -> None:
        """Test month names as folder names."""
        strategy = FolderStrategy(
            base_folder="journal", yearly_format="YYYY", monthly_format="MM MMMM"
        )

        assert strategy.target_folder(arrow.Arrow(2025, 3, 1)) == "journal/2025/03 March"

    def test_vault_root_base(self) -> None:
        """Test an empty base folder files from the vault root."""
        strategy = FolderStrategy(base_folder="", yearly_format="YYYY", monthly_format="MM")

        assert strategy.target_folder(arrow.Arrow(2025, 1, 15)) == "2025/01"

    def test_current_folders(self, strategy: FolderStrategy) -> None:
        """Test today's year and month folders."""
        year_path, month_path = strategy.current_folders(arrow.Arrow(2025, 6, 1))

        assert year_path == "journal/2025"
        assert month_path == "journal/2025/06"

    def test_from_settings(self, settings: JournalSettings) -> None:
        """Test building the strategy from a settings snapshot."""
        strategy = FolderStrategy.from_settings(settings)

        assert strategy.base_folder == "journal"
        assert strategy.yearly_format == "YYYY"
        assert strategy.monthly_format == "MM"
        assert strategy.placement_check == PlacementCheck.PREFIX


class TestIsAlreadyPlaced:
    """Test the already-filed check."""

    def test_file_in_target(self, strategy: FolderStrategy) -> None:
        """Test a file directly in its target folder."""
        assert strategy.is_already_placed("journal/2025/01/2025-01-15.md", "journal/2025/01")

    def test_file_at_base(self, strategy: FolderStrategy) -> None:
        """Test a file at the base folder is not placed."""
        assert not strategy.is_already_placed("journal/2025-01-15.md", "journal/2025/01")

    def test_prefix_matches_sibling_with_shared_prefix(self, strategy: FolderStrategy) -> None:
        """Test the loose prefix check claims folders sharing a textual prefix."""
        assert strategy.is_already_placed("j/2025/030-extra/x", "j/2025/03")
        assert strategy.is_already_placed("journal/2025/10/x.md", "journal/2025/1")

    def test_segment_requires_whole_segments(self) -> None:
        """Test segment mode compares path segments."""
        strategy = FolderStrategy(
            base_folder="journal",
            yearly_format="YYYY",
            monthly_format="M",
            placement_check=PlacementCheck.SEGMENT,
        )

        assert not strategy.is_already_placed("journal/2025/10/x.md", "journal/2025/1")
        assert not strategy.is_already_placed("j/2025/030-extra/x", "j/2025/03")
        assert strategy.is_already_placed("journal/2025/1/x.md", "journal/2025/1")
        assert strategy.is_already_placed("journal/2025/1/deeper/x.md", "journal/2025/1")
