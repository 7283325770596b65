"""Tests for organize CLI command."""

import json
from pathlib import Path
from unittest.mock import patch

import arrow
import pytest
from click.testing import CliRunner

from autofolders.cli.main import cli


@pytest.fixture
def journal_vault(vault_dir: Path, make_note) -> Path:
    """Vault with settings and a few notes."""
    (vault_dir / ".autofolders.json").write_text(
        json.dumps(
            {
                "baseJournalFolder": "journal",
                "monthlyFolderFormat": "MM",
                "yearlyFolderFormat": "YYYY",
            }
        )
    )
    make_note("journal/2025-01-15.md")
    make_note("journal/2025-06-01.md")
    make_note("journal/notes.md")
    return vault_dir


@pytest.fixture(autouse=True)
def frozen_today():
    """Freeze the organizer's clock on 2025-06-01."""
    with patch(
        "autofolders.organization.file_organizer.today",
        return_value=arrow.Arrow(2025, 6, 1),
    ):
        yield


class TestOrganizeCommand:
    """Tests for autofolders organize."""

    def test_organize(self, journal_vault: Path) -> None:
        """Test a one-shot sweep files past notes."""
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(journal_vault)])

        assert result.exit_code == 0, result.output
        assert "Organization complete" in result.output
        assert (journal_vault / "journal" / "2025" / "01" / "2025-01-15.md").exists()
        assert (journal_vault / "journal" / "2025" / "06").is_dir()
        assert (journal_vault / "journal" / "2025-06-01.md").exists()
        assert (journal_vault / "journal" / "notes.md").exists()

    def test_dry_run(self, journal_vault: Path) -> None:
        """Test dry run leaves the vault untouched."""
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(journal_vault), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "DRY RUN" in result.output
        assert (journal_vault / "journal" / "2025-01-15.md").exists()
        assert not (journal_vault / "journal" / "2025").exists()

    def test_explicit_settings_file(self, vault_dir: Path, tmp_path: Path, make_note) -> None:
        """Test --settings points at another settings file."""
        settings_file = tmp_path / "custom.json"
        settings_file.write_text(
            json.dumps({"baseJournalFolder": "daily", "monthlyFolderFormat": "MM"})
        )
        make_note("daily/2024-12-24.md")
        runner = CliRunner()

        result = runner.invoke(
            cli, ["organize", str(vault_dir), "--settings", str(settings_file)]
        )

        assert result.exit_code == 0, result.output
        assert (vault_dir / "daily" / "2024" / "12" / "2024-12-24.md").exists()

    def test_vault_from_environment(
        self, journal_vault: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the vault defaults to AUTOFOLDERS_VAULT_PATH."""
        monkeypatch.setenv("AUTOFOLDERS_VAULT_PATH", str(journal_vault))
        runner = CliRunner()

        result = runner.invoke(cli, ["organize"])

        assert result.exit_code == 0, result.output
        assert (journal_vault / "journal" / "2025" / "01" / "2025-01-15.md").exists()

    def test_missing_vault(self, tmp_path: Path) -> None:
        """Test a vault that is not a directory is a usage error."""
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(tmp_path / "nope")])

        assert result.exit_code == 2
        assert "is not a directory" in result.output

    def test_unexpected_error_exits_1(self, journal_vault: Path) -> None:
        """Test unexpected failures are reported with exit code 1."""
        runner = CliRunner()

        with patch(
            "autofolders.cli.organize.AutoFolderService.start",
            side_effect=RuntimeError("boom"),
        ):
            result = runner.invoke(cli, ["organize", str(journal_vault)])

        assert result.exit_code == 1
        assert "boom" in result.output


class TestRunCommand:
    """Tests for autofolders run."""

    def test_run_stops_on_interrupt(self, journal_vault: Path) -> None:
        """Test Ctrl+C ends the run cleanly."""
        runner = CliRunner()

        with patch(
            "autofolders.cli.organize.asyncio.run", side_effect=KeyboardInterrupt
        ) as mock_run:
            result = runner.invoke(cli, ["run", str(journal_vault)])

        mock_run.call_args.args[0].close()
        assert result.exit_code == 0, result.output
        assert "Stopped" in result.output


def test_version() -> None:
    """Test --version."""
    runner = CliRunner()

    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "autofolders" in result.output
