"""
Pytest configuration and fixtures for autofolders tests.
"""

from pathlib import Path
from typing import Callable

import arrow
import pytest

from autofolders.core.config import JournalSettings
from autofolders.storage.local import LocalVault

# ==============================================================================
# Settings and clock fixtures
# ==============================================================================


@pytest.fixture
def settings() -> JournalSettings:
    """Settings filing journal/YYYY-MM-DD notes under journal/YYYY/MM."""
    return JournalSettings(
        base_journal_folder="journal",
        daily_note_format="YYYY-MM-DD",
        yearly_folder_format="YYYY",
        monthly_folder_format="MM",
    )


@pytest.fixture
def fixed_clock() -> Callable[[], arrow.Arrow]:
    """Clock frozen on 2025-06-01."""
    return lambda: arrow.Arrow(2025, 6, 1)


# ==============================================================================
# File and directory fixtures
# ==============================================================================


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Vault directory with an empty journal folder."""
    vault_dir = tmp_path / "vault"
    (vault_dir / "journal").mkdir(parents=True)
    return vault_dir


@pytest.fixture
def vault(vault_dir: Path) -> LocalVault:
    """Local vault over ``vault_dir``."""
    return LocalVault(vault_dir)


@pytest.fixture
def make_note(vault_dir: Path) -> Callable[..., Path]:
    """Factory writing a note at a vault-relative path."""

    def _make_note(relative_path: str, content: str = "note") -> Path:
        note_path = vault_dir / relative_path
        note_path.parent.mkdir(parents=True, exist_ok=True)
        note_path.write_text(content)
        return note_path

    return _make_note
