"""
Folder layout for dated journal files.

Maps a date onto ``base/<year>/<month>`` using the configured year and
month folder formats, and decides whether a file already sits there.
"""

from typing import Tuple

import arrow
from pydantic import BaseModel, ConfigDict, Field

from ..core.config import JournalSettings, PlacementCheck
from ..core.dates import format_date
from ..core.types import join_path


class FolderStrategy(BaseModel):
    """Year/month folder layout under a base folder."""

    base_folder: str = Field(description="Base journal folder")
    yearly_format: str = Field(default="YYYY", description="Year folder format")
    monthly_format: str = Field(default="MM-YYYY", description="Month folder format")
    placement_check: PlacementCheck = Field(
        default=PlacementCheck.PREFIX,
        description="How an already filed note is recognised",
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings: JournalSettings) -> "FolderStrategy":
        """Build the layout described by a settings snapshot."""
        return cls(
            base_folder=settings.base_journal_folder,
            yearly_format=settings.yearly_folder_format,
            monthly_format=settings.monthly_folder_format,
            placement_check=settings.placement_check,
        )

    def year_folder(self, date: arrow.Arrow) -> str:
        """Vault path of the year folder for ``date``."""
        return join_path(self.base_folder, format_date(date, self.yearly_format))

    def target_folder(self, date: arrow.Arrow) -> str:
        """
        Get the folder a file dated ``date`` belongs in.

        Args:
            date: Parsed file date

        Returns:
            Vault path ``base/year/month``
        """
        return join_path(self.year_folder(date), format_date(date, self.monthly_format))

    def current_folders(self, today: arrow.Arrow) -> Tuple[str, str]:
        """Return today's (year folder, month folder) paths."""
        return self.year_folder(today), self.target_folder(today)

    def is_already_placed(self, file_path: str, target_folder: str) -> bool:
        """
        Check whether ``file_path`` already lives under ``target_folder``.

        In prefix mode any path starting with the folder text counts, so
        ``j/2025/03`` also claims ``j/2025/030-extra/x``. Segment mode
        compares whole path segments.
        """
        if self.placement_check == PlacementCheck.SEGMENT:
            folder_parts = target_folder.strip("/").split("/")
            file_parts = file_path.strip("/").split("/")
            return file_parts[: len(folder_parts)] == folder_parts and len(
                file_parts
            ) > len(folder_parts)
        return file_path.startswith(target_folder)
