"""
File organizer for dated journal notes.

Decides, file by file, whether a note is dated, whether it is today's
note, whether it is already filed, and otherwise moves it into its
year/month folder. Also drives the sweep over the base folder.
"""

import logging
from typing import Callable, Optional

import arrow

from ..core.config import JournalSettings
from ..core.dates import format_date, parse_strict, today
from ..core.types import (
    FileOutcome,
    OrganizationResult,
    SkipReason,
    VaultFile,
    VaultFolder,
    join_path,
)
from ..storage.base import VaultStorage
from .strategy import FolderStrategy

logger = logging.getLogger(__name__)


async def ensure_folder_exists(
    storage: VaultStorage, folder_path: str, dry_run: bool = False
) -> None:
    """
    Create ``folder_path`` unless it already exists.

    Args:
        storage: Vault backend
        folder_path: Vault-relative folder path
        dry_run: If True, only report the folder that would be created

    Raises:
        OSError: If the folder cannot be created
    """
    if await storage.exists(folder_path):
        return

    if dry_run:
        logger.info(f"[DRY RUN] Would create folder: {folder_path}")
        return

    try:
        await storage.create_folder(folder_path)
    except OSError as e:
        # Another writer may have created it in between
        if await storage.exists(folder_path):
            return
        logger.error(f"Could not create folder {folder_path}: {e}")
        raise

    logger.info(f"Created folder: {folder_path}")


class JournalOrganizer:
    """Files dated notes into year/month folders."""

    def __init__(
        self,
        storage: VaultStorage,
        settings: JournalSettings,
        clock: Optional[Callable[[], arrow.Arrow]] = None,
        dry_run: bool = False,
    ):
        """
        Initialize journal organizer.

        Args:
            storage: Vault backend
            settings: Settings snapshot
            clock: Returns the current date (default: local today)
            dry_run: If True, report decisions without touching the vault
        """
        self.storage = storage
        self.settings = settings
        self.clock = clock or today
        self.dry_run = dry_run

    async def ensure_current_folders(self) -> None:
        """Create this year's and this month's folders."""
        strategy = FolderStrategy.from_settings(self.settings)
        year_path, month_path = strategy.current_folders(self.clock())

        await ensure_folder_exists(self.storage, year_path, self.dry_run)
        await ensure_folder_exists(self.storage, month_path, self.dry_run)

    async def organize_file(self, file: VaultFile) -> FileOutcome:
        """
        Move a single file into its year/month folder if it belongs there.

        Args:
            file: File handle

        Returns:
            Outcome; a skip is a normal result, not an error

        Raises:
            OSError: If the target folder cannot be created
        """
        # Snapshot taken once; a reload mid-call does not affect this file
        settings = self.settings
        strategy = FolderStrategy.from_settings(settings)
        outcome = FileOutcome(
            file_name=file.name, source_path=file.path, dry_run=self.dry_run
        )
        basename = file.basename

        file_date = parse_strict(basename, settings.daily_note_format)
        if file_date is None:
            logger.info(f"Could not parse a valid date from file name: {file.name}")
            outcome.reason = SkipReason.NOT_DATED
            return outcome

        if basename == format_date(self.clock(), settings.daily_note_format):
            logger.info(f"Skipping today's file: {file.name}")
            outcome.reason = SkipReason.IS_TODAY
            return outcome

        target_folder = strategy.target_folder(file_date)
        outcome.target_path = join_path(target_folder, file.name)

        await ensure_folder_exists(self.storage, target_folder, self.dry_run)

        if strategy.is_already_placed(file.path, target_folder):
            logger.info(f'Skipping "{file.name}" (already in correct folder)')
            outcome.reason = SkipReason.ALREADY_PLACED
            return outcome

        if self.dry_run:
            logger.info(f"[DRY RUN] Would move {file.path} → {outcome.target_path}")
            outcome.moved = True
            return outcome

        try:
            await self.storage.rename(file, outcome.target_path)
        except OSError as e:
            logger.error(f'Error moving file "{file.name}": {e}')
            outcome.reason = SkipReason.MOVE_FAILED
            return outcome

        logger.info(f'Moved "{file.name}" to folder: {target_folder}')
        outcome.moved = True
        return outcome

    async def handle_file(self, file: VaultFile) -> Optional[str]:
        """
        Organize a file, returning its name if it was moved.

        Returns:
            File name when moved, None when skipped
        """
        outcome = await self.organize_file(file)
        return outcome.file_name if outcome.moved else None

    async def organize_existing(self) -> OrganizationResult:
        """
        Organize every file directly inside the base folder.

        Folders are not descended into. One file failing does not stop
        the others.

        Returns:
            Organization result with statistics
        """
        base_folder = self.settings.base_journal_folder
        result = OrganizationResult(dry_run=self.dry_run)

        journal_folder = await self.storage.get_entry(base_folder)
        if not isinstance(journal_folder, VaultFolder):
            logger.error(f'Folder "{base_folder}" not found.')
            return result

        children = await self.storage.list_children(journal_folder)
        files = [child for child in children if isinstance(child, VaultFile)]
        result.total_files = len(files)

        logger.info(f"Organizing {len(files)} file(s) in {base_folder}")

        for file in files:
            try:
                outcome = await self.organize_file(file)
            except Exception as e:
                logger.error(f"Error processing {file.path}: {e}")
                result.failed += 1
                result.errors.append(f"{file.path}: {str(e)}")
                continue
            result.record(outcome)

        logger.info(
            f"Organized {result.organized}, skipped {result.skipped}, "
            f"failed {result.failed}"
        )
        return result
