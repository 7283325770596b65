"""
Long-running organizer service.

Startup sequence: create this month's folders, sweep the base folder,
then organize every new file the watcher reports.
"""

import asyncio
import logging
from typing import Callable, Optional

import arrow

from ..core.config import JournalSettings, SettingsStore
from ..core.types import FileOutcome, OrganizationResult, VaultFile
from ..organization.file_organizer import JournalOrganizer
from ..storage.local import LocalVault
from .watcher import VaultWatcher

logger = logging.getLogger(__name__)


class AutoFolderService:
    """Keeps a vault's journal folder organized while running."""

    def __init__(
        self,
        vault: LocalVault,
        settings: JournalSettings,
        store: Optional[SettingsStore] = None,
        clock: Optional[Callable[[], arrow.Arrow]] = None,
        dry_run: bool = False,
    ):
        """
        Initialize organizer service.

        Args:
            vault: Vault to organize
            settings: Initial settings snapshot
            store: Settings store, watched for changes while running
            clock: Returns the current date (default: local today)
            dry_run: If True, report decisions without touching the vault
        """
        self.vault = vault
        self.store = store
        self.organizer = JournalOrganizer(
            vault, settings, clock=clock, dry_run=dry_run
        )
        self.watcher: Optional[VaultWatcher] = None

    @property
    def settings(self) -> JournalSettings:
        return self.organizer.settings

    def in_base_folder(self, file: VaultFile) -> bool:
        """Check whether ``file`` lives somewhere below the base folder."""
        base_folder = self.settings.base_journal_folder
        if not base_folder:
            return True
        return file.path.startswith(f"{base_folder}/")

    async def start(self, watch: bool = True) -> OrganizationResult:
        """
        Run the startup sequence and optionally begin watching.

        Args:
            watch: Start the filesystem watcher after the sweep

        Returns:
            Result of the startup sweep
        """
        logger.info("Auto File Organizer loaded")

        try:
            await self.organizer.ensure_current_folders()
        except OSError as e:
            logger.error(f"Could not create current year/month folders: {e}")

        result = await self.organizer.organize_existing()

        if watch:
            self.watcher = VaultWatcher(
                self.vault,
                self.handle_created,
                asyncio.get_running_loop(),
                settings_path=self.store.path if self.store else None,
                on_settings_changed=self.reload_from_store if self.store else None,
            )
            self.watcher.start()

        return result

    async def handle_created(self, file: VaultFile) -> Optional[FileOutcome]:
        """
        Organize a newly created file.

        Files outside the base folder are ignored. Errors are logged and
        never raised.

        Returns:
            Outcome, or None if the file was ignored or failed
        """
        if not self.in_base_folder(file):
            return None

        try:
            return await self.organizer.organize_file(file)
        except Exception as e:
            logger.error(f"Error processing {file.path}: {e}")
            return None

    def reload(self, settings: JournalSettings) -> None:
        """Swap in a new settings snapshot for files processed from now on."""
        self.organizer.settings = settings
        logger.info("Settings reloaded")

    def reload_from_store(self) -> None:
        """Reload settings from the settings store."""
        if self.store is None:
            return
        self.reload(self.store.load())

    def stop(self) -> None:
        """Stop watching."""
        if self.watcher is not None:
            self.watcher.stop()
            self.watcher = None

    async def run_forever(self, stop_event: Optional[asyncio.Event] = None) -> None:
        """
        Start the service and keep it running until ``stop_event`` is set.

        Args:
            stop_event: Event ending the run; without one, runs until cancelled
        """
        stop_event = stop_event or asyncio.Event()
        await self.start(watch=True)
        try:
            await stop_event.wait()
        finally:
            self.stop()
