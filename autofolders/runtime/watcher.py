"""
Filesystem watcher delivering new vault files to the organizer.

Watchdog calls the handler from its observer thread; work is handed over
to the service's asyncio loop so all vault operations stay on one loop.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Awaitable, Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..core.types import VaultFile
from ..storage.local import LocalVault

logger = logging.getLogger(__name__)

FileCallback = Callable[[VaultFile], Awaitable[object]]


class VaultWatcherHandler(FileSystemEventHandler):
    """
    Handles filesystem events for a vault.

    New files become ``VaultFile`` handles passed to the callback; changes
    to the settings file trigger a reload.
    """

    def __init__(
        self,
        vault: LocalVault,
        on_file_created: FileCallback,
        loop: asyncio.AbstractEventLoop,
        settings_path: Optional[Path] = None,
        on_settings_changed: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize vault watcher handler.

        Args:
            vault: Watched vault
            on_file_created: Coroutine function called with each new file
            loop: Loop the callbacks are scheduled on
            settings_path: Settings file to watch for changes
            on_settings_changed: Called on the loop when the settings file changes
        """
        super().__init__()
        self.vault = vault
        self.on_file_created = on_file_created
        self.loop = loop
        self.settings_path = Path(settings_path).resolve() if settings_path else None
        self.on_settings_changed = on_settings_changed

    def _is_settings_file(self, file_path: Path) -> bool:
        return self.settings_path is not None and file_path.resolve() == self.settings_path

    def _settings_touched(self, file_path: Path) -> None:
        if self.on_settings_changed is not None:
            logger.debug(f"Settings file changed: {file_path}")
            self.loop.call_soon_threadsafe(self.on_settings_changed)

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation events."""
        if event.is_directory:
            return

        file_path = Path(os.fsdecode(event.src_path))
        if self._is_settings_file(file_path):
            self._settings_touched(file_path)
            return

        try:
            vault_path = self.vault.to_vault_path(file_path)
        except ValueError:
            return

        # Hidden files and anything inside hidden folders are tool state
        if any(part.startswith(".") for part in vault_path.split("/")):
            return

        logger.debug(f"Detected new file: {vault_path}")
        asyncio.run_coroutine_threadsafe(
            self.on_file_created(VaultFile.from_path(vault_path)), self.loop
        )

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        if event.is_directory:
            return

        file_path = Path(os.fsdecode(event.src_path))
        if self._is_settings_file(file_path):
            self._settings_touched(file_path)


class VaultWatcher:
    """
    Background observer for a vault.

    Watches the whole vault recursively; filtering by base folder is left
    to the callback.
    """

    def __init__(
        self,
        vault: LocalVault,
        on_file_created: FileCallback,
        loop: asyncio.AbstractEventLoop,
        settings_path: Optional[Path] = None,
        on_settings_changed: Optional[Callable[[], None]] = None,
    ):
        self.vault = vault
        self.observer: Optional[Observer] = None
        self.handler = VaultWatcherHandler(
            vault,
            on_file_created,
            loop,
            settings_path=settings_path,
            on_settings_changed=on_settings_changed,
        )

    def start(self) -> None:
        """Start watching the vault."""
        if self.observer is not None:
            logger.warning("Watcher already running")
            return

        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.vault.root), recursive=True)
        self.observer.start()
        logger.info(f"Watching: {self.vault.root}")

    def stop(self) -> None:
        """Stop watching the vault."""
        if self.observer is None:
            return

        logger.info("Stopping vault watcher")
        self.observer.stop()
        self.observer.join()
        self.observer = None

    def is_running(self) -> bool:
        """Check if watcher is running."""
        return self.observer is not None and self.observer.is_alive()
