"""Runtime: the watching service and its filesystem watcher."""

from .service import AutoFolderService
from .watcher import VaultWatcher, VaultWatcherHandler

__all__ = [
    "AutoFolderService",
    "VaultWatcher",
    "VaultWatcherHandler",
]
