"""
Filesystem-backed vault.

Blocking filesystem calls run in worker threads so the event loop stays
responsive while the watcher delivers new files.
"""

import asyncio
import logging
from pathlib import Path, PurePosixPath
from typing import List, Optional

from ..core.types import VaultFile, VaultFolder, join_path
from .base import VaultEntry, VaultStorage

logger = logging.getLogger(__name__)


class LocalVault(VaultStorage):
    """Vault stored as a directory tree on the local filesystem."""

    def __init__(self, root: Path):
        """
        Initialize local vault.

        Args:
            root: Vault root directory
        """
        self.root = Path(root).resolve()

    def resolve(self, path: str) -> Path:
        """
        Map a vault-relative path onto the filesystem.

        Raises:
            ValueError: If the path would leave the vault
        """
        parts = PurePosixPath(path.strip("/")).parts
        if ".." in parts or "\0" in path:
            raise ValueError(f"Path escapes the vault: {path!r}")
        return self.root.joinpath(*parts)

    def to_vault_path(self, filesystem_path: Path) -> str:
        """
        Map a filesystem path back to a vault-relative path.

        Raises:
            ValueError: If the path is outside the vault
        """
        return Path(filesystem_path).resolve().relative_to(self.root).as_posix()

    def _entry(self, path: str, target: Path) -> Optional[VaultEntry]:
        if target.is_symlink():
            return None
        if target.is_dir():
            return VaultFolder(path=path, name=target.name if path else "")
        if target.is_file():
            return VaultFile(path=path, name=target.name)
        return None

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self.resolve(path).exists)

    async def create_folder(self, path: str) -> None:
        target = self.resolve(path)
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
        logger.debug(f"Created folder {path}")

    async def get_entry(self, path: str) -> Optional[VaultEntry]:
        path = path.strip("/")
        target = self.resolve(path)
        return await asyncio.to_thread(self._entry, path, target)

    def _list(self, folder: VaultFolder) -> List[VaultEntry]:
        entries: List[VaultEntry] = []
        for child in sorted(self.resolve(folder.path).iterdir()):
            # Dot entries are editor/tool state, not notes
            if child.name.startswith("."):
                continue
            entry = self._entry(join_path(folder.path, child.name), child)
            if entry is not None:
                entries.append(entry)
        return entries

    async def list_children(self, folder: VaultFolder) -> List[VaultEntry]:
        return await asyncio.to_thread(self._list, folder)

    def _rename(self, source: Path, destination: Path) -> None:
        # Path.rename silently replaces an existing file on POSIX
        if destination.exists():
            raise FileExistsError(f"Destination already exists: {destination}")
        source.rename(destination)

    async def rename(self, file: VaultFile, new_path: str) -> VaultFile:
        new_path = new_path.strip("/")
        await asyncio.to_thread(
            self._rename, self.resolve(file.path), self.resolve(new_path)
        )
        return VaultFile.from_path(new_path)
