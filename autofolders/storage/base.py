"""
Abstract storage backend.

All operations are coroutines and may raise ``OSError`` subclasses.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from ..core.types import VaultFile, VaultFolder

VaultEntry = Union[VaultFile, VaultFolder]


class VaultStorage(ABC):
    """Vault operations the organizer depends on."""

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check whether anything exists at ``path``."""

    @abstractmethod
    async def create_folder(self, path: str) -> None:
        """Create the folder at ``path`` along with missing parents."""

    @abstractmethod
    async def get_entry(self, path: str) -> Optional[VaultEntry]:
        """Resolve ``path`` to a file or folder handle, or None if absent."""

    @abstractmethod
    async def list_children(self, folder: VaultFolder) -> List[VaultEntry]:
        """List the direct children of ``folder``."""

    @abstractmethod
    async def rename(self, file: VaultFile, new_path: str) -> VaultFile:
        """
        Move ``file`` to ``new_path``.

        Raises:
            FileExistsError: If something already exists at ``new_path``
        """
