"""
Storage backends for vault access.

The organizer only talks to ``VaultStorage``; ``LocalVault`` maps
vault-relative paths onto a directory on disk.
"""

from .base import VaultStorage
from .local import LocalVault

__all__ = [
    "VaultStorage",
    "LocalVault",
]
