"""
Organization module for filing dated notes.

Computes year/month target folders and moves notes into them, one at a
time or as a sweep over the base journal folder.
"""

from .file_organizer import JournalOrganizer, ensure_folder_exists
from .strategy import FolderStrategy

__all__ = [
    "JournalOrganizer",
    "ensure_folder_exists",
    "FolderStrategy",
]
