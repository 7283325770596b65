"""
Type definitions for vault entries and organization results.
"""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Final ".ext" of a name; a leading dot or a slash ends the match
_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def join_path(*parts: str) -> str:
    """Join vault-relative path parts with "/", ignoring empty parts."""
    return "/".join(part.strip("/") for part in parts if part and part.strip("/"))


class VaultFolder(BaseModel):
    """A folder inside the vault, addressed by its vault-relative path."""

    path: str = Field(description="Vault-relative POSIX path ('' for the root)")
    name: str = Field(description="Folder name")

    model_config = ConfigDict(frozen=True)


class VaultFile(BaseModel):
    """A file inside the vault, addressed by its vault-relative path."""

    path: str = Field(description="Vault-relative POSIX path")
    name: str = Field(description="File name including extension")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_path(cls, path: str) -> "VaultFile":
        """Build a file handle from a vault-relative path."""
        path = path.strip("/")
        return cls(path=path, name=path.rsplit("/", 1)[-1])

    @property
    def basename(self) -> str:
        """Name with the final extension stripped."""
        return _EXTENSION_RE.sub("", self.name)

    @property
    def parent(self) -> str:
        """Vault-relative path of the containing folder."""
        return self.path.rsplit("/", 1)[0] if "/" in self.path else ""


class SkipReason(str, Enum):
    """Why a file was left where it is."""

    NOT_DATED = "not_dated"
    IS_TODAY = "is_today"
    ALREADY_PLACED = "already_placed"
    MOVE_FAILED = "move_failed"


class FileOutcome(BaseModel):
    """Decision taken for a single file."""

    file_name: str
    source_path: str
    moved: bool = False
    reason: Optional[SkipReason] = None
    target_path: Optional[str] = None
    dry_run: bool = False


class OrganizationResult(BaseModel):
    """Result of a sweep over the base folder."""

    total_files: int = 0
    organized: int = 0
    skipped: int = 0
    failed: int = 0
    no_date: int = 0
    dry_run: bool = False
    errors: List[str] = Field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        """Fold a single file outcome into the totals."""
        if outcome.moved:
            self.organized += 1
        elif outcome.reason == SkipReason.MOVE_FAILED:
            self.failed += 1
            self.errors.append(f"{outcome.source_path}: move failed")
        else:
            self.skipped += 1
            if outcome.reason == SkipReason.NOT_DATED:
                self.no_date += 1
