"""Shared-files copying domain types."""

from __future__ import annotations

import enum
import stat
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel


class SharedFilesError(Exception):
    """Base class for shared-files propagation faults."""


class DiscoveryFault(SharedFilesError):
    """Listing the product-tasks root or a product directory failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"discovery failed at {path}: {cause}")


class CopyFault(SharedFilesError):
    """A filesystem operation failed during a tree copy."""

    def __init__(self, operation: str, path: Path, cause: OSError) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"{operation} failed for {path}: {cause}")


class EntryKind(enum.Enum):
    REGULAR_FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        """Classify an lstat mode; symlinks are checked first."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.REGULAR_FILE
        return cls.OTHER


@dataclass(frozen=True)
class FilesystemEntry:
    name: str
    kind: EntryKind


class CopyOutcome(BaseModel):
    destination: str
    success: bool
    error: str | None = None


class PropagationResult(BaseModel):
    success: bool
    shared_files_dir: str
    outcomes: list[CopyOutcome]
    error: str | None = None

    @property
    def failed_destinations(self) -> list[str]:
        return [o.destination for o in self.outcomes if not o.success]
