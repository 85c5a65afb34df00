"""Propagate the SharedFiles tree into every product task directory."""

from __future__ import annotations

from .copying.discovery import discover_destinations
from .copying.propagation import propagate_shared_files, sync_shared_files
from .copying.tree_copier import copy_tree
from .copying.types import (
    CopyFault,
    CopyOutcome,
    DiscoveryFault,
    EntryKind,
    FilesystemEntry,
    PropagationResult,
    SharedFilesError,
)
from .infrastructure.config import LayoutConfig

__all__ = [
    # discovery
    "discover_destinations",
    # propagation
    "propagate_shared_files",
    "sync_shared_files",
    # tree_copier
    "copy_tree",
    # types
    "CopyFault",
    "CopyOutcome",
    "DiscoveryFault",
    "EntryKind",
    "FilesystemEntry",
    "PropagationResult",
    "SharedFilesError",
    # config
    "LayoutConfig",
]
