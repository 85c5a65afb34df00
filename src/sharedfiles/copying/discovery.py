"""Locate product task directories two levels below the product-tasks root."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from sharedfiles.copying.types import DiscoveryFault


def _child_dirs(parent: Path) -> list[Path]:
    """Immediate subdirectories of parent, in enumeration order.

    Uses stat (not lstat), so a symlink to a directory counts as one.
    """
    try:
        names = os.listdir(parent)
    except OSError as err:
        raise DiscoveryFault(parent, err) from err

    dirs: list[Path] = []
    for name in names:
        child = parent / name
        try:
            mode = os.stat(child).st_mode
        except OSError as err:
            raise DiscoveryFault(child, err) from err
        if stat.S_ISDIR(mode):
            dirs.append(child)
    return dirs


def discover_destinations(product_tasks_root: Path) -> list[Path]:
    """Return every ProductTasks/<product>/<task> directory as an absolute path."""
    root = Path(product_tasks_root).resolve()
    destinations: list[Path] = []
    for product_dir in _child_dirs(root):
        destinations.extend(_child_dirs(product_dir))
    return destinations
