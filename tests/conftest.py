"""Shared fixtures for shared-files tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

Snapshot = dict[str, tuple[str, bytes | str | None]]


def build_tree(root: Path, files: dict[str, str], links: dict[str, str] | None = None) -> Path:
    """Create files (relative path -> text) and symlinks (relative path -> target) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
    for rel_path, target in (links or {}).items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(target, full_path)
    return root


def snapshot_tree(root: Path) -> Snapshot:
    """Map every entry under root to (kind, content-or-target), without following links."""
    result: Snapshot = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            full_path = Path(dirpath) / name
            rel = full_path.relative_to(root).as_posix()
            if full_path.is_symlink():
                result[rel] = ("symlink", os.readlink(full_path))
            elif full_path.is_dir():
                result[rel] = ("directory", None)
            elif full_path.is_file():
                result[rel] = ("file", full_path.read_bytes())
            else:
                result[rel] = ("other", None)
    return result


@pytest.fixture()
def make_tree() -> Callable[..., Path]:
    return build_tree


@pytest.fixture()
def snapshot() -> Callable[[Path], Snapshot]:
    return snapshot_tree


@pytest.fixture()
def layout_root(tmp_path: Path) -> Path:
    """A root holding SharedFiles and ProductTasks/{P1,P2}/T1.

    SharedFiles mirrors a typical task bundle: a config file and a library
    directory with a relative symlink.
    """
    root = tmp_path / "repo"
    build_tree(
        root / "SharedFiles",
        {"config.json": "{}"},
        {"lib/link": "../target"},
    )
    (root / "ProductTasks" / "P1" / "T1").mkdir(parents=True)
    (root / "ProductTasks" / "P2" / "T1").mkdir(parents=True)
    return root
