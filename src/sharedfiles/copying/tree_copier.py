"""Recursive asynchronous tree copy preserving files, directories and symlinks.

Every filesystem call runs on the default executor and is awaited, so each
one is a suspension point on the event loop. Siblings within a directory are
scheduled together and joined before the directory counts as copied.
"""

from __future__ import annotations

import asyncio
import errno
import os
from pathlib import Path
from typing import Any, Callable, TypeVar

from sharedfiles.copying.types import CopyFault, EntryKind, FilesystemEntry
from sharedfiles.infrastructure.logger import logger

T = TypeVar("T")


async def _fs_call(operation: str, path: Path, fn: Callable[..., T], *args: Any) -> T:
    """Run a blocking filesystem call off the loop, wrapping OSError as CopyFault."""
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, fn, *args)
    except OSError as err:
        raise CopyFault(operation, path, err) from err


def _ensure_dir(path: Path, allow_link: bool) -> None:
    try:
        os.mkdir(path)
    except FileExistsError:
        # Links are only accepted for the top-level destination.
        if path.is_symlink() and not allow_link:
            raise
        if not path.is_dir():
            raise


def _list_dir(path: Path) -> list[str]:
    return os.listdir(path)


def _inspect(path: Path) -> FilesystemEntry:
    return FilesystemEntry(name=path.name, kind=EntryKind.from_mode(os.lstat(path).st_mode))


def _read_link(path: Path) -> str:
    return os.readlink(path)


def _make_symlink(target: str, dest: Path) -> None:
    try:
        os.symlink(target, dest)
    except FileExistsError:
        # Left by an earlier run; anything other than a link is a real conflict.
        if not dest.is_symlink():
            raise
        os.unlink(dest)
        os.symlink(target, dest)


def _read_file(path: Path) -> bytes:
    return path.read_bytes()


def _write_file(path: Path, data: bytes) -> None:
    if path.is_symlink():
        raise FileExistsError(errno.EEXIST, "Destination is a symlink", str(path))
    path.write_bytes(data)


async def _copy_entry(source: Path, dest: Path) -> None:
    entry = await _fs_call("lstat", source, _inspect, source)

    if entry.kind is EntryKind.SYMLINK:
        target = await _fs_call("readlink", source, _read_link, source)
        await _fs_call("symlink", dest, _make_symlink, target, dest)
    elif entry.kind is EntryKind.DIRECTORY:
        await _copy_dir(source, dest, allow_link=False)
    elif entry.kind is EntryKind.REGULAR_FILE:
        data = await _fs_call("read", source, _read_file, source)
        await _fs_call("write", dest, _write_file, dest, data)
    else:
        logger.debug("Skipping unsupported entry", name=entry.name, kind=entry.kind.value, path=str(source))


async def _copy_dir(source_dir: Path, dest_dir: Path, allow_link: bool) -> None:
    await _fs_call("mkdir", dest_dir, _ensure_dir, dest_dir, allow_link)
    names = await _fs_call("listdir", source_dir, _list_dir, source_dir)
    if not names:
        return

    results = await asyncio.gather(
        *(_copy_entry(source_dir / name, dest_dir / name) for name in names),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result


async def copy_tree(source_dir: Path, dest_dir: Path) -> None:
    """Replicate source_dir into dest_dir.

    dest_dir itself may be a symlink to a directory; links already present
    below it are never followed. Returns once every entry at every depth has
    been copied. Raises the first CopyFault (in directory listing order) after
    all siblings at the failing level have settled; in-flight siblings are
    never cancelled, so a partial tree may remain on disk.
    """
    await _copy_dir(Path(source_dir), Path(dest_dir), allow_link=True)
