"""Fan the shared-files tree out to every product task directory."""

from __future__ import annotations

import asyncio
from pathlib import Path

from sharedfiles.copying.discovery import discover_destinations
from sharedfiles.copying.tree_copier import copy_tree
from sharedfiles.copying.types import CopyFault, CopyOutcome, PropagationResult
from sharedfiles.infrastructure.config import LayoutConfig
from sharedfiles.infrastructure.logger import logger


async def _copy_to(shared_files_dir: Path, destination: Path) -> None:
    logger.info("Copying shared files", destination=str(destination))
    await copy_tree(shared_files_dir, destination)
    logger.info("Copy shared files done", destination=str(destination))


async def propagate_shared_files(shared_files_dir: Path, destinations: list[Path]) -> PropagationResult:
    """Copy shared_files_dir into each destination concurrently and wait for all.

    Copy faults are collected per destination; the first one in destination
    order becomes the result's error. Anything else propagates.
    """
    results = await asyncio.gather(
        *(_copy_to(shared_files_dir, dest) for dest in destinations),
        return_exceptions=True,
    )

    outcomes: list[CopyOutcome] = []
    first_error: str | None = None
    for dest, result in zip(destinations, results):
        if isinstance(result, CopyFault):
            logger.error("Copy shared files failed", destination=str(dest), error=str(result))
            outcomes.append(CopyOutcome(destination=str(dest), success=False, error=str(result)))
            if first_error is None:
                first_error = str(result)
        elif isinstance(result, BaseException):
            raise result
        else:
            outcomes.append(CopyOutcome(destination=str(dest), success=True))

    return PropagationResult(
        success=first_error is None,
        shared_files_dir=str(shared_files_dir),
        outcomes=outcomes,
        error=first_error,
    )


async def sync_shared_files(layout: LayoutConfig) -> PropagationResult:
    """Discover destinations under the layout and propagate the shared files.

    DiscoveryFault propagates before any copy starts.
    """
    destinations = discover_destinations(layout.product_tasks_dir)
    logger.info("Discovered product task directories", count=len(destinations))
    return await propagate_shared_files(layout.shared_files_dir, destinations)
