"""Entry point: python -m sharedfiles"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from sharedfiles.copying.propagation import sync_shared_files
from sharedfiles.copying.types import SharedFilesError
from sharedfiles.infrastructure.config import PROJECT_ROOT, LayoutConfig


def main(layout: LayoutConfig) -> int:
    """Copy the shared files for the given layout. Returns the process exit code."""
    try:
        result = asyncio.run(sync_shared_files(layout))
    except SharedFilesError as err:
        print(err, file=sys.stderr)
        return 1

    if not result.success:
        print(result.error, file=sys.stderr)
        return 1
    return 0


def run(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Copy SharedFiles into every ProductTasks/<product>/<task> directory")
    parser.add_argument("--root", type=Path, default=PROJECT_ROOT, help="Directory holding ProductTasks and SharedFiles")
    args = parser.parse_args(argv)

    sys.exit(main(LayoutConfig(args.root)))


if __name__ == "__main__":
    run()
