"""Layout constants and root directory resolution."""

from __future__ import annotations

from pathlib import Path

PRODUCT_TASKS_DIR_NAME: str = "ProductTasks"
SHARED_FILES_DIR_NAME: str = "SharedFiles"

# Absolute paths
PROJECT_ROOT: Path = Path.cwd()


class LayoutConfig:
    """Locations of the product-tasks root and the shared-files source."""

    def __init__(self, root: Path = PROJECT_ROOT) -> None:
        self.root = Path(root).resolve()

    @property
    def product_tasks_dir(self) -> Path:
        """Destinations root: {root}/ProductTasks"""
        return self.root / PRODUCT_TASKS_DIR_NAME

    @property
    def shared_files_dir(self) -> Path:
        """Source tree: {root}/SharedFiles"""
        return self.root / SHARED_FILES_DIR_NAME

    @classmethod
    def for_script(cls, script_path: str | Path) -> LayoutConfig:
        """Layout whose root is the parent of the script's containing directory."""
        return cls(Path(script_path).resolve().parent.parent)

    def __repr__(self) -> str:
        return f"LayoutConfig(root={str(self.root)!r})"
