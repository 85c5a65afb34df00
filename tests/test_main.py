"""End-to-end tests for the command-line entry points."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sharedfiles.__main__ import main, run
from sharedfiles.copying import tree_copier
from sharedfiles.infrastructure.config import LayoutConfig


class TestMain:
    def test_copies_shared_files_and_exits_zero(self, layout_root: Path):
        exit_code = main(LayoutConfig(layout_root))

        assert exit_code == 0
        for product in ("P1", "P2"):
            dest = layout_root / "ProductTasks" / product / "T1"
            assert (dest / "config.json").read_text() == "{}"
            assert (dest / "lib" / "link").is_symlink()
            assert os.readlink(dest / "lib" / "link") == "../target"

    def test_read_failure_exits_one_with_error_on_stderr(self, layout_root: Path, monkeypatch, capsys):
        def failing_read(path: Path) -> bytes:
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(tree_copier, "_read_file", failing_read)

        exit_code = main(LayoutConfig(layout_root))

        assert exit_code == 1
        err = capsys.readouterr().err
        assert "read failed" in err
        assert "config.json" in err

    def test_missing_product_tasks_exits_one(self, tmp_path: Path, capsys):
        (tmp_path / "SharedFiles").mkdir()

        exit_code = main(LayoutConfig(tmp_path))

        assert exit_code == 1
        assert "discovery failed" in capsys.readouterr().err


class TestRun:
    def test_root_option_sets_exit_status(self, layout_root: Path):
        with pytest.raises(SystemExit) as exc_info:
            run(["--root", str(layout_root)])

        assert exc_info.value.code == 0
        assert (layout_root / "ProductTasks" / "P1" / "T1" / "config.json").exists()

    def test_defaults_to_working_directory(self, layout_root: Path, monkeypatch):
        monkeypatch.chdir(layout_root)
        monkeypatch.setattr("sharedfiles.__main__.PROJECT_ROOT", Path.cwd())

        with pytest.raises(SystemExit) as exc_info:
            run([])

        assert exc_info.value.code == 0
        assert (layout_root / "ProductTasks" / "P2" / "T1" / "config.json").exists()
