"""Unit tests for filesystem helpers in ``odoo_setup.fs_utils``."""

import os
import stat
import sys
from pathlib import Path

import pytest

from odoo_setup import fs_utils


def test_create_safe_path_denies_root(tmp_path: Path):
    with pytest.raises(PermissionError):
        fs_utils.create_safe_path(tmp_path, tmp_path)


def test_create_safe_path_denies_outside(tmp_path: Path):
    root = tmp_path / "odoo-18"
    root.mkdir()
    with pytest.raises(PermissionError):
        fs_utils.create_safe_path(tmp_path / "elsewhere", root)
    with pytest.raises(PermissionError):
        fs_utils.create_safe_path(root / ".." / "escape", root)


def test_create_safe_path_and_safe_rmtree(tmp_path: Path):
    target = tmp_path / "odoo-src"
    (target / "nested").mkdir(parents=True)
    (target / "nested" / "file.txt").write_text("data", encoding="utf-8")
    validated = fs_utils.create_safe_path(target, tmp_path)
    assert isinstance(validated, Path)
    fs_utils.safe_rmtree(validated)
    assert not target.exists()
    assert tmp_path.is_dir()


def test_safe_rmtree_removes_read_only_files(tmp_path: Path):
    target = tmp_path / "odoo-src"
    target.mkdir()
    pack = target / "pack.idx"
    pack.write_text("x", encoding="utf-8")
    pack.chmod(0o444)
    fs_utils.safe_rmtree(fs_utils.create_safe_path(target, tmp_path))
    assert not target.exists()


def test_safe_rmtree_missing_path_is_noop(tmp_path: Path):
    fs_utils.safe_rmtree(fs_utils.create_safe_path(tmp_path / "absent", tmp_path))


def test_ensure_dir(tmp_path: Path):
    target = tmp_path / "a" / "b"
    assert fs_utils.ensure_dir(target) is True
    assert fs_utils.ensure_dir(target) is False
    assert target.is_dir()


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_clear_readonly_keeps_existing_mode_bits(tmp_path: Path):
    pack = tmp_path / "pack.idx"
    pack.write_text("x", encoding="utf-8")
    pack.chmod(0o444)
    seen = []
    fs_utils._clear_readonly(lambda p: seen.append(stat.S_IMODE(os.stat(p).st_mode)), str(pack), None)
    assert seen == [0o644]
