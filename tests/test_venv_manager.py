"""Tests for ``odoo_setup.venv_manager``: environment creation and the libsass fallback."""

from pathlib import Path

import aiohttp
import pytest

from conftest import is_bulk_install, is_venv, is_wheel_install
from odoo_setup import venv_manager
from odoo_setup.exceptions import (
    DependencyInstallError,
    VenvCreationError,
    WheelDownloadError,
    WheelInstallError,
)
from odoo_setup.plan import build_plan
from odoo_setup.venv import get_venv_python_executable

WHEEL_URL = "https://example.com/dl/libsass-0.23.0-cp38-abi3-win_amd64.whl"


@pytest.fixture
def plan(tmp_path: Path):
    p = build_plan("18.0", "3.12", tmp_path)
    p.parent_dir.mkdir()
    return p


@pytest.fixture
def downloads(monkeypatch):
    """Record fallback wheel downloads and create the file like the real fetcher."""
    calls = []

    def _download(url, dest):
        calls.append((url, dest))
        dest.write_bytes(b"wheel")
        return dest

    monkeypatch.setattr(venv_manager, "download_file", _download)
    return calls


def test_create_environment_pins_python(plan, runner):
    assert venv_manager.create_environment(plan) == plan.venv_dir
    (call,) = runner.matching(is_venv)
    assert call.argv == ["uv", "venv", "--python", "3.12", ".venv"]
    assert call.cwd == plan.parent_dir


def test_create_environment_failure(plan, runner):
    runner.on(is_venv, results=(2,))
    with pytest.raises(VenvCreationError) as info:
        venv_manager.create_environment(plan)
    assert info.value.context == {"return_code": 2, "python": "3.12"}


def test_install_without_fallback(plan, runner, downloads):
    req = plan.src_dir / "requirements.txt"
    assert venv_manager.install_dependencies(plan, req, WHEEL_URL) is False
    (call,) = runner.calls
    assert call.argv == [
        "uv", "pip", "install", "--python",
        str(get_venv_python_executable(plan.venv_dir)), "-r", str(req),
    ]
    assert call.env_overrides == {}
    assert downloads == []


def test_fallback_runs_exactly_once(plan, runner, downloads):
    runner.on(is_bulk_install, results=(1, 0))
    req = plan.src_dir / "requirements.txt"
    assert venv_manager.install_dependencies(plan, req, WHEEL_URL) is True

    wheel = plan.parent_dir / "libsass-0.23.0-cp38-abi3-win_amd64.whl"
    assert downloads == [(WHEEL_URL, wheel)]
    assert len(runner.matching(is_wheel_install)) == 1
    bulk = runner.matching(is_bulk_install)
    assert len(bulk) == 2
    assert "--upgrade" not in bulk[0].argv
    assert "--upgrade" in bulk[1].argv
    assert bulk[1].env_overrides == {"PYTHONUTF8": "1"}
    # download, standalone install, re-run: in that order
    assert [c.argv[-1].endswith(".whl") for c in runner.calls] == [False, True, False]


def test_fallback_does_not_touch_process_environment(plan, runner, downloads, monkeypatch):
    monkeypatch.delenv("PYTHONUTF8", raising=False)
    runner.on(is_bulk_install, results=(1, 0))
    venv_manager.install_dependencies(plan, plan.src_dir / "requirements.txt", WHEEL_URL)
    import os

    assert "PYTHONUTF8" not in os.environ


def test_second_failure_is_fatal(plan, runner, downloads):
    runner.on(is_bulk_install, results=(1, 3))
    with pytest.raises(DependencyInstallError) as info:
        venv_manager.install_dependencies(plan, plan.src_dir / "requirements.txt", WHEEL_URL)
    assert info.value.context["return_code"] == 3
    assert len(runner.matching(is_bulk_install)) == 2
    assert len(downloads) == 1


def test_wheel_download_failure(plan, runner, monkeypatch):
    runner.on(is_bulk_install, results=(1,))

    def _fail(url, dest):
        raise aiohttp.ClientConnectionError("offline")

    monkeypatch.setattr(venv_manager, "download_file", _fail)
    with pytest.raises(WheelDownloadError):
        venv_manager.install_dependencies(plan, plan.src_dir / "requirements.txt", WHEEL_URL)
    assert runner.matching(is_wheel_install) == []
    assert len(runner.matching(is_bulk_install)) == 1


def test_wheel_install_failure(plan, runner, downloads):
    runner.on(is_bulk_install, results=(1,))
    runner.on(is_wheel_install, results=(1,))
    with pytest.raises(WheelInstallError):
        venv_manager.install_dependencies(plan, plan.src_dir / "requirements.txt", WHEEL_URL)
    assert len(runner.matching(is_bulk_install)) == 1


def test_wheel_filename_strips_query():
    assert venv_manager.wheel_filename(WHEEL_URL + "?raw=1") == "libsass-0.23.0-cp38-abi3-win_amd64.whl"
