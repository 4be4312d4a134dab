"""Tests for ``odoo_setup.source``."""

from pathlib import Path

import pytest

from conftest import is_clone
from odoo_setup import config, source
from odoo_setup.config import GIT_EXECUTABLE
from odoo_setup.exceptions import CloneError, MissingRequirementsError
from odoo_setup.plan import build_plan


@pytest.fixture
def plan(tmp_path: Path):
    p = build_plan("18.0", "3.12", tmp_path)
    p.parent_dir.mkdir()
    return p


def test_prepare_without_existing_clone(plan, answers):
    prompts = answers()
    assert source.prepare_source_dir(plan) is True
    assert prompts == []


def test_prepare_keeps_existing_clone_when_declined(plan, answers):
    plan.src_dir.mkdir()
    keep = plan.src_dir / "local_change.py"
    keep.write_text("x = 1\n", encoding="utf-8")
    answers("n")
    assert source.prepare_source_dir(plan) is False
    assert keep.read_text(encoding="utf-8") == "x = 1\n"


def test_prepare_default_answer_keeps_clone(plan, answers):
    plan.src_dir.mkdir()
    answers("")
    assert source.prepare_source_dir(plan) is False
    assert plan.src_dir.is_dir()


def test_prepare_removes_existing_clone_when_confirmed(plan, answers):
    (plan.src_dir / "addons").mkdir(parents=True)
    answers("y")
    assert source.prepare_source_dir(plan) is True
    assert not plan.src_dir.exists()
    assert plan.parent_dir.is_dir()


def test_clone_command_is_single_branch():
    cmd = source.clone_command("https://example.com/odoo.git", "17.0", Path("/w/odoo-src"))
    assert cmd[:2] == [GIT_EXECUTABLE, "clone"]
    assert cmd[cmd.index("--branch") + 1] == "17.0"
    assert "--single-branch" in cmd
    assert cmd[-2:] == ["https://example.com/odoo.git", str(Path("/w/odoo-src"))]


def test_clone_source_runs_in_parent_dir(plan, runner):
    source.clone_source(plan, "https://example.com/odoo.git")
    (call,) = runner.matching(is_clone)
    assert call.cwd == plan.parent_dir
    assert plan.src_dir.is_dir()


def test_clone_failure_raises(plan, runner):
    runner.on(is_clone, results=(128,), first=True)
    with pytest.raises(CloneError) as info:
        source.clone_source(plan, "https://example.com/odoo.git")
    assert info.value.context["return_code"] == 128


def test_ensure_requirements(tmp_path: Path):
    req = tmp_path / "requirements.txt"
    with pytest.raises(MissingRequirementsError):
        source.ensure_requirements(req)
    req.write_text("lxml\n", encoding="utf-8")
    assert source.ensure_requirements(req) == req


def test_clone_command_uses_configured_git(monkeypatch):
    monkeypatch.setattr(config, "GIT_EXECUTABLE", "git.exe")
    cmd = source.clone_command("https://example.com/odoo.git", "18.0", Path("/w/odoo-src"))
    assert cmd[0] == "git.exe"
