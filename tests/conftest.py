"""Pytest configuration for the installer test-suite.

- Ensures the project root is available on ``sys.path`` for imports.
- Switches the console UI to plain ``print`` output and ``input()`` prompts.
- Provides ``FakeRunner``, a recording stand-in for ``run_command`` so no test
  ever starts git or uv.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from odoo_setup import console_helpers as ch  # noqa: E402
from odoo_setup import i18n  # noqa: E402


@dataclass
class Call:
    """One recorded command invocation."""

    argv: list[str]
    cwd: Path | None
    env_overrides: dict[str, str] = field(default_factory=dict)


class FakeRunner:
    """Recording replacement for ``odoo_setup.commands.run_command``.

    Handlers are matched in registration order. ``results`` is consumed one
    value per matching call; the last value repeats once the list runs out.
    """

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self._handlers: list[tuple[Callable[[list[str]], bool], list[int], Callable | None]] = []

    def on(self, predicate, results=(0,), effect=None, first=False) -> "FakeRunner":
        handler = (predicate, list(results), effect)
        if first:
            self._handlers.insert(0, handler)
        else:
            self._handlers.append(handler)
        return self

    def __call__(self, cmd, cwd=None, env_overrides=None) -> int:
        argv = [str(part) for part in cmd]
        self.calls.append(Call(argv, cwd, dict(env_overrides or {})))
        for predicate, results, effect in self._handlers:
            if predicate(argv):
                code = results.pop(0) if len(results) > 1 else results[0]
                if effect is not None and code == 0:
                    effect(argv, cwd)
                return code
        return 0

    def matching(self, predicate) -> list[Call]:
        return [c for c in self.calls if predicate(c.argv)]


def is_clone(argv: list[str]) -> bool:
    return argv[:2] == ["git", "clone"]


def is_venv(argv: list[str]) -> bool:
    return argv[:2] == ["uv", "venv"]


def is_bulk_install(argv: list[str]) -> bool:
    return argv[:3] == ["uv", "pip", "install"] and "-r" in argv


def is_wheel_install(argv: list[str]) -> bool:
    return argv[:3] == ["uv", "pip", "install"] and argv[-1].endswith(".whl")


def fake_clone_effect(argv: list[str], cwd) -> None:
    target = Path(argv[-1])
    target.mkdir(parents=True)
    (target / "requirements.txt").write_text("psycopg2\nlibsass\n", encoding="utf-8")
    (target / "odoo-bin").write_text("", encoding="utf-8")


@pytest.fixture(autouse=True)
def plain_ui(monkeypatch):
    """Force plain console output and ``input()`` based prompts in English."""
    monkeypatch.setattr(ch, "_RICH_CONSOLE", None)
    monkeypatch.setattr(ch, "_HAS_Q", False)
    monkeypatch.setattr(i18n, "LANG", "en")


@pytest.fixture
def answers(monkeypatch):
    """Return a function that scripts the answers read by ``input()``."""

    def _set(*values: str) -> list[str]:
        prompts: list[str] = []
        queue = list(values)

        def _input(prompt: str = "") -> str:
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", _input)
        return prompts

    return _set


@pytest.fixture
def runner(monkeypatch) -> FakeRunner:
    """Install a ``FakeRunner`` in every module that runs external commands."""
    fake = FakeRunner()
    fake.on(is_clone, effect=fake_clone_effect)
    for module in ("prereqs", "source", "venv_manager"):
        monkeypatch.setattr(f"odoo_setup.{module}.run_command", fake)
    return fake


@pytest.fixture
def tools_present(monkeypatch):
    """Pretend git and uv are both on PATH."""
    monkeypatch.setattr(
        "odoo_setup.prereqs.find_executable", lambda name: f"/usr/bin/{name}"
    )
