"""Blocking subprocess runner for the installer's external tools.

Every external step (git, uv, the uv bootstrap script) goes through
``run_command``. Commands inherit the console so their own progress output
stays visible, and are awaited to completion with no timeout. The caller
decides what a nonzero exit code means.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Mapping, Sequence

from odoo_setup.exceptions import MissingExecutableError

logger = logging.getLogger(__name__)


def find_executable(name: str) -> str | None:
    """Return the resolved path of ``name`` on ``PATH``, or ``None``."""
    return shutil.which(name)


def run_command(
    cmd: Sequence[str],
    cwd: Path | None = None,
    env_overrides: Mapping[str, str] | None = None,
) -> int:
    r"""Run an external command and wait for it to finish.

    Parameters
    ----------
    cmd : Sequence[str]
        Program and arguments. No shell is involved.
    cwd : Path | None, optional
        Working directory for the child process. Defaults to the current one.
    env_overrides : Mapping[str, str] | None, optional
        Variables added to a copy of ``os.environ`` for this child only. The
        installer's own environment is left untouched.

    Returns
    -------
    int
        The child's exit code.

    Raises
    ------
    MissingExecutableError
        If the program itself cannot be started.
    NotADirectoryError
        If ``cwd`` is given but is not an existing directory.

    Examples
    --------
    >>> run_command(["git", "--version"])  # doctest: +SKIP
    0
    """
    argv = [str(part) for part in cmd]
    env = None
    if env_overrides:
        env = os.environ.copy()
        env.update(env_overrides)
    if cwd is not None and not Path(cwd).is_dir():
        raise NotADirectoryError(
            f"Working directory '{cwd}' does not exist; cannot run '{argv[0]}'."
        )
    logger.info(f"Running: {' '.join(argv)} (cwd={cwd or Path.cwd()})")
    try:
        result = subprocess.run(argv, cwd=cwd, env=env, check=False)
    except FileNotFoundError as error:
        raise MissingExecutableError(
            f"Could not start '{argv[0]}': {error}", context={"command": argv}
        ) from error
    if result.returncode != 0:
        logger.error(f"Command failed (Return code: {result.returncode}): {' '.join(argv)}")
    return result.returncode


__all__ = ["find_executable", "run_command"]
