"""Filesystem utilities to validate and safely remove installer-owned paths.

Re-cloning an existing source tree deletes it first. The removal only goes
ahead for a path strictly inside the installation's parent directory, so a
miscomputed plan can never delete the parent, the invocation directory or
anything outside them.

Functions
---------
- ``create_safe_path``: Validate and stamp a path as safe for removal.
- ``safe_rmtree``: Remove a validated directory tree.
- ``ensure_dir``: Create a directory if absent and report whether it was created.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Any, Callable, NewType

logger = logging.getLogger(__name__)

# NewType used as a static "seal" to indicate the path is validated for removal.
_ValidatedPath = NewType("_ValidatedPath", Path)


def create_safe_path(path_to_validate: Path, allowed_root: Path) -> _ValidatedPath:
    r"""Validate and stamp a Path as safe for destructive operations.

    Parameters
    ----------
    path_to_validate : Path
        The directory path to be validated for safe removal.
    allowed_root : Path
        Directory the path must lie strictly inside.

    Returns
    -------
    _ValidatedPath
        The resolved path, stamped for use by removal helpers.

    Raises
    ------
    PermissionError
        If the path equals ``allowed_root`` or lies outside it.

    Examples
    --------
    >>> from pathlib import Path
    >>> create_safe_path(Path("/work/odoo-18"), Path("/work/odoo-18"))  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    PermissionError: SECURITY STOP: Attempt to delete the installation root was blocked.
    """
    root = Path(allowed_root).resolve()
    target_path = Path(path_to_validate).resolve()

    if target_path == root:
        raise PermissionError(
            "SECURITY STOP: Attempt to delete the installation root was blocked."
        )
    if not target_path.is_relative_to(root):
        raise PermissionError(
            f"SECURITY STOP: Path '{target_path}' is outside '{root}'."
        )
    return _ValidatedPath(target_path)


def _clear_readonly(func: Callable[..., Any], path: str, _exc: Any) -> None:
    # git marks pack files read-only on Windows; rmtree cannot unlink them as-is.
    os.chmod(path, os.stat(path).st_mode | stat.S_IWRITE)
    func(path)


def safe_rmtree(safe_path: _ValidatedPath) -> None:
    r"""Remove a directory tree previously validated by ``create_safe_path``.

    Parameters
    ----------
    safe_path : _ValidatedPath
        The stamped target directory.

    Notes
    -----
    - Logs at WARNING before and INFO after removal.
    - If the path does not exist, the function is a no-op.
    """
    target = Path(safe_path)
    if target.exists():
        logger.warning(f"Performing safe rmtree on: {target}")
        if sys.version_info >= (3, 12):
            shutil.rmtree(target, onexc=_clear_readonly)
        else:
            shutil.rmtree(target, onerror=_clear_readonly)
        logger.info(f"Removed directory: {target}")
    else:
        logger.info(f"Path '{target}' does not exist; nothing to remove.")


def ensure_dir(path: Path) -> bool:
    """Create ``path`` (and parents) if absent; return True when it was created."""
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    logger.info(f"Created directory: {path}")
    return True


__all__ = ["create_safe_path", "ensure_dir", "safe_rmtree"]
