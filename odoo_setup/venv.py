"""Virtual environment path helpers.

Helpers for resolving platform-specific paths inside a Python virtual
environment. These functions are side-effect free and return Path objects.
"""

from __future__ import annotations

import sys
from pathlib import Path


def get_venv_bin_dir(venv_path: Path) -> Path:
    """Return the platform-specific binary directory inside a virtualenv.

    Parameters
    ----------
    venv_path : Path
        Path to the root of the virtual environment directory.

    Returns
    -------
    Path
        Path to the binaries directory ("Scripts" on Windows, "bin" otherwise).

    Examples
    --------
    >>> from pathlib import Path
    >>> get_venv_bin_dir(Path('/tmp/venv')).as_posix()  # doctest: +SKIP
    '/tmp/venv/bin'
    """
    return venv_path / ("Scripts" if sys.platform == "win32" else "bin")


def get_venv_python_executable(venv_path: Path) -> Path:
    """Return the python executable path for the given virtualenv.

    Parameters
    ----------
    venv_path : Path
        Path to the virtual environment directory.

    Returns
    -------
    Path
        Path to the Python interpreter inside the virtualenv.
    """
    bin_dir = get_venv_bin_dir(venv_path)
    return bin_dir / ("python.exe" if sys.platform == "win32" else "python")


__all__ = ["get_venv_bin_dir", "get_venv_python_executable"]
