"""Virtual environment creation and dependency installation through uv.

The environment lives in ``<parent>/.venv`` and is pinned to the interpreter
version the selected Odoo release requires. Installing the Odoo manifest on
Windows commonly fails while building ``libsass`` from source; when the bulk
install fails, a prebuilt libsass wheel is downloaded and installed on its
own and the bulk install is run once more with ``--upgrade`` and
``PYTHONUTF8=1``. There is exactly one such fallback attempt.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote, urlsplit

from odoo_setup import config as _config
from odoo_setup.commands import run_command
from odoo_setup.exceptions import (
    DependencyInstallError,
    VenvCreationError,
    WheelDownloadError,
    WheelInstallError,
)
from odoo_setup.fetch import DOWNLOAD_ERRORS, download_file
from odoo_setup.i18n import _
from odoo_setup.plan import InstallationPlan
from odoo_setup.ui import ui_info, ui_status, ui_success, ui_warning
from odoo_setup.venv import get_venv_python_executable

logger = logging.getLogger(__name__)


def create_environment(plan: InstallationPlan) -> Path:
    r"""Create the pinned virtual environment with ``uv venv``.

    Parameters
    ----------
    plan : InstallationPlan
        The current installation plan. The command runs with
        ``plan.parent_dir`` as its working directory.

    Returns
    -------
    Path
        The environment directory.

    Raises
    ------
    VenvCreationError
        If uv exits nonzero.
    """
    ui_info(_("creating_venv").format(python=plan.python_version))
    code = run_command(
        [
            _config.UV_EXECUTABLE,
            "venv",
            "--python",
            plan.python_version,
            _config.VENV_SUBDIR,
        ],
        cwd=plan.parent_dir,
    )
    if code != 0:
        raise VenvCreationError(
            _("venv_failed").format(code=code),
            context={"return_code": code, "python": plan.python_version},
        )
    ui_success(_("venv_ready").format(path=plan.venv_dir))
    return plan.venv_dir


def pip_install_command(
    venv_python: Path, *args: str, upgrade: bool = False
) -> list[str]:
    """Return a ``uv pip install`` command targeting ``venv_python``."""
    cmd = [_config.UV_EXECUTABLE, "pip", "install", "--python", str(venv_python)]
    if upgrade:
        cmd.append("--upgrade")
    cmd.extend(args)
    return cmd


def wheel_filename(url: str) -> str:
    r"""Return the file name part of a wheel URL.

    Installers identify wheels by file name, so the download keeps it.

    Examples
    --------
    >>> wheel_filename("https://host/dl/libsass-0.23.0-cp38-abi3-win_amd64.whl?x=1")
    'libsass-0.23.0-cp38-abi3-win_amd64.whl'
    """
    return unquote(urlsplit(url).path.rsplit("/", 1)[-1])


def _install_fallback(
    plan: InstallationPlan, venv_python: Path, requirements: Path, wheel_url: str
) -> None:
    wheel_path = plan.parent_dir / wheel_filename(wheel_url)
    try:
        with ui_status(_("downloading_wheel").format(url=wheel_url)):
            download_file(wheel_url, wheel_path)
    except DOWNLOAD_ERRORS as error:
        raise WheelDownloadError(
            _("wheel_download_failed").format(url=wheel_url, error=error),
            context={"url": wheel_url},
        ) from error

    ui_info(_("installing_wheel").format(path=wheel_path))
    code = run_command(pip_install_command(venv_python, str(wheel_path)), cwd=plan.parent_dir)
    if code != 0:
        raise WheelInstallError(
            _("wheel_install_failed").format(path=wheel_path, code=code),
            context={"return_code": code, "wheel": str(wheel_path)},
        )

    ui_info(_("reinstalling_deps"))
    code = run_command(
        pip_install_command(venv_python, "-r", str(requirements), upgrade=True),
        cwd=plan.parent_dir,
        env_overrides=_config.FALLBACK_ENV_OVERRIDE,
    )
    if code != 0:
        raise DependencyInstallError(
            _("deps_install_failed").format(code=code),
            context={"return_code": code, "requirements": str(requirements)},
        )


def install_dependencies(
    plan: InstallationPlan, requirements: Path, wheel_url: str
) -> bool:
    r"""Install the dependency manifest into the plan's environment.

    Parameters
    ----------
    plan : InstallationPlan
        The current installation plan.
    requirements : Path
        The ``requirements.txt`` to install.
    wheel_url : str
        URL of the prebuilt libsass wheel used by the fallback.

    Returns
    -------
    bool
        True when the fallback path was needed, False when the first install
        succeeded.

    Raises
    ------
    WheelDownloadError
        If the fallback wheel cannot be downloaded.
    WheelInstallError
        If installing the fallback wheel fails.
    DependencyInstallError
        If the install still fails after the fallback.

    Notes
    -----
    The ``PYTHONUTF8`` override is handed to the re-run child process only;
    the installer's own environment never changes.
    """
    venv_python = get_venv_python_executable(plan.venv_dir)
    ui_info(_("installing_deps").format(path=requirements))
    code = run_command(
        pip_install_command(venv_python, "-r", str(requirements)), cwd=plan.parent_dir
    )
    if code == 0:
        ui_success(_("deps_installed"))
        return False

    ui_warning(_("deps_fallback").format(code=code))
    logger.warning(f"Bulk install failed with {code}; running libsass fallback")
    _install_fallback(plan, venv_python, requirements, wheel_url)
    ui_success(_("deps_installed"))
    return True


__all__ = [
    "create_environment",
    "install_dependencies",
    "pip_install_command",
    "wheel_filename",
]
