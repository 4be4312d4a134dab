"""Prerequisite checks for the external tools the installer drives.

``git`` must already be installed. ``uv`` may be bootstrapped on request with
its official install script, after which the installer has to be restarted:
the new executable is added to ``PATH`` for new shells only.
"""

from __future__ import annotations

import logging
import sys

from odoo_setup import config as _config
from odoo_setup.commands import find_executable, run_command
from odoo_setup.exceptions import (
    InstallDeclinedError,
    MissingExecutableError,
    RestartRequiredError,
    ToolInstallError,
)
from odoo_setup.i18n import _
from odoo_setup.ui import ask_confirm, ui_info, ui_success, ui_warning

logger = logging.getLogger(__name__)


def uv_install_command() -> list[str]:
    """Return the uv bootstrap command for the running platform."""
    if sys.platform == "win32":
        return list(_config.UV_INSTALL_COMMAND_WINDOWS)
    return list(_config.UV_INSTALL_COMMAND_POSIX)


def check_prerequisites() -> None:
    r"""Verify that ``git`` and ``uv`` resolve on ``PATH``.

    Raises
    ------
    MissingExecutableError
        If ``git`` is missing. The message tells the user where to get it.
    InstallDeclinedError
        If ``uv`` is missing and the user declines installing it.
    ToolInstallError
        If the uv bootstrap command exits nonzero.
    RestartRequiredError
        After uv was installed; the current process cannot detect it.

    Notes
    -----
    ``git`` is checked first, so a machine lacking both tools is told about
    git without being offered a uv install it cannot use yet.
    """
    git_path = find_executable(_config.GIT_EXECUTABLE)
    if git_path is None:
        raise MissingExecutableError(
            _("git_missing").format(url=_config.GIT_DOWNLOAD_URL),
            context={"executable": _config.GIT_EXECUTABLE},
        )
    ui_success(_("tool_found").format(tool="git", path=git_path))

    uv_path = find_executable(_config.UV_EXECUTABLE)
    if uv_path is not None:
        ui_success(_("tool_found").format(tool="uv", path=uv_path))
        return

    ui_warning(_("uv_missing"))
    if not ask_confirm(_("uv_install_prompt"), default_yes=False):
        raise InstallDeclinedError(
            _("uv_install_declined"), context={"executable": _config.UV_EXECUTABLE}
        )
    ui_info(_("uv_installing"))
    code = run_command(uv_install_command())
    if code != 0:
        raise ToolInstallError(
            _("uv_install_failed").format(code=code), context={"return_code": code}
        )
    logger.info("uv installed; a restart is required before it is on PATH")
    raise RestartRequiredError(_("uv_restart_required"))


__all__ = ["check_prerequisites", "uv_install_command"]
