"""Installer orchestrator: the ordered installation flow.

The flow is linear::

    Start -> PrereqCheck -> VersionSelect -> DirPlan -> {Clone | Prefetch}
          -> EnvCreate -> DepsInstall -> [Fallback] -> ConfGenerate
          -> {Clone if deferred} -> Summary -> End

Each step raises an ``AppError`` subclass on failure. ``run_installer`` is
the single place those errors are caught: the message is printed, the error
is logged with its context and the matching exit status is returned. The
working directory is restored to the invocation directory on every path out
of the flow.

Examples
--------
>>> from odoo_setup.installer import run_installer
>>> run_installer(strategy="clone")  # doctest: +SKIP
0
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from odoo_setup import config as _config
from odoo_setup.catalog import VERSION_CATALOG, select_version, sorted_versions
from odoo_setup.config import Settings
from odoo_setup.exceptions import AppError, MissingRequirementsError
from odoo_setup.fetch import DOWNLOAD_ERRORS, download_file, raw_file_url
from odoo_setup.fs_utils import ensure_dir
from odoo_setup.i18n import _
from odoo_setup.odoo_conf import write_odoo_conf
from odoo_setup.plan import InstallationPlan, build_plan
from odoo_setup.prereqs import check_prerequisites
from odoo_setup.source import clone_source, ensure_requirements, prepare_source_dir
from odoo_setup.ui import (
    ask_text,
    ui_error,
    ui_header,
    ui_info,
    ui_rule,
    ui_status,
    ui_success,
    ui_table,
    ui_warning,
)
from odoo_setup.venv import get_venv_python_executable
from odoo_setup.venv_manager import create_environment, install_dependencies

logger = logging.getLogger(__name__)


def choose_version(catalog: Mapping[str, str] = VERSION_CATALOG) -> tuple[str, str]:
    r"""Show the catalog newest first and read one numeric choice.

    Parameters
    ----------
    catalog : Mapping[str, str], optional
        Version to interpreter-version mapping.

    Returns
    -------
    tuple[str, str]
        The selected ``(version, python_version)``.

    Raises
    ------
    InvalidSelectionError
        For non-numeric or out-of-range input. The user is not asked again.
    """
    entries = sorted_versions(catalog)
    rows = [
        [str(index), version, python]
        for index, (version, python) in enumerate(entries, start=1)
    ]
    ui_table(
        _("versions_title"),
        [_("col_choice"), _("col_version"), _("col_python")],
        rows,
    )
    choice = ask_text(_("version_prompt").format(count=len(entries)))
    version, python = select_version(choice, catalog)
    ui_success(_("version_selected").format(version=version, python=python))
    return version, python


def prepare_directories(plan: InstallationPlan) -> bool:
    """Create the parent directory and settle an existing clone; return whether to clone."""
    if ensure_dir(plan.parent_dir):
        ui_info(_("dir_created").format(path=plan.parent_dir))
    else:
        ui_info(_("dir_exists").format(path=plan.parent_dir))
    return prepare_source_dir(plan)


def prefetch_requirements(plan: InstallationPlan, settings: Settings) -> Path:
    r"""Download the branch's ``requirements.txt`` ahead of the clone.

    Raises
    ------
    MissingRequirementsError
        If the download fails; there is no fallback for a missing manifest.
    """
    url = raw_file_url(settings.raw_base_url, plan.version, _config.REQUIREMENTS_FILENAME)
    try:
        with ui_status(_("prefetching").format(version=plan.version)):
            download_file(url, plan.requirements_file)
    except DOWNLOAD_ERRORS as error:
        raise MissingRequirementsError(
            _("prefetch_failed").format(url=url, error=error), context={"url": url}
        ) from error
    ui_success(_("prefetch_done").format(path=plan.requirements_file))
    return plan.requirements_file


def launch_command(plan: InstallationPlan) -> str:
    r"""Return the command line that starts Odoo for this installation.

    Examples
    --------
    >>> from pathlib import Path
    >>> from odoo_setup.plan import build_plan
    >>> cmd = launch_command(build_plan("18.0", "3.12", Path("/w")))
    >>> cmd.endswith("odoo-bin -c /w/odoo-18/odoo.conf")  # doctest: +SKIP
    True
    """
    python = get_venv_python_executable(plan.venv_dir)
    odoo_bin = plan.src_dir / "odoo-bin"
    return f'"{python}" "{odoo_bin}" -c "{plan.conf_file}"'


def print_summary(plan: InstallationPlan) -> None:
    """Print the resulting paths, ports and the launch command."""
    ui_rule(_("step_summary"))
    rows = [
        [_("summary_parent"), str(plan.parent_dir)],
        [_("summary_source"), str(plan.src_dir)],
        [_("summary_venv"), str(plan.venv_dir)],
        [_("summary_conf"), str(plan.conf_file)],
        [_("summary_data"), str(plan.data_dir)],
        [_("summary_addons"), plan.addons_path],
        [_("summary_http_port"), plan.http_port],
        [_("summary_longpolling_port"), plan.longpolling_port],
    ]
    ui_table(f"Odoo {plan.version}", ["", ""], rows)
    ui_info(_("summary_launch"))
    ui_info(launch_command(plan))
    ui_success(_("done"))


def install(strategy: str, base_dir: Path, settings: Settings) -> InstallationPlan:
    r"""Run every installation step in order.

    Parameters
    ----------
    strategy : str
        ``"clone"`` clones before creating the environment; ``"prefetch"``
        downloads only the manifest first and clones after the config is
        written. Both end in the same installation.
    base_dir : Path
        Invocation directory; the installation goes to ``base_dir/odoo-<major>``.
    settings : Settings
        URLs and credentials.

    Returns
    -------
    InstallationPlan
        The plan that was carried out.

    Raises
    ------
    AppError
        From whichever step fails. No step is retried except the single
        dependency-install fallback.

    Notes
    -----
    Changes the process working directory to the parent directory once it
    exists; the caller restores it.
    """
    ui_rule(_("step_prereqs"))
    check_prerequisites()

    ui_rule(_("step_version"))
    version, python_version = choose_version()
    plan = build_plan(version, python_version, base_dir, strategy)
    logger.info(f"Plan: {plan}")

    ui_rule(_("step_dirs"))
    need_clone = prepare_directories(plan)
    os.chdir(plan.parent_dir)

    deferred_clone = plan.strategy == _config.STRATEGY_PREFETCH
    if deferred_clone:
        ui_rule(_("step_prefetch"))
        requirements = prefetch_requirements(plan, settings)
    else:
        ui_rule(_("step_source"))
        if need_clone:
            clone_source(plan, settings.repo_url)
        requirements = ensure_requirements(plan.requirements_file)

    ui_rule(_("step_venv"))
    create_environment(plan)

    ui_rule(_("step_deps"))
    install_dependencies(plan, requirements, settings.libsass_wheel_url)

    ui_rule(_("step_conf"))
    conf = write_odoo_conf(plan, settings)
    ui_success(_("conf_written").format(path=conf))

    if deferred_clone and need_clone:
        ui_rule(_("step_source"))
        clone_source(plan, settings.repo_url)

    print_summary(plan)
    return plan


def run_installer(
    strategy: str = _config.STRATEGY_CLONE,
    base_dir: Path | None = None,
    settings: Settings | None = None,
) -> int:
    r"""Run the installer and translate its outcome into an exit status.

    Parameters
    ----------
    strategy : str, optional
        One of ``config.STRATEGIES``.
    base_dir : Path | None, optional
        Invocation directory; defaults to the current working directory.
    settings : Settings | None, optional
        Defaults to ``Settings.load(base_dir)``.

    Returns
    -------
    int
        0 on success or a user-declined early exit, 1 on any failure or
        Ctrl-C.

    Examples
    --------
    >>> code = run_installer()  # doctest: +SKIP
    """
    start_dir = Path.cwd()
    root = Path(base_dir) if base_dir is not None else start_dir
    ui_header(_("welcome"))
    try:
        install(strategy, root, settings or Settings.load(root))
        return 0
    except AppError as error:
        if error.exit_code == 0:
            ui_warning(error.message)
            logger.info(f"Early exit: {error.to_dict()}")
        else:
            ui_error(error.message)
            logger.error(f"Installation failed: {error.to_dict()}")
        return error.exit_code
    except OSError as error:
        ui_error(_("unexpected_error").format(error=error))
        logger.error(f"Filesystem operation failed: {error}")
        return 1
    except KeyboardInterrupt:
        ui_error(_("cancelled"))
        return 1
    finally:
        os.chdir(start_dir)


__all__ = [
    "choose_version",
    "install",
    "launch_command",
    "prefetch_requirements",
    "prepare_directories",
    "print_summary",
    "run_installer",
]
