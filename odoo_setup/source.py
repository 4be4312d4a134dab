"""Odoo source tree handling: existing-clone decision and git clone.

Functions
---------
- ``prepare_source_dir``: Ask whether an existing clone is replaced or kept.
- ``clone_source``: Shallow, single-branch clone of the selected version.
- ``ensure_requirements``: Check the dependency manifest is present.
"""

from __future__ import annotations

import logging
from pathlib import Path

from odoo_setup import config as _config
from odoo_setup.commands import run_command
from odoo_setup.exceptions import CloneError, MissingRequirementsError
from odoo_setup.fs_utils import create_safe_path, safe_rmtree
from odoo_setup.i18n import _
from odoo_setup.plan import InstallationPlan
from odoo_setup.ui import ask_confirm, ui_info, ui_success

logger = logging.getLogger(__name__)


def prepare_source_dir(plan: InstallationPlan) -> bool:
    r"""Decide whether the source tree must be cloned.

    When ``plan.src_dir`` exists the user chooses between deleting it and
    cloning again, or keeping it untouched.

    Parameters
    ----------
    plan : InstallationPlan
        The current installation plan.

    Returns
    -------
    bool
        True when a clone is needed (no existing tree, or it was removed);
        False when the existing tree is kept and the clone is skipped.

    Raises
    ------
    PermissionError
        If the source directory is not strictly inside the parent directory.
    """
    if not plan.src_dir.exists():
        return True
    if not ask_confirm(
        _("clone_exists_prompt").format(path=plan.src_dir), default_yes=False
    ):
        logger.info(f"Keeping existing source tree: {plan.src_dir}")
        ui_info(_("clone_kept").format(path=plan.src_dir))
        return False
    safe_rmtree(create_safe_path(plan.src_dir, plan.parent_dir))
    ui_info(_("clone_removed").format(path=plan.src_dir))
    return True


def clone_command(repo_url: str, version: str, target: Path) -> list[str]:
    """Return the git command cloning only ``version`` of ``repo_url`` into ``target``."""
    return [
        _config.GIT_EXECUTABLE,
        "clone",
        "--branch",
        version,
        "--single-branch",
        "--depth",
        "1",
        repo_url,
        str(target),
    ]


def clone_source(plan: InstallationPlan, repo_url: str) -> None:
    r"""Clone the selected branch into ``plan.src_dir``.

    Parameters
    ----------
    plan : InstallationPlan
        The current installation plan; the clone runs from its parent dir.
    repo_url : str
        Git URL of the Odoo repository.

    Raises
    ------
    CloneError
        If git exits nonzero.
    """
    ui_info(_("cloning").format(version=plan.version))
    code = run_command(
        clone_command(repo_url, plan.version, plan.src_dir), cwd=plan.parent_dir
    )
    if code != 0:
        raise CloneError(
            _("clone_failed").format(code=code),
            context={"return_code": code, "version": plan.version, "repo": repo_url},
        )
    ui_success(_("clone_done").format(path=plan.src_dir))


def ensure_requirements(path: Path) -> Path:
    """Return ``path`` if the dependency manifest exists; raise ``MissingRequirementsError`` otherwise."""
    if not path.is_file():
        raise MissingRequirementsError(
            _("requirements_missing").format(path=path), context={"path": str(path)}
        )
    return path


__all__ = ["clone_command", "clone_source", "ensure_requirements", "prepare_source_dir"]
