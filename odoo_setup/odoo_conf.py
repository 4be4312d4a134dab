"""Rendering and writing of the starting ``odoo.conf``.

The file is a fixed ``[options]`` template; only ports, paths and the
credentials from ``Settings`` vary between installations. Rendering is pure
and writing is a separate step so the text can be checked without touching
the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path

from odoo_setup import config as _config
from odoo_setup.config import Settings
from odoo_setup.fs_utils import ensure_dir
from odoo_setup.plan import InstallationPlan

logger = logging.getLogger(__name__)

ODOO_CONF_TEMPLATE: str = """[options]
admin_passwd = {admin_passwd}
http_port = {http_port}
xmlrpc_port = {xmlrpc_port}
longpolling_port = {longpolling_port}
db_host = {db_host}
db_port = {db_port}
db_user = {db_user}
db_password = {db_password}
db_maxconn = {db_maxconn}
data_dir = {data_dir}
addons_path = {addons_path}
log_level = {log_level}
list_db = True
proxy_mode = False
debug_mode = True
without_demo = all
workers = 0
server_wide_modules = {server_wide_modules}
"""


def render_odoo_conf(plan: InstallationPlan, settings: Settings) -> str:
    r"""Render the configuration text for an installation.

    Parameters
    ----------
    plan : InstallationPlan
        Supplies ports, the data directory and the addons path.
    settings : Settings
        Supplies the master password and database connection values.

    Returns
    -------
    str
        The complete file content, ending with a newline.

    Examples
    --------
    >>> from pathlib import Path
    >>> from odoo_setup.plan import build_plan
    >>> text = render_odoo_conf(build_plan("18.0", "3.12", Path("/w")), Settings())
    >>> "http_port = 8018" in text and "longpolling_port = 8072" in text
    True
    """
    return ODOO_CONF_TEMPLATE.format(
        admin_passwd=settings.admin_passwd,
        http_port=plan.http_port,
        xmlrpc_port=plan.http_port,
        longpolling_port=plan.longpolling_port,
        db_host=settings.db_host,
        db_port=settings.db_port,
        db_user=settings.db_user,
        db_password=settings.db_password,
        db_maxconn=_config.DEFAULT_DB_MAXCONN,
        data_dir=plan.data_dir,
        addons_path=plan.addons_path,
        log_level=_config.DEFAULT_ODOO_LOG_LEVEL,
        server_wide_modules=_config.DEFAULT_SERVER_WIDE_MODULES,
    )


def write_odoo_conf(plan: InstallationPlan, settings: Settings) -> Path:
    """Create the data and custom-addons directories, then write ``plan.conf_file``."""
    ensure_dir(plan.data_dir)
    ensure_dir(plan.custom_addons_dir)
    plan.conf_file.write_text(render_odoo_conf(plan, settings), encoding="utf-8")
    logger.info(f"Wrote {plan.conf_file}")
    return plan.conf_file


__all__ = ["ODOO_CONF_TEMPLATE", "render_odoo_conf", "write_odoo_conf"]
