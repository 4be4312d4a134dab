"""Global configuration constants for the installer.

Defines URLs, directory and file names, ports and the default values written
to ``odoo.conf``. ``Settings`` layers optional ``.env`` overrides on top of
these constants.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# External executables
GIT_EXECUTABLE: str = "git"
UV_EXECUTABLE: str = "uv"
GIT_DOWNLOAD_URL: str = "https://git-scm.com/download/win"
UV_INSTALL_COMMAND_WINDOWS: list[str] = [
    "powershell",
    "-ExecutionPolicy",
    "ByPass",
    "-c",
    "irm https://astral.sh/uv/install.ps1 | iex",
]
UV_INSTALL_COMMAND_POSIX: list[str] = [
    "sh",
    "-c",
    "curl -LsSf https://astral.sh/uv/install.sh | sh",
]

# Remote sources
ODOO_REPO_URL: str = "https://github.com/odoo/odoo.git"
ODOO_RAW_BASE_URL: str = "https://raw.githubusercontent.com/odoo/odoo"
LIBSASS_WHEEL_URL: str = (
    "https://github.com/sass/libsass-python/releases/download/0.23.0/"
    "libsass-0.23.0-cp38-abi3-win_amd64.whl"
)
DOWNLOAD_CHUNK_SIZE: int = 64 * 1024

# Layout of an installation, relative to the parent directory
PARENT_DIR_PREFIX: str = "odoo-"
SOURCE_SUBDIR: str = "odoo-src"
VENV_SUBDIR: str = ".venv"
DATA_SUBDIR: str = "data"
CUSTOM_ADDONS_SUBDIR: str = "custom-addons"
CONF_FILENAME: str = "odoo.conf"
REQUIREMENTS_FILENAME: str = "requirements.txt"

# Ports
HTTP_PORT_PREFIX: str = "80"
LONGPOLLING_PORT: str = "8072"

# Environment override applied to the fallback dependency reinstall
FALLBACK_ENV_OVERRIDE: dict[str, str] = {"PYTHONUTF8": "1"}

# odoo.conf defaults
DEFAULT_ADMIN_PASSWD: str = "admin"
DEFAULT_DB_HOST: str = "localhost"
DEFAULT_DB_PORT: str = "5432"
DEFAULT_DB_USER: str = "odoo"
DEFAULT_DB_PASSWORD: str = "odoo"
DEFAULT_DB_MAXCONN: str = "64"
DEFAULT_ODOO_LOG_LEVEL: str = "info"
DEFAULT_SERVER_WIDE_MODULES: str = "base,web"

# Installation strategies
STRATEGY_CLONE: str = "clone"
STRATEGY_PREFETCH: str = "prefetch"
STRATEGIES: tuple[str, ...] = (STRATEGY_CLONE, STRATEGY_PREFETCH)

# Logging
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL: str = "WARNING"

# UI defaults
LANG: str = "en"


@dataclass(frozen=True)
class Settings:
    r"""Runtime settings resolved from the environment and an optional ``.env``.

    Attributes
    ----------
    repo_url : str
        Git URL of the Odoo repository.
    raw_base_url : str
        Base URL for raw file downloads; the branch and file name are appended.
    libsass_wheel_url : str
        URL of the prebuilt libsass wheel used by the dependency fallback.
    admin_passwd : str
        Master password written to ``odoo.conf``.
    db_host, db_port, db_user, db_password : str
        PostgreSQL connection values written to ``odoo.conf``.

    Examples
    --------
    >>> s = Settings()
    >>> s.repo_url
    'https://github.com/odoo/odoo.git'
    """

    repo_url: str = ODOO_REPO_URL
    raw_base_url: str = ODOO_RAW_BASE_URL
    libsass_wheel_url: str = LIBSASS_WHEEL_URL
    admin_passwd: str = DEFAULT_ADMIN_PASSWD
    db_host: str = DEFAULT_DB_HOST
    db_port: str = DEFAULT_DB_PORT
    db_user: str = DEFAULT_DB_USER
    db_password: str = DEFAULT_DB_PASSWORD

    @classmethod
    def load(cls, env_dir: Path | None = None) -> "Settings":
        r"""Build settings from ``<env_dir>/.env`` and the process environment.

        Parameters
        ----------
        env_dir : Path | None, optional
            Directory searched for a ``.env`` file. Defaults to the current
            working directory.

        Returns
        -------
        Settings
            Settings with every unset variable falling back to its constant.

        Notes
        -----
        Values already present in the process environment win over the
        ``.env`` file (``override=False``).
        """
        env_path = Path(env_dir or Path.cwd()) / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
        return cls(
            repo_url=os.getenv("ODOO_REPO_URL", ODOO_REPO_URL),
            raw_base_url=os.getenv("ODOO_RAW_BASE_URL", ODOO_RAW_BASE_URL).rstrip("/"),
            libsass_wheel_url=os.getenv("LIBSASS_WHEEL_URL", LIBSASS_WHEEL_URL),
            admin_passwd=os.getenv("ODOO_ADMIN_PASSWD", DEFAULT_ADMIN_PASSWD),
            db_host=os.getenv("ODOO_DB_HOST", DEFAULT_DB_HOST),
            db_port=os.getenv("ODOO_DB_PORT", DEFAULT_DB_PORT),
            db_user=os.getenv("ODOO_DB_USER", DEFAULT_DB_USER),
            db_password=os.getenv("ODOO_DB_PASSWORD", DEFAULT_DB_PASSWORD),
        )
