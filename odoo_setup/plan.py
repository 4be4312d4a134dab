"""Installation plan derived from the selected version.

The plan is computed once per run from the chosen catalog entry and the
directory the installer was started from. It holds every path and port the
later steps need and is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from odoo_setup import config as _config


def major_version(version: str) -> str:
    """Return the major component of a dotted version string (``"18.0"`` -> ``"18"``)."""
    return version.split(".", 1)[0]


def http_port_for(version: str) -> str:
    r"""Return the HTTP port for an Odoo version.

    The port is the literal concatenation of ``HTTP_PORT_PREFIX`` and the major
    version digits, so each major version gets its own port.

    Examples
    --------
    >>> http_port_for("18.0")
    '8018'
    >>> http_port_for("16.0")
    '8016'
    """
    return f"{_config.HTTP_PORT_PREFIX}{major_version(version)}"


def to_forward_slashes(path: Path | str) -> str:
    """Return ``path`` as text with every backslash replaced by a forward slash."""
    return str(path).replace("\\", "/")


@dataclass(frozen=True)
class InstallationPlan:
    r"""Immutable set of paths and ports for one installation.

    Attributes
    ----------
    version : str
        Odoo branch name, e.g. ``"18.0"``.
    python_version : str
        Interpreter version the environment is pinned to, e.g. ``"3.12"``.
    base_dir : Path
        Directory the installer was started from.
    strategy : str
        ``"clone"`` to clone before creating the environment, ``"prefetch"`` to
        download only the manifest first and clone last.
    """

    version: str
    python_version: str
    base_dir: Path
    strategy: str = _config.STRATEGY_CLONE

    @property
    def major(self) -> str:
        return major_version(self.version)

    @property
    def parent_dir(self) -> Path:
        return self.base_dir / f"{_config.PARENT_DIR_PREFIX}{self.major}"

    @property
    def src_dir(self) -> Path:
        return self.parent_dir / _config.SOURCE_SUBDIR

    @property
    def venv_dir(self) -> Path:
        return self.parent_dir / _config.VENV_SUBDIR

    @property
    def data_dir(self) -> Path:
        return self.parent_dir / _config.DATA_SUBDIR

    @property
    def custom_addons_dir(self) -> Path:
        return self.parent_dir / _config.CUSTOM_ADDONS_SUBDIR

    @property
    def conf_file(self) -> Path:
        return self.parent_dir / _config.CONF_FILENAME

    @property
    def requirements_file(self) -> Path:
        # The prefetch strategy stores the manifest next to the clone.
        if self.strategy == _config.STRATEGY_PREFETCH:
            return self.parent_dir / _config.REQUIREMENTS_FILENAME
        return self.src_dir / _config.REQUIREMENTS_FILENAME

    @property
    def http_port(self) -> str:
        return http_port_for(self.version)

    @property
    def longpolling_port(self) -> str:
        return _config.LONGPOLLING_PORT

    @property
    def addons_dirs(self) -> tuple[Path, Path, Path]:
        """Addons search directories in load order: custom, external core, internal core."""
        return (
            self.custom_addons_dir,
            self.src_dir / "addons",
            self.src_dir / "odoo" / "addons",
        )

    @property
    def addons_path(self) -> str:
        return ",".join(to_forward_slashes(p) for p in self.addons_dirs)


def build_plan(
    version: str,
    python_version: str,
    base_dir: Path | None = None,
    strategy: str = _config.STRATEGY_CLONE,
) -> InstallationPlan:
    r"""Create the installation plan for a catalog entry.

    Parameters
    ----------
    version : str
        Selected Odoo version.
    python_version : str
        Interpreter version required by ``version``.
    base_dir : Path | None, optional
        Invocation directory; defaults to the current working directory.
    strategy : str, optional
        One of ``config.STRATEGIES``.

    Returns
    -------
    InstallationPlan
        The plan, with ``base_dir`` resolved to an absolute path.

    Raises
    ------
    ValueError
        If ``strategy`` is not a known strategy.

    Examples
    --------
    >>> from pathlib import Path
    >>> plan = build_plan("18.0", "3.12", Path("/work"))
    >>> plan.parent_dir.name, plan.src_dir.name, plan.http_port
    ('odoo-18', 'odoo-src', '8018')
    """
    if strategy not in _config.STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy}")
    root = Path(base_dir) if base_dir is not None else Path.cwd()
    return InstallationPlan(
        version=version,
        python_version=python_version,
        base_dir=root.resolve(),
        strategy=strategy,
    )


__all__ = [
    "InstallationPlan",
    "build_plan",
    "http_port_for",
    "major_version",
    "to_forward_slashes",
]
