"""Odoo local development installer package.

This package prepares a local Odoo development installation: it checks for
the external tools it drives (``git`` and ``uv``), lets the user pick an Odoo
version, creates a pinned virtual environment, installs the dependency
manifest, fetches the source tree and writes a starting ``odoo.conf``.

Package Structure
-----------------
- `installer.py`:
    The ordered installation flow and its single top-level error handler.
- `app_runner.py`:
    CLI parsing, logging configuration and the console entry point.
- `catalog.py`, `plan.py`:
    The static version catalog and the immutable installation plan.
- `prereqs.py`, `source.py`, `venv_manager.py`, `fetch.py`, `commands.py`:
    Wrappers around the external collaborators (uv, git, HTTP, subprocess).
- `odoo_conf.py`: Rendering of the generated configuration file.
- `ui/`, `console_helpers.py`, `i18n.py`: Rich/Questionary terminal interface.
- `config.py`: Configuration constants as UPPER_SNAKE_CASE plus `.env` overrides.
- `exceptions.py`: The project-specific exception hierarchy.

Examples
--------
>>> from odoo_setup.app_runner import entry_point
>>> # entry_point() runs the interactive installer and exits with its status.
"""

__version__ = "1.0.0"
