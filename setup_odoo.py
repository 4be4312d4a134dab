"""Minimal runner for the Odoo development installer.

Its single responsibility is to provide a tiny script entrypoint that
delegates to ``odoo_setup.app_runner``, so the installer can be started
from a checkout without installing the package.

Usage:
    python setup_odoo.py [--lang en|sv] [--strategy clone|prefetch] [--log-level LEVEL]

"""

from __future__ import annotations


def entry_point(argv: list[str] | None = None) -> None:
    """Run the installer and exit with its status code.

    Import is performed inside the function to avoid importing the whole
    application at module import time.
    """
    from odoo_setup.app_runner import entry_point as app_entry_point

    app_entry_point(argv)


if __name__ == "__main__":
    entry_point()
