"""Entrypoint and CLI helpers for the installer.

This module parses the command line, configures logging, selects the UI
language and hands over to ``odoo_setup.installer.run_installer``. Without
arguments the installer is fully interactive.

Examples
--------
>>> import odoo_setup.app_runner as runner
>>> args = runner.parse_cli_args(['--lang', 'en'])
>>> args.strategy
'clone'
>>> runner.entry_point()  # doctest: +SKIP
"""

from __future__ import annotations

import argparse
import logging
import sys

from odoo_setup import i18n
from odoo_setup.config import DEFAULT_LOG_LEVEL, LOG_FORMAT, STRATEGIES, STRATEGY_CLONE


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    r"""Configure the root logger with a single console handler.

    Parameters
    ----------
    level : str, optional
        The logging level to use, e.g., "DEBUG", "INFO", "WARNING". Unknown
        names fall back to WARNING.

    Notes
    -----
    All existing root handlers are removed and replaced. Diagnostics go to
    stderr only; the installer writes no log files.

    Examples
    --------
    >>> configure_logging("DEBUG")
    >>> import logging; logging.getLogger("x").debug("message")  # doctest: +SKIP
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    r"""Parse command-line arguments for the installer.

    Parameters
    ----------
    argv : list of str or None, optional
        List of argument strings to parse (as from ``sys.argv[1:]``).
        If None, defaults to ``sys.argv``.

    Returns
    -------
    argparse.Namespace
        Namespace with ``lang``, ``strategy`` and ``log_level``.

    Examples
    --------
    >>> ns = parse_cli_args(['--lang', 'sv', '--strategy', 'prefetch'])
    >>> ns.lang, ns.strategy
    ('sv', 'prefetch')
    """
    parser = argparse.ArgumentParser(
        description="Set up a local Odoo development installation"
    )
    parser.add_argument("--lang", type=str, choices=sorted(i18n.TEXTS), default="en")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=STRATEGIES,
        default=STRATEGY_CLONE,
        help=(
            "clone: clone the source first; prefetch: download requirements.txt "
            "first and clone after the config is written"
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        help="Diagnostic log level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Run the installer with parsed arguments and return its exit status."""
    configure_logging(args.log_level)
    i18n.set_language(args.lang)
    # Imported late so --help works even when the UI stack cannot initialise.
    from odoo_setup.installer import run_installer

    return run_installer(strategy=args.strategy)


def entry_point(argv: list[str] | None = None) -> None:
    """Console-script entry point: parse, run and exit with the installer's status."""
    sys.exit(run(parse_cli_args(argv)))


__all__ = ["configure_logging", "entry_point", "parse_cli_args", "run"]
