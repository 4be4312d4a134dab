"""console_helpers.py: Rich/Questionary integration for the installer's terminal UI.

This module is the only place that imports Rich and Questionary. Everything
else prints through ``rprint`` and the ``odoo_setup.ui`` helpers, which makes
it simple for tests to switch the UI to plain output by setting
``_RICH_CONSOLE`` to ``None``.

Canonical Usage
---------------
>>> from odoo_setup.console_helpers import rprint, ui_has_rich
>>> rprint("Hello Rich!")
Hello Rich!
>>> ui_has_rich() in (True, False)
True

References
----------
- Rich Docs: https://rich.readthedocs.io/en/latest/
- Questionary Docs: https://github.com/tmbo/questionary
"""

from __future__ import annotations

from typing import IO, Any

import questionary
from rich import print as rich_print
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

_RICH_CONSOLE: Console | None = Console()
_HAS_Q: bool = True


def ui_has_rich() -> bool:
    r"""Return whether styled Rich output is enabled.

    Returns
    -------
    bool
        False when ``_RICH_CONSOLE`` was cleared (tests, plain mode).
    """
    return _RICH_CONSOLE is not None


def rprint(
    *objects: Any,
    sep: str = " ",
    end: str = "\n",
    file: IO[str] | None = None,
    flush: bool = False,
) -> None:
    r"""Print objects using Rich markup when enabled; builtin print otherwise.

    Parameters
    ----------
    *objects : Any
        Objects to be printed, separated by sep.
    sep : str, optional
        Separator between objects, default ' '.
    end : str, optional
        Line ending, default newline.
    file : IO[str], optional
        File-like object to print to, default sys.stdout.
    flush : bool, optional
        Forcibly flush output.

    Examples
    --------
    >>> import io
    >>> buf = io.StringIO()
    >>> rprint("FileOut", file=buf)
    >>> "FileOut" in buf.getvalue()
    True
    """
    if ui_has_rich():
        rich_print(*objects, sep=sep, end=end, file=file, flush=flush)
        return
    print(*objects, sep=sep, end=end, file=file, flush=flush)


__all__ = [
    "_HAS_Q",
    "_RICH_CONSOLE",
    "Console",
    "Panel",
    "Rule",
    "Table",
    "questionary",
    "rprint",
    "ui_has_rich",
]
