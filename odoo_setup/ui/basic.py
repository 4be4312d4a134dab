"""Minimal UI output primitives for the installer's terminal interface.

Headers, rules, coloured status lines, a spinner context manager and tables.
Every function renders through Rich when it is enabled and degrades to plain
``print`` output when ``console_helpers._RICH_CONSOLE`` is ``None``. Nothing in
here touches installer state.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager

from odoo_setup import console_helpers as ch


def ui_rule(title: str) -> None:
    r"""Render a horizontal rule with a caption.

    Parameters
    ----------
    title : str
        Title text to display as the rule caption.

    Examples
    --------
    >>> ui_rule("Step 1")
    # Displays a blue rule with "Step 1" if Rich is enabled.
    """
    if ch.ui_has_rich() and ch._RICH_CONSOLE:
        ch._RICH_CONSOLE.print(ch.Rule(title, style="bold blue"))
    else:
        ch.rprint("\n" + title)


def ui_header(title: str) -> None:
    r"""Render the application banner.

    Parameters
    ----------
    title : str
        Banner text.
    """
    if ch.ui_has_rich() and ch._RICH_CONSOLE:
        ch._RICH_CONSOLE.print(
            ch.Panel.fit(title, style="bold white on blue", border_style="blue")
        )
    else:
        ch.rprint(title)


def ui_status(message: str) -> AbstractContextManager[None]:
    r"""Show a spinner for the duration of a blocking step.

    Parameters
    ----------
    message : str
        Status text shown while the context is active.

    Returns
    -------
    AbstractContextManager[None]
        Context manager yielding control while the status is active.

    Examples
    --------
    >>> with ui_status("Cloning..."):
    ...     pass
    """

    @contextmanager
    def _ctx() -> Iterator[None]:
        if ch.ui_has_rich() and ch._RICH_CONSOLE:
            with ch._RICH_CONSOLE.status(message, spinner="dots"):
                yield
        else:
            ch.rprint(message)
            yield

    return _ctx()


def ui_info(message: str) -> None:
    """Display an informational message (cyan under Rich)."""
    if ch.ui_has_rich():
        ch.rprint(f"[cyan]{message}[/cyan]")
    else:
        ch.rprint(message)


def ui_success(message: str) -> None:
    """Display a success message with a check mark (green under Rich)."""
    if ch.ui_has_rich():
        ch.rprint(f"[green]✓ {message}[/green]")
    else:
        ch.rprint(message)


def ui_warning(message: str) -> None:
    """Display a warning message (yellow under Rich)."""
    if ch.ui_has_rich():
        ch.rprint(f"[yellow]⚠ {message}[/yellow]")
    else:
        ch.rprint(message)


def ui_error(message: str) -> None:
    """Display an error message (bold red under Rich)."""
    if ch.ui_has_rich():
        ch.rprint(f"[bold red]✗ {message}[/bold red]")
    else:
        ch.rprint(message)


def ui_table(title: str, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    r"""Render rows as a table, or as tab-separated lines without Rich.

    Parameters
    ----------
    title : str
        Table caption.
    headers : Sequence[str]
        Column headers.
    rows : Sequence[Sequence[str]]
        Cell values, one sequence per row.

    Examples
    --------
    >>> ui_table("Versions", ["#", "Odoo"], [["1", "18.0"]])
    # Rich: boxed table; plain: "Versions", then one line per row.
    """
    if ch.ui_has_rich() and ch._RICH_CONSOLE:
        table = ch.Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*[str(cell) for cell in row])
        ch._RICH_CONSOLE.print(table)
        return
    ch.rprint(title)
    for row in rows:
        ch.rprint("\t".join(str(cell) for cell in row))


__all__ = [
    "ui_error",
    "ui_header",
    "ui_info",
    "ui_rule",
    "ui_status",
    "ui_success",
    "ui_table",
    "ui_warning",
]
