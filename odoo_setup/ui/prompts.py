"""Prompt helpers for the installer's three interactive questions.

Questionary renders the prompts when stdin is an interactive terminal; piped
or redirected input falls back to ``input()`` so the installer can be driven
from scripts and tests. Prompts never loop: one answer is read and returned.
"""

from __future__ import annotations

import sys

from odoo_setup import console_helpers as ch

_YES = ("y", "yes", "j", "ja")


def _use_questionary() -> bool:
    if not ch._HAS_Q or ch.questionary is None:
        return False
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def ask_text(prompt: str, default: str | None = None) -> str:
    r"""Prompt the user for a line of text.

    Parameters
    ----------
    prompt : str
        The user-facing prompt string.
    default : str or None, optional
        Value returned for empty input or when stdin is closed.

    Returns
    -------
    str
        The stripped answer, or ``default`` (``""`` when unset).

    Examples
    --------
    >>> import builtins
    >>> builtins.input = lambda _p="": "2"
    >>> ask_text("Choice: ")
    '2'
    """
    if _use_questionary():
        answer = ch.questionary.text(prompt, default=default or "").ask()
        if answer is None:
            # questionary returns None on Ctrl-C
            raise KeyboardInterrupt
        return answer.strip() or (default or "")
    try:
        return input(prompt).strip() or (default or "")
    except EOFError:
        return default or ""


def ask_confirm(prompt: str, default_yes: bool = True) -> bool:
    r"""Ask a yes/no question.

    Parameters
    ----------
    prompt : str
        The yes/no prompt string to present.
    default_yes : bool, optional
        Answer assumed for empty input or a closed stdin.

    Returns
    -------
    bool
        True for ``y``/``yes`` (and the Swedish ``j``/``ja``), False for any
        other non-empty answer.
    """
    if _use_questionary():
        answer = ch.questionary.confirm(prompt, default=default_yes).ask()
        if answer is None:
            raise KeyboardInterrupt
        return bool(answer)
    suffix = " (Y/n) " if default_yes else " (y/N) "
    try:
        value = input(prompt + suffix).strip().lower()
    except EOFError:
        return default_yes
    if not value:
        return default_yes
    return value in _YES


__all__ = ["ask_confirm", "ask_text"]
