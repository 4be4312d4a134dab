"""Static catalog of installable Odoo versions.

Maps each Odoo release branch to the Python interpreter version its
dependency manifest is pinned against, and resolves the user's 1-based
menu choice against the catalog sorted newest first.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from odoo_setup.exceptions import InvalidSelectionError
from odoo_setup.i18n import _

VERSION_CATALOG: Mapping[str, str] = MappingProxyType(
    {
        "16.0": "3.10",
        "17.0": "3.11",
        "18.0": "3.12",
    }
)


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version.split("."))


def sorted_versions(catalog: Mapping[str, str] = VERSION_CATALOG) -> list[tuple[str, str]]:
    r"""Return catalog entries sorted descending by version.

    Parameters
    ----------
    catalog : Mapping[str, str], optional
        Version to interpreter-version mapping.

    Returns
    -------
    list[tuple[str, str]]
        ``(version, python_version)`` pairs, newest version first. Versions
        compare numerically per dotted component, so ``"10.0"`` sorts above
        ``"9.0"``.

    Examples
    --------
    >>> sorted_versions({"16.0": "3.10", "18.0": "3.12"})
    [('18.0', '3.12'), ('16.0', '3.10')]
    """
    return sorted(catalog.items(), key=lambda item: _version_key(item[0]), reverse=True)


def select_version(
    choice: str, catalog: Mapping[str, str] = VERSION_CATALOG
) -> tuple[str, str]:
    r"""Resolve a 1-based menu choice to a catalog entry.

    Parameters
    ----------
    choice : str
        Raw user input. Surrounding whitespace is ignored.
    catalog : Mapping[str, str], optional
        Version to interpreter-version mapping.

    Returns
    -------
    tuple[str, str]
        The selected ``(version, python_version)`` pair.

    Raises
    ------
    InvalidSelectionError
        If ``choice`` is not an integer or lies outside ``[1, len(catalog)]``.

    Examples
    --------
    >>> select_version("1", {"16.0": "3.10", "18.0": "3.12"})
    ('18.0', '3.12')
    """
    entries = sorted_versions(catalog)
    raw = (choice or "").strip()
    try:
        index = int(raw)
    except ValueError:
        raise InvalidSelectionError(
            _("invalid_selection").format(choice=raw, count=len(entries)),
            context={"choice": raw},
        ) from None
    if not 1 <= index <= len(entries):
        raise InvalidSelectionError(
            _("invalid_selection").format(choice=raw, count=len(entries)),
            context={"choice": raw, "catalog_size": len(entries)},
        )
    return entries[index - 1]


__all__ = ["VERSION_CATALOG", "select_version", "sorted_versions"]
