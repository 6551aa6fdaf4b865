"""Cell formatting for console output."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from rich.markup import escape

__all__ = ["format_cell"]

NULL_MARKUP = "[dim]NULL[/dim]"


def format_cell(value: Any, percent: bool = False) -> str:
    """
    Render a result value for a rich table cell.

    Parameters
    ----------
    value : Any
        Value from a result row
    percent : bool, optional
        Render fractions as percentages, by default False

    Returns
    -------
    str
        Display string; NULL values are dimmed

    Examples
    --------
    >>> format_cell(0.076, percent=True)
    '7.6%'
    >>> format_cell(48.92339999)
    '48.9234'
    """
    if value is None:
        return NULL_MARKUP
    if isinstance(value, Decimal):
        value = float(value)
    if percent and isinstance(value, (int, float)):
        return f"{value * 100:.6g}%"
    if isinstance(value, float):
        return f"{value:.6g}"
    return escape(str(value))
