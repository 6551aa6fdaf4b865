"""Utility functions for starclass_db."""

from __future__ import annotations

__all__ = [
    # Mapped types
    "CatalogId",
    "Count",
    "Decimal5",
    "FloatNumeric",
    "Measure",
    "ShortStr",
    "fk",
    # Display
    "format_cell",
]

from .formatting import format_cell
from .mapped_types import CatalogId, Count, Decimal5, FloatNumeric, Measure, ShortStr, fk
