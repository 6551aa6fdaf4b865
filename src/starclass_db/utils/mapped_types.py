"""SQLAlchemy mapped type helpers for consistent column definitions."""

from __future__ import annotations

from typing import Annotated

from sqlalchemy import Double, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import mapped_column
from sqlalchemy.types import TypeDecorator

__all__ = [
    "CatalogId",
    "Count",
    "Decimal5",
    "FloatNumeric",
    "Measure",
    "ShortStr",
    "fk",
]


class FloatNumeric(TypeDecorator):
    """
    Fixed-point column read back as ``float`` on every backend.

    DuckDB returns ``Decimal`` for DECIMAL columns even with
    ``asdecimal=False``; SQLite returns ``float``.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 20, scale: int = 5) -> None:
        super().__init__(precision=precision, scale=scale, asdecimal=False)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return float(value)


# Catalog identifiers are the natural primary keys (no sequences needed)
CatalogId = Annotated[
    str,
    mapped_column(
        String(50),
        primary_key=True,
        comment="Catalog identifier",
    ),
]

ShortStr = Annotated[
    str | None,
    mapped_column(
        String(20),
        nullable=True,
        comment="Short label",
    ),
]

Count = Annotated[
    int | None,
    mapped_column(
        Integer,
        nullable=True,
        comment="Count as recorded by source",
    ),
]

# Raw measurements; 0 may be a sentinel for unknown
Measure = Annotated[
    float | None,
    mapped_column(
        Double,
        nullable=True,
        comment="Measured quantity",
    ),
]

Decimal5 = Annotated[
    float | None,
    mapped_column(
        FloatNumeric(20, 5),
        nullable=True,
        comment="Fixed-point quantity",
    ),
]


def fk(
    target: str,
    **kwargs,
):
    """
    Create a string foreign key column.

    Parameters
    ----------
    target : str
        Referenced column as ``"table.column"``
    **kwargs
        Additional mapped_column arguments

    Returns
    -------
    mapped_column
        Configured foreign key column

    Examples
    --------
    >>> host_id: Mapped[str] = fk("stars_raw.star_id", nullable=False)

    Notes
    -----
    DuckDB foreign keys only validate referential integrity; no cascades.
    """
    kwargs.setdefault("comment", f"Foreign key to {target}")

    return mapped_column(
        String(50),
        ForeignKey(target),
        **kwargs,
    )
