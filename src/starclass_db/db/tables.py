"""Table and view lookup helpers for previews and row counts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select

from starclass_db.constants import TableName
from starclass_db.models.orm import Base, ViewBase

if TYPE_CHECKING:
    from sqlalchemy import Select, Table
    from sqlalchemy.orm import Session

__all__ = [
    "DEFAULT_PREVIEW_LIMITS",
    "get_table",
    "preview_statement",
    "table_counts",
]

DEFAULT_PREVIEW_LIMITS = {
    TableName.STARS_RAW.value: 100,
    TableName.PLANETS_RAW.value: 200,
}


def get_table(name: str) -> Table:
    """
    Look up a table or view by name.

    Raises
    ------
    KeyError
        If ``name`` is not one of :class:`~starclass_db.constants.TableName`
    """
    for metadata in (Base.metadata, ViewBase.metadata):
        if name in metadata.tables:
            return metadata.tables[name]
    known = ", ".join(t.value for t in TableName)
    msg = f"Unknown table {name!r} (known: {known})"
    raise KeyError(msg)


def preview_statement(name: str, limit: int | None = None) -> Select:
    """Select the first rows of a table or view, in primary key order."""
    table = get_table(name)
    if limit is None:
        limit = DEFAULT_PREVIEW_LIMITS.get(name, 100)
    return select(table).order_by(*table.primary_key.columns).limit(limit)


def table_counts(session: Session) -> dict[str, int]:
    """Row count of every table and view."""
    return {
        name.value: session.scalar(
            select(func.count()).select_from(get_table(name.value))
        )
        for name in TableName
    }
