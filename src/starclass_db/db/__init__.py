"""Database package for starclass_db."""

from __future__ import annotations

__all__ = [
    # Engine and sessions
    "create_db_and_tables",
    "drop_db_and_tables",
    "get_engine",
    "get_session",
    "resolve_database_url",
    # Reference tables
    "populate_reference_tables",
    # Raw import
    "RecordImportError",
    "load_catalog",
    "load_planets",
    "load_stars",
    # Lookup
    "get_table",
    "preview_statement",
    "table_counts",
]

from .config import (
    create_db_and_tables,
    drop_db_and_tables,
    get_engine,
    get_session,
    resolve_database_url,
)
from .loader import RecordImportError, load_catalog, load_planets, load_stars
from .registry import populate_reference_tables
from .tables import get_table, preview_statement, table_counts
