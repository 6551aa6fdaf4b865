"""Database configuration and session management."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv
from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool, StaticPool

from starclass_db.constants import DATABASE_URL_ENV, DEFAULT_DATABASE_URL

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlalchemy.engine import Engine

__all__ = [
    "create_db_and_tables",
    "drop_db_and_tables",
    "get_engine",
    "get_session",
    "resolve_database_url",
]

_SUPPORTED_SCHEMES = ("duckdb://", "sqlite://")


def resolve_database_url(database_url: str | None = None) -> str:
    """
    Resolve the database URL to use.

    Parameters
    ----------
    database_url : str | None, optional
        Explicit URL; wins over everything else

    Returns
    -------
    str
        ``database_url`` if given, else ``$STARCLASS_DB_URL`` (a ``.env``
        file in the working directory is loaded first), else the default
        ``duckdb:///starclass.duckdb``
    """
    if database_url:
        return database_url
    load_dotenv(find_dotenv(usecwd=True))
    return os.getenv(DATABASE_URL_ENV, DEFAULT_DATABASE_URL)


def _is_memory_url(database_url: str) -> bool:
    return database_url.endswith(":memory:") or database_url in (
        "sqlite://",
        "sqlite:///",
    )


def get_engine(database_url: str | None = None, echo: bool = False) -> Engine:
    """
    Create database engine.

    Parameters
    ----------
    database_url : str | None, optional
        Database connection URL, resolved with :func:`resolve_database_url`.
        Examples:
        - In-memory: "duckdb:///:memory:" or "sqlite:///:memory:"
        - File: "duckdb:///./starclass.duckdb"
    echo : bool, optional
        Whether to echo SQL statements, by default False

    Returns
    -------
    Engine
        SQLAlchemy engine instance

    Raises
    ------
    ValueError
        If the URL is neither DuckDB nor SQLite

    Notes
    -----
    In-memory databases use a StaticPool: every new connection to
    ``:memory:`` would otherwise open a separate, empty database.
    SQLite connections enable foreign key enforcement so dangling host
    references are rejected at insertion.
    """
    database_url = resolve_database_url(database_url)
    if not database_url.startswith(_SUPPORTED_SCHEMES):
        msg = f"Unsupported database URL: {database_url}"
        raise ValueError(msg)

    connect_args = {}
    if database_url.startswith("sqlite://"):
        connect_args["check_same_thread"] = False

    poolclass = StaticPool if _is_memory_url(database_url) else NullPool

    engine = create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        poolclass=poolclass,
    )

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def configure_sqlite(dbapi_conn, connection_record):
            dbapi_conn.execute("PRAGMA foreign_keys=ON")

    logger.debug(f"created {engine.dialect.name} engine for {engine.url}")
    return engine


def create_db_and_tables(engine: Engine) -> None:
    """
    Create all tables and the cleaning views.

    Safe to call on an initialized database.

    Examples
    --------
    >>> engine = get_engine("duckdb:///:memory:")
    >>> create_db_and_tables(engine)
    """
    # Importing the orm package registers every model and the view hooks
    from starclass_db.models.orm import Base

    Base.metadata.create_all(engine)


def drop_db_and_tables(engine: Engine) -> None:
    """Drop the views and all tables."""
    from starclass_db.models.orm import Base

    Base.metadata.drop_all(engine)


@contextmanager
def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Provide transactional database session.

    Automatically commits on success, rolls back on exception.

    Parameters
    ----------
    engine : Engine
        SQLAlchemy engine instance

    Yields
    ------
    Session
        SQLAlchemy session
    """
    session = Session(engine)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
