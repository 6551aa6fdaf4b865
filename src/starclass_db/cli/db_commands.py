"""Database management commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

db_app = typer.Typer(
    name="db",
    help="Database management operations",
    no_args_is_help=True,
)

UrlOption = Annotated[
    Optional[str],
    typer.Option(
        "--url",
        help="Database URL (default: $STARCLASS_DB_URL or duckdb:///starclass.duckdb)",
    ),
]


@db_app.command(name="init")
def init_database(
    db_url: UrlOption = None,
    seed: Annotated[
        bool,
        typer.Option("--seed/--no-seed", help="Populate reference tables"),
    ] = True,
) -> None:
    """
    Initialize database schema and views (idempotent).

    Creates the raw and reference tables, the cleaned ``stars`` and
    ``planets`` views and optionally the Harvard/Yerkes reference rows.
    """
    from starclass_db.db import (
        create_db_and_tables,
        get_engine,
        get_session,
        populate_reference_tables,
    )

    engine = get_engine(db_url)
    console.print(f"Database: {engine.url}")

    create_db_and_tables(engine)
    console.print("[green]✓[/green] Tables and views ready")

    if seed:
        with get_session(engine) as session:
            counts = populate_reference_tables(session)
        for table, count in counts.items():
            console.print(f"  {table}: {count} rows added")


@db_app.command(name="load")
def load_catalog_files(
    stars_csv: Annotated[Path, typer.Argument(help="CSV file of raw star rows")],
    planets_csv: Annotated[
        Optional[Path], typer.Argument(help="CSV file of raw planet rows")
    ] = None,
    db_url: UrlOption = None,
) -> None:
    """
    Import raw star (and planet) rows from CSV files.

    All rows are loaded in one transaction: any invalid row, duplicate
    identifier or planet with an unknown host star aborts the whole import.
    """
    from sqlalchemy.exc import DBAPIError

    from starclass_db.db import RecordImportError, get_engine, get_session, load_catalog

    for path in (stars_csv, planets_csv):
        if path is not None and not path.exists():
            console.print(f"[bold red]Error:[/bold red] File not found: {path}")
            raise typer.Exit(code=1)

    engine = get_engine(db_url)
    try:
        with get_session(engine) as session:
            counts = load_catalog(session, stars_csv, planets_csv)
    except RecordImportError as e:
        console.print(f"[bold red]Invalid row:[/bold red] {e.path}:{e.line}")
        console.print(str(e.error), markup=False)
        raise typer.Exit(code=1)
    except DBAPIError as e:
        console.print(f"[bold red]Rejected by database:[/bold red] {escape(str(e.orig))}")
        raise typer.Exit(code=1)

    for table, count in counts.items():
        console.print(f"[green]✓[/green] {table}: {count} rows")


@db_app.command(name="show")
def show_table(
    table_name: Annotated[str, typer.Argument(help="Table or view name")],
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Maximum rows (default 100, planets_raw 200)"),
    ] = None,
    db_url: UrlOption = None,
) -> None:
    """Preview the first rows of a table or view."""
    from starclass_db.cli.output import print_result
    from starclass_db.db import get_engine, get_session, preview_statement
    from starclass_db.query import execute_statement

    try:
        statement = preview_statement(table_name, limit)
    except KeyError as e:
        console.print(f"[bold red]Error:[/bold red] {e.args[0]}")
        raise typer.Exit(code=1)

    engine = get_engine(db_url)
    with get_session(engine) as session:
        result = execute_statement(session, statement, table_name)
    print_result(console, result)


@db_app.command(name="info")
def database_info(db_url: UrlOption = None) -> None:
    """Show row counts of all tables and views."""
    from starclass_db.db import get_engine, get_session, table_counts

    engine = get_engine(db_url)
    with get_session(engine) as session:
        counts = table_counts(session)

    table = Table(title=f"Database: {engine.url}")
    table.add_column("Table", style="cyan")
    table.add_column("Rows", justify="right", style="green")
    for name, count in counts.items():
        table.add_row(name, str(count))
    console.print(table)
