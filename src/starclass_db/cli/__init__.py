"""Console script for starclass_db."""

from __future__ import annotations

import typer
from rich.console import Console

app = typer.Typer(
    name="starclass_db",
    help="Star and exoplanet catalog CLI - schema, cleaning views and reports",
    no_args_is_help=True,
)
console = Console()

# Import subcommand apps
from starclass_db.cli.db_commands import db_app
from starclass_db.cli.report_commands import report_app

# Register subcommands
app.add_typer(db_app, name="db", help="Database management operations")
app.add_typer(report_app, name="report", help="Analytical reports")


if __name__ == "__main__":
    app()
