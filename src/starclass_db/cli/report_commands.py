"""Report commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from starclass_db.cli.db_commands import UrlOption
from starclass_db.cli.output import OutputFormat, print_result, write_result

console = Console()

report_app = typer.Typer(
    name="report",
    help="Analytical reports over the cleaned catalog",
    no_args_is_help=True,
)


def parse_params(pairs: list[str], defaults: dict[str, Any]) -> dict[str, Any]:
    """
    Parse ``key=value`` pairs, converting each value to its default's type.

    Raises
    ------
    typer.BadParameter
        On malformed pairs, unknown keys or unconvertible values
    """
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip().replace("-", "_")
        if not sep:
            raise typer.BadParameter(f"Expected key=value, got {pair!r}")
        if key not in defaults:
            known = ", ".join(defaults) or "none"
            raise typer.BadParameter(f"Unknown parameter {key!r} (known: {known})")
        default = defaults[key]
        try:
            params[key] = type(default)(value) if default is not None else value
        except ValueError:
            raise typer.BadParameter(
                f"{key}: expected {type(default).__name__}, got {value!r}"
            ) from None
    return params


@report_app.command(name="list")
def list_reports() -> None:
    """List available reports and their parameters."""
    from starclass_db.query import REPORTS

    table = Table(title="Reports")
    table.add_column("Name", style="cyan")
    table.add_column("Question")
    table.add_column("Parameters", style="magenta")
    for report in REPORTS.values():
        params = ", ".join(f"{k}={v!r}" for k, v in report.parameters.items())
        table.add_row(report.name, report.title, params)
    console.print(table)


@report_app.command(name="run")
def run_named_report(
    name: Annotated[str, typer.Argument(help="Report name (see 'report list')")],
    param: Annotated[
        Optional[list[str]],
        typer.Option("--param", "-p", help="Report parameter as key=value"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.TABLE,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write result to file"),
    ] = None,
    db_url: UrlOption = None,
) -> None:
    """Run one report."""
    from sqlalchemy.exc import SQLAlchemyError

    from starclass_db.db import get_engine, get_session
    from starclass_db.query import UnknownReportError, get_report, run_report

    try:
        report = get_report(name)
    except UnknownReportError as e:
        console.print(f"[bold red]Error:[/bold red] {e.args[0]}")
        raise typer.Exit(code=1)

    params = parse_params(param or [], report.parameters)

    engine = get_engine(db_url)
    try:
        with get_session(engine) as session:
            result = run_report(session, report, **params)
    except SQLAlchemyError as e:
        console.print(f"[bold red]Report failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if output is not None:
        write_result(result, output, fmt)
        console.print(f"[green]✓[/green] Wrote {len(result)} rows to {output}")
    elif fmt is OutputFormat.PARQUET:
        console.print("[bold red]Error:[/bold red] parquet output needs --output")
        raise typer.Exit(code=1)
    else:
        print_result(console, result, fmt, title=f"{report.title} ({len(result)} rows)")


@report_app.command(name="all")
def run_all_reports(db_url: UrlOption = None) -> None:
    """
    Run every report with default parameters.

    A failing report is reported and skipped; the others still run.
    """
    from sqlalchemy.exc import SQLAlchemyError

    from starclass_db.db import get_engine, get_session
    from starclass_db.query import REPORTS, run_report

    engine = get_engine(db_url)
    failed = []
    for report in REPORTS.values():
        try:
            with get_session(engine) as session:
                result = run_report(session, report)
        except SQLAlchemyError as e:
            logger.warning(f"report {report.name} failed: {e}")
            console.print(f"[bold red]{report.name} failed:[/bold red] {escape(str(e))}")
            failed.append(report.name)
            continue
        print_result(console, result, title=f"{report.title} ({len(result)} rows)")

    if failed:
        console.print(f"[bold red]{len(failed)} report(s) failed:[/bold red] {', '.join(failed)}")
        raise typer.Exit(code=1)
