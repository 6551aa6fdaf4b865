"""Rendering and export of report results."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from rich.table import Table

from starclass_db.utils import format_cell

if TYPE_CHECKING:
    from rich.console import Console

    from starclass_db.query import ReportResult

__all__ = ["OutputFormat", "print_result", "render_table", "write_result"]


class OutputFormat(str, Enum):
    """Report output formats."""

    TABLE = "table"
    CSV = "csv"
    JSON = "json"
    PARQUET = "parquet"


def render_table(result: ReportResult, title: str | None = None) -> Table:
    """Build a rich table for a report result."""
    table = Table(title=title or f"{result.name} ({len(result)} rows)")
    for name in result.columns:
        table.add_column(name, style="cyan" if name.endswith("_id") else None)
    for row in result.rows:
        table.add_row(
            *[
                format_cell(value, percent=name in result.percent_columns)
                for name, value in zip(result.columns, row)
            ]
        )
    return table


def print_result(
    console: Console,
    result: ReportResult,
    fmt: OutputFormat = OutputFormat.TABLE,
    title: str | None = None,
) -> None:
    """Print a result to the console in the requested format."""
    if fmt is OutputFormat.TABLE:
        if not result.rows:
            console.print(f"[yellow]{result.name}: no rows[/yellow]")
            return
        console.print(render_table(result, title=title))
    elif fmt is OutputFormat.CSV:
        console.out(result.to_dataframe().to_csv(index=False), end="")
    elif fmt is OutputFormat.JSON:
        console.print_json(json.dumps(result.to_records(), default=str))
    else:
        msg = f"Format {fmt.value!r} needs an output file"
        raise ValueError(msg)


def write_result(result: ReportResult, path: Path, fmt: OutputFormat) -> None:
    """
    Export a result to ``path``.

    ``table`` output is not a file format; it falls back to CSV.
    """
    df = result.to_dataframe()
    path = Path(path)
    if fmt is OutputFormat.PARQUET:
        df.to_parquet(path, index=False)
    elif fmt is OutputFormat.JSON:
        df.to_json(path, orient="records", indent=2)
    else:
        df.to_csv(path, index=False)
