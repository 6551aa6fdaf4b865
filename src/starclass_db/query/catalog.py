"""Named report catalog and runner.

Reports are registered under stable, CLI-friendly names. Running a report
executes its statement in the given session and returns a
:class:`ReportResult`; reports are independent of each other and never
write, so they can be run in any order.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from loguru import logger

from starclass_db.query import reports

if TYPE_CHECKING:
    from collections.abc import Callable

    import pandas as pd
    from sqlalchemy import Select
    from sqlalchemy.orm import Session

__all__ = [
    "REPORTS",
    "Report",
    "ReportResult",
    "UnknownReportError",
    "execute_statement",
    "get_report",
    "run_report",
]


class UnknownReportError(KeyError):
    """No report is registered under the requested name."""


@dataclass(frozen=True)
class Report:
    """
    A registered analytical report.

    Attributes
    ----------
    name : str
        Stable identifier (``blue-stars``)
    title : str
        One-line question the report answers
    build : Callable[..., Select]
        Statement builder; keyword arguments are the report parameters
    percent_columns : tuple[str, ...]
        Columns holding fractions, displayed as percentages
    """

    name: str
    title: str
    build: Callable[..., Select]
    percent_columns: tuple[str, ...] = ()

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter names and their default values."""
        return {
            p.name: p.default
            for p in inspect.signature(self.build).parameters.values()
        }

    def statement(self, **params: Any) -> Select:
        return self.build(**params)


@dataclass
class ReportResult:
    """Tabular result of one report run."""

    name: str
    columns: list[str]
    rows: list[tuple[Any, ...]] = field(default_factory=list)
    percent_columns: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def to_records(self) -> list[dict[str, Any]]:
        """Rows as dictionaries keyed by column name."""
        return [dict(zip(self.columns, row)) for row in self.rows]

    def column(self, name: str) -> list[Any]:
        """All values of one column."""
        idx = self.columns.index(name)
        return [row[idx] for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        import pandas as pd

        return pd.DataFrame.from_records(self.rows, columns=self.columns)


REPORTS: dict[str, Report] = {
    r.name: r
    for r in (
        Report(
            "constellation-distances",
            "Distance of each star in a constellation",
            reports.constellation_distances,
        ),
        Report(
            "blue-stars",
            "Stars whose spectral class is described as blue",
            reports.blue_stars,
        ),
        Report(
            "class-temperatures",
            "Average temperature of each Harvard class",
            reports.class_temperatures,
        ),
        Report(
            "habitable-candidates",
            "Exoplanets of nearby GV (Sun-like) stars",
            reports.habitable_candidates,
        ),
        Report(
            "max-star-systems",
            "Exoplanets in the systems with the most stars",
            reports.max_star_systems,
        ),
        Report(
            "above-class-average",
            "Stars hotter than the average of their class",
            reports.above_class_average,
        ),
        Report(
            "yerkes-frequency",
            "Most common Yerkes luminosity classes",
            reports.yerkes_frequency,
            percent_columns=("pct_of_stars",),
        ),
        Report(
            "min-temperature-check",
            "Estimated vs. actual minimum temperature per class",
            reports.min_temperature_check,
        ),
        Report(
            "planet-count-mismatches",
            "Stars whose planet count disagrees with linked planets",
            reports.planet_count_mismatches,
        ),
        Report(
            "class-distribution",
            "Expected vs. actual share of each Harvard class",
            reports.class_distribution,
            percent_columns=("pct_expected", "pct_actual"),
        ),
        Report(
            "harvard-reference",
            "Harvard spectral class reference table",
            reports.harvard_reference,
            percent_columns=("pct_main_sequence",),
        ),
        Report(
            "yerkes-reference",
            "Yerkes luminosity class reference table",
            reports.yerkes_reference,
        ),
    )
}


def get_report(name: str) -> Report:
    """
    Look up a registered report.

    Raises
    ------
    UnknownReportError
        If no report has this name
    """
    try:
        return REPORTS[name]
    except KeyError:
        known = ", ".join(REPORTS)
        msg = f"Unknown report {name!r} (known: {known})"
        raise UnknownReportError(msg) from None


def execute_statement(
    session: Session,
    statement: Select,
    name: str,
    percent_columns: tuple[str, ...] = (),
) -> ReportResult:
    """Execute ``statement`` and collect its rows into a :class:`ReportResult`."""
    logger.debug(f"{name}: {statement}")
    result = session.execute(statement)
    columns = list(result.keys())
    rows = [tuple(row) for row in result]
    logger.info(f"{name}: {len(rows)} rows")
    return ReportResult(
        name=name,
        columns=columns,
        rows=rows,
        percent_columns=percent_columns,
    )


def run_report(session: Session, name: str | Report, **params: Any) -> ReportResult:
    """
    Run a report.

    Parameters
    ----------
    session : Session
        Session bound to a catalog database
    name : str | Report
        Report name or instance
    **params : Any
        Report parameters overriding the defaults

    Returns
    -------
    ReportResult
        Column names and rows; an empty result is a valid outcome

    Examples
    --------
    >>> result = run_report(session, "habitable-candidates", max_distance_pc=10)
    >>> result.columns
    ['planet_id', 'distance_pc', 'light_years']
    """
    report = name if isinstance(name, Report) else get_report(name)
    return execute_statement(
        session,
        report.statement(**params),
        report.name,
        percent_columns=report.percent_columns,
    )
