"""Report statements and the named report catalog."""

from __future__ import annotations

from starclass_db.query.catalog import (
    REPORTS,
    Report,
    ReportResult,
    UnknownReportError,
    execute_statement,
    get_report,
    run_report,
)

__all__ = [
    "REPORTS",
    "Report",
    "ReportResult",
    "UnknownReportError",
    "execute_statement",
    "get_report",
    "run_report",
]
