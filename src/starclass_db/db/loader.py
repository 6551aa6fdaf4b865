"""Bulk import of raw catalog CSV files.

Rows are validated with the pydantic import schemas and inserted as-is
into ``stars_raw`` / ``planets_raw``. No cleaning happens here; the views
take care of sentinels. Integrity violations (duplicate identifiers,
dangling host references, unknown Harvard classes) are rejected by the
database when the rows are flushed.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from starclass_db.models.orm import PlanetRaw, StarRaw
from starclass_db.models.schemas import PlanetRawRecord, StarRawRecord

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session

__all__ = [
    "RecordImportError",
    "iter_records",
    "load_catalog",
    "load_planets",
    "load_stars",
]

R = TypeVar("R", bound=BaseModel)


class RecordImportError(ValueError):
    """A CSV row failed validation."""

    def __init__(self, path: Path, line: int, error: ValidationError) -> None:
        self.path = path
        self.line = line
        self.error = error
        super().__init__(f"{path}:{line}: {error}")


def iter_records(csv_path: Path | str, schema: type[R]) -> Iterator[R]:
    """Parse a catalog CSV file into validated records.

    Parameters
    ----------
    csv_path : Path | str
        CSV file with a header row
    schema : type[R]
        Import schema to validate each row with

    Yields
    ------
    R
        Validated record

    Raises
    ------
    RecordImportError
        On the first row that fails validation
    """
    csv_path = Path(csv_path)

    with csv_path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for line, row in enumerate(reader, start=2):  # header is line 1
            try:
                yield schema.model_validate(row)
            except ValidationError as e:
                raise RecordImportError(csv_path, line, e) from e


def load_stars(session: Session, csv_path: Path | str) -> int:
    """Insert ``stars_raw`` rows from ``csv_path``; returns the row count."""
    stars = [
        StarRaw(**record.model_dump())
        for record in iter_records(csv_path, StarRawRecord)
    ]
    session.add_all(stars)
    session.flush()
    logger.info(f"loaded {len(stars)} stars from {csv_path}")
    return len(stars)


def load_planets(session: Session, csv_path: Path | str) -> int:
    """Insert ``planets_raw`` rows from ``csv_path``; returns the row count."""
    planets = [
        PlanetRaw(**record.model_dump())
        for record in iter_records(csv_path, PlanetRawRecord)
    ]
    session.add_all(planets)
    session.flush()
    logger.info(f"loaded {len(planets)} planets from {csv_path}")
    return len(planets)


def load_catalog(
    session: Session,
    stars_csv: Path | str,
    planets_csv: Path | str | None = None,
) -> dict[str, int]:
    """
    Load stars, then planets (planets reference their host stars).

    The caller owns the transaction; use :func:`~starclass_db.db.get_session`
    to commit on success and roll everything back on failure.

    Returns
    -------
    dict[str, int]
        Inserted row counts: {"stars_raw": N, "planets_raw": M}
    """
    counts = {"stars_raw": load_stars(session, stars_csv), "planets_raw": 0}
    if planets_csv is not None:
        counts["planets_raw"] = load_planets(session, planets_csv)
    return counts
