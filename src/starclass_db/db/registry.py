"""Reference table population utilities.

Populates the Harvard and Yerkes classification tables with standard
values. Reports joining on these tables (class profiles, frequency
rankings, representativeness checks) iterate them as the outer side, so
they must be populated before reports are meaningful.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from starclass_db.constants import HARVARD_REFERENCE, YERKES_REFERENCE
from starclass_db.models.orm import HarvardSpectral, YerkesSpectral

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

__all__ = ["populate_reference_tables"]


def populate_reference_tables(session: Session) -> dict[str, int]:
    """Populate reference tables with standard classification values.

    Creates entries for:
    - HarvardSpectral (7 classes, O to M)
    - YerkesSpectral (10 luminosity classes, 0 to VII)

    Safe to call multiple times (existing rows are left untouched).
    Commits the session itself, unlike the raw loaders.

    Parameters
    ----------
    session : Session
        Database session

    Returns
    -------
    dict[str, int]
        Counts of created entries: {"harvard_spectral": N, "yerkes_spectral": M}

    Examples
    --------
    >>> with get_session(engine) as session:
    ...     counts = populate_reference_tables(session)
    >>> counts
    {'harvard_spectral': 7, 'yerkes_spectral': 10}
    """
    counts = {
        "harvard_spectral": 0,
        "yerkes_spectral": 0,
    }

    for harvard_class, min_temp, chromaticity, pct in HARVARD_REFERENCE:
        if session.get(HarvardSpectral, harvard_class.value) is None:
            session.add(
                HarvardSpectral(
                    class_code=harvard_class.value,
                    min_temperature_k=min_temp,
                    chromaticity=chromaticity,
                    pct_main_sequence=pct,
                )
            )
            counts["harvard_spectral"] += 1

    for lum_class, description in YERKES_REFERENCE:
        if session.get(YerkesSpectral, lum_class) is None:
            session.add(
                YerkesSpectral(lum_class=lum_class, star_description=description)
            )
            counts["yerkes_spectral"] += 1

    session.commit()
    logger.info(f"populated reference tables: {counts}")
    return counts
