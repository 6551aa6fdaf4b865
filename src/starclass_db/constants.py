"""Constants and enumerations for starclass_db."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "DEFAULT_DATABASE_URL",
    "DATABASE_URL_ENV",
    "HARVARD_REFERENCE",
    "HARVARD_TEMPERATURE_BOUNDS",
    "HarvardClass",
    "LIGHT_YEARS_PER_PARSEC",
    "TableName",
    "YERKES_REFERENCE",
]


DEFAULT_DATABASE_URL = "duckdb:///starclass.duckdb"
DATABASE_URL_ENV = "STARCLASS_DB_URL"

LIGHT_YEARS_PER_PARSEC = 3.26156


class HarvardClass(str, Enum):
    """Harvard spectral classes, hottest to coolest."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"


class TableName(str, Enum):
    """Tables and views of the catalog."""

    HARVARD_SPECTRAL = "harvard_spectral"
    YERKES_SPECTRAL = "yerkes_spectral"
    STARS_RAW = "stars_raw"
    PLANETS_RAW = "planets_raw"
    STARS = "stars"
    PLANETS = "planets"


# Lower temperature bound (K) of each class, evaluated first-match-wins.
# Anything below the last bound (including 0 and null) is unclassified.
HARVARD_TEMPERATURE_BOUNDS: tuple[tuple[int, HarvardClass], ...] = (
    (30000, HarvardClass.O),
    (10000, HarvardClass.B),
    (7500, HarvardClass.A),
    (6000, HarvardClass.F),
    (5200, HarvardClass.G),
    (3700, HarvardClass.K),
    (1, HarvardClass.M),
)

# (class, min temperature K, chromaticity, fraction of main-sequence stars)
HARVARD_REFERENCE: tuple[tuple[HarvardClass, int, str, float], ...] = (
    (HarvardClass.O, 30000, "blue", 0.0000003),
    (HarvardClass.B, 10000, "deep blue white", 0.0012),
    (HarvardClass.A, 7500, "blue white", 0.0061),
    (HarvardClass.F, 6000, "white", 0.03),
    (HarvardClass.G, 5200, "yellowish white", 0.076),
    (HarvardClass.K, 3700, "pale yellow orange", 0.121),
    (HarvardClass.M, 2400, "light orange red", 0.7645),
)

YERKES_REFERENCE: tuple[tuple[str, str], ...] = (
    ("0", "Hypergiants"),
    ("Ia", "Luminous supergiants"),
    ("Iab", "Intermediate-size luminous supergiants"),
    ("Ib", "Less luminous supergiants"),
    ("II", "Bright giants"),
    ("III", "Normal giants"),
    ("IV", "Subgiants"),
    ("V", "Main-sequence stars (dwarfs)"),
    ("VI", "Subdwarfs"),
    ("VII", "White dwarfs"),
)
