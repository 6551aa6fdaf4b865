"""pytest configuration for starclass_db tests."""

from __future__ import annotations

import csv

import pytest
from sqlalchemy.orm import Session

from starclass_db.db import create_db_and_tables, get_engine, populate_reference_tables
from starclass_db.models.orm import PlanetRaw, StarRaw

# Every engine-backed test runs against both supported backends
ENGINE_URLS = {
    "duckdb": "duckdb:///:memory:",
    "sqlite": "sqlite:///:memory:",
}

# star_id, num_planets, spectral_type, harvard_class, yerkes_class,
# temperature_k, radius_solar, mass_solar, distance_pc
SAMPLE_STARS = [
    ("alf Leo", 0, "B8IVn", "B", "IV", 12460.0, 4.35, 3.8, 24.3),
    ("bet Leo", 0, "A3Va", "A", "V", 8500.0, 1.73, 1.78, 11.0),
    ("83 Leo B", 1, "K2V", "", "V", 5000.0, 0.8, 0.8, 17.7),
    ("51 Peg", 1, "G2IV", "G", "V", 5768.0, 1.15, 1.1, 15.0),
    # recorded G although 5100 K falls in the K range
    ("HD 5100", 1, "G8III", "G", "III", 5100.0, 10.0, 2.5, 40.0),
    ("gam Cep", 3, "K1III-IV", "K", "III", 4800.0, 4.9, 1.4, 13.8),
    ("HD 6500", 0, "F5", "", "", 6500.0, None, None, 30.0),
    ("Zero Temp", 0, None, "", "V", 0.0, None, None, 50.0),
    ("Null Class", 1, "M4V", None, "V", 3000.0, 0.3, 0.3, 6.0),
    ("KOI-4", 2, "G0V", "G", "V", 6000.0, 1.0, 1.0, 25.0),
    ("tau Boo", 1, "F7V", "F", "V", 6400.0, 1.42, 1.39, 15.6),
    ("zet Oph", 0, "O9.2IVnn", "O", "IV", 34000.0, 8.5, 20.0, 112.0),
]

# planet_id, host_id, num_stars, discovery_method, discovery_year,
# orbit_period, orbit_axis_au, earth_radii, earth_masses, m_msini, eccentricity
SAMPLE_PLANETS = [
    ("83 Leo B b", "83 Leo B", 2, "Radial Velocity", 2005, 17.05, 0.12, None, 27.0, "Msini", 0.13),
    ("51 Peg b", "51 Peg", 1, "Radial Velocity", 1995, 4.23, 0.05, None, 150.0, "Msini", 0.01),
    ("gam Cep b", "gam Cep", 2, "Radial Velocity", 2003, 903.3, 2.05, None, 2800.0, "Msini", 0.05),
    ("gam Cep c", "gam Cep", 2, "Imaging", 2024, 0.0, 0.0, None, None, "", None),
    ("Null Class b", "Null Class", 1, "Transit", 2019, 2.5, 0.02, 1.2, 2.0, "Mass", 0.0),
    ("KOI-4 b", "KOI-4", 4, "Transit", 2016, 10.3, 0.09, 2.5, None, "", 0.0),
    ("KOI-4 c", "KOI-4", 4, "Transit", 2016, 25.1, 0.16, 3.1, None, "", 0.0),
    ("tau Boo b", "tau Boo", 2, "Radial Velocity", 1996, 3.31, 0.05, None, 1890.0, "Msini", 0.01),
]

STAR_COLUMNS = (
    "star_id",
    "num_planets",
    "spectral_type",
    "harvard_class",
    "yerkes_class",
    "temperature_k",
    "radius_solar",
    "mass_solar",
    "distance_pc",
)

PLANET_COLUMNS = (
    "planet_id",
    "host_id",
    "num_stars",
    "discovery_method",
    "discovery_year",
    "orbit_period",
    "orbit_axis_au",
    "earth_radii",
    "earth_masses",
    "m_msini",
    "eccentricity",
)

# Source catalog CSV headers, in the same order as the columns above
STAR_HEADERS = (
    "Star_ID",
    "Num_of_Planets",
    "Spectral_Type",
    "Harvard_Class",
    "Yerkes_Class",
    "Temperature_K",
    "Radius_Solar",
    "Mass_Solar",
    "Distance_Pc",
)

PLANET_HEADERS = (
    "Planet_ID",
    "Host_ID",
    "Num_Stars",
    "Discovery_Method",
    "Discovery_Year",
    "Orbit_Period",
    "Orbit_Axis_AU",
    "Earth_Radii",
    "Earth_Masses",
    "M_Msini",
    "Eccentricity",
)


def make_stars(rows=SAMPLE_STARS) -> list[StarRaw]:
    return [StarRaw(**dict(zip(STAR_COLUMNS, row))) for row in rows]


def make_planets(rows=SAMPLE_PLANETS) -> list[PlanetRaw]:
    return [PlanetRaw(**dict(zip(PLANET_COLUMNS, row))) for row in rows]


def write_csv(path, headers, rows):
    """Write rows as a source catalog CSV (None becomes an empty cell)."""
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        for row in rows:
            writer.writerow(["" if v is None else v for v in row])
    return path


@pytest.fixture(params=list(ENGINE_URLS.values()), ids=list(ENGINE_URLS))
def engine(request):
    """Create in-memory engine with tables and views."""
    engine = get_engine(request.param)
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create SQLAlchemy session for testing."""
    with Session(engine) as session:
        yield session
        session.rollback()


@pytest.fixture
def reference_session(session):
    """Session with Harvard and Yerkes reference tables populated."""
    populate_reference_tables(session)
    return session


@pytest.fixture
def catalog_session(reference_session):
    """Session with reference tables and the sample star/planet catalog."""
    reference_session.add_all(make_stars())
    reference_session.flush()
    reference_session.add_all(make_planets())
    reference_session.commit()
    return reference_session


@pytest.fixture
def catalog_csv(tmp_path):
    """Sample catalog written as source CSV files: (stars_csv, planets_csv)."""
    return (
        write_csv(tmp_path / "stars.csv", STAR_HEADERS, SAMPLE_STARS),
        write_csv(tmp_path / "planets.csv", PLANET_HEADERS, SAMPLE_PLANETS),
    )
