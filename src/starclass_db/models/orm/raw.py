"""Imported, uncleaned catalog rows: StarRaw, PlanetRaw.

Rows are stored exactly as delivered by the source catalog, including
sentinel values (0 or empty string meaning "unknown"). Cleaning happens
in the views of :mod:`starclass_db.models.orm.views`.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from starclass_db.constants import HarvardClass, TableName
from starclass_db.models.orm.base import Base
from starclass_db.utils import CatalogId, Count, Decimal5, FloatNumeric, Measure, ShortStr, fk

# Blank is the source's "unknown" marker and is allowed alongside NULL
_HARVARD_OR_BLANK = ", ".join(f"'{c.value}'" for c in HarvardClass) + ", ''"


class StarRaw(Base):
    """
    Raw star records.

    Attributes
    ----------
    star_id : str
        Star identifier (primary key)
    num_planets : int | None
        Planet count as recorded by the source
    spectral_type : str | None
        Full spectral type string (e.g. ``G2V``)
    harvard_class : str | None
        Harvard class letter, blank or NULL when unknown
    yerkes_class : str | None
        Yerkes luminosity class, blank when unknown
    temperature_k : float | None
        Effective temperature in Kelvin, 0 when unknown
    radius_solar, mass_solar : float | None
        Radius and mass in solar units
    distance_pc : float | None
        Distance from Earth in parsecs
    planets : list[PlanetRaw]
        Planets naming this star as host
    """

    __tablename__ = TableName.STARS_RAW.value

    star_id: Mapped[CatalogId]

    num_planets: Mapped[Count]

    spectral_type: Mapped[ShortStr]

    harvard_class: Mapped[str | None] = mapped_column(String(1))

    yerkes_class: Mapped[str | None] = mapped_column(String(5))

    temperature_k: Mapped[Measure]

    radius_solar: Mapped[Measure]

    mass_solar: Mapped[Measure]

    distance_pc: Mapped[Measure]

    planets: Mapped[list[PlanetRaw]] = relationship(back_populates="host")

    __table_args__ = (
        CheckConstraint(
            f"harvard_class IN ({_HARVARD_OR_BLANK})",
            name="ck_stars_raw_harvard_class",
        ),
    )

    def __repr__(self) -> str:
        return f"StarRaw({self.star_id!r})"


class PlanetRaw(Base):
    """
    Raw exoplanet records.

    ``orbit_period`` and ``orbit_axis_au`` use 0 for unknown.
    """

    __tablename__ = TableName.PLANETS_RAW.value

    planet_id: Mapped[CatalogId]

    host_id: Mapped[str] = fk(f"{TableName.STARS_RAW.value}.star_id", nullable=False)

    num_stars: Mapped[int | None] = mapped_column(SmallInteger)

    discovery_method: Mapped[str | None] = mapped_column(String(30))

    discovery_year: Mapped[int | None] = mapped_column(Integer)

    orbit_period: Mapped[Decimal5]

    orbit_axis_au: Mapped[Decimal5]

    earth_radii: Mapped[Decimal5]

    earth_masses: Mapped[Decimal5]

    m_msini: Mapped[str | None] = mapped_column(String(10))

    eccentricity: Mapped[float | None] = mapped_column(
        FloatNumeric(20, 10)
    )

    host: Mapped[StarRaw] = relationship(back_populates="planets")

    def __repr__(self) -> str:
        return f"PlanetRaw({self.planet_id!r}, host={self.host_id!r})"
