"""Cleaned catalog views: Star, Planet.

The views are real database views created alongside the tables (hooked on
``Base.metadata`` create/drop), so they are recomputed on every read and
any change in the raw tables is visible immediately.

The ORM classes here map onto those views for querying only. They live on
a separate declarative base so ``Base.metadata.create_all`` never tries to
create them as tables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy import Double, Integer, SmallInteger, String, event, func, select
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from starclass_db.classification import harvard_class_case
from starclass_db.constants import TableName
from starclass_db.models.orm.base import Base
from starclass_db.models.orm.raw import PlanetRaw, StarRaw
from starclass_db.utils import FloatNumeric

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.engine import Connection

__all__ = [
    "Planet",
    "Star",
    "VIEW_DEFINITIONS",
    "ViewBase",
    "compile_view",
    "create_views",
    "drop_views",
]


def _star_view() -> Select:
    return select(
        StarRaw.star_id,
        StarRaw.num_planets,
        func.nullif(StarRaw.temperature_k, 0).label("temp_k"),
        func.coalesce(
            func.nullif(StarRaw.harvard_class, ""),
            # classify from the raw value: a sentinel 0 matches no range
            harvard_class_case(StarRaw.temperature_k),
        ).label("h_class"),
        func.nullif(StarRaw.yerkes_class, "").label("y_class"),
        StarRaw.radius_solar,
        StarRaw.mass_solar,
        StarRaw.distance_pc,
    )


def _planet_view() -> Select:
    return select(
        PlanetRaw.planet_id,
        PlanetRaw.host_id,
        PlanetRaw.num_stars,
        PlanetRaw.discovery_year,
        func.nullif(PlanetRaw.orbit_period, 0).label("orbit_earth_days"),
        func.nullif(PlanetRaw.orbit_axis_au, 0).label("orbit_sm_axis_au"),
        PlanetRaw.earth_radii,
        PlanetRaw.earth_masses,
        PlanetRaw.eccentricity,
    )


VIEW_DEFINITIONS: dict[str, Select] = {
    TableName.STARS.value: _star_view(),
    TableName.PLANETS.value: _planet_view(),
}


def compile_view(name: str, connection: Connection) -> str:
    """
    Render the ``CREATE VIEW`` statement for ``name`` in the connection's dialect.

    Parameters
    ----------
    name : str
        View name, a key of :data:`VIEW_DEFINITIONS`
    connection : Connection
        Connection whose dialect renders the statement

    Returns
    -------
    str
        DDL with all parameters inlined
    """
    compiled = VIEW_DEFINITIONS[name].compile(
        dialect=connection.dialect,
        compile_kwargs={"literal_binds": True},
    )
    return f"CREATE VIEW IF NOT EXISTS {name} AS {compiled}"


def create_views(connection: Connection) -> None:
    """Create all cleaning views (no-op for views that already exist)."""
    for name in VIEW_DEFINITIONS:
        ddl = compile_view(name, connection)
        logger.debug(f"create view {name}: {ddl}")
        connection.exec_driver_sql(ddl)


def drop_views(connection: Connection) -> None:
    """Drop all cleaning views if present."""
    for name in reversed(list(VIEW_DEFINITIONS)):
        connection.exec_driver_sql(f"DROP VIEW IF EXISTS {name}")


@event.listens_for(Base.metadata, "after_create")
def _create_views_after_tables(target, connection, **kw):
    create_views(connection)


@event.listens_for(Base.metadata, "before_drop")
def _drop_views_before_tables(target, connection, **kw):
    drop_views(connection)


class ViewBase(DeclarativeBase):
    """Base class for read-only mappings onto views."""


class Star(ViewBase):
    """
    Cleaned star (view ``stars``).

    Attributes
    ----------
    star_id : str
        Star identifier
    num_planets : int | None
        Planet count as recorded by the source
    temp_k : float | None
        Temperature in Kelvin, NULL where the raw value was 0
    h_class : str | None
        Recorded Harvard class, or the class inferred from temperature
    y_class : str | None
        Yerkes class, NULL where the raw value was blank
    radius_solar, mass_solar, distance_pc : float | None
        Passed through unchanged
    """

    __tablename__ = TableName.STARS.value

    star_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    num_planets: Mapped[int | None] = mapped_column(Integer)
    temp_k: Mapped[float | None] = mapped_column(Double)
    h_class: Mapped[str | None] = mapped_column(String(1))
    y_class: Mapped[str | None] = mapped_column(String(5))
    radius_solar: Mapped[float | None] = mapped_column(Double)
    mass_solar: Mapped[float | None] = mapped_column(Double)
    distance_pc: Mapped[float | None] = mapped_column(Double)

    def __repr__(self) -> str:
        return f"Star({self.star_id!r}, {self.h_class!r}, {self.temp_k})"


class Planet(ViewBase):
    """Cleaned planet (view ``planets``); zero orbit period/axis become NULL."""

    __tablename__ = TableName.PLANETS.value

    planet_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    host_id: Mapped[str] = mapped_column(String(50))
    num_stars: Mapped[int | None] = mapped_column(SmallInteger)
    discovery_year: Mapped[int | None] = mapped_column(Integer)
    orbit_earth_days: Mapped[float | None] = mapped_column(
        FloatNumeric(20, 5)
    )
    orbit_sm_axis_au: Mapped[float | None] = mapped_column(
        FloatNumeric(20, 5)
    )
    earth_radii: Mapped[float | None] = mapped_column(FloatNumeric(20, 5))
    earth_masses: Mapped[float | None] = mapped_column(
        FloatNumeric(20, 5)
    )
    eccentricity: Mapped[float | None] = mapped_column(
        FloatNumeric(20, 10)
    )

    def __repr__(self) -> str:
        return f"Planet({self.planet_id!r}, host={self.host_id!r})"
