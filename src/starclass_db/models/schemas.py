"""Pydantic schemas for the import boundary.

These schemas validate rows read from catalog CSV files before they are
turned into ORM objects. Field aliases are the column headers used by the
source catalog (``Star_ID``, ``Num_of_Planets``, ...); the snake_case field
names are accepted too.

Sentinel values are kept as delivered: a temperature of 0 or a blank
class stays 0 or blank in the raw tables and is cleaned by the views.
Only empty numeric cells become None, since they cannot be stored as
numbers.

Examples
--------
>>> record = StarRawRecord.model_validate(
...     {"Star_ID": "alf Leo", "Harvard_Class": "B", "Temperature_K": "12460"}
... )
>>> star = StarRaw(**record.model_dump())
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "PlanetRawRecord",
    "StarRawRecord",
]


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class StarRawRecord(BaseModel):
    """Schema for one ``stars_raw`` row."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    star_id: str = Field(..., alias="Star_ID", min_length=1, max_length=50)
    num_planets: int | None = Field(None, alias="Num_of_Planets", ge=0)
    spectral_type: str | None = Field(None, alias="Spectral_Type", max_length=20)
    harvard_class: str | None = Field(
        None,
        alias="Harvard_Class",
        pattern="^[OBAFGKM]?$",
        description="Harvard class letter, blank when unknown",
    )
    yerkes_class: str | None = Field(None, alias="Yerkes_Class", max_length=5)
    temperature_k: float | None = Field(None, alias="Temperature_K")
    radius_solar: float | None = Field(None, alias="Radius_Solar")
    mass_solar: float | None = Field(None, alias="Mass_Solar")
    distance_pc: float | None = Field(None, alias="Distance_Pc")

    @field_validator(
        "num_planets",
        "temperature_k",
        "radius_solar",
        "mass_solar",
        "distance_pc",
        mode="before",
    )
    @classmethod
    def _empty_number(cls, value):
        return _blank_to_none(value)


class PlanetRawRecord(BaseModel):
    """Schema for one ``planets_raw`` row."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    planet_id: str = Field(..., alias="Planet_ID", min_length=1, max_length=50)
    host_id: str = Field(..., alias="Host_ID", min_length=1, max_length=50)
    num_stars: int | None = Field(None, alias="Num_Stars", ge=0)
    discovery_method: str | None = Field(None, alias="Discovery_Method", max_length=30)
    discovery_year: int | None = Field(None, alias="Discovery_Year")
    orbit_period: float | None = Field(None, alias="Orbit_Period")
    orbit_axis_au: float | None = Field(None, alias="Orbit_Axis_AU")
    earth_radii: float | None = Field(None, alias="Earth_Radii")
    earth_masses: float | None = Field(None, alias="Earth_Masses")
    m_msini: str | None = Field(None, alias="M_Msini", max_length=10)
    eccentricity: float | None = Field(None, alias="Eccentricity")

    @field_validator(
        "num_stars",
        "discovery_year",
        "orbit_period",
        "orbit_axis_au",
        "earth_radii",
        "earth_masses",
        "eccentricity",
        mode="before",
    )
    @classmethod
    def _empty_number(cls, value):
        return _blank_to_none(value)
