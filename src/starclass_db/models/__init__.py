"""Models for starclass_db: ORM tables/views and import schemas."""

from __future__ import annotations

from starclass_db.models.orm import (
    Base,
    HarvardSpectral,
    Planet,
    PlanetRaw,
    Star,
    StarRaw,
    ViewBase,
    YerkesSpectral,
)
from starclass_db.models.schemas import PlanetRawRecord, StarRawRecord

__all__ = [
    # ORM
    "Base",
    "HarvardSpectral",
    "Planet",
    "PlanetRaw",
    "Star",
    "StarRaw",
    "ViewBase",
    "YerkesSpectral",
    # Import schemas
    "PlanetRawRecord",
    "StarRawRecord",
]
