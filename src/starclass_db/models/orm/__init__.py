"""SQLAlchemy 2.0 ORM models for starclass_db.

Split into logical modules:
- base.py - Base class for table-backed models
- reference.py - Classification reference tables (HarvardSpectral, YerkesSpectral)
- raw.py - Imported catalog rows (StarRaw, PlanetRaw)
- views.py - Cleaned views and their read-only mappings (Star, Planet)

Data flows one way: raw tables → views → reports. Nothing writes back
into an earlier stage.
"""

from __future__ import annotations

from starclass_db.models.orm.base import Base
from starclass_db.models.orm.raw import PlanetRaw, StarRaw
from starclass_db.models.orm.reference import HarvardSpectral, YerkesSpectral
from starclass_db.models.orm.views import Planet, Star, ViewBase

__all__ = [
    "Base",
    "HarvardSpectral",
    "Planet",
    "PlanetRaw",
    "Star",
    "StarRaw",
    "ViewBase",
    "YerkesSpectral",
]
