"""starclass_db: star and exoplanet catalog with cleaning views and reports."""

from __future__ import annotations

__version__ = "0.1.0"
