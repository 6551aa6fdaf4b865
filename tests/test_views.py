"""Tests for the cleaning views (stars, planets)."""

from __future__ import annotations

import pytest
from sqlalchemy import select

from starclass_db.classification import resolve_harvard_class
from starclass_db.models.orm import Planet, PlanetRaw, Star, StarRaw

from conftest import make_stars


def _stars(session) -> dict[str, Star]:
    return {s.star_id: s for s in session.scalars(select(Star))}


class TestStarView:
    """Test the stars view (classifier/cleaner)."""

    def test_one_row_per_raw_star(self, catalog_session):
        raw_ids = set(catalog_session.scalars(select(StarRaw.star_id)))
        view_ids = list(catalog_session.scalars(select(Star.star_id)))
        assert len(view_ids) == len(raw_ids)
        assert set(view_ids) == raw_ids

    def test_zero_temperature_is_null(self, catalog_session):
        star = _stars(catalog_session)["Zero Temp"]
        assert star.temp_k is None

    def test_zero_temperature_has_no_class(self, catalog_session):
        """A raw 0 K matches none of the ranges (not M)."""
        assert _stars(catalog_session)["Zero Temp"].h_class is None

    def test_recorded_class_trusted(self, catalog_session):
        """Recorded G kept although 5100 K would classify as K."""
        star = _stars(catalog_session)["HD 5100"]
        assert star.h_class == "G"
        assert star.temp_k == pytest.approx(5100)

    def test_blank_class_inferred(self, catalog_session):
        stars = _stars(catalog_session)
        assert stars["HD 6500"].h_class == "F"
        assert stars["83 Leo B"].h_class == "K"

    def test_null_class_inferred(self, catalog_session):
        assert _stars(catalog_session)["Null Class"].h_class == "M"

    def test_blank_yerkes_is_null(self, catalog_session):
        stars = _stars(catalog_session)
        assert stars["HD 6500"].y_class is None
        assert stars["51 Peg"].y_class == "V"

    def test_pass_through_columns(self, catalog_session):
        star = _stars(catalog_session)["gam Cep"]
        assert star.num_planets == 3
        assert star.radius_solar == pytest.approx(4.9)
        assert star.mass_solar == pytest.approx(1.4)
        assert star.distance_pc == pytest.approx(13.8)

    def test_matches_python_classifier(self, catalog_session):
        """View classification agrees with resolve_harvard_class for every row."""
        stars = _stars(catalog_session)
        for raw in make_stars():
            expected = resolve_harvard_class(raw.harvard_class, raw.temperature_k)
            assert stars[raw.star_id].h_class == expected, raw.star_id

    def test_raw_changes_visible_immediately(self, catalog_session):
        """Views are not materialized: raw updates show up on the next read."""
        raw = catalog_session.get(StarRaw, "HD 6500")
        raw.temperature_k = 4000.0
        catalog_session.flush()
        catalog_session.expire_all()

        star = catalog_session.get(Star, "HD 6500")
        assert star.h_class == "K"
        assert star.temp_k == pytest.approx(4000)

    @pytest.mark.parametrize(
        ("temperature", "expected"),
        [(6500.0, "F"), (30000.0, "O"), (29999.99, "B"), (1.0, "M"), (-5.0, None)],
    )
    def test_boundaries(self, session, temperature, expected):
        session.add(StarRaw(star_id="probe", harvard_class="", temperature_k=temperature))
        session.flush()
        assert session.get(Star, "probe").h_class == expected


class TestPlanetView:
    """Test the planets view (normalizer)."""

    def test_one_row_per_raw_planet(self, catalog_session):
        raw_count = len(catalog_session.scalars(select(PlanetRaw.planet_id)).all())
        assert len(catalog_session.scalars(select(Planet)).all()) == raw_count

    def test_zero_orbit_is_null(self, catalog_session):
        planet = catalog_session.get(Planet, "gam Cep c")
        assert planet.orbit_earth_days is None
        assert planet.orbit_sm_axis_au is None

    def test_orbit_passes_through(self, catalog_session):
        planet = catalog_session.get(Planet, "51 Peg b")
        assert planet.orbit_earth_days == pytest.approx(4.23)
        assert planet.orbit_sm_axis_au == pytest.approx(0.05)
        assert planet.host_id == "51 Peg"
        assert planet.discovery_year == 1995

    def test_reduced_columns(self):
        columns = set(Planet.__table__.columns.keys())
        assert "m_msini" not in columns
        assert "discovery_method" not in columns
        assert {"orbit_earth_days", "orbit_sm_axis_au", "eccentricity"} <= columns

    def test_fixed_point_columns_are_float(self, catalog_session):
        planet = catalog_session.get(Planet, "51 Peg b")
        for value in (
            planet.orbit_earth_days,
            planet.orbit_sm_axis_au,
            planet.earth_masses,
            planet.eccentricity,
        ):
            assert isinstance(value, float)

    def test_raw_fixed_point_columns_are_float(self, catalog_session):
        raw = catalog_session.get(PlanetRaw, "51 Peg b")
        assert isinstance(raw.orbit_period, float)
        assert isinstance(raw.eccentricity, float)
