"""Analytical report statements over the cleaned catalog.

Every function returns a SQLAlchemy ``Select``; nothing is executed here.
Keyword arguments default to the constants of the canonical questions
(Leo, blue stars, GV stars within 20 pc, ...).

Reports that must list every reference class, even classes without a
single matching star, select from the reference table and outer-join the
``stars`` view, never the other way round.
"""

from __future__ import annotations

from sqlalchemy import Double, cast, func, select
from sqlalchemy.orm import aliased

from starclass_db.constants import LIGHT_YEARS_PER_PARSEC
from starclass_db.models.orm import HarvardSpectral, Planet, Star, YerkesSpectral

__all__ = [
    "above_class_average",
    "blue_stars",
    "class_distribution",
    "class_temperatures",
    "constellation_distances",
    "habitable_candidates",
    "harvard_reference",
    "max_star_systems",
    "min_temperature_check",
    "planet_count_mismatches",
    "yerkes_frequency",
    "yerkes_reference",
]


def _share_of_total(count):
    """Group count divided by the grand total of all group counts."""
    total = func.sum(count).over()
    return func.coalesce(cast(count, Double) / func.nullif(total, 0), 0.0)


def constellation_distances(constellation: str = "leo"):
    """Stars whose identifier names ``constellation`` (case-insensitive)."""
    return (
        select(Star.star_id, Star.distance_pc)
        .where(Star.star_id.icontains(constellation, autoescape=True))
        .order_by(Star.star_id)
    )


def blue_stars(color: str = "blue"):
    """Stars whose class chromaticity mentions ``color``, hottest first."""
    return (
        select(
            Star.star_id,
            Star.h_class,
            Star.temp_k,
            HarvardSpectral.chromaticity,
        )
        .join(HarvardSpectral, Star.h_class == HarvardSpectral.class_code)
        .where(HarvardSpectral.chromaticity.icontains(color, autoescape=True))
        .order_by(Star.temp_k.desc().nulls_last(), Star.star_id)
    )


def class_temperatures():
    """Mean temperature of every Harvard class; NULL for empty classes."""
    avg_temp = func.avg(Star.temp_k).label("avg_temp_k")
    return (
        select(HarvardSpectral.class_code.label("class"), avg_temp)
        .select_from(HarvardSpectral)
        .outerjoin(Star, Star.h_class == HarvardSpectral.class_code)
        .group_by(HarvardSpectral.class_code)
        .order_by(avg_temp.desc().nulls_last(), HarvardSpectral.class_code)
    )


def habitable_candidates(
    max_distance_pc: float = 20.0,
    harvard_class: str = "G",
    yerkes_class: str = "V",
):
    """
    Planets of nearby stars of the Sun's spectral class (GV by default).

    Columns: planet_id, distance_pc, light_years.
    """
    return (
        select(
            Planet.planet_id,
            Star.distance_pc,
            (Star.distance_pc * LIGHT_YEARS_PER_PARSEC).label("light_years"),
        )
        .select_from(Planet)
        .join(Star, Planet.host_id == Star.star_id)
        .where(
            Star.distance_pc < max_distance_pc,
            Star.h_class == harvard_class,
            Star.y_class == yerkes_class,
        )
        .order_by(Star.distance_pc, Planet.planet_id)
    )


def max_star_systems():
    """Planets in the system(s) with the most stars; ties are all kept."""
    # global maximum: must not correlate with the outer planets
    max_stars = select(func.max(Planet.num_stars)).correlate(None).scalar_subquery()
    return (
        select(Planet.planet_id, Planet.host_id, Planet.num_stars)
        .where(Planet.num_stars == max_stars)
        .order_by(Planet.planet_id)
    )


def above_class_average():
    """Stars hotter than the mean temperature of their own Harvard class."""
    peer = aliased(Star)
    class_avg = (
        select(func.avg(peer.temp_k))
        .where(peer.h_class == Star.h_class)
        .scalar_subquery()
    )
    return (
        select(Star.star_id, Star.h_class, Star.temp_k)
        .where(Star.temp_k > class_avg)
        .order_by(Star.h_class, Star.star_id)
    )


def yerkes_frequency():
    """
    Share of stars in each Yerkes class, most common first.

    Classes without stars are listed with a share of 0.
    """
    share = _share_of_total(func.count(Star.star_id)).label("pct_of_stars")
    return (
        select(YerkesSpectral.lum_class, YerkesSpectral.star_description, share)
        .select_from(YerkesSpectral)
        .outerjoin(Star, Star.y_class == YerkesSpectral.lum_class)
        .group_by(YerkesSpectral.lum_class, YerkesSpectral.star_description)
        .order_by(share.desc(), YerkesSpectral.lum_class)
    )


def min_temperature_check():
    """Reference minimum temperature vs. coolest observed star per class."""
    return (
        select(
            HarvardSpectral.class_code.label("class"),
            HarvardSpectral.min_temperature_k,
            func.min(Star.temp_k).label("actual_min_k"),
        )
        .select_from(HarvardSpectral)
        .outerjoin(Star, Star.h_class == HarvardSpectral.class_code)
        .group_by(HarvardSpectral.class_code, HarvardSpectral.min_temperature_k)
        .order_by(HarvardSpectral.min_temperature_k, HarvardSpectral.class_code)
    )


def planet_count_mismatches():
    """
    Stars whose linked planet rows disagree with their recorded planet count.

    Inner join: stars without any linked planet are not considered, even
    when their recorded count is nonzero.
    """
    linked = func.count(Planet.planet_id)
    return (
        select(
            Star.star_id,
            linked.label("count_planets"),
            Star.num_planets.label("num_of_planets"),
        )
        .join(Planet, Star.star_id == Planet.host_id)
        .group_by(Star.star_id, Star.num_planets)
        .having(linked != Star.num_planets)
        .order_by(Star.star_id)
    )


def class_distribution():
    """Expected vs. observed share of each Harvard class, hottest first."""
    share = _share_of_total(func.count(Star.star_id)).label("pct_actual")
    return (
        select(
            HarvardSpectral.class_code.label("class"),
            HarvardSpectral.chromaticity,
            HarvardSpectral.pct_main_sequence.label("pct_expected"),
            share,
        )
        .select_from(HarvardSpectral)
        .outerjoin(Star, Star.h_class == HarvardSpectral.class_code)
        .group_by(
            HarvardSpectral.class_code,
            HarvardSpectral.chromaticity,
            HarvardSpectral.pct_main_sequence,
            HarvardSpectral.min_temperature_k,
        )
        .order_by(HarvardSpectral.min_temperature_k.desc())
    )


def harvard_reference():
    return select(
        HarvardSpectral.class_code.label("class"),
        HarvardSpectral.min_temperature_k,
        HarvardSpectral.chromaticity,
        HarvardSpectral.pct_main_sequence,
    ).order_by(HarvardSpectral.min_temperature_k.desc())


def yerkes_reference():
    return select(YerkesSpectral.lum_class, YerkesSpectral.star_description).order_by(
        YerkesSpectral.lum_class
    )
