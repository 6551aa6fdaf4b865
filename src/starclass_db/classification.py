"""Temperature-based Harvard classification.

The same bound table drives both the SQL ``CASE`` expression used by the
``stars`` view and the pure Python helpers here, so a row classified in
the database and a value classified in memory always agree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import case

from starclass_db.constants import HARVARD_TEMPERATURE_BOUNDS, HarvardClass

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

__all__ = [
    "classify_temperature",
    "harvard_class_case",
    "resolve_harvard_class",
]


def classify_temperature(temperature_k: float | None) -> HarvardClass | None:
    """
    Map a temperature to its Harvard class.

    Parameters
    ----------
    temperature_k : float | None
        Effective temperature in Kelvin

    Returns
    -------
    HarvardClass | None
        First class whose lower bound the temperature reaches, or None
        for null, zero and negative temperatures

    Examples
    --------
    >>> classify_temperature(6500)
    <HarvardClass.F: 'F'>
    >>> classify_temperature(0) is None
    True
    """
    if temperature_k is None:
        return None
    for lower_bound, harvard_class in HARVARD_TEMPERATURE_BOUNDS:
        if temperature_k >= lower_bound:
            return harvard_class
    return None


def resolve_harvard_class(
    recorded: str | None, temperature_k: float | None
) -> str | None:
    """Return the recorded class if non-blank, else infer it from temperature."""
    if recorded:
        return recorded
    inferred = classify_temperature(temperature_k)
    return inferred.value if inferred is not None else None


def harvard_class_case(temperature: ColumnElement) -> ColumnElement:
    """
    Build the SQL ``CASE`` expression classifying ``temperature``.

    Unmatched values (null, zero, negative) fall through to NULL.
    """
    return case(
        *[
            (temperature >= lower_bound, harvard_class.value)
            for lower_bound, harvard_class in HARVARD_TEMPERATURE_BOUNDS
        ],
        else_=None,
    )
