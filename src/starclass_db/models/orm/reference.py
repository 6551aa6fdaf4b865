"""Reference classification tables: HarvardSpectral, YerkesSpectral."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from starclass_db.constants import HarvardClass, TableName
from starclass_db.models.orm.base import Base
from starclass_db.utils import FloatNumeric

_HARVARD_CODES = ", ".join(f"'{c.value}'" for c in HarvardClass)


class HarvardSpectral(Base):
    """
    Harvard spectral classes (temperature classification).

    Attributes
    ----------
    class_code : str
        Single-letter class code (O, B, A, F, G, K, M); column ``class``
    min_temperature_k : int | None
        Minimum effective temperature of the class in Kelvin
    chromaticity : str | None
        Apparent color description
    pct_main_sequence : float | None
        Expected fraction (0-1) of main-sequence stars in this class
    """

    __tablename__ = TableName.HARVARD_SPECTRAL.value

    class_code: Mapped[str] = mapped_column(
        "class",
        String(1),
        primary_key=True,
        comment="Harvard class code",
    )

    min_temperature_k: Mapped[int | None] = mapped_column(Integer)

    chromaticity: Mapped[str | None] = mapped_column(String(20))

    pct_main_sequence: Mapped[float | None] = mapped_column(
        FloatNumeric(20, 10)
    )

    __table_args__ = (
        CheckConstraint(
            f'"class" IN ({_HARVARD_CODES})',
            name="ck_harvard_spectral_class",
        ),
    )

    def __repr__(self) -> str:
        return f"HarvardSpectral({self.class_code!r}, {self.min_temperature_k})"


class YerkesSpectral(Base):
    """Yerkes luminosity classes (evolutionary stage)."""

    __tablename__ = TableName.YERKES_SPECTRAL.value

    lum_class: Mapped[str] = mapped_column(String(10), primary_key=True)

    star_description: Mapped[str | None] = mapped_column(String(50))

    def __repr__(self) -> str:
        return f"YerkesSpectral({self.lum_class!r})"
