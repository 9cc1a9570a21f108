"""
Distance — Модель расстояния произвольной точности

Каноническое значение — метры в виде Decimal. Конверсии выполняются
в отдельном decimal-контексте высокой точности, поэтому астрономические
масштабы (pc ↔ pm) не теряют значащих цифр.

Форматирование — printf-спецификация плюс суффикс единицы:

    Distance.from_km(23).format("%3.3f mi")   → '14.292 mi'
    Distance.from_pc(1).format("%1.2f km")    → '3.09e+13 km'
"""

import logging
import re
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, Field, PrivateAttr

from astro_units.core.domain.units import DistanceUnit, meters_per, parse_unit
from astro_units.core.math.numerical_safeguards import (
    Numeric,
    to_decimal,
    trim_decimal_string,
)

if TYPE_CHECKING:
    from astro_units.core.domain.angle import Angle

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Значащих цифр в decimal-контексте расстояний
DISTANCE_PRECISION: Final[int] = 120

_DISTANCE_CONTEXT: Final[Context] = Context(prec=DISTANCE_PRECISION, rounding=ROUND_HALF_EVEN)

# printf-спецификация по умолчанию (за ней следует единица)
FORMAT_DEFAULT_SPEC: Final[str] = "%3.3f "

# Порог, выше которого значение выводится в scientific notation
SCIENTIFIC_THRESHOLD: Final[float] = 10e9

# Спецификация printf + суффикс единицы
_FORMAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(%[-+ 0#]*\d*(?:\.\d+)?[deEfFgG])(.*)", re.DOTALL
)
_CONVERSION_CHAR: Final[re.Pattern[str]] = re.compile(r"[deEfFgG]$")


# =============================================================================
# DISTANCE MODEL
# =============================================================================


class Distance(BaseModel):
    """
    Расстояние.

    meters — Decimal, единственное хранимое числовое значение.
    display_unit — единица строкового представления по умолчанию.
    """

    meters: Decimal = Field(..., description="Расстояние в метрах")
    display_unit: DistanceUnit = Field(default=DistanceUnit.M, description="Единица отображения")

    model_config = {"frozen": True}  # Immutable

    _format: str | None = PrivateAttr(default=None)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, value: Numeric, unit: DistanceUnit | str) -> "Distance":
        """
        Расстояние из значения в указанной единице.

        value можно передать строкой, чтобы не терять точность float.

        Raises:
            InvalidUnitError: Если единица неизвестна

        Examples:
            >>> Distance.create("1.5", "au").km
            224396806.05
        """
        unit = parse_unit(DistanceUnit, unit)
        meters = _DISTANCE_CONTEXT.multiply(to_decimal(value), meters_per(unit))
        return cls(meters=meters, display_unit=unit)

    @classmethod
    def from_m(cls, m: Numeric) -> "Distance":
        return cls.create(m, DistanceUnit.M)

    @classmethod
    def from_km(cls, km: Numeric) -> "Distance":
        return cls.create(km, DistanceUnit.KM)

    @classmethod
    def from_mi(cls, mi: Numeric) -> "Distance":
        return cls.create(mi, DistanceUnit.MI)

    @classmethod
    def from_au(cls, au: Numeric) -> "Distance":
        return cls.create(au, DistanceUnit.AU)

    @classmethod
    def from_ly(cls, ly: Numeric) -> "Distance":
        return cls.create(ly, DistanceUnit.LY)

    @classmethod
    def from_pc(cls, pc: Numeric) -> "Distance":
        return cls.create(pc, DistanceUnit.PC)

    @classmethod
    def from_parallax(cls, parallax: "Angle") -> "Distance":
        """
        Расстояние по годичному параллаксу: pc = 1 / parallax(asec).

        Raises:
            ZeroDivisionError: Если параллакс равен нулю
        """
        return cls.from_pc(1 / parallax.asec)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def to(self, unit: DistanceUnit | str, as_string: bool = False) -> float | str:
        """
        Значение расстояния в указанной единице.

        Args:
            unit: Единица
            as_string: Вернуть точную десятичную строку вместо float

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        value = _DISTANCE_CONTEXT.divide(self.meters, meters_per(unit))
        if as_string:
            return trim_decimal_string(format(value, "f"))
        return float(value)

    @property
    def m(self) -> float:
        return self.to(DistanceUnit.M)

    @property
    def km(self) -> float:
        return self.to(DistanceUnit.KM)

    @property
    def mi(self) -> float:
        return self.to(DistanceUnit.MI)

    @property
    def au(self) -> float:
        return self.to(DistanceUnit.AU)

    @property
    def ly(self) -> float:
        return self.to(DistanceUnit.LY)

    @property
    def pc(self) -> float:
        return self.to(DistanceUnit.PC)

    @property
    def parallax(self) -> "Angle":
        """Годичный параллакс: asec = 1 / pc"""
        from astro_units.core.domain.angle import Angle

        return Angle.from_asec(1 / self.pc)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _new(self, meters: Decimal) -> "Distance":
        return type(self)(meters=meters, display_unit=self.display_unit)

    def add(self, other: "Distance") -> "Distance":
        return self._new(_DISTANCE_CONTEXT.add(self.meters, other.meters))

    def subtract(self, other: "Distance") -> "Distance":
        return self._new(_DISTANCE_CONTEXT.subtract(self.meters, other.meters))

    def negate(self) -> "Distance":
        return self._new(_DISTANCE_CONTEXT.minus(self.meters))

    def with_unit(self, unit: DistanceUnit | str) -> "Distance":
        """Копия с другой единицей отображения"""
        return type(self)(meters=self.meters, display_unit=parse_unit(DistanceUnit, unit))

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    @property
    def active_format(self) -> str:
        """Последний применённый формат (или "%3.3f <display_unit>")"""
        return self._format or FORMAT_DEFAULT_SPEC + self.display_unit.value

    def format(self, fmt: str) -> str:
        """
        Форматирование printf-спецификацией с суффиксом единицы.

        - "%3.3f km" — значение в km с тремя знаками
        - Значение, равное нулю после форматирования, или больше 10e9,
          выводится в scientific notation (%e)
        - Строка без printf-спецификации ("mi") — новая единица для
          предыдущей спецификации

        Raises:
            InvalidUnitError: Если суффикс не является единицей расстояния
        """
        match = _FORMAT_PATTERN.fullmatch(fmt)
        if match is None:
            previous = _FORMAT_PATTERN.fullmatch(self.active_format)
            spec, suffix = previous.group(1), previous.group(2)
            return self.format(spec + suffix.replace(suffix.strip(), "") + fmt)

        spec, suffix = match.group(1), match.group(2)
        value = self.to(suffix.strip())

        if float(spec % value) == 0 or value > SCIENTIFIC_THRESHOLD:
            spec = _CONVERSION_CHAR.sub("e", spec)
            logger.debug("Distance %s rendered in scientific notation", value)

        self._format = fmt
        return (spec % value) + suffix

    # -------------------------------------------------------------------------
    # Overrides
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.format(self.active_format)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.meters == other.meters

    def __hash__(self) -> int:
        return hash(("Distance", self.meters))

    def __add__(self, other: "Distance") -> "Distance":
        return self.add(other)

    def __sub__(self, other: "Distance") -> "Distance":
        return self.subtract(other)

    def __neg__(self) -> "Distance":
        return self.negate()

