"""
Angle — Модель геометрического угла

Immutable Pydantic модель. Каноническое значение — угловые секунды
(scalar); градусы, радианы, arcmin, mas и компоненты ° ' " вычисляются
из него.

Примеры:
    Angle.from_dms(12, 34, 56.789).deg            → 12.58244138...
    Angle.from_deg(370).norm().deg                → 10.0
    Angle.from_deg(-12.5).format("d m s")         → '-12 30 0'
"""

import math
from numbers import Real
from typing import ClassVar, Final

from astro_units.core.domain.quantity import SexagesimalQuantity
from astro_units.core.domain.time import Time
from astro_units.core.domain.units import (
    ASEC_IN_DEG,
    DEG_IN_TURN,
    SEC_IN_DAY,
    AngleUnit,
    asec_per,
)
from astro_units.core.errors import InvalidUnitError
from astro_units.core.formatting import TemplateGrammar
from astro_units.core.math.sexagesimal import compose

# =============================================================================
# FORMAT TEMPLATES
# =============================================================================

# -012°34'56".123
FORMAT_DEFAULT: Final[str] = "+0d°0m'0s\".3f"

# -12°34'56".1
FORMAT_COMPACT: Final[str] = "d°m's\".1f"

# -012 34 56.123
FORMAT_SPACED: Final[str] = "+0d 0m 0s.3f"

# -012:34:56.123
FORMAT_COLON: Final[str] = "+0d:0m:0s.3f"

# 12.5822565
FORMAT_DECIMAL: Final[str] = "9D"

ANGLE_GRAMMAR: Final[TemplateGrammar] = TemplateGrammar(
    major="d",
    minor1="m",
    minor2="s",
    continuous="DR",
    major_width=3,
    words=(AngleUnit.ASEC.value, AngleUnit.AMIN.value, AngleUnit.MAS.value),
)


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(SexagesimalQuantity):
    """
    Геометрический угол.

    scalar хранится в угловых секундах. Все операции возвращают новый
    экземпляр.
    """

    GRAMMAR: ClassVar[TemplateGrammar] = ANGLE_GRAMMAR
    FORMAT_DEFAULT: ClassVar[str] = FORMAT_DEFAULT
    FORMAT_COMPACT: ClassVar[str] = FORMAT_COMPACT
    FORMAT_SPACED: ClassVar[str] = FORMAT_SPACED
    FORMAT_COLON: ClassVar[str] = FORMAT_COLON
    FORMAT_DECIMAL: ClassVar[str] = FORMAT_DECIMAL

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_unit(cls, value: float, unit: AngleUnit | str) -> "Angle":
        """
        Угол из значения в указанной единице.

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        return cls(scalar=value * asec_per(unit))

    @classmethod
    def from_asec(cls, asec: float) -> "Angle":
        return cls(scalar=asec)

    @classmethod
    def from_deg(cls, deg: float) -> "Angle":
        return cls.from_unit(deg, AngleUnit.DEG)

    @classmethod
    def from_rad(cls, rad: float) -> "Angle":
        return cls.from_deg(math.degrees(rad))

    @classmethod
    def from_amin(cls, amin: float) -> "Angle":
        return cls.from_unit(amin, AngleUnit.AMIN)

    @classmethod
    def from_mas(cls, mas: float) -> "Angle":
        return cls(scalar=mas / 1000)

    @classmethod
    def from_dms(cls, d: float, m: float = 0, s: float = 0, f: float = 0) -> "Angle":
        """
        Угол из компонент ° ' " и дробной части секунды.

        Знак задаётся первой ненулевой компонентой:
        from_dms(0, -30) — минус полградуса, from_dms(12, -34, 56) — плюс.

        Args:
            d: Градусы
            m: Угловые минуты
            s: Угловые секунды
            f: Дробная часть угловой секунды (например, 0.1234)
        """
        return cls(scalar=compose(d, m, s, f))

    @classmethod
    def from_time(cls, time: Time, interval: Time | None = None) -> "Angle":
        """
        Угол как доля оборота, пройденная временем внутри интервала.

        deg = time.sec / interval.sec * 360 (интервал по умолчанию — сутки)

        Examples:
            >>> Angle.from_time(Time.from_hours(6)).deg
            90.0
        """
        interval_sec = interval.sec if interval is not None else SEC_IN_DAY
        return cls.from_deg(time.sec / interval_sec * DEG_IN_TURN)

    @classmethod
    def pi(cls) -> "Angle":
        """Угол π радиан"""
        return cls.from_rad(math.pi)

    @classmethod
    def atan2(cls, y: "Angle | float", x: "Angle | float") -> "Angle":
        """
        Арктангенс y/x с учётом квадранта.

        Аргументы — углы или float в радианах.
        """
        y = y.rad if isinstance(y, Angle) else y
        x = x.rad if isinstance(x, Angle) else x
        return cls.from_rad(math.atan2(y, x))

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def to(self, unit: AngleUnit | str) -> float:
        """
        Значение угла в указанной единице.

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        return self.scalar / asec_per(unit)

    @property
    def deg(self) -> float:
        return self.scalar / ASEC_IN_DEG

    @property
    def rad(self) -> float:
        return math.radians(self.deg)

    @property
    def amin(self) -> float:
        return self.scalar / 60

    @property
    def asec(self) -> float:
        return self.scalar

    @property
    def mas(self) -> float:
        return self.scalar * 1000

    @property
    def d(self) -> int:
        """Целые градусы (абсолютное значение)"""
        return self.components.major

    @property
    def m(self) -> int:
        """Целые угловые минуты"""
        return self.components.minor1

    @property
    def s(self) -> int:
        """Целые угловые секунды"""
        return self.components.minor2

    def continuous_value(self, letter: str) -> float:
        if letter == "D":
            return self.deg
        if letter == "R":
            return self.rad
        if letter in self.GRAMMAR.words:
            return self.to(letter)
        allowed = [*self.GRAMMAR.continuous, *self.GRAMMAR.words]
        raise InvalidUnitError(letter, "Angle template", allowed)

    # -------------------------------------------------------------------------
    # Functions
    # -------------------------------------------------------------------------

    def _factor_of(self, other: "Real | Angle") -> float:
        if isinstance(other, Angle):
            return other.deg
        return float(other)

    def norm(self, lb: float = 0, ub: float = DEG_IN_TURN) -> "Angle":
        """
        Нормализация угла в интервал [lb, ub) градусов.

        Значение приводится по модулю ширины интервала и сдвигается
        к нижней границе. Если исходный угол отрицательный и кратен
        ширине интервала, результат равен ub (а не lb).

        Args:
            lb: Нижняя граница (градусы, default 0)
            ub: Верхняя граница (градусы, default 360)

        Raises:
            ValueError: Если ub <= lb

        Examples:
            >>> Angle.from_deg(370).norm().deg
            10.0
            >>> Angle.from_deg(-360).norm().deg
            360.0
        """
        if ub <= lb:
            raise ValueError(f"Upper bound must exceed lower bound, got [{lb}, {ub})")

        lb_asec = lb * ASEC_IN_DEG
        ub_asec = ub * ASEC_IN_DEG
        width = ub_asec - lb_asec

        remainder = math.fmod(self.scalar - lb_asec, width)
        if remainder < 0:
            remainder += width
            # -1e-12 + width округляется до width
            if remainder >= width:
                remainder = 0.0

        if self.scalar < 0 and math.fmod(self.scalar, width) == 0:
            return self._new(ub_asec)
        return self._new(remainder + lb_asec)

    def to_time(self, interval: Time | None = None) -> Time:
        """
        Доля интервала времени, соответствующая углу (360° = интервал).

        Examples:
            >>> Angle.from_deg(90).to_time().hours
            6.0
        """
        interval_sec = interval.sec if interval is not None else SEC_IN_DAY
        return Time.from_sec(self.deg / DEG_IN_TURN * interval_sec)
