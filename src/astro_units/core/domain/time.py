"""
Time — Модель интервала времени

Immutable Pydantic модель. Каноническое значение — секунды (scalar);
минуты, часы, сутки, недели, юлианские годы и компоненты h m s
вычисляются из него.

Примеры:
    Time.from_hms(1, 1, 1, 0.1).sec               → 3661.1
    Time.from_days(0.3245).format(FORMAT_DEFAULT) → '07:47:16.8'
    Time.from_days(502).format(FORMAT_YEARS)      → '1.374 years'
"""

from numbers import Real
from typing import TYPE_CHECKING, ClassVar, Final

from astro_units.core.domain.quantity import SexagesimalQuantity
from astro_units.core.domain.units import (
    JULIAN_YEAR_DAYS,
    SEC_IN_DAY,
    SEC_PER_TIME_UNIT,
    TimeUnit,
    sec_per,
)
from astro_units.core.errors import InvalidUnitError
from astro_units.core.formatting import TemplateGrammar
from astro_units.core.math.sexagesimal import compose

if TYPE_CHECKING:
    from astro_units.core.domain.angle import Angle

# =============================================================================
# FORMAT TEMPLATES
# =============================================================================

# 07:47:16.8
FORMAT_DEFAULT: Final[str] = "0h:0m:0s.3f"

# 07ʰ47ᵐ16ˢ.8
FORMAT_HMS: Final[str] = "0hʰ0mᵐ0sˢ.3f"

# 7h 47m 16.8s
FORMAT_SPACED: Final[str] = "h\\h m\\m s.3f\\s"

# 1.767 years
FORMAT_YEARS: Final[str] = "3Y year\\s"

# 2.046 weeks
FORMAT_WEEKS: Final[str] = "3W week\\s"

# 1.325 days
FORMAT_DAYS: Final[str] = "3D day\\s"

# 7.788 hours
FORMAT_HOURS: Final[str] = "3H \\hour\\s"

# 467.28 min
FORMAT_MIN: Final[str] = "3M \\min"

# 86.4 sec
FORMAT_SEC: Final[str] = "3S \\sec"

TIME_GRAMMAR: Final[TemplateGrammar] = TemplateGrammar(
    major="h",
    minor1="m",
    minor2="s",
    continuous="YWDHMS",
    major_width=2,
)

# Буква continuous-токена → единица времени
_CONTINUOUS_UNITS: Final[dict[str, TimeUnit]] = {
    "Y": TimeUnit.YEARS,
    "W": TimeUnit.WEEKS,
    "D": TimeUnit.DAYS,
    "H": TimeUnit.HOURS,
    "M": TimeUnit.MIN,
    "S": TimeUnit.SEC,
}


# =============================================================================
# TIME MODEL
# =============================================================================


class Time(SexagesimalQuantity):
    """
    Интервал времени.

    scalar хранится в секундах. Часы не ограничены сутками:
    Time.from_days(2).h == 48.
    """

    GRAMMAR: ClassVar[TemplateGrammar] = TIME_GRAMMAR
    FORMAT_DEFAULT: ClassVar[str] = FORMAT_DEFAULT
    FORMAT_HMS: ClassVar[str] = FORMAT_HMS
    FORMAT_SPACED: ClassVar[str] = FORMAT_SPACED
    FORMAT_YEARS: ClassVar[str] = FORMAT_YEARS
    FORMAT_WEEKS: ClassVar[str] = FORMAT_WEEKS
    FORMAT_DAYS: ClassVar[str] = FORMAT_DAYS
    FORMAT_HOURS: ClassVar[str] = FORMAT_HOURS
    FORMAT_MIN: ClassVar[str] = FORMAT_MIN
    FORMAT_SEC: ClassVar[str] = FORMAT_SEC

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_unit(cls, value: float, unit: TimeUnit | str) -> "Time":
        """
        Интервал из значения в указанной единице.

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        return cls(scalar=value * sec_per(unit))

    @classmethod
    def from_sec(cls, sec: float) -> "Time":
        return cls(scalar=sec)

    @classmethod
    def from_min(cls, minutes: float) -> "Time":
        return cls.from_unit(minutes, TimeUnit.MIN)

    @classmethod
    def from_hours(cls, hours: float) -> "Time":
        return cls.from_unit(hours, TimeUnit.HOURS)

    @classmethod
    def from_days(cls, days: float) -> "Time":
        return cls.from_unit(days, TimeUnit.DAYS)

    @classmethod
    def from_weeks(cls, weeks: float) -> "Time":
        return cls.from_unit(weeks, TimeUnit.WEEKS)

    @classmethod
    def from_years(cls, years: float, days_per_year: float = JULIAN_YEAR_DAYS) -> "Time":
        """
        Интервал из количества лет.

        Args:
            years: Годы
            days_per_year: Суток в году (default: юлианский год 365.25)
        """
        return cls(scalar=years * SEC_IN_DAY * days_per_year)

    @classmethod
    def from_hms(cls, h: float, m: float = 0, s: float = 0, f: float = 0) -> "Time":
        """
        Интервал из компонент h m s и дробной части секунды.

        Знак задаётся первой ненулевой компонентой:
        from_hms(0, 0, -10) — минус 10 секунд.
        """
        return cls(scalar=compose(h, m, s, f))

    @classmethod
    def from_angle(cls, angle: "Angle", interval: "Time | None" = None) -> "Time":
        """Доля интервала, соответствующая углу (360° = интервал)"""
        return angle.to_time(interval)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def to(self, unit: TimeUnit | str) -> float:
        """
        Значение интервала в указанной единице.

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        return self.scalar / sec_per(unit)

    @property
    def years(self) -> float:
        """Юлианские годы"""
        return self.scalar / SEC_PER_TIME_UNIT[TimeUnit.YEARS]

    @property
    def weeks(self) -> float:
        return self.scalar / SEC_PER_TIME_UNIT[TimeUnit.WEEKS]

    @property
    def days(self) -> float:
        return self.scalar / SEC_IN_DAY

    @property
    def hours(self) -> float:
        return self.scalar / 3600

    @property
    def min(self) -> float:
        return self.scalar / 60

    @property
    def sec(self) -> float:
        return self.scalar

    @property
    def h(self) -> int:
        """Целые часы (абсолютное значение, без ограничения сутками)"""
        return self.components.major

    @property
    def m(self) -> int:
        """Целые минуты"""
        return self.components.minor1

    @property
    def s(self) -> int:
        """Целые секунды"""
        return self.components.minor2

    def continuous_value(self, letter: str) -> float:
        unit = _CONTINUOUS_UNITS.get(letter)
        if unit is None:
            raise InvalidUnitError(letter, "Time template", list(_CONTINUOUS_UNITS))
        return self.to(unit)

    # -------------------------------------------------------------------------
    # Functions
    # -------------------------------------------------------------------------

    def _factor_of(self, other: "Real | Time") -> float:
        if isinstance(other, Time):
            return other.sec
        return float(other)
