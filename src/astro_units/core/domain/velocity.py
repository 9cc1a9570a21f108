"""
Velocity — Модель скорости

Скорость хранится как пара (расстояние, время): Velocity.from_kmh(360) —
это 360 km за 1 час. Представления в любых единицах вычисляются из пары,
поэтому конверсия не накапливает ошибку промежуточных единиц.

Строковое представление: "<значение> <подпись единицы>", значение
округляется до decimal_places знаков (half away from zero).
"""

from types import MappingProxyType
from typing import Final, Mapping

from pydantic import BaseModel, Field

from astro_units.core.domain.distance import Distance
from astro_units.core.domain.time import Time
from astro_units.core.domain.units import (
    JULIAN_YEAR_DAYS,
    KMS_IN_PCY,
    SPEED_OF_LIGHT_MS,
    VELOCITY_LABELS,
    VelocityUnit,
    parse_unit,
)
from astro_units.core.math.numerical_safeguards import format_rounded, to_decimal

# Знаков после запятой в строковом представлении по умолчанию
DEFAULT_DECIMAL_PLACES: Final[int] = 3

# Единица → имя представления (свойство <имя> и конструктор from_<имя>)
_UNIT_ATTRS: Final[Mapping[VelocityUnit, str]] = MappingProxyType(
    {
        VelocityUnit.MS: "ms",
        VelocityUnit.KMS: "kms",
        VelocityUnit.KMH: "kmh",
        VelocityUnit.KMD: "kmd",
        VelocityUnit.MPH: "mph",
        VelocityUnit.AUD: "aud",
        VelocityUnit.PCY: "pcy",
    }
)


class Velocity(BaseModel):
    """
    Скорость как отношение расстояния ко времени.

    Attributes:
        dist: Пройденное расстояние
        time: Время прохождения
        unit: Единица отображения
        decimal_places: Знаков после запятой в str()
    """

    dist: Distance
    time: Time
    unit: VelocityUnit = Field(default=VelocityUnit.MS, description="Единица отображения")
    decimal_places: int = Field(default=DEFAULT_DECIMAL_PLACES, ge=0)

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_ms(cls, ms: float) -> "Velocity":
        return cls(dist=Distance.from_m(ms), time=Time.from_sec(1), unit=VelocityUnit.MS)

    @classmethod
    def from_kms(cls, kms: float) -> "Velocity":
        return cls(dist=Distance.from_km(kms), time=Time.from_sec(1), unit=VelocityUnit.KMS)

    @classmethod
    def from_kmh(cls, kmh: float) -> "Velocity":
        return cls(dist=Distance.from_km(kmh), time=Time.from_hours(1), unit=VelocityUnit.KMH)

    @classmethod
    def from_kmd(cls, kmd: float) -> "Velocity":
        return cls(dist=Distance.from_km(kmd), time=Time.from_days(1), unit=VelocityUnit.KMD)

    @classmethod
    def from_mph(cls, mph: float) -> "Velocity":
        return cls(dist=Distance.from_mi(mph), time=Time.from_hours(1), unit=VelocityUnit.MPH)

    @classmethod
    def from_aud(cls, aud: float) -> "Velocity":
        return cls(dist=Distance.from_au(aud), time=Time.from_days(1), unit=VelocityUnit.AUD)

    @classmethod
    def from_pcy(cls, pcy: float, year_days: float = JULIAN_YEAR_DAYS) -> "Velocity":
        """
        Скорость в парсеках за год.

        Args:
            pcy: Парсеков в год
            year_days: Суток в году (default: юлианский год)
        """
        return cls(
            dist=Distance.from_pc(pcy),
            time=Time.from_days(year_days),
            unit=VelocityUnit.PCY,
        )

    @classmethod
    def create(cls, value: float, unit: VelocityUnit | str) -> "Velocity":
        """
        Скорость из значения в указанной единице.

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        unit = parse_unit(VelocityUnit, unit)
        return getattr(cls, f"from_{_UNIT_ATTRS[unit]}")(value)

    @classmethod
    def c(cls) -> "Velocity":
        """Скорость света в вакууме"""
        return cls.from_ms(SPEED_OF_LIGHT_MS)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def ms(self) -> float:
        return self.dist.m / self.time.sec

    @property
    def kms(self) -> float:
        return self.dist.km / self.time.sec

    @property
    def kmh(self) -> float:
        return self.dist.km / self.time.hours

    @property
    def kmd(self) -> float:
        return self.dist.km / self.time.days

    @property
    def mph(self) -> float:
        return self.dist.mi / self.time.hours

    @property
    def aud(self) -> float:
        return self.dist.au / self.time.days

    @property
    def pcy(self) -> float:
        """pc/y = km/s / 977792"""
        return self.kms / KMS_IN_PCY

    def to(self, unit: VelocityUnit | str) -> float:
        """
        Значение скорости в указанной единице.

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        return getattr(self, _UNIT_ATTRS[parse_unit(VelocityUnit, unit)])

    # -------------------------------------------------------------------------
    # Functions
    # -------------------------------------------------------------------------

    def time_to_travel(self, distance: Distance) -> Time:
        """
        Время, за которое преодолевается расстояние.

        Raises:
            ZeroDivisionError: Если скорость равна нулю
        """
        ratio = distance.meters / self.dist.meters
        return Time.from_sec(float(ratio * to_decimal(self.time.sec)))

    def distance_covered(self, time: Time) -> Distance:
        """Расстояние, пройденное за время"""
        ratio = to_decimal(time.sec) / to_decimal(self.time.sec)
        return Distance(meters=self.dist.meters * ratio, display_unit=self.dist.display_unit)

    def _from_ms(self, ms: float) -> "Velocity":
        velocity = Velocity.from_ms(ms)
        return self.model_copy(update={"dist": velocity.dist, "time": velocity.time})

    def add(self, other: "Velocity") -> "Velocity":
        """Сумма скоростей (единица отображения сохраняется)"""
        return self._from_ms(self.ms + other.ms)

    def subtract(self, other: "Velocity") -> "Velocity":
        """Разность скоростей (единица отображения сохраняется)"""
        return self._from_ms(self.ms - other.ms)

    def negate(self) -> "Velocity":
        return self._from_ms(-self.ms)

    def round(self, decimals: int = DEFAULT_DECIMAL_PLACES) -> "Velocity":
        """Копия с другим количеством знаков в str()"""
        return type(self)(dist=self.dist, time=self.time, unit=self.unit, decimal_places=decimals)

    def with_unit(self, unit: VelocityUnit | str) -> "Velocity":
        """Копия с другой единицей отображения"""
        return self.model_copy(update={"unit": parse_unit(VelocityUnit, unit)})

    # -------------------------------------------------------------------------
    # Overrides
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        value = format_rounded(self.to(self.unit), self.decimal_places)
        return f"{value} {VELOCITY_LABELS[self.unit]}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Velocity):
            return NotImplemented
        return self.ms == other.ms

    def __hash__(self) -> int:
        return hash(("Velocity", self.ms))

    def __add__(self, other: "Velocity") -> "Velocity":
        return self.add(other)

    def __sub__(self, other: "Velocity") -> "Velocity":
        return self.subtract(other)

    def __neg__(self) -> "Velocity":
        return self.negate()

