"""
Units — Централизованный модуль единиц измерения и коэффициентов конверсии

Единственный допустимый способ преобразований между единицами одной
физической величины. Все таблицы — неизменяемые константы, все функции
чистые и безопасны для конкурентного чтения.

Единицы задаются закрытыми Enum-наборами: неизвестное имя единицы
отклоняется через InvalidUnitError сразу в точке вызова.
"""

import math
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, TypeVar

from astro_units.core.errors import InvalidUnitError


# =============================================================================
# ФИЗИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

# Секунд в сутках
SEC_IN_DAY: Final[int] = 86400

# Суток в юлианском году
JULIAN_YEAR_DAYS: Final[float] = 365.25

# Угловых секунд в градусе
ASEC_IN_DEG: Final[int] = 3600

# Градусов в полном обороте
DEG_IN_TURN: Final[int] = 360

# km/s в одном pc/y
KMS_IN_PCY: Final[int] = 977792

# Скорость света в вакууме (m/s)
SPEED_OF_LIGHT_MS: Final[int] = 299792458

# Pa в одном дюйме ртутного столба
PA_IN_INHG: Final[float] = 3386.0

# mbar в одном Pa
MBAR_IN_PA: Final[float] = 1e-2

# Абсолютный ноль по Цельсию (K)
CELSIUS_ZERO_K: Final[float] = 273.15

# Абсолютный ноль по Фаренгейту (°F, со знаком минус)
FAHRENHEIT_ZERO_OFFSET: Final[float] = 459.67


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единицы угла"""

    DEG = "deg"
    RAD = "rad"
    AMIN = "amin"
    ASEC = "asec"
    MAS = "mas"


class TimeUnit(str, Enum):
    """Единицы времени"""

    SEC = "sec"
    MIN = "min"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    YEARS = "years"


class DistanceUnit(str, Enum):
    """Единицы расстояния"""

    # SI
    KM = "km"
    HM = "hm"
    DAM = "dam"
    M = "m"
    DM = "dm"
    CM = "cm"
    MM = "mm"
    UM = "μm"
    NM = "nm"
    PM = "pm"
    # Imperial
    MI = "mi"
    YD = "yd"
    FT = "ft"
    IN = "in"
    # Astronomy
    AU = "au"
    LY = "ly"
    PC = "pc"


class VelocityUnit(str, Enum):
    """Единицы скорости"""

    MS = "m/s"
    KMS = "km/s"
    KMH = "km/h"
    KMD = "km/d"
    MPH = "mph"
    AUD = "au/d"
    PCY = "pc/y"


class TemperatureUnit(str, Enum):
    """Единицы температуры"""

    KELVIN = "K"
    CELSIUS = "C"
    FAHRENHEIT = "F"


class PressureUnit(str, Enum):
    """Единицы давления"""

    PA = "Pa"
    MBAR = "mbar"
    INHG = "inHg"


# =============================================================================
# ТАБЛИЦЫ КОЭФФИЦИЕНТОВ
# =============================================================================

# Угловых секунд в единице угла
ASEC_PER_ANGLE_UNIT: Final[Mapping[AngleUnit, float]] = MappingProxyType(
    {
        AngleUnit.DEG: 3600.0,
        AngleUnit.RAD: 3600.0 * 180.0 / math.pi,
        AngleUnit.AMIN: 60.0,
        AngleUnit.ASEC: 1.0,
        AngleUnit.MAS: 1e-3,
    }
)

# Секунд в единице времени (год — юлианский)
SEC_PER_TIME_UNIT: Final[Mapping[TimeUnit, float]] = MappingProxyType(
    {
        TimeUnit.SEC: 1.0,
        TimeUnit.MIN: 60.0,
        TimeUnit.HOURS: 3600.0,
        TimeUnit.DAYS: float(SEC_IN_DAY),
        TimeUnit.WEEKS: float(SEC_IN_DAY * 7),
        TimeUnit.YEARS: SEC_IN_DAY * JULIAN_YEAR_DAYS,
    }
)

# Метров в единице расстояния (строки — для точной decimal-арифметики)
METERS_PER_DISTANCE_UNIT: Final[Mapping[DistanceUnit, Decimal]] = MappingProxyType(
    {
        DistanceUnit.KM: Decimal("1e3"),
        DistanceUnit.HM: Decimal("1e2"),
        DistanceUnit.DAM: Decimal("1e1"),
        DistanceUnit.M: Decimal("1"),
        DistanceUnit.DM: Decimal("1e-1"),
        DistanceUnit.CM: Decimal("1e-2"),
        DistanceUnit.MM: Decimal("1e-3"),
        DistanceUnit.UM: Decimal("1e-6"),
        DistanceUnit.NM: Decimal("1e-9"),
        DistanceUnit.PM: Decimal("1e-12"),
        DistanceUnit.MI: Decimal("1609.344"),
        DistanceUnit.YD: Decimal("0.9144"),
        DistanceUnit.FT: Decimal("0.3048"),
        DistanceUnit.IN: Decimal("0.0254"),
        DistanceUnit.AU: Decimal("149597870700"),
        DistanceUnit.LY: Decimal("9460730472580800"),
        DistanceUnit.PC: Decimal("30856776376340067"),
    }
)

# Отображаемые подписи единиц скорости
VELOCITY_LABELS: Final[Mapping[VelocityUnit, str]] = MappingProxyType(
    {
        VelocityUnit.MS: "m/s",
        VelocityUnit.KMS: "km/s",
        VelocityUnit.KMH: "km/h",
        VelocityUnit.KMD: "km/d",
        VelocityUnit.MPH: "mph",
        VelocityUnit.AUD: "AU/d",
        VelocityUnit.PCY: "pc/y",
    }
)


# =============================================================================
# LOOKUP
# =============================================================================

UnitT = TypeVar("UnitT", bound=Enum)

# Алиасы, принятые в астрономической литературе
_UNIT_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "um": "μm",
        "kph": "km/h",
        "mi/h": "mph",
        "ms": "m/s",
        "kms": "km/s",
        "kmh": "km/h",
        "kmd": "km/d",
        "aud": "au/d",
        "pcy": "pc/y",
        "kelvin": "K",
        "celsius": "C",
        "fahrenheit": "F",
        "pa": "Pa",
        "inhg": "inHg",
    }
)


def parse_unit(unit_cls: type[UnitT], unit: "UnitT | str") -> UnitT:
    """
    Разбор имени единицы в член Enum.

    Порядок поиска: точное совпадение значения, алиас, совпадение
    без учёта регистра.

    Args:
        unit_cls: Enum-класс единиц (AngleUnit, DistanceUnit, ...)
        unit: Член Enum или строковое имя единицы

    Returns:
        Член unit_cls

    Raises:
        InvalidUnitError: Если единица не принадлежит unit_cls

    Examples:
        >>> parse_unit(DistanceUnit, "km")
        <DistanceUnit.KM: 'km'>
        >>> parse_unit(VelocityUnit, "kph")
        <VelocityUnit.KMH: 'km/h'>
    """
    if isinstance(unit, unit_cls):
        return unit

    allowed = [member.value for member in unit_cls]
    if not isinstance(unit, str):
        raise InvalidUnitError(unit, unit_cls.__name__, allowed)

    name = unit.strip()
    candidates = (name, _UNIT_ALIASES.get(name), _UNIT_ALIASES.get(name.lower()))
    for candidate in candidates:
        if candidate in allowed:
            return unit_cls(candidate)

    folded = {value.lower(): value for value in allowed}
    if name.lower() in folded:
        return unit_cls(folded[name.lower()])

    raise InvalidUnitError(unit, unit_cls.__name__, allowed)


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def asec_per(unit: "AngleUnit | str") -> float:
    """Угловых секунд в одной единице угла"""
    return ASEC_PER_ANGLE_UNIT[parse_unit(AngleUnit, unit)]


def sec_per(unit: "TimeUnit | str") -> float:
    """Секунд в одной единице времени"""
    return SEC_PER_TIME_UNIT[parse_unit(TimeUnit, unit)]


def meters_per(unit: "DistanceUnit | str") -> Decimal:
    """Метров в одной единице расстояния"""
    return METERS_PER_DISTANCE_UNIT[parse_unit(DistanceUnit, unit)]


def celsius_to_kelvin(celsius: float) -> float:
    """K = C + 273.15"""
    return celsius + CELSIUS_ZERO_K


def kelvin_to_celsius(kelvin: float) -> float:
    """C = K - 273.15"""
    return kelvin - CELSIUS_ZERO_K


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    """K = (F + 459.67) * 5/9"""
    return (fahrenheit + FAHRENHEIT_ZERO_OFFSET) * (5 / 9)


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """F = K * 9/5 - 459.67"""
    return kelvin * (9 / 5) - FAHRENHEIT_ZERO_OFFSET


def pressure_to_pa(value: float, unit: "PressureUnit | str") -> float:
    """
    Конверсия давления в паскали.

    Pa = mbar / 0.01, Pa = inHg * 3386
    """
    unit = parse_unit(PressureUnit, unit)
    if unit is PressureUnit.MBAR:
        return value / MBAR_IN_PA
    if unit is PressureUnit.INHG:
        return value * PA_IN_INHG
    return value


def pa_to_pressure(pa: float, unit: "PressureUnit | str") -> float:
    """Конверсия паскалей в единицу давления"""
    unit = parse_unit(PressureUnit, unit)
    if unit is PressureUnit.MBAR:
        return pa * MBAR_IN_PA
    if unit is PressureUnit.INHG:
        return pa / PA_IN_INHG
    return pa
