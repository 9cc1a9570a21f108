"""
Domain models and value objects.

Физические величины (Angle, Time, Distance, Velocity, Temperature,
Pressure) и централизованные таблицы единиц.
"""

from astro_units.core.domain.angle import Angle
from astro_units.core.domain.distance import Distance
from astro_units.core.domain.pressure import Pressure
from astro_units.core.domain.quantity import SexagesimalQuantity
from astro_units.core.domain.temperature import Temperature
from astro_units.core.domain.time import Time
from astro_units.core.domain.units import (
    ASEC_IN_DEG,
    CELSIUS_ZERO_K,
    DEG_IN_TURN,
    FAHRENHEIT_ZERO_OFFSET,
    JULIAN_YEAR_DAYS,
    KMS_IN_PCY,
    MBAR_IN_PA,
    PA_IN_INHG,
    SEC_IN_DAY,
    SPEED_OF_LIGHT_MS,
    AngleUnit,
    DistanceUnit,
    PressureUnit,
    TemperatureUnit,
    TimeUnit,
    VelocityUnit,
    asec_per,
    meters_per,
    parse_unit,
    sec_per,
)
from astro_units.core.domain.velocity import Velocity

__all__ = [
    # Quantities
    "SexagesimalQuantity",
    "Angle",
    "Time",
    "Distance",
    "Velocity",
    "Temperature",
    "Pressure",
    # Units — Physical constants
    "SEC_IN_DAY",
    "JULIAN_YEAR_DAYS",
    "ASEC_IN_DEG",
    "DEG_IN_TURN",
    "KMS_IN_PCY",
    "SPEED_OF_LIGHT_MS",
    "PA_IN_INHG",
    "MBAR_IN_PA",
    "CELSIUS_ZERO_K",
    "FAHRENHEIT_ZERO_OFFSET",
    # Units — Enums
    "AngleUnit",
    "TimeUnit",
    "DistanceUnit",
    "VelocityUnit",
    "TemperatureUnit",
    "PressureUnit",
    # Units — Lookup
    "parse_unit",
    "asec_per",
    "sec_per",
    "meters_per",
]
