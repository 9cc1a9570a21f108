"""
astro_units — физические величины для астрономических вычислений.

Angle и Time хранят единственное каноническое значение (угловые
секунды / секунды) и форматируются по шаблонам в sexagesimal-нотации;
Distance, Velocity, Temperature и Pressure покрывают остальные
величины с конверсией единиц.

    >>> from astro_units import Angle
    >>> Angle.from_dms(12, 34, 56.789).format(Angle.FORMAT_DEFAULT)
    '+012°34\\'56".789'
"""

import logging

from astro_units.core.domain import (
    Angle,
    AngleUnit,
    Distance,
    DistanceUnit,
    Pressure,
    PressureUnit,
    Temperature,
    TemperatureUnit,
    Time,
    TimeUnit,
    Velocity,
    VelocityUnit,
)
from astro_units.core.errors import InvalidUnitError, NonFiniteQuantityError, UnitsError
from astro_units.core.formatting import FormatEngine, RenderOptions, TemplateGrammar

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Quantities
    "Angle",
    "Time",
    "Distance",
    "Velocity",
    "Temperature",
    "Pressure",
    # Units
    "AngleUnit",
    "TimeUnit",
    "DistanceUnit",
    "VelocityUnit",
    "TemperatureUnit",
    "PressureUnit",
    # Formatting
    "FormatEngine",
    "RenderOptions",
    "TemplateGrammar",
    # Errors
    "UnitsError",
    "InvalidUnitError",
    "NonFiniteQuantityError",
]
