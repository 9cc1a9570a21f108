"""
Quantity Contracts — сериализация величин в JSON-совместимые dict

Каждая величина сериализуется в каноническое значение плюс подсказки
отображения:

    Angle.from_deg(1)          → {"kind": "angle", "value": 3600.0, ...}
    Distance.from_km("1.5")    → {"kind": "distance", "value": "1500", ...}

Десериализация всегда начинается с валидации против quantity.json.
"""

import logging
from typing import Any, Dict, Final, Union

from astro_units.core.contracts.validators import validate_quantity
from astro_units.core.domain.angle import Angle
from astro_units.core.domain.distance import Distance
from astro_units.core.domain.pressure import Pressure
from astro_units.core.domain.temperature import Temperature
from astro_units.core.domain.time import Time
from astro_units.core.domain.units import DistanceUnit
from astro_units.core.domain.velocity import Velocity
from astro_units.core.math.numerical_safeguards import trim_decimal_string
from astro_units.core.math.sexagesimal import DEFAULT_ROUNDING_PLACE

logger = logging.getLogger(__name__)

Quantity = Union[Angle, Time, Distance, Velocity, Temperature, Pressure]

KIND_ANGLE: Final[str] = "angle"
KIND_TIME: Final[str] = "time"
KIND_DISTANCE: Final[str] = "distance"
KIND_VELOCITY: Final[str] = "velocity"
KIND_TEMPERATURE: Final[str] = "temperature"
KIND_PRESSURE: Final[str] = "pressure"


def quantity_to_contract(quantity: Quantity) -> Dict[str, Any]:
    """
    Сериализация величины в dict, соответствующий quantity.json.

    Raises:
        TypeError: Если тип величины не поддерживается
    """
    if isinstance(quantity, (Angle, Time)):
        return {
            "kind": KIND_ANGLE if isinstance(quantity, Angle) else KIND_TIME,
            "value": quantity.scalar,
            "format": quantity.active_format,
            "rounding_place": quantity.rounding_place,
        }
    if isinstance(quantity, Distance):
        return {
            "kind": KIND_DISTANCE,
            "value": trim_decimal_string(format(quantity.meters, "f")),
            "display_unit": quantity.display_unit.value,
            "format": quantity.active_format,
        }
    if isinstance(quantity, Velocity):
        return {
            "kind": KIND_VELOCITY,
            "value": quantity.ms,
            "display_unit": quantity.unit.value,
            "decimal_places": quantity.decimal_places,
        }
    if isinstance(quantity, Temperature):
        return {
            "kind": KIND_TEMPERATURE,
            "value": quantity.kelvin,
            "display_unit": quantity.unit.value,
            "decimal_places": quantity.decimal_places,
        }
    if isinstance(quantity, Pressure):
        return {
            "kind": KIND_PRESSURE,
            "value": quantity.pa,
            "display_unit": quantity.unit.value,
            "decimal_places": quantity.decimal_places,
        }
    raise TypeError(f"Unsupported quantity type: {type(quantity).__name__}")


def quantity_from_contract(data: Dict[str, Any]) -> Quantity:
    """
    Восстановление величины из dict.

    Сохранённый формат применяется через format(), поэтому
    некорректный для величины формат обнаруживается сразу.

    Raises:
        ValidationError: Если данные не соответствуют quantity.json
        InvalidUnitError: Если display_unit неизвестна для данного kind
    """
    validate_quantity(data)

    kind = data["kind"]
    value = data["value"]
    display_unit = data.get("display_unit")
    fmt = data.get("format")
    logger.debug("Restoring %s quantity from contract", kind)

    if kind in (KIND_ANGLE, KIND_TIME):
        cls = Angle if kind == KIND_ANGLE else Time
        rounding_place = data.get("rounding_place", DEFAULT_ROUNDING_PLACE)
        quantity = cls(scalar=value, rounding_place=rounding_place)
        if fmt is not None:
            quantity.format(fmt)
        return quantity

    if kind == KIND_DISTANCE:
        distance = Distance.create(value, DistanceUnit.M)
        if display_unit is not None:
            distance = distance.with_unit(display_unit)
        if fmt is not None:
            distance.format(fmt)
        return distance

    if kind == KIND_VELOCITY:
        quantity = Velocity.from_ms(value)
    elif kind == KIND_TEMPERATURE:
        quantity = Temperature.from_kelvin(value)
    else:
        quantity = Pressure.from_pa(value)

    if display_unit is not None:
        quantity = quantity.with_unit(display_unit)
    if "decimal_places" in data:
        quantity = quantity.round(data["decimal_places"])
    return quantity
