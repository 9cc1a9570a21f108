"""
Temperature — Модель температуры (каноническое значение — кельвины)
"""

from typing import Final

from pydantic import BaseModel, Field

from astro_units.core.domain.units import (
    TemperatureUnit,
    celsius_to_kelvin,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
    parse_unit,
)
from astro_units.core.math.numerical_safeguards import format_rounded

DEFAULT_DECIMAL_PLACES: Final[int] = 3


class Temperature(BaseModel):
    """
    Температура.

    str() выводит значение в единице отображения:
    "373.15 K", "100°C", "212°F".
    """

    kelvin: float = Field(..., description="Температура в кельвинах")
    unit: TemperatureUnit = Field(default=TemperatureUnit.KELVIN, description="Единица отображения")
    decimal_places: int = Field(default=DEFAULT_DECIMAL_PLACES, ge=0)

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_kelvin(cls, kelvin: float) -> "Temperature":
        return cls(kelvin=kelvin, unit=TemperatureUnit.KELVIN)

    @classmethod
    def from_celsius(cls, celsius: float) -> "Temperature":
        return cls(kelvin=celsius_to_kelvin(celsius), unit=TemperatureUnit.CELSIUS)

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> "Temperature":
        return cls(kelvin=fahrenheit_to_kelvin(fahrenheit), unit=TemperatureUnit.FAHRENHEIT)

    @property
    def celsius(self) -> float:
        return kelvin_to_celsius(self.kelvin)

    @property
    def fahrenheit(self) -> float:
        return kelvin_to_fahrenheit(self.kelvin)

    def to(self, unit: TemperatureUnit | str) -> float:
        """
        Значение температуры в указанной шкале.

        Raises:
            InvalidUnitError: Если шкала неизвестна
        """
        unit = parse_unit(TemperatureUnit, unit)
        if unit is TemperatureUnit.CELSIUS:
            return self.celsius
        if unit is TemperatureUnit.FAHRENHEIT:
            return self.fahrenheit
        return self.kelvin

    def round(self, decimals: int = DEFAULT_DECIMAL_PLACES) -> "Temperature":
        return type(self)(kelvin=self.kelvin, unit=self.unit, decimal_places=decimals)

    def with_unit(self, unit: TemperatureUnit | str) -> "Temperature":
        return self.model_copy(update={"unit": parse_unit(TemperatureUnit, unit)})

    def __str__(self) -> str:
        value = format_rounded(self.to(self.unit), self.decimal_places)
        if self.unit is TemperatureUnit.KELVIN:
            return f"{value} K"
        return f"{value}°{self.unit.value}"
