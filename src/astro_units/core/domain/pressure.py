"""
Pressure — Модель давления (каноническое значение — паскали)
"""

from typing import Final

from pydantic import BaseModel, Field

from astro_units.core.domain.units import (
    PressureUnit,
    pa_to_pressure,
    parse_unit,
    pressure_to_pa,
)
from astro_units.core.math.numerical_safeguards import format_rounded

DEFAULT_DECIMAL_PLACES: Final[int] = 3


class Pressure(BaseModel):
    """Атмосферное давление"""

    pa: float = Field(..., description="Давление в паскалях")
    unit: PressureUnit = Field(default=PressureUnit.PA, description="Единица отображения")
    decimal_places: int = Field(default=DEFAULT_DECIMAL_PLACES, ge=0)

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def create(cls, value: float, unit: PressureUnit | str) -> "Pressure":
        """
        Давление из значения в указанной единице.

        Raises:
            InvalidUnitError: Если единица неизвестна
        """
        unit = parse_unit(PressureUnit, unit)
        return cls(pa=pressure_to_pa(value, unit), unit=unit)

    @classmethod
    def from_pa(cls, pa: float) -> "Pressure":
        return cls.create(pa, PressureUnit.PA)

    @classmethod
    def from_mbar(cls, mbar: float) -> "Pressure":
        return cls.create(mbar, PressureUnit.MBAR)

    @classmethod
    def from_inhg(cls, inhg: float) -> "Pressure":
        return cls.create(inhg, PressureUnit.INHG)

    @property
    def mbar(self) -> float:
        return pa_to_pressure(self.pa, PressureUnit.MBAR)

    @property
    def inhg(self) -> float:
        return pa_to_pressure(self.pa, PressureUnit.INHG)

    def to(self, unit: PressureUnit | str) -> float:
        return pa_to_pressure(self.pa, unit)

    def round(self, decimals: int = DEFAULT_DECIMAL_PLACES) -> "Pressure":
        return type(self)(pa=self.pa, unit=self.unit, decimal_places=decimals)

    def with_unit(self, unit: PressureUnit | str) -> "Pressure":
        return self.model_copy(update={"unit": parse_unit(PressureUnit, unit)})

    def __str__(self) -> str:
        value = format_rounded(self.to(self.unit), self.decimal_places)
        return f"{value} {self.unit.value}"
