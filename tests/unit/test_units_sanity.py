"""
Sanity-тест для модуля Units

Проверяет:
1. Разбор имён единиц (точное совпадение, алиасы, регистр)
2. Полноту и неизменяемость таблиц коэффициентов
3. Обратимость конверсий температуры и давления
"""

import pytest

from astro_units.core.domain.units import (
    ASEC_PER_ANGLE_UNIT,
    METERS_PER_DISTANCE_UNIT,
    SEC_PER_TIME_UNIT,
    VELOCITY_LABELS,
    AngleUnit,
    DistanceUnit,
    PressureUnit,
    TemperatureUnit,
    TimeUnit,
    VelocityUnit,
    asec_per,
    celsius_to_kelvin,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
    meters_per,
    pa_to_pressure,
    parse_unit,
    pressure_to_pa,
    sec_per,
)
from astro_units.core.errors import InvalidUnitError, UnitsError


class TestParseUnit:
    """Тесты для parse_unit"""

    def test_enum_member_passes_through(self) -> None:
        assert parse_unit(AngleUnit, AngleUnit.DEG) is AngleUnit.DEG

    def test_exact_value(self) -> None:
        assert parse_unit(DistanceUnit, "km") is DistanceUnit.KM
        assert parse_unit(VelocityUnit, "pc/y") is VelocityUnit.PCY

    def test_aliases(self) -> None:
        assert parse_unit(VelocityUnit, "kph") is VelocityUnit.KMH
        assert parse_unit(DistanceUnit, "um") is DistanceUnit.UM
        assert parse_unit(TemperatureUnit, "celsius") is TemperatureUnit.CELSIUS
        assert parse_unit(PressureUnit, "INHG") is PressureUnit.INHG

    def test_case_insensitive(self) -> None:
        assert parse_unit(DistanceUnit, "KM") is DistanceUnit.KM
        assert parse_unit(TemperatureUnit, "c") is TemperatureUnit.CELSIUS
        assert parse_unit(TimeUnit, " Hours ") is TimeUnit.HOURS

    def test_unknown_unit(self) -> None:
        with pytest.raises(InvalidUnitError) as exc_info:
            parse_unit(AngleUnit, "grad")
        error = exc_info.value
        assert error.unit == "grad"
        assert error.kind == "AngleUnit"
        assert error.allowed == [u.value for u in AngleUnit]

    def test_unit_of_other_quantity_rejected(self) -> None:
        with pytest.raises(InvalidUnitError):
            parse_unit(TimeUnit, "deg")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidUnitError):
            parse_unit(AngleUnit, 5)

    def test_error_hierarchy(self) -> None:
        assert issubclass(InvalidUnitError, UnitsError)
        assert issubclass(InvalidUnitError, ValueError)


class TestTables:
    """Полнота и неизменяемость таблиц"""

    @pytest.mark.parametrize(
        "table, unit_cls",
        [
            (ASEC_PER_ANGLE_UNIT, AngleUnit),
            (SEC_PER_TIME_UNIT, TimeUnit),
            (METERS_PER_DISTANCE_UNIT, DistanceUnit),
            (VELOCITY_LABELS, VelocityUnit),
        ],
    )
    def test_every_unit_covered(self, table, unit_cls) -> None:
        assert set(table) == set(unit_cls)

    def test_tables_immutable(self) -> None:
        with pytest.raises(TypeError):
            METERS_PER_DISTANCE_UNIT[DistanceUnit.M] = 2

    def test_factors(self) -> None:
        assert asec_per("deg") == 3600
        assert sec_per("years") == 31557600
        assert str(meters_per("pc")) == "30856776376340067"


class TestTemperatureConversions:
    """Обратимость конверсий температуры"""

    def test_celsius_roundtrip(self) -> None:
        assert kelvin_to_celsius(celsius_to_kelvin(21.5)) == pytest.approx(21.5)

    def test_fahrenheit_roundtrip(self) -> None:
        assert kelvin_to_fahrenheit(fahrenheit_to_kelvin(-40)) == pytest.approx(-40)

    def test_fixed_points(self) -> None:
        assert celsius_to_kelvin(0) == 273.15
        assert kelvin_to_fahrenheit(273.15) == pytest.approx(32)


class TestPressureConversions:
    """Обратимость конверсий давления"""

    @pytest.mark.parametrize("unit", list(PressureUnit))
    def test_roundtrip(self, unit: PressureUnit) -> None:
        assert pa_to_pressure(pressure_to_pa(29.92, unit), unit) == pytest.approx(29.92)

    def test_mbar_factor(self) -> None:
        assert pressure_to_pa(1, "mbar") == pytest.approx(100)
