"""
Тесты для модели Angle
"""

import math

import pytest
from pydantic import ValidationError

from astro_units.core.domain.angle import Angle
from astro_units.core.domain.time import Time
from astro_units.core.domain.units import AngleUnit
from astro_units.core.errors import InvalidUnitError


class TestConstructors:
    """Конструкторы угла"""

    def test_from_dms(self) -> None:
        assert Angle.from_dms(180, 4, 6.7).deg == pytest.approx(180.0685277778, abs=1e-9)

    def test_from_dms_negative_minor_ignored_for_sign(self) -> None:
        assert Angle.from_dms(12, -34, 56, 0.1234).deg == pytest.approx(12.5822565)

    def test_from_dms_negative_leading_zero(self) -> None:
        assert Angle.from_dms(0, -30).deg == -0.5

    def test_from_rad(self) -> None:
        assert Angle.from_rad(math.pi).deg == pytest.approx(180)

    def test_small_units(self) -> None:
        assert Angle.from_amin(30).deg == 0.5
        assert Angle.from_mas(1000).asec == 1.0
        assert Angle.from_asec(3600).deg == 1.0

    def test_from_unit(self) -> None:
        assert Angle.from_unit(2, "deg").asec == 7200
        assert Angle.from_unit(2, AngleUnit.AMIN).asec == 120

    def test_from_unit_unknown(self) -> None:
        with pytest.raises(InvalidUnitError):
            Angle.from_unit(1, "grad")

    def test_pi(self) -> None:
        assert Angle.pi().rad == pytest.approx(math.pi)

    def test_atan2(self) -> None:
        assert Angle.atan2(1, 1).deg == pytest.approx(45)
        assert Angle.atan2(Angle.from_rad(-1), Angle.from_rad(-1)).deg == pytest.approx(-135)

    def test_from_time(self) -> None:
        assert Angle.from_time(Time.from_hours(6)).deg == pytest.approx(90)
        assert Angle.from_time(Time.from_hours(6), Time.from_hours(12)).deg == pytest.approx(180)


class TestViews:
    """Представления угла"""

    def test_unit_views(self) -> None:
        angle = Angle.from_deg(1)
        assert angle.amin == 60
        assert angle.asec == 3600
        assert angle.mas == 3600000
        assert angle.rad == pytest.approx(math.pi / 180)

    def test_components(self) -> None:
        angle = Angle.from_dms(12, 34, 56, 0.789)
        assert (angle.d, angle.m, angle.s, angle.f) == (12, 34, 56, "789")
        assert angle.sign == "+"

    def test_negative_components_are_magnitudes(self) -> None:
        angle = Angle.from_dms(-12, 34, 56)
        assert (angle.d, angle.m, angle.s) == (12, 34, 56)
        assert angle.sign == "-"

    def test_with_rounding(self) -> None:
        angle = Angle.from_asec(1.23456).with_rounding(3)
        assert angle.rounding_place == 3
        assert angle.f == "235"

    def test_to_unknown_unit(self) -> None:
        with pytest.raises(InvalidUnitError):
            Angle.from_deg(1).to("gon")

    @pytest.mark.parametrize("unit", list(AngleUnit))
    def test_conversion_identity(self, unit: AngleUnit) -> None:
        assert Angle.from_unit(12.5, unit).to(unit) == pytest.approx(12.5, rel=1e-9)

    def test_to_time(self) -> None:
        assert Angle.from_deg(90).to_time().hours == pytest.approx(6.0)
        assert Angle.from_deg(180).to_time(Time.from_hours(12)).hours == pytest.approx(6.0)


class TestArithmetic:
    """Арифметика угла"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [(180, 40, 220), (180, -40, 140), (-10, 600, 590)],
    )
    def test_add(self, a: float, b: float, expected: float) -> None:
        assert Angle.from_deg(a).add(Angle.from_deg(b)).deg == expected
        assert (Angle.from_deg(a) + Angle.from_deg(b)).deg == expected

    def test_subtract(self) -> None:
        assert (Angle.from_deg(180) - Angle.from_deg(40)).deg == 140

    def test_negate(self) -> None:
        assert (-Angle.from_deg(10)).deg == -10

    def test_add_negation_is_zero(self) -> None:
        angle = Angle.from_dms(12, 34, 56, 0.1234)
        assert angle.add(angle.negate()).scalar == 0

    def test_multiply_and_divide(self) -> None:
        assert Angle.from_deg(180).multiply(2).deg == 360
        assert Angle.from_deg(180).divide(2).deg == 90

    def test_angle_operand_read_in_degrees(self) -> None:
        assert Angle.from_deg(180).multiply(Angle.from_deg(2)).deg == 360
        assert Angle.from_deg(180).divide(Angle.from_deg(4)).deg == 45

    def test_divide_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Angle.from_deg(1).divide(0)

    def test_mixed_types_rejected(self) -> None:
        with pytest.raises(TypeError):
            Angle.from_deg(1).add(Time.from_sec(1))

    def test_arithmetic_keeps_rounding_place(self) -> None:
        angle = Angle.from_deg(1).with_rounding(2)
        assert angle.add(Angle.from_deg(1)).rounding_place == 2

    def test_original_unchanged(self) -> None:
        angle = Angle.from_deg(10)
        angle.add(Angle.from_deg(5))
        angle.norm()
        assert angle.deg == 10


class TestNorm:
    """Нормализация в интервал"""

    @pytest.mark.parametrize(
        "deg, lb, ub, expected",
        [
            (370, 0, 360, 10),
            (480, 0, 360, 120),
            (500, 0, 180, 140),
            (-90, 0, 360, 270),
            (720, 0, 360, 0),
            (270, -180, 180, -90),
            (-180, -180, 180, -180),
            (-540, -180, 180, -180),
            (180, -180, 180, -180),
        ],
    )
    def test_norm(self, deg: float, lb: float, ub: float, expected: float) -> None:
        assert Angle.from_deg(deg).norm(lb, ub).deg == pytest.approx(expected)

    @pytest.mark.parametrize("deg", [-180, -540, -179.5, 179.5, 900])
    def test_result_within_bounds(self, deg: float) -> None:
        result = Angle.from_deg(deg).norm(-180, 180)
        assert -180 <= result.deg < 180

    def test_tiny_negative_stays_below_upper_bound(self) -> None:
        result = Angle.from_asec(-1e-12).norm()
        assert 0 <= result.deg < 360

    @pytest.mark.parametrize("deg", [370, -10, 725.5, 0.25, -359.5])
    def test_idempotent(self, deg: float) -> None:
        once = Angle.from_deg(deg).norm()
        assert once.norm() == once

    def test_negative_exact_multiple_maps_to_upper_bound(self) -> None:
        """-360° даёт ub (360), а не lb; повторная нормализация даёт 0"""
        once = Angle.from_deg(-360).norm()
        assert once.deg == 360
        assert once.norm().deg == 0

    def test_invalid_bounds(self) -> None:
        with pytest.raises(ValueError):
            Angle.from_deg(1).norm(360, 0)
        with pytest.raises(ValueError):
            Angle.from_deg(1).norm(10, 10)


class TestModel:
    """Свойства Pydantic модели"""

    def test_frozen(self) -> None:
        angle = Angle.from_deg(1)
        with pytest.raises(ValidationError):
            angle.scalar = 5.0

    def test_negative_rounding_place_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Angle(scalar=1.0, rounding_place=-1)

    def test_equality_and_hash(self) -> None:
        assert Angle.from_deg(1) == Angle.from_asec(3600)
        assert hash(Angle.from_deg(1)) == hash(Angle.from_asec(3600))
        assert Angle.from_deg(1) != Angle.from_deg(2)

    def test_not_equal_to_time(self) -> None:
        assert Angle(scalar=1.0) != Time(scalar=1.0)

    def test_is_close(self) -> None:
        assert Angle.from_deg(0.1 * 3).is_close(Angle.from_deg(0.3))
        assert not Angle.from_deg(0.3).is_close(Angle.from_deg(0.31))
