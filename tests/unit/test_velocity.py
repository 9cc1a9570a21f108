"""
Тесты для модели Velocity
"""

import pytest
from pydantic import ValidationError

from astro_units.core.domain.distance import Distance
from astro_units.core.domain.time import Time
from astro_units.core.domain.units import VelocityUnit
from astro_units.core.domain.velocity import Velocity
from astro_units.core.errors import InvalidUnitError

# 100 m/s во всех единицах
EXPECTED_100_MS = {
    "ms": 100,
    "kms": 0.1,
    "kmh": 360,
    "kmd": 8640,
    "mph": 223.69362920544023,
    "aud": 5.77548e-5,
    "pcy": 1.02269032e-7,
}


class TestConstructors:
    """Конструкторы и представления"""

    @pytest.mark.parametrize(
        "velocity",
        [
            Velocity.from_ms(100),
            Velocity.from_kms(0.1),
            Velocity.from_kmh(360),
            Velocity.from_kmd(8640),
            Velocity.from_mph(223.69362920544023),
        ],
    )
    def test_exact_units(self, velocity: Velocity) -> None:
        assert velocity.ms == pytest.approx(EXPECTED_100_MS["ms"])
        assert velocity.kms == pytest.approx(EXPECTED_100_MS["kms"])
        assert velocity.kmh == pytest.approx(EXPECTED_100_MS["kmh"])
        assert velocity.kmd == pytest.approx(EXPECTED_100_MS["kmd"])
        assert velocity.mph == pytest.approx(EXPECTED_100_MS["mph"])
        assert velocity.aud == pytest.approx(EXPECTED_100_MS["aud"], abs=1e-10)
        assert velocity.pcy == pytest.approx(EXPECTED_100_MS["pcy"], abs=1e-10)

    @pytest.mark.parametrize(
        "velocity",
        [Velocity.from_aud(5.77548e-5), Velocity.from_pcy(1.02269032e-7)],
    )
    def test_astronomical_units(self, velocity: Velocity) -> None:
        """Исходные значения округлены, поэтому сравнение с относительным допуском"""
        for name, expected in EXPECTED_100_MS.items():
            assert getattr(velocity, name) == pytest.approx(expected, rel=1e-4)

    def test_components(self) -> None:
        assert Velocity.from_ms(100).dist.m == 100
        assert Velocity.from_mph(100).time.hours == 1

    def test_pcy_custom_year(self) -> None:
        velocity = Velocity.from_pcy(1, year_days=365)
        assert velocity.time.days == 365

    def test_create(self) -> None:
        assert Velocity.create(360, "km/h").ms == pytest.approx(100)
        assert Velocity.create(360, "kph").unit is VelocityUnit.KMH

    def test_create_unknown_unit(self) -> None:
        with pytest.raises(InvalidUnitError):
            Velocity.create(1, "warp")

    def test_speed_of_light(self) -> None:
        assert Velocity.c().kms == pytest.approx(299792.458)

    def test_to(self) -> None:
        assert Velocity.from_ms(100).to("km/h") == pytest.approx(360)
        assert Velocity.from_ms(100).to(VelocityUnit.KMS) == pytest.approx(0.1)


class TestFunctions:
    """Время в пути и пройденное расстояние"""

    def test_time_to_travel(self) -> None:
        time = Velocity.from_mph(100).time_to_travel(Distance.from_mi(50))
        assert time.min == 30

    def test_distance_covered(self) -> None:
        distance = Velocity.from_mph(60).distance_covered(Time.from_min(30))
        assert distance.mi == 30

    def test_zero_velocity_time_to_travel(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Velocity.from_ms(0).time_to_travel(Distance.from_km(1))

    def test_add_keeps_display_unit(self) -> None:
        total = Velocity.from_kmh(360) + Velocity.from_ms(100)
        assert total.ms == pytest.approx(200)
        assert total.unit is VelocityUnit.KMH

    def test_subtract_and_negate(self) -> None:
        assert (Velocity.from_ms(100) - Velocity.from_ms(30)).ms == pytest.approx(70)
        assert (-Velocity.from_ms(100)).ms == pytest.approx(-100)

    def test_add_negation_is_zero(self) -> None:
        velocity = Velocity.from_kms(12.5)
        assert velocity.add(velocity.negate()).ms == 0


class TestString:
    """Строковое представление"""

    def test_str_in_display_unit(self) -> None:
        assert str(Velocity.from_kmh(360)) == "360 km/h"
        assert str(Velocity.from_ms(100)) == "100 m/s"
        assert str(Velocity.from_aud(1)) == "1 AU/d"

    def test_round(self) -> None:
        assert str(Velocity.from_ms(1 / 3)) == "0.333 m/s"
        assert str(Velocity.from_ms(1 / 3).round(1)) == "0.3 m/s"

    def test_with_unit(self) -> None:
        assert str(Velocity.from_ms(100).with_unit("km/s")) == "0.1 km/s"

    def test_invalid_decimal_places(self) -> None:
        with pytest.raises(ValidationError):
            Velocity.from_ms(1).round(-1)

    def test_equality_by_speed(self) -> None:
        assert Velocity.from_ms(100) == Velocity.from_kms(0.1)
