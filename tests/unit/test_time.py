"""
Тесты для модели Time
"""

import logging

import pytest

from astro_units.core.domain.angle import Angle
from astro_units.core.domain.time import Time
from astro_units.core.domain.units import TimeUnit
from astro_units.core.errors import InvalidUnitError


class TestConstructors:
    """Конструкторы интервала"""

    def test_from_hms(self) -> None:
        assert Time.from_hms(12, 30, 30, 0.5).sec == 45030.5
        assert Time.from_hms(1, 1, 1, 0.1).scalar == 3661.1

    def test_from_hms_sign(self, caplog: pytest.LogCaptureFixture) -> None:
        """Знак задаётся первой ненулевой компонентой"""
        with caplog.at_level(logging.WARNING):
            assert Time.from_hms(0, 0, 0, -10).sign == "-"
            assert Time.from_hms(1, 0, 0, -10).sign == "+"

    def test_legacy_fraction_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="astro_units"):
            time = Time.from_hms(0, 0, 1, 12)
        assert time.sec == pytest.approx(1.12)
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_unit_constructors(self) -> None:
        assert Time.from_min(1).sec == 60
        assert Time.from_hours(1).sec == 3600
        assert Time.from_days(1).sec == 86400
        assert Time.from_weeks(1).days == 7

    def test_from_years(self) -> None:
        assert Time.from_years(1).days == 365.25
        assert Time.from_years(1, days_per_year=365).days == 365

    def test_from_unit(self) -> None:
        assert Time.from_unit(2, "hours").sec == 7200
        with pytest.raises(InvalidUnitError):
            Time.from_unit(1, "fortnights")

    def test_from_angle(self) -> None:
        assert Time.from_angle(Angle.from_deg(90)).hours == pytest.approx(6)
        assert Time.from_angle(Angle.from_deg(180), Time.from_hours(12)).hours == pytest.approx(6)


class TestViews:
    """Представления интервала"""

    def test_unit_views(self) -> None:
        time = Time.from_days(1)
        assert time.hours == 24
        assert time.min == 1440
        assert time.sec == 86400
        assert time.weeks == pytest.approx(1 / 7)
        assert time.years == pytest.approx(1 / 365.25)

    def test_hours_not_capped_by_day(self) -> None:
        assert Time.from_days(2).h == 48

    def test_components(self) -> None:
        time = Time.from_hms(7, 47, 16, 0.8)
        assert (time.h, time.m, time.s, time.f) == (7, 47, 16, "8")

    @pytest.mark.parametrize("unit", list(TimeUnit))
    def test_conversion_identity(self, unit: TimeUnit) -> None:
        assert Time.from_unit(12.5, unit).to(unit) == pytest.approx(12.5, rel=1e-9)

    def test_continuous_value_unknown_letter(self) -> None:
        with pytest.raises(InvalidUnitError):
            Time.from_sec(1).continuous_value("R")


class TestArithmetic:
    """Арифметика интервала"""

    def test_add_and_subtract(self) -> None:
        time = Time.from_hms(10, 4, 32, 0.5)
        assert (time + Time.from_hours(4)).sec == 50672.5
        assert (time - Time.from_hours(4)).sec == 21872.5

    def test_multiply_and_divide_by_time_in_seconds(self) -> None:
        time = Time.from_hms(10, 4, 32, 0.5)
        assert time.multiply(Time.from_sec(0.5)).sec == 18136.25
        assert time.divide(Time.from_sec(0.5)).sec == 72545

    def test_multiply_by_number(self) -> None:
        assert Time.from_hours(1).multiply(2).hours == 2

    def test_add_negation_is_zero(self) -> None:
        time = Time.from_hms(1, 1, 1, 0.1)
        assert time.add(time.negate()).scalar == 0

    def test_divide_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Time.from_sec(1).divide(Time.from_sec(0))

    def test_returns_time(self) -> None:
        assert isinstance(Time.from_sec(1) + Time.from_sec(1), Time)


class TestFormat:
    """Шаблоны времени"""

    @pytest.mark.parametrize(
        "template, expected",
        [
            (Time.FORMAT_DEFAULT, "07:47:16.8"),
            (Time.FORMAT_HMS, "07ʰ47ᵐ16ˢ.8"),
            (Time.FORMAT_SPACED, "7h 47m 16.8s"),
        ],
    )
    def test_sexagesimal_templates(self, template: str, expected: str) -> None:
        assert Time.from_days(0.3245).format(template) == expected

    @pytest.mark.parametrize(
        "time, template, expected",
        [
            (Time.from_days(502), Time.FORMAT_YEARS, "1.374 years"),
            (Time.from_days(14), Time.FORMAT_WEEKS, "2 weeks"),
            (Time.from_hours(36), Time.FORMAT_DAYS, "1.5 days"),
            (Time.from_min(90), Time.FORMAT_HOURS, "1.5 hours"),
            (Time.from_sec(90), Time.FORMAT_MIN, "1.5 min"),
            (Time.from_min(1.5), Time.FORMAT_SEC, "90 sec"),
        ],
    )
    def test_continuous_templates(self, time: Time, template: str, expected: str) -> None:
        assert time.format(template) == expected

    def test_negative_default(self) -> None:
        assert Time.from_hms(-1, 30).format(Time.FORMAT_DEFAULT) == "-01:30:00"

    def test_str_uses_default(self) -> None:
        assert str(Time.from_hms(1, 0, 0)) == "01:00:00"

    def test_str_uses_last_format(self) -> None:
        time = Time.from_hours(36)
        time.format(Time.FORMAT_DAYS)
        assert str(time) == "1.5 days"
