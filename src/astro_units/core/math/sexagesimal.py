"""
Sexagesimal Codec — разложение и сборка base-60 компонент

Модуль выполняет двунаправленное преобразование между знаковым десятичным
скаляром (угловые секунды или секунды времени) и тройкой целых компонент
с дробной строкой:

    45296.1234 ↔ (12, 34, 56, "1234")    # 12°34'56".1234 или 12h34m56s.1234

Алгоритм одинаков для углов (° ' ") и времени (h m s) — отличаются только
единицы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление выполняется ДО разложения: целые секунды и дробная строка
   всегда согласованы между собой
2. Компоненты decompose() всегда неотрицательны; знак берётся отдельно
   через sign_of(scalar)
3. Пустая дробная строка означает "дробная часть ровно ноль"
4. В compose() знак определяется первой ненулевой компонентой
"""

import logging
import math
from typing import Final, NamedTuple

from astro_units.core.math.numerical_safeguards import (
    is_valid_float,
    round_half_away,
    validate_rounding_place,
)
from astro_units.core.errors import NonFiniteQuantityError

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество минорных единиц в мажорной (секунд в часе / угловых секунд в градусе)
MINOR2_PER_MAJOR: Final[int] = 3600

# Количество минорных единиц второго порядка в первом (секунд в минуте)
MINOR2_PER_MINOR1: Final[int] = 60

# Разряд округления по умолчанию
DEFAULT_ROUNDING_PLACE: Final[int] = 9

SIGN_POSITIVE: Final[str] = "+"
SIGN_NEGATIVE: Final[str] = "-"


# =============================================================================
# TYPES
# =============================================================================


class Components(NamedTuple):
    """
    Результат разложения скаляра.

    major/minor1/minor2 — абсолютные значения (градусы/часы, минуты, секунды).
    fraction — цифры дробной части секунд без ведущей точки и без
    хвостовых нулей; "" если дробная часть ровно ноль.
    """

    major: int
    minor1: int
    minor2: int
    fraction: str


# =============================================================================
# ЗНАК
# =============================================================================


def sign_of(scalar: float) -> str:
    """
    Знак скаляра как строка.

    Ноль (включая -0.0) считается положительным.

    Examples:
        >>> sign_of(-0.5)
        '-'
        >>> sign_of(0.0)
        '+'
    """
    return SIGN_NEGATIVE if scalar < 0 else SIGN_POSITIVE


def find_sign(major: float, minor1: float, minor2: float, fraction: float) -> str:
    """
    Знак набора компонент: знак первой ненулевой компоненты.

    Позволяет задать отрицательное значение с нулевыми старшими
    компонентами: (0, 0, -5, 0) означает -5 секунд.

    Returns:
        '+' или '-' ('+' если все компоненты равны нулю)
    """
    for component in (major, minor1, minor2, fraction):
        if component != 0:
            return sign_of(component)
    return SIGN_POSITIVE


# =============================================================================
# DECOMPOSE
# =============================================================================


def decompose(scalar: float, round_place: int = DEFAULT_ROUNDING_PLACE) -> Components:
    """
    Разложение скаляра на (major, minor1, minor2, fraction).

    Алгоритм:
        1. r = round_half_away(scalar, round_place)
        2. major = floor(|r| / 3600), minor1 = floor(|r| / 60) mod 60,
           minor2 = floor(|r|) mod 60
        3. fraction = цифры после точки в fixed-записи |r| с round_place
           знаками, хвостовые нули удалены

    Args:
        scalar: Значение в угловых секундах или секундах
        round_place: Разряд округления (>= 0)

    Returns:
        Components с неотрицательными компонентами

    Raises:
        ValueError: Если round_place < 0
        NonFiniteQuantityError: Если scalar равен NaN/Inf

    Examples:
        >>> decompose(45296.1234)
        Components(major=12, minor1=34, minor2=56, fraction='1234')
        >>> decompose(-0.1)
        Components(major=0, minor1=0, minor2=0, fraction='1')
        >>> decompose(59.9996, 3)
        Components(major=0, minor1=1, minor2=0, fraction='')
    """
    validate_rounding_place(round_place)
    if not is_valid_float(scalar):
        raise NonFiniteQuantityError(f"Cannot decompose non-finite scalar: {scalar}")

    magnitude = abs(round_half_away(scalar, round_place))
    whole = int(magnitude)

    major = whole // MINOR2_PER_MAJOR
    minor1 = (whole // MINOR2_PER_MINOR1) % MINOR2_PER_MINOR1
    minor2 = whole % MINOR2_PER_MINOR1

    # Только дробная часть fixed-записи, без целой части и точки
    _, _, digits = format(magnitude, "f").partition(".")
    fraction = digits.rstrip("0")

    return Components(major=major, minor1=minor1, minor2=minor2, fraction=fraction)


# =============================================================================
# COMPOSE
# =============================================================================


def _truncate(value: float) -> float:
    """Отбрасывание дробной части; NaN/Inf проходят без изменений."""
    if not is_valid_float(value):
        return value
    return float(math.trunc(value))


def _legacy_fraction(fraction: float) -> float:
    """
    Переинтерпретация fraction >= 1 как цифр десятичной дроби.

    12 → 0.12, 1234 → 0.1234 (знак восстанавливается отдельно).
    """
    digits = str(int(abs(fraction)))
    reinterpreted = float(f"0.{digits}")
    logger.warning(
        "Fraction component %r is >= 1; reinterpreting its integer digits as %r",
        fraction,
        reinterpreted,
    )
    return reinterpreted


def compose(
    major: float,
    minor1: float = 0,
    minor2: float = 0,
    fraction: float = 0,
) -> float:
    """
    Сборка скаляра из (major, minor1, minor2, fraction).

    Правила:
    - Знак результата = знак первой ненулевой компоненты (major → fraction)
    - major и minor1 усекаются до целых
    - При ненулевом fraction усекается и minor2 (fraction имеет приоритет
      над дробной частью minor2)
    - |fraction| >= 1 переинтерпретируется как 0.<цифры> (legacy-поведение,
      логируется WARNING)

    Args:
        major: Градусы или часы
        minor1: Минуты
        minor2: Секунды (может быть дробным при fraction == 0)
        fraction: Дробная часть секунд, например 0.1234

    Returns:
        sign * (|major|*3600 + |minor1|*60 + |minor2| + |fraction|)

    Examples:
        >>> compose(12, -34, 56, 0.1234)
        45296.1234
        >>> compose(0, 0, -5)
        -5.0
        >>> compose(1, 1, 1.5)
        3661.5
    """
    sign = find_sign(major, minor1, minor2, fraction)

    major = _truncate(major)
    minor1 = _truncate(minor1)

    if fraction:
        minor2 = _truncate(minor2)
        if is_valid_float(fraction) and abs(fraction) >= 1:
            fraction = _legacy_fraction(fraction)

    magnitude = (
        abs(major) * MINOR2_PER_MAJOR
        + abs(minor1) * MINOR2_PER_MINOR1
        + abs(minor2)
        + abs(fraction)
    )

    return -magnitude if sign == SIGN_NEGATIVE else magnitude
