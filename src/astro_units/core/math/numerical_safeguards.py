"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость операций над физическими величинами:
- Проверка конечности float (NaN/Inf) на границах форматирования
- Epsilon-сравнения float с учётом машинной точности
- Округление half-away-from-zero через decimal (без banker's rounding)
- Десятичное представление float без scientific notation

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление всегда half-away-from-zero (2.5 → 3, -2.5 → -3)
2. Десятичные строки никогда не содержат экспоненту
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final, Union

from astro_units.core.errors import NonFiniteQuantityError

Numeric = Union[int, float, str, Decimal]

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность сравнения float
# Используется в is_close и для проверки идентичности конверсий единиц
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Минимальная точность decimal-контекста для округления и рендеринга
# Для больших значений контекст расширяется под целую часть плюс rounding place
DECIMAL_PRECISION: Final[int] = 64


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        NonFiniteQuantityError: Если value равно NaN или Inf
    """
    if not is_valid_float(value):
        raise NonFiniteQuantityError(f"{name} must be a finite float (not NaN/Inf), got {value}")


def validate_rounding_place(place: int) -> None:
    """
    Валидация разряда округления.

    Raises:
        ValueError: Если place < 0
    """
    if place < 0:
        raise ValueError(f"rounding place must be non-negative, got {place}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# DECIMAL-ОКРУГЛЕНИЕ
# =============================================================================


def to_decimal(value: Numeric) -> Decimal:
    """
    Конверсия числа в Decimal.

    float конвертируется через repr (кратчайшее десятичное представление),
    поэтому 0.1 становится Decimal('0.1'), а не двоичным приближением.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_half_away(value: Numeric, places: int) -> Decimal:
    """
    Округление до places знаков после запятой (half away from zero).

    Args:
        value: Конечное значение
        places: Количество знаков после запятой (>= 0)

    Returns:
        Decimal с ровно places знаками после запятой

    Raises:
        NonFiniteQuantityError: Если value равно NaN/Inf
        ValueError: Если places < 0

    Examples:
        >>> round_half_away(2.5, 0)
        Decimal('3')
        >>> round_half_away(-2.5, 0)
        Decimal('-3')
        >>> round_half_away(1.23456, 3)
        Decimal('1.235')
    """
    validate_rounding_place(places)
    number = to_decimal(value)
    if not number.is_finite():
        raise NonFiniteQuantityError(f"Cannot round non-finite value: {value}")

    # Цифр в результате: целая часть + places (+ запас на перенос разряда)
    context = Context(
        prec=max(DECIMAL_PRECISION, number.adjusted() + places + 2),
        rounding=ROUND_HALF_UP,
    )
    quantum = Decimal(1).scaleb(-places)
    return number.quantize(quantum, context=context)


def fixed_decimal_string(value: Numeric, places: int) -> str:
    """
    Десятичная строка с ровно places знаками (без scientific notation).

    Examples:
        >>> fixed_decimal_string(1e-7, 9)
        '0.000000100'
        >>> fixed_decimal_string(-3.25, 1)
        '-3.3'
    """
    return format(round_half_away(value, places), "f")


def trim_decimal_string(text: str) -> str:
    """
    Удаление незначащих нулей дробной части.

    "12.500" → "12.5", "3.000" → "3", "-0.000" → "0", "120" → "120"
    """
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    # Отрицательный ноль не отображается
    if text in ("-0", "-"):
        return "0"
    return text


def format_rounded(value: Numeric, places: int) -> str:
    """
    Округлённое значение без лишних нулей.

    Используется для continuous-токенов шаблонов и строкового
    представления величин.

    Examples:
        >>> format_rounded(12.58225650000001, 9)
        '12.5822565'
        >>> format_rounded(359.99, 0)
        '360'
    """
    return trim_decimal_string(fixed_decimal_string(value, places))
