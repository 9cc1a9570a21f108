"""
Core math modules для astro_units

Численные примитивы и sexagesimal-арифметика.
"""

# Numerical Safeguards
from astro_units.core.math.numerical_safeguards import (
    # Epsilon constants
    DECIMAL_PRECISION,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    validate_rounding_place,
    # Epsilon comparisons
    is_close,
    # Decimal rounding
    fixed_decimal_string,
    format_rounded,
    round_half_away,
    to_decimal,
    trim_decimal_string,
)

# Sexagesimal Codec
from astro_units.core.math.sexagesimal import (
    DEFAULT_ROUNDING_PLACE,
    MINOR2_PER_MAJOR,
    MINOR2_PER_MINOR1,
    SIGN_NEGATIVE,
    SIGN_POSITIVE,
    Components,
    compose,
    decompose,
    find_sign,
    sign_of,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "DECIMAL_PRECISION",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    "validate_rounding_place",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Decimal rounding
    "fixed_decimal_string",
    "format_rounded",
    "round_half_away",
    "to_decimal",
    "trim_decimal_string",
    # Sexagesimal — Constants
    "DEFAULT_ROUNDING_PLACE",
    "MINOR2_PER_MAJOR",
    "MINOR2_PER_MINOR1",
    "SIGN_NEGATIVE",
    "SIGN_POSITIVE",
    # Sexagesimal — Types
    "Components",
    # Sexagesimal — Functions
    "compose",
    "decompose",
    "find_sign",
    "sign_of",
]
