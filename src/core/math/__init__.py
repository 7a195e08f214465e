"""
Core math modules для длинной арифметики

Ядро операций над магнитудами по основанию 10^8 и десятичный кодек.
"""

# Limb Arithmetic
from src.core.math.limb_arithmetic import (
    # Representation constants
    BASE,
    LIMB_PRODUCT_MAX,
    WIDTH,
    # Magnitude operations
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    multiply_magnitudes,
    subtract_magnitudes,
    trim_leading_zeros,
)

# Decimal Codec
from src.core.math.decimal_codec import (
    InvalidFormat,
    digits_to_limbs,
    int_to_limbs,
    limbs_to_decimal,
    normalize_sign,
    parse_decimal,
)

__all__ = [
    # Limb Arithmetic — Constants
    "BASE",
    "LIMB_PRODUCT_MAX",
    "WIDTH",
    # Limb Arithmetic — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "is_zero_magnitude",
    "multiply_magnitudes",
    "subtract_magnitudes",
    "trim_leading_zeros",
    # Decimal Codec — Exceptions
    "InvalidFormat",
    # Decimal Codec — Functions
    "digits_to_limbs",
    "int_to_limbs",
    "limbs_to_decimal",
    "normalize_sign",
    "parse_decimal",
]
