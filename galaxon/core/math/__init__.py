"""
Core math modules.

Floating-point tolerance primitive, IEEE-754 helpers and numeric utilities.
"""

# Floats: tolerance primitive (approx_equal, compare, approx_compare)
from galaxon.core.math.floats import (
    # Constants
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    MAX_EXACT_INT,
    TAU,
    # Types
    FloatParts,
    # Comparisons
    approx_compare,
    approx_equal,
    check_tolerances,
    compare,
    # Inspection
    is_approx_int,
    is_exact_int,
    is_negative,
    is_negative_zero,
    is_positive,
    is_positive_zero,
    is_special,
    # Transformation
    frac,
    normalize_zero,
    trunc,
    wrap,
    # Conversion
    assemble,
    bits_to_float,
    disassemble,
    float_to_bits,
    to_hex,
    try_convert_to_int,
    # ULP
    next_float,
    previous_float,
    ulp,
)

# Numbers
from galaxon.core.math.numbers import copy_sign, sign

# Tolerance pair
from galaxon.core.math.tolerance import DEFAULT_TOLERANCE, Tolerance

__all__ = [
    # Floats: Constants
    "DEFAULT_ABSOLUTE_TOLERANCE",
    "DEFAULT_RELATIVE_TOLERANCE",
    "MAX_EXACT_INT",
    "TAU",
    # Floats: Types
    "FloatParts",
    # Floats: Comparisons
    "approx_compare",
    "approx_equal",
    "check_tolerances",
    "compare",
    # Floats: Inspection
    "is_approx_int",
    "is_exact_int",
    "is_negative",
    "is_negative_zero",
    "is_positive",
    "is_positive_zero",
    "is_special",
    # Floats: Transformation
    "frac",
    "normalize_zero",
    "trunc",
    "wrap",
    # Floats: Conversion
    "assemble",
    "bits_to_float",
    "disassemble",
    "float_to_bits",
    "to_hex",
    "try_convert_to_int",
    # Floats: ULP
    "next_float",
    "previous_float",
    "ulp",
    # Numbers
    "copy_sign",
    "sign",
    # Tolerance
    "DEFAULT_TOLERANCE",
    "Tolerance",
]
