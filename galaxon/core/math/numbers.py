"""
Numbers — helpers accepting both int and float.
"""

import math
from typing import Union

from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    is_negative_zero,
)
from galaxon.core.math.floats import approx_equal as float_approx_equal

Number = Union[int, float]


def sign(value: Number, zero_for_zero: bool = True) -> int:
    """
    Sign of a number.

    Args:
        value: Number to inspect
        zero_for_zero: If True, zero gives 0. If False, the sign of the zero
            is reported: -0.0 gives -1, int 0 and +0.0 give 1.

    Returns:
        -1, 0 or 1

    Examples:
        >>> sign(-3)
        -1
        >>> sign(-0.0)
        0
        >>> sign(-0.0, zero_for_zero=False)
        -1
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    if zero_for_zero:
        return 0
    return -1 if isinstance(value, float) and is_negative_zero(value) else 1


def copy_sign(num: Number, sign_source: Number) -> Number:
    """
    Magnitude of num with the sign of sign_source (the sign of a zero counts).

    Raises:
        ValueError: If either argument is NaN
    """
    if (isinstance(num, float) and math.isnan(num)) or (
        isinstance(sign_source, float) and math.isnan(sign_source)
    ):
        raise ValueError("NaN is not allowed for either parameter.")
    return abs(num) * sign(sign_source, zero_for_zero=False)


def equal(a: Number, b: Number) -> bool:
    """
    Exact numeric equality.

    Two ints are compared as ints (no precision loss for large values),
    anything else is compared as floats.
    """
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    return float(a) == float(b)


def approx_equal(
    a: Number,
    b: Number,
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
) -> bool:
    """
    Approximate numeric equality.

    Two ints are compared exactly; otherwise both are compared as floats with
    the float tolerance primitive.
    """
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    return float_approx_equal(float(a), float(b), rel_tol, abs_tol)
