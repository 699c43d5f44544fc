"""
Floats — Tolerance Primitive & IEEE-754 Helpers

The module is the single place where floating-point edge cases are decided:
- Approximate equality with combined relative/absolute tolerance
- Exact and tolerance-aware three-way comparison (sign-normalized)
- Sign-of-zero, special-value and integrality inspection
- Bit-level access to binary64 values and ULP spacing

CRITICAL INVARIANTS:
1. approx_equal(a, b) == approx_equal(b, a) for all inputs
2. approx_equal(x, x) is True for every non-NaN x (infinities included)
3. NaN is never approximately equal to anything, itself included
4. compare()/approx_compare() return exactly one Ordering sentinel; NaN has no
   place in the order and raises UndefinedOrderingError
5. Tolerances are explicit arguments; module constants are only defaults

ALGORITHM (approx_equal):
    |a - b| <= max(rel_tol * max(|a|, |b|), abs_tol)
"""

import math
import struct
import sys
from typing import Final, NamedTuple, Optional

from galaxon.core.environment import require_64bit
from galaxon.core.exceptions import ToleranceError, UndefinedOrderingError
from galaxon.core.ordering import Ordering

# =============================================================================
# TOLERANCE DEFAULTS
# =============================================================================

# Default relative tolerance: ~9 significant decimal digits must agree
DEFAULT_RELATIVE_TOLERANCE: Final[float] = 1e-9

# Default absolute tolerance: gap between 1.0 and the next float (2**-52)
DEFAULT_ABSOLUTE_TOLERANCE: Final[float] = sys.float_info.epsilon

# =============================================================================
# REPRESENTATION CONSTANTS
# =============================================================================

# Largest magnitude below which every integer is exactly representable (2**53)
MAX_EXACT_INT: Final[int] = 1 << 53

# One full turn in radians
TAU: Final[float] = 2 * math.pi

_SIGN_MASK: Final[int] = 0x1
_EXPONENT_MASK: Final[int] = 0x7FF
_FRACTION_MASK: Final[int] = 0xFFFFFFFFFFFFF
_BITS_MAX: Final[int] = 0xFFFFFFFFFFFFFFFF


class FloatParts(NamedTuple):
    """IEEE-754 binary64 components of a float"""

    bits: int
    sign: int
    exponent: int
    fraction: int


# =============================================================================
# TOLERANCE COMPARISONS
# =============================================================================


def check_tolerances(rel_tol: float, abs_tol: float) -> None:
    """
    Validate a tolerance pair.

    Raises:
        ToleranceError: If either tolerance is negative or NaN
    """
    # `not x >= 0` also rejects NaN
    if not rel_tol >= 0 or not abs_tol >= 0:
        raise ToleranceError(
            f"Tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}"
        )


def approx_equal(
    a: float,
    b: float,
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
) -> bool:
    """
    Check if two floats are approximately equal.

    Same semantics as math.isclose, with library defaults and a library error
    for invalid tolerances.

    To compare purely by absolute difference, set rel_tol to 0.
    To compare purely by relative difference, set abs_tol to 0.

    Args:
        a: First value
        b: Second value
        rel_tol: Maximum allowed difference relative to the larger magnitude
        abs_tol: Maximum allowed absolute difference (safety net near zero)

    Returns:
        True if |a - b| <= max(rel_tol * max(|a|, |b|), abs_tol).
        NaN → always False. Infinities → equal only to the same infinity.

    Raises:
        ToleranceError: If either tolerance is negative or NaN

    Examples:
        >>> approx_equal(1e15, 1e15 + 1e5, 1e-9, 0.0)
        True
        >>> approx_equal(1e-20, 2e-20, 1e-9, 0.0)
        False
        >>> approx_equal(1e-20, 2e-20, 0.0, 1e-10)
        True
        >>> approx_equal(float("inf"), float("inf"))
        True
    """
    check_tolerances(rel_tol, abs_tol)
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare(a: float, b: float) -> Ordering:
    """
    Exact three-way comparison of two floats.

    Consistent with IEEE ordering: -inf < finite < +inf, and -0.0 == +0.0.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Raises:
        UndefinedOrderingError: If either value is NaN
    """
    if math.isnan(a) or math.isnan(b):
        raise UndefinedOrderingError("Cannot compare NaN with any value, even itself.")
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def approx_compare(
    a: float,
    b: float,
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
) -> Ordering:
    """
    Three-way comparison where values within tolerance are EQUAL.

    Outside tolerance the exact order of compare() is returned.

    Raises:
        UndefinedOrderingError: If either value is NaN
        ToleranceError: If either tolerance is negative

    Examples:
        >>> approx_compare(100.0, 105.0, 0.1, 1.0)
        <Ordering.EQUAL: 0>
        >>> approx_compare(100.0, 115.0, 0.1, 1.0)
        <Ordering.LESS: -1>
    """
    if math.isnan(a) or math.isnan(b):
        raise UndefinedOrderingError("Cannot compare NaN with any value, even itself.")
    if approx_equal(a, b, rel_tol, abs_tol):
        return Ordering.EQUAL
    return compare(a, b)


# =============================================================================
# INSPECTION
# =============================================================================


def is_negative_zero(value: float) -> bool:
    """True only for -0.0."""
    return value == 0.0 and math.copysign(1.0, value) < 0


def is_positive_zero(value: float) -> bool:
    """True only for +0.0."""
    return value == 0.0 and math.copysign(1.0, value) > 0


def is_negative(value: float) -> bool:
    """
    True for -0.0, -inf and negative values.

    False for +0.0, +inf, NaN and positive values.
    """
    return not math.isnan(value) and (value < 0 or is_negative_zero(value))


def is_positive(value: float) -> bool:
    """
    True for +0.0, +inf and positive values.

    False for -0.0, -inf, NaN and negative values.
    """
    return not math.isnan(value) and (value > 0 or is_positive_zero(value))


def is_special(value: float) -> bool:
    """True for NaN, ±inf and -0.0. +0.0 is not special."""
    return not math.isfinite(value) or is_negative_zero(value)


def is_exact_int(value: float) -> bool:
    """
    Check if a float holds an integer with no rounding error.

    Examples:
        >>> is_exact_int(42.0)
        True
        >>> is_exact_int(42.5)
        False
        >>> is_exact_int(2.0**53)
        True
        >>> is_exact_int(2.0**54)
        False
    """
    return math.isfinite(value) and value.is_integer() and abs(value) <= MAX_EXACT_INT


def is_approx_int(
    value: float,
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
) -> bool:
    """
    Check if a float is an integer within tolerance.

    Examples:
        >>> is_approx_int(3.0000000001)
        True
        >>> is_approx_int(3.5)
        False
    """
    if not math.isfinite(value):
        return False
    return approx_equal(value, float(round(value)), rel_tol, abs_tol)


# =============================================================================
# TRANSFORMATION
# =============================================================================


def normalize_zero(value: float) -> float:
    """Replace -0.0 with +0.0; every other value is returned unchanged."""
    return 0.0 if value == 0.0 else value


def trunc(value: float) -> float:
    """
    Truncate towards zero, keeping the float type.

    Non-finite values are returned unchanged.

    Examples:
        >>> trunc(3.7)
        3.0
        >>> trunc(-3.7)
        -3.0
    """
    if not math.isfinite(value):
        return value
    return float(math.trunc(value))


def frac(value: float) -> float:
    """
    Fractional part, with the sign of the value: value == trunc(value) + frac(value).

    frac(±inf) and frac(NaN) are NaN.
    """
    if not math.isfinite(value):
        return math.nan
    return value - trunc(value)


def wrap(value: float, units_per_turn: float = TAU, signed: bool = True) -> float:
    """
    Wrap a periodic value (typically an angle) into a standard range.

    Args:
        value: Value to wrap
        units_per_turn: Period (default: TAU radians)
        signed: True → (-units_per_turn/2, units_per_turn/2],
                False → [0, units_per_turn)

    Returns:
        Wrapped value; -0.0 is normalized to 0.0. Non-finite values have no
        position in the period, so ±inf and NaN give NaN.

    Examples:
        >>> wrap(270.0, 360.0)
        -90.0
        >>> wrap(-90.0, 360.0, signed=False)
        270.0
    """
    if not math.isfinite(value):
        return math.nan

    r = math.fmod(value, units_per_turn)

    if signed:
        half = units_per_turn / 2.0
        if r <= -half:
            r += units_per_turn
        elif r > half:
            r -= units_per_turn
    elif r < 0.0:
        r += units_per_turn

    return normalize_zero(r)


# =============================================================================
# CONVERSION
# =============================================================================


def try_convert_to_int(value: float) -> Optional[int]:
    """Lossless float → int conversion, or None if value is not integral or not finite."""
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


def float_to_bits(value: float) -> int:
    """
    Raw binary64 bit pattern of a float as an unsigned 64-bit integer.

    Raises:
        RuntimeError: If the platform is not 64-bit
    """
    require_64bit()
    return struct.unpack(">Q", struct.pack(">d", value))[0]


def bits_to_float(bits: int) -> float:
    """
    Inverse of float_to_bits().

    Raises:
        ValueError: If bits is outside [0, 2**64 - 1]
        RuntimeError: If the platform is not 64-bit
    """
    require_64bit()
    if not 0 <= bits <= _BITS_MAX:
        raise ValueError(f"bits must be in the range [0, 2**64 - 1], got {bits}")
    return struct.unpack(">d", struct.pack(">Q", bits))[0]


def to_hex(value: float) -> str:
    """
    16-character hex string of the bit pattern.

    Unlike str(), every distinct float (including -0.0 and the infinities)
    produces a distinct string.

    Examples:
        >>> to_hex(1.0)
        '3ff0000000000000'
        >>> to_hex(-0.0)
        '8000000000000000'
    """
    return f"{float_to_bits(value):016x}"


def disassemble(value: float) -> FloatParts:
    """Split a float into its sign bit, 11-bit biased exponent and 52-bit fraction."""
    bits = float_to_bits(value)
    return FloatParts(
        bits=bits,
        sign=(bits >> 63) & _SIGN_MASK,
        exponent=(bits >> 52) & _EXPONENT_MASK,
        fraction=bits & _FRACTION_MASK,
    )


def assemble(sign: int, exponent: int, fraction: int) -> float:
    """
    Build a float from its IEEE-754 components.

    Raises:
        ValueError: If any component is out of range
    """
    if sign not in (0, 1):
        raise ValueError(f"sign must be 0 or 1, got {sign}")
    if not 0 <= exponent <= _EXPONENT_MASK:
        raise ValueError(f"exponent must be in the range [0, 2047], got {exponent}")
    if not 0 <= fraction <= _FRACTION_MASK:
        raise ValueError(f"fraction must be in the range [0, 2**52 - 1], got {fraction}")
    return bits_to_float((sign << 63) | (exponent << 52) | fraction)


# =============================================================================
# ULP
# =============================================================================


def next_float(value: float) -> float:
    """Next representable float towards +inf (NaN stays NaN, +inf stays +inf)."""
    return math.nextafter(value, math.inf)


def previous_float(value: float) -> float:
    """Next representable float towards -inf (NaN stays NaN, -inf stays -inf)."""
    return math.nextafter(value, -math.inf)


def ulp(value: float) -> float:
    """
    Unit in the last place: spacing between |value| and the next larger float.

    Special cases:
        ulp(NaN) → NaN
        ulp(±inf) → inf
        ulp(±0.0) → smallest subnormal (5e-324)
        ulp(-x) == ulp(x)

    Examples:
        >>> ulp(1.0) == DEFAULT_ABSOLUTE_TOLERANCE
        True
    """
    return math.ulp(value)
