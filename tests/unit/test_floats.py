"""
Tests for the float tolerance primitive and IEEE-754 helpers

Covers:
1. approx_equal: relative/absolute tolerance, boundaries, non-finite inputs
2. compare/approx_compare: exact sentinels, NaN rejection
3. Sign-of-zero and integrality inspection
4. trunc/frac/wrap
5. Bit-level conversion and ULP
"""

import math
import sys

import pytest

from galaxon.core.exceptions import GalaxonError, ToleranceError, UndefinedOrderingError
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    MAX_EXACT_INT,
    TAU,
    approx_compare,
    approx_equal,
    assemble,
    bits_to_float,
    compare,
    disassemble,
    float_to_bits,
    frac,
    is_approx_int,
    is_exact_int,
    is_negative,
    is_negative_zero,
    is_positive,
    is_positive_zero,
    is_special,
    next_float,
    normalize_zero,
    previous_float,
    to_hex,
    trunc,
    try_convert_to_int,
    ulp,
    wrap,
)
from galaxon.core.ordering import Ordering

EPS = DEFAULT_ABSOLUTE_TOLERANCE
INF = math.inf
NAN = math.nan


# =============================================================================
# CONSTANTS
# =============================================================================


class TestConstants:
    """Library-wide defaults"""

    def test_default_tolerances(self) -> None:
        """Default relative 1e-9, default absolute = machine epsilon"""
        assert DEFAULT_RELATIVE_TOLERANCE == 1e-9
        assert DEFAULT_ABSOLUTE_TOLERANCE == 2.0**-52

    def test_max_exact_int(self) -> None:
        """2**53 is the exact-integer limit"""
        assert MAX_EXACT_INT == 9007199254740992

    def test_tau(self) -> None:
        """TAU is one full turn"""
        assert TAU == 2 * math.pi


# =============================================================================
# APPROX_EQUAL
# =============================================================================


class TestApproxEqual:
    """Tests for approx_equal"""

    def test_identical_values(self) -> None:
        """Identical values are equal even with zero tolerances"""
        assert approx_equal(0.0, 0.0, 0.0, 0.0) is True
        assert approx_equal(123.456, 123.456, 0.0, 0.0) is True

    def test_default_absolute_tolerance_near_zero(self) -> None:
        """Near zero the absolute tolerance decides"""
        assert approx_equal(0.0, EPS / 2) is True
        assert approx_equal(0.0, EPS * 2) is False

    def test_exact_tolerance_edge(self) -> None:
        """A difference of exactly 2 ulps at 1.0 exceeds a 1-ulp absolute tolerance"""
        assert approx_equal(1.0, 1.0 + 2 * EPS, 0.0, EPS) is False
        assert approx_equal(1.0, 1.0 + 2 * EPS, 0.0, 2 * EPS) is True

    def test_relative_tolerance_dominates_at_large_magnitude(self) -> None:
        """Relative tolerance scales with magnitude"""
        assert approx_equal(1e15, 1e15 + 1e5, 1e-9, 0.0) is True
        assert approx_equal(1e15, 1e15 + 1e7, 1e-9, 0.0) is False

    def test_absolute_tolerance_dominates_near_zero(self) -> None:
        """Pure relative check fails for tiny values, absolute check passes"""
        assert approx_equal(1e-20, 2e-20, 1e-9, 0.0) is False
        assert approx_equal(1e-20, 2e-20, 0.0, 1e-10) is True

    def test_custom_tolerances(self) -> None:
        """Combined tolerance is the larger of the two"""
        assert approx_equal(100.0, 105.0, 0.1, 1.0) is True
        assert approx_equal(100.0, 115.0, 0.1, 1.0) is False
        assert approx_equal(0.0, 0.5, 1e-9, 1.0) is True

    def test_signed_zeros(self) -> None:
        """+0.0 and -0.0 are equal"""
        assert approx_equal(0.0, -0.0) is True
        assert approx_equal(-0.0, 0.0) is True
        assert approx_equal(-0.0, -0.0, 0.0, 0.0) is True

    def test_same_infinity(self) -> None:
        """An infinity equals itself"""
        assert approx_equal(INF, INF) is True
        assert approx_equal(-INF, -INF) is True
        assert approx_equal(INF, INF, 0.0, 0.0) is True

    def test_infinity_and_finite(self) -> None:
        """An infinity never equals a finite value, whatever the tolerance"""
        assert approx_equal(INF, 1.0) is False
        assert approx_equal(1.0, INF) is False
        assert approx_equal(-INF, 1e308, 1.0, 1e308) is False

    def test_opposite_infinities(self) -> None:
        """+inf is not -inf"""
        assert approx_equal(INF, -INF) is False
        assert approx_equal(-INF, INF) is False

    def test_nan(self) -> None:
        """NaN equals nothing, itself included"""
        assert approx_equal(NAN, NAN) is False
        assert approx_equal(NAN, 0.0) is False
        assert approx_equal(0.0, NAN) is False
        assert approx_equal(NAN, NAN, 1.0, 1.0) is False

    @pytest.mark.parametrize(
        "a,b,rel_tol,abs_tol",
        [
            (1.0, 1.0 + 1e-10, 1e-9, 0.0),
            (1.0, 1.1, 1e-9, 0.0),
            (1e-20, 2e-20, 0.0, 1e-10),
            (-5.0, 5.0, 0.5, 0.0),
            (INF, 1.0, 1e-9, EPS),
            (3.0, -0.0, 0.0, 3.0),
        ],
    )
    def test_symmetry(self, a: float, b: float, rel_tol: float, abs_tol: float) -> None:
        """approx_equal(a, b) == approx_equal(b, a)"""
        assert approx_equal(a, b, rel_tol, abs_tol) == approx_equal(b, a, rel_tol, abs_tol)

    @pytest.mark.parametrize("value", [0.0, -0.0, 1.0, -1e308, 5e-324, INF, -INF])
    def test_reflexivity(self, value: float) -> None:
        """Every non-NaN value equals itself under any tolerance"""
        assert approx_equal(value, value, 0.0, 0.0) is True
        assert approx_equal(value, value) is True

    def test_negative_tolerance_raises(self) -> None:
        """Negative tolerances are rejected"""
        with pytest.raises(ToleranceError, match="non-negative"):
            approx_equal(1.0, 1.0, -0.1, 0.0)

        with pytest.raises(ToleranceError, match="non-negative"):
            approx_equal(1.0, 1.0, 0.0, -0.1)

    def test_nan_tolerance_raises(self) -> None:
        """NaN tolerances are rejected"""
        with pytest.raises(ToleranceError):
            approx_equal(1.0, 1.0, NAN, 0.0)

    def test_tolerance_error_is_value_error(self) -> None:
        """ToleranceError can be caught as ValueError or GalaxonError"""
        with pytest.raises(ValueError):
            approx_equal(1.0, 1.0, -1.0, 0.0)
        with pytest.raises(GalaxonError):
            approx_equal(1.0, 1.0, -1.0, 0.0)


# =============================================================================
# COMPARE / APPROX_COMPARE
# =============================================================================


class TestCompare:
    """Tests for compare"""

    def test_less(self) -> None:
        """a < b → LESS"""
        assert compare(1.0, 2.0) is Ordering.LESS
        assert compare(-5.0, -4.0) is Ordering.LESS

    def test_greater(self) -> None:
        """a > b → GREATER"""
        assert compare(2.0, 1.0) is Ordering.GREATER
        assert compare(1.0, 1.0 - EPS) is Ordering.GREATER

    def test_equal(self) -> None:
        """Equal values, including opposite zeros → EQUAL"""
        assert compare(1.5, 1.5) is Ordering.EQUAL
        assert compare(-0.0, 0.0) is Ordering.EQUAL

    def test_infinities(self) -> None:
        """-inf < finite < +inf"""
        assert compare(-INF, -1e308) is Ordering.LESS
        assert compare(INF, 1e308) is Ordering.GREATER
        assert compare(INF, INF) is Ordering.EQUAL
        assert compare(-INF, INF) is Ordering.LESS

    def test_antisymmetry(self) -> None:
        """compare(a, b) == LESS iff compare(b, a) == GREATER"""
        pairs = [(1.0, 2.0), (-INF, 0.0), (1e-300, 1e-299)]
        for a, b in pairs:
            assert compare(a, b) is Ordering.LESS
            assert compare(b, a) is Ordering.GREATER

    def test_nan_raises(self) -> None:
        """NaN cannot be ordered"""
        with pytest.raises(UndefinedOrderingError, match="NaN"):
            compare(NAN, 1.0)
        with pytest.raises(UndefinedOrderingError):
            compare(1.0, NAN)


class TestApproxCompare:
    """Tests for approx_compare"""

    def test_equal_values(self) -> None:
        """Identical values → EQUAL"""
        assert approx_compare(1.0, 1.0) is Ordering.EQUAL
        assert approx_compare(-5.5, -5.5) is Ordering.EQUAL

    def test_approximately_equal(self) -> None:
        """Values within tolerance → EQUAL even if exactly ordered"""
        assert compare(0.0, EPS / 2) is Ordering.LESS
        assert approx_compare(0.0, EPS / 2) is Ordering.EQUAL

    def test_outside_tolerance_uses_exact_order(self) -> None:
        """Values outside tolerance keep the exact order"""
        assert approx_compare(1.0, 2.0) is Ordering.LESS
        assert approx_compare(-4.0, -5.0) is Ordering.GREATER

    def test_custom_tolerances(self) -> None:
        """Tolerances are forwarded"""
        assert approx_compare(100.0, 105.0, 0.1, 1.0) is Ordering.EQUAL
        assert approx_compare(100.0, 115.0, 0.1, 1.0) is Ordering.LESS

    def test_nan_raises(self) -> None:
        """NaN cannot be ordered, even approximately"""
        with pytest.raises(UndefinedOrderingError):
            approx_compare(NAN, NAN)


# =============================================================================
# INSPECTION
# =============================================================================


class TestSignedZero:
    """Tests for sign-of-zero helpers"""

    def test_negative_zero(self) -> None:
        """Only -0.0 is negative zero"""
        assert is_negative_zero(-0.0) is True
        assert is_negative_zero(0.0) is False
        assert is_negative_zero(-1e-300) is False

    def test_positive_zero(self) -> None:
        """Only +0.0 is positive zero"""
        assert is_positive_zero(0.0) is True
        assert is_positive_zero(-0.0) is False

    def test_is_negative(self) -> None:
        """-0.0, -inf and negatives are negative; NaN is not"""
        assert is_negative(-0.0) is True
        assert is_negative(-INF) is True
        assert is_negative(-1.0) is True
        assert is_negative(0.0) is False
        assert is_negative(NAN) is False

    def test_is_positive(self) -> None:
        """+0.0, +inf and positives are positive; NaN is not"""
        assert is_positive(0.0) is True
        assert is_positive(INF) is True
        assert is_positive(-0.0) is False
        assert is_positive(NAN) is False

    def test_is_special(self) -> None:
        """NaN, ±inf and -0.0 are special; +0.0 is not"""
        assert is_special(NAN) is True
        assert is_special(INF) is True
        assert is_special(-0.0) is True
        assert is_special(0.0) is False
        assert is_special(1.0) is False


class TestIntegrality:
    """Tests for is_exact_int and is_approx_int"""

    def test_exact_int(self) -> None:
        """Integral floats within ±2**53"""
        assert is_exact_int(42.0) is True
        assert is_exact_int(-42.0) is True
        assert is_exact_int(2.0**53) is True
        assert is_exact_int(42.5) is False
        assert is_exact_int(2.0**54) is False
        assert is_exact_int(INF) is False
        assert is_exact_int(NAN) is False

    def test_approx_int(self) -> None:
        """Integral within tolerance"""
        assert is_approx_int(3.0) is True
        assert is_approx_int(3.0000000001) is True
        assert is_approx_int(math.log10(1000)) is True
        assert is_approx_int(3.5) is False
        assert is_approx_int(INF) is False
        assert is_approx_int(NAN) is False


# =============================================================================
# TRANSFORMATION
# =============================================================================


class TestTransformation:
    """Tests for normalize_zero, trunc, frac, wrap"""

    def test_normalize_zero(self) -> None:
        """-0.0 becomes +0.0, everything else unchanged"""
        assert math.copysign(1.0, normalize_zero(-0.0)) == 1.0
        assert normalize_zero(-2.5) == -2.5

    def test_trunc(self) -> None:
        """Truncation towards zero"""
        assert trunc(3.7) == 3.0
        assert trunc(-3.7) == -3.0
        assert isinstance(trunc(3.7), float)
        assert trunc(INF) == INF
        assert math.isnan(trunc(NAN))

    def test_frac(self) -> None:
        """Fractional part keeps the sign"""
        assert frac(3.5) == 0.5
        assert frac(-3.5) == -0.5
        assert math.isnan(frac(INF))
        assert math.isnan(frac(NAN))

    def test_wrap_signed(self) -> None:
        """Signed range (-half, half]"""
        assert wrap(270.0, 360.0) == -90.0
        assert wrap(180.0, 360.0) == 180.0
        assert wrap(-180.0, 360.0) == 180.0
        assert wrap(540.0, 360.0) == 180.0

    def test_wrap_unsigned(self) -> None:
        """Unsigned range [0, period)"""
        assert wrap(-90.0, 360.0, signed=False) == 270.0
        assert wrap(360.0, 360.0, signed=False) == 0.0

    def test_wrap_never_returns_negative_zero(self) -> None:
        """-0.0 results are normalized"""
        result = wrap(-360.0, 360.0, signed=False)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    @pytest.mark.parametrize("signed", [True, False])
    def test_wrap_non_finite(self, value: float, signed: bool) -> None:
        """±inf and NaN wrap to NaN"""
        assert math.isnan(wrap(value, 360.0, signed))


# =============================================================================
# CONVERSION
# =============================================================================


class TestConversion:
    """Tests for int conversion and bit-level helpers"""

    def test_try_convert_to_int(self) -> None:
        """Only integral finite floats convert"""
        assert try_convert_to_int(3.0) == 3
        assert isinstance(try_convert_to_int(3.0), int)
        assert try_convert_to_int(-0.0) == 0
        assert try_convert_to_int(3.5) is None
        assert try_convert_to_int(INF) is None
        assert try_convert_to_int(NAN) is None

    def test_to_hex(self) -> None:
        """Distinct 16-char hex per bit pattern"""
        assert to_hex(1.0) == "3ff0000000000000"
        assert to_hex(0.0) == "0000000000000000"
        assert to_hex(-0.0) == "8000000000000000"
        assert to_hex(INF) == "7ff0000000000000"

    def test_bits_round_trip(self) -> None:
        """bits_to_float inverts float_to_bits"""
        assert float_to_bits(1.0) == 0x3FF0000000000000
        assert bits_to_float(0x3FF0000000000000) == 1.0
        assert bits_to_float(float_to_bits(-2.5)) == -2.5

    def test_bits_out_of_range(self) -> None:
        """Bit patterns must fit in 64 unsigned bits"""
        with pytest.raises(ValueError, match="bits must be"):
            bits_to_float(-1)
        with pytest.raises(ValueError, match="bits must be"):
            bits_to_float(2**64)

    def test_disassemble(self) -> None:
        """-2.5 = -1.25 × 2**1"""
        parts = disassemble(-2.5)
        assert parts.sign == 1
        assert parts.exponent == 1024
        assert parts.fraction == 1 << 50
        assert parts.bits == float_to_bits(-2.5)

    def test_assemble(self) -> None:
        """Components build the expected float"""
        assert assemble(0, 1023, 0) == 1.0
        assert assemble(1, 1024, 1 << 50) == -2.5
        assert assemble(0, 2047, 0) == INF

    def test_assemble_invalid_components(self) -> None:
        """Out-of-range components are rejected"""
        with pytest.raises(ValueError, match="sign"):
            assemble(2, 0, 0)
        with pytest.raises(ValueError, match="exponent"):
            assemble(0, 2048, 0)
        with pytest.raises(ValueError, match="fraction"):
            assemble(0, 0, 1 << 52)


# =============================================================================
# ULP
# =============================================================================


class TestUlp:
    """Tests for next_float, previous_float, ulp"""

    def test_next_and_previous(self) -> None:
        """Neighbours of 1.0"""
        assert next_float(1.0) == 1.0 + EPS
        assert previous_float(1.0) == 1.0 - EPS / 2
        assert previous_float(next_float(1.0)) == 1.0

    def test_next_at_limits(self) -> None:
        """Infinities and NaN"""
        assert next_float(INF) == INF
        assert next_float(sys.float_info.max) == INF
        assert previous_float(-INF) == -INF
        assert math.isnan(next_float(NAN))

    def test_ulp(self) -> None:
        """ULP at 1.0 is the default absolute tolerance"""
        assert ulp(1.0) == EPS
        assert ulp(2.0) == 2 * EPS
        assert ulp(-1.0) == ulp(1.0)

    def test_ulp_special_values(self) -> None:
        """Zero, infinity and NaN"""
        assert ulp(0.0) == 5e-324
        assert ulp(-0.0) == 5e-324
        assert ulp(INF) == INF
        assert ulp(-INF) == INF
        assert math.isnan(ulp(NAN))
