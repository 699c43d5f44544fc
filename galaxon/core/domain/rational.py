"""
Rational — exact fraction num/den (ApproxComparable)

Immutable Pydantic model kept in canonical form:
- gcd(num, den) == 1
- den > 0 (the sign lives in num)
- 0 is stored as 0/1

Exact ordering uses integer cross-multiplication (no rounding). Approximate
equality applies the tolerance formula of the float primitive,
|a - b| <= max(rel_tol * max(|a|, |b|), abs_tol), in exact rational
arithmetic, so values beyond the float range (or below its smallest
subnormal) are still compared correctly.
"""

import math
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, Field, model_validator

from galaxon.core.comparison.approx_comparable import ApproxComparable
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    check_tolerances,
)
from galaxon.core.ordering import Ordering


class Rational(BaseModel, ApproxComparable):
    """Fraction num/den in lowest terms"""

    num: int = Field(..., description="Numerator (carries the sign)")
    den: int = Field(1, gt=0, description="Denominator (always positive)")

    model_config = {"frozen": True}

    def __init__(self, num: int, den: int = 1) -> None:
        super().__init__(num=num, den=den)

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Reduce to lowest terms with a positive denominator.

        Raises:
            ValueError: If the denominator is zero
        """
        if not isinstance(data, dict):
            return data
        num, den = data.get("num"), data.get("den", 1)
        if not (isinstance(num, int) and isinstance(den, int)):
            return data
        if den == 0:
            raise ValueError("Denominator cannot be zero")
        g = math.gcd(num, den)
        if den < 0:
            g = -g
        return {**data, "num": num // g, "den": den // g}

    def to_float(self) -> float:
        """
        Nearest float (integer true division, correctly rounded).

        Raises:
            OverflowError: If the magnitude exceeds the float range
        """
        return self.num / self.den

    def to_fraction(self) -> Fraction:
        return Fraction(self.num, self.den)

    def compare(self, other: Any) -> Ordering:
        """
        Exact comparison by cross-multiplication: a/b ? c/d  ⇔  a·d ? c·b (b, d > 0).

        Raises:
            IncompatibleTypeError: If other is not a Rational
        """
        self.check_same_type(other)
        return Ordering.from_sign(self.num * other.den - other.num * self.den)

    def approx_equal(
        self,
        other: Any,
        rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
        abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    ) -> bool:
        """
        Exact-arithmetic tolerance check; False for non-Rationals.

        Raises:
            ToleranceError: If either tolerance is negative
        """
        if not self.is_same_type(other):
            return False
        check_tolerances(rel_tol, abs_tol)
        # Fraction() rejects inf; an infinite tolerance admits any finite pair
        if math.isinf(rel_tol) or math.isinf(abs_tol):
            return True
        a, b = self.to_fraction(), other.to_fraction()
        limit = max(Fraction(rel_tol) * max(abs(a), abs(b)), Fraction(abs_tol))
        return abs(a - b) <= limit

    def __str__(self) -> str:
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"
