"""
Complex — complex number real + imag·i (ApproxEquatable)

Complex numbers have no natural order, so the model only opts into
equality: exact per component, or approximate with every component within
tolerance.
"""

import math
from typing import Any

from pydantic import BaseModel, Field

from galaxon.core.comparison.approx_equatable import (
    ApproxEquatable,
    approx_equal_components,
)
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
)


class Complex(BaseModel, ApproxEquatable):
    """Immutable complex number"""

    real: float = Field(0.0, description="Real part")
    imag: float = Field(0.0, description="Imaginary part")

    model_config = {"frozen": True}

    def __init__(self, real: float = 0.0, imag: float = 0.0) -> None:
        super().__init__(real=real, imag=imag)

    def magnitude(self) -> float:
        return math.hypot(self.real, self.imag)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def equal(self, other: Any) -> bool:
        """Exact component-wise equality; False for non-Complex values."""
        return (
            type(other) is Complex
            and self.real == other.real
            and self.imag == other.imag
        )

    def approx_equal(
        self,
        other: Any,
        rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
        abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    ) -> bool:
        """Both components within tolerance; False for non-Complex values."""
        if type(other) is not Complex:
            return False
        return approx_equal_components(
            [(self.real, other.real), (self.imag, other.imag)], rel_tol, abs_tol
        )

    def __str__(self) -> str:
        sign = "-" if math.copysign(1.0, self.imag) < 0 else "+"
        return f"{self.real} {sign} {abs(self.imag)}i"
