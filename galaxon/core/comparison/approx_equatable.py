"""
ApproxEquatable — exact plus tolerance-based equality.
"""

from abc import abstractmethod
from typing import Any, Iterable

from galaxon.core.comparison.equatable import Equatable
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    approx_equal,
    check_tolerances,
)


class ApproxEquatable(Equatable):
    """
    Mixin for value types with floating-point components.

    Implementations supply equal() (exact) and approx_equal() (within
    tolerance). Both return False for incompatible types and never raise.

    Example:
        class Complex(BaseModel, ApproxEquatable):
            real: float
            imag: float

            def equal(self, other: Any) -> bool:
                return isinstance(other, Complex) and (
                    self.real == other.real and self.imag == other.imag
                )

            def approx_equal(self, other, rel_tol=..., abs_tol=...) -> bool:
                return isinstance(other, Complex) and approx_equal_components(
                    [(self.real, other.real), (self.imag, other.imag)], rel_tol, abs_tol
                )
    """

    @abstractmethod
    def approx_equal(
        self,
        other: Any,
        rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
        abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    ) -> bool:
        """
        Check if this value equals another within tolerance.

        Numeric components should be compared with the float tolerance
        primitive (galaxon.core.math.floats.approx_equal). A composite value
        is approximately equal only if every component is.

        To compare purely by absolute difference, set rel_tol to 0.
        To compare purely by relative difference, set abs_tol to 0.

        Returns:
            True if equal within tolerance, False otherwise (including for
            incompatible types)
        """


def approx_equal_components(
    pairs: Iterable[tuple[float, float]],
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
) -> bool:
    """
    Logical AND of the float tolerance primitive over component pairs.

    Args:
        pairs: (mine, theirs) for each scalar component
        rel_tol: Relative tolerance applied to every component
        abs_tol: Absolute tolerance applied to every component

    Returns:
        True if every pair is approximately equal (True for no pairs)

    Raises:
        ToleranceError: If either tolerance is negative
    """
    check_tolerances(rel_tol, abs_tol)
    return all(approx_equal(a, b, rel_tol, abs_tol) for a, b in pairs)
