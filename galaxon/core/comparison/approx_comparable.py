"""
ApproxComparable — ordering where values within tolerance tie.

LIMITATION:
approx_compare() buckets values within tolerance into EQUAL but keeps the
exact order otherwise. Approximate equality is not transitive (a≈b and b≈c
while a < c by more than the tolerance), so approx_compare() is NOT a
consistent total order across chains of approximately-equal values. Sorting
with it is stable-ish bucketing, not a mathematically sound order.
"""

from typing import Any

from galaxon.core.comparison.approx_equatable import ApproxEquatable
from galaxon.core.comparison.comparable import Comparable
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
)
from galaxon.core.ordering import Ordering


class ApproxComparable(Comparable, ApproxEquatable):
    """
    Mixin combining Comparable and ApproxEquatable.

    Implementations supply compare() (exact, tolerance-free) and
    approx_equal(); equal() and the relational operators come from
    Comparable, approx_compare() from here.
    """

    def approx_compare(
        self,
        other: Any,
        rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
        abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    ) -> Ordering:
        """
        Three-way comparison with approximate equality for the EQUAL case.

        Returns:
            EQUAL if approx_equal(other, rel_tol, abs_tol), otherwise the
            exact compare() result

        Raises:
            IncompatibleTypeError: If the types differ (ordering-flavoured,
                so it fails loud like less_than(), not like equal())
            ToleranceError: If either tolerance is negative
        """
        self.check_same_type(other)
        if self.approx_equal(other, rel_tol, abs_tol):
            return Ordering.EQUAL
        return self._ordering(other)
