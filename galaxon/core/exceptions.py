"""
Exceptions — Library Error Hierarchy

All library failures derive from GalaxonError. Each concrete error also
derives from the builtin exception a caller would naturally catch
(TypeError for type mismatches, ValueError for invalid numeric input), so
code that does not know about this library still handles them.

POLICY:
1. IncompatibleTypeError is the only type-mismatch failure, and it is raised
   only by ordering operations (compare, less_than, ..., approx_compare)
2. Equality operations (equal, approx_equal) never raise on incompatible types
"""

from typing import Any


class GalaxonError(Exception):
    """Base class for every exception raised by this library."""

    pass


# =============================================================================
# COMPARISON ERRORS
# =============================================================================


class IncompatibleTypeError(GalaxonError, TypeError):
    """
    Raised when ordering is attempted between values of incompatible types.

    The message is generated from the runtime types of both operands, e.g.
    "Cannot compare Version with str."
    """

    def __init__(self, left: Any, right: Any):
        self.left_type = type(left).__name__
        self.right_type = type(right).__name__
        self.message = f"Cannot compare {self.left_type} with {self.right_type}."
        super().__init__(self.message)


class InvalidOrderingError(GalaxonError, ValueError):
    """
    Raised when a compare() implementation returns something other than
    exactly -1, 0 or 1.
    """

    def __init__(self, result: Any):
        self.result = result
        self.message = (
            f"compare() must return exactly -1, 0 or 1, got {result!r} "
            f"({type(result).__name__})"
        )
        super().__init__(self.message)


class UndefinedOrderingError(GalaxonError, ValueError):
    """Raised when an ordering is requested for a value that has none (NaN)."""

    pass


# =============================================================================
# TOLERANCE ERRORS
# =============================================================================


class ToleranceError(GalaxonError, ValueError):
    """Raised when a relative or absolute tolerance is negative (or NaN)."""

    pass
