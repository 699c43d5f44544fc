"""
Core comparison capabilities, tolerance primitive and value types.

This package is independent of any I/O or external system; every operation
is a pure function of its arguments.
"""

from galaxon.core.comparison import (
    ApproxComparable,
    ApproxEquatable,
    Comparable,
    Equatable,
)
from galaxon.core.exceptions import (
    GalaxonError,
    IncompatibleTypeError,
    InvalidOrderingError,
    ToleranceError,
    UndefinedOrderingError,
)
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
)
from galaxon.core.math.tolerance import Tolerance
from galaxon.core.ordering import Ordering

__all__ = [
    # Capabilities
    "Equatable",
    "Comparable",
    "ApproxEquatable",
    "ApproxComparable",
    # Ordering
    "Ordering",
    # Tolerances
    "DEFAULT_ABSOLUTE_TOLERANCE",
    "DEFAULT_RELATIVE_TOLERANCE",
    "Tolerance",
    # Exceptions
    "GalaxonError",
    "IncompatibleTypeError",
    "InvalidOrderingError",
    "ToleranceError",
    "UndefinedOrderingError",
]
