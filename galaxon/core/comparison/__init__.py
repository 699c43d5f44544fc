"""
Comparison capabilities.

Composition order: Equatable → {Comparable, ApproxEquatable} → ApproxComparable.
"""

from galaxon.core.comparison.approx_comparable import ApproxComparable
from galaxon.core.comparison.approx_equatable import (
    ApproxEquatable,
    approx_equal_components,
)
from galaxon.core.comparison.comparable import Comparable
from galaxon.core.comparison.equatable import Equatable
from galaxon.core.comparison.operations import (
    approx_comparison_key,
    approx_sort_values,
    approx_unique_values,
    comparison_key,
    index_of,
    max_value,
    min_value,
    sort_values,
    unique_values,
)

__all__ = [
    # Capabilities
    "Equatable",
    "Comparable",
    "ApproxEquatable",
    "ApproxComparable",
    # Helpers
    "approx_equal_components",
    # Generic operations
    "comparison_key",
    "approx_comparison_key",
    "sort_values",
    "approx_sort_values",
    "min_value",
    "max_value",
    "index_of",
    "unique_values",
    "approx_unique_values",
]
