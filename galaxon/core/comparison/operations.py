"""
Generic algorithms over the comparison capabilities.

Sorting, extremum search, lookup and deduplication written once against the
capability contracts instead of per value type.

Equality-based functions (index_of, unique_values, approx_unique_values)
never raise for mixed-type input. Ordering-based functions (sort_values,
approx_sort_values, min_value, max_value) raise IncompatibleTypeError.
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable, Sequence, TypeVar

from galaxon.core.comparison.approx_comparable import ApproxComparable
from galaxon.core.comparison.approx_equatable import ApproxEquatable
from galaxon.core.comparison.comparable import Comparable
from galaxon.core.comparison.equatable import Equatable
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    check_tolerances,
)
from galaxon.core.ordering import Ordering

C = TypeVar("C", bound=Comparable)
AC = TypeVar("AC", bound=ApproxComparable)
E = TypeVar("E", bound=Equatable)
AE = TypeVar("AE", bound=ApproxEquatable)


# =============================================================================
# SORT KEYS
# =============================================================================


def _exact_cmp(a: Comparable, b: Comparable) -> int:
    a.check_same_type(b)
    return int(Ordering.coerce(a.compare(b)))


def comparison_key() -> Callable[[Any], Any]:
    """Key function for sorted()/list.sort() using compare()."""
    return cmp_to_key(_exact_cmp)


def approx_comparison_key(
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
) -> Callable[[Any], Any]:
    """
    Key function using approx_compare().

    Values within tolerance of each other sort as ties (Python's sort is
    stable, so their input order is kept). See ApproxComparable for why this
    is not a consistent total order across chains of near-equal values.
    """
    check_tolerances(rel_tol, abs_tol)

    def _approx_cmp(a: ApproxComparable, b: ApproxComparable) -> int:
        return int(a.approx_compare(b, rel_tol, abs_tol))

    return cmp_to_key(_approx_cmp)


# =============================================================================
# SORTING & EXTREMA
# =============================================================================


def sort_values(values: Iterable[C], reverse: bool = False) -> list[C]:
    """
    New list sorted by compare().

    Raises:
        IncompatibleTypeError: If the values are not all of one type
    """
    return sorted(values, key=comparison_key(), reverse=reverse)


def approx_sort_values(
    values: Iterable[AC],
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    reverse: bool = False,
) -> list[AC]:
    """
    New list sorted by approx_compare().

    Raises:
        IncompatibleTypeError: If the values are not all of one type
    """
    return sorted(values, key=approx_comparison_key(rel_tol, abs_tol), reverse=reverse)


def min_value(values: Iterable[C]) -> C:
    """
    Smallest value by less_than(); the first one wins among equals.

    Raises:
        ValueError: If values is empty
        IncompatibleTypeError: If the values are not all of one type
    """
    iterator = iter(values)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("min_value() arg is an empty sequence") from None
    for value in iterator:
        if value.less_than(best):
            best = value
    return best


def max_value(values: Iterable[C]) -> C:
    """
    Largest value by greater_than(); the first one wins among equals.

    Raises:
        ValueError: If values is empty
        IncompatibleTypeError: If the values are not all of one type
    """
    iterator = iter(values)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("max_value() arg is an empty sequence") from None
    for value in iterator:
        if value.greater_than(best):
            best = value
    return best


# =============================================================================
# LOOKUP & DEDUPLICATION
# =============================================================================


def index_of(values: Sequence[Any], target: Equatable) -> int:
    """
    Index of the first element equal to target, or -1.

    target.equal() is called with each element, so elements need not be
    Equatable themselves and foreign types simply never match.
    """
    for i, value in enumerate(values):
        if target.equal(value):
            return i
    return -1


def unique_values(values: Iterable[E]) -> list[E]:
    """Order-preserving deduplication by equal(); the first occurrence is kept."""
    kept: list[E] = []
    for value in values:
        if not any(existing.equal(value) for existing in kept):
            kept.append(value)
    return kept


def approx_unique_values(
    values: Iterable[AE],
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
) -> list[AE]:
    """
    Order-preserving deduplication by approx_equal().

    A value is dropped if it is approximately equal to any value already kept.
    """
    check_tolerances(rel_tol, abs_tol)
    kept: list[AE] = []
    for value in values:
        if not any(existing.approx_equal(value, rel_tol, abs_tol) for existing in kept):
            kept.append(value)
    return kept
