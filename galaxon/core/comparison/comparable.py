"""
Comparable — ordering capability derived from a single compare().

Template method: a value type implements compare() and gets equal(),
less_than(), less_than_or_equal(), greater_than(), greater_than_or_equal()
and the rich comparison operators (<, <=, >, >=) for free.

FAILURE POLICY:
1. equal() consults the type predicate first and returns False on mismatch;
   it never calls compare() for a foreign type and never raises
2. Relational operators run check_same_type() BEFORE compare(), so
   IncompatibleTypeError is raised uniformly whatever compare() does
3. compare() output passes through Ordering.coerce(): anything other than
   exactly -1, 0 or 1 raises InvalidOrderingError
"""

from abc import abstractmethod
from typing import Any

from galaxon.core.comparison.equatable import Equatable
from galaxon.core.exceptions import IncompatibleTypeError
from galaxon.core.log import get_logger
from galaxon.core.ordering import Ordering
from galaxon.core.type_checks import have_same_type

logger = get_logger(__name__)


class Comparable(Equatable):
    """
    Mixin for value types with a natural total order.

    Example:
        class Score(BaseModel, Comparable):
            value: int

            def compare(self, other: Any) -> Ordering:
                self.check_same_type(other)
                return Ordering.from_sign(self.value - other.value)
    """

    @abstractmethod
    def compare(self, other: Any) -> Ordering:
        """
        Three-way comparison with another value.

        Must return exactly Ordering.LESS, Ordering.EQUAL or Ordering.GREATER
        (plain -1, 0, 1 are accepted). Must be consistent and transitive, and
        must not consult any tolerance.

        Raises:
            IncompatibleTypeError: If other cannot be ordered against self
        """

    # -------------------------------------------------------------------------
    # Type compatibility
    # -------------------------------------------------------------------------

    def is_same_type(self, other: Any) -> bool:
        """True if other has exactly the same runtime type as self."""
        return have_same_type(self, other)

    def check_same_type(self, other: Any) -> None:
        """
        Verify that other can be ordered against self.

        Raises:
            IncompatibleTypeError: If the types differ
        """
        if not self.is_same_type(other):
            logger.debug(
                "Refusing to order %s against %s",
                type(self).__name__,
                type(other).__name__,
            )
            raise IncompatibleTypeError(self, other)

    def _ordering(self, other: Any) -> Ordering:
        return Ordering.coerce(self.compare(other))

    # -------------------------------------------------------------------------
    # Derived operations
    # -------------------------------------------------------------------------

    def equal(self, other: Any) -> bool:
        """True if other has the same type and compare() reports EQUAL."""
        return self.is_same_type(other) and self._ordering(other) is Ordering.EQUAL

    def less_than(self, other: Any) -> bool:
        """
        Raises:
            IncompatibleTypeError: If the types differ
        """
        self.check_same_type(other)
        return self._ordering(other) is Ordering.LESS

    def less_than_or_equal(self, other: Any) -> bool:
        """
        Negation of greater_than().

        Raises:
            IncompatibleTypeError: If the types differ
        """
        self.check_same_type(other)
        return not self.greater_than(other)

    def greater_than(self, other: Any) -> bool:
        """
        Raises:
            IncompatibleTypeError: If the types differ
        """
        self.check_same_type(other)
        return self._ordering(other) is Ordering.GREATER

    def greater_than_or_equal(self, other: Any) -> bool:
        """
        Negation of less_than().

        Raises:
            IncompatibleTypeError: If the types differ
        """
        self.check_same_type(other)
        return not self.less_than(other)

    # IncompatibleTypeError is a TypeError, which is what Python raises for
    # unsupported orderings anyway.
    def __lt__(self, other: Any) -> bool:
        return self.less_than(other)

    def __le__(self, other: Any) -> bool:
        return self.less_than_or_equal(other)

    def __gt__(self, other: Any) -> bool:
        return self.greater_than(other)

    def __ge__(self, other: Any) -> bool:
        return self.greater_than_or_equal(other)
