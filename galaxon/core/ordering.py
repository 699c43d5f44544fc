"""
Ordering — Three-Way Comparison Result

Every compare() in the library returns exactly one of three sentinels:
LESS (-1), EQUAL (0), GREATER (1). Derived relational operators test the
sentinel by identity, so a comparator returning any other negative or
positive number is a contract violation, not "just a sign".

Ordering is an IntEnum so results still behave like the conventional
integers (sorting keys, `== -1`, arithmetic), but Ordering.coerce() is the
only gate through which raw comparator output enters derived logic.
"""

import math
from enum import IntEnum
from numbers import Real
from typing import Any

from galaxon.core.exceptions import InvalidOrderingError, UndefinedOrderingError
from galaxon.core.log import get_logger

logger = get_logger(__name__)


class Ordering(IntEnum):
    """Result of a three-way comparison"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_sign(cls, value: Real) -> "Ordering":
        """
        Normalize the sign of any real number to a sentinel.

        Args:
            value: Any real number (e.g. a difference a - b)

        Returns:
            LESS for negative, EQUAL for zero (either sign), GREATER for positive

        Raises:
            UndefinedOrderingError: If value is NaN

        Examples:
            >>> Ordering.from_sign(-42.5)
            <Ordering.LESS: -1>
            >>> Ordering.from_sign(-0.0)
            <Ordering.EQUAL: 0>
        """
        if isinstance(value, float) and math.isnan(value):
            raise UndefinedOrderingError("NaN has no sign and cannot be ordered.")
        if value > 0:
            return cls.GREATER
        if value < 0:
            return cls.LESS
        return cls.EQUAL

    @classmethod
    def coerce(cls, result: Any) -> "Ordering":
        """
        Validate raw comparator output.

        Accepts an Ordering or an int (bool excluded) equal to -1, 0 or 1.

        Raises:
            InvalidOrderingError: For any other value
        """
        if isinstance(result, cls):
            return result
        if isinstance(result, int) and not isinstance(result, bool) and result in (-1, 0, 1):
            return cls(result)
        logger.debug("Rejected comparator result %r", result)
        raise InvalidOrderingError(result)

    def reverse(self) -> "Ordering":
        """LESS <-> GREATER, EQUAL unchanged."""
        return Ordering(-self.value)
