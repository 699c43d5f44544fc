"""
Equatable — root comparison capability.
"""

from abc import ABC, abstractmethod
from typing import Any


class Equatable(ABC):
    """
    Mixin for value types that can report exact equality against any value.

    Implementations of equal() must:
    - Return False for incompatible types or shapes (never raise)
    - Be reflexive (x.equal(x) is True for values without NaN components)
    - Be symmetric (x.equal(y) == y.equal(x))
    - Be as transitive as floating-point arithmetic allows

    equal() is not wired to __eq__: value types built on
    pydantic models keep the model's own field-wise __eq__ and __hash__.
    """

    @abstractmethod
    def equal(self, other: Any) -> bool:
        """
        Check if this value equals another value.

        Args:
            other: Value of any type

        Returns:
            True if the values are equal, False otherwise (including for
            incompatible types)
        """
