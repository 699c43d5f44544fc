"""
Tolerance — Validated Tolerance Pair

Immutable Pydantic model bundling (rel, abs) for callers that pass one pair
through many comparisons. It is never stored on value types: every
capability method still takes rel_tol/abs_tol as explicit arguments, and a
Tolerance is unpacked into them at the call site.
"""

from typing import Final

from pydantic import BaseModel, Field

from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    approx_compare,
    approx_equal,
)
from galaxon.core.ordering import Ordering


class Tolerance(BaseModel):
    """
    Pair of non-negative tolerances.

    rel = 0 disables scale-sensitive comparison (pure absolute check).
    abs = 0 disables the near-zero safety net (pure relative check).
    """

    rel: float = Field(
        DEFAULT_RELATIVE_TOLERANCE, ge=0, allow_inf_nan=False, description="Relative tolerance"
    )
    abs: float = Field(
        DEFAULT_ABSOLUTE_TOLERANCE, ge=0, allow_inf_nan=False, description="Absolute tolerance"
    )

    model_config = {"frozen": True}

    @classmethod
    def absolute(cls, abs_tol: float) -> "Tolerance":
        """Pure absolute tolerance (rel = 0)."""
        return cls(rel=0.0, abs=abs_tol)

    @classmethod
    def relative(cls, rel_tol: float) -> "Tolerance":
        """Pure relative tolerance (abs = 0)."""
        return cls(rel=rel_tol, abs=0.0)

    def as_kwargs(self) -> dict[str, float]:
        """
        Keyword arguments for any approx_* function or method.

        Examples:
            >>> tol = Tolerance(rel=1e-5, abs=1e-5)
            >>> tol.as_kwargs()
            {'rel_tol': 1e-05, 'abs_tol': 1e-05}
        """
        return {"rel_tol": self.rel, "abs_tol": self.abs}

    def approx_equal(self, a: float, b: float) -> bool:
        """Float approximate equality under this pair."""
        return approx_equal(a, b, self.rel, self.abs)

    def approx_compare(self, a: float, b: float) -> Ordering:
        """Float three-way comparison under this pair."""
        return approx_compare(a, b, self.rel, self.abs)


DEFAULT_TOLERANCE: Final[Tolerance] = Tolerance()
