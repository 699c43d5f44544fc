"""
Test helpers for code built on the tolerance primitive.
"""

from galaxon.core.testing.assertions import (
    assert_approx_equal,
    assert_approx_zero,
    format_approx_failure,
)

__all__ = [
    "assert_approx_equal",
    "assert_approx_zero",
    "format_approx_failure",
]
