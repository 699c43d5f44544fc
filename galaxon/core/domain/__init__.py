"""
Domain value types.

Reference implementations of the comparison capabilities as immutable
Pydantic models.
"""

from galaxon.core.domain.angle import Angle
from galaxon.core.domain.complex_number import Complex
from galaxon.core.domain.rational import Rational
from galaxon.core.domain.version import Version

__all__ = [
    "Angle",
    "Complex",
    "Rational",
    "Version",
]
