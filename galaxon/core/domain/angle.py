"""
Angle — plane angle stored in radians (ApproxComparable)

Immutable Pydantic model. Angles are created from a size and a unit and
always stored in radians; conversions go through CONVERSION_FACTORS.

compare() orders the raw radian values exactly, without wrapping: 360° is
greater than 0° even though both describe the same direction. Wrap both
angles first to compare directions. Tolerance-based ordering is available
through approx_compare().

Angles are parsed from and formatted as CSS angle strings ("1.5rad", "90deg")
or degree/arcminute/arcsecond notation ("12° 34′ 56″").
"""

import math
import re
from typing import Any, Final, Optional

from pydantic import BaseModel, Field

from galaxon.core.comparison.approx_comparable import ApproxComparable
from galaxon.core.math import floats
from galaxon.core.math.floats import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    TAU,
)
from galaxon.core.math.numbers import sign
from galaxon.core.ordering import Ordering

# =============================================================================
# UNITS
# =============================================================================

DEFAULT_UNIT: Final[str] = "rad"

# Radians per unit
CONVERSION_FACTORS: Final[dict[str, float]] = {
    "rad": 1.0,
    "deg": math.pi / 180,
    "arcmin": math.pi / 10800,
    "arcsec": math.pi / 648000,
    "grad": math.pi / 200,
    "turn": TAU,
}

# |cos|, |sin| or |sinh| below this is treated as zero by the quotient functions
TRIG_EPSILON: Final[float] = 1e-12

# Smallest unit for to_dms() / format_dms()
UNIT_DEGREE: Final[int] = 0
UNIT_ARCMINUTE: Final[int] = 1
UNIT_ARCSECOND: Final[int] = 2

# =============================================================================
# PARSING PATTERNS
# =============================================================================

_NUMBER: Final[str] = r"(?:\d+(?:\.\d+)?|\.\d+)"

# e.g. "12° 34′ 56″", "-12°30'", "45.5°"
DMS_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<sign>[-+]?)\s*"
    rf"(?:(?P<deg>{_NUMBER})°\s*)?"
    rf"(?:(?P<min>{_NUMBER})[′']\s*)?"
    rf"(?:(?P<sec>{_NUMBER})[″\"])?$"
)

# e.g. "1.5rad", "-90 deg", "0.25TURN"
CSS_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^(-?{_NUMBER})\s*(rad|deg|grad|turn)$", re.IGNORECASE
)


def valid_units() -> list[str]:
    return list(CONVERSION_FACTORS)


def is_unit_valid(unit: str) -> bool:
    return unit in CONVERSION_FACTORS


def check_unit(unit: str) -> None:
    """
    Raises:
        ValueError: If unit is not one of valid_units()
    """
    if not is_unit_valid(unit):
        raise ValueError(f"Invalid unit {unit!r}, expected one of {', '.join(valid_units())}")


def get_conversion_factor(from_unit: str, to_unit: str) -> float:
    """
    Multiplier converting a value in from_unit into to_unit.
    """
    check_unit(from_unit)
    check_unit(to_unit)
    if from_unit == to_unit:
        return 1.0
    if to_unit == DEFAULT_UNIT:
        return CONVERSION_FACTORS[from_unit]
    return CONVERSION_FACTORS[from_unit] / CONVERSION_FACTORS[to_unit]


def convert(value: float, from_unit: str = DEFAULT_UNIT, to_unit: str = DEFAULT_UNIT) -> float:
    return value * get_conversion_factor(from_unit, to_unit)


def _format_float(value: float, decimals: Optional[int] = None) -> str:
    """Fixed decimals if given, otherwise the shortest round-trip form without a trailing ".0"."""
    value = floats.normalize_zero(value)
    if decimals is not None:
        return f"{value:.{decimals}f}"
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _check_smallest_unit(smallest_unit: int) -> None:
    if smallest_unit not in (UNIT_DEGREE, UNIT_ARCMINUTE, UNIT_ARCSECOND):
        raise ValueError(
            "The smallest unit must be UNIT_DEGREE (0), UNIT_ARCMINUTE (1) "
            f"or UNIT_ARCSECOND (2), got {smallest_unit!r}"
        )


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel, ApproxComparable):
    """
    Angle in radians.

    Immutable model (frozen=True); arithmetic returns new instances.
    """

    radians: float = Field(..., allow_inf_nan=False, description="Size in radians")

    model_config = {"frozen": True}

    def __init__(self, size: float, unit: str = DEFAULT_UNIT) -> None:
        """
        Args:
            size: Size of the angle in `unit`
            unit: One of rad (default), deg, arcmin, arcsec, grad, turn

        Raises:
            ValueError: If size is ±inf/NaN or unit is invalid
        """
        if not math.isfinite(size):
            raise ValueError("Angle size cannot be ±inf or NaN")
        super().__init__(radians=convert(size, unit))

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees, "deg")

    @classmethod
    def from_turns(cls, turns: float) -> "Angle":
        return cls(turns, "turn")

    @classmethod
    def from_dms(cls, degrees: float, arcmin: float = 0.0, arcsec: float = 0.0) -> "Angle":
        """
        Angle from degrees, arcminutes and arcseconds.

        Parts are summed as given, so -12° 34′ 56″ is from_dms(-12, -34, -56).
        """
        total_deg = degrees + convert(arcmin, "arcmin", "deg") + convert(arcsec, "arcsec", "deg")
        return cls(total_deg, "deg")

    @classmethod
    def parse(cls, text: str) -> "Angle":
        """
        Parse an angle string.

        Two notations are accepted:
        - Degrees/arcminutes/arcseconds with symbols, e.g. "12° 34′ 56″" or
          "-12°34'56\\"". At least one part is required; a leading sign
          applies to every part.
        - CSS angle units, e.g. "1.5rad", "-90 deg", "100grad", "0.25TURN".

        Raises:
            ValueError: If the text is not an angle
        """
        error = f"The string {text!r} does not represent a valid angle."
        stripped = text.strip()
        if not stripped:
            raise ValueError(error)

        match = DMS_PATTERN.match(stripped)
        if match is not None:
            parts = match.group("deg", "min", "sec")
            if all(part is None for part in parts):
                raise ValueError(error)
            k = -1.0 if match.group("sign") == "-" else 1.0
            d, m, s = (k * float(part) if part is not None else 0.0 for part in parts)
            return cls.from_dms(d, m, s)

        match = CSS_PATTERN.match(stripped)
        if match is not None:
            return cls(float(match.group(1)), match.group(2).lower())

        raise ValueError(error)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to(self, unit: str = DEFAULT_UNIT) -> float:
        """Size of the angle in the given unit."""
        return convert(self.radians, DEFAULT_UNIT, unit)

    def to_dms(self, smallest_unit: int = UNIT_ARCSECOND) -> tuple[float, ...]:
        """
        Split the angle into degrees, arcminutes and arcseconds.

        Every part carries the sign of the angle; the smallest part keeps the
        fraction.

        Args:
            smallest_unit: UNIT_DEGREE, UNIT_ARCMINUTE or UNIT_ARCSECOND

        Returns:
            (d,), (d, m) or (d, m, s)

        Raises:
            ValueError: If smallest_unit is not one of the UNIT_* constants
        """
        _check_smallest_unit(smallest_unit)
        total_deg = self.to("deg")
        k = sign(total_deg, zero_for_zero=False)
        total_deg = abs(total_deg)

        if smallest_unit == UNIT_DEGREE:
            parts: tuple[float, ...] = (total_deg,)
        elif smallest_unit == UNIT_ARCMINUTE:
            d = float(math.floor(total_deg))
            parts = (d, convert(total_deg - d, "deg", "arcmin"))
        else:
            d = float(math.floor(total_deg))
            minutes = convert(total_deg - d, "deg", "arcmin")
            m = float(math.floor(minutes))
            parts = (d, m, convert(minutes - m, "arcmin", "arcsec"))

        return tuple(floats.normalize_zero(part * k) for part in parts)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def sub(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def mul(self, k: float) -> "Angle":
        """
        Raises:
            ValueError: If k is ±inf or NaN
        """
        if not math.isfinite(k):
            raise ValueError("Multiplier cannot be ±inf or NaN")
        return Angle(self.radians * k)

    def div(self, k: float) -> "Angle":
        """
        Raises:
            ZeroDivisionError: If k is 0
            ValueError: If k is ±inf or NaN
        """
        if k == 0:
            raise ZeroDivisionError("Divisor cannot be 0")
        if not math.isfinite(k):
            raise ValueError("Divisor cannot be ±inf or NaN")
        return Angle(self.radians / k)

    def abs(self) -> "Angle":
        return Angle(abs(self.radians))

    def wrap(self, signed: bool = True) -> "Angle":
        """
        Normalize to (-π, π] if signed, otherwise [0, τ).
        """
        return Angle(floats.wrap(self.radians, TAU, signed))

    # -------------------------------------------------------------------------
    # Trigonometry
    # -------------------------------------------------------------------------

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        """
        Tangent; ±inf where cos is within TRIG_EPSILON of zero (the sign
        follows sin).
        """
        c = math.cos(self.radians)
        if abs(c) < TRIG_EPSILON:
            return math.copysign(math.inf, math.sin(self.radians))
        return math.sin(self.radians) / c

    def sec(self) -> float:
        """1/cos; ±inf where cos is within TRIG_EPSILON of zero."""
        c = math.cos(self.radians)
        if abs(c) < TRIG_EPSILON:
            return math.copysign(math.inf, c)
        return 1.0 / c

    def csc(self) -> float:
        """1/sin; ±inf where sin is within TRIG_EPSILON of zero."""
        s = math.sin(self.radians)
        if abs(s) < TRIG_EPSILON:
            return math.copysign(math.inf, s)
        return 1.0 / s

    def cot(self) -> float:
        """cos/sin; ±inf where sin is within TRIG_EPSILON of zero (the sign follows cos)."""
        s = math.sin(self.radians)
        c = math.cos(self.radians)
        if abs(s) < TRIG_EPSILON:
            return math.copysign(math.inf, c)
        return c / s

    # -------------------------------------------------------------------------
    # Hyperbolic functions
    # -------------------------------------------------------------------------
    # math.sinh/cosh raise OverflowError for |radians| above ~710

    def sinh(self) -> float:
        return math.sinh(self.radians)

    def cosh(self) -> float:
        return math.cosh(self.radians)

    def tanh(self) -> float:
        return math.tanh(self.radians)

    def sech(self) -> float:
        return 1.0 / math.cosh(self.radians)

    def csch(self) -> float:
        """1/sinh; ±inf where sinh is within TRIG_EPSILON of zero."""
        sh = math.sinh(self.radians)
        if abs(sh) < TRIG_EPSILON:
            return math.copysign(math.inf, sh)
        return 1.0 / sh

    def coth(self) -> float:
        """cosh/sinh; ±inf where sinh is within TRIG_EPSILON of zero."""
        sh = math.sinh(self.radians)
        if abs(sh) < TRIG_EPSILON:
            return math.copysign(math.inf, sh)
        return math.cosh(self.radians) / sh

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: Any) -> Ordering:
        """
        Exact comparison of the raw radian values (no wrapping, no tolerance).

        Raises:
            IncompatibleTypeError: If other is not an Angle
        """
        self.check_same_type(other)
        return floats.compare(self.radians, other.radians)

    def approx_equal(
        self,
        other: Any,
        rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
        abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    ) -> bool:
        """Radian values within tolerance; False for non-Angles."""
        if not self.is_same_type(other):
            return False
        return floats.approx_equal(self.radians, other.radians, rel_tol, abs_tol)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, unit: str = DEFAULT_UNIT, decimals: Optional[int] = None) -> str:
        """
        CSS-style angle string, e.g. "1.5rad" or "90.00deg".

        Raises:
            ValueError: If unit is invalid or decimals is negative
        """
        if decimals is not None and decimals < 0:
            raise ValueError("Decimals must be non-negative or None.")
        return _format_float(self.to(unit), decimals) + unit

    def format_dms(self, smallest_unit: int = UNIT_ARCSECOND, decimals: Optional[int] = None) -> str:
        """
        Degrees with optional arcminutes and arcseconds.

        Only the smallest unit is rounded to `decimals`; a part rounded up to
        a full 60 carries into the next unit.

        Examples:
            >>> Angle.from_degrees(12.3456789).format_dms(UNIT_ARCMINUTE, 3)
            '12° 20.741′'

        Raises:
            ValueError: If smallest_unit is not one of the UNIT_* constants
        """
        prefix = "-" if self.radians < 0 else ""
        parts = list(self.abs().to_dms(smallest_unit))

        if decimals is not None and smallest_unit != UNIT_DEGREE:
            parts[-1] = round(parts[-1], decimals)
            # carry
            for i in range(len(parts) - 1, 0, -1):
                if parts[i] >= 60.0:
                    parts[i] = 0.0
                    parts[i - 1] += 1.0

        *whole, last = parts
        texts = [_format_float(part) for part in whole] + [_format_float(last, decimals)]
        symbols = ("°", "′", "″")
        return prefix + " ".join(text + symbol for text, symbol in zip(texts, symbols))

    def __str__(self) -> str:
        return self.format()
