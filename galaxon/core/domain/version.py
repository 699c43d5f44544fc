"""
Version — semantic version number (Comparable)

Immutable Pydantic model ordered lexicographically by (major, minor, patch).
"""

import re
from typing import Any, Final

from pydantic import BaseModel, Field

from galaxon.core.comparison.comparable import Comparable
from galaxon.core.ordering import Ordering

VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?$")


class Version(BaseModel, Comparable):
    """
    Version number major.minor.patch.

    Immutable model (frozen=True). Missing minor/patch default to 0, so
    Version(1) == Version(1, 0, 0).
    """

    major: int = Field(..., ge=0, description="Major version")
    minor: int = Field(0, ge=0, description="Minor version")
    patch: int = Field(0, ge=0, description="Patch version")

    model_config = {"frozen": True}

    def __init__(self, major: int, minor: int = 0, patch: int = 0) -> None:
        super().__init__(major=major, minor=minor, patch=patch)

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse "1", "1.2", "1.2.3" (optionally prefixed with "v").

        Raises:
            ValueError: If the text is not a version number
        """
        match = VERSION_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid version string: {text!r}")
        major, minor, patch = (int(part) if part is not None else 0 for part in match.groups())
        return cls(major, minor, patch)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def compare(self, other: Any) -> Ordering:
        """
        Lexicographic comparison of (major, minor, patch).

        Raises:
            IncompatibleTypeError: If other is not a Version
        """
        self.check_same_type(other)
        mine, theirs = self.as_tuple(), other.as_tuple()
        if mine < theirs:
            return Ordering.LESS
        if mine > theirs:
            return Ordering.GREATER
        return Ordering.EQUAL

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
