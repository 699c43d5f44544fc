"""
Runtime environment checks.

Bit-level float operations assume IEEE-754 binary64 floats and a 64-bit
platform word size.
"""

import sys


def is_64bit() -> bool:
    """True if the interpreter runs on a 64-bit platform with binary64 floats."""
    return sys.maxsize == 2**63 - 1 and sys.float_info.mant_dig == 53


def require_64bit() -> None:
    """
    Require a 64-bit platform.

    Raises:
        RuntimeError: If the platform is not 64-bit
    """
    if not is_64bit():
        raise RuntimeError("This operation requires a 64-bit system.")
