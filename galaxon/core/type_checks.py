"""
Type inspection helpers.

have_same_type() is the single source of truth for "comparable to" used by
the comparison capabilities: two values are comparable only if their runtime
types are identical. Subclass instances are NOT considered the same type as
their parent, so an ordering between them is refused rather than guessed.
"""

from typing import Any, Final

BASIC_TYPES: Final[tuple[tuple[type, str], ...]] = (
    (bool, "bool"),
    (int, "int"),
    (float, "float"),
    (str, "str"),
    (list, "list"),
    (tuple, "tuple"),
    (dict, "dict"),
    (set, "set"),
    (frozenset, "set"),
)


def have_same_type(a: Any, b: Any) -> bool:
    """
    Check if two values have exactly the same runtime type.

    Args:
        a: First value
        b: Second value

    Returns:
        True if type(a) is type(b)

    Examples:
        >>> have_same_type(1, 2)
        True
        >>> have_same_type(1, 1.0)
        False
        >>> have_same_type(True, 1)
        False
    """
    return type(a) is type(b)


def get_basic_type(value: Any) -> str:
    """
    Get the basic type of a value.

    Returns one of: "none", "bool", "int", "float", "str", "list", "tuple",
    "dict", "set", "object". bool is checked before int because bool is a
    subclass of int.
    """
    if value is None:
        return "none"
    for cls, name in BASIC_TYPES:
        if isinstance(value, cls):
            return name
    return "object"


def get_type_name(value: Any) -> str:
    """Qualified type name for diagnostics, e.g. "galaxon.core.domain.version.Version"."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
