"""Shared types and value helpers for the checks.

This module holds the absence sentinel, the override type accepted by every
check, and the small helpers the checks use to decide presence, compare
values and describe values in failure messages.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from enum import Enum
from typing import Any, Union


class UndefinedType(Enum):
    """Type of the ``UNDEFINED`` sentinel.

    ``UNDEFINED`` marks a value that was never supplied, as opposed to one
    explicitly set to ``None``. It is falsy and renders as ``"undefined"``.

    Example:
        ```python
        from dataknobs_asserts import UNDEFINED, is_not_null

        name = is_not_null(payload.get("name", UNDEFINED))
        ```
    """

    UNDEFINED = "undefined"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


UNDEFINED = UndefinedType.UNDEFINED

Message = Union[str, BaseException, None]
"""Override accepted by every check: text, a pre-built exception, or None."""


def is_defined(value: Any) -> bool:
    """Check whether a value is present.

    Args:
        value: Value to inspect

    Returns:
        True unless the value is None or UNDEFINED
    """
    return value is not None and value is not UNDEFINED


def is_real_number(value: Any) -> bool:
    """True for ints, floats, fractions and decimals, but not for bools."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def strict_equals(value: Any, other: Any) -> bool:
    """Compare two values without letting booleans stand in for numbers.

    Plain ``==`` treats ``True == 1`` and ``False == 0`` as equal. Here a
    bool only ever equals another bool; everything else uses ``==``.

    Args:
        value: First value
        other: Second value

    Returns:
        True if the values are equal
    """
    if isinstance(value, bool) or isinstance(other, bool):
        return isinstance(value, bool) and isinstance(other, bool) and value is other
    return bool(value == other)


def display_value(value: Any) -> str:
    """Render a value for embedding in a failure message."""
    if value is None:
        return "null"
    try:
        return str(value)
    except ValueError:
        # ints past sys.get_int_max_str_digits() refuse conversion
        return f"<{type(value).__name__} too large to display>"


def type_name(type_: Any) -> str:
    """Name of a class, or of each class in a tuple joined with " | "."""
    if isinstance(type_, tuple):
        return " | ".join(type_name(member) for member in type_)
    return str(getattr(type_, "__name__", repr(type_)))


def describe_value(value: Any) -> str:
    """Describe the kind of a value for type-check failure messages.

    Args:
        value: Value to describe

    Returns:
        "null" for None, "undefined" for UNDEFINED, "boolean", "number" or
        "string" for primitives, otherwise the name of the value's class

    Example:
        ```python
        describe_value(None)         # 'null'
        describe_value(1.5)          # 'number'
        describe_value({})           # 'dict'
        describe_value(MyThing())    # 'MyThing'
        ```
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if is_real_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


__all__ = [
    "UNDEFINED",
    "UndefinedType",
    "Message",
    "is_defined",
    "is_real_number",
    "strict_equals",
    "display_value",
    "describe_value",
    "type_name",
]
