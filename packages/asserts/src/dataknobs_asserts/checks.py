"""Assertion checks that validate a value and hand it back.

Each check tests one condition. On success it returns the value (for
``is_number``, the parsed float) so it can be used inline; on failure it
raises. Every check takes an optional ``message`` override:

- ``None`` or ``""``: the check's default message is used
- text: replaces the default message
- an exception instance: raised as-is, keeping its class and attributes

Example:
    ```python
    from dataknobs_asserts import is_between, is_not_empty, is_number

    name = is_not_empty(payload.get("name"))
    age = is_between(is_number(payload.get("age")), 0, 150, "age out of range")
    ```
"""

from __future__ import annotations

import datetime
import logging
import math
import numbers
import re
from collections.abc import Sequence, Sized
from decimal import Decimal
from typing import Any, Callable, Type, TypeVar, Union

from .config import get_config
from .types import (
    Message,
    describe_value,
    display_value,
    is_defined,
    is_real_number,
    strict_equals,
    type_name,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
L = TypeVar("L")


def _log_failure(error: BaseException) -> None:
    config = get_config()
    if config.log_failures:
        logger.log(config.log_level_number, "Check failed: %s", error)


def assert_or_raise(condition: Any, message: Message) -> None:
    """Raise if a condition does not hold.

    Args:
        condition: Condition to test (truthiness)
        message: Exception instance to raise as-is, or message text for a
            new instance of the configured failure class

    Raises:
        Exception: The given exception, or the configured failure class
    """
    if condition:
        return

    if isinstance(message, BaseException):
        error = message
    else:
        config = get_config()
        error = config.failure_class(message or config.unknown_message)

    _log_failure(error)
    raise error


def _check(condition: Any, message: Message, default: Callable[[], str]) -> None:
    """Like ``assert_or_raise``, but the default message is only built on failure."""
    if not condition:
        assert_or_raise(False, message or default())


def is_equal(value: T, expected: T, message: Message = None) -> T:
    """Check that a value equals an expected value.

    Booleans only equal booleans, so ``is_equal(1, True)`` fails.
    """
    assert_or_raise(strict_equals(value, expected), message or "Value was not equal to expected.")
    return value


def is_true(condition: bool | None, message: Message = None) -> None:
    """Check that a condition is exactly ``True``.

    Truthy values such as ``1`` or ``"yes"`` fail, as do None and UNDEFINED.
    """
    assert_or_raise(
        is_defined(condition) and condition is True, message or "Condition was not true."
    )


def is_valid(value: T, validator: Callable[[T], Any], message: Message = None) -> T:
    """Check a value with a caller-supplied predicate.

    Args:
        value: Value to check
        validator: Predicate called with the value
        message: Optional override

    Returns:
        The value
    """
    assert_or_raise(validator(value), message or "Validator did not return true.")
    return value


def not_throwing(func: Callable[[], T], message: Message = None) -> T:
    """Call a function, replacing any exception it raises with this check's failure.

    The original exception is dropped rather than chained, so callers only
    ever see the override.

    Args:
        func: Zero-argument callable
        message: Exception instance to raise, or text for the failure class

    Returns:
        Whatever ``func`` returns

    Raises:
        Exception: The override exception, or the configured failure class
            built from ``message`` (empty if no message was given)
    """
    try:
        return func()
    except Exception as e:
        logger.debug("Suppressed exception from %r", func, exc_info=e)
        if isinstance(message, BaseException):
            error: BaseException = message
        else:
            error = get_config().failure_class(message or "")
        _log_failure(error)
        raise error from None


def is_not_null(value: T | None, message: Message = None) -> T:
    """Check that a value is neither None nor UNDEFINED."""
    assert_or_raise(is_defined(value), message or "Value was null.")
    return value  # type: ignore[return-value]


def is_not_empty(value: str | None, message: Message = None) -> str:
    """Check that a value is present and has a non-zero length."""
    condition = is_defined(value) and isinstance(value, Sized) and len(value) > 0

    assert_or_raise(condition, message or "String was null or empty.")

    return value  # type: ignore[return-value]


def no_null_elements(values: Sequence[T] | None, message: Message = None) -> Sequence[T]:
    """Check that a value is a sequence without None or UNDEFINED elements.

    Strings and bytes are not accepted as sequences. A non-sequence and a
    sequence with missing elements fail with the same message.
    """
    condition = (
        is_defined(values)
        and isinstance(values, Sequence)
        and not isinstance(values, (str, bytes, bytearray))
        and all(is_defined(value) for value in values)
    )

    assert_or_raise(condition, message or "Value was not array or contained null items.")

    return values  # type: ignore[return-value]


def matches(value: str | None, pattern: Union[str, re.Pattern[str]], message: Message = None) -> str:
    """Check that a string contains a match for a regular expression.

    Matching uses ``re.search``; anchor the pattern to match the whole string.
    """
    condition = isinstance(value, str) and re.search(pattern, value) is not None

    _check(condition, message, lambda: f"Value [{display_value(value)}] did not match pattern.")

    return value  # type: ignore[return-value]


def is_between(value: Any, min_value: Any, max_value: Any, message: Message = None) -> Any:
    """Check that a value lies within ``[min_value, max_value]``, both ends included.

    Values that cannot be compared with the bounds fail the check.
    """
    try:
        condition = is_defined(value) and min_value <= value <= max_value
    except TypeError:
        condition = False

    _check(
        condition,
        message,
        lambda: (
            f"Value [{display_value(value)}] was not within limits "
            f"[{display_value(min_value)} - {display_value(max_value)}]."
        ),
    )

    return value


def _in_list(value: Any, choices: Sequence[Any]) -> bool:
    return is_defined(value) and any(strict_equals(value, choice) for choice in choices)


def _not_in_list_message(value: Any, choices: Sequence[Any]) -> str:
    joined = ", ".join(display_value(choice) for choice in choices)
    return f"Value [{display_value(value)}] was not in list [{joined}]."


def is_in(value: Any, choices: Sequence[Any], message: Message = None) -> Any:
    """Check that a value is one of a list of choices."""
    _check(_in_list(value, choices), message, lambda: _not_in_list_message(value, choices))
    return value


def is_literal(value: Any, choices: Sequence[L], message: Message = None) -> L:
    """Check that a value is one of a list of literals.

    Behaves exactly like ``is_in``; the return type is the element type of
    ``choices``, which lets type checkers narrow to a ``Literal`` union.

    Example:
        ```python
        Color = Literal["red", "green"]
        COLORS: tuple[Color, ...] = ("red", "green")

        color: Color = is_literal(request.args.get("color"), COLORS)
        ```
    """
    _check(_in_list(value, choices), message, lambda: _not_in_list_message(value, choices))
    return value  # type: ignore[no-any-return]


def is_boolean(value: bool | None, message: Message = None) -> bool:
    """Check that a value is a bool (not ``"true"``, not ``1``)."""
    _check(
        isinstance(value, bool),
        message,
        lambda: f"Boolean {display_value(value)} was not a boolean.",
    )
    return value  # type: ignore[return-value]


def is_number(value: Any, message: Message = None) -> float:
    """Check that a value reads as a number and return it as a float.

    The value is converted to text and parsed with ``float()``, so numeric
    strings such as ``"123.5"`` pass. Text with trailing characters
    (``"12px"``) and NaN do not.

    Returns:
        The parsed float, not the original value
    """
    number = math.nan
    if is_defined(value):
        try:
            number = float(str(value))
        except ValueError:
            pass

    _check(
        not math.isnan(number),
        message,
        lambda: f"Value [{display_value(value)}] was not a number.",
    )

    return number


def _is_whole_number(value: Any) -> bool:
    if not is_real_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Rational):
        return value.denominator == 1
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, float):
        return value.is_integer()
    return math.isfinite(value) and value == math.floor(value)


def is_integer(value: Any, message: Message = None) -> int:
    """Check that a value is a whole number of a numeric type.

    Floats, fractions and decimals with no fractional part pass; numeric
    strings and bools do not. The value is returned unchanged.
    """
    _check(
        _is_whole_number(value),
        message,
        lambda: f"Value [{display_value(value)}] was not an integer.",
    )

    return value  # type: ignore[no-any-return]


def is_instance_of(value: Any, type_: Type[T], message: Message = None) -> T:
    """Check that a value is an instance of a class or one of its subclasses.

    Abstract base classes work as well, as do tuples of classes.

    Args:
        value: Value to check
        type_: Expected class
        message: Optional override

    Returns:
        The value
    """
    condition = is_defined(value) and isinstance(value, type_)

    _check(
        condition,
        message,
        lambda: f"Value was not of type [{type_name(type_)}] was [{describe_value(value)}].",
    )

    return value  # type: ignore[no-any-return]


def is_valid_date(value: Any, message: Message = None) -> datetime.date:
    """Check that a value is a date or datetime holding a real point in time.

    Values such as ``pandas.NaT`` subclass ``datetime`` but stand for "no
    time"; they never equal themselves and are rejected.
    """
    error = message or "Value was not a valid date."
    date = is_instance_of(value, datetime.date, error)

    assert_or_raise(date == date, error)

    return date


def is_in_union(value: Any, types: Sequence[Type[T]], message: Message = None) -> T:
    """Check that a value is an instance of at least one of several classes.

    Example:
        ```python
        when = is_in_union(value, [datetime.date, str])
        ```
    """
    condition = is_defined(value) and any(isinstance(value, type_) for type_ in types)

    _check(
        condition,
        message,
        lambda: (
            f"Value was not in union [{', '.join(type_name(type_) for type_ in types)}] "
            f"was [{describe_value(value)}]."
        ),
    )

    return value  # type: ignore[no-any-return]


__all__ = [
    "assert_or_raise",
    "is_equal",
    "is_true",
    "is_valid",
    "not_throwing",
    "is_not_null",
    "is_not_empty",
    "no_null_elements",
    "matches",
    "is_between",
    "is_in",
    "is_literal",
    "is_boolean",
    "is_number",
    "is_integer",
    "is_instance_of",
    "is_valid_date",
    "is_in_union",
]
