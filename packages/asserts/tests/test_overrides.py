"""Tests for message overrides, custom validators and exception wrapping."""

import logging

import pytest

from dataknobs_asserts import (
    CheckFailedError,
    assert_or_raise,
    configure,
    is_between,
    is_boolean,
    is_equal,
    is_in,
    is_in_union,
    is_instance_of,
    is_integer,
    is_literal,
    is_not_empty,
    is_not_null,
    is_number,
    is_true,
    is_valid,
    is_valid_date,
    matches,
    no_null_elements,
    not_throwing,
)


class TestAssertOrRaise:
    """Test the shared failure primitive."""

    def test_no_effect_when_condition_holds(self):
        assert assert_or_raise(True, "unused") is None

    def test_raises_text_message(self):
        with pytest.raises(CheckFailedError) as exc_info:
            assert_or_raise(False, "custom text")
        assert str(exc_info.value) == "custom text"

    @pytest.mark.parametrize("message", [None, ""])
    def test_unknown_error_fallback(self, message):
        with pytest.raises(CheckFailedError) as exc_info:
            assert_or_raise(False, message)
        assert str(exc_info.value) == "Unknown error."

    def test_raises_exception_unchanged(self, api_error):
        with pytest.raises(type(api_error)) as exc_info:
            assert_or_raise(False, api_error)
        assert exc_info.value is api_error
        assert exc_info.value.code == 422


class TestCustomOverrides:
    """Test that every check honors text and exception overrides."""

    FAILING_CALLS = [
        lambda m: is_equal(1, 2, m),
        lambda m: is_not_null(None, m),
        lambda m: no_null_elements([None], m),
        lambda m: matches("abc", r"\d", m),
        lambda m: is_between(5, 0, 1, m),
        lambda m: is_number("abc", m),
        lambda m: is_integer("10", m),
        lambda m: is_instance_of(1, str, m),
        lambda m: is_valid_date("2024-01-01", m),
        lambda m: is_in_union(1, [str], m),
        lambda m: is_valid(1, lambda v: False, m),
        lambda m: is_true(False, m),
        lambda m: is_boolean("true", m),
        lambda m: is_not_empty("", m),
        lambda m: is_in("C", ["A"], m),
        lambda m: is_literal("C", ("A",), m),
    ]

    @pytest.mark.parametrize("call", FAILING_CALLS)
    def test_text_override_replaces_default(self, call):
        with pytest.raises(CheckFailedError) as exc_info:
            call("my message")
        assert str(exc_info.value) == "my message"

    @pytest.mark.parametrize("call", FAILING_CALLS)
    def test_exception_override_raised_as_is(self, call, api_error):
        with pytest.raises(type(api_error)) as exc_info:
            call(api_error)
        assert exc_info.value is api_error
        assert exc_info.value.code == 422


class TestIsValid:
    """Test is_valid."""

    def test_detects_validation_error(self):
        with pytest.raises(CheckFailedError, match="Validator did not return true."):
            is_valid("1", lambda v: v == "2")

    def test_allows_validation_success(self):
        assert is_valid("1", lambda v: v == "1") == "1"

    def test_validator_receives_value(self):
        seen = []
        is_valid(5, lambda v: seen.append(v) is None)
        assert seen == [5]


class TestNotThrowing:
    """Test not_throwing."""

    def test_returns_result(self):
        assert not_throwing(lambda: "1") == "1"

    def test_replaces_inner_exception_with_text(self):
        def explode():
            raise KeyError("inner")

        with pytest.raises(CheckFailedError) as exc_info:
            not_throwing(explode, "outer")
        assert str(exc_info.value) == "outer"
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True

    def test_replaces_inner_exception_with_override(self, api_error):
        def explode():
            raise ValueError("inner")

        with pytest.raises(type(api_error)) as exc_info:
            not_throwing(explode, api_error)
        assert exc_info.value is api_error

    def test_empty_message_without_override(self):
        def explode():
            raise RuntimeError("inner")

        with pytest.raises(CheckFailedError) as exc_info:
            not_throwing(explode)
        assert str(exc_info.value) == ""

    def test_inner_check_failure_is_replaced(self):
        with pytest.raises(CheckFailedError) as exc_info:
            not_throwing(lambda: is_not_null(None), "wrapped")
        assert str(exc_info.value) == "wrapped"

    def test_keyboard_interrupt_propagates(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            not_throwing(interrupt, "ignored")

    def test_suppressed_exception_logged(self, caplog):
        def explode():
            raise ValueError("inner detail")

        with caplog.at_level(logging.DEBUG, logger="dataknobs_asserts.checks"):
            with pytest.raises(CheckFailedError):
                not_throwing(explode, "outer")
        assert "Suppressed exception" in caplog.text


class TestConfiguredFailures:
    """Test checks against a non-default configuration."""

    def test_configured_failure_class(self):
        configure(failure_class=ValueError)
        with pytest.raises(ValueError, match="Value was null."):
            is_not_null(None)

    def test_configured_class_used_by_not_throwing(self):
        configure(failure_class=ValueError)
        with pytest.raises(ValueError):
            not_throwing(lambda: 1 / 0, "division")

    def test_configured_unknown_message(self):
        configure(unknown_message="Nope.")
        with pytest.raises(CheckFailedError, match="Nope."):
            assert_or_raise(False, None)

    def test_failures_logged_when_enabled(self, caplog):
        configure(log_failures=True, log_level="WARNING")
        with caplog.at_level(logging.WARNING, logger="dataknobs_asserts.checks"):
            with pytest.raises(CheckFailedError):
                is_not_null(None)
        assert "Check failed: Value was null." in caplog.text

    def test_not_throwing_failures_logged_when_enabled(self, caplog):
        configure(log_failures=True, log_level="WARNING")

        def explode():
            raise ValueError("inner detail")

        with caplog.at_level(logging.WARNING, logger="dataknobs_asserts.checks"):
            with pytest.raises(CheckFailedError):
                not_throwing(explode, "wrapped failure")
        assert "Check failed: wrapped failure" in caplog.text
        assert "inner detail" not in caplog.text

    def test_failures_not_logged_by_default(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dataknobs_asserts.checks"):
            with pytest.raises(CheckFailedError):
                is_not_null(None)
        assert "Check failed" not in caplog.text
