"""Exception hierarchy for dataknobs_asserts.

Every check in this package signals a violated condition by raising a
``CheckFailedError`` (or the class configured as ``failure_class``). Callers
may also hand a pre-built exception to any check, in which case that exact
object is raised instead.

Example:
    ```python
    from dataknobs_asserts import is_not_null
    from dataknobs_asserts.exceptions import AssertsError, CheckFailedError

    try:
        user_id = is_not_null(payload.get("user_id"))
    except CheckFailedError as e:
        logger.error(f"Bad request: {e}")

    # Catch anything raised by this package
    try:
        operation()
    except AssertsError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class AssertsError(Exception):
    """Base exception for the dataknobs_asserts package.

    Supports optional context data for rich error information.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (both are supported for compatibility)
    """

    def __init__(
        self,
        message: str = "",
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context

    @property
    def message(self) -> str:
        """The human-readable message the error was built with."""
        return str(self)


class CheckFailedError(AssertsError):
    """Raised when a check's condition does not hold.

    This is the default ``failure_class``. It is constructed with the
    message text only, so any exception class accepting a single message
    argument can take its place in the configuration.

    Example:
        ```python
        raise CheckFailedError("Value was null.")
        ```
    """

    pass


class AssertsConfigError(AssertsError):
    """Raised when the package configuration is invalid or cannot be loaded.

    Example:
        ```python
        raise AssertsConfigError(
            "Unknown configuration keys",
            context={"keys": ["failure_klass"]}
        )
        ```
    """

    pass


__all__ = [
    "AssertsError",
    "CheckFailedError",
    "AssertsConfigError",
]
