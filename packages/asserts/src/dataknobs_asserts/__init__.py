"""Runtime assertion checks for dataknobs packages.

Each check validates a single value and returns it, turning an untrusted
value into a known-good one in one expression:

- **Presence**: is_not_null, is_not_empty, no_null_elements
- **Equality and booleans**: is_equal, is_true, is_boolean
- **Patterns, ranges and membership**: matches, is_between, is_in, is_literal
- **Numbers**: is_number, is_integer
- **Types**: is_instance_of, is_valid_date, is_in_union
- **Custom logic**: is_valid, not_throwing

Example:
    ```python
    from dataknobs_asserts import is_in, is_not_empty, is_number

    name = is_not_empty(form.get("name"))
    quantity = is_number(form.get("quantity"), "quantity must be numeric")
    unit = is_in(form.get("unit"), ["kg", "lb"], BadRequest("unit"))
    ```
"""

from dataknobs_asserts.checks import (
    assert_or_raise,
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
from dataknobs_asserts.config import (
    AssertsConfig,
    configure,
    get_config,
    load_config,
    reset_config,
)
from dataknobs_asserts.exceptions import (
    AssertsConfigError,
    AssertsError,
    CheckFailedError,
)
from dataknobs_asserts.types import (
    UNDEFINED,
    Message,
    UndefinedType,
    describe_value,
    is_defined,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Checks
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
    # Configuration
    "AssertsConfig",
    "configure",
    "get_config",
    "load_config",
    "reset_config",
    # Exceptions
    "AssertsError",
    "CheckFailedError",
    "AssertsConfigError",
    # Types
    "UNDEFINED",
    "UndefinedType",
    "Message",
    "is_defined",
    "describe_value",
]
