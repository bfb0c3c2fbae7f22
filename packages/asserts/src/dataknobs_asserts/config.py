"""Package-wide configuration for the checks.

The configuration decides which exception class is raised for text or
default messages, the fallback message, and whether failed checks are
logged. It is held as a frozen ``AssertsConfig`` that is swapped out as a
whole, so checks can read it from any thread without locking.

Configuration can come from keyword arguments, a dictionary, a YAML or JSON
file, and environment variables of the form ``DATAKNOBS_ASSERTS_<FIELD>``.

Example:
    ```python
    from dataknobs_asserts.config import configure, load_config

    configure(failure_class=ValueError, log_failures=True)

    # Or from a file, with environment overrides applied on top
    load_config("asserts.yaml")
    ```
"""

from __future__ import annotations

import dataclasses
import importlib
import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Type, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import AssertsConfigError, CheckFailedError

logger = logging.getLogger(__name__)

ENV_PREFIX = "DATAKNOBS_ASSERTS_"


@dataclass(frozen=True)
class AssertsConfig:
    """Settings shared by every check.

    Attributes:
        failure_class: Exception class raised when a check fails with a text
            or default message. Must accept the message as its only argument.
        unknown_message: Message used when a failure carries no text at all.
        log_failures: Whether failed checks are logged before raising.
        log_level: Name of the logging level used for failed checks.
    """

    failure_class: Type[Exception] = CheckFailedError
    unknown_message: str = "Unknown error."
    log_failures: bool = False
    log_level: str = "DEBUG"

    def __post_init__(self) -> None:
        if not (isinstance(self.failure_class, type) and issubclass(self.failure_class, Exception)):
            raise AssertsConfigError(
                "failure_class must be an Exception subclass",
                context={"failure_class": repr(self.failure_class)},
            )
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise AssertsConfigError(
                f"Unknown log level: {self.log_level}",
                context={"log_level": self.log_level},
            )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``log_level``."""
        level: int = logging.getLevelName(self.log_level.upper())
        return level

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary, with ``failure_class`` as a dotted path."""
        return {
            "failure_class": f"{self.failure_class.__module__}.{self.failure_class.__qualname__}",
            "unknown_message": self.unknown_message,
            "log_failures": self.log_failures,
            "log_level": self.log_level,
        }


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(AssertsConfig))

_lock = threading.Lock()
_current = AssertsConfig()


def get_config() -> AssertsConfig:
    """Get the configuration currently in effect."""
    return _current


def configure(**overrides: Any) -> AssertsConfig:
    """Install a new configuration derived from the current one.

    Args:
        **overrides: Field values to change. ``failure_class`` may be a
            class or a dotted path string.

    Returns:
        The new configuration

    Raises:
        AssertsConfigError: If a key is unknown or a value is invalid
    """
    global _current
    values = _normalize(overrides)
    with _lock:
        _current = dataclasses.replace(_current, **values)
        return _current


def reset_config() -> AssertsConfig:
    """Restore the default configuration."""
    global _current
    with _lock:
        _current = AssertsConfig()
        return _current


def load_config(
    source: Union[str, Path, Dict[str, Any], None] = None,
    use_env: bool = True,
) -> AssertsConfig:
    """Build and install a configuration from a source.

    Starts from defaults, applies the source, then environment overrides.

    Args:
        source: Dictionary, or path to a YAML (.yaml, .yml) or JSON file
        use_env: Whether to apply DATAKNOBS_ASSERTS_* environment variables

    Returns:
        The installed configuration

    Raises:
        AssertsConfigError: If the source cannot be read or is invalid
    """
    global _current
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, dict):
        data = dict(source)
    elif isinstance(source, (str, Path)):
        data = _load_file(source)
    else:
        raise AssertsConfigError(f"Invalid source type: {type(source)}")

    if use_env:
        data.update(get_env_overrides())

    config = AssertsConfig(**_normalize(data))
    with _lock:
        _current = config
    logger.debug("Loaded asserts configuration: %s", config.to_dict())
    return config


def get_env_overrides(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
    """Collect configuration values from environment variables.

    ``DATAKNOBS_ASSERTS_LOG_FAILURES=true`` becomes ``{"log_failures": True}``.
    Variables naming unknown fields are ignored.

    Args:
        prefix: Environment variable prefix

    Returns:
        Dictionary of field names to typed values
    """
    overrides: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):].lower()
        if name not in _FIELD_NAMES:
            continue
        # Text fields keep the raw string
        if name in ("unknown_message", "log_level", "failure_class"):
            overrides[name] = value
        else:
            overrides[name] = _parse_value(value)
        logger.debug("Environment override %s=%r", key, overrides[name])
    return overrides


def _normalize(values: Dict[str, Any]) -> Dict[str, Any]:
    """Validate keys and resolve dotted class paths."""
    unknown = sorted(set(values) - _FIELD_NAMES)
    if unknown:
        raise AssertsConfigError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            context={"keys": unknown, "allowed": sorted(_FIELD_NAMES)},
        )
    result = dict(values)
    if isinstance(result.get("failure_class"), str):
        result["failure_class"] = _load_class(result["failure_class"])
    if "log_failures" in result and not isinstance(result["log_failures"], bool):
        raise AssertsConfigError(
            "log_failures must be a boolean",
            context={"log_failures": result["log_failures"]},
        )
    return result


def _load_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration data from a YAML or JSON file."""
    path = Path(path).resolve()

    if not path.exists():
        raise AssertsConfigError(
            f"Configuration file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise AssertsConfigError(f"Unsupported file format: {suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise AssertsConfigError(
            f"Configuration file must contain a mapping: {path}",
            context={"path": str(path)},
        )
    logger.debug("Read asserts configuration from %s", path)
    return data


def _load_class(class_path: str) -> Type[Any]:
    """Load a class from a module path such as ``"mymodule.MyError"``."""
    if "." not in class_path:
        raise AssertsConfigError(f"Invalid class path: {class_path}")
    module_path, class_name = class_path.rsplit(".", 1)

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise AssertsConfigError(f"Failed to import {class_path}: {e}") from e

    if not hasattr(module, class_name):
        raise AssertsConfigError(f"Class {class_name} not found in {module_path}")

    cls: Type[Any] = getattr(module, class_name)
    return cls


def _parse_value(value: str) -> Any:
    """Parse an environment variable value to bool, int, float or string."""
    if value.lower() in ["true", "yes", "1"]:
        return True
    elif value.lower() in ["false", "no", "0"]:
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


__all__ = [
    "ENV_PREFIX",
    "AssertsConfig",
    "get_config",
    "configure",
    "reset_config",
    "load_config",
    "get_env_overrides",
]
