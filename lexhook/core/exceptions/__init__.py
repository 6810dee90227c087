"""
lexhook exception system.

Usage:
    from lexhook.core.exceptions import ConfigurationError, LexHookError

    raise ConfigurationError("duplicate slot", details={"slot": "PickupDate"})

    try:
        ...
    except LexHookError as exc:
        logger.error("failed", extra={"extra": exc.to_dict()})
"""
from lexhook.core.exceptions.base import LexHookError
from lexhook.core.exceptions.errors import (
    ConfigurationError,
    HandlerNotConfiguredError,
    MalformedEventError,
)

__all__ = [
    "LexHookError",
    "ConfigurationError",
    "HandlerNotConfiguredError",
    "MalformedEventError",
]
