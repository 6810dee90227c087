"""
Built-in exception types. Add new ones here.
"""
from __future__ import annotations

from lexhook.core.exceptions.base import LexHookError


class ConfigurationError(LexHookError):
    """Invalid handler or router configuration."""

    default_code = "CONFIGURATION_ERROR"


class MalformedEventError(LexHookError):
    """Inbound Lex event is not a dialog or fulfillment code hook, or fails schema validation."""

    default_code = "MALFORMED_EVENT"


class HandlerNotConfiguredError(LexHookError):
    """No EventHandler registered for the event's invocation source."""

    default_code = "HANDLER_NOT_CONFIGURED"
