"""
lexhook.config.router – turn router behaviour.

Env vars: LEXHOOK_FAILURE_MESSAGE, LEXHOOK_LOG_EVENTS.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

DIALOG_CODE_HOOK = "DialogCodeHook"
FULFILLMENT_CODE_HOOK = "FulfillmentCodeHook"

_TRUTHY = frozenset({"1", "true", "yes"})


@dataclass(frozen=True)
class RouterConfig:
    failure_message: str = "Unexpected error occurred"
    """PlainText content of the Close/Failed result returned when a handler raises."""

    log_events: bool = True
    """Log the full inbound event as JSON at DEBUG level."""

    def __post_init__(self) -> None:
        if not isinstance(self.failure_message, str) or not self.failure_message.strip():
            raise ValueError("failure_message must be a non-empty string")

    @classmethod
    def from_env(cls, **overrides: object) -> RouterConfig:
        failure_message = str(
            overrides.get("failure_message")
            or os.environ.get("LEXHOOK_FAILURE_MESSAGE", "Unexpected error occurred")
        ).strip()
        raw_log_events = overrides.get("log_events")
        if raw_log_events is None:
            log_events = os.environ.get("LEXHOOK_LOG_EVENTS", "true").strip().lower() in _TRUTHY
        else:
            log_events = bool(raw_log_events)
        return cls(failure_message=failure_message, log_events=log_events)


def load_router_config(**overrides: object) -> RouterConfig:
    return RouterConfig.from_env(**overrides)
