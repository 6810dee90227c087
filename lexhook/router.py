"""Router: entry point for every Lex code hook event.

``route`` picks the dialog or fulfillment handler from the event's
``invocationSource`` and turns any failure into a Close/Failed result so Lex
always gets a well-formed answer.  ``lambda_handler`` wraps ``route`` as a
synchronous AWS Lambda entry point working on plain dicts.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from lexhook.config import (
    DIALOG_CODE_HOOK,
    FULFILLMENT_CODE_HOOK,
    RouterConfig,
    load_router_config,
)
from lexhook.core.exceptions import (
    HandlerNotConfiguredError,
    LexHookError,
    MalformedEventError,
)
from lexhook.core.logger import configure, is_configured
from lexhook.dialog.handlers import EventHandler, LexEventHandler
from lexhook.dialog.results import FAILED, dialog_action_close, plain_text
from lexhook.dialog.types import LexResult
from lexhook.schemas.event import LexEvent

logger = logging.getLogger(__name__)

RawEvent = Mapping[str, Any]


def parse_event(raw: Union[LexEvent, RawEvent]) -> LexEvent:
    """Validate a raw event dict; LexEvent instances pass through unchanged."""
    if isinstance(raw, LexEvent):
        return raw
    try:
        return LexEvent.model_validate(raw)
    except ValidationError as exc:
        raise MalformedEventError(
            "Lex event failed schema validation",
            details={"errors": exc.errors(include_url=False)},
            cause=exc,
        ) from exc


def _session_attributes_of(raw: Union[LexEvent, RawEvent]) -> Optional[Dict[str, str]]:
    if isinstance(raw, LexEvent):
        return raw.session_attributes
    if isinstance(raw, Mapping):
        attrs = raw.get("sessionAttributes")
        if isinstance(attrs, dict):
            return attrs
    return None


def _select_handler(event: LexEvent, event_handler: LexEventHandler) -> EventHandler:
    source = event.invocation_source
    if source == DIALOG_CODE_HOOK:
        handler = event_handler.dialog
    elif source == FULFILLMENT_CODE_HOOK:
        handler = event_handler.fulfill
    else:
        raise MalformedEventError(
            "malformed Lex event: unknown invocationSource",
            details={"invocation_source": source},
        )
    if handler is None:
        raise HandlerNotConfiguredError(
            f"no handler configured for {source}",
            details={"invocation_source": source, "intent": event.current_intent.name},
        )
    return handler


def _load_config_or_default() -> RouterConfig:
    try:
        return load_router_config()
    except ValueError as exc:
        logger.error("route: invalid router config, using defaults: %s", exc)
        return RouterConfig()


async def route(
    event: Union[LexEvent, RawEvent],
    ctx: Any,
    event_handler: LexEventHandler,
    *,
    config: Optional[RouterConfig] = None,
) -> LexResult:
    """Dispatch *event* to ``event_handler.dialog`` or ``event_handler.fulfill``.

    *ctx* is the Lambda context; it is only used for log correlation.
    Never raises: failures become Close/Failed with the inbound session
    attributes.
    """
    if config is None:
        config = _load_config_or_default()
    request_id = getattr(ctx, "aws_request_id", None)
    logger.info("route: request_id=%s", request_id)

    lex_event: Optional[LexEvent] = None
    try:
        lex_event = parse_event(event)
        if config.log_events and logger.isEnabledFor(logging.DEBUG):
            logger.debug("route: event %s", json.dumps(lex_event.to_dict(), default=str))
        handler = _select_handler(lex_event, event_handler)
        result = await handler.handle(lex_event)
        logger.info(
            "route: intent '%s' %s -> %s",
            lex_event.current_intent.name,
            lex_event.invocation_source,
            result.dialog_action.type,
        )
        return result
    except Exception as exc:
        extra = exc.to_dict() if isinstance(exc, LexHookError) else {"error": str(exc)}
        extra["request_id"] = request_id
        logger.exception("route: handler failed: %s", exc, extra={"extra": extra})
        return dialog_action_close(
            FAILED,
            message=plain_text(config.failure_message),
            session_attributes=_session_attributes_of(lex_event if lex_event is not None else event),
        )


def lambda_handler(
    event_handler: LexEventHandler,
    *,
    config: Optional[RouterConfig] = None,
) -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    """Build an AWS Lambda entry point for *event_handler*.

    The router config is loaded here, once, so an invalid environment fails
    when the function module is imported rather than on a user's turn.

    Example::

        handler = lambda_handler(LexEventHandler(dialog=..., fulfill=...))
    """
    if config is None:
        config = load_router_config()

    def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
        if not is_configured():
            configure()
        result = asyncio.run(route(event, context, event_handler, config=config))
        return result.to_dict()

    return handler
