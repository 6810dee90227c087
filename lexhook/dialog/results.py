"""Builders for the three Lex result shapes: Close, Delegate and ElicitSlot.

Session attributes and the recent intent summary view are attached only when
given; an omitted argument never becomes an empty value in the result.
"""
from __future__ import annotations

from typing import List, Optional

from lexhook.dialog.types import (
    DialogActionClose,
    DialogActionDelegate,
    DialogActionElicitSlot,
    LexResult,
    ResponseMessage,
    SessionAttributes,
    Slots,
)
from lexhook.schemas.event import IntentSummary

FULFILLED = "Fulfilled"
FAILED = "Failed"


def plain_text(content: str) -> ResponseMessage:
    return ResponseMessage(content=content, content_type="PlainText")


def dialog_action_close(
    fulfillment_state: str,
    *,
    message: Optional[ResponseMessage] = None,
    session_attributes: Optional[SessionAttributes] = None,
    recent_intent_summary_view: Optional[List[IntentSummary]] = None,
) -> LexResult:
    """End the intent, fulfilled or failed."""
    if fulfillment_state not in (FULFILLED, FAILED):
        raise ValueError(f"fulfillment_state must be {FULFILLED!r} or {FAILED!r}, got {fulfillment_state!r}")
    result = LexResult(
        dialog_action=DialogActionClose(fulfillment_state=fulfillment_state, message=message),
    )
    maybe_add_to_result(
        result,
        session_attributes=session_attributes,
        recent_intent_summary_view=recent_intent_summary_view,
    )
    return result


def dialog_action_delegate(
    *,
    slots: Optional[Slots] = None,
    session_attributes: Optional[SessionAttributes] = None,
    recent_intent_summary_view: Optional[List[IntentSummary]] = None,
) -> LexResult:
    """Let Lex pick the next action with the given slots."""
    result = LexResult(dialog_action=DialogActionDelegate(slots=slots))
    maybe_add_to_result(
        result,
        session_attributes=session_attributes,
        recent_intent_summary_view=recent_intent_summary_view,
    )
    return result


def dialog_action_elicit_slot(
    *,
    intent_name: str,
    slot_to_elicit: str,
    slots: Slots,
    message: Optional[ResponseMessage] = None,
    session_attributes: Optional[SessionAttributes] = None,
    recent_intent_summary_view: Optional[List[IntentSummary]] = None,
) -> LexResult:
    """Ask the user for *slot_to_elicit* (again)."""
    result = LexResult(
        dialog_action=DialogActionElicitSlot(
            intent_name=intent_name,
            slot_to_elicit=slot_to_elicit,
            slots=slots,
            message=message,
        ),
    )
    maybe_add_to_result(
        result,
        session_attributes=session_attributes,
        recent_intent_summary_view=recent_intent_summary_view,
    )
    return result


def maybe_add_to_result(
    result: LexResult,
    *,
    session_attributes: Optional[SessionAttributes] = None,
    recent_intent_summary_view: Optional[List[IntentSummary]] = None,
) -> None:
    if session_attributes is not None:
        result.session_attributes = session_attributes
    if recent_intent_summary_view is not None:
        result.recent_intent_summary_view = recent_intent_summary_view
