"""Core data structures for dialog handling: slot assessments and Lex results."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Union

from lexhook.schemas.event import IntentSummary, LexEvent, SlotDetail

if TYPE_CHECKING:
    from lexhook.dialog.evaluators import SlotEvaluator

Slots = Dict[str, Optional[str]]
"""Slot name → value; None marks a slot that still has to be elicited."""

SessionAttributes = Dict[str, str]


class SlotValidationAssessment(IntEnum):
    """Three-valued judgement of a single slot value.

    VALID_RECENT_SLOT means the value was already accepted on an earlier turn
    (the recent intent summary holds a value for it); VALID_SLOT means it was
    accepted on this turn.
    """
    INVALID = 1
    VALID_SLOT = 2
    VALID_RECENT_SLOT = 3


@dataclass(frozen=True)
class EvaluatableSlotValue:
    """Everything a SlotEvaluator needs to judge one slot on one turn."""

    value: Optional[str] = None
    recent_value: Optional[str] = None
    details: Optional[SlotDetail] = None
    elicited_slot_name: Optional[str] = None
    """``slotToElicit`` of the most recent summary for the current intent."""


@dataclass
class SlotEvaluationResult:
    """Output of ``SlotEvaluator.evaluate``."""

    valid: SlotValidationAssessment
    slot_value: EvaluatableSlotValue
    new_slots: Optional[Dict[str, str]] = None
    """Slot values the evaluator would rather see than what Lex resolved
    (e.g. a canonical spelling).  Passed to hooks and responders as-is."""

    @property
    def is_invalid(self) -> bool:
        return self.valid == SlotValidationAssessment.INVALID


# ── Lex results ───────────────────────────────────────────────────────────────


@dataclass
class ResponseMessage:
    content: str
    content_type: str = "PlainText"
    """``PlainText``, ``SSML`` or ``CustomPayload``."""

    def to_dict(self) -> Dict[str, Any]:
        return {"contentType": self.content_type, "content": self.content}


@dataclass
class DialogActionClose:
    fulfillment_state: str
    message: Optional[ResponseMessage] = None
    type: str = field(default="Close", init=False)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "fulfillmentState": self.fulfillment_state}
        if self.message is not None:
            out["message"] = self.message.to_dict()
        return out


@dataclass
class DialogActionDelegate:
    slots: Optional[Slots] = None
    type: str = field(default="Delegate", init=False)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.slots is not None:
            out["slots"] = dict(self.slots)
        return out


@dataclass
class DialogActionElicitSlot:
    intent_name: str
    slot_to_elicit: str
    slots: Slots
    message: Optional[ResponseMessage] = None
    type: str = field(default="ElicitSlot", init=False)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.type,
            "intentName": self.intent_name,
            "slots": dict(self.slots),
            "slotToElicit": self.slot_to_elicit,
        }
        if self.message is not None:
            out["message"] = self.message.to_dict()
        return out


DialogAction = Union[DialogActionClose, DialogActionDelegate, DialogActionElicitSlot]


@dataclass
class LexResult:
    """Response handed back to Lex.  Optional members are omitted from the
    wire format when None, never replaced with empty values."""

    dialog_action: DialogAction
    session_attributes: Optional[SessionAttributes] = None
    recent_intent_summary_view: Optional[List[IntentSummary]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"dialogAction": self.dialog_action.to_dict()}
        if self.session_attributes is not None:
            out["sessionAttributes"] = dict(self.session_attributes)
        if self.recent_intent_summary_view is not None:
            out["recentIntentSummaryView"] = [
                s.to_dict() for s in self.recent_intent_summary_view
            ]
        return out


# ── Dialog handler configuration ──────────────────────────────────────────────

SlotEvaluationHook = Callable[[LexEvent, "SlotEvaluator", SlotEvaluationResult], None]
AllSlotsValidHook = Callable[[LexEvent], None]
InvalidSlotResponder = Callable[[LexEvent, "SlotEvaluator", SlotEvaluationResult], LexResult]
AllSlotsValidResponder = Callable[[LexEvent], LexResult]


@dataclass(frozen=True)
class DialogEventHandlerConfig:
    """Parameterizes ``DefaultDialogEventHandler``.

    Hooks are called for their side effects only (e.g. writing session
    attributes); responders replace the default ElicitSlot / Delegate results.
    """

    slot_evaluators: List["SlotEvaluator"]
    """One evaluator per slot, in the order the slots should be elicited."""

    slot_order: Optional[List[str]] = None
    """Explicit elicitation order.  Names without an evaluator are checked
    for a non-empty value only; evaluators whose slot is missing here are
    appended afterwards in registration order."""

    slot_evaluation_hook: Optional[SlotEvaluationHook] = None
    """Invoked after every slot evaluation, valid or not."""

    all_slots_valid_hook: Optional[AllSlotsValidHook] = None
    invalid_slot_responder: Optional[InvalidSlotResponder] = None
    all_slots_valid_responder: Optional[AllSlotsValidResponder] = None
