"""Pydantic v2 schemas for the inbound Lex (V1) code hook event."""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

ConfirmationStatus = Literal["None", "Confirmed", "Denied"]
DialogActionType = Literal["ElicitIntent", "ElicitSlot", "ConfirmIntent", "Delegate", "Close"]
FulfillmentState = Literal["Fulfilled", "Failed"]

_MODEL_CONFIG = {"populate_by_name": True, "extra": "ignore"}


class SlotResolution(BaseModel):
    value: str

    model_config = _MODEL_CONFIG


class SlotDetail(BaseModel):
    """Alternative resolutions plus the raw text the user typed for one slot."""

    resolutions: List[SlotResolution] = Field(default_factory=list)
    original_value: Optional[str] = Field(default=None, alias="originalValue")

    model_config = _MODEL_CONFIG


class CurrentIntent(BaseModel):
    name: str
    slots: Dict[str, Optional[str]] = Field(default_factory=dict)
    """Slot name → current value.  The dialog handler sets rejected values to None."""

    slot_details: Dict[str, Optional[SlotDetail]] = Field(
        default_factory=dict, alias="slotDetails",
    )
    confirmation_status: ConfirmationStatus = Field(
        default="None", alias="confirmationStatus",
    )

    model_config = _MODEL_CONFIG


class Bot(BaseModel):
    name: str
    alias: Optional[str] = None
    version: Optional[str] = None

    model_config = _MODEL_CONFIG


class IntentSummary(BaseModel):
    """Snapshot of an earlier turn, as listed in ``recentIntentSummaryView``."""

    intent_name: str = Field(..., alias="intentName")
    checkpoint_label: Optional[str] = Field(default=None, alias="checkpointLabel")
    slots: Dict[str, Optional[str]] = Field(default_factory=dict)
    confirmation_status: Optional[ConfirmationStatus] = Field(
        default=None, alias="confirmationStatus",
    )
    dialog_action_type: DialogActionType = Field(..., alias="dialogActionType")
    fulfillment_state: Optional[FulfillmentState] = Field(
        default=None, alias="fulfillmentState",
    )
    slot_to_elicit: Optional[str] = Field(default=None, alias="slotToElicit")

    model_config = _MODEL_CONFIG

    def to_dict(self) -> Dict[str, Any]:
        # unset top-level fields are dropped; None slot values are kept
        return {k: v for k, v in self.model_dump(by_alias=True).items() if v is not None}


class LexEvent(BaseModel):
    """One conversation turn as delivered to the Lambda code hook."""

    current_intent: CurrentIntent = Field(..., alias="currentIntent")
    bot: Optional[Bot] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    input_transcript: Optional[str] = Field(default=None, alias="inputTranscript")
    invocation_source: str = Field(..., alias="invocationSource")
    """``DialogCodeHook`` or ``FulfillmentCodeHook``; anything else is rejected by the router."""

    output_dialog_mode: Optional[str] = Field(default=None, alias="outputDialogMode")
    message_version: Optional[str] = Field(default=None, alias="messageVersion")
    session_attributes: Optional[Dict[str, str]] = Field(
        default=None, alias="sessionAttributes",
    )
    request_attributes: Optional[Dict[str, str]] = Field(
        default=None, alias="requestAttributes",
    )
    recent_intent_summary_view: Optional[List[IntentSummary]] = Field(
        default=None, alias="recentIntentSummaryView",
    )
    sentiment_response: Optional[Dict[str, Any]] = Field(
        default=None, alias="sentimentResponse",
    )
    kendra_response: Optional[Any] = Field(default=None, alias="kendraResponse")

    model_config = _MODEL_CONFIG

    def to_dict(self) -> Dict[str, Any]:
        """Wire-format dict, used for event logging."""
        return self.model_dump(by_alias=True, mode="json")
