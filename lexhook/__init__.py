"""
lexhook: helpers for writing Amazon Lex (V1) Lambda code hooks.

Usage:
    from lexhook import (
        DefaultDialogEventHandler, DialogEventHandlerConfig, LexEventHandler,
        NotNullSlotEvaluator, lambda_handler,
    )

    dialog = DefaultDialogEventHandler(DialogEventHandlerConfig(
        slot_evaluators=[NotNullSlotEvaluator("PickupTime", "What time?")],
    ))
    handler = lambda_handler(LexEventHandler(dialog=dialog, fulfill=MyFulfillment()))
"""
from lexhook.dialog.default_dialog import DefaultDialogEventHandler
from lexhook.dialog.evaluators import (
    BaseSlotEvaluator,
    CurrencySlotEvaluator,
    LexDateSlotEvaluator,
    NotNullSlotEvaluator,
    SetMembershipSlotEvaluator,
    SlotEvaluator,
)
from lexhook.dialog.handlers import EventHandler, LexEventHandler
from lexhook.dialog.types import (
    DialogEventHandlerConfig,
    EvaluatableSlotValue,
    LexResult,
    ResponseMessage,
    SlotEvaluationResult,
    SlotValidationAssessment,
)
from lexhook.router import lambda_handler, route
from lexhook.schemas.event import IntentSummary, LexEvent

__all__ = [
    "BaseSlotEvaluator",
    "CurrencySlotEvaluator",
    "DefaultDialogEventHandler",
    "DialogEventHandlerConfig",
    "EvaluatableSlotValue",
    "EventHandler",
    "IntentSummary",
    "LexDateSlotEvaluator",
    "LexEvent",
    "LexEventHandler",
    "LexResult",
    "NotNullSlotEvaluator",
    "ResponseMessage",
    "SetMembershipSlotEvaluator",
    "SlotEvaluationResult",
    "SlotEvaluator",
    "SlotValidationAssessment",
    "lambda_handler",
    "route",
]
