"""OrderFlowers sample bot: three slots, a pricing hook and a canned fulfillment.

Deploy with ``lexhook.samples.order_flowers.handler`` as the Lambda handler.
"""
from __future__ import annotations

import logging

from lexhook.dialog.default_dialog import DefaultDialogEventHandler
from lexhook.dialog.evaluators import (
    LexDateSlotEvaluator,
    NotNullSlotEvaluator,
    SetMembershipSlotEvaluator,
    SlotEvaluator,
)
from lexhook.dialog.handlers import EventHandler, LexEventHandler
from lexhook.dialog.results import FULFILLED, dialog_action_close, plain_text
from lexhook.dialog.types import (
    DialogEventHandlerConfig,
    LexResult,
    SlotEvaluationResult,
    SlotValidationAssessment,
)
from lexhook.router import lambda_handler
from lexhook.schemas.event import LexEvent

logger = logging.getLogger(__name__)

FLOWER_TYPES = frozenset({"roses", "tulips", "lilies"})
ROSE_PRICE = 3
DEFAULT_PRICE = 2


class OrderFlowersFulfillment(EventHandler):
    async def handle(self, event: LexEvent) -> LexResult:
        return dialog_action_close(
            FULFILLED,
            message=plain_text("Flowers have been ordered"),
            session_attributes=event.session_attributes,
        )


def price_flowers(event: LexEvent, evaluator: SlotEvaluator, result: SlotEvaluationResult) -> None:
    """Store the unit price once FlowerType is freshly accepted."""
    if result.valid != SlotValidationAssessment.VALID_SLOT or evaluator.slot_name != "FlowerType":
        return
    price = ROSE_PRICE if result.slot_value.value == "roses" else DEFAULT_PRICE
    if event.session_attributes is None:
        event.session_attributes = {}
    event.session_attributes["price"] = str(price)
    logger.debug("price_flowers: %s -> %d", result.slot_value.value, price)


config = DialogEventHandlerConfig(
    # in the same order the slots should be elicited
    slot_evaluators=[
        SetMembershipSlotEvaluator(
            "FlowerType",
            "What type of flowers would you like to order?",
            FLOWER_TYPES,
        ),
        LexDateSlotEvaluator("PickupDate", "What day do you want the Flowers to be picked up?"),
        NotNullSlotEvaluator("PickupTime", "At what time do you want the Flowers to be picked up?"),
    ],
    slot_evaluation_hook=price_flowers,
)

event_handler = LexEventHandler(
    dialog=DefaultDialogEventHandler(config),
    fulfill=OrderFlowersFulfillment(),
)

handler = lambda_handler(event_handler)
