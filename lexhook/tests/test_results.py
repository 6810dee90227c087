"""Unit tests for the Lex result builders and their wire format."""
from __future__ import annotations

import unittest

from lexhook.dialog.results import (
    FAILED,
    FULFILLED,
    dialog_action_close,
    dialog_action_delegate,
    dialog_action_elicit_slot,
    maybe_add_to_result,
    plain_text,
)
from lexhook.schemas.event import IntentSummary

_SUMMARY = IntentSummary.model_validate({
    "intentName": "OrderFlowers",
    "checkpointLabel": "pickup",
    "slots": {"FlowerType": "roses", "PickupDate": None},
    "confirmationStatus": "None",
    "dialogActionType": "ElicitSlot",
    "slotToElicit": "PickupDate",
})


class TestClose(unittest.TestCase):
    def test_minimal_close(self) -> None:
        out = dialog_action_close(FULFILLED).to_dict()
        self.assertEqual(out, {"dialogAction": {"type": "Close", "fulfillmentState": "Fulfilled"}})

    def test_close_with_message_and_session(self) -> None:
        out = dialog_action_close(
            FAILED,
            message=plain_text("Sorry"),
            session_attributes={"k": "v"},
        ).to_dict()
        self.assertEqual(out["dialogAction"]["message"], {"contentType": "PlainText", "content": "Sorry"})
        self.assertEqual(out["dialogAction"]["fulfillmentState"], "Failed")
        self.assertEqual(out["sessionAttributes"], {"k": "v"})
        self.assertNotIn("recentIntentSummaryView", out)

    def test_unknown_fulfillment_state_rejected(self) -> None:
        with self.assertRaises(ValueError):
            dialog_action_close("Done")


class TestDelegate(unittest.TestCase):
    def test_delegate_keeps_null_slots(self) -> None:
        out = dialog_action_delegate(slots={"A": "hi", "B": None}).to_dict()
        self.assertEqual(out, {"dialogAction": {"type": "Delegate", "slots": {"A": "hi", "B": None}}})

    def test_delegate_without_slots(self) -> None:
        out = dialog_action_delegate().to_dict()
        self.assertEqual(out, {"dialogAction": {"type": "Delegate"}})


class TestElicitSlot(unittest.TestCase):
    def test_elicit_slot_shape(self) -> None:
        result = dialog_action_elicit_slot(
            intent_name="OrderFlowers",
            slot_to_elicit="PickupDate",
            slots={"FlowerType": "roses", "PickupDate": None},
            message=plain_text("What day?"),
            recent_intent_summary_view=[_SUMMARY],
        )
        out = result.to_dict()
        self.assertEqual(out["dialogAction"], {
            "type": "ElicitSlot",
            "intentName": "OrderFlowers",
            "slots": {"FlowerType": "roses", "PickupDate": None},
            "slotToElicit": "PickupDate",
            "message": {"contentType": "PlainText", "content": "What day?"},
        })
        self.assertNotIn("sessionAttributes", out)
        summary = out["recentIntentSummaryView"][0]
        self.assertEqual(summary["intentName"], "OrderFlowers")
        self.assertEqual(summary["slotToElicit"], "PickupDate")
        self.assertEqual(summary["slots"], {"FlowerType": "roses", "PickupDate": None})


class TestMaybeAddToResult(unittest.TestCase):
    def test_none_leaves_result_untouched(self) -> None:
        result = dialog_action_delegate(session_attributes={"a": "1"})
        maybe_add_to_result(result)
        self.assertEqual(result.session_attributes, {"a": "1"})
        self.assertIsNone(result.recent_intent_summary_view)

    def test_empty_values_are_attached(self) -> None:
        result = dialog_action_delegate()
        maybe_add_to_result(result, session_attributes={}, recent_intent_summary_view=[])
        out = result.to_dict()
        self.assertEqual(out["sessionAttributes"], {})
        self.assertEqual(out["recentIntentSummaryView"], [])
