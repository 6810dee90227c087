"""Slot evaluators: one strategy object per slot, judging that slot's value.

Every evaluator honours the same rule first: a slot whose value appears in the
most recent intent summary for the current intent was validated on an earlier
turn and is reported as VALID_RECENT_SLOT without further checks.  Concrete
evaluators override ``is_valid``, call ``super().is_valid`` and only apply
their own rule when that returns INVALID.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import AbstractSet, Iterable, Optional

from lexhook.core.exceptions import ConfigurationError
from lexhook.dialog.types import (
    EvaluatableSlotValue,
    SlotEvaluationResult,
    SlotValidationAssessment,
)
from lexhook.dialog.util import is_valid_lex_date, looks_like_currency
from lexhook.schemas.event import IntentSummary, LexEvent

logger = logging.getLogger(__name__)


class SlotEvaluator(ABC):
    """Contract used by ``DefaultDialogEventHandler`` for each slot."""

    slot_name: str
    prompt_message: str
    """Prompt sent with the default ElicitSlot result when the value is rejected."""

    @abstractmethod
    def evaluate(self, event: LexEvent) -> SlotEvaluationResult:
        ...

    @abstractmethod
    def is_valid(self, slot_value: EvaluatableSlotValue) -> SlotValidationAssessment:
        ...


class BaseSlotEvaluator(SlotEvaluator):
    """Evaluator of a single slot, meant to be sub-classed.

    On its own it accepts only slots that were validated on an earlier turn.
    """

    def __init__(self, slot_name: str, prompt_message: str) -> None:
        if not slot_name:
            raise ConfigurationError("slot_name must be a non-empty string")
        self.slot_name = slot_name
        self.prompt_message = prompt_message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(slot_name={self.slot_name!r})"

    def evaluate(self, event: LexEvent) -> SlotEvaluationResult:
        slot_value = self.get_slot_value(event)
        assessment = self.is_valid(slot_value)
        logger.debug(
            "%s: slot '%s' value=%r recent=%r -> %r",
            self.__class__.__name__, self.slot_name,
            slot_value.value, slot_value.recent_value, assessment,
        )
        return SlotEvaluationResult(valid=assessment, slot_value=slot_value)

    def is_valid(self, slot_value: EvaluatableSlotValue) -> SlotValidationAssessment:
        """VALID_RECENT_SLOT if the recent intent summary holds a value, else INVALID."""
        if slot_value.recent_value is not None:
            return SlotValidationAssessment.VALID_RECENT_SLOT
        return SlotValidationAssessment.INVALID

    def get_slot_value(self, event: LexEvent) -> EvaluatableSlotValue:
        intent = event.current_intent
        summary = self.get_recent_intent_summary(event)
        return EvaluatableSlotValue(
            value=intent.slots.get(self.slot_name),
            details=intent.slot_details.get(self.slot_name),
            recent_value=summary.slots.get(self.slot_name) if summary else None,
            elicited_slot_name=summary.slot_to_elicit if summary else None,
        )

    @staticmethod
    def get_recent_intent_summary(event: LexEvent) -> Optional[IntentSummary]:
        """First summary in the recent view for the current intent, or None."""
        if not event.recent_intent_summary_view:
            return None
        name = event.current_intent.name
        return next(
            (s for s in event.recent_intent_summary_view if s.intent_name == name),
            None,
        )


class NotNullSlotEvaluator(BaseSlotEvaluator):
    """Accept any non-empty value."""

    def is_valid(self, slot_value: EvaluatableSlotValue) -> SlotValidationAssessment:
        assessment = super().is_valid(slot_value)
        if assessment == SlotValidationAssessment.INVALID and slot_value.value:
            return SlotValidationAssessment.VALID_SLOT
        return assessment


class SetMembershipSlotEvaluator(BaseSlotEvaluator):
    """Accept a value only if it is, exactly, one of a fixed set of strings."""

    def __init__(self, slot_name: str, prompt_message: str, members: Iterable[str]) -> None:
        super().__init__(slot_name, prompt_message)
        self._members: frozenset[str] = frozenset(members)

    @property
    def members(self) -> AbstractSet[str]:
        return self._members

    def is_valid(self, slot_value: EvaluatableSlotValue) -> SlotValidationAssessment:
        assessment = super().is_valid(slot_value)
        if assessment == SlotValidationAssessment.INVALID and slot_value.value in self._members:
            return SlotValidationAssessment.VALID_SLOT
        return assessment


class LexDateSlotEvaluator(BaseSlotEvaluator):
    """Accept a real ``YYYY-MM-DD`` date.

    Redundant for AMAZON.DATE slots, which Lex already resolves to valid dates.
    """

    def is_valid(self, slot_value: EvaluatableSlotValue) -> SlotValidationAssessment:
        assessment = super().is_valid(slot_value)
        if assessment == SlotValidationAssessment.INVALID and is_valid_lex_date(slot_value.value):
            return SlotValidationAssessment.VALID_SLOT
        return assessment


class CurrencySlotEvaluator(BaseSlotEvaluator):
    """Accept values that start like dollars and cents (``12.50``).

    Commas are not supported and only the start of the value is checked.
    """

    def is_valid(self, slot_value: EvaluatableSlotValue) -> SlotValidationAssessment:
        assessment = super().is_valid(slot_value)
        if assessment == SlotValidationAssessment.INVALID and looks_like_currency(slot_value.value):
            return SlotValidationAssessment.VALID_SLOT
        return assessment
