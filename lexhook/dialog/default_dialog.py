"""DefaultDialogEventHandler: walk the slots in order and re-ask the first bad one.

Each slot is judged by its SlotEvaluator.  The first INVALID slot is cleared on
the event and answered with an ElicitSlot result (or the configured
``invalid_slot_responder``); no later slot is looked at on that turn.  When
every slot passes, the result is a Delegate (or the configured
``all_slots_valid_responder``).
"""
from __future__ import annotations

import logging
from typing import Dict, List

from lexhook.core.exceptions import ConfigurationError
from lexhook.dialog.evaluators import NotNullSlotEvaluator, SlotEvaluator
from lexhook.dialog.handlers import EventHandler
from lexhook.dialog.results import (
    dialog_action_delegate,
    dialog_action_elicit_slot,
    plain_text,
)
from lexhook.dialog.types import (
    DialogEventHandlerConfig,
    LexResult,
    SlotEvaluationResult,
)
from lexhook.schemas.event import LexEvent

logger = logging.getLogger(__name__)

FALLBACK_PROMPT = "null value is invalid"

_HOOK_FIELDS = (
    "slot_evaluation_hook",
    "all_slots_valid_hook",
    "invalid_slot_responder",
    "all_slots_valid_responder",
)


class DefaultDialogEventHandler(EventHandler):
    """Dialog handler driven by a ``DialogEventHandlerConfig``.

    The slot order is fixed at construction and is the order in which slots
    are elicited.  A slot named in ``config.slot_order`` without an evaluator
    gets a ``NotNullSlotEvaluator``, created on first use and kept for later
    turns; the gap is logged when the handler is built.
    """

    def __init__(self, config: DialogEventHandlerConfig) -> None:
        self._config = config
        self._evaluators: Dict[str, SlotEvaluator] = {}
        for evaluator in config.slot_evaluators:
            if evaluator.slot_name in self._evaluators:
                raise ConfigurationError(
                    f"more than one SlotEvaluator registered for slot '{evaluator.slot_name}'",
                    details={"slot": evaluator.slot_name},
                )
            self._evaluators[evaluator.slot_name] = evaluator

        for name in _HOOK_FIELDS:
            fn = getattr(config, name)
            if fn is not None and not callable(fn):
                raise ConfigurationError(f"{name} must be callable", details={"field": name})

        self._slot_names: List[str] = self._build_slot_order(config)

    @property
    def config(self) -> DialogEventHandlerConfig:
        return self._config

    @property
    def slot_names(self) -> List[str]:
        """Slot names in elicitation order."""
        return list(self._slot_names)

    def _build_slot_order(self, config: DialogEventHandlerConfig) -> List[str]:
        if config.slot_order is None:
            return [e.slot_name for e in config.slot_evaluators]

        order: List[str] = []
        for name in config.slot_order:
            if name in order:
                raise ConfigurationError(
                    f"slot '{name}' listed more than once in slot_order",
                    details={"slot": name},
                )
            if name not in self._evaluators:
                logger.warning(
                    "DefaultDialogEventHandler: no SlotEvaluator for '%s', will use NotNullSlotEvaluator",
                    name,
                )
            order.append(name)
        order.extend(e.slot_name for e in config.slot_evaluators if e.slot_name not in order)
        return order

    async def handle(self, event: LexEvent) -> LexResult:
        config = self._config
        for slot_name in self._slot_names:
            evaluator = self.get_slot_evaluator(slot_name)
            result = evaluator.evaluate(event)

            if config.slot_evaluation_hook is not None:
                config.slot_evaluation_hook(event, evaluator, result)

            if result.is_invalid:
                logger.info(
                    "DefaultDialogEventHandler: intent '%s' slot '%s' invalid, eliciting",
                    event.current_intent.name, slot_name,
                )
                event.current_intent.slots[slot_name] = None
                if config.invalid_slot_responder is not None:
                    return config.invalid_slot_responder(event, evaluator, result)
                return self.default_invalid_slot_responder(event, evaluator, result)

        logger.info(
            "DefaultDialogEventHandler: intent '%s' all %d slots valid",
            event.current_intent.name, len(self._slot_names),
        )
        if config.all_slots_valid_hook is not None:
            config.all_slots_valid_hook(event)

        if config.all_slots_valid_responder is not None:
            return config.all_slots_valid_responder(event)
        return self.default_all_slots_valid_responder(event)

    def get_slot_evaluator(self, slot_name: str) -> SlotEvaluator:
        evaluator = self._evaluators.get(slot_name)
        if evaluator is None:
            logger.info(
                "DefaultDialogEventHandler: creating NotNullSlotEvaluator for unconfigured slot '%s'",
                slot_name,
            )
            evaluator = NotNullSlotEvaluator(slot_name, FALLBACK_PROMPT)
            self._evaluators[slot_name] = evaluator
        return evaluator

    @staticmethod
    def default_invalid_slot_responder(
        event: LexEvent,
        evaluator: SlotEvaluator,
        result: SlotEvaluationResult,
    ) -> LexResult:
        """ElicitSlot for the rejected slot, prompting with the evaluator's message."""
        return dialog_action_elicit_slot(
            intent_name=event.current_intent.name,
            slot_to_elicit=evaluator.slot_name,
            slots=event.current_intent.slots,
            message=plain_text(evaluator.prompt_message),
            session_attributes=event.session_attributes,
        )

    @staticmethod
    def default_all_slots_valid_responder(event: LexEvent) -> LexResult:
        """Delegate back to Lex, which will confirm and then send a fulfillment event."""
        return dialog_action_delegate(
            slots=event.current_intent.slots,
            session_attributes=event.session_attributes,
        )
