"""Handler contracts used by the router."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from lexhook.dialog.types import LexResult
from lexhook.schemas.event import LexEvent


class EventHandler(ABC):
    """Every Lex event is handled by an implementation of ``handle()``."""

    @abstractmethod
    async def handle(self, event: LexEvent) -> LexResult:
        ...


@dataclass
class LexEventHandler:
    """The pair of handlers serving one intent.

    ``dialog`` receives DialogCodeHook events (the user is still filling
    slots); ``fulfill`` receives FulfillmentCodeHook events (all slots filled).
    Either may be None when the bot never sends that kind of event.
    """

    dialog: Optional[EventHandler] = None
    fulfill: Optional[EventHandler] = None
