"""
handlers/update_dispatcher.py
------------------------------
Top-level entry point for every inbound event.

Classifies the event, asks the services what to answer, and performs the
resulting actions through the transport. Faults raised by the transport are
handed to the ErrorClassifier, so dispatch() never raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.events import (
    AcknowledgeCallback,
    CallbackEvent,
    Ignored,
    InboundEvent,
    MessageEvent,
    OutboundAction,
    SendText,
)
from services.callback_service import CallbackService
from services.command_router import CommandRouter
from services.error_classifier import ErrorClassifier
from utils.logger import get_logger

if TYPE_CHECKING:
    from transport.telegram_transport import TelegramTransport

logger = get_logger(__name__)


class UpdateDispatcher:
    """Routes inbound events and performs the outbound actions they produce."""

    def __init__(
        self,
        transport: TelegramTransport,
        router: CommandRouter | None = None,
        callbacks: CallbackService | None = None,
        classifier: ErrorClassifier | None = None,
    ):
        self.transport = transport
        self.router = router or CommandRouter()
        self.callbacks = callbacks or CallbackService()
        self.classifier = classifier or ErrorClassifier()

    def plan(self, event: InboundEvent) -> list[OutboundAction]:
        """Decide the actions answering an event, without performing them."""
        match event:
            case MessageEvent(text=str() as text, chat_id=chat_id):
                logger.info(f"Received a message: {text} in chat {chat_id}")
                return self.router.route(event)
            case MessageEvent():
                # Stickers, photos and other non-text content.
                return []
            case CallbackEvent(data=data, chat_id=chat_id):
                logger.info(f"Received callback data: {data} in chat {chat_id}")
                return self.callbacks.handle_callback(event)
            case Ignored():
                return []
        return []

    async def dispatch(self, event: InboundEvent) -> None:
        """
        Handle one inbound event end to end.

        Actions run in order. A failing action is classified and logged,
        and the next one is still attempted: a callback is acknowledged even
        when its chat reply could not be sent.
        """
        for action in self.plan(event):
            try:
                await self._perform(action)
            except Exception as e:
                self.classifier.classify(e)

    async def _perform(self, action: OutboundAction) -> None:
        match action:
            case SendText(chat_id=chat_id, text=text, keyboard=keyboard):
                await self.transport.send_text(chat_id, text, keyboard)
            case AcknowledgeCallback(callback_id=callback_id, text=text):
                await self.transport.acknowledge_callback(callback_id, text)
