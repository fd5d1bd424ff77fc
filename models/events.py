"""
models/events.py
----------------
Domain model for inbound platform events and the outbound actions
produced while handling them.

Every entity is an immutable snapshot of a single event. Nothing here is
shared between two dispatches.
"""

from dataclasses import dataclass
from typing import Optional, Union

from models.keyboard import KeyboardLayout


@dataclass(frozen=True)
class BotIdentity:
    """The bot's own account, as reported by the platform on startup."""
    id: int
    username: Optional[str] = None


@dataclass(frozen=True)
class ReplyReference:
    """The message a command was sent in reply to. Only the sender matters."""
    sender_id: Optional[int] = None


@dataclass(frozen=True)
class MessageEvent:
    """
    A message posted in a chat.

    Attributes:
        chat_id: Conversation the message belongs to.
        sender_id: Author of the message, absent for some channel posts.
        text: Message text. None for stickers, photos and other non-text content.
        replied_to: Reference to the replied message, if any.
    """
    chat_id: int
    sender_id: Optional[int] = None
    text: Optional[str] = None
    replied_to: Optional[ReplyReference] = None


@dataclass(frozen=True)
class CallbackEvent:
    """
    An inline button press.

    Attributes:
        callback_id: Token needed to acknowledge the press.
        chat_id: Chat the reply should go to.
        data: Payload of the pressed button, passed through verbatim.
    """
    callback_id: str
    chat_id: int
    data: str


@dataclass(frozen=True)
class Ignored:
    """Any update kind the bot does not react to."""
    update_id: Optional[int] = None


InboundEvent = Union[MessageEvent, CallbackEvent, Ignored]


@dataclass(frozen=True)
class SendText:
    """Send a text message, optionally with an inline keyboard attached."""
    chat_id: int
    text: str
    keyboard: Optional[KeyboardLayout] = None


@dataclass(frozen=True)
class AcknowledgeCallback:
    """Answer a callback so the button's loading indicator stops."""
    callback_id: str
    text: str


OutboundAction = Union[SendText, AcknowledgeCallback]
