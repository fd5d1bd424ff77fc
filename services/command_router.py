"""
services/command_router.py
---------------------------
Maps the leading token of a text message to the action that answers it.

Command keys are case-sensitive and must match exactly, slash included.
Anything that is not a known command is echoed back verbatim.
"""

import re

from models.events import MessageEvent, OutboundAction, SendText
from services.identity_service import IdentityService
from services.keyboard_service import KeyboardService

FAREWELL_TEXT = "Farewell!"

# Shown in the Telegram command menu on startup.
COMMAND_DESCRIPTIONS = [
    ("uid", "Show your user ID, or the ID of the person you replied to"),
    ("keyboard", "Show a numeric keypad"),
    ("stop", "Say goodbye"),
]

_FIRST_WHITESPACE = re.compile(r"\s+")


def command_key(text: str) -> str:
    """
    Return the first whitespace-delimited token of `text`.

    Leading whitespace yields an empty key, which never matches a command.
    """
    return _FIRST_WHITESPACE.split(text, maxsplit=1)[0]


class CommandRouter:
    """Routes text messages to the command handlers or to echo."""

    def __init__(self, identity_service: IdentityService | None = None,
                 keyboard_service: KeyboardService | None = None):
        self.identity_service = identity_service or IdentityService()
        self.keyboard_service = keyboard_service or KeyboardService()

    def route(self, msg: MessageEvent) -> list[OutboundAction]:
        """
        Decide the reply for a text message.

        Args:
            msg: A message whose `text` is present.

        Returns:
            The actions answering the message (one, for every command).
        """
        text = msg.text or ""
        key = command_key(text)

        if key == "/uid":
            return [self.identity_service.resolve_identity(msg)]
        if key == "/keyboard":
            return [self.keyboard_service.build_keyboard(msg.chat_id)]
        if key == "/stop":
            return [SendText(msg.chat_id, FAREWELL_TEXT)]
        return [SendText(msg.chat_id, text)]
