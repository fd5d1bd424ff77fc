"""
services/callback_service.py
-----------------------------
Completes the keyboard round trip when an inline button is pressed.
"""

from models.events import AcknowledgeCallback, CallbackEvent, OutboundAction, SendText


class CallbackService:
    """Turns a button press into a chat reply plus an acknowledgment."""

    def handle_callback(self, cb: CallbackEvent) -> list[OutboundAction]:
        """
        Reply to a button press.

        Always two actions, in order: the chat reply, then the acknowledgment
        that stops the button's loading indicator. `data` is echoed as-is,
        even when it is not one of the keypad digits.
        """
        return [
            SendText(cb.chat_id, f"You selected: {cb.data}"),
            AcknowledgeCallback(cb.callback_id, f"You pressed {cb.data}"),
        ]
