"""
services/identity_service.py
-----------------------------
Business logic for the /uid command: tells a user their own ID, or the ID
of the person whose message they replied to.
"""

from models.events import MessageEvent, SendText

# Rendered when the sender of the command itself is unknown.
UNKNOWN_ID = "unknown"


class IdentityService:
    """Resolves "who is this" lookups into a reply."""

    def resolve_identity(self, msg: MessageEvent) -> SendText:
        """
        Build the /uid reply for a message.

        The identifier is rendered as plain text; no mention is attempted.

        Returns:
            SendText addressed to the chat the command came from.
        """
        if msg.replied_to is not None:
            replied_id = msg.replied_to.sender_id
            if replied_id is not None:
                return SendText(
                    msg.chat_id,
                    f"The user ID of the person you replied to is {replied_id}",
                )
            return SendText(msg.chat_id, "Could not retrieve the user ID.")

        sender = msg.sender_id if msg.sender_id is not None else UNKNOWN_ID
        return SendText(msg.chat_id, f"Your user ID is {sender}")
