"""
services/keyboard_service.py
-----------------------------
Business logic for the /keyboard command: a numeric keypad prompt.
"""

from models.events import SendText
from models.keyboard import Button, KeyboardLayout

PROMPT_TEXT = "Please select a number:"


def _numeric_layout() -> KeyboardLayout:
    """1-9 in three rows of three, then a lone 0. Labels equal data."""
    rows = [
        tuple(Button(str(n), str(n)) for n in range(start, start + 3))
        for start in (1, 4, 7)
    ]
    rows.append((Button("0", "0"),))
    return KeyboardLayout(tuple(rows))


NUMERIC_KEYPAD = _numeric_layout()


class KeyboardService:
    """Builds the keypad prompt. Stateless: nothing is recorded per chat."""

    def build_keyboard(self, chat_id: int) -> SendText:
        return SendText(chat_id, PROMPT_TEXT, keyboard=NUMERIC_KEYPAD)
