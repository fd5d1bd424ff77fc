"""
models/keyboard.py
------------------
Inline keyboard layout: an ordered grid of buttons.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Button:
    """A single inline button. `data` is returned verbatim when pressed."""
    label: str
    data: str


@dataclass(frozen=True)
class KeyboardLayout:
    """Rows of buttons, top to bottom, each row left to right."""
    rows: tuple[tuple[Button, ...], ...]

    def buttons(self) -> list[Button]:
        """Returns every button in row-major order."""
        return [button for row in self.rows for button in row]
