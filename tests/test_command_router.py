import pytest

from models.events import MessageEvent, ReplyReference, SendText
from services.command_router import CommandRouter, command_key
from services.keyboard_service import NUMERIC_KEYPAD, PROMPT_TEXT


def _route(text: str, **kwargs) -> list:
    return CommandRouter().route(MessageEvent(chat_id=100, text=text, **kwargs))


def test_command_key_takes_first_token() -> None:
    assert command_key("/stop now please") == "/stop"
    assert command_key("/uid") == "/uid"
    assert command_key("/keyboard\tx") == "/keyboard"
    assert command_key("  /uid") == ""
    assert command_key("") == ""


@pytest.mark.parametrize(
    "text",
    [
        "hello there",
        "  padded text  ",
        "/UID",
        "/uidx",
        "/start",
        " /stop",
        "",
        "multi\nline\n",
        "ünïcödé ✓",
    ],
)
def test_non_commands_are_echoed_verbatim(text: str) -> None:
    assert _route(text) == [SendText(100, text)]


def test_stop_ignores_trailing_content() -> None:
    assert _route("/stop ignored-rest") == [SendText(100, "Farewell!")]
    assert _route("/stop") == [SendText(100, "Farewell!")]


def test_uid_routes_to_identity() -> None:
    assert _route("/uid", sender_id=7) == [SendText(100, "Your user ID is 7")]
    assert _route("/uid extra", replied_to=ReplyReference(42)) == [
        SendText(100, "The user ID of the person you replied to is 42")
    ]


def test_keyboard_routes_to_keypad_prompt() -> None:
    actions = _route("/keyboard please")

    assert actions == [SendText(100, PROMPT_TEXT, keyboard=NUMERIC_KEYPAD)]
