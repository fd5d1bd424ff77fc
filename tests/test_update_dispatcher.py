import pytest

from handlers.update_dispatcher import UpdateDispatcher
from models.events import (
    AcknowledgeCallback,
    CallbackEvent,
    Ignored,
    MessageEvent,
    SendText,
)
from models.faults import TransportApiFault
from services.keyboard_service import NUMERIC_KEYPAD


class RecordingClassifier:
    def __init__(self) -> None:
        self.faults: list[BaseException] = []

    def classify(self, fault: BaseException) -> str:
        self.faults.append(fault)
        return str(fault)


def test_plan_drops_ignored_and_non_text_events(transport) -> None:
    dispatcher = UpdateDispatcher(transport)

    assert dispatcher.plan(Ignored(update_id=9)) == []
    assert dispatcher.plan(MessageEvent(chat_id=1, sender_id=2, text=None)) == []


def test_plan_routes_messages_and_callbacks(transport) -> None:
    dispatcher = UpdateDispatcher(transport)

    assert dispatcher.plan(MessageEvent(chat_id=1, text="hi")) == [SendText(1, "hi")]
    assert dispatcher.plan(CallbackEvent("cb1", 100, "5")) == [
        SendText(100, "You selected: 5"),
        AcknowledgeCallback("cb1", "You pressed 5"),
    ]


@pytest.mark.asyncio
async def test_dispatch_ignored_event_sends_nothing(transport) -> None:
    await UpdateDispatcher(transport).dispatch(Ignored())

    assert transport.calls == []


@pytest.mark.asyncio
async def test_dispatch_keyboard_sends_keypad(transport) -> None:
    await UpdateDispatcher(transport).dispatch(MessageEvent(chat_id=3, text="/keyboard"))

    assert transport.calls == [("send_text", 3, "Please select a number:", NUMERIC_KEYPAD)]


@pytest.mark.asyncio
async def test_dispatch_callback_sends_then_acknowledges(transport) -> None:
    await UpdateDispatcher(transport).dispatch(CallbackEvent("cb1", 100, "5"))

    assert transport.calls == [
        ("send_text", 100, "You selected: 5", None),
        ("acknowledge_callback", "cb1", "You pressed 5"),
    ]


@pytest.mark.asyncio
async def test_acknowledgment_attempted_when_reply_fails(transport) -> None:
    fault = TransportApiFault(403, "Forbidden: bot was blocked by the user")
    transport.failures["send_text"] = fault
    classifier = RecordingClassifier()

    await UpdateDispatcher(transport, classifier=classifier).dispatch(
        CallbackEvent("cb1", 100, "7")
    )

    assert [call[0] for call in transport.calls] == ["send_text", "acknowledge_callback"]
    assert classifier.faults == [fault]


@pytest.mark.asyncio
async def test_dispatch_never_raises_on_transport_faults(transport, api_fault, network_fault) -> None:
    transport.failures["send_text"] = network_fault
    transport.failures["acknowledge_callback"] = api_fault
    classifier = RecordingClassifier()
    dispatcher = UpdateDispatcher(transport, classifier=classifier)

    await dispatcher.dispatch(CallbackEvent("cb1", 100, "1"))
    await dispatcher.dispatch(MessageEvent(chat_id=100, text="next event"))

    assert classifier.faults == [network_fault, api_fault, network_fault]
    assert transport.calls[-1] == ("send_text", 100, "next event", None)

