import pytest

from models.faults import GenericFault, TransportApiFault


class FakeTransport:
    """Records every outbound call. Configured faults are raised per method."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.failures: dict[str, Exception] = {}

    async def send_text(self, chat_id, text, keyboard=None):
        self.calls.append(("send_text", chat_id, text, keyboard))
        if "send_text" in self.failures:
            raise self.failures["send_text"]

    async def acknowledge_callback(self, callback_id, text):
        self.calls.append(("acknowledge_callback", callback_id, text))
        if "acknowledge_callback" in self.failures:
            raise self.failures["acknowledge_callback"]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def api_fault() -> TransportApiFault:
    return TransportApiFault(429, "Too Many Requests")


@pytest.fixture
def network_fault() -> GenericFault:
    return GenericFault(ConnectionError("connection reset by peer"))
