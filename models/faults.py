"""
models/faults.py
----------------
Fault taxonomy for failures raised by the transport.

Two kinds are distinguished:
    - TransportApiFault: the platform rejected a call (bad chat, rate limit, ...).
    - GenericFault: anything else (network, serialization, programming error).
"""

import traceback
from typing import Optional


class TransportApiFault(Exception):
    """The remote platform rejected an operation with an error code."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class GenericFault(Exception):
    """Any failure that is not a platform rejection."""

    def __init__(self, cause: Optional[BaseException] = None, description: Optional[str] = None):
        super().__init__(description or (repr(cause) if cause else "unknown fault"))
        self.cause = cause
        self._description = description

    @property
    def description(self) -> str:
        """Full diagnostic text: the wrapped exception's traceback when there is one."""
        if self.cause is not None:
            return "".join(
                traceback.format_exception(type(self.cause), self.cause, self.cause.__traceback__)
            ).rstrip()
        return self._description or "unknown fault"
