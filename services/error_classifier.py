"""
services/error_classifier.py
-----------------------------
Formats and logs faults raised while receiving or answering updates.

Every fault is terminal for its own event only: it is logged and dropped,
and the receive loop keeps running.
"""

from models.faults import GenericFault, TransportApiFault
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorClassifier:
    """Turns a fault into one human-readable log line."""

    def describe(self, fault: BaseException) -> str:
        """Render a fault without logging it."""
        if isinstance(fault, TransportApiFault):
            return f"Telegram API Error: [{fault.code}]\n{fault.message}"
        if isinstance(fault, GenericFault):
            return fault.description
        return GenericFault(fault).description

    def classify(self, fault: BaseException) -> str:
        """
        Log a fault and return the logged line. Never raises.

        Args:
            fault: A TransportApiFault, a GenericFault, or any other exception.

        Returns:
            The formatted error text.
        """
        line = self.describe(fault)
        logger.error(f"Error: {line}")
        return line
