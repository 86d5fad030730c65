"""Notification port — abstract interface for delivering messages to the user.

The send handler depends on this protocol, never on a specific messaging
provider. Adapters raise NotificationError with a coarse category so the
handler can build a caller-facing diagnostic without knowing the transport.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class FailureCategory(Enum):
    TIMEOUT = "timeout"
    NETWORK = "network"
    REMOTE_REJECTED = "remote-rejected"
    UNKNOWN = "unknown"


class NotificationError(Exception):
    """Raised when a notification provider fails to deliver a message."""

    def __init__(self, category: FailureCategory, message: str) -> None:
        super().__init__(message)
        self.category = category
        self.message = message


class NotificationPort(Protocol):
    """Abstract notification interface used by the tool handlers."""

    async def send_message(self, text: str, parse_mode: str | None = None) -> int:
        """Deliver `text` and return the provider-assigned message id."""
        ...
