"""
Telegram Notify MCP — Notification request model and formatting.

Turns the untyped tool arguments into a NotificationRequest and renders the
display text that is sent to Telegram. Unknown urgency and format values
fall back to the defaults instead of failing validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel
from telegram.constants import ParseMode
from telegram.helpers import escape_markdown

from notify_mcp.ports.notification_port import FailureCategory


class InvalidArgumentsError(ValueError):
    """Raised when tool arguments fail validation, before any outbound call."""


class Urgency(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MessageFormat(Enum):
    PLAIN = "plain"
    MARKDOWN_V2 = "markdownv2"


_URGENCY_PREFIXES = {
    Urgency.HIGH: "🚨 URGENT: ",
    Urgency.MEDIUM: "⚠️ ",
    Urgency.LOW: "",
}


class NotificationRequest(BaseModel):
    """Validated send_notification arguments.

    JSON example:
    {
        "message": "Should I run the migration now?",
        "project": "billing-api",
        "urgency": "high",
        "format": "plain"
    }
    """
    message: str
    project: str
    urgency: Urgency = Urgency.MEDIUM
    format: MessageFormat = MessageFormat.PLAIN

    @property
    def parse_mode(self) -> str | None:
        """Telegram parse_mode for this request, None for plain text."""
        if self.format is MessageFormat.MARKDOWN_V2:
            return ParseMode.MARKDOWN_V2.value
        return None


@dataclass
class NotificationOutcome:
    """Result of one delivery attempt: a message id or a categorized failure."""

    message_id: int | None = None
    error: str | None = None
    category: FailureCategory | None = None

    @property
    def ok(self) -> bool:
        return self.message_id is not None


def _required_text(arguments: Mapping[str, Any], key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentsError(
            f"Invalid or missing '{key}' parameter. Must be a non-empty string."
        )
    return value.strip()


def _choice(value: Any, enum_cls: type[Enum], default: Enum) -> Any:
    """Lower-case `value` and map it onto `enum_cls`, falling back to `default`."""
    if not value:
        return default
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        return default


def parse_notification_request(arguments: Any) -> NotificationRequest:
    """Validate raw tool arguments in order: bag, message, project, then enums.

    Raises:
        InvalidArgumentsError: with the first failing check's diagnostic.
    """
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentsError("Invalid arguments format. Expected an object.")

    message = _required_text(arguments, "message")
    project = _required_text(arguments, "project")

    return NotificationRequest(
        message=message,
        project=project,
        urgency=_choice(arguments.get("urgency"), Urgency, Urgency.MEDIUM),
        format=_choice(arguments.get("format"), MessageFormat, MessageFormat.PLAIN),
    )


def escape_markdown_v2(text: str) -> str:
    """Escape every MarkdownV2 reserved character in `text` with a backslash."""
    return escape_markdown(text, version=2)


def format_notification(request: NotificationRequest) -> str:
    """Render the text sent to Telegram, escaped when MarkdownV2 is selected."""
    prefix = _URGENCY_PREFIXES[request.urgency]
    text = f"{prefix}{request.project}: \n\n{request.message}"
    if request.format is MessageFormat.MARKDOWN_V2:
        return escape_markdown_v2(text)
    return text
