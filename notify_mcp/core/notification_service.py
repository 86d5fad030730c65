"""
Telegram Notify MCP — send_notification tool.

Validates the arguments, formats the display text, makes exactly one
delivery attempt through the NotificationPort, and translates the outcome
into a ToolResponse. No retries: every failure is returned immediately.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from notify_mcp.core.notification import (
    InvalidArgumentsError,
    NotificationOutcome,
    format_notification,
    parse_notification_request,
)
from notify_mcp.core.responses import ToolResponse
from notify_mcp.ports.notification_port import FailureCategory, NotificationError
from notify_mcp.tools import register_tool

if TYPE_CHECKING:
    from notify_mcp.ports.notification_port import NotificationPort

logger = logging.getLogger(__name__)

_UNKNOWN_ERROR = "Unknown error occurred while sending notification."

SEND_NOTIFICATION_SCHEMA = {
    "type": "object",
    "properties": {
        "message": {
            "type": "string",
            "description": "The message to send to the user.",
            "examples": [
                "Here's how to create a storage account:\n\n"
                "`az storage account create --name [storage-name] --resource-group [rg-name]`",
                "Would you like me to help you set up Azure DevOps integration?",
            ],
        },
        "project": {
            "type": "string",
            "description": "The name of the project the LLM is working on",
            "examples": ["azure-cli", "devops-setup", "terraform-config"],
        },
        "urgency": {
            "type": "string",
            "enum": ["low", "medium", "high"],
            "description": (
                "The urgency of the notification. Affects message formatting:\n"
                "- high: Prefixes with 🚨 URGENT\n"
                "- medium: Prefixes with ⚠️\n"
                "- low: No prefix"
            ),
            "default": "medium",
        },
        "format": {
            "type": "string",
            "enum": ["plain", "markdownv2"],
            "description": (
                "plain sends the text as-is. markdownv2 escapes every MarkdownV2 "
                "reserved character and sends with parse_mode=MarkdownV2."
            ),
            "default": "plain",
        },
    },
    "required": ["message", "project"],
}


async def deliver(text: str, parse_mode: str | None, notifier: NotificationPort) -> NotificationOutcome:
    """Make one delivery attempt and capture the result as an outcome."""
    try:
        message_id = await notifier.send_message(text, parse_mode=parse_mode)
    except NotificationError as exc:
        return NotificationOutcome(error=exc.message, category=exc.category)
    except Exception as exc:
        logger.exception("Unexpected error sending Telegram notification")
        return NotificationOutcome(error=str(exc) or _UNKNOWN_ERROR, category=FailureCategory.UNKNOWN)
    return NotificationOutcome(message_id=message_id)


@register_tool(
    name="send_notification",
    description=(
        "Send a text message notification to the user via Telegram. Set format to "
        "markdownv2 to send the text with Telegram MarkdownV2 escaping. This tool "
        "sends the notification and returns the message_id. It does NOT wait for a response."
    ),
    input_schema=SEND_NOTIFICATION_SCHEMA,
)
async def send_notification(arguments: Any, notifier: NotificationPort) -> ToolResponse:
    try:
        request = parse_notification_request(arguments)
    except InvalidArgumentsError as exc:
        logger.info("Rejected send_notification arguments: %s", exc)
        return ToolResponse.error(str(exc))

    text = format_notification(request)
    outcome = await deliver(text, request.parse_mode, notifier)

    if not outcome.ok:
        response = ToolResponse.error(
            outcome.error or _UNKNOWN_ERROR,
            metadata={"error_category": outcome.category.value},
        )
        logger.warning(
            "send_notification failed for project %s (%s): %s",
            request.project, outcome.category.value, response.text,
        )
        return response

    return ToolResponse.success(
        f"Notification sent successfully. Message ID: {outcome.message_id}",
        metadata={"telegram_message_id": outcome.message_id},
    )
