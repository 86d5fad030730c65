"""
Telegram Notify MCP — check_notification_response tool (disabled).

Telegram refuses getUpdates while a webhook is active for the bot, so
polling for replies cannot run alongside push delivery. The tool stays in
the tool list with a fixed answer and makes no outbound call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from notify_mcp.core.responses import ToolResponse
from notify_mcp.tools import register_tool

if TYPE_CHECKING:
    from notify_mcp.ports.notification_port import NotificationPort

logger = logging.getLogger(__name__)

POLLING_DISABLED_TEXT = (
    "Polling for responses is disabled because a webhook is active on the Telegram bot. "
    "Please use an alternative method (e.g., a webhook handler) to process user responses."
)


@register_tool(
    name="check_notification_response",
    description=(
        "DISABLED: This tool is disabled because a webhook is active for the Telegram bot, "
        "which prevents the use of polling (getUpdates). An alternative mechanism is needed "
        "to handle responses if webhook is active."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "message_id": {
                "type": "number",
                "description": "The ID of the message to check for responses.",
                "examples": [12345],
            },
            "timeout_seconds": {
                "type": "number",
                "description": "How long to wait for a response (currently ignored).",
                "default": 30,
                "examples": [30, 60, 120],
            },
        },
        "required": ["message_id"],
    },
)
async def check_notification_response(arguments: Any, notifier: NotificationPort) -> ToolResponse:
    message_id = arguments.get("message_id") if isinstance(arguments, Mapping) else None
    logger.warning(
        "check_notification_response called but polling is disabled (webhook active). Message ID: %s",
        message_id,
    )
    return ToolResponse.success(POLLING_DISABLED_TEXT)
