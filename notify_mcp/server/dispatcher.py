"""
Telegram Notify MCP — Request dispatcher.

Routes a tool name to its registered handler and passes the handler's
response through unchanged. Unknown names get an error response; nothing
here raises to the transport.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

# Imported for their @register_tool side effect.
import notify_mcp.core.notification_service  # noqa: F401
import notify_mcp.core.response_check  # noqa: F401
from notify_mcp.core.responses import ToolResponse
from notify_mcp.tools import get_handler

if TYPE_CHECKING:
    from notify_mcp.ports.notification_port import NotificationPort

logger = logging.getLogger(__name__)


async def dispatch(name: str, arguments: Any, notifier: NotificationPort) -> ToolResponse:
    """Run the tool called `name` with `arguments` and return its response."""
    handler = get_handler(name)
    if handler is None:
        logger.error("Unknown tool called: %s", name)
        return ToolResponse.error(f"Error: Unknown tool name '{name}'.")
    return await handler(arguments, notifier)
