"""
Telegram Notify MCP — stdio server.

Exposes the registered tools over the MCP stdio transport. stdout carries
the protocol stream only; all diagnostics go to stderr through logging.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING, Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from notify_mcp.adapters.telegram_notifier import TelegramNotifier
from notify_mcp.config import load_settings
from notify_mcp.server.dispatcher import dispatch
from notify_mcp.tools import get_registered_tools

if TYPE_CHECKING:
    from notify_mcp.core.responses import ToolResponse
    from notify_mcp.ports.notification_port import NotificationPort

logger = logging.getLogger(__name__)

SERVER_NAME = "telegram-notify-mcp"
SERVER_VERSION = "1.3.1"


def to_call_tool_result(response: ToolResponse) -> types.CallToolResult:
    """Render a ToolResponse as an MCP CallToolResult."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text) for text in response.content],
        structuredContent=response.metadata,
        isError=response.is_error,
    )


async def list_tools() -> list[types.Tool]:
    return [
        types.Tool(
            name=tool["name"],
            description=tool["description"],
            inputSchema=tool["inputSchema"],
        )
        for tool in get_registered_tools()
    ]


def build_server(notifier: NotificationPort) -> Server:
    """Create the MCP server with tools/list and tools/call wired to `notifier`."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        response = await dispatch(name, arguments, notifier)
        return to_call_tool_result(response)

    server.list_tools()(list_tools)
    # Arguments are validated by the handlers themselves, in a fixed order.
    server.call_tool(validate_input=False)(call_tool)
    return server


async def serve(notifier: NotificationPort) -> None:
    """Serve MCP requests on stdin/stdout until the client disconnects."""
    server = build_server(notifier)
    async with stdio_server() as (read_stream, write_stream):
        logger.info(
            "Telegram MCP server running on stdio. Polling for responses is DISABLED."
        )
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Entry point: load settings, configure logging, and serve on stdio."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.info("Starting %s %s...", SERVER_NAME, SERVER_VERSION)
    notifier = TelegramNotifier.from_settings(settings)
    try:
        asyncio.run(serve(notifier))
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
