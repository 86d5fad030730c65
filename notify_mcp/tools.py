"""
@register_tool decorator — annotates a handler with its MCP tool metadata.

The tools/list response is built from _TOOL_REGISTRY, and the dispatcher
routes through the same registry, so the advertised tools never drift from
the actual handlers.

Usage:
    from notify_mcp.tools import register_tool

    @register_tool(
        name="send_notification",
        description="Send a notification to the user.",
        input_schema={
            "type": "object",
            "properties": {"message": {"type": "string"}},
            "required": ["message"],
        },
    )
    async def send_notification(arguments, notifier):
        ...
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from notify_mcp.core.responses import ToolResponse
    from notify_mcp.ports.notification_port import NotificationPort

ToolHandler = Callable[[Any, "NotificationPort"], Awaitable["ToolResponse"]]

_TOOL_REGISTRY: dict[str, dict] = {}


def register_tool(name: str, description: str, input_schema: dict):
    """Decorator that registers a handler as an MCP tool."""

    def decorator(fn: ToolHandler) -> ToolHandler:
        entry = {
            "name": name,
            "description": description,
            "inputSchema": input_schema,
            "_handler": fn,
        }
        _TOOL_REGISTRY[name] = entry
        return fn

    return decorator


def get_handler(name: str) -> ToolHandler | None:
    """Return the handler registered under `name`, or None."""
    entry = _TOOL_REGISTRY.get(name)
    return entry["_handler"] if entry else None


def get_registered_tools() -> list[dict]:
    """Return all tool manifest entries (without the _handler key)."""
    return [{k: v for k, v in tool.items() if k != "_handler"} for tool in _TOOL_REGISTRY.values()]
