"""Tests for notify_mcp.server.mcp_server — MCP wiring and result rendering."""

import pytest
from unittest.mock import patch

import mcp.types as types
from mcp.server.lowlevel import Server

from notify_mcp.core.responses import ToolResponse
from notify_mcp.server.mcp_server import SERVER_NAME, build_server, list_tools, main, to_call_tool_result


class TestToCallToolResult:
    def test_success_with_metadata(self):
        result = to_call_tool_result(
            ToolResponse.success("Notification sent successfully. Message ID: 42", {"telegram_message_id": 42})
        )
        assert result.isError is False
        assert result.content[0].type == "text"
        assert result.content[0].text.endswith("42")
        assert result.structuredContent == {"telegram_message_id": 42}

    def test_error(self):
        result = to_call_tool_result(ToolResponse.error("Error: Unknown tool name 'foo'."))
        assert result.isError is True
        assert result.content[0].text == "Error: Unknown tool name 'foo'."
        assert result.structuredContent is None


class TestListTools:
    @pytest.mark.asyncio
    async def test_exposes_both_tools(self):
        tools = await list_tools()
        names = {tool.name for tool in tools}
        assert names == {"send_notification", "check_notification_response"}

    @pytest.mark.asyncio
    async def test_send_notification_schema(self):
        tools = {tool.name: tool for tool in await list_tools()}
        schema = tools["send_notification"].inputSchema
        assert schema["required"] == ["message", "project"]
        assert schema["properties"]["urgency"]["enum"] == ["low", "medium", "high"]
        assert schema["properties"]["format"]["default"] == "plain"


class TestBuildServer:
    def test_returns_named_server(self, notifier):
        server = build_server(notifier)
        assert isinstance(server, Server)
        assert server.name == SERVER_NAME


async def _call_through_server(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


class TestCallToolThroughServer:
    @pytest.mark.asyncio
    async def test_success_returns_structured_message_id(self, notifier):
        server = build_server(notifier)

        result = await _call_through_server(server, "send_notification", {"message": "Hello", "project": "demo"})

        assert result.isError is False
        assert result.structuredContent == {"telegram_message_id": 42}
        notifier.send_message.assert_awaited_once_with("⚠️ demo: \n\nHello", parse_mode=None)

    @pytest.mark.asyncio
    async def test_unknown_urgency_sent_like_medium(self, notifier):
        server = build_server(notifier)

        result = await _call_through_server(
            server, "send_notification", {"message": "Hello", "project": "demo", "urgency": "CRITICAL"}
        )

        assert result.isError is False
        notifier.send_message.assert_awaited_once_with("⚠️ demo: \n\nHello", parse_mode=None)

    @pytest.mark.asyncio
    async def test_unknown_format_sent_like_plain(self, notifier):
        server = build_server(notifier)

        result = await _call_through_server(
            server, "send_notification", {"message": "Hi.", "project": "demo", "format": "html"}
        )

        assert result.isError is False
        notifier.send_message.assert_awaited_once_with("⚠️ demo: \n\nHi.", parse_mode=None)

    @pytest.mark.asyncio
    async def test_non_string_message_gets_handler_diagnostic(self, notifier):
        server = build_server(notifier)

        result = await _call_through_server(
            server, "send_notification", {"message": 5, "project": "demo", "urgency": "CRITICAL"}
        )

        assert result.isError is True
        assert result.content[0].text == "Invalid or missing 'message' parameter. Must be a non-empty string."
        notifier.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_tool(self, notifier):
        server = build_server(notifier)

        result = await _call_through_server(server, "foo", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Unknown tool name 'foo'."


class TestMain:
    def test_transport_failure_exits_nonzero(self):
        with patch("notify_mcp.server.mcp_server.serve", side_effect=RuntimeError("stdio closed")):
            with patch("notify_mcp.server.mcp_server.logging.basicConfig"):
                with pytest.raises(SystemExit) as exc_info:
                    main()
        assert exc_info.value.code == 1
