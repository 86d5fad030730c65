"""
Telegram Notify MCP — Entry Point.

Single entry point: `python main.py` starts the MCP server on stdio.
"""

from notify_mcp.server.mcp_server import main

if __name__ == "__main__":
    main()
