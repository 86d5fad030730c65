"""
Telegram Notify MCP — Tool response envelope.

Every tool handler returns a ToolResponse; the server shell renders it as an
MCP CallToolResult. Handlers never raise to the transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ToolResponse:
    """Uniform `{content, isError}` envelope with optional structured metadata."""

    content: list[str] = field(default_factory=list)
    is_error: bool = False
    metadata: dict[str, Any] | None = None

    @classmethod
    def success(cls, text: str, metadata: dict[str, Any] | None = None) -> ToolResponse:
        return cls(content=[text], is_error=False, metadata=metadata)

    @classmethod
    def error(cls, text: str, metadata: dict[str, Any] | None = None) -> ToolResponse:
        return cls(content=[text], is_error=True, metadata=metadata)

    @property
    def text(self) -> str:
        """All text blocks joined, for logging and assertions."""
        return "\n".join(self.content)
