"""Types shared by the MCP server connector and fleet manager."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from langchain_core.tools import BaseTool

# Zero-argument async close operation
CleanupFn = Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class ToolDescriptor:
    """MCP tool schema.

    Represents a tool available from an MCP server, as declared by it.
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mcp(cls, tool: Any) -> "ToolDescriptor":
        """Build from an ``mcp.types.Tool`` or a FastMCP tool.

        FastMCP tools expose ``input_schema`` and deprecate the camel-case
        ``inputSchema``, which is read only when the former is missing.
        """
        input_schema = getattr(tool, "input_schema", None)
        if input_schema is None:
            input_schema = getattr(tool, "inputSchema", None)
        return cls(
            name=tool.name,
            description=getattr(tool, "description", None) or "",
            input_schema=dict(input_schema) if input_schema else {},
        )


class McpServerTools(NamedTuple):
    """LangChain tools plus the close operation that releases their servers."""

    tools: list[BaseTool]
    cleanup: CleanupFn
