"""MCP server connections exposed as LangChain tools."""

from .connection import (
    McpServerConnector,
    McpStructuredTool,
    build_server_env,
    serialize_content,
)
from .manager import McpFleetManager, convert_mcp_to_langchain_tools
from .types import CleanupFn, McpServerTools, ToolDescriptor

__all__ = [
    # Connector
    "McpServerConnector",
    "McpStructuredTool",
    "build_server_env",
    "serialize_content",
    # Manager
    "McpFleetManager",
    "convert_mcp_to_langchain_tools",
    # Types
    "ToolDescriptor",
    "McpServerTools",
    "CleanupFn",
]
