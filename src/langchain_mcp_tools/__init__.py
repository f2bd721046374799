"""LangChain MCP Tools - MCP servers as LangChain tools.

Starts MCP servers as stdio subprocesses, discovers their tools and wraps
each one as a LangChain StructuredTool:

    tools, cleanup = await convert_mcp_to_langchain_tools({
        "fetch": {"command": "uvx", "args": ["mcp-server-fetch"]},
    })
    try:
        ...  # hand `tools` to an agent
    finally:
        await cleanup()
"""

from langchain_mcp_tools.config import McpServerConfig, McpServersConfig, load_mcp_servers_config
from langchain_mcp_tools.errors import McpConfigError, McpInitializationError, McpToolsError
from langchain_mcp_tools.logging import LogConfig, McpToolsLogger
from langchain_mcp_tools.mcp import (
    McpFleetManager,
    McpServerConnector,
    McpServerTools,
    convert_mcp_to_langchain_tools,
)
from langchain_mcp_tools.schema import compile_input_schema
from langchain_mcp_tools.types import ConnectionState, LogFormat, LogLevel

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "convert_mcp_to_langchain_tools",
    "McpFleetManager",
    "McpServerConnector",
    "McpServerTools",
    "McpServerConfig",
    "McpServersConfig",
    "load_mcp_servers_config",
    "McpToolsError",
    "McpInitializationError",
    "McpConfigError",
    "McpToolsLogger",
    "LogConfig",
    "LogLevel",
    "LogFormat",
    "ConnectionState",
    "compile_input_schema",
]
