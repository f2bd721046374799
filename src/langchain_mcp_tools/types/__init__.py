"""Shared types for langchain-mcp-tools.

Import from here rather than submodules:
    from langchain_mcp_tools.types import ConnectionState, LogLevel
"""

from .enums import ConnectionState, LogFormat, LogLevel

__all__ = [
    "LogLevel",
    "LogFormat",
    "ConnectionState",
]
