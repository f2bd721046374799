"""Leveled colored logging for MCP server bring-up and tool calls."""

from .colors import (
    CYAN,
    GRAY,
    RED,
    RED_BACKGROUND,
    RESET,
    YELLOW,
)
from .logger import (
    LogConfig,
    McpToolsLogger,
    format_value,
)

__all__ = [
    # Logger
    "McpToolsLogger",
    "LogConfig",
    "format_value",
    # Colors
    "RESET",
    "GRAY",
    "YELLOW",
    "RED",
    "RED_BACKGROUND",
    "CYAN",
]
