"""Error handling - Structured errors with context."""

from .errors import ErrorCategory, McpConfigError, McpInitializationError, McpToolsError

__all__ = [
    "ErrorCategory",
    "McpToolsError",
    "McpInitializationError",
    "McpConfigError",
]
