"""Error types for langchain-mcp-tools."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error source categories."""

    INITIALIZATION = "INITIALIZATION"
    CONFIG = "CONFIG"
    SYSTEM = "SYSTEM"


@dataclass(eq=False)
class McpToolsError(Exception):
    """Structured error with context. Base exception for all package errors."""

    message: str  # Human-readable summary
    code: str = "MCP_TOOLS_ERROR"
    category: ErrorCategory = ErrorCategory.SYSTEM
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for reporting.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(eq=False)
class McpInitializationError(McpToolsError):
    """An MCP server could not be brought up.

    Carries exactly one failing server and the raw underlying cause.
    """

    server_name: str = ""
    details: Any = None
    code: str = "MCP_INITIALIZATION_FAILED"
    category: ErrorCategory = ErrorCategory.INITIALIZATION

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["server_name"] = self.server_name
        data["details"] = str(self.details) if self.details is not None else None
        return data


@dataclass(eq=False)
class McpConfigError(McpToolsError):
    """Server configuration could not be loaded or is malformed."""

    detail: str | None = None
    code: str = "CONFIG_INVALID"
    category: ErrorCategory = ErrorCategory.CONFIG

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["detail"] = self.detail
        return data
