"""Shared enumerations for langchain-mcp-tools."""

from enum import Enum


class LogLevel(str, Enum):
    """Log verbosity level, in ascending severity."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Parse a level from an enum member or a case-insensitive name.

        Args:
            value: LogLevel member or level name ("info", "WARN", ...)

        Returns:
            Matching LogLevel

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, LogLevel):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls(name)
        except ValueError:
            msg = f"Unknown log level: {value!r}"
            raise ValueError(msg) from None


class LogFormat(str, Enum):
    """Log output format."""

    COLORED = "colored"
    JSON = "json"


class ConnectionState(str, Enum):
    """Lifecycle state of a single MCP server connector."""

    UNCONNECTED = "unconnected"
    CONNECTED = "connected"
    CLOSED = "closed"
