"""Leveled console logger for MCP server and tool events."""

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TextIO

from langchain_mcp_tools.logging.colors import (
    CYAN,
    GRAY,
    RED,
    RED_BACKGROUND,
    RESET,
    YELLOW,
)
from langchain_mcp_tools.types import LogFormat, LogLevel

_LEVEL_ORDER = {
    LogLevel.TRACE: 0,
    LogLevel.DEBUG: 1,
    LogLevel.INFO: 2,
    LogLevel.WARN: 3,
    LogLevel.ERROR: 4,
    LogLevel.FATAL: 5,
}

_LEVEL_COLORS = {
    LogLevel.TRACE: GRAY,
    LogLevel.DEBUG: GRAY,
    LogLevel.INFO: GRAY,
    LogLevel.WARN: YELLOW,
    LogLevel.ERROR: RED,
    LogLevel.FATAL: RED_BACKGROUND,
}


@dataclass
class LogConfig:
    """Logger configuration."""

    level: LogLevel | str = LogLevel.INFO
    format: LogFormat = LogFormat.COLORED
    output: TextIO = field(default_factory=lambda: sys.stdout)

    def __post_init__(self) -> None:
        """Normalize string levels."""
        self.level = LogLevel.parse(self.level)


def format_value(value: Any) -> str:
    """Render one logged value.

    None becomes "null"; dicts, lists and pydantic models become
    indented JSON; anything else uses str().

    Args:
        value: Value to render

    Returns:
        Rendered string
    """
    if value is None:
        return "null"
    if hasattr(value, "model_dump") or isinstance(value, dict | list | tuple):
        return json.dumps(value, indent=2, default=_json_default, ensure_ascii=False)
    return str(value)


def _json_default(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return str(value)


class McpToolsLogger:
    """Console logger with six ascending levels and a minimum threshold."""

    def __init__(self, config: LogConfig | None = None):
        """Initialize logger with configuration.

        Args:
            config: Logger configuration (defaults to LogConfig())
        """
        self.config = config or LogConfig()

    def configure(self, config: LogConfig) -> None:
        """Update configuration (for hot-reload).

        Args:
            config: New logger configuration
        """
        self.config = config

    def is_enabled(self, level: LogLevel) -> bool:
        """Check if a log level should be logged.

        Args:
            level: Log level to check

        Returns:
            True if should log, False otherwise
        """
        return _LEVEL_ORDER[level] >= _LEVEL_ORDER[LogLevel.parse(self.config.level)]

    def trace(self, component: str, message: str, *values: Any) -> None:
        self._log(LogLevel.TRACE, component, message, *values)

    def debug(self, component: str, message: str, *values: Any) -> None:
        self._log(LogLevel.DEBUG, component, message, *values)

    def info(self, component: str, message: str, *values: Any) -> None:
        self._log(LogLevel.INFO, component, message, *values)

    def warn(self, component: str, message: str, *values: Any) -> None:
        self._log(LogLevel.WARN, component, message, *values)

    def error(self, component: str, message: str, *values: Any) -> None:
        self._log(LogLevel.ERROR, component, message, *values)

    def fatal(self, component: str, message: str, *values: Any) -> None:
        self._log(LogLevel.FATAL, component, message, *values)

    def _log(self, level: LogLevel, component: str, message: str, *values: Any) -> None:
        """Internal logging method.

        Args:
            level: Log level
            component: Component name (e.g. "mcp.manager", "mcp.filesystem")
            message: Log message
            *values: Extra values appended to the message
        """
        if not self.is_enabled(level):
            return

        if self.config.format == LogFormat.JSON:
            self._log_json(level, component, message, values)
        else:
            self._log_colored(level, component, message, values)

    def _log_json(
        self,
        level: LogLevel,
        component: str,
        message: str,
        values: tuple[Any, ...],
    ) -> None:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": level.value,
            "component": component,
            "message": message,
        }
        if values:
            log_entry["values"] = [format_value(v) for v in values]

        print(json.dumps(log_entry, ensure_ascii=False), file=self.config.output)

    def _log_colored(
        self,
        level: LogLevel,
        component: str,
        message: str,
        values: tuple[Any, ...],
    ) -> None:
        color = _LEVEL_COLORS[level]

        # Format: [level] [COMPONENT] message values...
        parts = [
            f"{color}[{level.value.lower()}]{RESET}",
            f"{CYAN}[{component.upper()}]{RESET}",
            message,
        ]
        parts.extend(format_value(v) for v in values)

        print(" ".join(parts), file=self.config.output)
