"""MCP server configuration data models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from langchain_mcp_tools.errors import McpConfigError


@dataclass(frozen=True)
class McpServerConfig:
    """How to launch one MCP server subprocess."""

    command: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] | None = field(default=None)

    def __post_init__(self) -> None:
        """Freeze list arguments and copy the environment."""
        object.__setattr__(self, "args", tuple(self.args))
        if self.env is not None:
            object.__setattr__(self, "env", dict(self.env))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "McpServerConfig":
        """Build a server config from its dict form.

        Args:
            data: Mapping with "command", optional "args" and optional "env"

        Returns:
            McpServerConfig instance

        Raises:
            McpConfigError: If the mapping is malformed
        """
        if not isinstance(data, Mapping):
            raise McpConfigError(
                message="Invalid MCP server configuration",
                detail=f"Expected a mapping, got {type(data).__name__}",
            )

        command = data.get("command")
        if not isinstance(command, str) or not command.strip():
            raise McpConfigError(
                message="Invalid MCP server configuration",
                detail="'command' must be a non-empty string",
            )

        args = data.get("args", [])
        if args is None:
            args = []
        if not isinstance(args, list | tuple) or not all(isinstance(a, str) for a in args):
            raise McpConfigError(
                message="Invalid MCP server configuration",
                detail="'args' must be a list of strings",
            )

        env = data.get("env")
        if env is not None:
            if not isinstance(env, Mapping) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in env.items()
            ):
                raise McpConfigError(
                    message="Invalid MCP server configuration",
                    detail="'env' must be a mapping of strings to strings",
                )

        return cls(command=command, args=tuple(args), env=env)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the dict form (used for logging)."""
        data: dict[str, Any] = {"command": self.command, "args": list(self.args)}
        if self.env is not None:
            data["env"] = dict(self.env)
        return data


# Server name -> config. Plain dict entries are coerced per server.
McpServersConfig = Mapping[str, McpServerConfig | Mapping[str, Any]]


def coerce_server_config(config: McpServerConfig | Mapping[str, Any]) -> McpServerConfig:
    """Return config as McpServerConfig, parsing the dict form if needed."""
    if isinstance(config, McpServerConfig):
        return config
    return McpServerConfig.from_dict(config)
