"""MCP servers configuration loader."""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from langchain_mcp_tools.errors import McpConfigError

from .models import McpServerConfig

# Top-level keys that may hold the server mapping
SERVERS_KEYS = ("mcpServers", "mcp_servers")

# ${NAME}, ${NAME:-fallback} or ${NAME:?message}
_ENV_REF = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<mode>:[-?])(?P<arg>[^}]*))?\}")


def expand_env_refs(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Substitute environment references in a config string.

    A ``:-`` reference falls back to its text when the variable is unset;
    plain and ``:?`` references require it, the latter with its own message.

    Args:
        value: Config string
        environ: Variables to read (defaults to os.environ)

    Returns:
        The string with every reference substituted

    Raises:
        McpConfigError: If a required variable is unset
    """
    source = os.environ if environ is None else environ

    def substitute(ref: re.Match[str]) -> str:
        name, mode, arg = ref.group("name", "mode", "arg")
        if name in source:
            return source[name]
        if mode == ":-":
            return arg
        if mode == ":?" and arg:
            detail = arg
        else:
            detail = f"Required environment variable {name} not set"
        raise McpConfigError(message="Invalid MCP servers configuration", detail=detail)

    return _ENV_REF.sub(substitute, value)


def _expand_tree(node: Any, environ: Mapping[str, str] | None) -> Any:
    if isinstance(node, str):
        return expand_env_refs(node, environ)
    if isinstance(node, list):
        return [_expand_tree(item, environ) for item in node]
    if isinstance(node, dict):
        return {key: _expand_tree(item, environ) for key, item in node.items()}
    return node


def parse_mcp_servers_config(
    data: Any, environ: Mapping[str, str] | None = None
) -> dict[str, McpServerConfig]:
    """Build server configs from already-parsed data.

    Args:
        data: Parsed document; the servers live under "mcpServers",
              "mcp_servers", or are the document itself
        environ: Variables for ${...} references (defaults to os.environ)

    Returns:
        Server name to McpServerConfig, in document order

    Raises:
        McpConfigError: If the document or any entry is malformed
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise McpConfigError(
            message="Invalid MCP servers configuration",
            detail=f"Expected a mapping at top level, got {type(data).__name__}",
        )

    servers = data
    for key in SERVERS_KEYS:
        if key in data:
            servers = data[key] or {}
            break

    if not isinstance(servers, dict):
        raise McpConfigError(
            message="Invalid MCP servers configuration",
            detail="Server definitions must be a mapping of name to config",
        )

    configs: dict[str, McpServerConfig] = {}
    for name, entry in servers.items():
        try:
            configs[str(name)] = McpServerConfig.from_dict(_expand_tree(entry, environ))
        except McpConfigError as e:
            raise McpConfigError(
                message=f"Invalid configuration for MCP server '{name}'",
                detail=e.detail,
            ) from e
    return configs


def load_mcp_servers_config(
    path: str | Path, environ: Mapping[str, str] | None = None
) -> dict[str, McpServerConfig]:
    """Load server configs from a YAML or JSON file.

    Args:
        path: Path to the config file
        environ: Variables for ${...} references (defaults to os.environ)

    Returns:
        Server name to McpServerConfig, in file order

    Raises:
        McpConfigError: If the file is missing or invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise McpConfigError(
            message="MCP servers configuration not found",
            detail=f"Configuration file not found: {config_path}",
        )

    # JSON is a subset of YAML, so one parser covers both
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise McpConfigError(
            message="Invalid MCP servers configuration",
            detail=f"Invalid YAML in config file: {e}",
        ) from e

    return parse_mcp_servers_config(data, environ)
