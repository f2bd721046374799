"""MCP server configuration - models and loading."""

from .loader import (
    expand_env_refs,
    load_mcp_servers_config,
    parse_mcp_servers_config,
)
from .models import (
    McpServerConfig,
    McpServersConfig,
    coerce_server_config,
)

__all__ = [
    # Config models
    "McpServerConfig",
    "McpServersConfig",
    "coerce_server_config",
    # Loader
    "load_mcp_servers_config",
    "parse_mcp_servers_config",
    # Utilities
    "expand_env_refs",
]
