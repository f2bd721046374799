"""MCP Fleet Manager - brings up all configured MCP servers as one tool set."""

import asyncio
import os
from typing import Any

from langchain_core.tools import BaseTool

from langchain_mcp_tools.config import McpServersConfig
from langchain_mcp_tools.errors import McpInitializationError
from langchain_mcp_tools.logging.logger import LogConfig, McpToolsLogger
from langchain_mcp_tools.types import LogLevel

from .connection import McpServerConnector
from .types import CleanupFn, McpServerTools


class McpFleetManager:
    """Manages the MCP server connections of one fleet.

    Starts every configured server concurrently, aggregates their tools,
    and tears them all down together.
    """

    def __init__(
        self,
        configs: McpServersConfig,
        logger: McpToolsLogger | None = None,
        inherited_path: str | None = None,
    ):
        """Initialize MCP fleet manager.

        Args:
            configs: Server name to server configuration
            logger: Optional logger
            inherited_path: PATH handed to servers whose config sets none;
                            defaults to this process's PATH
        """
        self._configs = dict(configs)
        self._logger = logger
        if inherited_path is None:
            inherited_path = os.environ.get("PATH", "")
        self._inherited_path = inherited_path
        self._cleanups: dict[str, CleanupFn] = {}

    def _log(self, level: LogLevel, message: str, *values: Any) -> None:
        """Log message if logger available."""
        if self._logger:
            self._logger._log(level, "mcp.manager", message, *values)

    async def initialize(self) -> McpServerTools:
        """Connect to all configured servers and collect their tools.

        Connects in parallel and waits for every server to settle. If any
        server fails, the servers that did connect are closed again and
        the first failure in configuration order is raised. A cancelled
        bring-up (e.g. an outer timeout) closes every server before the
        cancellation propagates.

        Returns:
            McpServerTools with all tools (server order, then tool order)
            and the fleet cleanup operation

        Raises:
            McpInitializationError: If any server fails to initialize
        """
        connectors = {
            name: McpServerConnector(
                name=name,
                config=config,
                logger=self._logger,
                inherited_path=self._inherited_path,
            )
            for name, config in self._configs.items()
        }

        try:
            results = await asyncio.gather(
                *(conn.initialize() for conn in connectors.values()),
                return_exceptions=True,
            )
        except asyncio.CancelledError:
            # Connectors that finished before the cancellation are still open
            self._log(LogLevel.WARN, "MCP servers initialization cancelled, closing servers")
            await asyncio.gather(
                *(conn.close() for conn in connectors.values()),
                return_exceptions=True,
            )
            raise

        all_tools: list[BaseTool] = []
        failures: list[BaseException] = []
        for name, result in zip(connectors.keys(), results, strict=True):
            if isinstance(result, BaseException):
                cause = result.details if isinstance(result, McpInitializationError) else result
                self._log(LogLevel.ERROR, f'MCP server "{name}": failed to initialize: {cause}')
                failures.append(result)
            else:
                all_tools.extend(result.tools)
                self._cleanups[name] = result.cleanup

        if failures:
            # Release the servers that did come up before reporting
            await self.cleanup()
            raise failures[0]

        self._log(
            LogLevel.INFO,
            f"MCP servers initialized: {len(all_tools)} tool(s) available in total",
        )
        for tool in all_tools:
            self._log(LogLevel.DEBUG, f"- {tool.name}")

        return McpServerTools(tools=all_tools, cleanup=self.cleanup)

    async def cleanup(self) -> None:
        """Close all connected servers.

        Closes in parallel. Failures are logged per server and never raised.
        """
        cleanups, self._cleanups = self._cleanups, {}
        if not cleanups:
            return

        results = await asyncio.gather(
            *(cleanup() for cleanup in cleanups.values()),
            return_exceptions=True,
        )

        for name, result in zip(cleanups.keys(), results, strict=True):
            if isinstance(result, BaseException):
                self._log(LogLevel.ERROR, f'MCP server "{name}": failed to close: {result}')


async def convert_mcp_to_langchain_tools(
    configs: McpServersConfig,
    log_level: LogLevel | str = LogLevel.INFO,
    logger: McpToolsLogger | None = None,
) -> McpServerTools:
    """Initialize MCP servers and convert their tools into LangChain tools.

    All servers are started concurrently and their tools aggregated.

    Args:
        configs: Server name to configuration, e.g.
            {"filesystem": {"command": "npx",
                            "args": ["-y", "@modelcontextprotocol/server-filesystem", "."]},
             "fetch": {"command": "uvx", "args": ["mcp-server-fetch"]}}
        log_level: Minimum level for the default logger
        logger: Logger to use instead of the default one

    Returns:
        (tools, cleanup): LangChain tools ready for an agent, and an async
        function that terminates all server connections

    Raises:
        McpInitializationError: If any server fails to initialize
    """
    if logger is None:
        logger = McpToolsLogger(LogConfig(level=log_level))
    manager = McpFleetManager(configs, logger=logger)
    return await manager.initialize()
