"""MCP Server Connector - owns one MCP server connection.

Uses the FastMCP client library for the MCP protocol over a stdio
subprocess transport, and wraps every tool the server declares as a
LangChain ``StructuredTool``.
"""

import asyncio
import json
from collections.abc import Mapping
from contextlib import AsyncExitStack
from typing import Any

from fastmcp.client import Client
from fastmcp.client.transports import StdioTransport
from langchain_core.tools import BaseTool, StructuredTool

from langchain_mcp_tools.config import McpServerConfig, coerce_server_config
from langchain_mcp_tools.errors import McpInitializationError
from langchain_mcp_tools.logging.logger import McpToolsLogger
from langchain_mcp_tools.schema import compile_input_schema
from langchain_mcp_tools.types import ConnectionState, LogLevel

from .types import McpServerTools, ToolDescriptor


def build_server_env(env: Mapping[str, str] | None, inherited_path: str) -> dict[str, str]:
    """Effective environment for a server subprocess.

    Some servers fail to locate their own executables without PATH, so
    an unset or empty PATH is filled in from the caller's search path.

    Args:
        env: Environment from the server config, if any
        inherited_path: Search path to use when the config has none

    Returns:
        New environment dict
    """
    effective = dict(env or {})
    if not effective.get("PATH"):
        effective["PATH"] = inherited_path
    return effective


def _to_jsonable(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list | tuple):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


def serialize_content(content: Any) -> str:
    """Serialize tool result content to compact JSON.

    ``[TextContent(type="text", text="ok")]`` becomes
    ``'[{"type":"text","text":"ok"}]'``.
    """
    return json.dumps(_to_jsonable(content), separators=(",", ":"), ensure_ascii=False)


class McpStructuredTool(StructuredTool):
    """StructuredTool that hands its coroutine the arguments in wire form.

    The validated input is dumped by alias in JSON mode, so properties
    that are not Python identifiers keep their schema names and nested
    objects arrive as plain dicts. The coroutine receives them as a
    single ``arguments`` mapping.
    """

    def _to_args_and_kwargs(
        self, tool_input: str | dict[str, Any], tool_call_id: str | None = None
    ) -> tuple[tuple[Any, ...], dict[str, Any]]:
        model = self.args_schema
        if isinstance(tool_input, str):
            # Single string input fills the first declared property
            fields = list(model.model_fields.items())
            tool_input = {(fields[0][1].alias or fields[0][0]): tool_input} if fields else {}

        validated = model.model_validate(tool_input)
        arguments = validated.model_dump(mode="json", by_alias=True, exclude_unset=True)
        for key, value in (validated.model_extra or {}).items():
            arguments.setdefault(key, value)
        return (), {"arguments": arguments}


class McpServerConnector:
    """Single MCP server connection.

    Connects, discovers the server's tools, wraps them as LangChain tools
    and closes the connection. A connector is used for one bring-up only.
    """

    def __init__(
        self,
        name: str,
        config: McpServerConfig | Mapping[str, Any],
        logger: McpToolsLogger | None = None,
        inherited_path: str = "",
    ):
        """Initialize MCP server connector.

        Args:
            name: Server name
            config: Server configuration (dict form is parsed on initialize)
            logger: Optional logger
            inherited_path: PATH value used when the config sets none
        """
        self.name = name
        self.config = config
        self._logger = logger
        self._inherited_path = inherited_path
        self._state = ConnectionState.UNCONNECTED
        self._exit_stack: AsyncExitStack | None = None

    def _log(self, level: LogLevel, message: str, *values: Any) -> None:
        """Log message if logger available."""
        if self._logger:
            self._logger._log(level, f"mcp.{self.name}", message, *values)

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        return self._state

    async def initialize(self) -> McpServerTools:
        """Connect to the server and wrap its tools.

        Returns:
            McpServerTools with one tool per declared server tool, in
            server order, and this connector's close operation

        Raises:
            McpInitializationError: If the config is malformed, the
                subprocess or handshake fails, or tool listing fails
        """
        if self._state != ConnectionState.UNCONNECTED:
            raise McpInitializationError(
                message=f"Failed to initialize MCP server: connector is {self._state.value}",
                server_name=self.name,
            )

        # Closes the client session, then the transport
        exit_stack = AsyncExitStack()

        try:
            config = coerce_server_config(self.config)
            self._log(
                LogLevel.INFO,
                f'MCP server "{self.name}": initializing with:',
                config.to_dict(),
            )

            transport = StdioTransport(
                command=config.command,
                args=list(config.args),
                env=build_server_env(config.env, self._inherited_path),
            )
            exit_stack.push_async_callback(transport.close)

            client = Client(transport)
            await exit_stack.enter_async_context(client)
            self._log(LogLevel.INFO, f'MCP server "{self.name}": connected')

            listed = await client.list_tools()
            tools = [self._wrap_tool(client, ToolDescriptor.from_mcp(t)) for t in listed]

        except asyncio.CancelledError:
            await self._abort(exit_stack)
            raise
        except Exception as e:
            await self._abort(exit_stack)
            raise McpInitializationError(
                message=f"Failed to initialize MCP server: {e}",
                server_name=self.name,
                details=e,
            ) from e

        self._exit_stack = exit_stack
        self._state = ConnectionState.CONNECTED

        self._log(LogLevel.INFO, f'MCP server "{self.name}": {len(tools)} tool(s) available:')
        for tool in tools:
            self._log(LogLevel.INFO, f"- {tool.name}")

        return McpServerTools(tools=tools, cleanup=self.close)

    async def _abort(self, exit_stack: AsyncExitStack) -> None:
        """Release whatever a failed bring-up opened."""
        try:
            await exit_stack.aclose()
        except Exception as cleanup_error:
            # Never replaces the original error
            self._log(
                LogLevel.ERROR,
                f"Failed to cleanup during initialization error: {cleanup_error}",
            )
        self._state = ConnectionState.CLOSED

    async def close(self) -> None:
        """Close the session and its transport.

        Only a connected connector releases anything; later calls are no-ops.
        Close failures propagate to the caller.
        """
        if self._state != ConnectionState.CONNECTED:
            return

        self._state = ConnectionState.CLOSED
        exit_stack, self._exit_stack = self._exit_stack, None
        if exit_stack is not None:
            await exit_stack.aclose()
        self._log(LogLevel.INFO, f'MCP server "{self.name}": session closed')

    def _wrap_tool(self, client: Client, descriptor: ToolDescriptor) -> BaseTool:
        """Create a LangChain tool that proxies calls to the MCP server.

        Args:
            client: Connected FastMCP client
            descriptor: Tool as declared by the server

        Returns:
            Async-only McpStructuredTool
        """
        server_name = self.name
        tool_name = descriptor.name

        async def call_tool(arguments: dict[str, Any] | None = None) -> str:
            arguments = arguments or {}
            self._log(
                LogLevel.INFO,
                f'MCP tool "{server_name}"/"{tool_name}" received input:',
                arguments,
            )

            result = await client.call_tool_mcp(name=tool_name, arguments=arguments)

            content = getattr(result, "content", None)
            serialized = serialize_content(content)
            self._log(
                LogLevel.INFO,
                f'MCP tool "{server_name}"/"{tool_name}" received result '
                f"(length: {len(serialized)})",
            )
            self._log(LogLevel.DEBUG, "result:", content)
            return serialized

        return McpStructuredTool(
            name=tool_name,
            description=descriptor.description,
            args_schema=compile_input_schema(descriptor.input_schema, f"{tool_name}Input"),
            coroutine=call_tool,
        )
