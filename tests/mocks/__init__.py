"""Test mocks for langchain-mcp-tools.

Provides fake implementations for testing:
- FakeBackend: In-process MCP servers behind fake FastMCP client/transport
"""

from .fake_mcp import FakeBackend, FakeClient, FakeTransport, make_tool, text_result

__all__ = ["FakeBackend", "FakeClient", "FakeTransport", "make_tool", "text_result"]
