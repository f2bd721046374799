"""
Pytest configuration and shared fixtures for langchain-mcp-tools tests.
"""

import io
import sys
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src and project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from langchain_mcp_tools.logging.logger import LogConfig, McpToolsLogger  # noqa: E402
from langchain_mcp_tools.types import LogLevel  # noqa: E402
from tests.mocks import FakeBackend  # noqa: E402

# =============================================================================
# MCP Fixtures
# =============================================================================


@pytest.fixture
def fake_backend() -> Generator[FakeBackend, None, None]:
    """Patch the FastMCP client and stdio transport with in-process fakes."""
    backend = FakeBackend()
    with (
        patch(
            "langchain_mcp_tools.mcp.connection.StdioTransport",
            side_effect=backend.make_transport,
        ),
        patch("langchain_mcp_tools.mcp.connection.Client", side_effect=backend.make_client),
    ):
        yield backend


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def log_output() -> io.StringIO:
    """Buffer that receives logger output."""
    return io.StringIO()


@pytest.fixture
def logger(log_output: io.StringIO) -> McpToolsLogger:
    """Logger writing every level to log_output."""
    return McpToolsLogger(LogConfig(level=LogLevel.TRACE, output=log_output))


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
