"""Pytest configuration and fixtures for Selector Builder tests."""

import pytest
import tempfile
import os
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

from fastmcp import Client

from selector_builder.config import SelectorBuilderConfig, BuilderConfig, LoggingConfig
from selector_builder.selectors import SelectorBuilder
from selector_builder.server import SelectorBuilderServer


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def test_config() -> SelectorBuilderConfig:
    """Test configuration."""
    return SelectorBuilderConfig(
        builder=BuilderConfig(strict_combinators=False),
        logging=LoggingConfig(level="CRITICAL", file=None),
    )


@pytest.fixture
def strict_config() -> SelectorBuilderConfig:
    """Configuration with combinator validation enabled."""
    return SelectorBuilderConfig(builder=BuilderConfig(strict_combinators=True))


@pytest.fixture
def selector_builder() -> SelectorBuilder:
    """Builder instance for testing."""
    return SelectorBuilder()


@pytest.fixture
def nested_tree() -> dict:
    """Declarative form of a three-level combined selector."""
    return {
        "left": {
            "fragments": [
                {"kind": "element", "value": "div"},
                {"kind": "id", "value": "main"},
                {"kind": "class", "value": "container"},
                {"kind": "class", "value": "draggable"},
            ]
        },
        "combinator": "+",
        "right": {
            "left": {
                "fragments": [
                    {"kind": "element", "value": "table"},
                    {"kind": "id", "value": "data"},
                ]
            },
            "combinator": "~",
            "right": {
                "left": {
                    "fragments": [
                        {"kind": "element", "value": "tr"},
                        {"kind": "pseudo_class", "value": "nth-of-type(even)"},
                    ]
                },
                "combinator": " ",
                "right": {
                    "fragments": [
                        {"kind": "element", "value": "td"},
                        {"kind": "pseudo_class", "value": "nth-of-type(even)"},
                    ]
                },
            },
        },
    }


# FastMCP Server fixtures
@pytest.fixture
def mcp_server(test_config: SelectorBuilderConfig) -> SelectorBuilderServer:
    """Create a SelectorBuilderServer instance for testing."""
    return SelectorBuilderServer(test_config)


@pytest.fixture
def mcp_client(mcp_server: SelectorBuilderServer) -> Client:
    """Create a FastMCP Client connected to the test server."""
    return Client(mcp_server.mcp)


@pytest.fixture
def registered_tools():
    """Capture tool functions registered through ``mcp.tool()``."""
    tools = {}

    def tool_decorator():
        def decorator(func):
            tools[func.__name__] = func
            return func

        return decorator

    mock_mcp = MagicMock()
    mock_mcp.tool = tool_decorator
    return mock_mcp, tools


# Environment setup
@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ["LOG_LEVEL"] = "CRITICAL"

    yield

    os.environ.pop("LOG_LEVEL", None)
