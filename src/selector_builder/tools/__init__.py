"""MCP tool implementations for Selector Builder."""

from .builder_tools import register_builder_tools

__all__ = ["register_builder_tools"]
