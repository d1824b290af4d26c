"""Serve the LM Studio model tools over the Model Context Protocol."""

from .registry import MCPToolRegistry
from .server import build_registry, create_server, main, serve, to_call_tool_result

__all__ = ["MCPToolRegistry", "build_registry", "create_server", "main", "serve", "to_call_tool_result"]
