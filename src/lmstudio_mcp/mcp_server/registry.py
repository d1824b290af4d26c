"""Render tool definitions as MCP tool declarations."""

from typing import Any, Dict, List

from mcp import types

from ..core.tools import ToolRegistry

EMPTY_INPUT_SCHEMA: Dict[str, Any] = {"type": "object", "properties": {}, "required": []}


class MCPToolRegistry(ToolRegistry):
    """
    A specialized ToolRegistry for the Model Context Protocol.

    This class extends the base ToolRegistry to render the catalog as the
    ``mcp.types.Tool`` objects returned from ``tools/list``.
    """

    @property
    def tool_object(self) -> List[types.Tool]:
        """
        Generates the MCP tool declarations for every registered tool.

        Returns:
            A list of ``types.Tool`` in registration order. Tools without parameters
            get an empty object schema, since MCP requires ``inputSchema``.
        """
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.parameters or dict(EMPTY_INPUT_SCHEMA),
            )
            for tool in self.tools.values()
        ]
