"""MCP stdio server exposing the LM Studio model tools."""

import argparse
import asyncio
from typing import Any, Dict, List, Optional, Sequence

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..core.config import ServerConfig
from ..core.logger import get_logger, setup_logging
from ..core.tools import ToolCallRequest, ToolCallResult, ToolDispatcher, ToolRegistry
from ..lmstudio import LMStudioClient, LMStudioModelTools
from .registry import MCPToolRegistry

logger = get_logger(__name__)

SERVER_NAME = "lmstudio-mcp"
SERVER_VERSION = "0.1.0"


def to_call_tool_result(result: ToolCallResult) -> types.CallToolResult:
    """Convert a ToolCallResult into the MCP wire envelope."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


def build_registry(client: LMStudioClient) -> MCPToolRegistry:
    """Create the tool catalog bound to ``client``."""
    registry = MCPToolRegistry()
    LMStudioModelTools(client).register_into(registry)
    return registry


def create_server(registry: ToolRegistry, dispatcher: ToolDispatcher) -> Server:
    """
    Wire a registry and a dispatcher into a low-level MCP server.

    Args:
        registry: Catalog answered on ``tools/list``. Must render ``types.Tool`` objects.
        dispatcher: Dispatcher that handles ``tools/call``.

    Returns:
        The configured server, not yet connected to a transport.
    """
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.tool_object

    # Arguments are validated by the dispatcher so every failure uses the same envelope.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        result = await dispatcher.handle(ToolCallRequest(name=name, arguments=arguments))
        return to_call_tool_result(result)

    return server


async def serve(config: ServerConfig) -> None:
    """Run the server on stdio until the client disconnects."""
    async with LMStudioClient(config.base_url) as client:
        registry = build_registry(client)
        server = create_server(registry, ToolDispatcher(registry))

        async with stdio_server() as (read_stream, write_stream):
            logger.info("LM Studio MCP Server running on stdio")
            logger.info("Connecting to LM Studio at: %s", config.base_url)
            await server.run(read_stream, write_stream, server.create_initialization_options())


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=SERVER_NAME, description="MCP server for managing LM Studio models.")
    parser.add_argument(
        "--base-url",
        default=None,
        help="LM Studio base URL (default: $LM_STUDIO_BASE_URL or http://localhost:1234)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Diagnostic log level; logs are written to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point. Returns the process exit code."""
    args = parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        config = ServerConfig.from_env(base_url=args.base_url)
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down.")
    except Exception as e:
        logger.critical("Fatal error: %s", e, exc_info=True)
        return 1
    return 0
