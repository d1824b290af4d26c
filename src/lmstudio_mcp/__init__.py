"""LM Studio MCP - Model lifecycle tools for LM Studio, served over MCP."""

from .core import (
    ToolDefinition,
    ToolCallRequest,
    ToolCallResult,
    ToolRegistry,
    ToolDispatcher,
    ServerConfig,
    LMStudioMCPError,
    LMStudioAPIError,
)
from .lmstudio import LMStudioClient, LMStudioModelTools, ModelDescriptor
from .mcp_server import MCPToolRegistry, build_registry, create_server

__all__ = [
    "ToolDefinition",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolRegistry",
    "ToolDispatcher",
    "ServerConfig",
    "LMStudioMCPError",
    "LMStudioAPIError",
    "LMStudioClient",
    "LMStudioModelTools",
    "ModelDescriptor",
    "MCPToolRegistry",
    "build_registry",
    "create_server",
]
