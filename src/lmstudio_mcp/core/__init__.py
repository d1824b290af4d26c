"""Public exports for the tool catalog, dispatch and ambient utilities."""

from .tools import ToolRegistry, ToolDispatcher, SchemaValidator
from .tools.models import ToolDefinition, ToolCallRequest, ToolCallResult, TextBlock
from .exceptions import (
    LMStudioMCPError,
    ToolRegistrationError,
    ToolExecutionError,
    ToolValidationError,
    LMStudioAPIError,
)
from .config import ServerConfig, DEFAULT_BASE_URL
from .logger import get_logger, setup_logging

__all__ = [
    "ToolDefinition",
    "ToolCallRequest",
    "ToolCallResult",
    "TextBlock",
    "ToolRegistry",
    "ToolDispatcher",
    "SchemaValidator",
    "LMStudioMCPError",
    "ToolRegistrationError",
    "ToolExecutionError",
    "ToolValidationError",
    "LMStudioAPIError",
    "ServerConfig",
    "DEFAULT_BASE_URL",
    "get_logger",
    "setup_logging",
]
