from .models import ToolDefinition, ToolCallRequest, ToolCallResult, TextBlock
from .registry import ToolRegistry
from .execution import ToolDispatcher
from .schema import SchemaValidator

__all__ = [
    "ToolDefinition",
    "ToolCallRequest",
    "ToolCallResult",
    "TextBlock",
    "ToolRegistry",
    "ToolDispatcher",
    "SchemaValidator",
]
