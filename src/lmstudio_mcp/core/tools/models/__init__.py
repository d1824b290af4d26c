"""Tool-related data models."""

from .models import ToolDefinition
from .tool_call import ToolCallRequest, ToolCallResult, TextBlock

__all__ = ["ToolDefinition", "ToolCallRequest", "ToolCallResult", "TextBlock"]
