"""Tool execution."""

from .dispatcher import ToolDispatcher

__all__ = ["ToolDispatcher"]
