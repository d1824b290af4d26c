"""Data models for tool execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class ToolCallRequest:
    """Represents a single inbound tool invocation.

    ``arguments`` is the raw argument bag as delivered by the transport: a mapping,
    a JSON object string, or None.
    """

    name: str
    arguments: Any = None
    call_id: Optional[str] = None


@dataclass(frozen=True)
class TextBlock:
    """A single text content block of a tool result."""

    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolCallResult:
    """Represents the outcome of executing a tool call."""

    content: Tuple[TextBlock, ...] = field(default_factory=tuple)
    is_error: bool = False
    call_id: Optional[str] = None

    @classmethod
    def success(cls, text: str, call_id: Optional[str] = None) -> ToolCallResult:
        return cls(content=(TextBlock(text=text),), is_error=False, call_id=call_id)

    @classmethod
    def failure(cls, message: str, call_id: Optional[str] = None) -> ToolCallResult:
        return cls(content=(TextBlock(text=f"Error: {message}"),), is_error=True, call_id=call_id)

    @property
    def text(self) -> str:
        """All text blocks joined by newlines."""
        return "\n".join(block.text for block in self.content)
