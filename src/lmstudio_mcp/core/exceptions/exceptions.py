"""
Custom exception classes for the LM Studio MCP server.

This module defines a hierarchy of exceptions used to handle errors during
tool registration, argument validation, tool execution and the HTTP exchange
with the LM Studio REST API.
"""

from typing import Optional


class LMStudioMCPError(Exception):
    """Base exception for all errors raised by this package."""

    pass


class ToolRegistrationError(LMStudioMCPError):
    """Raised when there is an error registering a tool."""

    pass


class ToolExecutionError(LMStudioMCPError):
    """Raised when a tool fails during execution."""

    pass


class ToolValidationError(LMStudioMCPError):
    """Raised when tool arguments or a tool definition are invalid."""

    pass


class LMStudioAPIError(LMStudioMCPError):
    """Raised when a request to the LM Studio REST API fails.

    Attributes:
        status_code: HTTP status code, if the server answered at all.
        reason: HTTP reason phrase that came with ``status_code``.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
