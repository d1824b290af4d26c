"""Export the exception hierarchy used across registration, dispatch and HTTP paths."""

from .exceptions import (
    LMStudioMCPError,
    ToolRegistrationError,
    ToolExecutionError,
    ToolValidationError,
    LMStudioAPIError,
)

__all__ = [
    "LMStudioMCPError",
    "ToolRegistrationError",
    "ToolExecutionError",
    "ToolValidationError",
    "LMStudioAPIError",
]
