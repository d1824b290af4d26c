"""Dispatch of single tool invocations into uniform tool results."""

from __future__ import annotations

import asyncio
import inspect
import json
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ...exceptions import LMStudioMCPError, ToolExecutionError, ToolValidationError
from ...logger import get_logger
from ..models import ToolCallRequest, ToolCallResult, ToolDefinition
from ..registry import ToolRegistry

logger = get_logger(__name__)


class ToolDispatcher:
    """Turns a tool invocation into exactly one call of the matching tool.

    The dispatcher owns argument normalization, required-argument checks,
    schema validation and error handling. Every failure is converted into an
    error-flagged ToolCallResult; ``handle`` never raises.
    """

    def __init__(self, registry: ToolRegistry, tool_timeout: Optional[float] = None) -> None:
        """Initialize the dispatcher.

        Args:
            registry: Tool registry used to resolve tool definitions.
            tool_timeout: Timeout in seconds for one tool execution. None waits indefinitely.
        """
        self._registry = registry
        self._tool_timeout = tool_timeout

    async def handle(self, tool_call: ToolCallRequest) -> ToolCallResult:
        """Handle a single tool call request.

        Args:
            tool_call: The tool call request containing name and arguments.

        Returns:
            The result of the tool execution, error-flagged on any failure.
        """
        logger.debug("Handling tool call: %s (ID: %s)", tool_call.name, tool_call.call_id)

        tool_def = self._registry.get(tool_call.name)
        if tool_def is None:
            msg = f"Unknown tool: {tool_call.name}"
            logger.warning(msg)
            return ToolCallResult.failure(msg, call_id=tool_call.call_id)

        try:
            function_args = self._prepare_arguments(tool_def, tool_call.arguments)

            logger.info("Executing tool '%s'...", tool_call.name)
            function_result = await self._execute_tool(tool_def, function_args)
            rendered = self._render(function_result)
            logger.info("Tool '%s' executed successfully.", tool_call.name)
        except LMStudioMCPError as exc:
            msg = str(exc)
            logger.warning("Tool '%s' failed: %s (%s)", tool_call.name, msg, type(exc).__name__)
            return ToolCallResult.failure(msg, call_id=tool_call.call_id)
        except Exception as exc:
            logger.error("Unexpected error in tool '%s'", tool_call.name, exc_info=True)
            return ToolCallResult.failure(str(exc) or type(exc).__name__, call_id=tool_call.call_id)

        return ToolCallResult.success(rendered, call_id=tool_call.call_id)

    def _prepare_arguments(self, tool_def: ToolDefinition, raw_args: Any) -> Dict[str, Any]:
        """Normalize, presence-check and validate the arguments of one call.

        Raises:
            ToolValidationError: If arguments are malformed, missing or of the wrong type.
        """
        function_args = self._normalize_function_args(tool_def.name, raw_args)

        # null and "" count as absent for required arguments
        for field in tool_def.required_arguments:
            value = function_args.get(field)
            if value is None or value == "":
                raise ToolValidationError(f"{field} is required")

        if tool_def.args_model:
            try:
                validated_args = tool_def.args_model(**function_args)
            except ValidationError as validation_error:
                raise ToolValidationError(f"Argument validation failed: {validation_error}") from validation_error
            function_args = validated_args.model_dump()

        return function_args

    @staticmethod
    def _normalize_function_args(tool_name: str, raw_args: Any) -> Dict[str, Any]:
        """Normalize tool arguments into a dictionary.

        Handles JSON strings, mappings, or None values.

        Args:
            tool_name: Name of the tool (for error reporting).
            raw_args: The raw arguments.

        Returns:
            A dictionary of normalized arguments.

        Raises:
            ToolValidationError: If arguments cannot be parsed or are not an object.
        """
        if raw_args is None or raw_args == "":
            return {}

        if isinstance(raw_args, dict):
            return dict(raw_args)

        if isinstance(raw_args, str):
            try:
                parsed = json.loads(raw_args)
            except json.JSONDecodeError as exc:
                raise ToolValidationError(f"Failed to parse arguments for tool '{tool_name}': {exc}") from exc

            if parsed is None:
                return {}

            if not isinstance(parsed, dict):
                raise ToolValidationError(
                    f"Failed to parse arguments for tool '{tool_name}': arguments must be a JSON object."
                )
            return parsed

        try:
            return dict(raw_args)
        except (TypeError, ValueError) as exc:
            raise ToolValidationError(f"Failed to parse arguments for tool '{tool_name}': {exc}") from exc

    async def _execute_tool(self, tool_def: ToolDefinition, function_args: Dict[str, Any]) -> Any:
        """Execute the tool function, handling async/sync and the optional timeout.

        Raises:
            ToolExecutionError: If execution times out.
        """
        tool_function = tool_def.func
        if inspect.iscoroutinefunction(tool_function):
            awaitable = tool_function(**function_args)
        else:
            awaitable = asyncio.to_thread(tool_function, **function_args)

        if self._tool_timeout is None:
            return await awaitable

        try:
            return await asyncio.wait_for(awaitable, timeout=self._tool_timeout)
        except asyncio.TimeoutError as exc:
            msg = f"Tool execution timed out after {self._tool_timeout} seconds."
            raise ToolExecutionError(msg) from exc

    @staticmethod
    def _render(function_result: Any) -> str:
        if isinstance(function_result, str):
            return function_result
        return json.dumps(function_result, indent=2)
