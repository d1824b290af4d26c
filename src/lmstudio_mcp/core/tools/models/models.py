from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict


class ToolDefinition(BaseModel):
    """
    Represents the definition of a tool that an agent can invoke.

    Definitions are built once at process start and never mutated afterwards.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        func: The callable implementing the tool's logic. May be sync or async.
        parameters: JSON schema of the tool's input (``type``, ``properties``,
                    ``required``; per-field ``type``, ``description`` and ``default``).
        args_model: Optional Pydantic model used for validating and coercing arguments.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    func: Callable
    parameters: Optional[Dict[str, Any]] = None
    args_model: Optional[Type[BaseModel]] = None

    @property
    def required_arguments(self) -> List[str]:
        """Names of the arguments a caller must supply."""
        if not self.parameters:
            return []
        return list(self.parameters.get("required", []))
