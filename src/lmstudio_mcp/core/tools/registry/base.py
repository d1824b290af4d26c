"""Tool registry abstraction and helper utilities."""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Union, cast

import jsonref  # type: ignore
from pydantic import ConfigDict, create_model

from ..models import ToolDefinition
from ..schema import SchemaValidator, ToolParameterFactory
from ...exceptions import ToolRegistrationError, ToolValidationError
from ...logger import get_logger

logger = get_logger(__name__)


class ToolRegistry(ABC):
    """
    A central catalog of the tools an agent may invoke.

    This class holds the tool definitions advertised to the agent and maps
    tool names to their Python implementations. Definitions keep their
    registration order, which is also the order they are listed in.
    """

    def __init__(self) -> None:
        """Initialize the ToolRegistry."""
        self.tools: Dict[str, ToolDefinition] = {}

    def register(self, tool_or_func: Union[ToolDefinition, Callable], description: Optional[str] = None) -> None:
        """
        Register a new tool.

        A tool is registered either from a prepared `ToolDefinition` or from a
        function, whose definition is then generated from its signature.

        Args:
            tool_or_func: A `ToolDefinition` object or a Callable.
            description: Overrides the docstring of a Callable as the tool description.

        Raises:
            ToolRegistrationError: If a tool with the same name already exists.
        """

        if isinstance(tool_or_func, ToolDefinition):
            tool = tool_or_func
        else:
            tool = self._generate_tool_definition(tool_or_func, description=description)

        if tool.name in self.tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.tools[tool.name] = tool
        logger.debug("Registered tool: '%s'", tool.name)

    def tool(self, func: Callable) -> Callable:
        """A decorator to turn a function into a tool.

        Args:
            func: The function to decorate.

        Returns:
            The original function, after registering it as a tool.
        """
        self.register(func)
        return func

    def get(self, tool_name: str) -> Optional[ToolDefinition]:
        """Look up a definition by name, or None if it is not registered."""
        return self.tools.get(tool_name)

    def list_definitions(self) -> List[ToolDefinition]:
        """Returns every registered definition in registration order."""
        return list(self.tools.values())

    @property
    @abstractmethod
    def tool_object(self) -> Any:
        """Constructs the catalog in the representation of the serving protocol.

        Returns:
            The protocol-specific tool listing.
        """
        pass

    def _generate_tool_definition(
        self, func: Callable, description: Optional[str] = None
    ) -> ToolDefinition:
        """Generate a ToolDefinition from a callable.

        Args:
            func: The function to generate a definition for.
            description: Optional description override for the tool.

        Returns:
            A ToolDefinition object containing the tool's metadata and schema.

        Raises:
            ToolValidationError: If the function is missing a docstring or parameter descriptions.
        """

        tool_name = func.__name__
        if description is None:
            description = self._get_docstring_from_func(func, tool_name)

        signature = inspect.signature(func)
        fields = self._build_fields(signature, tool_name)

        # create_model expects **field_definitions: Any
        dynamic_params_model = create_model(
            f"{tool_name}Params",
            __config__=ConfigDict(protected_namespaces=()),
            **cast(Dict[str, Any], fields),
        )
        raw_schema = dynamic_params_model.model_json_schema()
        SchemaValidator.assert_no_recursive_refs(raw_schema)

        # proxies=False returns plain dicts instead of JsonRef objects
        parameters_schema = jsonref.replace_refs(raw_schema, proxies=False)
        parameters_schema = SchemaValidator.sanitize_schema(parameters_schema)

        return ToolDefinition(
            name=tool_name,
            description=description,
            func=func,
            parameters=parameters_schema,
            args_model=dynamic_params_model,
        )

    @staticmethod
    def _get_docstring_from_func(func: Callable, tool_name: str) -> str:
        doc = inspect.getdoc(func)
        if not doc:
            msg = f"Tool '{tool_name}' missing docstring. Agents need a description of what the tool does."
            logger.error(msg)
            raise ToolValidationError(msg)
        return doc

    @staticmethod
    def _build_fields(signature: inspect.Signature, tool_name: str) -> Dict[str, Any]:

        fields: Dict[str, Any] = {}
        for param_name, param in signature.parameters.items():
            if param_name == "self":
                continue
            ft = ToolParameterFactory.build_field_tuple(param_name=param_name, param=param, tool_name=tool_name)
            fields[param_name] = (ft.annotation, ft.field)
        return fields
