from typing import Annotated, Any, Optional

import pytest
from pydantic import Field

from lmstudio_mcp.core.exceptions import ToolRegistrationError, ToolValidationError
from lmstudio_mcp.core.tools import ToolDefinition, ToolRegistry
from lmstudio_mcp.mcp_server import MCPToolRegistry


# Renamed to avoid PytestCollectionWarning
class ConcreteTestRegistry(ToolRegistry):
    @property
    def tool_object(self) -> Any:
        return None


def test_registry_tool_decorator() -> None:
    registry = ConcreteTestRegistry()

    @registry.tool
    def my_tool(x: Annotated[int, Field(description="An integer")]) -> int:
        """My tool description."""
        return x * 2

    assert "my_tool" in registry.tools
    tool_def = registry.tools["my_tool"]
    assert tool_def.description == "My tool description."
    assert tool_def.func(2) == 4
    assert tool_def.parameters == {
        "type": "object",
        "properties": {"x": {"type": "integer", "description": "An integer"}},
        "required": ["x"],
        "additionalProperties": False,
    }
    assert tool_def.required_arguments == ["x"]


def test_registry_optional_parameter_schema() -> None:
    registry = ConcreteTestRegistry()

    @registry.tool
    def my_tool(
        name: Annotated[Optional[str], Field(description="A name")] = None,
        count: Annotated[int, Field(description="A count")] = 3,
    ) -> str:
        """Optional arguments."""
        return f"{name}{count}"

    params = registry.tools["my_tool"].parameters
    assert params is not None
    assert params["required"] == []
    assert params["properties"]["name"] == {"type": "string", "description": "A name"}
    assert params["properties"]["count"] == {"type": "integer", "description": "A count", "default": 3}


def test_registry_rejects_duplicate_names() -> None:
    registry = ConcreteTestRegistry()

    def my_tool() -> str:
        """Does nothing."""
        return ""

    registry.register(my_tool)
    with pytest.raises(ToolRegistrationError, match="already registered"):
        registry.register(my_tool)


def test_registry_requires_docstring() -> None:
    registry = ConcreteTestRegistry()

    def undocumented() -> str:
        return ""

    with pytest.raises(ToolValidationError, match="missing docstring"):
        registry.register(undocumented)


def test_registry_requires_parameter_descriptions() -> None:
    registry = ConcreteTestRegistry()

    def bare(x: int) -> int:
        """Bare parameter."""
        return x

    with pytest.raises(ToolValidationError, match="missing a description"):
        registry.register(bare)


def test_register_tool_definition() -> None:
    registry = ConcreteTestRegistry()
    schema = {"type": "object", "properties": {}, "required": []}
    registry.register(ToolDefinition(name="sample", description="sample tool", func=lambda: "ok", parameters=schema))

    tool = registry.get("sample")
    assert tool is not None
    assert tool.parameters == schema
    assert tool.args_model is None
    assert [t.name for t in registry.list_definitions()] == ["sample"]
    assert registry.get("missing") is None


def test_register_description_override() -> None:
    registry = ConcreteTestRegistry()

    def my_tool() -> str:
        """Docstring text."""
        return ""

    registry.register(my_tool, description="Override text.")

    tool = registry.get("my_tool")
    assert tool is not None
    assert tool.description == "Override text."


def test_catalog_lists_exactly_the_five_model_tools(registry: MCPToolRegistry) -> None:
    names = [tool.name for tool in registry.list_definitions()]
    assert names == ["list_models", "get_model_details", "load_model", "unload_model", "configure_model"]


@pytest.mark.parametrize(
    "tool_name, required, optional",
    [
        ("list_models", [], []),
        ("get_model_details", ["model_id"], []),
        ("load_model", ["model_id"], ["ttl"]),
        ("unload_model", ["model_id"], []),
        ("configure_model", ["model_id"], ["ttl", "draft_model"]),
    ],
)
def test_catalog_arguments(registry: MCPToolRegistry, tool_name: str, required: list, optional: list) -> None:
    tool = registry.get(tool_name)
    assert tool is not None
    assert tool.parameters is not None

    assert tool.parameters["type"] == "object"
    assert tool.parameters["required"] == required
    assert sorted(tool.parameters["properties"]) == sorted(required + optional)
    for prop in tool.parameters["properties"].values():
        assert prop["description"]


def test_catalog_argument_types_and_defaults(registry: MCPToolRegistry) -> None:
    load = registry.get("load_model")
    configure = registry.get("configure_model")
    assert load is not None and configure is not None
    assert load.parameters is not None and configure.parameters is not None

    assert load.parameters["properties"]["model_id"]["type"] == "string"
    assert load.parameters["properties"]["ttl"]["type"] == "number"
    assert load.parameters["properties"]["ttl"]["default"] == 3600

    assert configure.parameters["properties"]["ttl"]["type"] == "number"
    assert "default" not in configure.parameters["properties"]["ttl"]
    assert configure.parameters["properties"]["draft_model"]["type"] == "string"


def test_catalog_is_returned_verbatim(registry: MCPToolRegistry) -> None:
    first = registry.list_definitions()
    second = registry.list_definitions()
    assert [t.model_dump(exclude={"func", "args_model"}) for t in first] == [
        t.model_dump(exclude={"func", "args_model"}) for t in second
    ]


def test_catalog_descriptions(registry: MCPToolRegistry) -> None:
    tool = registry.get("unload_model")
    assert tool is not None
    assert tool.description == "Unload a model from memory immediately by setting its TTL to 0"


def test_mcp_tool_object(registry: MCPToolRegistry) -> None:
    tools = registry.tool_object

    assert [t.name for t in tools] == [d.name for d in registry.list_definitions()]
    list_models = tools[0]
    assert list_models.inputSchema["properties"] == {}
    assert list_models.inputSchema["required"] == []
    assert tools[2].inputSchema["required"] == ["model_id"]


def test_mcp_tool_object_fills_missing_schema() -> None:
    registry = MCPToolRegistry()
    registry.register(ToolDefinition(name="bare", description="No schema", func=lambda: "ok"))

    assert registry.tool_object[0].inputSchema == {"type": "object", "properties": {}, "required": []}
