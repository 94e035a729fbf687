"""
Tool registry for the People Data Labs MCP server.
NOTE:
1. MCP uses JSON Schema for tool input definitions. The schemas are written
   by hand in each tool family module because several tools need `anyOf`
   ("at least one identifier"), which a function signature cannot express.
2. The registry is built once at startup and is read-only afterwards.
"""
from types import MappingProxyType
from typing import Iterable

from ..exceptions import ToolRegistrationError
from .schemas import ToolDefinition, ToolSchema


class ToolRegistry:
    """Immutable name -> ToolDefinition mapping."""

    def __init__(self, tools: Iterable[ToolDefinition]):
        registry: dict[str, ToolDefinition] = {}
        for tool in tools:
            if tool.name in registry:
                raise ToolRegistrationError(f"Tool already registered: {tool.name}")
            registry[tool.name] = tool
        self._tools = MappingProxyType(registry)

    def get_tool(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_schemas(self) -> list[ToolSchema]:
        return [tool.to_schema() for tool in self._tools.values()]

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


SEARCH_INVALID_MESSAGE = (
    "Invalid search parameters. Must provide a query string and, optionally, a size between 1 and 100."
)


def search_input_schema(subject: str) -> dict:
    """JSON Schema shared by every search_* tool."""
    return {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": f"SQL-like query to search for {subject}",
            },
            "size": size_property(),
        },
        "required": ["query"],
    }


def size_property() -> dict:
    return {
        "type": "number",
        "description": "Number of results to return (max 100)",
        "minimum": 1,
        "maximum": 100,
    }
