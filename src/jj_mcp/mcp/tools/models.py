"""
Tool models for the MCP protocol.

This module provides data models for the tools exposed over the MCP protocol.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional


@dataclass(frozen=True)
class ToolParameter:
    """Parameter definition for a tool."""

    name: str
    description: str
    type: str
    required: bool = False
    enum: Optional[List[Any]] = None
    items: Optional[Dict[str, Any]] = None
    minimum: Optional[int] = None

    def to_schema(self) -> Dict[str, Any]:
        """Convert parameter to JSON Schema."""
        schema = {"type": self.type, "description": self.description}

        if self.enum is not None:
            schema["enum"] = self.enum

        if self.items is not None and self.type == "array":
            schema["items"] = self.items

        if self.minimum is not None and self.type in ("integer", "number"):
            schema["minimum"] = self.minimum

        return schema


@dataclass(frozen=True)
class Tool:
    """Tool definition for MCP protocol."""

    name: str
    description: str
    parameters: List[ToolParameter]
    handler: Callable[[Dict[str, Any]], Awaitable[Any]]
    _schema: Dict[str, Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Generate the schema once; the descriptor is immutable afterwards."""
        object.__setattr__(self, "_schema", self._generate_schema())

    def _generate_schema(self) -> Dict[str, Any]:
        """Generate JSON Schema for the tool parameters."""
        properties = {}
        required = []

        for param in self.parameters:
            properties[param.name] = param.to_schema()
            if param.required:
                required.append(param.name)

        return {
            "name": self.name,
            "description": self.description,
            "parameters": {"type": "object", "properties": properties, "required": required},
        }

    @property
    def schema(self) -> Dict[str, Any]:
        """Get the tool schema."""
        return self._schema

    @property
    def input_schema(self) -> Dict[str, Any]:
        """The JSON Schema of the tool's arguments object."""
        return self._schema["parameters"]

    async def execute(self, parameters: Dict[str, Any]) -> Any:
        """
        Execute the tool with the given parameters.

        Args:
            parameters: Parameters to pass to the handler

        Returns:
            The result of the tool execution
        """
        return await self.handler(parameters)


@dataclass
class ToolResult:
    """
    Result of a tool execution.

    ``success`` is False when the call was rejected before the handler ran
    or when the handler raised. A handler that returned reports its own
    outcome through ``result``.
    """

    tool_name: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    result: Any = None
    success: bool = True
    error: Optional[str] = None
