"""
Exceptions raised by the tool execution framework.
"""

from typing import Optional


class ToolError(Exception):
    """Base class for tool framework errors."""


class ToolNotFoundError(ToolError, ValueError):
    """Raised when no tool with the requested name is registered."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"No tool with name '{tool_name}' is registered")


class ParameterValidationError(ToolError):
    """
    Raised when tool parameters do not match the tool's schema.

    Attributes:
        tool_name: The tool whose parameters were rejected
        field: Dotted path of the offending parameter, or None for the object itself
        constraint: The JSON Schema keyword that failed (e.g. "required", "type", "minimum")
    """

    def __init__(self, tool_name: str, field: Optional[str], constraint: str, message: str):
        self.tool_name = tool_name
        self.field = field
        self.constraint = constraint
        self.message = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = f"parameter '{self.field}'" if self.field else "parameters"
        return (
            f"Parameter validation failed for tool '{self.tool_name}': "
            f"{location} violates '{self.constraint}': {self.message}"
        )


class ToolInvocationError(ToolError):
    """Raised at the protocol boundary when a call is rejected before running."""
