"""
Tool registry for MCP protocol.

This module provides a fixed, name-keyed registry of tools. The set of tools
is supplied once at construction and does not change afterwards.
"""

from typing import Dict, Iterable, Iterator, List

from jj_mcp.mcp.tools.errors import ToolNotFoundError
from jj_mcp.mcp.tools.models import Tool


class ToolRegistry:
    """Registry for MCP tools."""

    def __init__(self, tools: Iterable[Tool] = ()):
        """
        Initialize the registry.

        Args:
            tools: The tools to expose

        Raises:
            ValueError: If two tools share a name
        """
        self._tools: Dict[str, Tool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Tool with name '{tool.name}' is already registered")
            self._tools[tool.name] = tool

    def get_tool(self, tool_name: str) -> Tool:
        """
        Get a tool by name.

        Args:
            tool_name: The name of the tool to get

        Returns:
            The requested tool

        Raises:
            ToolNotFoundError: If no tool with the given name is registered
        """
        if tool_name not in self._tools:
            raise ToolNotFoundError(tool_name)

        return self._tools[tool_name]

    def list_tools(self) -> List[str]:
        """
        List all registered tool names.

        Returns:
            A list of all registered tool names, in registration order
        """
        return list(self._tools.keys())

    def get_all_tools(self) -> List[Tool]:
        """
        Get all registered tools.

        Returns:
            A list of all registered tools
        """
        return list(self._tools.values())

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())
