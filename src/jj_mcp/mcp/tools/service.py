"""
Tool service for MCP protocol.

This module provides a service for executing tools through the MCP protocol.
"""

from typing import Any, Dict, List, Optional

from jj_mcp.mcp.tools.executor import ToolExecutor
from jj_mcp.mcp.tools.formatter import ToolResponseFormatter
from jj_mcp.mcp.tools.models import ToolResult
from jj_mcp.mcp.tools.registry import ToolRegistry


class ToolService:
    """Service for executing tools through the MCP protocol."""

    def __init__(self, registry: ToolRegistry, executor: Optional[ToolExecutor] = None):
        """
        Initialize the tool service.

        Args:
            registry: The tool registry to use
            executor: The tool executor to use, or None to create a new one
        """
        self.registry = registry
        self.executor = executor if executor is not None else ToolExecutor(registry)
        self.formatter = ToolResponseFormatter()

    async def execute_tool(self, tool_name: str, parameters: Optional[Dict[str, Any]]) -> ToolResult:
        """
        Execute a tool.

        Args:
            tool_name: The name of the tool to execute
            parameters: The parameters to pass to the tool

        Returns:
            The result of the tool execution
        """
        return await self.executor.execute(tool_name, parameters or {})

    def get_tool_definitions(self) -> List[Dict[str, Any]]:
        """
        Get definitions for all available tools.

        Returns:
            A list of tool definitions with name, description and input schema
        """
        return [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.input_schema}
            for tool in self.registry.get_all_tools()
        ]

    def format_result(self, result: ToolResult) -> Dict[str, Any]:
        """
        Format a tool result.

        Args:
            result: The result to format

        Returns:
            The formatted result
        """
        return self.formatter.format_result(result)

