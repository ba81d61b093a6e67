"""
Tool response formatter for MCP protocol.

This module renders tool execution results as the single text payload the
protocol returns to callers.
"""

from typing import Any, Dict

from jj_mcp.jj.runner import CommandFailure, CommandSuccess
from jj_mcp.mcp.tools.models import ToolResult

ERROR_PREFIX = "Error: "


class ToolResponseFormatter:
    """Formatter for MCP tool responses."""

    def to_text(self, result: ToolResult) -> str:
        """
        Render a tool result as text.

        Successful commands yield their trimmed standard output; failed
        commands and rejected calls yield a message starting with "Error: ".

        Args:
            result: The tool result to render

        Returns:
            The text payload
        """
        if not result.success:
            return f"{ERROR_PREFIX}{result.error or 'Tool execution failed'}"

        outcome = result.result
        if isinstance(outcome, CommandSuccess):
            return outcome.output
        if isinstance(outcome, CommandFailure):
            return f"{ERROR_PREFIX}{outcome.message}"
        if outcome is None:
            return ""
        return str(outcome)

    def is_error(self, result: ToolResult) -> bool:
        """Whether the rendered text of this result is an error message."""
        return not result.success or isinstance(result.result, CommandFailure)

    def format_result(self, result: ToolResult) -> Dict[str, Any]:
        """
        Format a tool result as a dictionary.

        Args:
            result: The tool result to format

        Returns:
            A dictionary containing the tool name, parameters and text output
        """
        formatted = {
            "name": result.tool_name,
            "parameters": result.parameters,
            "text": self.to_text(result),
            "is_error": self.is_error(result),
        }
        if isinstance(result.result, CommandFailure):
            formatted["failure"] = {"kind": result.result.kind, "returncode": result.result.returncode}
        return formatted

