"""
Tool executor for MCP protocol.

This module provides functionality for executing tools with parameter validation.
"""

import logging
from typing import Any, Dict, Union

import jsonschema
from jsonschema.exceptions import best_match

from jj_mcp.mcp.tools.errors import ParameterValidationError, ToolNotFoundError
from jj_mcp.mcp.tools.models import Tool, ToolResult
from jj_mcp.mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def _describe_error(tool: Tool, error: jsonschema.ValidationError) -> ParameterValidationError:
    """Turn a jsonschema error into one naming the offending field."""
    path = [str(part) for part in error.absolute_path]
    field = ".".join(path) or None

    if error.validator == "required" and isinstance(error.instance, dict):
        missing = [name for name in error.validator_value if name not in error.instance]
        if missing:
            field = missing[0]
            return ParameterValidationError(tool.name, field, "required", f"'{field}' is a required parameter")

    return ParameterValidationError(tool.name, field, str(error.validator), error.message)


class ToolExecutor:
    """Executor for MCP tools."""

    def __init__(self, registry: ToolRegistry):
        """
        Initialize the tool executor.

        Args:
            registry: The tool registry to use
        """
        self.registry = registry

    def validate_parameters(self, tool: Union[Tool, str], parameters: Any) -> Dict[str, Any]:
        """
        Validate tool parameters against the tool's schema.

        Args:
            tool: The tool or tool name to validate parameters for
            parameters: The parameters to validate

        Returns:
            The validated parameters, restricted to the fields the tool declares

        Raises:
            ToolNotFoundError: If a tool name was given and it is not registered
            ParameterValidationError: If the parameters do not match the schema
        """
        if isinstance(tool, str):
            tool = self.registry.get_tool(tool)

        if parameters is None:
            parameters = {}

        validator = jsonschema.Draft7Validator(tool.input_schema)
        error = best_match(validator.iter_errors(parameters))
        if error is not None:
            raise _describe_error(tool, error)

        validated = {}
        for param in tool.parameters:
            if param.name not in parameters:
                continue
            value = parameters[param.name]
            # JSON numbers like 3.0 satisfy "integer"; hand builders a real int.
            if param.type == "integer" and isinstance(value, float):
                value = int(value)
            validated[param.name] = value

        return validated

    async def execute(self, tool_name: str, parameters: Dict[str, Any]) -> ToolResult:
        """
        Execute a tool with the given parameters.

        Args:
            tool_name: The name of the tool to execute
            parameters: The parameters to pass to the tool

        Returns:
            The result of the tool execution. Unknown tools and invalid
            parameters produce an unsuccessful result without running the handler.
        """
        logger.debug(f"Attempting to execute tool: {tool_name}")

        try:
            tool = self.registry.get_tool(tool_name)
        except ToolNotFoundError as e:
            logger.warning(f"Tool not found: {tool_name}")
            return ToolResult(tool_name=tool_name, parameters=parameters or {}, success=False, error=str(e))

        try:
            validated = self.validate_parameters(tool, parameters)
        except ParameterValidationError as e:
            logger.warning(str(e))
            return ToolResult(tool_name=tool_name, parameters=parameters or {}, success=False, error=str(e))

        logger.info(f"Executing tool: {tool_name}")
        try:
            result = await tool.execute(validated)
        except Exception as e:
            logger.exception(f"Error executing tool {tool_name}")
            return ToolResult(tool_name=tool_name, parameters=validated, success=False, error=str(e))
        logger.debug(f"Tool execution completed: {tool_name}")

        return ToolResult(tool_name=tool_name, parameters=validated, result=result, success=True)
