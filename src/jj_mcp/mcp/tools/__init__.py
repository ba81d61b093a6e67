"""
Tool execution framework for MCP protocol.

This module provides classes for tool registration and execution.
"""

from .errors import ParameterValidationError, ToolError, ToolInvocationError, ToolNotFoundError
from .executor import ToolExecutor
from .formatter import ToolResponseFormatter
from .models import Tool, ToolParameter, ToolResult
from .registry import ToolRegistry
from .service import ToolService
