"""
The jj tool set.

TOOL_DEFINITIONS is the complete, fixed list of jj operations this server
exposes. create_tools binds every definition to a runner.
"""

from typing import List

from jj_mcp.jj.runner import JJRunner
from jj_mcp.mcp.tools.models import Tool
from jj_mcp.mcp.tools.registry import ToolRegistry

from . import bookmarks, changes, files, git, inspection, operations, settings
from .base import JJToolDefinition

TOOL_DEFINITIONS = (
    inspection.TOOLS
    + changes.TOOLS
    + bookmarks.TOOLS
    + git.TOOLS
    + files.TOOLS
    + operations.TOOLS
    + settings.TOOLS
)


def create_tools(runner: JJRunner) -> List[Tool]:
    """Bind every jj tool definition to the given runner."""
    return [definition.to_tool(runner) for definition in TOOL_DEFINITIONS]


def create_registry(runner: JJRunner) -> ToolRegistry:
    """Build the registry of all jj tools."""
    return ToolRegistry(create_tools(runner))


__all__ = ["JJToolDefinition", "TOOL_DEFINITIONS", "create_registry", "create_tools"]
