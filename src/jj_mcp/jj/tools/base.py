"""
Building blocks for jj tool definitions.

A tool definition pairs the parameter schema of one jj operation with a pure
function that turns validated parameters into jj argument tokens. Binding a
definition to a JJRunner yields the Tool that the registry serves.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from jj_mcp.jj.runner import CommandResult, JJRunner
from jj_mcp.mcp.tools.models import Tool, ToolParameter

ArgBuilder = Callable[[Dict[str, Any]], List[str]]


# --- Parameter declarations ---


def string(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name=name, description=description, type="string", required=required)


def strings(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(
        name=name, description=description, type="array", required=required, items={"type": "string"}
    )


def boolean(name: str, description: str) -> ToolParameter:
    return ToolParameter(name=name, description=description, type="boolean")


def positive_int(name: str, description: str) -> ToolParameter:
    return ToolParameter(name=name, description=description, type="integer", minimum=1)


def non_negative_int(name: str, description: str) -> ToolParameter:
    return ToolParameter(name=name, description=description, type="integer", minimum=0)


def choice(name: str, description: str, values: List[str], required: bool = False) -> ToolParameter:
    return ToolParameter(name=name, description=description, type="string", required=required, enum=values)


REPO_PATH = string("repoPath", "Optional path to the repository root or a working directory inside it")
CWD = string("cwd", "Optional working directory to run the command in")


# --- Argument construction ---


def _present(value: Any) -> bool:
    return value is not None and value != "" and value is not False


def option(params: Dict[str, Any], key: str, flag: str) -> List[str]:
    """``[flag, value]`` when the parameter is present, otherwise nothing."""
    value = params.get(key)
    if not _present(value):
        return []
    return [flag, str(value)]


def switch(params: Dict[str, Any], key: str, flag: str) -> List[str]:
    """``[flag]`` when the boolean parameter is true, otherwise nothing."""
    return [flag] if params.get(key) is True else []


def positional(params: Dict[str, Any], key: str) -> List[str]:
    """The parameter's value as a single token when present."""
    value = params.get(key)
    return [str(value)] if _present(value) else []


def positionals(params: Dict[str, Any], key: str) -> List[str]:
    """One token per element of an array parameter, in order."""
    return [str(value) for value in params.get(key) or []]


def variadic(params: Dict[str, Any], key: str, flag: str) -> List[str]:
    """The flag once, followed by every element of an array parameter."""
    values = positionals(params, key)
    return [flag, *values] if values else []


def repository(params: Dict[str, Any]) -> List[str]:
    return option(params, "repoPath", "--repository")


# --- Definitions ---


@dataclass(frozen=True)
class JJToolDefinition:
    """Declarative description of one jj operation exposed as a tool."""

    name: str
    description: str
    parameters: Tuple[ToolParameter, ...]
    build_args: ArgBuilder

    def to_tool(self, runner: JJRunner) -> Tool:
        """Bind this definition to a runner."""
        build_args = self.build_args

        async def handler(parameters: Dict[str, Any]) -> CommandResult:
            args = build_args(parameters)
            cwd: Optional[str] = parameters.get("cwd") or None
            return await runner.run(args, cwd=cwd)

        return Tool(
            name=self.name,
            description=self.description,
            parameters=list(self.parameters),
            handler=handler,
        )


def define(
    name: str,
    description: str,
    parameters: List[ToolParameter],
    build_args: ArgBuilder,
    repo_path: bool = True,
) -> JJToolDefinition:
    """
    Create a tool definition.

    Every tool accepts ``cwd``; all but the repository-creating ones also
    accept ``repoPath``.
    """
    common = [REPO_PATH, CWD] if repo_path else [CWD]
    return JJToolDefinition(
        name=name,
        description=description,
        parameters=tuple(parameters) + tuple(common),
        build_args=build_args,
    )
