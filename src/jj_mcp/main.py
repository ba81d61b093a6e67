"""
Command-line entry point for jj-mcp.

`jj-mcp` (or `jj-mcp serve`) runs the MCP server on stdio. `jj-mcp tools`
and `jj-mcp run` exercise the same tool set directly from a terminal.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import anyio
import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from jj_mcp import __version__
from jj_mcp.config import LOG_LEVELS, Config
from jj_mcp.jj.runner import JJRunner
from jj_mcp.jj.tools import create_registry
from jj_mcp.mcp.server import JJMCPServer
from jj_mcp.mcp.tools.service import ToolService
from jj_mcp.utils.log_config import configure_logging

log = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

OPTION_NAMES = {"jj_command": "--jj-command", "log_level": "--log-level", "command_timeout": "--timeout"}


def build_service(config: Config) -> ToolService:
    """Wire the runner, registry and service from configuration."""
    runner = JJRunner(command=config.jj_command, timeout=config.command_timeout)
    return ToolService(create_registry(runner))


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to the YAML config file (default: ~/.config/jj-mcp/config.yaml).",
)
@click.option("--jj-command", default=None, help="Name or path of the jj executable.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for messages written to stderr.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for a jj command before giving up (default: no limit).",
)
@click.version_option(__version__, prog_name="jj-mcp")
@click.pass_context
def cli(ctx, config_file, jj_command, log_level, timeout):
    """Expose Jujutsu (jj) operations as MCP tools."""
    config = Config(config_file)
    try:
        config.override(jj_command=jj_command, log_level=log_level, command_timeout=timeout)
    except ValidationError as e:
        error = e.errors()[0]
        field = error["loc"][0] if error["loc"] else None
        raise click.BadParameter(error["msg"], param_hint=OPTION_NAMES.get(field)) from e
    configure_logging(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["CONFIG"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@cli.command()
@click.pass_context
def serve(ctx):
    """Run the MCP server on stdio."""
    config = ctx.obj["CONFIG"]
    try:
        server = JJMCPServer(build_service(config))
        anyio.run(server.run)
    except KeyboardInterrupt:
        log.info("Interrupted, shutting down")
    except Exception:
        log.exception("Fatal error in jj MCP server")
        sys.exit(1)


@cli.command()
@click.pass_context
def tools(ctx):
    """List the available tools."""
    service = build_service(ctx.obj["CONFIG"])
    console = Console()

    table = Table(title="jj MCP tools")
    table.add_column("Tool", style="bold blue", no_wrap=True)
    table.add_column("Parameters")
    table.add_column("Description")

    for tool in service.registry.get_all_tools():
        params = ", ".join(f"{p.name}*" if p.required else p.name for p in tool.parameters)
        table.add_row(tool.name, params, tool.description)

    console.print(table)
    console.print("[dim]* required[/dim]")


def _load_parameters(params: Optional[str], params_file: Optional[Path]) -> Dict[str, Any]:
    if params and params_file:
        raise click.UsageError("Use either --params or --params-file, not both")
    try:
        if params:
            data = json.loads(params)
        elif params_file:
            with open(params_file, "r") as f:
                data = json.load(f)
        else:
            return {}
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise click.BadParameter("Parameters must be a JSON object")
    return data


@cli.command()
@click.argument("tool_name")
@click.option("--params", default=None, help="JSON object of parameters to pass to the tool.")
@click.option(
    "--params-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON file containing the tool parameters.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as a JSON object instead of plain text.")
@click.pass_context
def run(ctx, tool_name, params, params_file, as_json):
    """Run a single tool and print its output."""
    service = build_service(ctx.obj["CONFIG"])
    parameters = _load_parameters(params, params_file)

    result = anyio.run(service.execute_tool, tool_name, parameters)
    failed = service.formatter.is_error(result)
    if as_json:
        click.echo(json.dumps(service.format_result(result), indent=2))
    else:
        text = service.formatter.to_text(result)
        if text:
            click.echo(text, err=failed)
    if failed:
        ctx.exit(1)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
