"""
Tests for the jj-mcp command-line interface.
"""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from jj_mcp import __version__
from jj_mcp.config import Config
from jj_mcp.jj.runner import CommandFailure, CommandSuccess, JJRunner
from jj_mcp.main import build_service, cli
from jj_mcp.mcp.server import JJMCPServer


@pytest.fixture
def runner():
    """Provides a Click CliRunner instance."""
    return CliRunner()


@pytest.fixture
def jj_run():
    """Replace JJRunner.run so no jj process is started."""
    with patch.object(JJRunner, "run", new_callable=AsyncMock) as mock_run:
        mock_run.return_value = CommandSuccess(args=[], stdout="Working copy : qpvuntsm 230dd059 (empty)\n")
        yield mock_run


def test_version(runner, mock_home):
    """Test the --version option."""
    result = runner.invoke(cli, ["--version"], obj={})
    assert result.exit_code == 0
    assert __version__ in result.output


def test_build_service(mock_home):
    """Test that the service is built from configuration."""
    config = Config()
    config.override(jj_command="/opt/jj", command_timeout=9.0)

    service = build_service(config)

    assert len(service.registry) == 55
    tool = service.registry.get_tool("status")
    assert tool.name == "status"


def test_tools_lists_every_tool(runner, mock_home):
    """Test that the tools command prints the tool table."""
    result = runner.invoke(cli, ["tools"], obj={}, env={"COLUMNS": "300"})

    assert result.exit_code == 0
    for name in ("status", "bookmark-create", "git-remote-set-url", "operation-undo", "config-path"):
        assert name in result.output
    assert "* required" in result.output


def test_run_prints_output(runner, mock_home, jj_run):
    """Test running a tool once."""
    result = runner.invoke(cli, ["run", "status", "--params", '{"repoPath": "/repo"}'], obj={})

    assert result.exit_code == 0
    assert "Working copy : qpvuntsm 230dd059 (empty)" in result.output
    jj_run.assert_awaited_once_with(["status", "--repository", "/repo"], cwd=None)


def test_run_params_file(runner, mock_home, jj_run, tmp_path):
    """Test reading tool parameters from a file."""
    params_file = tmp_path / "params.json"
    params_file.write_text(json.dumps({"source": "@-", "destination": "main"}))

    result = runner.invoke(cli, ["run", "rebase", "--params-file", str(params_file)], obj={})

    assert result.exit_code == 0
    jj_run.assert_awaited_once_with(["rebase", "--source", "@-", "--destination", "main"], cwd=None)


def test_run_command_failure(runner, mock_home, jj_run):
    """Test that a failed jj command exits non-zero with the error text."""
    jj_run.return_value = CommandFailure(args=["edit"], kind="exit", message="Revision `x` doesn't exist", returncode=1)

    result = runner.invoke(cli, ["run", "edit", "--params", '{"revision": "x"}'], obj={})

    assert result.exit_code == 1
    assert "Error: Revision `x` doesn't exist" in result.output


def test_run_unknown_tool(runner, mock_home, jj_run):
    """Test running a tool that does not exist."""
    result = runner.invoke(cli, ["run", "push"], obj={})

    assert result.exit_code == 1
    assert "Error: No tool with name 'push' is registered" in result.output
    jj_run.assert_not_awaited()


def test_run_invalid_parameters(runner, mock_home, jj_run):
    """Test that parameters failing validation never reach jj."""
    result = runner.invoke(cli, ["run", "commit", "--params", "{}"], obj={})

    assert result.exit_code == 1
    assert "Parameter validation failed" in result.output
    jj_run.assert_not_awaited()


def test_run_invalid_json(runner, mock_home):
    """Test that malformed JSON is a usage error."""
    result = runner.invoke(cli, ["run", "status", "--params", "{not json"], obj={})

    assert result.exit_code == 2
    assert "Invalid JSON" in result.output


def test_run_params_must_be_object(runner, mock_home):
    """Test that parameters must be a JSON object."""
    result = runner.invoke(cli, ["run", "status", "--params", "[1, 2]"], obj={})

    assert result.exit_code == 2
    assert "JSON object" in result.output


def test_run_params_exclusive(runner, mock_home, tmp_path):
    """Test that --params and --params-file cannot be combined."""
    params_file = tmp_path / "params.json"
    params_file.write_text("{}")

    result = runner.invoke(cli, ["run", "status", "--params", "{}", "--params-file", str(params_file)], obj={})

    assert result.exit_code == 2


def test_jj_command_option(runner, mock_home):
    """Test that --jj-command selects the program that is run."""
    result = runner.invoke(cli, ["--jj-command", "jj-mcp-test-no-such-program", "run", "status"], obj={})

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_serve_runs_server(runner, mock_home):
    """Test that serve starts the MCP server."""
    with patch.object(JJMCPServer, "run", new_callable=AsyncMock) as mock_run:
        result = runner.invoke(cli, ["serve"], obj={})

    assert result.exit_code == 0
    mock_run.assert_awaited_once()


def test_default_command_is_serve(runner, mock_home):
    """Test that running without a subcommand starts the server."""
    with patch.object(JJMCPServer, "run", new_callable=AsyncMock) as mock_run:
        result = runner.invoke(cli, [], obj={})

    assert result.exit_code == 0
    mock_run.assert_awaited_once()


def test_serve_startup_failure(runner, mock_home):
    """Test that a fatal server error exits with status 1."""
    with patch.object(JJMCPServer, "run", new_callable=AsyncMock, side_effect=RuntimeError("stdio closed")):
        result = runner.invoke(cli, ["serve"], obj={})

    assert result.exit_code == 1


def test_options_override_config(runner, mock_home, monkeypatch):
    """Test that command-line options take precedence over configuration."""
    config_file = mock_home / ".config" / "jj-mcp" / "config.yaml"
    config_file.parent.mkdir(parents=True)
    config_file.write_text("jj_command: from-file\n")
    monkeypatch.setenv("JJ_MCP_TIMEOUT", "4")

    captured = {}

    def capture(config):
        captured["config"] = config
        return build_service(config)

    with patch("jj_mcp.main.build_service", side_effect=capture):
        result = runner.invoke(cli, ["--jj-command", "from-flag", "--log-level", "debug", "tools"], obj={})

    assert result.exit_code == 0
    config = captured["config"]
    assert config.jj_command == "from-flag"
    assert config.log_level == "DEBUG"
    assert config.command_timeout == 4.0


def test_invalid_timeout_option(runner, mock_home):
    """Test that a non-positive timeout is rejected."""
    result = runner.invoke(cli, ["--timeout", "0", "tools"], obj={})
    assert result.exit_code == 2


def test_empty_jj_command_option(runner, mock_home):
    """Test that an empty --jj-command is a usage error naming the option."""
    result = runner.invoke(cli, ["--jj-command", "", "tools"], obj={})

    assert result.exit_code == 2
    assert "--jj-command" in result.output
    assert not isinstance(result.exception, ValidationError)


def test_run_json_output(runner, mock_home, jj_run):
    """Test printing a tool result as a JSON object."""
    args = ["--log-level", "ERROR", "run", "status", "--params", '{"repoPath": "/repo"}', "--json"]
    result = runner.invoke(cli, args, obj={})

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "name": "status",
        "parameters": {"repoPath": "/repo"},
        "text": "Working copy : qpvuntsm 230dd059 (empty)",
        "is_error": False,
    }


def test_run_json_output_failure(runner, mock_home, jj_run):
    """Test that a failed command in JSON mode reports its cause and exits non-zero."""
    jj_run.return_value = CommandFailure(args=["edit"], kind="exit", message="Revision `x` doesn't exist", returncode=1)

    args = ["--log-level", "ERROR", "run", "edit", "--params", '{"revision": "x"}', "--json"]
    result = runner.invoke(cli, args, obj={})

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["is_error"] is True
    assert payload["text"] == "Error: Revision `x` doesn't exist"
    assert payload["failure"] == {"kind": "exit", "returncode": 1}
