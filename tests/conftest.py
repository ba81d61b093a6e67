"""
Shared fixtures for the jj-mcp test suite.
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from jj_mcp.config import ENV_JJ_COMMAND, ENV_LOG_LEVEL, ENV_TIMEOUT
from jj_mcp.jj.runner import CommandSuccess, JJRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep JJ_MCP_* variables from the outer environment out of the tests."""
    for name in (ENV_JJ_COMMAND, ENV_LOG_LEVEL, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_home(tmp_path):
    """Fixture to mock Path.home() to use a temporary directory."""
    mock_home_path = tmp_path / ".home"
    mock_home_path.mkdir()
    with patch.object(Path, "home", return_value=mock_home_path):
        yield mock_home_path


@pytest.fixture
def fake_runner():
    """A runner whose run() records calls and reports success without spawning jj."""
    runner = MagicMock(spec=JJRunner)
    runner.run = AsyncMock(side_effect=lambda args, cwd=None: CommandSuccess(args=list(args), stdout="ok\n"))
    return runner
