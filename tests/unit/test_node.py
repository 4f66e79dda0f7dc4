"""Unit tests for the client node command session."""

import io
import sys
from unittest.mock import AsyncMock, patch

import pytest

from timetracker.client.interface import WorkerClient
from timetracker.exceptions import NodeUnreachableError
from timetracker.node import main, run_client_session


@pytest.fixture
def mock_client():
    """Create mock worker client."""
    client = AsyncMock(spec=WorkerClient)
    client.message = AsyncMock(return_value="Hello World")
    client.done = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_session_dispatches_commands(mock_client, capsys):
    """Test that commands reach the worker until quit."""
    commands = io.StringIO("message\n\nDONE\nbogus\nquit\nmessage\n")

    await run_client_session(mock_client, "time_tracker", stdin=commands)

    mock_client.message.assert_called_once_with("time_tracker")
    mock_client.done.assert_called_once_with("time_tracker")
    assert capsys.readouterr().out == "Hello World\n"


@pytest.mark.asyncio
async def test_session_ends_on_eof(mock_client):
    """Test that end of input closes the session."""
    await run_client_session(mock_client, "time_tracker", stdin=io.StringIO("message\n"))

    mock_client.message.assert_called_once()


@pytest.mark.asyncio
async def test_session_warns_on_unknown_command(mock_client, caplog):
    """Test that unknown commands are reported and skipped."""
    await run_client_session(mock_client, "time_tracker", stdin=io.StringIO("stop\n"))

    assert "Unknown command" in caplog.text
    mock_client.message.assert_not_called()


@pytest.mark.asyncio
async def test_session_survives_failed_command(mock_client, caplog):
    """Test that a failed remote call does not end the session."""
    mock_client.message.side_effect = NodeUnreachableError("Cannot reach server node")

    await run_client_session(
        mock_client, "time_tracker", stdin=io.StringIO("message\ndone\n")
    )

    assert "Command failed" in caplog.text
    mock_client.done.assert_called_once_with("time_tracker")


@pytest.fixture
def node_settings():
    """Patch node settings and logging setup for main()."""
    with patch("timetracker.node.setup_logging"), patch("timetracker.node.settings") as mock_settings:
        mock_settings.worker.name = "time_tracker"
        yield mock_settings


def test_main_server_role_ignores_argv_name(node_settings, monkeypatch, caplog):
    """Test that a server node hosts the configured worker whatever argv says."""
    node_settings.node.role = "server"
    monkeypatch.setattr(sys, "argv", ["timetracker", "clock"])

    with patch("timetracker.api.listener.main") as mock_run_server:
        main()

    mock_run_server.assert_called_once_with()
    assert "time_tracker" in caplog.text
    assert "clock" not in caplog.text


def test_main_client_role_uses_argv_name(node_settings, monkeypatch):
    """Test that a client node drives the worker named on the command line."""
    node_settings.node.role = "client"
    monkeypatch.setattr(sys, "argv", ["timetracker", "clock"])

    with patch("timetracker.node.run_client", new_callable=AsyncMock) as mock_run_client:
        main()

    mock_run_client.assert_awaited_once_with("clock")
