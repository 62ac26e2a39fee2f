"""Tests for the shared tool factories."""

from unittest.mock import MagicMock, patch

from mail_guard_mcp.listener.models import ListenerConfig
from mail_guard_mcp.tools._service import create_listener, create_runner, move_between
from mail_guard_mcp.triage.models import FolderConfig


class TestMoveBetween:
    def test_selects_source_then_moves(self, connector: MagicMock) -> None:
        with patch("mail_guard_mcp.tools._service.create_connector", return_value=connector):
            move_between("INBOX", "7", "quarantine")

        connector.select_folder.assert_called_once_with("INBOX")
        connector.move_message.assert_called_once_with("7", "quarantine")
        connector.__exit__.assert_called_once()


class TestFactories:
    def test_create_runner_uses_settings(self, settings: MagicMock) -> None:
        settings.folders = FolderConfig(inbox="Incoming")
        settings.listener = ListenerConfig(batch_size=10)
        connector = MagicMock()

        with (
            patch("mail_guard_mcp.tools._service.get_settings", return_value=settings),
            patch("mail_guard_mcp.tools._service.get_scanner"),
        ):
            runner = create_runner(connector)

        assert runner.connector is connector
        assert runner.folders.inbox == "Incoming"

    def test_create_listener(self, settings: MagicMock) -> None:
        settings.listener = ListenerConfig(poll_interval=120)

        with (
            patch("mail_guard_mcp.tools._service.get_settings", return_value=settings),
            patch("mail_guard_mcp.tools._service.get_scanner"),
            patch("mail_guard_mcp.tools._service.create_connector"),
        ):
            listener = create_listener()

        assert not listener.running
        assert listener._poll_interval == 120
