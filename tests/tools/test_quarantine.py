"""Tests for quarantine tool."""

import json
from unittest.mock import MagicMock, patch

from imap_tools import ImapToolsError

from mail_guard_mcp.tools.quarantine import quarantine


class TestQuarantine:
    def test_moves_to_quarantine(self, settings: MagicMock) -> None:
        with (
            patch("mail_guard_mcp.tools.quarantine.get_settings", return_value=settings),
            patch("mail_guard_mcp.tools.quarantine.move_between") as mock_move,
            patch("mail_guard_mcp.tools.quarantine.time.time", return_value=1714550400.5),
        ):
            result = json.loads(quarantine.fn(message_id="12", reason="credential phishing"))

        mock_move.assert_called_once_with("INBOX", "12", "quarantine")
        assert result == {
            "success": True,
            "quarantined": True,
            "quarantineId": "12_1714550400500",
        }

    def test_move_failure(self, settings: MagicMock) -> None:
        with (
            patch("mail_guard_mcp.tools.quarantine.get_settings", return_value=settings),
            patch(
                "mail_guard_mcp.tools.quarantine.move_between",
                side_effect=ImapToolsError("MOVE failed"),
            ),
        ):
            result = json.loads(quarantine.fn(message_id="12"))

        assert result["success"] is False
        assert result["quarantined"] is False
