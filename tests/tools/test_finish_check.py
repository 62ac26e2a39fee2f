"""Tests for finish_check tool."""

import json
from unittest.mock import MagicMock, patch

import pytest

from mail_guard_mcp.config import NotificationConfig
from mail_guard_mcp.tools.finish_check import finish_check
from mail_guard_mcp.tools.models import CheckSummaryInput, QuarantinedMessageInput


@pytest.fixture
def quarantined() -> list[QuarantinedMessageInput]:
    return [
        QuarantinedMessageInput.model_validate(
            {
                "id": "12",
                "from": "attacker@example.com",
                "subject": "Verify your account",
                "threat_level": "dangerous",
            }
        )
    ]


class TestFinishCheck:
    def test_nothing_quarantined(self) -> None:
        result = json.loads(finish_check.fn(summary=CheckSummaryInput(scanned=3, safe=3)))

        assert result == {"success": True, "alerted": False, "reportSent": False}

    def test_report_disabled(self, quarantined: list[QuarantinedMessageInput]) -> None:
        result = json.loads(
            finish_check.fn(
                summary=CheckSummaryInput(scanned=1, quarantined=1),
                quarantined_messages=quarantined,
                send_report=False,
            )
        )

        assert result["alerted"] is False

    def test_alert_without_report_address(
        self, settings: MagicMock, quarantined: list[QuarantinedMessageInput]
    ) -> None:
        with patch("mail_guard_mcp.tools.finish_check.get_settings", return_value=settings):
            result = json.loads(
                finish_check.fn(
                    summary=CheckSummaryInput(scanned=1, quarantined=1),
                    quarantined_messages=quarantined,
                )
            )

        assert result == {"success": True, "alerted": True, "reportSent": False}

    def test_sends_report(
        self,
        settings: MagicMock,
        smtp: MagicMock,
        quarantined: list[QuarantinedMessageInput],
    ) -> None:
        settings.notifications = NotificationConfig(quarantine_report_to="admin@example.com")

        with (
            patch("mail_guard_mcp.tools.finish_check.get_settings", return_value=settings),
            patch("mail_guard_mcp.tools.finish_check.create_smtp_connector", return_value=smtp),
        ):
            result = json.loads(
                finish_check.fn(
                    summary=CheckSummaryInput(scanned=4, safe=3, quarantined=1),
                    quarantined_messages=quarantined,
                )
            )

        assert result == {"success": True, "alerted": True, "reportSent": True}
        mail = smtp.send_mail.call_args[0][0]
        assert mail.to == ["admin@example.com"]
        assert mail.subject == "Security check: 1 message(s) quarantined"
        assert "Scanned: 4" in mail.text
        assert "- [dangerous] Verify your account (from attacker@example.com, id 12)" in mail.text

    def test_report_send_failure(
        self,
        settings: MagicMock,
        smtp: MagicMock,
        quarantined: list[QuarantinedMessageInput],
    ) -> None:
        settings.notifications = NotificationConfig(quarantine_report_to="admin@example.com")
        smtp.send_mail.side_effect = ConnectionRefusedError("refused")

        with (
            patch("mail_guard_mcp.tools.finish_check.get_settings", return_value=settings),
            patch("mail_guard_mcp.tools.finish_check.create_smtp_connector", return_value=smtp),
        ):
            result = json.loads(
                finish_check.fn(
                    summary=CheckSummaryInput(quarantined=1), quarantined_messages=quarantined
                )
            )

        assert result["success"] is False
        assert result["reportSent"] is False
