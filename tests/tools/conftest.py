"""Shared fixtures for tool tests."""

from unittest.mock import MagicMock

import pytest

from mail_guard_mcp.config import NotificationConfig
from mail_guard_mcp.triage.models import FolderConfig


@pytest.fixture
def settings() -> MagicMock:
    settings = MagicMock()
    settings.folders = FolderConfig()
    settings.notifications = NotificationConfig()
    return settings


@pytest.fixture
def connector() -> MagicMock:
    connector = MagicMock()
    connector.__enter__ = MagicMock(return_value=connector)
    connector.__exit__ = MagicMock(return_value=None)
    return connector


@pytest.fixture
def smtp() -> MagicMock:
    smtp = MagicMock()
    smtp.__enter__ = MagicMock(return_value=smtp)
    smtp.__exit__ = MagicMock(return_value=None)
    smtp.send_mail.return_value = "<sent@example.com>"
    smtp.reply_to.return_value = "<reply@example.com>"
    smtp.forward_message.return_value = "<fwd@example.com>"
    return smtp
