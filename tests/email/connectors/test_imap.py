"""Tests for IMAP connector."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from pydantic import SecretStr

from mail_guard_mcp.email.connectors.config import IMAPConfig
from mail_guard_mcp.email.connectors.imap import IMAPConnector, _build_criteria
from mail_guard_mcp.email.models import SearchOptions
from mail_guard_mcp.exceptions import MessageNotFoundError, NotConnectedError


def _mail_message(uid: str | None = "42", **overrides: object) -> MagicMock:
    attachment = MagicMock()
    attachment.filename = "invoice.pdf"
    attachment.content_type = "application/pdf"
    attachment.size = 1024
    attachment.content_disposition = "attachment"
    attachment.content_id = ""

    msg = MagicMock()
    msg.uid = uid
    msg.from_ = "sender@example.com"
    msg.to = ("me@example.com", "team@example.com")
    msg.subject = "Quarterly report"
    msg.date = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    msg.size = 2048
    msg.flags = ("\\Seen",)
    msg.text = "Numbers attached"
    msg.html = ""
    msg.headers = {"message-id": ("<abc@example.com>",)}
    msg.attachments = [attachment]
    for name, value in overrides.items():
        setattr(msg, name, value)
    return msg


class TestBuildCriteria:
    def test_all_messages(self) -> None:
        assert _build_criteria(SearchOptions()) == "ALL"

    def test_unread(self) -> None:
        assert "UNSEEN" in str(_build_criteria(SearchOptions(filter="unread")))

    def test_read(self) -> None:
        criteria = str(_build_criteria(SearchOptions(filter="read")))
        assert "SEEN" in criteria
        assert "UNSEEN" not in criteria

    def test_search_phrase(self) -> None:
        criteria = str(_build_criteria(SearchOptions(search_phrase="invoice")))
        assert "SUBJECT" in criteria
        assert "invoice" in criteria


class TestIMAPConnector:
    @pytest.fixture
    def config(self) -> IMAPConfig:
        return IMAPConfig(
            host="imap.example.com",
            username="user",
            password=SecretStr("secret"),
        )

    def test_init(self, config: IMAPConfig) -> None:
        connector = IMAPConnector(config)
        assert connector.config == config
        assert not connector.connected

    def test_default_port_and_starttls(self, config: IMAPConfig) -> None:
        assert config.port == 1143
        assert config.starttls is True
        assert config.ssl is False

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_connect_starttls(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox

        connector = IMAPConnector(config)
        connector.connect()

        mock_mailbox_class.assert_called_once_with("imap.example.com", 1143)
        mock_mailbox.login.assert_called_once_with("user", "secret")
        assert connector.connected

    @patch("mail_guard_mcp.email.connectors.imap.MailBox")
    def test_connect_ssl(self, mock_mailbox_class: MagicMock) -> None:
        config = IMAPConfig(
            host="imap.example.com", port=993, username="user", password=SecretStr("secret"), ssl=True
        )

        IMAPConnector(config).connect()

        mock_mailbox_class.assert_called_once_with("imap.example.com", 993)

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxUnencrypted")
    def test_connect_unencrypted(self, mock_mailbox_class: MagicMock) -> None:
        config = IMAPConfig(username="user", password=SecretStr("secret"), starttls=False)

        IMAPConnector(config).connect()

        mock_mailbox_class.assert_called_once_with("127.0.0.1", 1143)

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_context_manager(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox

        with IMAPConnector(config) as connector:
            assert connector.connected

        mock_mailbox.logout.assert_called_once()
        assert not connector.connected

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_disconnect_ignores_logout_errors(
        self, mock_mailbox_class: MagicMock, config: IMAPConfig
    ) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox.logout.side_effect = OSError("socket closed")
        mock_mailbox_class.return_value = mock_mailbox

        connector = IMAPConnector(config)
        connector.connect()
        connector.disconnect()

        assert not connector.connected

    def test_requires_connection(self, config: IMAPConfig) -> None:
        connector = IMAPConnector(config)

        with pytest.raises(NotConnectedError):
            connector.list_messages()
        with pytest.raises(NotConnectedError):
            connector.select_folder("INBOX")

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_list_folders(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        folder_info = MagicMock()
        folder_info.name = "INBOX"
        folder_info.delim = "/"
        folder_info.flags = ("\\HasNoChildren",)
        mock_mailbox.folder.list.return_value = [folder_info]

        connector = IMAPConnector(config)
        connector.connect()
        folders = connector.list_folders()

        assert len(folders) == 1
        assert folders[0].name == "INBOX"
        assert folders[0].flags == ["\\HasNoChildren"]

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_select_folder(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox

        connector = IMAPConnector(config)
        connector.connect()
        connector.select_folder("quarantine")

        mock_mailbox.folder.set.assert_called_once_with("quarantine")

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_list_messages(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        mock_mailbox.fetch.return_value = [_mail_message()]

        connector = IMAPConnector(config)
        connector.connect()
        messages = connector.list_messages(SearchOptions(count=10, offset=5))

        _, kwargs = mock_mailbox.fetch.call_args
        assert kwargs["limit"] == slice(5, 15)
        assert kwargs["mark_seen"] is False
        assert kwargs["bulk"] is True

        assert len(messages) == 1
        message = messages[0]
        assert message.id == "42"
        assert message.uid == 42
        assert message.sender == "sender@example.com"
        assert message.to == "me@example.com, team@example.com"
        assert message.recipients() == ["me@example.com", "team@example.com"]
        assert message.subject == "Quarterly report"
        assert message.body == "Numbers attached"
        assert message.preview == "Numbers attached"
        assert message.is_seen
        assert message.headers["message-id"] == "<abc@example.com>"
        assert message.attachments is not None
        assert message.attachments[0].id == "1"
        assert message.attachments[0].filename == "invoice.pdf"
        assert message.attachments[0].content_id is None

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_list_messages_fills_missing_fields(
        self, mock_mailbox_class: MagicMock, config: IMAPConfig
    ) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        mock_mailbox.fetch.return_value = [
            _mail_message(from_="", to=(), subject="", text="", html="<p>Hi</p>", flags=())
        ]

        connector = IMAPConnector(config)
        connector.connect()
        message = connector.list_messages()[0]

        assert message.sender == "unknown"
        assert message.to == "unknown"
        assert message.subject == "No Subject"
        assert message.body == "<p>Hi</p>"
        assert not message.is_seen

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_preview_is_truncated(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        mock_mailbox.fetch.return_value = [_mail_message(text="x" * 500)]

        connector = IMAPConnector(config)
        connector.connect()
        message = connector.list_messages()[0]

        assert len(message.preview) == 200
        assert message.body is not None
        assert len(message.body) == 500

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_list_messages_skips_missing_uid(
        self, mock_mailbox_class: MagicMock, config: IMAPConfig
    ) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        mock_mailbox.fetch.return_value = [_mail_message(uid=None), _mail_message(uid="7")]

        connector = IMAPConnector(config)
        connector.connect()
        messages = connector.list_messages()

        assert [m.id for m in messages] == ["7"]

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_get_message(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        mock_mailbox.fetch.return_value = [_mail_message(uid="42")]

        connector = IMAPConnector(config)
        connector.connect()
        message = connector.get_message("42")

        assert message.id == "42"
        _, kwargs = mock_mailbox.fetch.call_args
        assert kwargs["mark_seen"] is False

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_get_message_not_found(
        self, mock_mailbox_class: MagicMock, config: IMAPConfig
    ) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        mock_mailbox.fetch.return_value = []

        connector = IMAPConnector(config)
        connector.connect()
        connector.select_folder("safe")

        with pytest.raises(MessageNotFoundError, match="safe/99"):
            connector.get_message("99")

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_move_and_copy(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox

        connector = IMAPConnector(config)
        connector.connect()
        connector.move_message("42", "quarantine")
        connector.copy_message("43", "Archive")

        mock_mailbox.move.assert_called_once_with("42", "quarantine")
        mock_mailbox.copy.assert_called_once_with("43", "Archive")

    @patch("mail_guard_mcp.email.connectors.imap.MailBoxStartTls")
    def test_get_folder_stats(self, mock_mailbox_class: MagicMock, config: IMAPConfig) -> None:
        mock_mailbox = MagicMock()
        mock_mailbox_class.return_value = mock_mailbox
        mock_mailbox.folder.status.return_value = {"MESSAGES": 12, "UNSEEN": 3}

        connector = IMAPConnector(config)
        connector.connect()
        stats = connector.get_folder_stats("INBOX")

        mock_mailbox.folder.status.assert_called_once_with("INBOX", ["MESSAGES", "UNSEEN"])
        assert stats.name == "INBOX"
        assert stats.total == 12
        assert stats.unread == 3
