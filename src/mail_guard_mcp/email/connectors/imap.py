"""IMAP transport for reading and moving messages using imap-tools."""

import logging
from typing import Any

from imap_tools import AND, MailBox, MailBoxStartTls, MailBoxUnencrypted, MailMessage

from mail_guard_mcp.email.connectors.base import BaseConnector
from mail_guard_mcp.email.connectors.config import IMAPConfig
from mail_guard_mcp.email.models import (
    PREVIEW_LENGTH,
    Attachment,
    Folder,
    FolderStats,
    Message,
    SearchOptions,
)
from mail_guard_mcp.exceptions import MessageNotFoundError, NotConnectedError

logger = logging.getLogger(__name__)

_Mailbox = MailBox | MailBoxStartTls | MailBoxUnencrypted


def _build_criteria(options: SearchOptions) -> Any:
    """Translate SearchOptions into an imap-tools search criteria."""
    conditions: dict[str, Any] = {}
    if options.search_phrase:
        conditions["subject"] = options.search_phrase
    if options.filter == "unread":
        conditions["seen"] = False
    elif options.filter == "read":
        conditions["seen"] = True

    if not conditions:
        return "ALL"
    return AND(**conditions)


def _convert_message(msg: MailMessage) -> Message:
    """Convert an imap-tools MailMessage into our Message model."""
    body = msg.text or msg.html or ""
    attachments = [
        Attachment(
            id=str(index),
            filename=att.filename or "unknown",
            content_type=att.content_type or "application/octet-stream",
            size=att.size,
            disposition=att.content_disposition or None,
            content_id=att.content_id or None,
        )
        for index, att in enumerate(msg.attachments, start=1)
    ]
    return Message(
        id=str(msg.uid),
        uid=int(msg.uid) if msg.uid else None,
        sender=msg.from_ or "unknown",
        to=", ".join(msg.to) or "unknown",
        subject=msg.subject or "No Subject",
        date=msg.date,
        size=msg.size,
        flags=list(msg.flags),
        preview=body[:PREVIEW_LENGTH],
        body=body,
        headers={name: ", ".join(values) for name, values in msg.headers.items()},
        attachments=attachments,
    )


class IMAPConnector(BaseConnector):
    """Mail transport over IMAP using imap-tools.

    Message ids are IMAP UIDs, which stay stable while other messages in the
    folder are moved away during a triage pass.
    """

    def __init__(self, config: IMAPConfig) -> None:
        """Initialize IMAP connector.

        Args:
            config: IMAP server configuration.
        """
        self.config = config
        self._mailbox: _Mailbox | None = None
        self._folder: str | None = None

    @property
    def connected(self) -> bool:
        return self._mailbox is not None

    def _require_mailbox(self) -> _Mailbox:
        if self._mailbox is None:
            raise NotConnectedError()
        return self._mailbox

    def connect(self) -> None:
        """Establish connection to IMAP server."""
        mailbox: _Mailbox
        if self.config.ssl:
            mailbox = MailBox(self.config.host, self.config.port)
        elif self.config.starttls:
            mailbox = MailBoxStartTls(self.config.host, self.config.port)
        else:
            mailbox = MailBoxUnencrypted(self.config.host, self.config.port)

        mailbox.login(
            self.config.username,
            self.config.password.get_secret_value(),
        )
        self._mailbox = mailbox
        logger.info("IMAP connection established (host=%s)", self.config.host)

    def disconnect(self) -> None:
        """Close connection to IMAP server."""
        if self._mailbox:
            try:
                self._mailbox.logout()
            except Exception:
                logger.debug("IMAP logout failed (connection may already be closed)")
            self._mailbox = None
            self._folder = None
            logger.info("IMAP connection closed")

    def select_folder(self, folder: str) -> None:
        self._require_mailbox().folder.set(folder)
        self._folder = folder

    def list_folders(self) -> list[Folder]:
        """List all folders/mailboxes."""
        return [
            Folder(name=info.name, delimiter=info.delim, flags=list(info.flags))
            for info in self._require_mailbox().folder.list()
        ]

    def list_messages(self, options: SearchOptions | None = None) -> list[Message]:
        """List messages in the selected folder.

        Fetching never sets the \\Seen flag, so scanning a message does not
        mark it as read.
        """
        mailbox = self._require_mailbox()
        options = options or SearchOptions()

        messages = []
        for msg in mailbox.fetch(
            _build_criteria(options),
            limit=slice(options.offset, options.offset + options.count),
            mark_seen=False,
            bulk=True,
        ):
            if not msg.uid:
                logger.warning("Skipping message with missing UID (folder=%s)", self._folder)
                continue
            messages.append(_convert_message(msg))
        return messages

    def get_message(self, message_id: str) -> Message:
        mailbox = self._require_mailbox()
        for msg in mailbox.fetch(AND(uid=message_id), mark_seen=False):
            if msg.uid:
                return _convert_message(msg)
        raise MessageNotFoundError(message_id, self._folder)

    def move_message(self, message_id: str, destination: str) -> None:
        self._require_mailbox().move(message_id, destination)
        logger.info("Message %s moved to %s", message_id, destination)

    def copy_message(self, message_id: str, destination: str) -> None:
        self._require_mailbox().copy(message_id, destination)
        logger.info("Message %s copied to %s", message_id, destination)

    def get_folder_stats(self, folder: str) -> FolderStats:
        """Return unread and total counts using IMAP STATUS."""
        status = self._require_mailbox().folder.status(folder, ["MESSAGES", "UNSEEN"])
        return FolderStats(
            name=folder,
            unread=int(status.get("UNSEEN", 0)),
            total=int(status.get("MESSAGES", 0)),
        )
