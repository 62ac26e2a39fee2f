"""Email connectors and models for mail-guard-mcp."""

from mail_guard_mcp.email.connectors.base import BaseConnector
from mail_guard_mcp.email.connectors.config import IMAPConfig, SMTPConfig
from mail_guard_mcp.email.connectors.imap import IMAPConnector
from mail_guard_mcp.email.connectors.smtp import SMTPConnector
from mail_guard_mcp.email.models import (
    Attachment,
    Folder,
    FolderStats,
    Message,
    OutgoingMail,
    SearchOptions,
)

__all__ = [
    "Attachment",
    "BaseConnector",
    "Folder",
    "FolderStats",
    "IMAPConfig",
    "IMAPConnector",
    "Message",
    "OutgoingMail",
    "SMTPConfig",
    "SMTPConnector",
    "SearchOptions",
]
