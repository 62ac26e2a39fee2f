"""Email connectors for mail-guard-mcp."""

from mail_guard_mcp.email.connectors.base import BaseConnector
from mail_guard_mcp.email.connectors.config import IMAPConfig, SMTPConfig
from mail_guard_mcp.email.connectors.imap import IMAPConnector
from mail_guard_mcp.email.connectors.smtp import SMTPConnector

__all__ = [
    "BaseConnector",
    "IMAPConfig",
    "IMAPConnector",
    "SMTPConfig",
    "SMTPConnector",
]
