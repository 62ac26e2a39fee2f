"""A mail security MCP server that scans, triages and quarantines incoming mail."""

from mail_guard_mcp.config import Settings
from mail_guard_mcp.email.connectors.base import BaseConnector
from mail_guard_mcp.email.connectors.imap import IMAPConnector
from mail_guard_mcp.email.connectors.smtp import SMTPConnector
from mail_guard_mcp.email.models import Attachment, Folder, Message, OutgoingMail
from mail_guard_mcp.listener.service import ListenerService
from mail_guard_mcp.protection.heuristic import HeuristicScanner, analyze_message
from mail_guard_mcp.protection.models import (
    ScanSummary,
    SecurityAnalysis,
    SecurityConfig,
    ThreatLevel,
)
from mail_guard_mcp.protection.service import ProtectionService
from mail_guard_mcp.triage.policy import triage
from mail_guard_mcp.triage.runner import TriageRunner

__version__ = "0.1.0"

__all__ = [
    "Attachment",
    "BaseConnector",
    "Folder",
    "HeuristicScanner",
    "IMAPConnector",
    "ListenerService",
    "Message",
    "OutgoingMail",
    "ProtectionService",
    "SMTPConnector",
    "ScanSummary",
    "SecurityAnalysis",
    "SecurityConfig",
    "Settings",
    "ThreatLevel",
    "TriageRunner",
    "analyze_message",
    "triage",
]
