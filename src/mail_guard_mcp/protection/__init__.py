"""Heuristic threat scanning for incoming mail."""

from mail_guard_mcp.protection.heuristic import HeuristicScanner, analyze_message
from mail_guard_mcp.protection.models import (
    ScannedMessage,
    ScanSummary,
    SecurityAnalysis,
    SecurityConfig,
    SenderReputation,
    ThreatLevel,
)
from mail_guard_mcp.protection.service import ProtectionService, ScanReport, summarize

__all__ = [
    "HeuristicScanner",
    "ProtectionService",
    "ScanReport",
    "ScanSummary",
    "ScannedMessage",
    "SecurityAnalysis",
    "SecurityConfig",
    "SenderReputation",
    "ThreatLevel",
    "analyze_message",
    "summarize",
]
