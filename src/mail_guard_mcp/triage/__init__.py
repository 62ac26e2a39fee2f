"""Triage policy and runner."""

from mail_guard_mcp.triage.models import (
    FolderConfig,
    TriageAction,
    TriageDecision,
    TriageOutcome,
    TriageReport,
)
from mail_guard_mcp.triage.policy import destination_folder, triage
from mail_guard_mcp.triage.runner import TriageRunner

__all__ = [
    "FolderConfig",
    "TriageAction",
    "TriageDecision",
    "TriageOutcome",
    "TriageReport",
    "TriageRunner",
    "destination_folder",
    "triage",
]
