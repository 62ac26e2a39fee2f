"""Triage policy mapping security verdicts to folder actions."""

from mail_guard_mcp.protection import rules
from mail_guard_mcp.protection.models import SecurityAnalysis, ThreatLevel
from mail_guard_mcp.triage.models import FolderConfig, TriageAction, TriageDecision


def triage(analysis: SecurityAnalysis) -> TriageDecision:
    """Decide where a scanned message belongs.

    Dangerous messages, and suspicious ones scoring at least 5, go to
    quarantine. Other suspicious messages go to the safe inbox. Safe
    messages stay where they are.
    """
    if analysis.is_safe:
        action = TriageAction.NONE
    elif (
        analysis.level is ThreatLevel.DANGEROUS
        or analysis.phishing_score >= rules.SUSPICIOUS_SCORE
    ):
        action = TriageAction.QUARANTINE
    else:
        action = TriageAction.SAFE_INBOX

    return TriageDecision(
        action=action,
        level=analysis.level,
        phishing_score=analysis.phishing_score,
    )


def destination_folder(action: TriageAction, folders: FolderConfig) -> str | None:
    """Return the folder a triage action moves to, or None for no move."""
    if action is TriageAction.QUARANTINE:
        return folders.quarantine
    if action is TriageAction.SAFE_INBOX:
        return folders.safe_inbox
    return None
