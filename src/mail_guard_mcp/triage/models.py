"""Triage-related data models."""

from enum import Enum

from pydantic import BaseModel, Field

from mail_guard_mcp.protection.models import (
    ReportModel,
    ScanSummary,
    SecurityAnalysis,
    ThreatLevel,
)


class FolderConfig(BaseModel):
    """Names of the folders triage moves messages between."""

    inbox: str = Field(default="INBOX", min_length=1)
    safe_inbox: str = Field(default="safe", min_length=1)
    quarantine: str = Field(default="quarantine", min_length=1)
    spam: str = Field(default="Junk", min_length=1)
    trash: str = Field(default="Trash", min_length=1)
    archive: str = Field(default="Archive", min_length=1)


class TriageAction(str, Enum):
    """What to do with a scanned message."""

    QUARANTINE = "quarantine"
    SAFE_INBOX = "safe-inbox"
    NONE = "none"


class TriageDecision(ReportModel):
    """Decision for one message and the verdict it was derived from."""

    action: TriageAction
    level: ThreatLevel
    phishing_score: int


class TriageOutcome(ReportModel):
    """What a triage pass did with one message."""

    message_id: str
    analysis: SecurityAnalysis
    decision: TriageDecision
    destination: str | None = None
    moved: bool = False
    error: str | None = None


class TriageReport(ReportModel):
    """Aggregate result of one triage pass."""

    outcomes: list[TriageOutcome] = []
    summary: ScanSummary = ScanSummary()

    @property
    def quarantined(self) -> int:
        return self._count_moved(TriageAction.QUARANTINE)

    @property
    def safe_inbox(self) -> int:
        return self._count_moved(TriageAction.SAFE_INBOX)

    @property
    def untouched(self) -> int:
        return sum(1 for o in self.outcomes if o.decision.action is TriageAction.NONE)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.error is not None)

    def _count_moved(self, action: TriageAction) -> int:
        return sum(1 for o in self.outcomes if o.moved and o.decision.action is action)

    def counts(self) -> dict[str, int]:
        return {
            "quarantined": self.quarantined,
            "safeInbox": self.safe_inbox,
            "untouched": self.untouched,
            "failed": self.failed,
        }
