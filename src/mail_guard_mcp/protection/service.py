"""Protection service for scanning message batches and summarizing verdicts."""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from pydantic import Field

from mail_guard_mcp.email.models import Message
from mail_guard_mcp.protection.heuristic import HeuristicScanner
from mail_guard_mcp.protection.models import (
    ReportModel,
    ScanSummary,
    SecurityAnalysis,
    SecurityConfig,
    ThreatLevel,
)


def _round_score(value: float) -> float:
    """Round to one decimal, halves away from zero."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize(analyses: Iterable[SecurityAnalysis]) -> ScanSummary:
    """Count analyses per threat level and average their phishing scores.

    Args:
        analyses: Analyses to aggregate.

    Returns:
        ScanSummary; the average is 0.0 for an empty batch.
    """
    counts = {level: 0 for level in ThreatLevel}
    score_sum = 0
    scanned = 0
    for analysis in analyses:
        counts[analysis.level] += 1
        score_sum += analysis.phishing_score
        scanned += 1

    return ScanSummary(
        scanned=scanned,
        safe=counts[ThreatLevel.SAFE],
        suspicious=counts[ThreatLevel.SUSPICIOUS],
        dangerous=counts[ThreatLevel.DANGEROUS],
        avg_phishing_score=_round_score(score_sum / scanned) if scanned else 0.0,
    )


class ScanEntry(ReportModel):
    """Per-message line of a scan report."""

    id: str
    sender: str | None = Field(default=None, alias="from")
    subject: str | None = None
    date: str | None = None
    preview: str = ""
    threat_flags: SecurityAnalysis


class ScanReport(ReportModel):
    """Result of scanning a batch of messages."""

    scanned: int
    messages: list[ScanEntry] = []
    summary: ScanSummary


class ProtectionService:
    """Orchestrates batch scanning and report building.

    Delegates the per-message verdict to HeuristicScanner.
    """

    def __init__(
        self,
        scanner: HeuristicScanner | None = None,
        config: SecurityConfig | None = None,
    ) -> None:
        """Initialize the protection service.

        Args:
            scanner: Scanner to use. Defaults to a HeuristicScanner built from config.
            config: Scanner configuration, used when no scanner is given.
        """
        self._scanner = scanner or HeuristicScanner(config)

    @property
    def scanner(self) -> HeuristicScanner:
        return self._scanner

    def analyze(self, message: Message) -> SecurityAnalysis:
        return self._scanner.analyze_message(message)

    def scan(self, messages: Sequence[Message]) -> ScanReport:
        """Scan messages and build a report with per-message flags and a summary."""
        entries = [
            ScanEntry(
                id=message.id,
                sender=message.sender,
                subject=message.subject,
                date=message.date.isoformat() if message.date else None,
                preview=message.preview,
                threat_flags=self._scanner.analyze_message(message),
            )
            for message in messages
        ]
        return ScanReport(
            scanned=len(entries),
            messages=entries,
            summary=summarize(entry.threat_flags for entry in entries),
        )
