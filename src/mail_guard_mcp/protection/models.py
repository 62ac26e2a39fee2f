"""Protection-related data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mail_guard_mcp.email.models import Message


class ThreatLevel(str, Enum):
    """Verdict produced by the scanner, ordered from harmless to harmful."""

    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    DANGEROUS = "dangerous"


class SenderReputation(str, Enum):
    """Classification of the From address."""

    KNOWN = "known"
    UNKNOWN = "unknown"
    SUSPICIOUS = "suspicious"


class ReportModel(BaseModel):
    """Base for models serialized to camelCase JSON reports."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SecurityConfig(BaseModel):
    """Configuration for the heuristic scanner.

    Attributes:
        known_safe_senders: Substrings that mark a sender as known when found
            (case-insensitively) in the From header.
        critical_threats: Filename suffixes (e.g. ".exe") that mark an
            attachment as executable, in addition to the built-in list.
        phishing_keywords: Phrases added to the built-in phishing phrases.
        attachment_blacklist: Accepted for compatibility, not used in scoring.
        link_threat_patterns: Accepted for compatibility, not used in scoring.
        credential_request_phrases: Accepted for compatibility, not used in
            scoring.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    known_safe_senders: tuple[str, ...] = ()
    critical_threats: tuple[str, ...] = ()
    phishing_keywords: tuple[str, ...] = ()
    attachment_blacklist: tuple[str, ...] = ()
    link_threat_patterns: tuple[str, ...] = ()
    credential_request_phrases: tuple[str, ...] = ()


class SecurityAnalysis(ReportModel):
    """Threat verdict for a single message."""

    level: ThreatLevel
    reasons: list[str] = []
    phishing_score: int = Field(ge=0, le=10)
    attachment_threats: list[str] = []
    link_threats: list[str] = []
    sender_reputation: SenderReputation = SenderReputation.UNKNOWN

    @property
    def is_safe(self) -> bool:
        return self.level is ThreatLevel.SAFE


class ScannedMessage(Message):
    """A message together with its security analysis."""

    security_analysis: SecurityAnalysis


class ScanSummary(ReportModel):
    """Aggregate counts over a batch of analyses."""

    scanned: int = 0
    safe: int = 0
    suspicious: int = 0
    dangerous: int = 0
    avg_phishing_score: float = 0.0
