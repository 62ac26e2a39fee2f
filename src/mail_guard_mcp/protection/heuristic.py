"""Heuristic scanner for message threat classification.

Scores a message by running a fixed sequence of independent checks over its
sender, subject, body, links and attachment filenames. Each check that fires
adds to an additive phishing score and may record a finding; the final score
is clamped to 10 and mapped to a threat level.

The scanner is a pure function of (message, config): it keeps no state
between calls, so a single instance can be shared across threads.
"""

from collections.abc import Iterable, Sequence

import structlog

from mail_guard_mcp.email.models import Attachment, Message
from mail_guard_mcp.protection import rules
from mail_guard_mcp.protection.models import (
    ScannedMessage,
    SecurityAnalysis,
    SecurityConfig,
    SenderReputation,
    ThreatLevel,
)

logger = structlog.get_logger()


def _contains_any(phrases: Iterable[str], content: str, subject: str) -> bool:
    return any(phrase in content or phrase in subject for phrase in phrases)


def _sender_reputation(sender: str, known_safe_senders: Sequence[str]) -> SenderReputation:
    """Classify the sender against the allow-list and the malformed-address heuristic."""
    tokens = sender.lower().split("<")
    tokens = [part for token in tokens for part in token.split(">")]
    safe = [s.lower() for s in known_safe_senders]

    if any(entry in token for entry in safe for token in tokens):
        return SenderReputation.KNOWN
    if any("@." in token and "@protonmail" not in token for token in tokens):
        return SenderReputation.SUSPICIOUS
    return SenderReputation.UNKNOWN


def _is_executable(attachment: Attachment, critical_threats: Sequence[str]) -> bool:
    filename = attachment.filename.lower()
    return any(filename.endswith(threat) for threat in critical_threats) or bool(
        rules.EXECUTABLE_ATTACHMENT_RE.search(filename)
    )


def extract_links(content: str) -> list[str]:
    """Extract domain-like tokens from text, deduplicated in first-seen order."""
    return list(dict.fromkeys(rules.LINK_RE.findall(content)))


def is_suspicious_tld(link: str) -> bool:
    match = rules.TLD_RE.search(link)
    if not match:
        return False
    return match.group(1).lower() in rules.SUSPICIOUS_TLDS


def is_ip_address(link: str) -> bool:
    return bool(rules.IPV4_RE.match(link.strip()))


def is_suspicious_link(link: str) -> bool:
    """Return True for shortener links, suspicious TLDs and bare IP addresses."""
    lower_link = link.lower()
    return (
        any(shortener in lower_link for shortener in rules.URL_SHORTENERS)
        or is_suspicious_tld(link)
        or is_ip_address(link)
    )


def analyze_message(message: Message, config: SecurityConfig) -> SecurityAnalysis:
    """Analyze a message and return its threat verdict.

    Missing fields are treated as empty, so the analysis never fails on
    partially fetched messages.

    Args:
        message: The message to analyze.
        config: Scanner configuration.

    Returns:
        A new SecurityAnalysis for the message.
    """
    reasons: list[str] = []
    attachment_threats: list[str] = []
    link_threats: list[str] = []
    score = 0

    body = message.body or ""
    subject_text = message.subject or ""
    sender = message.sender or ""
    attachments = message.attachments or []

    # Phrase checks look at body, subject and sender run together.
    content = (body + subject_text + sender).lower()
    subject = subject_text.lower()

    sender_reputation = _sender_reputation(sender, config.known_safe_senders)
    if sender_reputation is SenderReputation.KNOWN:
        reasons.append(rules.REASON_KNOWN_SENDER)

    critical_threats = [t.lower() for t in config.critical_threats]
    has_executable_attachment = any(_is_executable(a, critical_threats) for a in attachments)
    if has_executable_attachment:
        attachment_threats.extend(rules.EXECUTABLE_ATTACHMENT_THREATS)
        reasons.append(rules.REASON_EXECUTABLE_ATTACHMENT)
        score += rules.EXECUTABLE_ATTACHMENT_SCORE

    if any(is_suspicious_link(link) for link in extract_links(body + subject_text)):
        link_threats.append(rules.SUSPICIOUS_LINK_THREAT)
        reasons.append(rules.REASON_SUSPICIOUS_LINKS)
        score += rules.SUSPICIOUS_LINK_SCORE

    phishing_phrases = [*rules.PHISHING_PHRASES, *(k.lower() for k in config.phishing_keywords)]
    if _contains_any(phishing_phrases, content, subject):
        score += rules.PHISHING_PHRASE_SCORE

    if _contains_any(rules.CREDENTIAL_REQUEST_PHRASES, content, subject):
        link_threats.append(rules.CREDENTIAL_THEFT_THREAT)
        reasons.append(rules.REASON_CREDENTIAL_THEFT)
        score += rules.CREDENTIAL_REQUEST_SCORE

    suspicious_attachments = [
        f"Suspicious attachment: {a.filename}"
        for a in attachments
        if rules.SUSPICIOUS_ATTACHMENT_RE.search(a.filename)
    ]
    if suspicious_attachments:
        attachment_threats.append(rules.SUSPICIOUS_ATTACHMENTS_THREAT)
        attachment_threats.extend(suspicious_attachments)
        reasons.append(rules.REASON_SUSPICIOUS_ATTACHMENTS)
        score += rules.SUSPICIOUS_ATTACHMENT_SCORE

    if _contains_any(rules.KNOWN_THREAT_KEYWORDS, content, subject):
        reasons.append(rules.REASON_KNOWN_THREATS)
        score += rules.KNOWN_THREAT_SCORE

    if _contains_any(rules.URGENCY_PHRASES, content, subject):
        reasons.append(rules.REASON_URGENCY)
        score += rules.URGENCY_SCORE

    # The second disjunct cannot fire (the executable check always records a
    # reason) but is kept so verdicts match earlier releases exactly.
    if score >= rules.DANGEROUS_SCORE or (not reasons and has_executable_attachment):
        level = ThreatLevel.DANGEROUS
    elif score >= rules.SUSPICIOUS_SCORE or attachment_threats or link_threats:
        level = ThreatLevel.SUSPICIOUS
    else:
        level = ThreatLevel.SAFE

    logger.debug("Message analyzed", message_id=message.id, level=level.value, score=score)

    return SecurityAnalysis(
        level=level,
        reasons=reasons,
        phishing_score=min(score, rules.MAX_PHISHING_SCORE),
        attachment_threats=attachment_threats,
        link_threats=link_threats,
        sender_reputation=sender_reputation,
    )


class HeuristicScanner:
    """Rule-based scanner bound to a SecurityConfig."""

    def __init__(self, config: SecurityConfig | None = None) -> None:
        """Initialize scanner.

        Args:
            config: Scanner configuration. Defaults to an empty config, which
                uses only the built-in rules.
        """
        self._config = config or SecurityConfig()

    @property
    def config(self) -> SecurityConfig:
        return self._config

    def analyze_message(self, message: Message) -> SecurityAnalysis:
        """Analyze a single message."""
        return analyze_message(message, self._config)

    def get_scanned_messages(self, messages: Iterable[Message]) -> list[ScannedMessage]:
        """Attach a security analysis to each message."""
        return [
            ScannedMessage.model_validate(
                {**message.model_dump(), "security_analysis": self.analyze_message(message)}
            )
            for message in messages
        ]

    def get_threat_level_message_count(
        self, messages: Iterable[Message], level: ThreatLevel | str
    ) -> int:
        """Count messages whose analysis has exactly the given level."""
        wanted = ThreatLevel(level)
        return sum(1 for message in messages if self.analyze_message(message).level is wanted)
