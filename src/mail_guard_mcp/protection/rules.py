"""Built-in heuristic tables used by the security scanner.

Kept as plain data so they can be reviewed and enumerated independently of
the scoring code.
"""

import re

# Attachments ending in one of these extensions are treated as executable.
EXECUTABLE_EXTENSIONS: tuple[str, ...] = ("exe", "scr", "bat", "js", "vbs", "ps1", "sh", "jar")

EXECUTABLE_ATTACHMENT_RE = re.compile(r"\.(" + "|".join(EXECUTABLE_EXTENSIONS) + r")\Z")

# Office documents and archives commonly used to smuggle macros or payloads.
SUSPICIOUS_ATTACHMENT_EXTENSIONS: tuple[str, ...] = (
    "pdf",
    "doc",
    "docx",
    "xls",
    "xlsx",
    "ppt",
    "pptx",
    "zip",
    "rar",
    "7z",
    "tar",
    "tgz",
)

SUSPICIOUS_ATTACHMENT_RE = re.compile(
    r"\.(" + "|".join(SUSPICIOUS_ATTACHMENT_EXTENSIONS) + r")\Z",
    re.IGNORECASE,
)

URL_SHORTENERS: tuple[str, ...] = ("bit.ly", "tinyurl", "t.co", "lnkd.in", "goo.gl")

SUSPICIOUS_TLDS: frozenset[str] = frozenset(
    {
        "xyz",
        "top",
        "vip",
        "ml",
        "ga",
        "cf",
        "tk",
        "co",
        "ws",
        "gq",
        "pw",
        "cc",
        "me",
        "ro",
        "so",
        "we",
        "xc",
        "za",
    }
)

# Domain-like tokens: label.tld with optional port and path.
LINK_RE = re.compile(r"[a-zA-Z0-9-]+\.[a-zA-Z]{2,}(?::\d+)?(?:/[^\s]*)?")
TLD_RE = re.compile(r"\.([a-z]{2,})\Z", re.IGNORECASE)
IPV4_RE = re.compile(r"^(?:[0-9]{1,3}\.){3}[0-9]{1,3}(?::[0-9]{1,5})?\Z")

PHISHING_PHRASES: tuple[str, ...] = (
    "urgent",
    "immediate action",
    "verify account",
    "password",
    "security alert",
    "your account has been compromised",
    "click here to verify",
    "update your information",
    "confirm your identity",
    "act now",
    "limited time",
    "suspended account",
    "security breach",
    "unusual activity",
    "click to unlock",
    "verify your details",
    "verify your account",
    "verify your identity",
)

CREDENTIAL_REQUEST_PHRASES: tuple[str, ...] = (
    "password",
    "verify account",
    "update password",
    "change password",
    "confirm password",
    "reset password",
    "account verification",
    "verify your account",
    "verify identity",
    "click to verify",
    "account with click",
    "update with click",
)

KNOWN_THREAT_KEYWORDS: tuple[str, ...] = (
    "phishing",
    "malware",
    "virus",
    "trojan",
    "ransomware",
    "spyware",
    "adware",
)

URGENCY_PHRASES: tuple[str, ...] = (
    "immediately",
    "right now",
    "as soon as possible",
    "must act",
    "urgent",
    "critical",
    "important",
    "deadline",
    "final notice",
)

# Score contributed by each check.
EXECUTABLE_ATTACHMENT_SCORE = 6
SUSPICIOUS_LINK_SCORE = 5
PHISHING_PHRASE_SCORE = 4
CREDENTIAL_REQUEST_SCORE = 5
SUSPICIOUS_ATTACHMENT_SCORE = 3
KNOWN_THREAT_SCORE = 2
URGENCY_SCORE = 1

MAX_PHISHING_SCORE = 10
DANGEROUS_SCORE = 8
SUSPICIOUS_SCORE = 5

# Finding texts reported in SecurityAnalysis.
REASON_KNOWN_SENDER = "Message from known safe sender"
REASON_EXECUTABLE_ATTACHMENT = "High risk: Executable attachment detected"
REASON_SUSPICIOUS_LINKS = "High risk: Suspicious links detected"
REASON_CREDENTIAL_THEFT = "Critical: Credential theft attempt detected"
REASON_SUSPICIOUS_ATTACHMENTS = "Warning: Suspicious attachments detected"
REASON_KNOWN_THREATS = "Warning: Known threat patterns detected"
REASON_URGENCY = "Warning: Urgent language detected"

EXECUTABLE_ATTACHMENT_THREATS: tuple[str, ...] = (
    "Critical threats: Executable attachments detected",
    "Blocked files: .exe, .scr, .bat, .js, .vbs, .ps1, .sh, .jar",
)
SUSPICIOUS_LINK_THREAT = (
    "Suspicious links detected: URL shorteners, suspicious TLDs, IP addresses"
)
CREDENTIAL_THEFT_THREAT = (
    "Credential theft attempts detected: Password verification, account updates"
)
SUSPICIOUS_ATTACHMENTS_THREAT = "Suspicious attachments: Office documents, archives"
