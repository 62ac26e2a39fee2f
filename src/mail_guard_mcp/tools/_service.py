"""Shared factories for tools: settings, connectors and scanners."""

from functools import lru_cache

from mail_guard_mcp.config import Settings, get_settings_eager
from mail_guard_mcp.email.connectors.imap import IMAPConnector
from mail_guard_mcp.email.connectors.smtp import SMTPConnector
from mail_guard_mcp.listener.service import ListenerService
from mail_guard_mcp.protection.heuristic import HeuristicScanner
from mail_guard_mcp.protection.service import ProtectionService
from mail_guard_mcp.triage.runner import TriageRunner


@lru_cache
def get_settings() -> Settings:
    """Load and cache the application settings.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    return get_settings_eager()


@lru_cache
def get_scanner() -> HeuristicScanner:
    """Get the scanner singleton built from the security settings."""
    return HeuristicScanner(get_settings().security)


def get_protection() -> ProtectionService:
    return ProtectionService(scanner=get_scanner())


def create_connector() -> IMAPConnector:
    """Create an unconnected IMAP connector.

    Raises:
        ConfigError: If IMAP is not configured.
    """
    return IMAPConnector(get_settings().require_imap())


def create_smtp_connector() -> SMTPConnector:
    """Create an unconnected SMTP connector.

    Raises:
        ConfigError: If SMTP is not configured.
    """
    return SMTPConnector(get_settings().require_smtp())


def create_runner(connector: IMAPConnector) -> TriageRunner:
    settings = get_settings()
    return TriageRunner(
        connector,
        get_scanner(),
        folders=settings.folders,
        batch_size=settings.listener.batch_size,
    )


def create_listener() -> ListenerService:
    """Create a background listener with its own IMAP connection."""
    settings = get_settings()
    return ListenerService(
        create_runner(create_connector()),
        poll_interval=settings.listener.poll_interval,
    )


def move_between(source: str, message_id: str, destination: str) -> None:
    """Move one message from source to destination over a fresh connection."""
    with create_connector() as connector:
        connector.select_folder(source)
        connector.move_message(message_id, destination)
