"""Background polling loop driving triage passes."""

from mail_guard_mcp.listener.models import ListenerConfig, ListenerStatus
from mail_guard_mcp.listener.service import ListenerService, run_until_cancelled

__all__ = ["ListenerConfig", "ListenerService", "ListenerStatus", "run_until_cancelled"]
