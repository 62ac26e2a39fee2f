"""Listener-related data models."""

from datetime import datetime

from pydantic import BaseModel, Field

from mail_guard_mcp.protection.models import ReportModel


class ListenerConfig(BaseModel):
    """Configuration for the background polling loop.

    Attributes:
        enabled: Start the loop together with the MCP server.
        poll_interval: Seconds between triage passes.
        batch_size: Maximum unread messages handled per pass.
    """

    enabled: bool = False
    poll_interval: float = Field(default=30.0, gt=0, description="Seconds between passes")
    batch_size: int = Field(default=50, ge=1, le=500)


class ListenerStatus(ReportModel):
    """Snapshot of the listener state and folder counters."""

    running: bool
    last_check: datetime | None = None
    unread_messages: int | None = None
    total_messages: int | None = None
    quarantine_messages: int | None = None
