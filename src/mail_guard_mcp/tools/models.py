"""Input models for MCP tools that take structured arguments."""

from pydantic import BaseModel, ConfigDict, Field

from mail_guard_mcp.protection.models import ThreatLevel


class CheckSummaryInput(BaseModel):
    """Counters of a finished security check."""

    scanned: int = Field(default=0, ge=0)
    safe: int = Field(default=0, ge=0)
    quarantined: int = Field(default=0, ge=0)
    spam: int = Field(default=0, ge=0)
    trash: int = Field(default=0, ge=0)


class QuarantinedMessageInput(BaseModel):
    """One message the agent quarantined during a check."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    sender: str | None = Field(default=None, alias="from")
    subject: str | None = None
    threat_level: ThreatLevel = ThreatLevel.DANGEROUS
