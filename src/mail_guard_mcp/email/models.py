"""Email data models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SEEN_FLAG = "\\Seen"

# Length of the body excerpt shown in list views
PREVIEW_LENGTH = 200


class Folder(BaseModel):
    """IMAP folder/mailbox."""

    name: str
    delimiter: str = "/"
    flags: list[str] = []


class FolderStats(BaseModel):
    """Message counters for a single folder."""

    name: str
    unread: int = 0
    total: int = 0


class Attachment(BaseModel):
    """Attachment metadata (content not included)."""

    id: str | None = None
    filename: str = ""
    content_type: str | None = None
    size: int | None = None
    disposition: str | None = None
    content_id: str | None = None

    @field_validator("filename", mode="before")
    @classmethod
    def _none_filename_is_empty(cls, v: str | None) -> str:
        return v or ""


class Message(BaseModel):
    """A message retrieved from a mail folder.

    ``sender`` is serialized as ``from``. Every field besides ``id`` is
    optional so that partially fetched or malformed messages can still be
    scanned.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    uid: int | None = None
    sender: str | None = Field(default=None, alias="from")
    to: str | None = None
    subject: str | None = None
    date: datetime | None = None
    size: int | None = None
    flags: list[str] = []
    preview: str = ""
    body: str | None = None
    headers: dict[str, str] = {}
    attachments: list[Attachment] | None = None

    @property
    def is_seen(self) -> bool:
        """Return True if the message carries the \\Seen flag."""
        return SEEN_FLAG in self.flags

    def recipients(self) -> list[str]:
        """Split the ``to`` header into individual addresses."""
        if not self.to:
            return []
        return [addr.strip() for addr in self.to.split(",") if addr.strip()]


class SearchOptions(BaseModel):
    """Criteria for listing messages in the selected folder."""

    count: int = Field(default=50, ge=1)
    offset: int = Field(default=0, ge=0)
    search_phrase: str | None = None
    filter: Literal["unread", "read", "both"] = "both"


class OutgoingMail(BaseModel):
    """A message to be sent over SMTP."""

    to: list[str]
    cc: list[str] = []
    bcc: list[str] = []
    subject: str
    text: str
    reply_to: str | None = None
    in_reply_to: str | None = None
    references: str | None = None

    @field_validator("to")
    @classmethod
    def _require_recipient(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one recipient is required")
        return v
