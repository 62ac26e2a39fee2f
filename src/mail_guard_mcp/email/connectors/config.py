"""Connector configuration models."""

from pydantic import BaseModel, Field, SecretStr


class IMAPConfig(BaseModel):
    """IMAP server configuration.

    Defaults point at a local mail bridge (e.g. Proton Mail Bridge), which
    listens on 127.0.0.1:1143 and upgrades the connection with STARTTLS.
    """

    host: str = "127.0.0.1"
    port: int = Field(default=1143, ge=1, le=65535)
    username: str
    password: SecretStr
    ssl: bool = False  # True = implicit TLS (e.g. port 993)
    starttls: bool = True  # ignored when ssl is True


class SMTPConfig(BaseModel):
    """SMTP server configuration."""

    host: str = "127.0.0.1"
    port: int = Field(default=1025, ge=1, le=65535)
    username: str
    password: SecretStr
    ssl: bool = False  # True = implicit TLS (e.g. port 465)
    starttls: bool = True  # ignored when ssl is True
    from_address: str = Field(..., min_length=1)
    from_name: str | None = None
