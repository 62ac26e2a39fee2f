"""SMTP connector for sending mail using smtplib."""

import logging
import re
import smtplib
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from types import TracebackType

from mail_guard_mcp.email.connectors.config import SMTPConfig
from mail_guard_mcp.email.models import OutgoingMail
from mail_guard_mcp.exceptions import NotConnectedError

logger = logging.getLogger(__name__)

_HEADER_INJECTION_RE = re.compile(r"[\r\n\0]")


def _validate_header_value(value: str) -> None:
    """Validate a string is safe from SMTP header injection.

    Raises:
        ValueError: If the value contains newline, carriage return, or null characters.
    """
    if _HEADER_INJECTION_RE.search(value):
        # SECURITY: never log the value, it may contain injection payloads
        logger.warning("Header injection attempt detected")
        raise ValueError("Value contains invalid characters (newline, carriage return, or null)")


class SMTPConnector:
    """Connector for sending mail via SMTP using smtplib."""

    def __init__(self, config: SMTPConfig) -> None:
        """Initialize SMTP connector.

        Args:
            config: SMTP server configuration.
        """
        self.config = config
        self._connection: smtplib.SMTP | smtplib.SMTP_SSL | None = None

    def connect(self) -> None:
        """Establish connection to SMTP server."""
        logger.debug(
            "Connecting to SMTP server (host=%s, port=%s, ssl=%s)",
            self.config.host,
            self.config.port,
            self.config.ssl,
        )
        if self.config.ssl:
            self._connection = smtplib.SMTP_SSL(self.config.host, self.config.port)
        else:
            self._connection = smtplib.SMTP(self.config.host, self.config.port)
            if self.config.starttls:
                self._connection.starttls()

        self._connection.login(
            self.config.username,
            self.config.password.get_secret_value(),
        )
        logger.info("SMTP connection established (host=%s)", self.config.host)

    def disconnect(self) -> None:
        """Close connection to SMTP server."""
        if self._connection:
            self._connection.quit()
            self._connection = None
            logger.info("SMTP connection closed")

    def __enter__(self) -> "SMTPConnector":
        """Enter context manager, connecting to the server."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager, disconnecting from the server."""
        self.disconnect()

    def build_message(self, mail: OutgoingMail) -> MIMEText:
        """Build a MIME message with header injection validation.

        Bcc recipients are left out of the headers; they only
        appear in the SMTP envelope.

        Raises:
            ValueError: If any header value contains injection characters.
        """
        for value in (
            self.config.from_address,
            *mail.to,
            *mail.cc,
            *mail.bcc,
            mail.subject,
            mail.reply_to or "",
            mail.in_reply_to or "",
            mail.references or "",
        ):
            _validate_header_value(value)

        msg = MIMEText(mail.text, "plain")
        msg["From"] = formataddr((self.config.from_name or "", self.config.from_address))
        msg["To"] = ", ".join(mail.to)
        msg["Subject"] = mail.subject
        msg["Message-ID"] = make_msgid()

        if mail.cc:
            msg["Cc"] = ", ".join(mail.cc)
        if mail.reply_to:
            msg["Reply-To"] = mail.reply_to
        if mail.in_reply_to:
            msg["In-Reply-To"] = mail.in_reply_to
        if mail.references:
            msg["References"] = mail.references

        return msg

    def send_mail(self, mail: OutgoingMail) -> str:
        """Send a message.

        Returns:
            The Message-ID header of the sent message.

        Raises:
            NotConnectedError: If not connected to SMTP server.
            smtplib.SMTPException: If sending fails.
        """
        if not self._connection:
            raise NotConnectedError()

        msg = self.build_message(mail)
        recipients = [*mail.to, *mail.cc, *mail.bcc]
        self._connection.sendmail(self.config.from_address, recipients, msg.as_string())
        logger.info("Email sent (recipients=%d)", len(recipients))
        return str(msg["Message-ID"])

    def reply_to(self, message_id: str, mail: OutgoingMail) -> str:
        """Send mail as a reply threaded under message_id."""
        reply = mail.model_copy(
            update={
                "reply_to": self.config.from_address,
                "in_reply_to": message_id,
                "references": message_id,
            }
        )
        return self.send_mail(reply)

    def forward_message(self, message_id: str, to: list[str], mail: OutgoingMail) -> str:
        """Forward mail to new recipients, referencing message_id."""
        forward = mail.model_copy(update={"to": to, "references": message_id})
        return self.send_mail(forward)
