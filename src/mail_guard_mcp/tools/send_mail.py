"""Send mail MCP tool."""

import json

from mail_guard_mcp.email.models import OutgoingMail
from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import create_smtp_connector


@mcp.tool(name="mail_access_send_mail")
@handle_tool_errors(sent=False)
def send_mail(
    to_recipients: list[str],
    subject: str,
    content: str,
    cc_recipients: list[str] | None = None,
    bcc_recipients: list[str] | None = None,
    reply_to_message_id: str | None = None,
) -> str:
    """Compose and send a new email.

    Args:
        to_recipients: Recipient addresses.
        subject: Subject line.
        content: Message text (plain text).
        cc_recipients: Optional CC addresses.
        bcc_recipients: Optional BCC addresses.
        reply_to_message_id: Message-ID this mail answers, for threading.
    """
    if not to_recipients:
        return error_response("Invalid parameter: to_recipients must not be empty", sent=False)

    mail = OutgoingMail(
        to=to_recipients,
        cc=cc_recipients or [],
        bcc=bcc_recipients or [],
        subject=subject,
        text=content,
        in_reply_to=reply_to_message_id,
        references=reply_to_message_id,
    )

    with create_smtp_connector() as smtp:
        sent_id = smtp.send_mail(mail)

    return json.dumps({"success": True, "sent": True, "messageId": sent_id})
