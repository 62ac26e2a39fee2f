"""Forward MCP tool."""

import json

from mail_guard_mcp.email.models import OutgoingMail
from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import create_connector, create_smtp_connector, get_settings
from mail_guard_mcp.tools.reply import quote


@mcp.tool(name="mail_access_forward")
@handle_tool_errors(sent=False)
def forward(
    message_id: str,
    to_recipients: list[str],
    cc_recipients: list[str] | None = None,
    bcc_recipients: list[str] | None = None,
    content: str | None = None,
    folder: str | None = None,
) -> str:
    """Forward a message to other recipients.

    Args:
        message_id: Identifier of the message to forward.
        to_recipients: Recipient addresses.
        cc_recipients: Optional CC addresses.
        bcc_recipients: Optional BCC addresses.
        content: Text to send instead of the quoted original.
        folder: Folder containing the message (default: the safe inbox).
    """
    if not to_recipients:
        return error_response("Invalid parameter: to_recipients must not be empty", sent=False)

    with create_connector() as connector:
        connector.select_folder(folder or get_settings().folders.safe_inbox)
        message = connector.get_message(message_id)

    mail = OutgoingMail(
        to=to_recipients,
        cc=cc_recipients or [],
        bcc=bcc_recipients or [],
        subject=f"Fwd: {message.subject or ''}",
        text=content or quote(message, "Forwarded Message"),
    )

    with create_smtp_connector() as smtp:
        sent_id = smtp.forward_message(
            message.headers.get("message-id", message_id), to_recipients, mail
        )

    return json.dumps({"success": True, "sent": True, "messageId": sent_id})
