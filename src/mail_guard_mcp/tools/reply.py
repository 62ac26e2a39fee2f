"""Reply MCP tool."""

import json

from mail_guard_mcp.email.models import Message, OutgoingMail
from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import create_connector, create_smtp_connector, get_settings


def quote(message: Message, heading: str) -> str:
    """Render the original message below a separator heading."""
    date = message.date.isoformat() if message.date else ""
    return (
        f"--- {heading} ---\n"
        f"From: {message.sender or ''}\n"
        f"Date: {date}\n"
        f"Subject: {message.subject or ''}\n\n"
        f"{message.body or ''}"
    )


@mcp.tool(name="mail_access_reply")
@handle_tool_errors(sent=False)
def reply(
    message_id: str,
    content: str,
    quote_original: bool = False,
    folder: str | None = None,
) -> str:
    """Reply to the sender of a message.

    Args:
        message_id: Identifier of the message to reply to.
        content: Reply text.
        quote_original: Append the original message below the reply.
        folder: Folder containing the message (default: the safe inbox).
    """
    if not message_id.strip():
        return error_response("Invalid parameter: message_id must not be empty", sent=False)

    with create_connector() as connector:
        connector.select_folder(folder or get_settings().folders.safe_inbox)
        message = connector.get_message(message_id)

    if not message.sender:
        return error_response("Message has no sender to reply to", sent=False)

    text = content
    if quote_original:
        text = f"{content}\n\n{quote(message, 'Original Message')}"

    mail = OutgoingMail(
        to=[message.sender],
        subject=f"Re: {message.subject or ''}",
        text=text,
    )
    # Thread under the original Message-ID header when the server provided one
    thread_id = message.headers.get("message-id", message_id)

    with create_smtp_connector() as smtp:
        sent_id = smtp.reply_to(thread_id, mail)

    return json.dumps({"success": True, "sent": True, "messageId": sent_id})
