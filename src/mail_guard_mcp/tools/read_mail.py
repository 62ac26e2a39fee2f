"""Read mail MCP tool."""

import json

from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import create_connector, get_settings


@mcp.tool(name="mail_access_read_mail")
@handle_tool_errors()
def read_mail(message_id: str, folder: str | None = None) -> str:
    """Read a specific message.

    Args:
        message_id: Identifier of the message.
        folder: Folder containing the message (default: the safe inbox).
    """
    if not message_id.strip():
        return error_response("Invalid parameter: message_id must not be empty")

    with create_connector() as connector:
        connector.select_folder(folder or get_settings().folders.safe_inbox)
        message = connector.get_message(message_id)

    return json.dumps(
        {
            "from": message.sender,
            "to": message.recipients(),
            "subject": message.subject,
            "date": message.date.isoformat() if message.date else None,
            "body": message.body or "",
            "attachments": [
                {"filename": a.filename, "contentType": a.content_type, "size": a.size}
                for a in message.attachments or []
            ],
        }
    )
