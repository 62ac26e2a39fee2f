"""Trash MCP tool."""

import json

from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import get_settings, move_between


@mcp.tool(name="mail_security_trash")
@handle_tool_errors(deleted=False)
def trash(message_id: str, current_folder: str | None = None) -> str:
    """Move a message to the trash folder.

    Args:
        message_id: Identifier of the message.
        current_folder: Folder containing the message (default: the inbox).
    """
    if not message_id.strip():
        return error_response("Invalid parameter: message_id must not be empty", deleted=False)

    folders = get_settings().folders
    move_between(current_folder or folders.inbox, message_id, folders.trash)
    return json.dumps({"success": True, "deleted": True, "folder": folders.trash})
