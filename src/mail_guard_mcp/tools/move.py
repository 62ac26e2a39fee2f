"""Move MCP tool."""

import json

from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import get_settings, move_between


@mcp.tool(name="mail_access_move")
@handle_tool_errors(moved=False)
def move(message_id: str, folder_path: str, current_folder: str | None = None) -> str:
    """Move a message to another folder.

    Args:
        message_id: Identifier of the message.
        folder_path: Destination folder.
        current_folder: Folder containing the message (default: the safe inbox).
    """
    if not message_id.strip():
        return error_response("Invalid parameter: message_id must not be empty", moved=False)
    if not folder_path.strip():
        return error_response("Invalid parameter: folder_path must not be empty", moved=False)

    source = current_folder or get_settings().folders.safe_inbox
    move_between(source, message_id, folder_path)
    return json.dumps({"success": True, "moved": True, "folder": folder_path})
