"""Quarantine MCP tool."""

import json
import logging
import time

from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import get_settings, move_between

logger = logging.getLogger(__name__)


@mcp.tool(name="mail_security_quarantine")
@handle_tool_errors(quarantined=False)
def quarantine(message_id: str, reason: str | None = None, current_folder: str | None = None) -> str:
    """Move a dangerous message to the quarantine folder.

    Args:
        message_id: Identifier of the message.
        reason: Why the message is quarantined, recorded in the server log.
        current_folder: Folder containing the message (default: the inbox).
    """
    if not message_id.strip():
        return error_response(
            "Invalid parameter: message_id must not be empty", quarantined=False
        )

    folders = get_settings().folders
    move_between(current_folder or folders.inbox, message_id, folders.quarantine)
    logger.warning("Quarantined message %s: %s", message_id, reason or "no reason given")

    return json.dumps(
        {
            "success": True,
            "quarantined": True,
            "quarantineId": f"{message_id}_{int(time.time() * 1000)}",
        }
    )
