"""Get mail MCP tool."""

import json
from typing import Literal

from mail_guard_mcp.email.models import SearchOptions
from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import create_connector, get_settings

MAX_COUNT = 100


@mcp.tool(name="mail_access_get_mail")
@handle_tool_errors()
def get_mail(
    count: int = 10,
    offset: int = 0,
    search_phrase: str | None = None,
    filter: Literal["unread", "read", "both"] = "unread",
) -> str:
    """List messages in the safe inbox with pagination and filtering.

    Args:
        count: Maximum number of messages to return (1-100, default: 10).
        offset: Number of messages to skip (default: 0).
        search_phrase: Only return messages whose subject contains this phrase.
        filter: Read state to include: unread, read or both (default: unread).
    """
    if not 1 <= count <= MAX_COUNT:
        return error_response(f"Invalid parameter: count must be between 1 and {MAX_COUNT}")
    if offset < 0:
        return error_response("Invalid parameter: offset must be a non-negative integer")

    folder = get_settings().folders.safe_inbox
    with create_connector() as connector:
        connector.select_folder(folder)
        messages = connector.list_messages(
            SearchOptions(count=count, offset=offset, search_phrase=search_phrase, filter=filter)
        )

    return json.dumps(
        {
            "messages": [
                {
                    "id": msg.id,
                    "from": msg.sender,
                    "subject": msg.subject,
                    "date": msg.date.isoformat() if msg.date else None,
                    "preview": msg.preview,
                    "isRead": msg.is_seen,
                }
                for msg in messages
            ],
            "total": len(messages),
        }
    )
