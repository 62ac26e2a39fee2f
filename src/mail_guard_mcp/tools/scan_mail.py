"""Scan mail MCP tool."""

from mail_guard_mcp.email.models import SearchOptions
from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import error_response, handle_tool_errors
from mail_guard_mcp.tools._service import create_connector, get_protection, get_settings

MAX_COUNT = 500


@mcp.tool(name="mail_security_scan_mail")
@handle_tool_errors()
def scan_mail(scan_all: bool = False, count: int = 100, folder: str | None = None) -> str:
    """Scan inbox messages for phishing, malicious attachments and suspicious links.

    Messages are only analyzed, never moved. Use mail_security_triage to
    scan and move them in one step.

    Args:
        scan_all: Scan read messages too, not just unread ones.
        count: Maximum number of messages to scan (default: 100).
        folder: Folder to scan (default: the inbox).
    """
    if not 1 <= count <= MAX_COUNT:
        return error_response(f"Invalid parameter: count must be between 1 and {MAX_COUNT}")

    with create_connector() as connector:
        connector.select_folder(folder or get_settings().folders.inbox)
        messages = connector.list_messages(
            SearchOptions(count=count, filter="both" if scan_all else "unread")
        )

    report = get_protection().scan(messages)
    return report.model_dump_json(by_alias=True)
