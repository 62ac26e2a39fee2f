"""Triage MCP tool."""

import json

from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import handle_tool_errors
from mail_guard_mcp.tools._service import create_connector, create_runner


@mcp.tool(name="mail_security_triage")
@handle_tool_errors()
def triage_inbox() -> str:
    """Scan unread inbox messages and move each one by its verdict.

    Dangerous messages, and suspicious ones with a phishing score of 5 or
    more, go to quarantine. Other suspicious messages go to the safe inbox.
    Safe messages stay where they are.
    """
    with create_connector() as connector:
        report = create_runner(connector).run_pass()

    return json.dumps(
        {
            "success": True,
            "summary": report.summary.model_dump(by_alias=True, mode="json"),
            "counts": report.counts(),
            "outcomes": [
                {
                    "id": o.message_id,
                    "action": o.decision.action.value,
                    "level": o.analysis.level.value,
                    "phishingScore": o.analysis.phishing_score,
                    "destination": o.destination,
                    "moved": o.moved,
                    "error": o.error,
                }
                for o in report.outcomes
            ],
        }
    )
