"""Finish check MCP tool."""

import json
import logging

from mail_guard_mcp.email.models import OutgoingMail
from mail_guard_mcp.tools._app import mcp
from mail_guard_mcp.tools._error_handler import handle_tool_errors
from mail_guard_mcp.tools._service import create_smtp_connector, get_settings
from mail_guard_mcp.tools.models import CheckSummaryInput, QuarantinedMessageInput

logger = logging.getLogger(__name__)


def build_report(
    summary: CheckSummaryInput, quarantined: list[QuarantinedMessageInput]
) -> OutgoingMail | None:
    """Build the quarantine report mail, or None when no address is configured."""
    recipient = get_settings().notifications.quarantine_report_to
    if not recipient:
        return None

    lines = [
        "Security check completed.",
        "",
        f"Scanned: {summary.scanned}",
        f"Safe: {summary.safe}",
        f"Quarantined: {summary.quarantined}",
        f"Spam: {summary.spam}",
        f"Trash: {summary.trash}",
        "",
        "Quarantined messages:",
    ]
    for msg in quarantined:
        lines.append(
            f"- [{msg.threat_level.value}] {msg.subject or 'No Subject'} "
            f"(from {msg.sender or 'unknown'}, id {msg.id})"
        )

    return OutgoingMail(
        to=[recipient],
        subject=f"Security check: {len(quarantined)} message(s) quarantined",
        text="\n".join(lines),
    )


@mcp.tool(name="mail_security_finish_check")
@handle_tool_errors(alerted=False, reportSent=False)
def finish_check(
    summary: CheckSummaryInput,
    quarantined_messages: list[QuarantinedMessageInput] | None = None,
    send_report: bool = True,
) -> str:
    """Complete a security check and report quarantined messages.

    When messages were quarantined and send_report is set, the check raises
    an alert, and a report mail is sent if
    notifications.quarantine_report_to is configured.

    Args:
        summary: Counters of the finished check.
        quarantined_messages: Messages quarantined during the check.
        send_report: Alert about quarantined messages (default: true).
    """
    quarantined = quarantined_messages or []
    logger.info(
        "Security check finished: %d scanned, %d quarantined",
        summary.scanned,
        summary.quarantined,
    )
    if not quarantined or not send_report:
        return json.dumps({"success": True, "alerted": False, "reportSent": False})

    report = build_report(summary, quarantined)
    if report is None:
        logger.warning(
            "%d message(s) quarantined but no report address is configured", len(quarantined)
        )
        return json.dumps({"success": True, "alerted": True, "reportSent": False})

    with create_smtp_connector() as smtp:
        smtp.send_mail(report)

    return json.dumps({"success": True, "alerted": True, "reportSent": True})
