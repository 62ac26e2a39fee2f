"""MCP tools exposed by the mail-guard server."""

# isort: skip_file

from mail_guard_mcp.tools._app import mcp

# Import tool modules to register them on the shared FastMCP instance
from mail_guard_mcp.tools import archive as _archive  # noqa: F401
from mail_guard_mcp.tools import finish_check as _finish_check  # noqa: F401
from mail_guard_mcp.tools import forward as _forward  # noqa: F401
from mail_guard_mcp.tools import get_mail as _get_mail  # noqa: F401
from mail_guard_mcp.tools import mark_safe as _mark_safe  # noqa: F401
from mail_guard_mcp.tools import move as _move  # noqa: F401
from mail_guard_mcp.tools import quarantine as _quarantine  # noqa: F401
from mail_guard_mcp.tools import read_mail as _read_mail  # noqa: F401
from mail_guard_mcp.tools import reply as _reply  # noqa: F401
from mail_guard_mcp.tools import scan_mail as _scan_mail  # noqa: F401
from mail_guard_mcp.tools import send_mail as _send_mail  # noqa: F401
from mail_guard_mcp.tools import status as _status  # noqa: F401
from mail_guard_mcp.tools import trash as _trash  # noqa: F401
from mail_guard_mcp.tools import triage_inbox as _triage_inbox  # noqa: F401

__all__ = ["mcp"]
