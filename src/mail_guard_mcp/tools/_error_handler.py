"""Common error handling for MCP tools.

Tools never raise to the MCP client. Failures are returned as a JSON object
with ``success: false``, the tool's failure fields and an ``error`` message.
"""

import json
import logging
import smtplib
from collections.abc import Callable
from functools import wraps
from typing import Any

from imap_tools import ImapToolsError

from mail_guard_mcp.exceptions import ConfigError, MessageNotFoundError

logger = logging.getLogger(__name__)


def error_response(message: str, **fields: Any) -> str:
    """Serialize a failure payload."""
    return json.dumps({"success": False, **fields, "error": message})


def _describe(e: Exception, func_name: str) -> str:
    if isinstance(e, ConfigError):
        return f"Configuration error: {e}"
    if isinstance(e, MessageNotFoundError):
        return str(e)
    if isinstance(e, ImapToolsError):
        return f"Email server error: {e}"
    if isinstance(e, smtplib.SMTPAuthenticationError):
        return "Email server authentication failed. Check your credentials."
    if isinstance(e, smtplib.SMTPException):
        return f"Error sending email: {e}"
    if isinstance(e, ValueError):
        return f"Invalid input: {e}"
    if isinstance(e, RuntimeError):
        return f"Error: {e}"
    if isinstance(e, TimeoutError):
        return "Connection timed out. The email server did not respond."
    if isinstance(e, ConnectionError):
        return f"Could not connect to email server: {e}"
    if isinstance(e, OSError):
        return f"Network error: {e}"
    logger.exception("Unexpected error in tool %s", func_name)
    return "An unexpected error occurred. Check the server logs for details."


def handle_tool_errors(**failure_fields: Any) -> Callable[[Callable[..., str]], Callable[..., str]]:
    """Wrap an MCP tool function to turn exceptions into failure payloads.

    Args:
        **failure_fields: Extra fields included in the failure payload
            (e.g. ``moved=False``).
    """

    def decorator(func: Callable[..., str]) -> Callable[..., str]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> str:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error("Error in %s: %s", func.__name__, e.__class__.__name__)
                return error_response(_describe(e, func.__name__), **failure_fields)

        return wrapper

    return decorator
