"""Listener status MCP tool."""

import json

from mail_guard_mcp.listener.models import ListenerStatus
from mail_guard_mcp.tools._app import get_listener, mcp


@mcp.tool(name="mail_security_status")
async def status() -> str:
    """Report whether the background listener is running and its folder counters."""
    listener = get_listener()
    if listener is None:
        return ListenerStatus(running=False).model_dump_json(by_alias=True)
    try:
        result = await listener.get_status()
    except Exception as e:
        return json.dumps({"success": False, "running": listener.running, "error": str(e)})
    return result.model_dump_json(by_alias=True)
