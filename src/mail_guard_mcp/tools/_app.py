"""Shared FastMCP application instance."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from mail_guard_mcp.exceptions import ConfigError
from mail_guard_mcp.listener.service import ListenerService

logger = logging.getLogger(__name__)

_listener: ListenerService | None = None


def get_listener() -> ListenerService | None:
    """Return the background listener started with the server, if any."""
    return _listener


@asynccontextmanager
async def _lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Start the background listener when enabled in the configuration."""
    global _listener  # noqa: PLW0603

    from mail_guard_mcp.tools._service import create_listener, get_settings

    try:
        settings = get_settings()
    except ConfigError as e:
        logger.error("Background listener disabled: %s", e)
        settings = None

    if settings is None or not settings.listener.enabled:
        logger.info("Background listener not enabled")
        yield
        return

    try:
        listener = create_listener()
        await listener.start()
    except Exception:
        logger.exception("Background listener failed to start, tools remain available")
    else:
        _listener = listener

    try:
        yield
    finally:
        if _listener is not None:
            await _listener.stop()
            _listener = None


# Create the shared FastMCP server instance
mcp = FastMCP(name="mail-guard-mcp", lifespan=_lifespan)
