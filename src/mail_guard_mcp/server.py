"""MCP server entry point for mail-guard-mcp."""

from mail_guard_mcp.cli import configure_logging
from mail_guard_mcp.tools import mcp


def main() -> None:
    """Run the MCP server over stdio."""
    configure_logging()
    mcp.run()


if __name__ == "__main__":
    main()
