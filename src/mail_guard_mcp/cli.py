"""CLI entry point for mail-guard-mcp."""

import argparse
import asyncio
import logging
import os
import sys

import structlog

LOG_LEVEL_ENV = "MGUARD_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def configure_logging(level: str | None = None) -> None:
    """Send stdlib and structlog output to stderr at the given level.

    stdout is reserved for the stdio MCP transport and for command output.
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="mguard",
        description="Mail Guard MCP - heuristic mail scanning, triage and quarantine",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Log level for stderr output (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("serve", help="Run the MCP server over stdio")
    scan_parser = subparsers.add_parser("scan", help="Print a scan report for the inbox as JSON")
    scan_parser.add_argument(
        "--all", action="store_true", help="Scan read messages too, not just unread ones"
    )
    scan_parser.add_argument(
        "--count", type=int, default=100, help="Maximum number of messages to scan"
    )
    subparsers.add_parser("triage", help="Run one triage pass and print the report")
    subparsers.add_parser("listen", help="Run the polling loop until interrupted")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    from mail_guard_mcp.exceptions import ConfigError

    try:
        if args.command == "serve":
            from mail_guard_mcp.tools import mcp

            mcp.run()
            return 0
        if args.command == "scan":
            return _handle_scan(scan_all=args.all, count=args.count)
        if args.command == "triage":
            return _handle_triage()
        if args.command == "listen":
            return _handle_listen()
    except ConfigError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    return 1


def _handle_scan(scan_all: bool, count: int) -> int:
    """Handle scan subcommand."""
    from mail_guard_mcp.email.models import SearchOptions
    from mail_guard_mcp.tools._service import create_connector, get_protection, get_settings

    with create_connector() as connector:
        connector.select_folder(get_settings().folders.inbox)
        messages = connector.list_messages(
            SearchOptions(count=count, filter="both" if scan_all else "unread")
        )

    report = get_protection().scan(messages)
    print(report.model_dump_json(by_alias=True, indent=2))
    return 0


def _handle_triage() -> int:
    """Handle triage subcommand."""
    from mail_guard_mcp.tools._service import create_connector, create_runner

    with create_connector() as connector:
        report = create_runner(connector).run_pass()

    print(report.model_dump_json(by_alias=True, indent=2))
    return 1 if report.failed else 0


def _handle_listen() -> int:
    """Handle listen subcommand."""
    from mail_guard_mcp.listener.service import run_until_cancelled
    from mail_guard_mcp.tools._service import create_listener

    listener = create_listener()
    print("Listening for new mail (Ctrl+C to stop)...", file=sys.stderr)
    try:
        asyncio.run(run_until_cancelled(listener))
    except KeyboardInterrupt:
        print("✓ Listener stopped", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
