"""Background listener that runs triage passes on a fixed interval.

The loop is an asyncio task. Transport calls are blocking (imap-tools), so
each pass runs in a worker thread while the event loop stays responsive.
"""

import asyncio
import contextlib
import threading
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

import structlog

from mail_guard_mcp.listener.models import ListenerStatus
from mail_guard_mcp.triage.models import TriageReport
from mail_guard_mcp.triage.runner import TriageRunner

logger = structlog.get_logger()

DEFAULT_POLL_INTERVAL = 30.0

SleepFn = Callable[[float], Awaitable[None]]
ClockFn = Callable[[], datetime]
T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ListenerService:
    """Cancellable repeating task that runs one triage pass per tick."""

    def __init__(
        self,
        runner: TriageRunner,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        *,
        sleep: SleepFn = asyncio.sleep,
        clock: ClockFn = _utcnow,
    ) -> None:
        """Initialize the listener.

        Args:
            runner: Runner executing the triage passes.
            poll_interval: Seconds to wait between passes.
            sleep: Awaitable sleep used between passes. Tests inject a fake.
            clock: Returns the current time for last_check. Tests inject a fake.
        """
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self._runner = runner
        self._poll_interval = poll_interval
        self._sleep = sleep
        self._clock = clock
        self._task: asyncio.Task[None] | None = None
        self._running = False
        self._in_flight = False
        # imap-tools connections are not thread-safe; one worker thread at a time
        self._connection_lock = threading.Lock()
        self._last_check: datetime | None = None
        self._last_report: TriageReport | None = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def last_check(self) -> datetime | None:
        return self._last_check

    @property
    def last_report(self) -> TriageReport | None:
        return self._last_report

    async def start(self) -> None:
        """Connect, run a first pass, then schedule the repeating task.

        Raises:
            Exception: If connecting or the first pass fails; the listener is
                not started in that case.
        """
        if self._running:
            logger.warning("Listener already running")
            return

        logger.info("Starting listener", poll_interval=self._poll_interval)
        try:
            await self._call(self._runner.connector.connect)
            await self._run_pass()
        except Exception:
            logger.exception("Failed to start listener")
            raise

        self._running = True
        self._task = asyncio.create_task(self._poll_loop())

    async def stop(self) -> None:
        """Cancel the repeating task and disconnect.

        A pass already running in a worker thread is left to finish before
        the connection is closed.
        """
        logger.info("Stopping listener")
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

        self._running = False

        try:
            await self._call(self._runner.connector.disconnect)
        except Exception:
            logger.exception("Error during disconnect")

    async def tick(self) -> TriageReport | None:
        """Run one pass unless another is still in flight.

        Errors are logged and swallowed so the loop retries on the next tick.

        Returns:
            The pass report, or None if the pass was skipped or failed.
        """
        if self._in_flight:
            logger.warning("Previous triage pass still running, skipping tick")
            return None
        try:
            return await self._run_pass()
        except Exception:
            logger.exception("Error during background triage pass")
            return None

    async def get_status(self) -> ListenerStatus:
        """Return the listener state with inbox and quarantine counters.

        Folder counters are only fetched while the listener is running. A
        call made during a pass waits for the pass to finish.
        """
        if not self._running:
            return ListenerStatus(running=False, last_check=self._last_check)

        folders = self._runner.folders
        connector = self._runner.connector
        inbox = await self._call(connector.get_folder_stats, folders.inbox)
        quarantine = await self._call(connector.get_folder_stats, folders.quarantine)
        return ListenerStatus(
            running=True,
            last_check=self._last_check,
            unread_messages=inbox.unread,
            total_messages=inbox.total,
            quarantine_messages=quarantine.total,
        )

    async def _call(self, fn: Callable[..., T], *args: Any) -> T:
        """Run a blocking connector call in a worker thread, one call at a time.

        The lock is held by the worker thread, so a cancelled await does not
        release the connection while the call is still running.
        """

        def locked() -> T:
            with self._connection_lock:
                return fn(*args)

        return await asyncio.to_thread(locked)

    async def _run_pass(self) -> TriageReport:
        self._in_flight = True
        try:
            report = await self._call(self._runner.run_pass)
        finally:
            self._in_flight = False

        self._last_report = report
        self._last_check = self._clock()
        logger.info(
            "Background triage pass completed",
            scanned=report.summary.scanned,
            **report.counts(),
        )
        return report

    async def _poll_loop(self) -> None:
        while True:
            await self._sleep(self._poll_interval)
            await self.tick()


async def run_until_cancelled(listener: ListenerService) -> None:
    """Start the listener and keep it running until this coroutine is cancelled."""
    await listener.start()
    try:
        await asyncio.Event().wait()
    finally:
        await listener.stop()
