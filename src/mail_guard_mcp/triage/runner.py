"""Single triage pass over the unread messages of the inbox."""

import logging

from mail_guard_mcp.email.connectors.base import BaseConnector
from mail_guard_mcp.email.models import SearchOptions
from mail_guard_mcp.protection.heuristic import HeuristicScanner
from mail_guard_mcp.protection.service import summarize
from mail_guard_mcp.triage.models import FolderConfig, TriageAction, TriageOutcome, TriageReport
from mail_guard_mcp.triage.policy import destination_folder, triage

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 50


class TriageRunner:
    """Scans unread inbox messages and moves them according to the triage policy."""

    def __init__(
        self,
        connector: BaseConnector,
        scanner: HeuristicScanner,
        folders: FolderConfig | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        """Initialize the runner.

        Args:
            connector: Connected mail transport.
            scanner: Scanner producing the verdicts.
            folders: Folder names. Defaults to FolderConfig().
            batch_size: Maximum number of unread messages handled per pass.
        """
        self._connector = connector
        self._scanner = scanner
        self._folders = folders or FolderConfig()
        self._batch_size = batch_size

    @property
    def connector(self) -> BaseConnector:
        return self._connector

    @property
    def folders(self) -> FolderConfig:
        return self._folders

    def run_pass(self) -> TriageReport:
        """Run one scan-and-triage pass over the inbox.

        Messages are handled one at a time in listing order. A failed move is
        recorded on that message's outcome and the pass carries on with the
        next message.

        Returns:
            TriageReport with one outcome per listed message.

        Raises:
            Exception: Whatever the transport raises while selecting the
                inbox or listing messages.
        """
        self._connector.select_folder(self._folders.inbox)
        messages = self._connector.list_messages(
            SearchOptions(count=self._batch_size, filter="unread")
        )
        logger.info("Found %d unread messages in %s", len(messages), self._folders.inbox)

        outcomes: list[TriageOutcome] = []
        for message in messages:
            analysis = self._scanner.analyze_message(message)
            decision = triage(analysis)
            destination = destination_folder(decision.action, self._folders)

            moved = False
            error: str | None = None
            if destination is not None:
                try:
                    self._connector.move_message(message.id, destination)
                    moved = True
                except Exception as e:
                    error = str(e) or e.__class__.__name__
                    logger.exception(
                        "Failed to move message %s to %s", message.id, destination
                    )

            if decision.action is TriageAction.QUARANTINE and moved:
                logger.warning(
                    "Quarantined message %s (level=%s, score=%d)",
                    message.id,
                    analysis.level.value,
                    analysis.phishing_score,
                )

            outcomes.append(
                TriageOutcome(
                    message_id=message.id,
                    analysis=analysis,
                    decision=decision,
                    destination=destination,
                    moved=moved,
                    error=error,
                )
            )

        report = TriageReport(
            outcomes=outcomes,
            summary=summarize(o.analysis for o in outcomes),
        )
        logger.info(
            "Triage pass completed: %d scanned, %d quarantined, %d to safe inbox, %d failed",
            report.summary.scanned,
            report.quarantined,
            report.safe_inbox,
            report.failed,
        )
        return report
