"""IngestionCoordinator - walks the upstream pages and fans out persistence."""

import asyncio
import logging
from collections import defaultdict
from datetime import UTC, datetime

import logfire

from orbit.domain.ingest.model.value import (
    Cursor,
    IngestReport,
    PersistOutcome,
    PersistStatus,
    RecordFailure,
)
from orbit.domain.ingest.port.fetcher import PageFetcher
from orbit.domain.ingest.service.persister import RecordPersister
from orbit.domain.shared.service import Service
from orbit.sdk.upstream.record import UpstreamRecord

logger = logging.getLogger(__name__)


class _IngestionRun:
    """Outstanding persist work of a single run.

    At most ``max_concurrency`` persists execute at once, and persists of the
    same name run one after another so they cannot both pass the gate.
    """

    def __init__(self, persister: RecordPersister, max_concurrency: int) -> None:
        self._persister = persister
        self._slots = asyncio.Semaphore(max_concurrency)
        self._key_locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._tasks: list[asyncio.Task[PersistOutcome]] = []

    @property
    def outstanding(self) -> int:
        return len(self._tasks)

    def launch(self, record: UpstreamRecord) -> None:
        task = asyncio.create_task(self._persist(record), name=f"persist-{record.name}")
        self._tasks.append(task)

    async def _persist(self, record: UpstreamRecord) -> PersistOutcome:
        # Key lock first, so a task queued behind its twin does not hold a slot
        async with self._key_locks[record.name], self._slots:
            return await self._persister.persist(record)

    async def drain(self) -> list[PersistOutcome]:
        return list(await asyncio.gather(*self._tasks))


class IngestionCoordinator(Service):
    """Synchronizes upstream planets into the local store.

    Pages are fetched strictly in cursor order. Records of each page are
    handed to the persister as soon as the page arrives, without waiting for
    earlier pages, so fetching page N+1 overlaps with storing page N. The
    run finishes once the upstream returns no next cursor and every launched
    persist has completed.
    """

    fetcher: PageFetcher
    persister: RecordPersister
    max_concurrency: int = 10

    async def run(self, name: str | None = None) -> IngestReport:
        """Ingest every upstream planet matching ``name``.

        Args:
            name: Upstream search filter. None ingests the whole catalog.

        Returns:
            IngestReport with per-status counts and the failed records.

        Raises:
            UpstreamUnavailableError: If any page cannot be fetched. Persists
                already launched are awaited first; nothing is rolled back.
        """
        started_at = datetime.now(UTC)
        logger.info(f"Starting ingest, name={name!r}, max_concurrency={self.max_concurrency}")

        run = _IngestionRun(self.persister, self.max_concurrency)
        pages = 0

        with logfire.span("IngestPlanets", name=name):
            cursor: Cursor | None = self.fetcher.start(name)
            try:
                while cursor is not None:
                    page = await self.fetcher.fetch(cursor)
                    pages += 1
                    for record in page.records:
                        run.launch(record)
                    logger.info(
                        f"  Page {pages}: {len(page.records)} records "
                        f"({run.outstanding} launched so far, last={page.is_last})"
                    )
                    cursor = page.next_cursor
            except Exception:
                logger.error(
                    f"Ingest aborted at page {pages + 1}; "
                    f"waiting for {run.outstanding} launched persists"
                )
                await run.drain()
                raise

            outcomes = await run.drain()

        completed_at = datetime.now(UTC)
        failed = [
            RecordFailure(key=o.key, reason=o.reason or "unknown error")
            for o in outcomes
            if o.status is PersistStatus.FAILED
        ]
        report = IngestReport(
            name=name,
            pages=pages,
            succeeded=sum(1 for o in outcomes if o.status is PersistStatus.CREATED),
            skipped=sum(1 for o in outcomes if o.status is PersistStatus.SKIPPED),
            failed=failed,
            started_at=started_at,
            completed_at=completed_at,
        )

        logger.info(
            f"Ingest completed: {report.succeeded} created, {report.skipped} skipped, "
            f"{len(report.failed)} failed across {pages} pages"
        )
        if failed:
            logfire.warn("Ingest finished with failed records", failed=len(failed), name=name)
        return report
