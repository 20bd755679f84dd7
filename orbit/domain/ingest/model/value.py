"""Ingest value objects."""

from datetime import datetime
from enum import StrEnum
from typing import NewType

from orbit.domain.shared.model.value import ValueObject
from orbit.sdk.upstream.record import UpstreamRecord

# Opaque continuation token; for SWAPI it is the absolute URL of the page.
Cursor = NewType("Cursor", str)


class Page(ValueObject):
    """Records of one upstream page and where to continue.

    ``next_cursor`` is ``None`` on the last page. An empty ``records`` tuple
    says nothing about termination.
    """

    records: tuple[UpstreamRecord, ...] = ()
    next_cursor: Cursor | None = None

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None


class PersistStatus(StrEnum):
    CREATED = "created"
    SKIPPED = "skipped"  # Gate found an existing planet
    FAILED = "failed"


class PersistOutcome(ValueObject):
    """Result of persisting a single upstream record."""

    key: str
    status: PersistStatus
    planet_id: int | None = None
    reason: str | None = None


class RecordFailure(ValueObject):
    """A record that could not be persisted, and why."""

    key: str
    reason: str


class IngestReport(ValueObject):
    """Summary of an ingestion run."""

    name: str | None  # Name filter the run was started with
    pages: int
    succeeded: int
    skipped: int
    failed: list[RecordFailure]
    started_at: datetime
    completed_at: datetime

    @property
    def attempted(self) -> int:
        return self.succeeded + self.skipped + len(self.failed)
