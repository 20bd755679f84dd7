"""Ingest domain model."""

from orbit.domain.ingest.model.value import (
    Cursor,
    IngestReport,
    Page,
    PersistOutcome,
    PersistStatus,
    RecordFailure,
)

__all__ = [
    "Cursor",
    "IngestReport",
    "Page",
    "PersistOutcome",
    "PersistStatus",
    "RecordFailure",
]
