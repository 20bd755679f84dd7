from orbit.domain.ingest.service.coordinator import IngestionCoordinator
from orbit.domain.ingest.service.gate import DeduplicationGate
from orbit.domain.ingest.service.persister import RecordPersister

__all__ = ["DeduplicationGate", "IngestionCoordinator", "RecordPersister"]
