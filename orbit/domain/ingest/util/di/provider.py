from dishka import provide

from orbit.config import Config
from orbit.domain.ingest.port.fetcher import PageFetcher
from orbit.domain.ingest.service.coordinator import IngestionCoordinator
from orbit.domain.ingest.service.gate import DeduplicationGate
from orbit.domain.ingest.service.persister import RecordPersister
from orbit.util.di.base import Provider
from orbit.util.di.scope import Scope


class IngestProvider(Provider):
    gate = provide(DeduplicationGate, scope=Scope.UOW)
    persister = provide(RecordPersister, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_coordinator(
        self,
        fetcher: PageFetcher,
        persister: RecordPersister,
        config: Config,
    ) -> IngestionCoordinator:
        return IngestionCoordinator(
            fetcher=fetcher,
            persister=persister,
            max_concurrency=config.ingest.max_concurrency,
        )
