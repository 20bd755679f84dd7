from dishka import AsyncContainer, Provider, from_context, make_async_container

from orbit.config import Config
from orbit.domain.ingest.util.di import IngestProvider
from orbit.domain.planet.util.di import PlanetProvider
from orbit.infrastructure.persistence.di import PersistenceProvider
from orbit.infrastructure.upstream.di import UpstreamProvider
from orbit.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config, upstream: Provider | None = None) -> AsyncContainer:
    """Build the application container.

    Args:
        config: Application configuration, exposed to providers as context.
        upstream: Provider of the PageFetcher; defaults to the SWAPI adapter.
    """
    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        upstream or UpstreamProvider(),
        PlanetProvider(),
        IngestProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
