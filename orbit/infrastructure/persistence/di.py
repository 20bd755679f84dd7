from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from orbit.config import Config
from orbit.domain.planet.port.repository import PlanetRepository
from orbit.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from orbit.infrastructure.persistence.repository.planet import SqlPlanetRepository
from orbit.util.di.base import Provider
from orbit.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # Session-per-call repository, shared by concurrent ingestion tasks
    planet_repo = provide(SqlPlanetRepository, scope=Scope.APP, provides=PlanetRepository)
