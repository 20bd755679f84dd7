"""DI provider for the upstream catalog."""

from typing import AsyncIterable

import httpx
from dishka import provide

from orbit.config import Config
from orbit.domain.ingest.port.fetcher import PageFetcher
from orbit.infrastructure.upstream.swapi import SwapiPageFetcher
from orbit.util.di.base import Provider
from orbit.util.di.scope import Scope


class UpstreamProvider(Provider):
    """Provides the HTTP page fetcher for the configured upstream."""

    @provide(scope=Scope.APP, provides=PageFetcher)
    async def get_page_fetcher(self, config: Config) -> AsyncIterable[SwapiPageFetcher]:
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.upstream.timeout),
            follow_redirects=True,
        )
        fetcher = SwapiPageFetcher(client=client, base_url=config.upstream.base_url)
        yield fetcher
        await fetcher.close()
