"""SWAPI page fetcher - walks the /planets/ listing of the Star Wars API."""

import logging

import httpx
import pydantic

from orbit.domain.ingest.model.value import Cursor, Page
from orbit.domain.ingest.port.fetcher import PageFetcher
from orbit.domain.shared.error import UpstreamUnavailableError
from orbit.sdk.upstream.record import UpstreamPage

logger = logging.getLogger(__name__)


class SwapiPageFetcher(PageFetcher):
    """Fetches planet pages from SWAPI.

    The cursor is the absolute page URL; SWAPI hands back the next one in
    the ``next`` field and sets it to null on the last page.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    def start(self, name: str | None) -> Cursor:
        url = httpx.URL(f"{self._base_url}/planets/")
        if name is not None:
            url = url.copy_add_param("search", name)
        return Cursor(str(url))

    async def fetch(self, cursor: Cursor) -> Page:
        try:
            resp = await self._client.get(cursor)
            resp.raise_for_status()
            body = UpstreamPage.model_validate_json(resp.content)
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(f"Upstream request failed for {cursor}: {e}") from e
        except pydantic.ValidationError as e:
            raise UpstreamUnavailableError(
                f"Malformed upstream page at {cursor}: {e.error_count()} invalid fields"
            ) from e

        logger.debug(f"Fetched {len(body.results)} planets from {cursor}")
        return Page(
            records=tuple(body.results),
            next_cursor=Cursor(body.next) if body.next else None,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
