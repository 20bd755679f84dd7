"""Global test fixtures: a scripted upstream and an in-memory planet store."""

import asyncio
from collections.abc import Callable

import logfire
import pytest

from orbit.domain.ingest.model.value import Cursor, Page
from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.planet.model.value import NewPlanet, PlanetFilter
from orbit.sdk.upstream.record import UpstreamRecord

# Keep spans local; nothing is exported from tests
logfire.configure(send_to_logfire=False, console=False)


def make_record(name: str, **fields: str) -> UpstreamRecord:
    """Build an upstream planet with SWAPI-looking defaults."""
    defaults = {
        "rotation_period": "24",
        "orbital_period": "364",
        "diameter": "10000",
        "population": "1000",
        "climate": "temperate",
        "gravity": "1 standard",
        "terrain": "grasslands",
        "created": "2014-12-09T13:50:49.641000Z",
        "edited": "2014-12-20T20:58:18.411000Z",
    }
    return UpstreamRecord(name=name, **{**defaults, **fields})


class FakePageFetcher:
    """Serves scripted pages; cursor ``page-N`` is the N-th page (0-based)."""

    def __init__(self, pages: list[list[UpstreamRecord] | Exception]) -> None:
        self._pages = pages
        self.started_with: list[str | None] = []
        self.fetched: list[Cursor] = []

    def start(self, name: str | None) -> Cursor:
        self.started_with.append(name)
        return Cursor("page-0")

    async def fetch(self, cursor: Cursor) -> Page:
        self.fetched.append(cursor)
        await asyncio.sleep(0)
        index = int(cursor.removeprefix("page-"))
        page = self._pages[index]
        if isinstance(page, Exception):
            raise page
        next_cursor = Cursor(f"page-{index + 1}") if index + 1 < len(self._pages) else None
        return Page(records=tuple(page), next_cursor=next_cursor)


class InMemoryPlanetRepository:
    """PlanetRepository keeping planets in a dict, with name containment matching.

    ``fail_on`` names make ``insert`` raise; ``insert_delay`` widens the window
    between the existence check and the write.
    """

    def __init__(self, fail_on: set[str] | None = None, insert_delay: float = 0.0) -> None:
        self.planets: dict[int, Planet] = {}
        self.insert_attempts: list[str] = []
        self._fail_on = fail_on or set()
        self._insert_delay = insert_delay
        self._next_id = 1

    def _matches(self, filter: PlanetFilter) -> list[Planet]:
        return [p for p in self.planets.values() if not filter.name or filter.name in p.name]

    async def count_matching(self, filter: PlanetFilter) -> int:
        await asyncio.sleep(0)
        return len(self._matches(filter))

    async def find_many(
        self, filter: PlanetFilter, limit: int, offset: int
    ) -> tuple[list[Planet], int]:
        matches = self._matches(filter)
        return matches[offset : offset + limit], len(matches)

    async def get(self, planet_id: int) -> Planet | None:
        return self.planets.get(planet_id)

    async def insert(self, planet: NewPlanet) -> Planet:
        self.insert_attempts.append(planet.name)
        await asyncio.sleep(self._insert_delay)
        if planet.name in self._fail_on:
            raise RuntimeError(f"constraint failed: {planet.name}")
        stored = Planet(id=self._next_id, **planet.model_dump())
        self.planets[stored.id] = stored
        self._next_id += 1
        return stored

    async def delete(self, planet_id: int) -> Planet | None:
        return self.planets.pop(planet_id, None)

    def names(self) -> list[str]:
        return sorted(p.name for p in self.planets.values())


@pytest.fixture
def record() -> Callable[..., UpstreamRecord]:
    """Factory for upstream planets: ``record("Hoth", diameter="7200")``."""
    return make_record


@pytest.fixture
def repo() -> InMemoryPlanetRepository:
    return InMemoryPlanetRepository()


@pytest.fixture
def make_repo() -> type[InMemoryPlanetRepository]:
    """Store factory: ``make_repo(fail_on={"Hoth"}, insert_delay=0.01)``."""
    return InMemoryPlanetRepository


@pytest.fixture
def make_fetcher() -> type[FakePageFetcher]:
    """Upstream factory: ``make_fetcher([[...page 0...], error, [...page 2...]])``."""
    return FakePageFetcher
