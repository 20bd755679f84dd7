"""PlanetRepository port - persistence interface for planets."""

from abc import abstractmethod
from typing import Protocol

from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.planet.model.value import NewPlanet, PlanetFilter
from orbit.domain.shared.port import Port


class PlanetRepository(Port, Protocol):
    """Store for planets.

    Every call is independent: implementations must be safe to call from
    many concurrent tasks and impose no transaction spanning calls.
    """

    @abstractmethod
    async def count_matching(self, filter: PlanetFilter) -> int: ...

    @abstractmethod
    async def find_many(
        self, filter: PlanetFilter, limit: int, offset: int
    ) -> tuple[list[Planet], int]: ...

    @abstractmethod
    async def get(self, planet_id: int) -> Planet | None: ...

    @abstractmethod
    async def insert(self, planet: NewPlanet) -> Planet: ...

    @abstractmethod
    async def delete(self, planet_id: int) -> Planet | None: ...
