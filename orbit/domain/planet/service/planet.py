"""PlanetService - read and delete access to stored planets."""

import logging

from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.planet.model.value import PlanetFilter, PlanetPage
from orbit.domain.planet.port.repository import PlanetRepository
from orbit.domain.shared.error import NotFoundError, ValidationError
from orbit.domain.shared.service import Service

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class PlanetService(Service):
    """Searches, fetches and deletes planets in the local store."""

    planet_repo: PlanetRepository

    async def search(self, filter: PlanetFilter, limit: int, offset: int) -> PlanetPage:
        """Return one window of planets whose name contains ``filter.name``."""
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}", field="limit")
        if offset < 0:
            raise ValidationError("offset must not be negative", field="offset")
        results, total = await self.planet_repo.find_many(filter, limit=limit, offset=offset)
        return PlanetPage(total=total, results=results)

    async def get(self, planet_id: int) -> Planet:
        """Retrieve a planet by id."""
        planet = await self.planet_repo.get(planet_id)
        if planet is None:
            raise NotFoundError(f"Planet not found: {planet_id}")
        return planet

    async def delete(self, planet_id: int) -> Planet:
        """Delete a planet by id and return what was removed."""
        planet = await self.planet_repo.delete(planet_id)
        if planet is None:
            raise NotFoundError(f"Planet not found: {planet_id}")
        logger.info(f"Deleted planet {planet_id} ({planet.name})")
        return planet
