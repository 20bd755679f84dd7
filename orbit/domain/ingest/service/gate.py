"""DeduplicationGate - decides whether an upstream planet is already stored."""

from orbit.domain.planet.model.value import PlanetFilter
from orbit.domain.planet.port.repository import PlanetRepository
from orbit.domain.shared.service import Service


class DeduplicationGate(Service):
    """Existence check by natural key.

    Matching is substring containment, not equality: a candidate counts as
    present when any stored name contains it ("Tatooine" is present if
    "Tatooine" or "Tatooine II" is stored).
    """

    planet_repo: PlanetRepository

    async def exists(self, name: str) -> bool:
        return await self.planet_repo.count_matching(PlanetFilter(name=name)) > 0
