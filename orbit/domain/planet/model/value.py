"""Planet domain value objects."""

from datetime import datetime

from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.shared.model.value import ValueObject


class NewPlanet(ValueObject):
    """Planet attributes before the store assigns an identifier."""

    name: str
    rotation_period: int | None = None
    orbital_period: int | None = None
    diameter: int | None = None
    population: int | None = None
    climate: str | None = None
    gravity: str | None = None
    terrain: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PlanetFilter(ValueObject):
    """Search filter. ``name`` matches any planet whose name contains it."""

    name: str | None = None


class PlanetPage(ValueObject):
    """One window of search results plus the total number of matches."""

    total: int
    results: list[Planet]
