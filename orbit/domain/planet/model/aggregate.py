"""Planet aggregate - a catalog entry persisted in the local store."""

from datetime import datetime

from orbit.domain.shared.model.aggregate import Aggregate


class Planet(Aggregate):
    """A stored planet.

    ``id`` is assigned by the store. ``name`` is the natural key shared with
    the upstream catalog. Numeric attributes are ``None`` when the upstream
    value could not be read as an integer.
    """

    id: int
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
