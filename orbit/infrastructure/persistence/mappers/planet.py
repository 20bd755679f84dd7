"""Planet mapper - converts between domain and persistence."""

from datetime import UTC, datetime
from typing import Any

from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.planet.model.value import NewPlanet


def _as_aware(value: datetime | str | None) -> datetime | None:
    """Normalize to aware UTC. SQLite hands back naive datetimes (or strings) holding UTC."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def row_to_planet(row: dict[str, Any]) -> Planet:
    """Convert database row to Planet aggregate."""
    return Planet(
        id=row["id"],
        name=row["name"],
        rotation_period=row.get("rotation_period"),
        orbital_period=row.get("orbital_period"),
        diameter=row.get("diameter"),
        population=row.get("population"),
        climate=row.get("climate"),
        gravity=row.get("gravity"),
        terrain=row.get("terrain"),
        created_at=_as_aware(row.get("created_at")),
        updated_at=_as_aware(row.get("updated_at")),
    )


def new_planet_to_dict(planet: NewPlanet) -> dict[str, Any]:
    """Convert NewPlanet to an insertable database dict (no id).

    Timestamps are stored as UTC; SQLite keeps the clock time and drops the offset.
    """
    data = planet.model_dump()
    data["created_at"] = _as_aware(planet.created_at)
    data["updated_at"] = _as_aware(planet.updated_at)
    return data
