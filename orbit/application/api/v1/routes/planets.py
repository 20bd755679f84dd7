"""Planets API routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from orbit.application.api.v1.errors import map_orbit_error
from orbit.domain.ingest.model.value import IngestReport, RecordFailure
from orbit.domain.ingest.service.coordinator import IngestionCoordinator
from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.planet.model.value import PlanetFilter
from orbit.domain.planet.service.planet import PlanetService
from orbit.domain.shared.error import OrbitError

router = APIRouter(
    prefix="/api/v1/planets",
    tags=["planets"],
    route_class=DishkaRoute,
)


class PlanetResponse(BaseModel):
    """Single planet."""

    id: int
    name: str
    rotation_period: int | None
    orbital_period: int | None
    diameter: int | None
    population: int | None
    climate: str | None
    gravity: str | None
    terrain: str | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_planet(cls, planet: Planet) -> "PlanetResponse":
        return cls.model_validate(planet.model_dump())


class PlanetListResponse(BaseModel):
    """One window of search results."""

    total: int
    results: list[PlanetResponse]


class IngestRequest(BaseModel):
    """Body of an ingestion request. A null name ingests the whole catalog."""

    name: str | None = None


class IngestResponse(BaseModel):
    """Outcome of an ingestion run."""

    name: str | None
    pages: int
    succeeded: int
    skipped: int
    failed: list[RecordFailure]
    started_at: datetime
    completed_at: datetime

    @classmethod
    def from_report(cls, report: IngestReport) -> "IngestResponse":
        return cls.model_validate(report.model_dump())


@router.get("")
async def search_planets(
    service: FromDishka[PlanetService],
    name: str | None = Query(None, description="Match planets whose name contains this"),
    limit: int = Query(10, ge=1, le=100, description="Maximum number of results"),
    offset: int = Query(0, ge=0, description="Number of matches to skip"),
) -> PlanetListResponse:
    """Search stored planets by name."""
    try:
        page = await service.search(PlanetFilter(name=name), limit=limit, offset=offset)
    except OrbitError as e:
        raise map_orbit_error(e) from e
    return PlanetListResponse(
        total=page.total,
        results=[PlanetResponse.from_planet(p) for p in page.results],
    )


@router.post("/ingest")
async def ingest_planets(
    body: IngestRequest,
    coordinator: FromDishka[IngestionCoordinator],
) -> IngestResponse:
    """Pull matching planets from the upstream catalog into the store."""
    try:
        report = await coordinator.run(body.name)
    except OrbitError as e:
        raise map_orbit_error(e) from e
    return IngestResponse.from_report(report)


@router.get("/{planet_id}")
async def get_planet(
    planet_id: int,
    service: FromDishka[PlanetService],
) -> PlanetResponse:
    """Get a planet by id."""
    try:
        planet = await service.get(planet_id)
    except OrbitError as e:
        raise map_orbit_error(e) from e
    return PlanetResponse.from_planet(planet)


@router.delete("/{planet_id}")
async def delete_planet(
    planet_id: int,
    service: FromDishka[PlanetService],
) -> PlanetResponse:
    """Delete a planet by id."""
    try:
        planet = await service.delete(planet_id)
    except OrbitError as e:
        raise map_orbit_error(e) from e
    return PlanetResponse.from_planet(planet)
