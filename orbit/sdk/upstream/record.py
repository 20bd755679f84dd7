"""Wire types for the upstream planet catalog (SWAPI)."""

from pydantic import BaseModel, ConfigDict, Field


class UpstreamRecord(BaseModel):
    """A planet as the upstream catalog serves it.

    Everything except ``name`` arrives as text: numeric fields may hold
    values such as ``"unknown"`` or ``"12,000"``, and the timestamps are
    ISO-8601 strings. Normalization happens when the record is persisted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)  # Natural key
    rotation_period: str | None = None
    orbital_period: str | None = None
    diameter: str | None = None
    population: str | None = None
    climate: str | None = None
    gravity: str | None = None
    terrain: str | None = None
    created: str | None = None
    edited: str | None = None
    url: str | None = None


class UpstreamPage(BaseModel):
    """One page of the upstream ``/planets/`` listing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    count: int | None = None
    next: str | None  # Required key; null on the last page
    results: list[UpstreamRecord]
