"""RecordPersister - stores one upstream planet, isolating its failures."""

import logging
import re
from datetime import UTC, datetime

from orbit.domain.ingest.model.value import PersistOutcome, PersistStatus
from orbit.domain.ingest.service.gate import DeduplicationGate
from orbit.domain.planet.model.value import NewPlanet
from orbit.domain.planet.port.repository import PlanetRepository
from orbit.domain.shared.service import Service
from orbit.sdk.upstream.record import UpstreamRecord

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


def parse_int(value: str | None) -> int | None:
    """Read an upstream numeric field.

    Only plain integer literals count; "unknown", "12,000" and "1.5" give None.
    """
    if value is None or not _INTEGER.fullmatch(value):
        return None
    return int(value)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 upstream timestamp into UTC. Raises ValueError if malformed.

    Values without an offset are taken as UTC.
    """
    if value is None:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def to_new_planet(record: UpstreamRecord) -> NewPlanet:
    """Map the upstream shape to the stored shape."""
    return NewPlanet(
        name=record.name,
        rotation_period=parse_int(record.rotation_period),
        orbital_period=parse_int(record.orbital_period),
        diameter=parse_int(record.diameter),
        population=parse_int(record.population),
        climate=record.climate,
        gravity=record.gravity,
        terrain=record.terrain,
        created_at=parse_timestamp(record.created),
        updated_at=parse_timestamp(record.edited),
    )


class RecordPersister(Service):
    """Checks the gate and inserts a planet when it is not stored yet.

    ``persist`` never raises: a failure to check, map or write a record is
    logged and returned as a FAILED outcome so the rest of the run goes on.
    """

    gate: DeduplicationGate
    planet_repo: PlanetRepository

    async def persist(self, record: UpstreamRecord) -> PersistOutcome:
        try:
            if await self.gate.exists(record.name):
                logger.debug(f"  [{record.name}] already stored, skipping")
                return PersistOutcome(key=record.name, status=PersistStatus.SKIPPED)

            planet = await self.planet_repo.insert(to_new_planet(record))
        except Exception as e:
            logger.error(f"Error while saving planet {record.name} in the database: {e}")
            return PersistOutcome(
                key=record.name,
                status=PersistStatus.FAILED,
                reason=str(e) or type(e).__name__,
            )

        logger.debug(f"  [{record.name}] stored as planet {planet.id}")
        return PersistOutcome(key=record.name, status=PersistStatus.CREATED, planet_id=planet.id)
