"""SQLAlchemy implementation of PlanetRepository."""

from sqlalchemy import ColumnElement, delete, func, insert, select, true
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.planet.model.value import NewPlanet, PlanetFilter
from orbit.domain.planet.port.repository import PlanetRepository
from orbit.infrastructure.persistence.mappers.planet import new_planet_to_dict, row_to_planet
from orbit.infrastructure.persistence.tables import planets_table


def _matching(filter: PlanetFilter) -> ColumnElement[bool]:
    """WHERE clause for a filter: stored name contains the filter name."""
    if not filter.name:
        return true()
    return planets_table.c.name.contains(filter.name, autoescape=True)


class SqlPlanetRepository(PlanetRepository):
    """PlanetRepository over an async SQLAlchemy engine.

    Each call runs in its own session and transaction, so the repository can
    be shared by concurrently running ingestion tasks.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def count_matching(self, filter: PlanetFilter) -> int:
        stmt = select(func.count()).select_from(planets_table).where(_matching(filter))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one()

    async def find_many(
        self, filter: PlanetFilter, limit: int, offset: int
    ) -> tuple[list[Planet], int]:
        page_stmt = (
            select(planets_table)
            .where(_matching(filter))
            .order_by(planets_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        count_stmt = select(func.count()).select_from(planets_table).where(_matching(filter))
        async with self._session_factory() as session:
            rows = (await session.execute(page_stmt)).mappings().all()
            total = (await session.execute(count_stmt)).scalar_one()
        return [row_to_planet(dict(row)) for row in rows], total

    async def get(self, planet_id: int) -> Planet | None:
        stmt = select(planets_table).where(planets_table.c.id == planet_id)
        async with self._session_factory() as session:
            row = (await session.execute(stmt)).mappings().first()
        return row_to_planet(dict(row)) if row else None

    async def insert(self, planet: NewPlanet) -> Planet:
        """Insert a planet. Planets are never updated, so this is insert-only."""
        values = new_planet_to_dict(planet)
        stmt = insert(planets_table).values(**values)
        async with self._session_factory.begin() as session:
            result = await session.execute(stmt)
            planet_id = result.inserted_primary_key[0]
        return Planet(id=planet_id, **values)

    async def delete(self, planet_id: int) -> Planet | None:
        async with self._session_factory.begin() as session:
            stmt = select(planets_table).where(planets_table.c.id == planet_id)
            row = (await session.execute(stmt)).mappings().first()
            if row is None:
                return None
            await session.execute(delete(planets_table).where(planets_table.c.id == planet_id))
        return row_to_planet(dict(row))
