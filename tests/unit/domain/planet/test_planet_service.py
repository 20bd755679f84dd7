"""Unit tests for PlanetService."""

import pytest

from orbit.domain.planet.model.value import NewPlanet, PlanetFilter
from orbit.domain.planet.service.planet import PlanetService
from orbit.domain.shared.error import NotFoundError, ValidationError


@pytest.fixture
async def seeded_repo(repo):
    for name in ["Tatooine", "Alderaan", "Yavin IV", "Hoth", "Dagobah"]:
        await repo.insert(NewPlanet(name=name, climate="temperate"))
    return repo


class TestPlanetService:
    @pytest.mark.asyncio
    async def test_search_returns_window_and_total(self, seeded_repo):
        service = PlanetService(planet_repo=seeded_repo)

        page = await service.search(PlanetFilter(name="a"), limit=2, offset=0)

        assert page.total == 4  # Every name but Hoth
        assert [p.name for p in page.results] == ["Tatooine", "Alderaan"]

    @pytest.mark.asyncio
    async def test_search_without_name_matches_everything(self, seeded_repo):
        service = PlanetService(planet_repo=seeded_repo)

        page = await service.search(PlanetFilter(), limit=10, offset=3)

        assert page.total == 5
        assert [p.name for p in page.results] == ["Hoth", "Dagobah"]

    @pytest.mark.asyncio
    async def test_get_returns_planet(self, seeded_repo):
        service = PlanetService(planet_repo=seeded_repo)

        planet = await service.get(4)

        assert planet.name == "Hoth"

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, repo):
        service = PlanetService(planet_repo=repo)

        with pytest.raises(NotFoundError, match="Planet not found: 42"):
            await service.get(42)

    @pytest.mark.asyncio
    async def test_delete_removes_and_returns_planet(self, seeded_repo):
        service = PlanetService(planet_repo=seeded_repo)

        deleted = await service.delete(1)

        assert deleted.name == "Tatooine"
        assert await seeded_repo.get(1) is None

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, repo):
        service = PlanetService(planet_repo=repo)

        with pytest.raises(NotFoundError):
            await service.delete(42)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "limit,offset,field",
        [(0, 0, "limit"), (101, 0, "limit"), (10, -1, "offset")],
    )
    async def test_search_rejects_bad_window(self, repo, limit, offset, field):
        service = PlanetService(planet_repo=repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.search(PlanetFilter(), limit=limit, offset=offset)

        assert exc_info.value.field == field
