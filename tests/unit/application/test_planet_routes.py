"""Tests for the planets API over a test container.

The app runs against a SQLite file per client; the upstream catalog is a
scripted fetcher served by a test provider.
"""

from collections.abc import Iterator
from unittest.mock import MagicMock

import logfire
import pytest
from dishka import provide
from fastapi.testclient import TestClient

from orbit.application.api.rest.app import create_app
from orbit.application.di import create_container
from orbit.config import Config, DatabaseConfig
from orbit.domain.ingest.port.fetcher import PageFetcher
from orbit.domain.shared.error import UpstreamUnavailableError
from orbit.util.di.base import Provider
from orbit.util.di.scope import Scope


class ScriptedUpstreamProvider(Provider):
    """Serves a prepared PageFetcher in place of the SWAPI adapter."""

    def __init__(self, fetcher: PageFetcher) -> None:
        super().__init__()
        self._fetcher = fetcher

    @provide(scope=Scope.APP)
    def get_page_fetcher(self) -> PageFetcher:
        return self._fetcher


@pytest.fixture
def client_for(make_fetcher, tmp_path) -> Iterator:
    clients: list[TestClient] = []

    def build(pages: list) -> TestClient:
        db_path = tmp_path / f"orbit-{len(clients)}.db"
        config = Config(database=DatabaseConfig(url=f"sqlite+aiosqlite:///{db_path}"))
        container = create_container(config, upstream=ScriptedUpstreamProvider(make_fetcher(pages)))
        client = TestClient(create_app(config, container))
        client.__enter__()
        clients.append(client)
        return client

    yield build
    for client in clients:
        client.__exit__(None, None, None)


class TestAppFactory:
    def test_leaves_logfire_configuration_to_the_caller(
        self, client_for, monkeypatch: pytest.MonkeyPatch
    ):
        configure = MagicMock()
        monkeypatch.setattr(logfire, "configure", configure)

        client_for([[]])

        configure.assert_not_called()


class TestHealth:
    def test_health(self, client_for):
        client = client_for([[]])

        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestIngestRoute:
    def test_ingest_returns_report(self, client_for, record):
        client = client_for([[record("Tatooine"), record("Hoth")], [record("Tatooine")]])

        response = client.post("/api/v1/planets/ingest", json={"name": None})

        assert response.status_code == 200
        report = response.json()
        assert report["name"] is None
        assert report["pages"] == 2
        assert report["succeeded"] == 2
        assert report["skipped"] == 1
        assert report["failed"] == []

    def test_reingest_skips_everything(self, client_for, record):
        client = client_for([[record("Tatooine"), record("Hoth")]])
        client.post("/api/v1/planets/ingest", json={"name": "o"})

        report = client.post("/api/v1/planets/ingest", json={"name": "o"}).json()

        assert report["succeeded"] == 0
        assert report["skipped"] == 2

    def test_bad_numeric_fields_are_stored_as_null(self, client_for, record):
        client = client_for([[record("Bespin", population="6,000,000", diameter="118000")]])
        client.post("/api/v1/planets/ingest", json={})

        planet = client.get("/api/v1/planets", params={"name": "Bespin"}).json()["results"][0]

        assert planet["population"] is None
        assert planet["diameter"] == 118000

    def test_upstream_failure_is_503(self, client_for, record):
        client = client_for([[record("Tatooine")], UpstreamUnavailableError("upstream down")])

        response = client.post("/api/v1/planets/ingest", json={"name": "Tatooine"})

        assert response.status_code == 503
        assert response.json()["detail"] == {
            "code": "UpstreamUnavailableError",
            "message": "upstream down",
        }
        # Records from the page before the failure stay stored
        assert client.get("/api/v1/planets").json()["total"] == 1


class TestPlanetRoutes:
    @pytest.fixture
    def client(self, client_for, record) -> TestClient:
        client = client_for([[record("Tatooine"), record("Alderaan"), record("Hoth")]])
        client.post("/api/v1/planets/ingest", json={"name": None})
        return client

    def test_search_by_name(self, client):
        response = client.get("/api/v1/planets", params={"name": "oo"})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["results"][0]["name"] == "Tatooine"
        assert body["results"][0]["created_at"].startswith("2014-12-09T13:50:49.641")

    def test_search_window(self, client):
        body = client.get("/api/v1/planets", params={"limit": 2, "offset": 2}).json()

        assert body["total"] == 3
        assert len(body["results"]) == 1

    def test_search_rejects_bad_limit(self, client):
        response = client.get("/api/v1/planets", params={"limit": 0})

        assert response.status_code == 422

    def test_get_and_delete(self, client):
        planet = client.get("/api/v1/planets", params={"name": "Hoth"}).json()["results"][0]

        fetched = client.get(f"/api/v1/planets/{planet['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Hoth"

        deleted = client.delete(f"/api/v1/planets/{planet['id']}")
        assert deleted.status_code == 200
        assert deleted.json()["id"] == planet["id"]

        assert client.get(f"/api/v1/planets/{planet['id']}").status_code == 404

    def test_get_missing_is_404(self, client):
        response = client.get("/api/v1/planets/999")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "NotFoundError"

    def test_delete_missing_is_404(self, client):
        assert client.delete("/api/v1/planets/999").status_code == 404
