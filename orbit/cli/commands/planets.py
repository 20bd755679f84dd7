"""Planet commands - thin HTTP client over the Orbit API."""

import os
import sys
from typing import Any

import httpx

from orbit.cli.console import get_console

# Ingestion walks every upstream page before answering
_INGEST_TIMEOUT = httpx.Timeout(10.0, read=600.0)


def get_server_url() -> str:
    """Get server URL from environment."""
    return os.environ.get("ORBIT_SERVER", "http://localhost:8000")


def _error_message(response: httpx.Response) -> str:
    """Extract the API error message, falling back to the raw body."""
    try:
        detail = response.json().get("detail")
    except ValueError:
        return response.text
    if isinstance(detail, dict):
        return detail.get("message", str(detail))
    return str(detail)


def _request(method: str, path: str, **kwargs: Any) -> Any:
    """Call the API and return the decoded body, exiting on failure."""
    console = get_console()
    server_url = get_server_url()
    try:
        response = httpx.request(method, f"{server_url}/api/v1/planets{path}", **kwargs)
        response.raise_for_status()
        return response.json()
    except httpx.ConnectError:
        console.error(
            f"Could not connect to server at {server_url}",
            hint="Is the server running? Start it with: orbit serve",
        )
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        console.error(f"{e.response.status_code}: {_error_message(e.response)}")
        sys.exit(1)
    except httpx.TimeoutException:
        console.error("Timed out waiting for the server")
        sys.exit(1)


def ingest(name: str | None = None, /) -> None:
    """Pull planets from the upstream catalog into the store.

    Args:
        name: Only ingest planets whose upstream name matches. All if omitted.
    """
    console = get_console()
    console.info(f"Ingesting {name or 'all planets'}...")
    report = _request("POST", "/ingest", json={"name": name}, timeout=_INGEST_TIMEOUT)

    console.success(
        f"{report['succeeded']} created, {report['skipped']} already stored "
        f"({report['pages']} pages)"
    )
    failed = report.get("failed", [])
    if failed:
        console.warning(f"{len(failed)} planets could not be saved")
        console.table(failed, [("key", "Planet"), ("reason", "Reason")])


def search(name: str | None = None, /, limit: int = 10, offset: int = 0) -> None:
    """Search stored planets by name.

    Args:
        name: Match planets whose name contains this. All if omitted.
        limit: Maximum number of results.
        offset: Number of matches to skip.
    """
    params: dict[str, Any] = {"limit": limit, "offset": offset}
    if name:
        params["name"] = name
    data = _request("GET", "", params=params)

    console = get_console()
    results = data.get("results", [])
    console.print(f"Found {data.get('total', 0)} planets, showing {len(results)}:")
    if results:
        console.table(
            results,
            [
                ("id", "ID"),
                ("name", "Name"),
                ("diameter", "Diameter"),
                ("climate", "Climate"),
                ("terrain", "Terrain"),
            ],
        )


def show(planet_id: int, /) -> None:
    """Show one stored planet.

    Args:
        planet_id: Store identifier of the planet.
    """
    planet = _request("GET", f"/{planet_id}")
    get_console().planet_detail(planet)


def delete(planet_id: int, /) -> None:
    """Delete a stored planet.

    Args:
        planet_id: Store identifier of the planet.
    """
    planet = _request("DELETE", f"/{planet_id}")
    get_console().success(f"Deleted {planet['name']} (#{planet['id']})")
