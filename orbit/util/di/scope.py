"""Custom Dishka scopes for Orbit."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Orbit dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, HTTP client, repositories)
    - UOW: Unit of Work (one HTTP request or one CLI ingestion)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
