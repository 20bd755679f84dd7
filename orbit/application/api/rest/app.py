import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from orbit.application.api.rest.routes import health
from orbit.application.api.v1.routes import planets
from orbit.application.di import create_container
from orbit.config import Config, configure_logging
from orbit.infrastructure.persistence.database import create_schema
from orbit.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container

    engine = await container.get(AsyncEngine)
    await create_schema(engine)
    yield

    await container.close()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application."""
    config = config or Config()

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting Orbit server: %s v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    # Setup dependency injection
    setup_dishka(container or create_container(config), app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(planets.router)

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
