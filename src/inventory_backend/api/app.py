"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_backend.api.errors import register_exception_handlers
from inventory_backend.api.middleware import (
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from inventory_backend.api.resources import PRODUCT_RESOURCE, USER_RESOURCE
from inventory_backend.api.routers import (
    create_resource_router,
    create_stats_router,
    root_router,
)
from inventory_backend.api.services import ResourceHandler, StatsHandler
from inventory_backend.database import DatabaseService
from inventory_backend.log_config import configure_logging
from inventory_backend.settings import BackendSettings, get_settings


def create_api(
    settings: BackendSettings | None = None,
    *,
    database: DatabaseService | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    The database handle and logger are created here once and handed to every
    handler; the database is closed when the application shuts down.
    """
    config = settings or get_settings()
    logger = configure_logging(config.log_level)
    database = database or DatabaseService(settings=config)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Server running at http://%s:%s", config.api_host, config.api_port)
        try:
            yield
        finally:
            logger.info("Shutting down, closing database connections")
            database.close()

    app = FastAPI(title="Inventory API", lifespan=lifespan)

    app.add_middleware(
        RateLimitMiddleware,
        limit=config.rate_limit_requests,
        window_seconds=config.rate_limit_window_seconds,
        path_prefix="/api",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware, logger=logger.getChild("http"))
    register_exception_handlers(app, logger)

    api_router = APIRouter(prefix="/api")
    for resource in (USER_RESOURCE, PRODUCT_RESOURCE):
        handler = ResourceHandler(
            resource, database=database, logger=logger.getChild(resource.plural)
        )
        api_router.include_router(create_resource_router(handler))
    api_router.include_router(
        create_stats_router(
            StatsHandler(database=database, logger=logger.getChild("stats"))
        )
    )

    app.include_router(root_router)
    app.include_router(api_router)
    return app


__all__ = ["create_api"]
