"""
campfire_access.api.app

FastAPI app factory for the entry check service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Build (or accept) the record store and dispose of it on shutdown.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from campfire_access import __version__
from campfire_access.api.routers.access import router as access_router
from campfire_access.api.routers.health import router as health_router
from campfire_access.observability.logging import configure_logging, get_logger
from campfire_access.observability.middleware import RequestContextMiddleware
from campfire_access.settings import Settings
from campfire_access.store.base import RecordStore
from campfire_access.store.factory import build_store

log = get_logger(__name__)


def create_app(*, settings: Settings, store: RecordStore | None = None) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "startup",
            env=settings.env,
            store_backend=type(app.state.store).__name__,
            sheet=settings.sheet_name,
        )
        try:
            yield
        finally:
            # SQL-backed stores hold a connection pool.
            dispose = getattr(app.state.store, "dispose", None)
            if dispose is not None:
                await dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Campfire Live Entry Check",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(access_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Tests pass an `InMemoryStore` explicitly; production builds the store from settings.
