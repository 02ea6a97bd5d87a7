"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from voter_lookup.core.config import get_settings
from voter_lookup.core.logging import setup_logging
from voter_lookup.lib.store import create_store
from voter_lookup.services.search_service import build_search_service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: open the store on startup, close it on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)

    store = create_store(settings)
    try:
        app.state.search_service = build_search_service(settings, store)
        logger.info(f"Voter store ready ({settings.environment})")
        yield
    finally:
        app.state.search_service = None
        await store.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Voter Lookup API",
        description="Electoral roll lookup by name (Latin or Devanagari) or voter ID",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register exception handlers
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    # Register middleware and routers
    from voter_lookup.api.router import create_router, setup_cors

    setup_cors(app, settings)
    app.include_router(create_router(settings))

    return app
