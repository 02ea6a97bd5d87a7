"""Root API router with /api/v1 prefix and middleware registration."""

from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voter_lookup.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from voter_lookup.api.v1.search import search_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(search_router)

    return root_router


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware so the browser search form can call the API.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    kwargs: dict[str, Any] = {
        "allow_credentials": False,
        "allow_methods": ["GET", "POST"],
        "allow_headers": ["*"],
    }
    if settings.cors_origin_list:
        kwargs["allow_origins"] = settings.cors_origin_list
    if settings.cors_origin_regex.strip():
        kwargs["allow_origin_regex"] = settings.cors_origin_regex.strip()
    app.add_middleware(CORSMiddleware, **kwargs)
