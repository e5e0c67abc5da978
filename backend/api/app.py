"""FastAPI application factory.

Routers
-------
    /hello    — health check
    /recipe   — recipe scraping
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import configure_logging

from backend.api.routers import health as health_router
from backend.api.routers import recipe as recipe_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="Recipe Scraper API",
        description=(
            "Extracts a recipe's title, ingredients and preparation steps "
            "from a recipe web page given its URL."
        ),
        version="0.3.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health_router.router, tags=["health"])
    app.include_router(recipe_router.router, prefix="/recipe", tags=["recipe"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
