"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /scrape   — retrieve a page, parse it and infer its brand
    /rebrand  — apply a target brand to a previously scraped page
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reskin.api.routers import rebrand as rebrand_router
from reskin.api.routers import scrape as scrape_router
from reskin.config import settings
from reskin.logging import configure_logging


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Reskin API",
        description=(
            "Ingests a public web page, infers its brand identity "
            "(name, logo, palette, typography, surface style) and rewrites "
            "the page to carry a different brand."
        ),
        version="0.1.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])
    app.include_router(rebrand_router.router, prefix="/rebrand", tags=["rebrand"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn reskin.api.app:app --reload
app = create_app()
