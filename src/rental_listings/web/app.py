"""FastAPI application factory with startup pre-rendering."""

import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from rental_listings.config import Settings
from rental_listings.data import DEMO_PROPERTIES
from rental_listings.db import ListingQueryService
from rental_listings.logging import configure_logging, get_logger
from rental_listings.models import PropertyRecord
from rental_listings.web.page_cache import PageCache

logger = get_logger(__name__)

WEB_DIR = Path(__file__).parent


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


def create_app(
    settings: Settings | None = None,
    *,
    records: Iterable[PropertyRecord] | None = None,
    prerender: bool = True,
    log_level: int = logging.INFO,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings. Loaded from env if not provided.
        records: Record set to serve. Defaults to the demo records.
        prerender: Whether to render the home and featured pages at startup.
        log_level: Minimum structlog level.
    """
    if settings is None:
        settings = Settings()

    configure_logging(json_output=settings.json_logs, level=log_level)

    service = ListingQueryService(
        DEMO_PROPERTIES if records is None else records,
        featured_ids=settings.get_featured_ids(),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if prerender:
            from rental_listings.web.routes import prerender_pages

            await prerender_pages(app)
        logger.info(
            "web_server_started",
            records=len(service),
            featured=service.list_featured_ids(),
            revalidate_seconds=settings.revalidate_seconds,
        )

        yield

        logger.info("web_server_stopped", cached_pages=len(app.state.page_cache))

    app = FastAPI(title=settings.site_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.service = service
    app.state.latency = settings.get_latency()
    app.state.page_cache = PageCache()

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    # Mount static files
    app.mount("/static", StaticFiles(directory=WEB_DIR / "static"), name="static")

    # Register routes
    from rental_listings.web.api import api_router
    from rental_listings.web.routes import router

    app.include_router(api_router)
    app.include_router(router)

    return app
