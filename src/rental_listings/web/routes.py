"""Site routes: HTML pages, sitemap, robots and health."""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from rental_listings.config import Settings
from rental_listings.data import SITEMAP_CITIES
from rental_listings.db import ListingQueryService
from rental_listings.logging import get_logger
from rental_listings.seo.metadata import (
    error_metadata,
    home_metadata,
    listings_metadata,
    not_found_metadata,
    property_metadata,
)
from rental_listings.seo.sitemap import build_sitemap, render_robots_txt, render_sitemap_xml
from rental_listings.seo.structured_data import dump_json_ld, property_json_ld
from rental_listings.utils.latency import LatencyStrategy, Operation
from rental_listings.web.filters import (
    BATHROOM_OPTIONS,
    BEDROOM_OPTIONS,
    MAX_PRICE_OPTIONS,
    FilterDep,
    ListingFilter,
)
from rental_listings.web.page_cache import PageCache, PageResult, RenderStrategy

logger = get_logger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


def _get_service(app: FastAPI) -> ListingQueryService:
    return app.state.service  # type: ignore[no-any-return]


def _get_settings(app: FastAPI) -> Settings:
    return app.state.settings  # type: ignore[no-any-return]


def _get_latency(app: FastAPI) -> LatencyStrategy:
    return app.state.latency  # type: ignore[no-any-return]


def _get_page_cache(app: FastAPI) -> PageCache:
    return app.state.page_cache  # type: ignore[no-any-return]


def _render(template_name: str, app: FastAPI, context: dict[str, Any]) -> str:
    settings = _get_settings(app)
    base_context = {"site_name": settings.site_name, "base_url": settings.base_url}
    return templates.get_template(template_name).render({**base_context, **context})


def _page_response(result: PageResult) -> HTMLResponse:
    return HTMLResponse(
        result.page.html,
        headers={
            "X-Render-Strategy": result.page.strategy.value,
            "X-Cache": "HIT" if result.hit else "MISS",
        },
    )


def _error_page(app: FastAPI, message: str, status_code: int) -> HTMLResponse:
    html = _render("error.html", app, {"message": message, "meta": error_metadata(message)})
    return HTMLResponse(html, status_code=status_code)


# ---------------------------------------------------------------------------
# Page renderers (shared by request handlers and startup pre-rendering)
# ---------------------------------------------------------------------------


async def render_home(app: FastAPI) -> str:
    """Landing page with stats and city links."""
    settings = _get_settings(app)
    await _get_latency(app).wait(Operation.STATS)
    stats = _get_service(app).get_stats()
    return _render(
        "home.html",
        app,
        {
            "stats": stats,
            "meta": home_metadata(stats, settings.base_url),
            "strategy": RenderStrategy.STATIC,
        },
    )


async def render_listings(app: FastAPI, filters: ListingFilter) -> str:
    """Filter form plus matching listings."""
    settings = _get_settings(app)
    service = _get_service(app)
    await _get_latency(app).wait(Operation.LIST)
    properties = service.list_properties(filters.to_criteria())
    return _render(
        "listings.html",
        app,
        {
            "properties": properties,
            "filters": filters,
            "chips": filters.active_filter_chips(),
            "cities": service.list_cities(),
            "bedroom_options": BEDROOM_OPTIONS,
            "bathroom_options": BATHROOM_OPTIONS,
            "max_price_options": MAX_PRICE_OPTIONS,
            "meta": listings_metadata(
                settings.base_url, city=filters.city, bedrooms=filters.bedrooms
            ),
            "strategy": RenderStrategy.REVALIDATE,
            "revalidate_seconds": settings.revalidate_seconds,
        },
    )


async def render_property(app: FastAPI, property_id: str) -> str | None:
    """Detail page with JSON-LD, or None when the id does not exist."""
    settings = _get_settings(app)
    service = _get_service(app)
    await _get_latency(app).wait(Operation.GET)
    record = service.get_property(property_id)
    if record is None:
        return None
    pre_generated = property_id in service.list_featured_ids()
    return _render(
        "detail.html",
        app,
        {
            "prop": record,
            "meta": property_metadata(record, settings.base_url),
            "json_ld": dump_json_ld(property_json_ld(record)),
            "strategy": RenderStrategy.STATIC if pre_generated else RenderStrategy.ON_DEMAND,
        },
    )


async def prerender_pages(app: FastAPI) -> list[str]:
    """Render the home page and every featured detail page ahead of time.

    Returns:
        Cache keys that were rendered.
    """
    cache = _get_page_cache(app)
    await cache.get_or_render("/", RenderStrategy.STATIC, lambda: render_home(app))
    rendered = ["/"]

    await _get_latency(app).wait(Operation.FEATURED)
    for property_id in _get_service(app).list_featured_ids():
        key = f"/property/{property_id}"

        async def _render_featured(pid: str = property_id) -> str | None:
            return await render_property(app, pid)

        if await cache.get_or_render(key, RenderStrategy.STATIC, _render_featured):
            rendered.append(key)

    logger.info("pages_prerendered", pages=rendered)
    return rendered


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/health")
async def health_check() -> JSONResponse:
    return JSONResponse({"status": "ok"})


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Landing page, rendered once and served statically."""
    app = request.app
    result = await _get_page_cache(app).get_or_render(
        "/", RenderStrategy.STATIC, lambda: render_home(app)
    )
    if result is None:
        logger.error("home_render_empty")
        return _error_page(app, "Failed to load the home page. Please try again.", 500)
    return _page_response(result)


@router.get("/listings", response_class=HTMLResponse)
async def listings(request: Request, filters: FilterDep) -> HTMLResponse:
    """Listings page, re-rendered once the cached copy is older than the TTL.

    Filters the form cannot produce (unknown city, off-menu price) are
    rendered fresh and never stored, so arbitrary query strings cannot grow
    the cache.
    """
    app = request.app
    settings = _get_settings(app)
    query = filters.query_string()
    key = f"/listings?{query}" if query else "/listings"

    try:
        if not filters.is_canonical(_get_service(app).list_cities()):
            html = await render_listings(app, filters)
            return HTMLResponse(
                html,
                headers={
                    "X-Render-Strategy": RenderStrategy.REVALIDATE.value,
                    "X-Cache": "BYPASS",
                },
            )
        result = await _get_page_cache(app).get_or_render(
            key,
            RenderStrategy.REVALIDATE,
            lambda: render_listings(app, filters),
            ttl=settings.revalidate_seconds,
        )
    except Exception:
        logger.error("listings_render_failed", key=key, exc_info=True)
        return _error_page(app, "Failed to load properties. Please try again.", 500)

    if result is None:
        logger.error("listings_render_empty", key=key)
        return _error_page(app, "Failed to load properties. Please try again.", 500)
    return _page_response(result)


@router.get("/property/{property_id}", response_class=HTMLResponse)
async def property_detail(request: Request, property_id: str) -> HTMLResponse:
    """Detail page: featured ids are pre-rendered, the rest render on first visit."""
    app = request.app
    service = _get_service(app)
    strategy = (
        RenderStrategy.STATIC
        if property_id in service.list_featured_ids()
        else RenderStrategy.ON_DEMAND
    )

    try:
        result = await _get_page_cache(app).get_or_render(
            f"/property/{property_id}",
            strategy,
            lambda: render_property(app, property_id),
        )
    except Exception:
        logger.error("detail_render_failed", property_id=property_id, exc_info=True)
        return _error_page(app, "Failed to load property details. Please try again.", 500)

    if result is None:
        html = _render("not_found.html", app, {"meta": not_found_metadata()})
        return HTMLResponse(html, status_code=404)

    return _page_response(result)


@router.get("/sitemap.xml")
async def sitemap(request: Request) -> Response:
    app = request.app
    settings = _get_settings(app)
    await _get_latency(app).wait(Operation.IDS)
    entries = build_sitemap(
        settings.base_url,
        _get_service(app).list_all_ids(),
        SITEMAP_CITIES,
    )
    return Response(render_sitemap_xml(entries), media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(request: Request) -> PlainTextResponse:
    return PlainTextResponse(render_robots_txt(_get_settings(request.app).base_url))
