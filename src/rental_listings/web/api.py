"""Read-only JSON API over the listing query service."""

from fastapi import APIRouter, HTTPException, Request

from rental_listings.db import ListingQueryService
from rental_listings.models import PropertyRecord, StatsSummary
from rental_listings.utils.latency import LatencyStrategy, Operation
from rental_listings.web.filters import FilterDep

api_router = APIRouter(prefix="/api", tags=["api"])


def _get_service(request: Request) -> ListingQueryService:
    return request.app.state.service  # type: ignore[no-any-return]


def _get_latency(request: Request) -> LatencyStrategy:
    return request.app.state.latency  # type: ignore[no-any-return]


@api_router.get("/properties", response_model=list[PropertyRecord])
async def list_properties(request: Request, filters: FilterDep) -> list[PropertyRecord]:
    """Listings matching the query-string filters, in record-set order."""
    await _get_latency(request).wait(Operation.LIST)
    return _get_service(request).list_properties(filters.to_criteria())


@api_router.get("/properties/{property_id}", response_model=PropertyRecord)
async def get_property(request: Request, property_id: str) -> PropertyRecord:
    await _get_latency(request).wait(Operation.GET)
    record = _get_service(request).get_property(property_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return record


@api_router.get("/property-ids", response_model=list[str])
async def list_property_ids(request: Request) -> list[str]:
    await _get_latency(request).wait(Operation.IDS)
    return _get_service(request).list_all_ids()


@api_router.get("/featured-ids", response_model=list[str])
async def list_featured_ids(request: Request) -> list[str]:
    await _get_latency(request).wait(Operation.FEATURED)
    return _get_service(request).list_featured_ids()


@api_router.get("/stats", response_model=StatsSummary)
async def get_stats(request: Request) -> StatsSummary:
    await _get_latency(request).wait(Operation.STATS)
    return _get_service(request).get_stats()
