"""Read-only query layer over the in-memory record set."""

from rental_listings.db.listing_queries import ListingQueryService

__all__ = ["ListingQueryService"]
