"""Filters for listing search criteria."""

from rental_listings.filters.criteria import CriteriaFilter

__all__ = ["CriteriaFilter"]
