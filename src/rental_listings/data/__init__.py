"""Static demo data for the listing site."""

from rental_listings.data.demo_records import DEMO_PROPERTIES, SITEMAP_CITIES

__all__ = ["DEMO_PROPERTIES", "SITEMAP_CITIES"]
