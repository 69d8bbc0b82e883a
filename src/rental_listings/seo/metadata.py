"""Per-page metadata: title, description, keywords, Open Graph and Twitter card."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from rental_listings.models import PropertyRecord, StatsSummary

SITE_SUFFIX = "UK Rental Properties"


class OpenGraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    type: Literal["website", "article"] = "website"
    url: str | None = None
    image: str | None = None
    image_alt: str | None = None


class TwitterCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: Literal["summary", "summary_large_image"] = "summary_large_image"
    title: str
    description: str


class PageMetadata(BaseModel):
    """Everything a page template needs for its <head>."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    keywords: tuple[str, ...] = ()
    canonical_url: str | None = None
    open_graph: OpenGraph | None = None
    twitter: TwitterCard | None = None
    robots: str = "index, follow"


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def home_metadata(stats: StatsSummary, base_url: str) -> PageMetadata:
    """Metadata for the landing page, naming the cities on offer."""
    cities = list(stats.distinct_cities)
    if len(cities) > 1:
        city_text = f"{', '.join(cities[:-1])}, and {cities[-1]}"
    else:
        city_text = "".join(cities) or "the UK"
    title = f"{SITE_SUFFIX} | Find Your Perfect Home"
    short = f"Discover rental properties across {city_text}."
    return PageMetadata(
        title=title,
        description=(
            f"Discover rental properties across {city_text}. "
            "From studios to family homes, find your perfect rental property."
        ),
        keywords=(
            "rental properties",
            "UK rentals",
            *cities,
            "apartments",
            "houses",
        ),
        canonical_url=base_url,
        open_graph=OpenGraph(title=title, description=short, type="website", url=base_url),
        twitter=TwitterCard(title=title, description=short),
    )


def listings_metadata(
    base_url: str, *, city: str | None = None, bedrooms: int | None = None
) -> PageMetadata:
    """Metadata for the filtered listings page."""
    title = "Browse Rental Properties"
    description = "Find rental properties across the UK"

    if city:
        title = f"Rental Properties in {_capitalize(city)}"
        description = f"Discover rental properties in {_capitalize(city)}"

    if bedrooms is not None:
        title += f" - {bedrooms}+ Bedrooms"
        description += f" with {bedrooms} or more bedrooms"

    full_title = f"{title} | {SITE_SUFFIX}"
    canonical = f"{base_url}/listings"
    if city:
        canonical += f"?city={city.lower()}"
    return PageMetadata(
        title=full_title,
        description=description,
        canonical_url=canonical,
        open_graph=OpenGraph(title=full_title, description=description),
    )


def property_metadata(record: PropertyRecord, base_url: str) -> PageMetadata:
    """Metadata for a single listing's detail page."""
    headline = f"{record.title} - £{record.price}/month"
    url = f"{base_url}/property/{record.id}"
    return PageMetadata(
        title=f"{headline} | {record.city} Rental",
        description=(
            f"{record.description} Located in {record.address}. "
            f"{record.bedrooms} bedrooms, {record.bathrooms} bathrooms. "
            f"Available from {record.available_from.isoformat()}."
        ),
        keywords=(
            record.city_slug,
            "rental property",
            f"{record.bedrooms} bedroom",
            *(f.lower() for f in record.features),
        ),
        canonical_url=url,
        open_graph=OpenGraph(
            title=headline,
            description=record.description,
            type="article",
            url=url,
            image=record.image_url,
            image_alt=record.title,
        ),
        twitter=TwitterCard(title=headline, description=record.description),
    )


def not_found_metadata() -> PageMetadata:
    return PageMetadata(
        title=f"Property Not Found | {SITE_SUFFIX}",
        description="The property you're looking for doesn't exist or has been removed.",
        robots="noindex",
    )


def error_metadata(message: str) -> PageMetadata:
    return PageMetadata(title=f"Error | {SITE_SUFFIX}", description=message, robots="noindex")
