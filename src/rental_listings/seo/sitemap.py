"""Sitemap and robots.txt generation."""

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from enum import StrEnum
from typing import Final
from xml.sax.saxutils import escape

from pydantic import BaseModel, ConfigDict, Field

SITEMAP_NAMESPACE: Final = "http://www.sitemaps.org/schemas/sitemap/0.9"
DEFAULT_DISALLOW: Final[tuple[str, ...]] = ("/api/", "/admin/")


class ChangeFrequency(StrEnum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"


class SitemapEntry(BaseModel):
    """One <url> element of a sitemap."""

    model_config = ConfigDict(frozen=True)

    url: str
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float = Field(ge=0.0, le=1.0)


def build_sitemap(
    base_url: str,
    property_ids: Iterable[str],
    cities: Iterable[str],
    *,
    now: datetime | None = None,
) -> list[SitemapEntry]:
    """Enumerate every public page: static pages, listings, then city pages.

    Args:
        base_url: Site base URL without trailing slash.
        property_ids: Ids of every listing that has a detail page.
        cities: City slugs that get their own listings URL.
        now: Timestamp to stamp entries with (defaults to the current time).
    """
    stamp = now or datetime.now(UTC)
    entries = [
        SitemapEntry(
            url=base_url,
            last_modified=stamp,
            change_frequency=ChangeFrequency.DAILY,
            priority=1.0,
        ),
        SitemapEntry(
            url=f"{base_url}/listings",
            last_modified=stamp,
            change_frequency=ChangeFrequency.HOURLY,
            priority=0.9,
        ),
    ]
    entries.extend(
        SitemapEntry(
            url=f"{base_url}/property/{property_id}",
            last_modified=stamp,
            change_frequency=ChangeFrequency.WEEKLY,
            priority=0.8,
        )
        for property_id in property_ids
    )
    entries.extend(
        SitemapEntry(
            url=f"{base_url}/listings?city={city.lower()}",
            last_modified=stamp,
            change_frequency=ChangeFrequency.DAILY,
            priority=0.7,
        )
        for city in cities
    )
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    """Render entries as a sitemaps.org urlset document."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
    ]
    for entry in entries:
        lines.extend(
            [
                "  <url>",
                f"    <loc>{escape(entry.url)}</loc>",
                f"    <lastmod>{entry.last_modified.isoformat()}</lastmod>",
                f"    <changefreq>{entry.change_frequency.value}</changefreq>",
                f"    <priority>{entry.priority:.1f}</priority>",
                "  </url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_robots_txt(base_url: str, disallow: Sequence[str] = DEFAULT_DISALLOW) -> str:
    """Allow everything except API and admin paths, and advertise the sitemap."""
    lines = ["User-Agent: *", "Allow: /"]
    lines.extend(f"Disallow: {path}" for path in disallow)
    lines.extend(["", f"Sitemap: {base_url}/sitemap.xml"])
    return "\n".join(lines) + "\n"
