"""In-process page cache modelling three rendering strategies.

* ``static``: rendered once ahead of time (at startup) and served forever.
* ``revalidate``: served from cache until older than a TTL, then re-rendered.
* ``on_demand``: rendered on first request, then served from cache.
"""

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum

from rental_listings.logging import get_logger

logger = get_logger(__name__)


class RenderStrategy(StrEnum):
    STATIC = "static"
    REVALIDATE = "revalidate"
    ON_DEMAND = "on_demand"


@dataclass(frozen=True)
class CachedPage:
    html: str
    strategy: RenderStrategy
    rendered_at: float


@dataclass(frozen=True)
class PageResult:
    """A page plus whether it came from the cache."""

    page: CachedPage
    hit: bool


class PageCache:
    """Rendered HTML keyed by request path (plus normalized query)."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._pages: dict[str, CachedPage] = {}
        self._clock = clock

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, key: str) -> bool:
        return key in self._pages

    def put(self, key: str, html: str, strategy: RenderStrategy) -> CachedPage:
        page = CachedPage(html=html, strategy=strategy, rendered_at=self._clock())
        self._pages[key] = page
        return page

    def is_stale(self, page: CachedPage, ttl: float | None) -> bool:
        if page.strategy is not RenderStrategy.REVALIDATE or ttl is None:
            return False
        return self._clock() - page.rendered_at >= ttl

    async def get_or_render(
        self,
        key: str,
        strategy: RenderStrategy,
        render: Callable[[], Awaitable[str | None]],
        *,
        ttl: float | None = None,
    ) -> PageResult | None:
        """Serve a cached page or render and store a fresh one.

        Args:
            key: Cache key.
            strategy: How the page should be cached.
            render: Coroutine factory returning the HTML, or None when the
                page does not exist (nothing is cached in that case).
            ttl: Revalidation interval in seconds (revalidate strategy only).

        Returns:
            The page and whether it was a cache hit, or None if ``render``
            returned None.
        """
        cached = self._pages.get(key)
        if cached is not None and not self.is_stale(cached, ttl):
            return PageResult(page=cached, hit=True)

        html = await render()
        if html is None:
            return None

        page = self.put(key, html, strategy)
        logger.info(
            "page_rendered",
            key=key,
            strategy=strategy.value,
            revalidated=cached is not None,
        )
        return PageResult(page=page, hit=False)
