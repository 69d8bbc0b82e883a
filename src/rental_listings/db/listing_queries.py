"""Listing query service — read-only queries over a fixed record set."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from rental_listings.filters.criteria import CriteriaFilter
from rental_listings.logging import get_logger
from rental_listings.models import FilterCriteria, PropertyRecord, StatsSummary

logger = get_logger(__name__)

DEFAULT_FEATURED_IDS: tuple[str, ...] = ("1", "2", "3")


def round_half_up(value: Decimal) -> int:
    """Round to the nearest whole unit, halves away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


class ListingQueryService:
    """Answers listing queries over an immutable, ordered record set.

    Every method is a pure function of the record set and its arguments, so
    one instance can be shared by any number of concurrent requests.
    """

    def __init__(
        self,
        records: Iterable[PropertyRecord],
        *,
        featured_ids: Sequence[str] = DEFAULT_FEATURED_IDS,
    ) -> None:
        """Load the record set.

        Args:
            records: Records in display order.
            featured_ids: Ids to pre-render eagerly. Ids missing from the
                record set are dropped.

        Raises:
            ValueError: If two records share an id.
        """
        self._records: tuple[PropertyRecord, ...] = tuple(records)
        self._by_id: dict[str, PropertyRecord] = {}
        for record in self._records:
            if record.id in self._by_id:
                raise ValueError(f"Duplicate property id: {record.id!r}")
            self._by_id[record.id] = record

        featured: list[str] = []
        for property_id in featured_ids:
            if property_id not in self._by_id:
                logger.warning("featured_id_missing", property_id=property_id)
                continue
            if property_id not in featured:
                featured.append(property_id)
        self._featured_ids = tuple(featured)

    def __len__(self) -> int:
        return len(self._records)

    def list_properties(self, criteria: FilterCriteria | None = None) -> list[PropertyRecord]:
        """Return records satisfying every supplied constraint, in record-set order."""
        if criteria is None:
            return list(self._records)
        return CriteriaFilter(criteria).filter_properties(self._records)

    def get_property(self, property_id: str) -> PropertyRecord | None:
        """Return the record with this id, or None if there is no such record."""
        return self._by_id.get(property_id)

    def list_all_ids(self) -> list[str]:
        return [r.id for r in self._records]

    def list_featured_ids(self) -> list[str]:
        """Return the hand-picked ids that should be rendered ahead of time."""
        return list(self._featured_ids)

    def list_cities(self) -> list[str]:
        """Return distinct city names in first-seen order."""
        return list(dict.fromkeys(r.city for r in self._records))

    def get_stats(self) -> StatsSummary:
        """Compute summary statistics over the whole record set.

        Recomputed on every call. The average is rounded half up.
        """
        prices = [r.price for r in self._records]
        if not prices:
            return StatsSummary(total_count=0, average_price=0, min_price=0, max_price=0)

        return StatsSummary(
            total_count=len(self._records),
            distinct_cities=tuple(self.list_cities()),
            average_price=round_half_up(Decimal(sum(prices)) / len(prices)),
            min_price=min(prices),
            max_price=max(prices),
        )
