"""Listing criteria filtering."""

from collections.abc import Iterable

from rental_listings.logging import get_logger
from rental_listings.models import FilterCriteria, PropertyRecord

logger = get_logger(__name__)


class CriteriaFilter:
    """Filter records by city, bedrooms, bathrooms and maximum price."""

    def __init__(self, criteria: FilterCriteria) -> None:
        """Initialize the criteria filter.

        Args:
            criteria: Criteria to filter by.
        """
        self.criteria = criteria

    def filter_properties(self, records: Iterable[PropertyRecord]) -> list[PropertyRecord]:
        """Filter records by criteria, preserving their original order.

        Args:
            records: Records to filter.

        Returns:
            Records satisfying every supplied constraint.
        """
        records = list(records)
        if self.criteria.is_empty:
            return records

        matching = [r for r in records if self.criteria.matches(r)]

        logger.debug(
            "criteria_filter_complete",
            total_properties=len(records),
            matching=len(matching),
            city=self.criteria.city,
            min_bedrooms=self.criteria.min_bedrooms,
            min_bathrooms=self.criteria.min_bathrooms,
            max_price=self.criteria.max_price,
        )

        return matching
