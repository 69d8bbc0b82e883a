"""ListingFilter model and FastAPI dependency for listings filter parsing."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Final
from urllib.parse import urlencode

from fastapi import Depends, Query
from pydantic import BaseModel, ConfigDict, field_validator

from rental_listings.models import FilterCriteria

# ---------------------------------------------------------------------------
# Form option sets
# ---------------------------------------------------------------------------

BEDROOM_OPTIONS: Final = ((0, "Studio"), (1, "1+"), (2, "2+"), (3, "3+"), (4, "4+"))
BATHROOM_OPTIONS: Final = ((1, "1+"), (2, "2+"), (3, "3+"))
MAX_PRICE_OPTIONS: Final = (600, 800, 1000, 1200, 1500, 2000)

_BEDROOM_VALUES: Final = frozenset(value for value, _ in BEDROOM_OPTIONS)
_BATHROOM_VALUES: Final = frozenset(value for value, _ in BATHROOM_OPTIONS)


def _parse_optional_int(value: str | None) -> int | None:
    """Parse a string to int, returning None for empty/whitespace/non-numeric values."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _coerce_count(v: object) -> int | None:
    if v is None:
        return None
    parsed = v if isinstance(v, int) else _parse_optional_int(str(v))
    if parsed is None:
        return None
    return max(0, parsed)


# ---------------------------------------------------------------------------
# ListingFilter model
# ---------------------------------------------------------------------------


class ListingFilter(BaseModel):
    """Validated listings filter parameters.

    All fields default to None (no filter). Validators coerce strings to the
    correct type and silently discard invalid values, so a malformed value
    behaves exactly like an omitted one.
    """

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    max_price: int | None = None

    # --- validators ---

    @field_validator("city", mode="before")
    @classmethod
    def clean_city(cls, v: object) -> str | None:
        if v is None:
            return None
        s = str(v).strip().lower()
        return s if s else None

    @field_validator("bedrooms", "bathrooms", mode="before")
    @classmethod
    def coerce_counts(cls, v: object) -> int | None:
        return _coerce_count(v)

    @field_validator("max_price", mode="before")
    @classmethod
    def coerce_price(cls, v: object) -> int | None:
        if v is None:
            return None
        if isinstance(v, int):
            return v
        return _parse_optional_int(str(v))

    # --- convenience methods ---

    def to_criteria(self) -> FilterCriteria:
        """Build the query-layer criteria."""
        return FilterCriteria(
            city=self.city,
            min_bedrooms=self.bedrooms,
            min_bathrooms=self.bathrooms,
            max_price=self.max_price,
        )

    def is_canonical(self, cities: Iterable[str]) -> bool:
        """True when every set field is one the filter form can produce.

        Only canonical filters get a listings cache entry, which bounds the
        cache to the product of the form's option sets.
        """
        if self.city is not None and self.city not in {c.lower() for c in cities}:
            return False
        if self.bedrooms is not None and self.bedrooms not in _BEDROOM_VALUES:
            return False
        if self.bathrooms is not None and self.bathrooms not in _BATHROOM_VALUES:
            return False
        return self.max_price is None or self.max_price in MAX_PRICE_OPTIONS

    def query_string(self) -> str:
        """Normalized query string, stable for equal filters (used as a cache key)."""
        params = {
            "city": self.city,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "maxPrice": self.max_price,
        }
        return urlencode({k: v for k, v in params.items() if v is not None})

    def active_filter_chips(self) -> list[dict[str, str]]:
        """Build filter chip descriptors for template rendering."""
        chips: list[dict[str, str]] = []
        if self.city:
            chips.append({"key": "city", "label": self.city.title()})
        if self.bedrooms is not None:
            label = "Studio+" if self.bedrooms == 0 else f"{self.bedrooms}+ bed"
            chips.append({"key": "bedrooms", "label": label})
        if self.bathrooms is not None:
            chips.append({"key": "bathrooms", "label": f"{self.bathrooms}+ bath"})
        if self.max_price is not None:
            chips.append({"key": "maxPrice", "label": f"Max £{self.max_price:,}"})
        return chips


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------


def parse_filters(
    city: str | None = None,
    bedrooms: str | None = None,
    bathrooms: str | None = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
) -> ListingFilter:
    """FastAPI dependency that parses query params into a ListingFilter."""
    return ListingFilter.model_validate(
        {
            "city": city,
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "max_price": max_price,
        }
    )


FilterDep = Annotated[ListingFilter, Depends(parse_filters)]
