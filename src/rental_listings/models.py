"""Pydantic models for rental listings, filter criteria and summary stats."""

from datetime import date
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

CURRENCY: Final = "GBP"


class PropertyRecord(BaseModel):
    """A rental property listing. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique opaque identifier")
    title: str
    description: str
    address: str
    city: str
    bedrooms: int = Field(ge=0, description="0 denotes a studio")
    bathrooms: int = Field(ge=1)
    price: int = Field(gt=0, description="Monthly rent in whole GBP")
    features: tuple[str, ...] = ()
    available_from: date
    image_url: str

    @property
    def is_studio(self) -> bool:
        return self.bedrooms == 0

    @property
    def bedroom_label(self) -> str:
        """Short bedroom label for cards, e.g. "Studio" or "2 bed"."""
        return "Studio" if self.is_studio else f"{self.bedrooms} bed"

    @property
    def city_slug(self) -> str:
        """Lower-case city name as used in listing URLs."""
        return self.city.lower()


class FilterCriteria(BaseModel):
    """Optional predicates narrowing a listing query.

    Every field is independently optional; an absent field imposes no
    constraint.
    """

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    min_bedrooms: int | None = Field(default=None, ge=0)
    min_bathrooms: int | None = Field(default=None, ge=0)
    max_price: int | None = None

    @field_validator("city")
    @classmethod
    def strip_city(cls, v: str | None) -> str | None:
        """Treat a blank city as no constraint."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def is_empty(self) -> bool:
        """Whether no constraint is set."""
        return (
            self.city is None
            and self.min_bedrooms is None
            and self.min_bathrooms is None
            and self.max_price is None
        )

    def matches(self, record: PropertyRecord) -> bool:
        """Check if a record satisfies every supplied constraint."""
        if self.city is not None and record.city.lower() != self.city.lower():
            return False
        if self.min_bedrooms is not None and record.bedrooms < self.min_bedrooms:
            return False
        if self.min_bathrooms is not None and record.bathrooms < self.min_bathrooms:
            return False
        return self.max_price is None or record.price <= self.max_price


class StatsSummary(BaseModel):
    """Aggregate view over the whole record set."""

    model_config = ConfigDict(frozen=True)

    total_count: int = Field(ge=0)
    distinct_cities: tuple[str, ...] = ()
    average_price: int = Field(ge=0)
    min_price: int = Field(ge=0)
    max_price: int = Field(ge=0)
