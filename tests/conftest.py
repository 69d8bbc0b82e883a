"""Shared pytest fixtures."""

import logging
import os
from collections.abc import Callable, Iterator
from datetime import date
from typing import Any

import pytest
import structlog
from hypothesis import HealthCheck, settings

from rental_listings.config import Settings
from rental_listings.data import DEMO_PROPERTIES
from rental_listings.db import ListingQueryService
from rental_listings.logging import configure_logging
from rental_listings.models import PropertyRecord

# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent a local .env file or RENTAL_LISTINGS_* vars leaking into tests."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )
    for key in list(os.environ):
        if key.startswith("RENTAL_LISTINGS_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _configure_structlog() -> Iterator[None]:
    """Log to stderr at INFO for each test, then drop the config.

    Unconfigured structlog prints every level to stdout, which would mix
    with CLI output under test. The reset drops a stream that pytest closes
    after the test.
    """
    configure_logging(level=logging.INFO)
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_record() -> Callable[..., PropertyRecord]:
    """Factory for records with sensible defaults."""

    def _make(**overrides: Any) -> PropertyRecord:
        fields: dict[str, Any] = {
            "id": "x1",
            "title": "Test Flat",
            "description": "A flat used in tests.",
            "address": "1 Test Street, Leeds LS1 1AA",
            "city": "Leeds",
            "bedrooms": 1,
            "bathrooms": 1,
            "price": 900,
            "features": ("Garden",),
            "available_from": date(2024, 1, 1),
            "image_url": "/img.jpg",
        }
        fields.update(overrides)
        return PropertyRecord(**fields)

    return _make


@pytest.fixture
def demo_service() -> ListingQueryService:
    """Query service over the eight demo records."""
    return ListingQueryService(DEMO_PROPERTIES)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(site_base_url="https://rentals.example", simulate_latency=False)
