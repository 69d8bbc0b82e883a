"""Tests for site routes: pages, sitemap, robots and health."""

import json
import re

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rental_listings.config import Settings
from rental_listings.web.app import create_app
from rental_listings.web.page_cache import PageCache


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings, prerender=False)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def _cache(app: FastAPI) -> PageCache:
    return app.state.page_cache  # type: ignore[no-any-return]


class TestHealthCheck:
    def test_health_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestHome:
    def test_shows_stats(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Find Your Perfect Rental Property" in resp.text
        assert "&pound;1156" in resp.text
        assert "&pound;550-1800" in resp.text
        assert '/listings?city=nottingham' in resp.text

    def test_metadata(self, client: TestClient) -> None:
        resp = client.get("/")
        assert "<title>UK Rental Properties | Find Your Perfect Home</title>" in resp.text
        assert '<link rel="canonical" href="https://rentals.example">' in resp.text
        assert 'property="og:type" content="website"' in resp.text

    def test_static_cached(self, client: TestClient) -> None:
        first = client.get("/")
        second = client.get("/")
        assert first.headers["X-Cache"] == "MISS"
        assert second.headers["X-Cache"] == "HIT"
        assert second.headers["X-Render-Strategy"] == "static"


class TestListings:
    def test_all(self, client: TestClient) -> None:
        resp = client.get("/listings")
        assert resp.status_code == 200
        assert "8 properties found" in resp.text
        assert resp.headers["X-Render-Strategy"] == "revalidate"

    def test_city_filter_case_insensitive(self, client: TestClient) -> None:
        resp = client.get("/listings?city=MANCHESTER&bedrooms=2")
        assert "2 properties found" in resp.text
        assert "Modern City Centre Apartment" in resp.text
        assert "Family Home with Parking" in resp.text
        assert "Luxury Penthouse" not in resp.text
        assert "<title>Rental Properties in Manchester - 2+ Bedrooms" in resp.text

    def test_max_price(self, client: TestClient) -> None:
        resp = client.get("/listings?maxPrice=700")
        assert "2 properties found" in resp.text
        assert "Student-Friendly Flat" in resp.text
        assert "City Centre Studio" in resp.text

    def test_single_result_wording(self, client: TestClient) -> None:
        resp = client.get("/listings?maxPrice=600")
        assert "1 property found" in resp.text

    def test_no_results(self, client: TestClient) -> None:
        resp = client.get("/listings?city=london")
        assert resp.status_code == 200
        assert "No properties found" in resp.text

    def test_malformed_values_ignored(self, client: TestClient) -> None:
        resp = client.get("/listings?bedrooms=lots&maxPrice=&bathrooms=x")
        assert resp.status_code == 200
        assert "8 properties found" in resp.text

    def test_selected_options_preserved(self, client: TestClient) -> None:
        resp = client.get("/listings?city=leeds&bathrooms=3")
        assert '<option value="leeds" selected>' in resp.text
        assert '<option value="3" selected>' in resp.text

    def test_cache_key_normalized(self, app: FastAPI, client: TestClient) -> None:
        client.get("/listings?city=Leeds&bedrooms=2")
        resp = client.get("/listings?bedrooms=2&city=leeds")
        assert resp.headers["X-Cache"] == "HIT"
        assert "/listings?city=leeds&bedrooms=2" in _cache(app)

    def test_revalidated_after_ttl(self, test_settings: Settings) -> None:
        settings = test_settings.model_copy(update={"revalidate_seconds": 0})
        client = TestClient(create_app(settings, prerender=False))
        client.get("/listings")
        assert client.get("/listings").headers["X-Cache"] == "MISS"


class TestPropertyDetail:
    def test_found(self, client: TestClient) -> None:
        resp = client.get("/property/1")
        assert resp.status_code == 200
        assert "Modern City Centre Apartment" in resp.text
        assert "15 Deansgate, Manchester M1 5QG" in resp.text
        assert "1 February 2024" in resp.text

    def test_json_ld_embedded(self, client: TestClient) -> None:
        resp = client.get("/property/4")
        match = re.search(
            r'<script type="application/ld\+json">(.*?)</script>', resp.text, re.DOTALL
        )
        assert match is not None
        data = json.loads(match.group(1))
        assert data["@type"] == "RentAction"
        assert data["object"]["name"] == "Luxury Penthouse"

    def test_studio_label(self, client: TestClient) -> None:
        resp = client.get("/property/7")
        assert "<dd>Studio</dd>" in resp.text

    def test_featured_is_static(self, client: TestClient) -> None:
        resp = client.get("/property/2")
        assert resp.headers["X-Render-Strategy"] == "static"

    def test_other_is_on_demand_then_cached(self, app: FastAPI, client: TestClient) -> None:
        first = client.get("/property/6")
        second = client.get("/property/6")
        assert first.headers["X-Render-Strategy"] == "on_demand"
        assert first.headers["X-Cache"] == "MISS"
        assert second.headers["X-Cache"] == "HIT"
        assert "/property/6" in _cache(app)

    def test_not_found(self, app: FastAPI, client: TestClient) -> None:
        resp = client.get("/property/does-not-exist")
        assert resp.status_code == 404
        assert "Property Not Found" in resp.text
        assert '<meta name="robots" content="noindex">' in resp.text
        assert "/property/does-not-exist" not in _cache(app)


class TestSitemapAndRobots:
    def test_sitemap(self, client: TestClient) -> None:
        resp = client.get("/sitemap.xml")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/xml")
        for pid in range(1, 9):
            assert f"<loc>https://rentals.example/property/{pid}</loc>" in resp.text
        assert "<loc>https://rentals.example/listings?city=birmingham</loc>" in resp.text

    def test_robots(self, client: TestClient) -> None:
        resp = client.get("/robots.txt")
        assert resp.status_code == 200
        assert "Disallow: /api/" in resp.text
        assert "Sitemap: https://rentals.example/sitemap.xml" in resp.text


class TestRenderFailures:
    def test_listings_failure_renders_error_page(
        self, app: FastAPI, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _boom(*args: object, **kwargs: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(app.state.service, "list_properties", _boom)
        resp = client.get("/listings")
        assert resp.status_code == 500
        assert "Failed to load properties" in resp.text
        assert "<title>Error | UK Rental Properties</title>" in resp.text
        assert len(_cache(app)) == 0

    def test_home_without_html_renders_error_page(
        self, app: FastAPI, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def _empty(*args: object) -> None:
            return None

        monkeypatch.setattr("rental_listings.web.routes.render_home", _empty)
        resp = client.get("/")
        assert resp.status_code == 500
        assert "Failed to load the home page" in resp.text
        assert len(_cache(app)) == 0

    def test_listings_without_html_renders_error_page(
        self, app: FastAPI, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def _empty(*args: object) -> None:
            return None

        monkeypatch.setattr("rental_listings.web.routes.render_listings", _empty)
        resp = client.get("/listings?city=leeds")
        assert resp.status_code == 500
        assert "Failed to load properties" in resp.text


class TestListingsCacheBounds:
    def test_unknown_values_bypass_cache(self, app: FastAPI, client: TestClient) -> None:
        for i in range(50):
            assert client.get(f"/listings?city=nowhere{i}").headers["X-Cache"] == "BYPASS"
            assert client.get(f"/listings?maxPrice={i}").headers["X-Cache"] == "BYPASS"
        assert len(_cache(app)) == 0

    def test_bypassed_page_still_filters(self, client: TestClient) -> None:
        resp = client.get("/listings?maxPrice=700")
        assert resp.status_code == 200
        assert resp.headers["X-Render-Strategy"] == "revalidate"
        assert "2 properties found" in resp.text

    def test_form_values_are_cached(self, app: FastAPI, client: TestClient) -> None:
        client.get("/listings?city=nottingham&bedrooms=0&bathrooms=1&maxPrice=800")
        resp = client.get("/listings?city=Nottingham&bedrooms=0&bathrooms=1&maxPrice=800")
        assert resp.headers["X-Cache"] == "HIT"
        assert len(_cache(app)) == 1

    def test_cache_bounded_by_option_sets(self, app: FastAPI, client: TestClient) -> None:
        for city in ("leeds", "manchester"):
            for price in (600, 800, 1000):
                client.get(f"/listings?city={city}&maxPrice={price}")
                client.get(f"/listings?maxPrice={price}&city={city.upper()}")
        assert len(_cache(app)) == 6
