"""Application configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rental_listings.utils.latency import LatencyStrategy, NoLatency, SimulatedLatency


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RENTAL_LISTINGS_",
        extra="ignore",
    )

    # Site identity (used in page metadata, sitemap and robots.txt)
    site_name: str = Field(default="UK Rental Properties")
    site_base_url: str = Field(
        default="https://your-domain.com",
        description="Public base URL, without trailing slash",
    )

    # Rendering strategies
    featured_ids: str = Field(
        default="1,2,3",
        description="Comma-separated property ids pre-rendered at startup",
    )
    revalidate_seconds: int = Field(
        default=60,
        ge=0,
        description="Seconds before a cached listings page is re-rendered",
    )

    # Demo data source
    simulate_latency: bool = Field(
        default=False,
        description="Delay each data call by a random interval to mimic a remote API",
    )

    # Web server
    web_port: int = Field(default=8000, description="Web server port")
    web_host: str = Field(default="127.0.0.1", description="Web server host")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    @property
    def base_url(self) -> str:
        """Base URL with any trailing slash removed."""
        return self.site_base_url.rstrip("/")

    def get_featured_ids(self) -> tuple[str, ...]:
        """Parse featured_ids string into a tuple of ids, dropping blanks."""
        return tuple(i.strip() for i in self.featured_ids.split(",") if i.strip())

    def get_latency(self) -> LatencyStrategy:
        """Build the latency strategy the data calls should use."""
        return SimulatedLatency() if self.simulate_latency else NoLatency()
