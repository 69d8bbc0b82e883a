"""Simulated network latency for the demo data source.

The query service is synchronous and pure. Web handlers await one of these
strategies before calling it so the demo shows realistic load times without
touching the query logic.
"""

import asyncio
import random
from enum import StrEnum
from typing import Protocol, Self

from pydantic import BaseModel, ConfigDict, model_validator

from rental_listings.logging import get_logger

logger = get_logger(__name__)


class Operation(StrEnum):
    """Query operations that can be delayed."""

    LIST = "list"
    GET = "get"
    IDS = "ids"
    FEATURED = "featured"
    STATS = "stats"


class DelayRange(BaseModel):
    """Inclusive range of milliseconds to wait."""

    model_config = ConfigDict(frozen=True)

    min_ms: int
    max_ms: int

    @model_validator(mode="after")
    def check_range(self) -> Self:
        if self.min_ms < 0 or self.min_ms > self.max_ms:
            raise ValueError("delay range must satisfy 0 <= min_ms <= max_ms")
        return self


DEFAULT_PROFILE: dict[Operation, DelayRange] = {
    Operation.LIST: DelayRange(min_ms=300, max_ms=500),
    Operation.GET: DelayRange(min_ms=200, max_ms=300),
    Operation.IDS: DelayRange(min_ms=100, max_ms=100),
    Operation.FEATURED: DelayRange(min_ms=100, max_ms=100),
    Operation.STATS: DelayRange(min_ms=150, max_ms=150),
}


class LatencyStrategy(Protocol):
    async def wait(self, operation: Operation) -> float: ...


class NoLatency:
    """Return immediately."""

    async def wait(self, operation: Operation) -> float:
        return 0.0


class SimulatedLatency:
    """Sleep for a random duration drawn from a per-operation range."""

    def __init__(
        self,
        profile: dict[Operation, DelayRange] | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.profile = dict(profile if profile is not None else DEFAULT_PROFILE)
        self._rng = rng or random.Random()

    def pick_delay(self, operation: Operation) -> float:
        """Choose a delay in seconds for the operation (0 if unprofiled)."""
        delay_range = self.profile.get(operation)
        if delay_range is None:
            return 0.0
        return self._rng.uniform(delay_range.min_ms, delay_range.max_ms) / 1000

    async def wait(self, operation: Operation) -> float:
        """Sleep and return the number of seconds waited."""
        seconds = self.pick_delay(operation)
        if seconds > 0:
            logger.debug("simulated_latency", operation=operation.value, seconds=round(seconds, 3))
            await asyncio.sleep(seconds)
        return seconds
