"""Summary cache interface."""

import logging
from abc import ABC, abstractmethod

from bookbrief.domain.summary import Summary

logger = logging.getLogger(__name__)


class SummaryCache(ABC):
    """Key-value store for generated summaries, keyed by book id."""

    @abstractmethod
    async def get(self, key: str) -> Summary | None:
        """Return the cached summary for key, if any."""

    @abstractmethod
    async def put(self, key: str, summary: Summary) -> None:
        """Store a summary under key."""


class NullSummaryCache(SummaryCache):
    """Cache that never stores anything; every lookup misses."""

    async def get(self, key: str) -> Summary | None:
        logger.debug(f"Cache miss for book {key}")
        return None

    async def put(self, key: str, summary: Summary) -> None:
        logger.debug(f"Caching summary for book {key}: {summary.headline[:60]}")
