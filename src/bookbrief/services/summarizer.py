"""Book summary generation service with a local heuristic backend."""

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from dataclasses import replace

from bookbrief.config import get_settings
from bookbrief.domain.book import BookInfo
from bookbrief.domain.summary import GenerationResult, Summary
from bookbrief.repositories.summary_cache import NullSummaryCache, SummaryCache
from bookbrief.services import heuristics

logger = logging.getLogger(__name__)
settings = get_settings()

# Returned alongside failures so callers always have something to show
FALLBACK_SUMMARY = Summary(
    headline=(
        "This book explores fundamental concepts and ideas that challenge conventional "
        "thinking, offering readers new perspectives on life and knowledge."
    ),
    key_points=[
        "Presents innovative approaches to problem-solving and critical thinking",
        "Challenges readers to question assumptions and explore new perspectives",
        "Offers practical insights that can be applied to daily life",
        "Combines theoretical concepts with real-world examples",
        "Encourages personal growth and intellectual development",
    ],
    themes=["Personal Development", "Critical Thinking", "Life Philosophy"],
    reading_time="4-6 hours",
    difficulty="Intermediate",
)


def fallback_summary() -> Summary:
    """Fresh copy of FALLBACK_SUMMARY for one failed result."""
    return replace(
        FALLBACK_SUMMARY,
        key_points=list(FALLBACK_SUMMARY.key_points),
        themes=list(FALLBACK_SUMMARY.themes),
    )


class SummaryGenerationError(Exception):
    """Raised by a backend when a summary cannot be produced."""


class SummaryBackend(ABC):
    """Produces a summary for a book. Implementations may be remote."""

    @abstractmethod
    async def summarize(self, book: BookInfo) -> Summary:
        """Build a summary or raise SummaryGenerationError."""


class HeuristicBackend(SummaryBackend):
    """Backend that derives summaries from category and page-count rules."""

    def __init__(
        self,
        rng: random.Random | None = None,
        words_per_page: int | None = None,
        words_per_minute: int | None = None,
        include_confidence: bool | None = None,
    ) -> None:
        """Initialize the backend.

        Args:
            rng: Random source for template choice and confidence (seed it in tests)
            words_per_page: Reading time assumption (defaults to config)
            words_per_minute: Reading speed assumption (defaults to config)
            include_confidence: Whether to attach a confidence score (defaults to config)
        """
        self.rng = rng or random.Random()
        self.words_per_page = words_per_page or settings.words_per_page
        self.words_per_minute = words_per_minute or settings.words_per_minute
        self.include_confidence = (
            settings.include_confidence if include_confidence is None else include_confidence
        )

    async def summarize(self, book: BookInfo) -> Summary:
        if not isinstance(book.title, str):
            raise SummaryGenerationError("Book title must be text")

        return Summary(
            headline=heuristics.generate_headline(book.title, book.categories, self.rng),
            key_points=heuristics.generate_key_points(book.categories),
            themes=heuristics.extract_themes(book.categories, book.description),
            reading_time=heuristics.estimate_reading_time(
                book.page_count, self.words_per_page, self.words_per_minute
            ),
            difficulty=heuristics.assess_difficulty(book.description, book.page_count),
            confidence=(
                heuristics.confidence_score(self.rng) if self.include_confidence else None
            ),
        )


class SummaryGenerator:
    """Runs a backend behind a simulated processing delay and a cache."""

    def __init__(
        self,
        backend: SummaryBackend | None = None,
        cache: SummaryCache | None = None,
        delay_seconds: float | None = None,
    ) -> None:
        """Initialize the generator."""
        self.backend = backend or HeuristicBackend()
        self.cache = cache or NullSummaryCache()
        self.delay_seconds = (
            settings.summary_delay_seconds if delay_seconds is None else delay_seconds
        )

    async def generate(self, book: BookInfo) -> GenerationResult:
        """Generate a summary for a book.

        Never raises: backend failures come back as a failed result carrying
        the error message and a copy of FALLBACK_SUMMARY.
        """
        if book.book_id:
            cached = await self.cache.get(book.book_id)
            if cached is not None:
                return GenerationResult.ok(cached)

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        try:
            summary = await self.backend.summarize(book)
        except Exception as e:
            logger.error(f"Failed to generate summary for {book.title!r}: {e}")
            return GenerationResult.failed(str(e), fallback=fallback_summary())

        if book.book_id:
            await self.cache.put(book.book_id, summary)

        logger.info(f"Generated summary for {book.title!r} ({summary.difficulty})")
        return GenerationResult.ok(summary)
