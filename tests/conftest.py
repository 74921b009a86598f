"""Pytest configuration and fixtures."""

import random
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from bookbrief.api.dependencies import get_summary_generator
from bookbrief.domain.book import BookInfo
from bookbrief.main import app
from bookbrief.services.summarizer import HeuristicBackend, SummaryGenerator


def make_generator(seed: int = 42) -> SummaryGenerator:
    """Create a delay-free generator with a seeded random source."""
    return SummaryGenerator(
        backend=HeuristicBackend(
            rng=random.Random(seed),
            words_per_page=250,
            words_per_minute=200,
            include_confidence=True,
        ),
        delay_seconds=0,
    )


@pytest.fixture
def generator() -> SummaryGenerator:
    """Delay-free, seeded summary generator."""
    return make_generator()


@pytest.fixture
def atlas() -> BookInfo:
    """Short fiction book."""
    return BookInfo(title="Atlas", categories=["Fiction"], page_count=300)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with a delay-free generator."""
    app.dependency_overrides[get_summary_generator] = lambda: make_generator()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
