"""Dev-only API endpoints for previewing summaries."""

import logging
import random

from fastapi import APIRouter, HTTPException

from bookbrief.api.v1.schemas import BookInfoRequest, GenerationResponse
from bookbrief.config import get_settings
from bookbrief.domain.samples import SAMPLE_BOOKS
from bookbrief.services.summarizer import HeuristicBackend, SummaryGenerator

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/dev", tags=["dev"])


def _ensure_dev() -> None:
    if settings.is_production:
        raise HTTPException(403, "Not available in production")
    if not settings.enable_dev_endpoints:
        raise HTTPException(
            403, "Dev endpoints disabled. Set ENABLE_DEV_ENDPOINTS=true in .env"
        )


@router.get("/sample-books")
async def list_sample_books() -> dict:
    """List the bundled sample books. Dev mode only."""
    _ensure_dev()

    return {
        key: {
            "title": book.title,
            "categories": book.categories,
            "page_count": book.page_count,
            "description": book.description,
            "authors": book.authors,
            "book_id": book.book_id,
        }
        for key, book in SAMPLE_BOOKS.items()
    }


@router.post("/summaries/preview", response_model=GenerationResponse)
async def preview_summary(
    request: BookInfoRequest | None = None,
    sample: str | None = None,
    seed: int = 0,
) -> GenerationResponse:
    """Generate a seeded summary without the processing delay (dev-only).

    Args:
        request: Book metadata (ignored when sample is given)
        sample: Key of a bundled sample book
        seed: Seed for template choice and confidence

    Returns:
        Generation result
    """
    _ensure_dev()

    if sample is not None:
        book = SAMPLE_BOOKS.get(sample)
        if book is None:
            raise HTTPException(404, f"Unknown sample book: {sample}")
    elif request is not None:
        book = request.to_domain()
    else:
        raise HTTPException(400, "Provide a request body or a sample key")

    logger.info(f"Dev preview for {book.title!r} with seed {seed}")

    generator = SummaryGenerator(
        backend=HeuristicBackend(rng=random.Random(seed)),
        delay_seconds=0,
    )
    result = await generator.generate(book)
    return GenerationResponse.model_validate(result)
