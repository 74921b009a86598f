"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Query

from bookbrief.domain.book import BookInfo
from bookbrief.services.summarizer import SummaryGenerator


def get_summary_generator() -> SummaryGenerator:
    """Provide SummaryGenerator instance."""
    return SummaryGenerator()


def get_book_info(
    title: str | None = None,
    category: list[str] | None = Query(None),
    page_count: int | None = Query(None, ge=0),
    description: str | None = None,
    author: list[str] | None = Query(None),
    book_id: str | None = None,
) -> BookInfo | None:
    """Build BookInfo from query parameters; no title means no book."""
    if title is None:
        return None
    return BookInfo(
        title=title,
        categories=category or None,
        page_count=page_count,
        description=description or None,
        authors=author or None,
        book_id=book_id or None,
    )


# Type aliases for commonly used dependencies
GeneratorDep = Annotated[SummaryGenerator, Depends(get_summary_generator)]
BookQueryDep = Annotated[BookInfo | None, Depends(get_book_info)]
