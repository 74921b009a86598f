"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from bookbrief.domain.book import BookInfo


class BookInfoRequest(BaseModel):
    """Request schema for book metadata."""

    title: str
    categories: list[str] | None = None
    page_count: int | None = Field(
        None, ge=0, validation_alias=AliasChoices("page_count", "pageCount")
    )
    description: str | None = None
    authors: list[str] | None = None
    book_id: str | None = Field(None, validation_alias=AliasChoices("book_id", "id"))

    def to_domain(self) -> BookInfo:
        return BookInfo(
            title=self.title,
            categories=self.categories or None,
            page_count=self.page_count,
            description=self.description or None,
            authors=self.authors or None,
            book_id=self.book_id,
        )


class SummaryResponse(BaseModel):
    """Response schema for a generated summary."""

    model_config = ConfigDict(from_attributes=True)

    headline: str
    key_points: list[str]
    themes: list[str]
    reading_time: str
    difficulty: str
    confidence: int | None = None


class GenerationResponse(BaseModel):
    """Response schema for a generation request."""

    model_config = ConfigDict(from_attributes=True)

    success: bool
    data: SummaryResponse | None = None
    error: str | None = None
    fallback: SummaryResponse | None = None
    generated_at: datetime
