"""Book domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BookInfo:
    """Metadata describing a book, as supplied by the calling page."""

    title: str
    categories: list[str] | None = None
    page_count: int | None = None
    description: str | None = None
    authors: list[str] | None = None
    book_id: str | None = None

    @staticmethod
    def _string_list(value: Any) -> list[str] | None:
        """Keep only string entries; empty or non-list values become None."""
        if not isinstance(value, list):
            return None
        items = [item for item in value if isinstance(item, str)]
        return items or None

    @classmethod
    def from_google_books(cls, volume: dict) -> "BookInfo":
        """Create BookInfo from a Google Books volume resource."""
        info = volume.get("volumeInfo") or {}
        page_count = info.get("pageCount")
        if (
            not isinstance(page_count, int)
            or isinstance(page_count, bool)
            or page_count < 0
        ):
            page_count = None
        return cls(
            title=info.get("title") or "",
            categories=cls._string_list(info.get("categories")),
            page_count=page_count,
            description=info.get("description") or None,
            authors=cls._string_list(info.get("authors")),
            book_id=volume.get("id"),
        )
