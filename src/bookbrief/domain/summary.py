"""Summary domain entities."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass
class Summary:
    """Represents a generated book summary."""

    headline: str
    key_points: list[str]
    themes: list[str]
    reading_time: str
    difficulty: str
    confidence: int | None = None


@dataclass
class GenerationResult:
    """Outcome of one summary generation request."""

    success: bool
    data: Summary | None = None
    error: str | None = None
    fallback: Summary | None = None
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def ok(cls, summary: Summary) -> "GenerationResult":
        return cls(success=True, data=summary)

    @classmethod
    def failed(cls, error: str, fallback: Summary | None = None) -> "GenerationResult":
        return cls(success=False, error=error, fallback=fallback)
