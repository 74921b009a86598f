"""Display state for the book summary panel."""

import logging
from dataclasses import dataclass
from enum import StrEnum

from bookbrief.domain.book import BookInfo
from bookbrief.domain.summary import Summary
from bookbrief.services.summarizer import SummaryGenerator

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Failed to generate AI summary. Please try again later."


class PanelState(StrEnum):
    """Mutually exclusive render states of the panel."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


PANEL_TEMPLATES: dict[PanelState, str] = {
    PanelState.IDLE: "partials/summary_idle.html",
    PanelState.LOADING: "partials/summary_loading.html",
    PanelState.SUCCESS: "partials/summary_success.html",
    PanelState.ERROR: "partials/summary_error.html",
}


@dataclass
class SummaryPanel:
    """Holds the result, loading flag and error message for one book.

    Transitions:
    - idle --generate--> loading
    - loading --ok--> success, loading --fail--> error
    - success --regenerate--> loading (previous result dropped first)
    - error --retry--> loading
    """

    book: BookInfo | None
    generator: SummaryGenerator
    summary: Summary | None = None
    loading: bool = False
    error: str | None = None

    @property
    def state(self) -> PanelState:
        if self.loading:
            return PanelState.LOADING
        if self.error:
            return PanelState.ERROR
        if self.summary is not None:
            return PanelState.SUCCESS
        return PanelState.IDLE

    @property
    def template_name(self) -> str:
        return PANEL_TEMPLATES[self.state]

    def begin(self) -> bool:
        """Enter the loading state. Returns False if the request is ignored."""
        if self.book is None or self.loading:
            return False
        self.loading = True
        self.error = None
        return True

    async def generate(self) -> None:
        """Run one generation and settle in success or error."""
        if not self.begin():
            return

        try:
            result = await self.generator.generate(self.book)
            if result.success:
                self.summary = result.data
            else:
                logger.error(f"Summary generation error: {result.error}")
                self.error = ERROR_MESSAGE
        except Exception as e:
            logger.error(f"Summary generation error: {e}")
            self.error = ERROR_MESSAGE
        finally:
            self.loading = False

    async def regenerate(self) -> None:
        """Drop the current result and generate a fresh one."""
        if self.loading:
            return
        self.summary = None
        await self.generate()

    async def retry(self) -> None:
        """Re-run generation after a failure."""
        await self.generate()

    def context(self) -> dict:
        """Template context for the current state."""
        return {
            "state": self.state.value,
            "book": self.book,
            "summary": self.summary,
            "error": self.error,
        }
