"""HTMX-powered web views for the book summary panel."""

from pathlib import Path
from urllib.parse import urlencode

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from bookbrief.api.dependencies import BookQueryDep, GeneratorDep
from bookbrief.api.web.panel import SummaryPanel
from bookbrief.domain.book import BookInfo
from bookbrief.domain.samples import DEFAULT_SAMPLE, SAMPLE_BOOKS

router = APIRouter(tags=["web"])

# Templates configuration
templates = Jinja2Templates(directory=Path(__file__).resolve().parents[2] / "templates")


def book_query(book: BookInfo | None) -> str:
    """Encode a book back into the query string the panel endpoints accept."""
    if book is None:
        return ""
    params: list[tuple[str, str]] = [("title", book.title)]
    params.extend(("category", c) for c in book.categories or [])
    if book.page_count is not None:
        params.append(("page_count", str(book.page_count)))
    if book.description:
        params.append(("description", book.description))
    params.extend(("author", a) for a in book.authors or [])
    if book.book_id:
        params.append(("book_id", book.book_id))
    return urlencode(params)


def render_panel(request: Request, panel: SummaryPanel) -> HTMLResponse:
    """Render the partial for the panel's current state."""
    return templates.TemplateResponse(
        request=request,
        name=panel.template_name,
        context={**panel.context(), "book_query": book_query(panel.book)},
    )


@router.get("/", response_class=HTMLResponse)
async def book_page(
    request: Request,
    book: BookQueryDep,
    generator: GeneratorDep,
) -> HTMLResponse:
    """Render the book detail page with the summary panel in its idle state."""
    panel = SummaryPanel(book=book or SAMPLE_BOOKS[DEFAULT_SAMPLE], generator=generator)

    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context={
            **panel.context(),
            "book_query": book_query(panel.book),
            "panel_template": panel.template_name,
        },
    )


@router.get("/summary/panel", response_class=HTMLResponse)
async def summary_panel(
    request: Request,
    book: BookQueryDep,
    generator: GeneratorDep,
) -> HTMLResponse:
    """HTMX endpoint returning the idle panel."""
    return render_panel(request, SummaryPanel(book=book, generator=generator))


@router.get("/summary/loading", response_class=HTMLResponse)
async def summary_loading(
    request: Request,
    book: BookQueryDep,
    generator: GeneratorDep,
) -> HTMLResponse:
    """HTMX endpoint for generate, regenerate and retry.

    Returns the loading panel, which requests /summary/result on load. The
    swap replaces any previously shown result.
    """
    panel = SummaryPanel(book=book, generator=generator)
    panel.begin()
    return render_panel(request, panel)


@router.get("/summary/result", response_class=HTMLResponse)
async def summary_result(
    request: Request,
    book: BookQueryDep,
    generator: GeneratorDep,
) -> HTMLResponse:
    """HTMX endpoint that runs generation and returns the success or error panel."""
    panel = SummaryPanel(book=book, generator=generator)
    await panel.generate()
    return render_panel(request, panel)
