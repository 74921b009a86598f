"""Sample books for the demo page and dev endpoints."""

from bookbrief.domain.book import BookInfo

SAMPLE_BOOKS: dict[str, BookInfo] = {
    "atlas": BookInfo(
        title="Atlas",
        categories=["Fiction"],
        page_count=300,
        authors=["Jane Doe"],
        book_id="sample-atlas",
    ),
    "team-playbook": BookInfo(
        title="The Team Playbook",
        categories=["Business & Economics", "Self-Help"],
        page_count=240,
        description=(
            "A field guide for new managers on leadership, building a team "
            "and driving change without burning out."
        ),
        authors=["R. Okafor"],
        book_id="sample-team-playbook",
    ),
    "foundations": BookInfo(
        title="Foundations of Computation",
        categories=["Science", "Philosophy", "Mathematics", "Computers"],
        page_count=720,
        description=(
            "A rigorous, theoretical treatment of computability and complexity "
            "drawing on decades of academic research."
        ),
        authors=["M. Ito", "L. Berger"],
        book_id="sample-foundations",
    ),
    "untitled": BookInfo(title="X"),
}

DEFAULT_SAMPLE = "atlas"
