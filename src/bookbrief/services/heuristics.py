"""Rule table for locally generated book summaries."""

import math
import random

# Headline templates keyed by category hint, in precedence order
HEADLINE_HINTS: dict[str, str] = {
    "fiction": (
        "{title} is a compelling work of fiction that weaves together engaging "
        "characters and thought-provoking themes, offering readers an immersive "
        "literary experience."
    ),
    "business": (
        "{title} provides strategic insights and practical business wisdom, helping "
        "readers navigate complex professional challenges with proven methodologies."
    ),
    "history": (
        "{title} offers a comprehensive examination of historical events and their "
        "lasting impact, providing readers with valuable context for understanding "
        "our world today."
    ),
    "self-help": (
        "{title} is a practical guide to personal growth, pairing actionable "
        "techniques with encouragement for lasting self-improvement."
    ),
    "science": (
        "{title} makes scientific ideas accessible, explaining complex concepts "
        "with clarity while conveying the excitement of discovery."
    ),
    "philosophy": (
        "{title} engages with enduring philosophical questions, inviting readers to "
        "examine their assumptions about knowledge, ethics and meaning."
    ),
    "biography": (
        "{title} offers an intimate portrait of its subject, tracing the "
        "experiences and decisions that shaped a remarkable life."
    ),
}

GENERIC_HEADLINES = [
    "{title} presents a thorough exploration of its subject matter, combining expert "
    "knowledge with accessible writing to deliver valuable insights to readers.",
    "{title} is a comprehensive exploration of its subject matter, offering readers "
    "valuable insights and practical knowledge.",
    "{title} combines theoretical understanding with practical applications, making "
    "complex ideas accessible to readers.",
]

BASE_KEY_POINTS = [
    "Provides comprehensive coverage of the main topic with clear explanations",
    "Offers practical strategies and actionable insights for readers",
    "Combines research-backed information with real-world examples",
    "Presents complex ideas in an accessible and engaging manner",
]

CATEGORY_KEY_POINTS: dict[str, list[str]] = {
    "Business": ["Offers strategic business insights and management principles"],
    "Self-Help": ["Focuses on personal development and self-improvement techniques"],
    "Fiction": ["Creates compelling characters and engaging narrative arcs"],
    "History": ["Provides historical context and analyzes significant events"],
    "Science": ["Explains scientific concepts with clarity and precision"],
    "Biography": ["Offers intimate insights into the subject's life and achievements"],
    "Philosophy": ["Explores deep philosophical questions and ethical considerations"],
}

THEME_KEYWORDS: dict[str, list[str]] = {
    "Leadership": ["leader", "leadership", "manage", "team"],
    "Innovation": ["innovation", "creative", "technology", "future"],
    "Personal Growth": ["growth", "development", "improve", "change"],
    "Relationships": ["relationship", "love", "family", "social"],
}

FILLER_THEMES = ["Personal Development", "Critical Thinking", "Life Philosophy"]

COMPLEX_KEYWORDS = ["theoretical", "philosophical", "technical", "academic", "research"]

MAX_KEY_POINTS = 5
MAX_CATEGORY_THEMES = 3
MAX_THEMES = 4

UNKNOWN_READING_TIME = "3-5 hours"
WORDS_PER_PAGE = 250
WORDS_PER_MINUTE = 200

BEGINNER_MAX_PAGES = 200  # exclusive
ADVANCED_MIN_PAGES = 500  # exclusive

CONFIDENCE_RANGE = (80, 99)


def generate_headline(
    title: str,
    categories: list[str] | None,
    rng: random.Random,
) -> str:
    """Pick the headline for the first category hint that matches."""
    lowered = [category.lower() for category in categories or []]
    for hint, template in HEADLINE_HINTS.items():
        if any(hint in category for category in lowered):
            return template.format(title=title)
    return rng.choice(GENERIC_HEADLINES).format(title=title)


def category_key_points(categories: list[str]) -> list[str]:
    """Collect category statements; every match is appended, duplicates kept."""
    points = []
    for category in categories:
        for key, statements in CATEGORY_KEY_POINTS.items():
            if key.lower() in category.lower():
                points.extend(statements)
    return points


def generate_key_points(categories: list[str] | None) -> list[str]:
    """Base points first, then category statements, capped at MAX_KEY_POINTS."""
    points = list(BASE_KEY_POINTS)
    if categories:
        points.extend(category_key_points(categories))
    return points[:MAX_KEY_POINTS]


def extract_themes(categories: list[str] | None, description: str | None) -> list[str]:
    """Derive up to MAX_THEMES unique themes from categories and description."""
    themes: list[str] = []
    if categories:
        themes.extend(categories[:MAX_CATEGORY_THEMES])

    if description:
        lowered = description.lower()
        for theme, keywords in THEME_KEYWORDS.items():
            if any(keyword in lowered for keyword in keywords):
                themes.append(theme)

    if not themes:
        return list(FILLER_THEMES)

    # dict.fromkeys keeps first occurrence order
    return list(dict.fromkeys(themes))[:MAX_THEMES]


def estimate_hours(
    page_count: int,
    words_per_page: int = WORDS_PER_PAGE,
    words_per_minute: int = WORDS_PER_MINUTE,
) -> int:
    """Estimated whole reading hours, rounded half up."""
    minutes = page_count * words_per_page / words_per_minute
    return math.floor(minutes / 60 + 0.5)


def estimate_reading_time(
    page_count: int | None,
    words_per_page: int = WORDS_PER_PAGE,
    words_per_minute: int = WORDS_PER_MINUTE,
) -> str:
    """Bucket the estimated reading time into a display label."""
    if not page_count:
        return UNKNOWN_READING_TIME

    hours = estimate_hours(page_count, words_per_page, words_per_minute)
    if hours < 2:
        return "1-2 hours"
    if hours < 4:
        return "2-4 hours"
    if hours < 8:
        return "4-8 hours"
    low = hours // 2 * 2
    return f"{low}-{low + 2} hours"


def assess_difficulty(description: str | None, page_count: int | None) -> str:
    """Classify difficulty from page count, gated by complex vocabulary for Advanced."""
    if page_count is None:
        return "Intermediate"

    lowered = (description or "").lower()
    has_complex_words = any(word in lowered for word in COMPLEX_KEYWORDS)

    if page_count > ADVANCED_MIN_PAGES and has_complex_words:
        return "Advanced"
    if page_count < BEGINNER_MAX_PAGES:
        return "Beginner"
    return "Intermediate"


def confidence_score(rng: random.Random) -> int:
    """Random display confidence; not derived from the summary."""
    low, high = CONFIDENCE_RANGE
    return rng.randint(low, high)
