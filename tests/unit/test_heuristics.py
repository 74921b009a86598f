"""Tests for the summary rule table."""

import random

import pytest

from bookbrief.services.heuristics import (
    BASE_KEY_POINTS,
    FILLER_THEMES,
    HEADLINE_HINTS,
    UNKNOWN_READING_TIME,
    assess_difficulty,
    category_key_points,
    confidence_score,
    estimate_hours,
    estimate_reading_time,
    extract_themes,
    generate_headline,
    generate_key_points,
)


class TestGenerateHeadline:
    """Tests for generate_headline."""

    def test_fiction_template(self):
        headline = generate_headline("Atlas", ["Fiction"], random.Random(0))
        assert headline == HEADLINE_HINTS["fiction"].format(title="Atlas")

    def test_case_insensitive_substring_match(self):
        headline = generate_headline("Ledger", ["BUSINESS & ECONOMICS"], random.Random(0))
        assert headline == HEADLINE_HINTS["business"].format(title="Ledger")

    def test_precedence_fiction_before_science(self):
        """'Science Fiction' hits both hints; fiction is checked first."""
        headline = generate_headline("Dune", ["Science Fiction"], random.Random(0))
        assert "work of fiction" in headline

    def test_precedence_ignores_category_order(self):
        headline = generate_headline("Y", ["History", "Fiction"], random.Random(0))
        assert headline == HEADLINE_HINTS["fiction"].format(title="Y")

    def test_self_help_hint(self):
        headline = generate_headline("Better", ["Self-Help"], random.Random(0))
        assert headline == HEADLINE_HINTS["self-help"].format(title="Better")

    def test_biography_hint(self):
        headline = generate_headline("Life", ["Biography & Autobiography"], random.Random(0))
        assert headline == HEADLINE_HINTS["biography"].format(title="Life")

    @pytest.mark.parametrize("seed", range(10))
    def test_generic_fallback_contains_title(self, seed):
        headline = generate_headline("X", None, random.Random(seed))
        assert "X" in headline
        assert headline not in {t.format(title="X") for t in HEADLINE_HINTS.values()}

    def test_generic_fallback_is_deterministic_for_seed(self):
        first = generate_headline("X", ["Cooking"], random.Random(7))
        second = generate_headline("X", ["Cooking"], random.Random(7))
        assert first == second


class TestKeyPoints:
    """Tests for key point generation."""

    def test_no_categories_returns_base(self):
        assert generate_key_points(None) == BASE_KEY_POINTS

    def test_unmatched_categories_returns_base(self):
        assert generate_key_points(["Cooking"]) == BASE_KEY_POINTS

    def test_category_point_appended_after_base(self):
        points = generate_key_points(["Business"])
        assert points[:4] == BASE_KEY_POINTS
        assert points[4] == "Offers strategic business insights and management principles"

    def test_truncated_to_five(self):
        points = generate_key_points(["Self-Help", "Philosophy", "History"])
        assert len(points) == 5
        assert points[4] == "Focuses on personal development and self-improvement techniques"

    def test_category_points_keep_duplicates(self):
        points = category_key_points(["Fiction", "Science Fiction"])
        assert points == [
            "Creates compelling characters and engaging narrative arcs",
            "Creates compelling characters and engaging narrative arcs",
            "Explains scientific concepts with clarity and precision",
        ]

    def test_one_category_matching_several_keys(self):
        points = category_key_points(["History of Science"])
        assert len(points) == 2

    @pytest.mark.parametrize(
        "categories",
        [[], ["Fiction"], ["Business", "History", "Science", "Philosophy"], ["a"] * 20],
    )
    def test_base_prefix_and_limit(self, categories):
        points = generate_key_points(categories)
        assert len(points) <= 5
        assert points[:4] == BASE_KEY_POINTS


class TestExtractThemes:
    """Tests for theme extraction."""

    def test_no_input_returns_filler(self):
        assert extract_themes(None, None) == FILLER_THEMES

    def test_first_three_categories(self):
        assert extract_themes(["A", "B", "C", "D"], None) == ["A", "B", "C"]

    def test_description_keywords(self):
        themes = extract_themes(None, "A story about family and the future")
        assert themes == ["Innovation", "Relationships"]

    def test_truncated_to_four(self):
        themes = extract_themes(
            ["A", "B", "C"], "A leader who drives innovation and personal growth"
        )
        assert themes == ["A", "B", "C", "Leadership"]

    def test_deduplicates(self):
        themes = extract_themes(["Leadership", "Leadership"], "team building")
        assert themes == ["Leadership"]

    def test_keyword_matching_is_case_insensitive(self):
        assert extract_themes(None, "TECHNOLOGY") == ["Innovation"]

    @pytest.mark.parametrize(
        "categories",
        [None, [], ["x"], ["x", "x", "x", "x"], ["Love", "Relationships", "Team", "Leadership"]],
    )
    def test_themes_bounded_and_unique(self, categories):
        themes = extract_themes(categories, "love, team, growth and technology")
        assert len(themes) <= 4
        assert len(themes) == len(set(themes))


class TestReadingTime:
    """Tests for reading time buckets."""

    def test_missing_page_count(self):
        assert estimate_reading_time(None) == UNKNOWN_READING_TIME

    def test_zero_page_count(self):
        assert estimate_reading_time(0) == UNKNOWN_READING_TIME

    def test_hours_round_half_up(self):
        assert estimate_hours(72) == 2  # exactly 1.5h
        assert estimate_hours(71) == 1

    @pytest.mark.parametrize(
        ("pages", "label"),
        [
            (1, "1-2 hours"),
            (71, "1-2 hours"),
            (72, "2-4 hours"),
            (167, "2-4 hours"),
            (168, "4-8 hours"),
            (300, "4-8 hours"),
            (359, "4-8 hours"),
            (360, "8-10 hours"),
            (455, "8-10 hours"),
            (456, "10-12 hours"),
        ],
    )
    def test_bucket_boundaries(self, pages, label):
        assert estimate_reading_time(pages) == label

    def test_monotonic(self):
        order = ["1-2 hours", "2-4 hours", "4-8 hours"]
        previous = 0
        for pages in range(1, 360):
            rank = order.index(estimate_reading_time(pages))
            assert rank >= previous
            previous = rank

    def test_custom_reading_speed(self):
        assert estimate_reading_time(300, words_per_page=250, words_per_minute=400) == "2-4 hours"


class TestAssessDifficulty:
    """Tests for difficulty classification."""

    def test_missing_page_count(self):
        assert assess_difficulty("academic research", None) == "Intermediate"

    def test_long_and_complex_is_advanced(self):
        assert assess_difficulty("A theoretical treatment", 501) == "Advanced"

    def test_long_without_complex_words(self):
        assert assess_difficulty("A gentle story", 900) == "Intermediate"

    def test_long_without_description(self):
        assert assess_difficulty(None, 900) == "Intermediate"

    def test_boundary_500_not_advanced(self):
        assert assess_difficulty("Academic", 500) == "Intermediate"

    def test_short_is_beginner(self):
        assert assess_difficulty(None, 199) == "Beginner"
        assert assess_difficulty("technical", 50) == "Beginner"

    def test_boundary_200_intermediate(self):
        assert assess_difficulty(None, 200) == "Intermediate"


class TestConfidence:
    """Tests for confidence_score."""

    def test_in_range(self):
        rng = random.Random(3)
        scores = {confidence_score(rng) for _ in range(500)}
        assert min(scores) >= 80
        assert max(scores) <= 99

    def test_seeded_is_deterministic(self):
        assert confidence_score(random.Random(1)) == confidence_score(random.Random(1))
