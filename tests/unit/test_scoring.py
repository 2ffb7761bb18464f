"""Unit tests for relevance scoring."""

import pytest

from src.image_tools.scoring import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    best_candidate,
    rank_candidates,
    recipe_name_words,
    score_candidate,
)
from src.models.models import Candidate


def candidate(description="", width=800, height=800, likes=0, downloads=0, url="https://example.com/a.jpg"):
    return Candidate(
        url=url,
        width=width,
        height=height,
        description_text=description,
        popularity_signal=likes,
        secondary_popularity_signal=downloads,
    )


class TestScoreComponents:
    def test_bare_candidate_scores_zero(self):
        # Square image below the high-resolution threshold, no keywords
        assert score_candidate(candidate(), "Ramen") == 0

    def test_likes_capped(self):
        assert score_candidate(candidate(likes=250), "x") == 2.5
        assert score_candidate(candidate(likes=50_000), "x") == 10

    def test_downloads_capped(self):
        assert score_candidate(candidate(downloads=2000), "x") == 2
        assert score_candidate(candidate(downloads=1_000_000), "x") == 5

    def test_food_keywords(self):
        # food, dish, fresh
        assert score_candidate(candidate("fresh food dish"), "x") == 6

    def test_recipe_name_words(self):
        # "basil" and "chicken" appear; "thai" qualifies but is absent
        assert score_candidate(candidate("basil chicken"), "Thai Basil Chicken") == 10

    def test_professional_keywords(self):
        # styled, plated
        assert score_candidate(candidate("styled and plated"), "x") == 6

    def test_high_resolution_bonus(self):
        assert score_candidate(candidate(width=1000, height=1000), "x") == 5

    def test_landscape_bonus_bounds(self):
        assert score_candidate(candidate(width=600, height=500), "x") == 3  # 1.2
        assert score_candidate(candidate(width=900, height=500), "x") == 3  # 1.8
        assert score_candidate(candidate(width=950, height=500), "x") == 0  # 1.9

    def test_zero_height_does_not_raise(self):
        assert score_candidate(candidate(width=800, height=0), "x") == 0

    def test_case_insensitive(self):
        assert score_candidate(candidate("FRESH Ramen"), "ramen bowl") == 2 + 5


class TestScoringMonotonicity:
    def test_larger_image_ranks_higher(self):
        large = candidate("grilled salmon", width=1200, height=800)
        small = candidate("grilled salmon", width=400, height=300)

        assert score_candidate(large, "Grilled Salmon") > score_candidate(small, "Grilled Salmon")

        ranked = rank_candidates([small, large], "Grilled Salmon")
        assert ranked[0].width == 1200


class TestRanking:
    def test_ties_keep_encounter_order(self):
        first = candidate(url="https://example.com/first.jpg")
        second = candidate(url="https://example.com/second.jpg")

        ranked = rank_candidates([first, second], "x")

        assert [c.url for c in ranked] == ["https://example.com/first.jpg", "https://example.com/second.jpg"]

    def test_records_matched_term(self):
        ranked = rank_candidates([candidate()], "Ramen", "ramen dish")

        assert ranked[0].matched_term == "ramen dish"

    def test_best_candidate_empty(self):
        assert best_candidate([], "Ramen") is None

    def test_best_candidate(self):
        best = best_candidate([candidate("plain"), candidate("gourmet ramen")], "Ramen")

        assert best.description_text == "gourmet ramen"


class TestWeights:
    def test_custom_weights(self):
        weights = ScoringWeights(food_keyword=10)

        assert score_candidate(candidate("food"), "x", weights=weights) == 10

    def test_weights_are_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_WEIGHTS.food_keyword = 1

    def test_default_relative_order(self):
        assert DEFAULT_WEIGHTS.name_word > DEFAULT_WEIGHTS.professional_keyword > DEFAULT_WEIGHTS.food_keyword

    def test_recipe_name_words_filters_short(self):
        assert recipe_name_words("Pad Thai Noodles") == ["thai", "noodles"]
