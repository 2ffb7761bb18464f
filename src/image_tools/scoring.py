"""Heuristic relevance scoring for candidate images.

Scores are additive and unnormalized; they are only compared between
candidates from the same provider call.
"""

from typing import Annotated, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.models.models import Candidate, ScoredCandidate


FOOD_KEYWORDS = (
    "food",
    "dish",
    "meal",
    "recipe",
    "cooking",
    "cuisine",
    "delicious",
    "fresh",
    "gourmet",
    "restaurant",
)

PROFESSIONAL_KEYWORDS = (
    "styled",
    "photography",
    "professional",
    "studio",
    "plated",
    "garnish",
)


class ScoringWeights(BaseModel):
    """Tunable scoring constants. Defaults are the empirically chosen values."""

    model_config = ConfigDict(frozen=True)

    likes_divisor: Annotated[float, Field(100.0, gt=0)]
    likes_cap: Annotated[float, Field(10.0, ge=0)]
    downloads_divisor: Annotated[float, Field(1000.0, gt=0)]
    downloads_cap: Annotated[float, Field(5.0, ge=0)]
    food_keyword: Annotated[float, Field(2.0, description="Per food keyword in the description")]
    name_word: Annotated[float, Field(5.0, description="Per recipe-name word (len > 3) in the description")]
    professional_keyword: Annotated[float, Field(3.0, description="Per photography keyword in the description")]
    high_resolution: Annotated[float, Field(5.0, description="Width >= 1000 and height >= 700")]
    landscape_ratio: Annotated[float, Field(3.0, description="Aspect ratio within [1.2, 1.8]")]
    min_name_word_length: Annotated[int, Field(4, ge=1)]
    high_resolution_min: Annotated[tuple[int, int], Field((1000, 700))]
    landscape_ratio_range: Annotated[tuple[float, float], Field((1.2, 1.8))]


DEFAULT_WEIGHTS = ScoringWeights()


def recipe_name_words(recipe_name: str, min_length: int = DEFAULT_WEIGHTS.min_name_word_length) -> list[str]:
    """Lowercased space-separated words of the recipe name long enough to count."""
    return [word for word in (recipe_name or "").lower().split(" ") if len(word) >= min_length]


def score_candidate(
    candidate: Candidate,
    recipe_name: str,
    matched_term: str = "",
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Compute the relevance score of one candidate.

    Args:
        candidate: Candidate that already passed the quality filter.
        recipe_name: Recipe name as requested (not the cleaned search term).
        matched_term: Query term that produced the candidate. Recorded by
            callers; it does not change the score.
        weights: Scoring constants.

    Returns:
        Score; higher is better.
    """
    content = candidate.description_text.lower()
    score = 0.0

    score += min(candidate.popularity_signal / weights.likes_divisor, weights.likes_cap)
    score += min(candidate.secondary_popularity_signal / weights.downloads_divisor, weights.downloads_cap)

    score += weights.food_keyword * sum(1 for keyword in FOOD_KEYWORDS if keyword in content)
    score += weights.name_word * sum(
        1 for word in recipe_name_words(recipe_name, weights.min_name_word_length) if word in content
    )
    score += weights.professional_keyword * sum(1 for keyword in PROFESSIONAL_KEYWORDS if keyword in content)

    min_width, min_height = weights.high_resolution_min
    if candidate.width >= min_width and candidate.height >= min_height:
        score += weights.high_resolution

    ratio = candidate.aspect_ratio
    low, high = weights.landscape_ratio_range
    if ratio is not None and low <= ratio <= high:
        score += weights.landscape_ratio

    return score


def rank_candidates(
    candidates: Iterable[Candidate],
    recipe_name: str,
    matched_term: str = "",
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredCandidate]:
    """Score candidates and sort best first.

    The sort is stable, so equal scores keep provider order.
    """
    scored = [
        ScoredCandidate(
            **candidate.model_dump(),
            score=score_candidate(candidate, recipe_name, matched_term, weights),
            matched_term=matched_term or None,
        )
        for candidate in candidates
    ]
    scored.sort(key=lambda c: c.score, reverse=True)
    return scored


def best_candidate(
    candidates: Iterable[Candidate],
    recipe_name: str,
    matched_term: str = "",
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Optional[ScoredCandidate]:
    """Highest scoring candidate, or None if there are none."""
    ranked = rank_candidates(candidates, recipe_name, matched_term, weights)
    return ranked[0] if ranked else None
