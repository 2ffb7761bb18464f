"""Query term builder for recipe image search.

Turns a free-text recipe name and optional cuisine into an ordered list of
search phrases, most specific first. Pure and deterministic.
"""

import re
from typing import Optional

from src.models.models import QueryTerm


# Marketing words that add nothing to an image search
STOP_WORDS = (
    "recipe",
    "cooking",
    "homemade",
    "easy",
    "quick",
    "best",
    "delicious",
    "perfect",
    "traditional",
)

_STOP_WORDS_RE = re.compile(r"\b(?:" + "|".join(STOP_WORDS) + r")\b", re.IGNORECASE)
_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

# Qualifiers appended to the cuisine-qualified name, in try order
CUISINE_QUALIFIERS = ("food photography", "dish", "")

# Qualifiers appended to the cleaned name, in try order
PHOTOGRAPHY_QUALIFIERS = (
    "food photography",
    "gourmet food",
    "restaurant food",
    "food styling",
    "dish",
    "meal",
    "food",
)

# Coarse category regex -> category phrase, checked in order
FOOD_CATEGORIES = (
    (r"chicken|beef|pork|lamb|fish|salmon|tuna|shrimp|turkey", "protein"),
    (r"pasta|spaghetti|noodle|rice|risotto|biryani", "pasta rice"),
    (r"soup|stew|broth|curry|chili", "soup stew"),
    (r"cake|cookie|pie|dessert|ice cream|chocolate|sweet", "dessert"),
    (r"pancake|waffle|eggs|breakfast|cereal|toast", "breakfast"),
    (r"salad|vegetable|veggie|green|healthy", "salad vegetable"),
    (r"bread|pizza|sandwich|burger|baked", "bread baked"),
)

_FOOD_CATEGORY_PATTERNS = tuple((re.compile(pattern, re.IGNORECASE), category) for pattern, category in FOOD_CATEGORIES)

MIN_TERM_LENGTH = 3


def clean_recipe_name(name: str) -> str:
    """Normalize a recipe name for searching.

    Lowercases, drops stop words, turns punctuation into spaces and collapses
    whitespace.

    Args:
        name: Raw recipe name, e.g. "Easy Homemade Chicken Soup!".

    Returns:
        Cleaned name, e.g. "chicken soup". May be empty.
    """
    cleaned = (name or "").lower()
    cleaned = _STOP_WORDS_RE.sub(" ", cleaned)
    cleaned = _PUNCTUATION_RE.sub(" ", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def get_food_category(clean_name: str) -> Optional[str]:
    """Return the first coarse food category whose keywords appear in the name."""
    for pattern, category in _FOOD_CATEGORY_PATTERNS:
        if pattern.search(clean_name or ""):
            return category
    return None


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def build_query_terms(name: str, cuisine: str = "") -> list[QueryTerm]:
    """Build ranked search terms for a recipe.

    Order:
    1. Cuisine-qualified terms (only when a cuisine is given)
    2. Cleaned name + photography qualifiers
    3. One "{category} food photography" term when the name maps to a category

    Terms shorter than MIN_TERM_LENGTH characters are dropped, as are exact
    duplicates (the first occurrence keeps its place).

    Args:
        name: Recipe name.
        cuisine: Optional cuisine; kept in its original casing.

    Returns:
        List of QueryTerm with consecutive priorities starting at 0.

    Example:
        >>> [t.text for t in build_query_terms("Easy Homemade Chicken Soup", "Thai")][:2]
        ['Thai chicken soup food photography', 'Thai chicken soup dish']
    """
    clean_name = clean_recipe_name(name)
    cuisine = (cuisine or "").strip()

    texts: list[str] = []
    if cuisine:
        texts.extend(_join(cuisine, clean_name, qualifier) for qualifier in CUISINE_QUALIFIERS)

    texts.extend(_join(clean_name, qualifier) for qualifier in PHOTOGRAPHY_QUALIFIERS)

    category = get_food_category(clean_name)
    if category:
        texts.append(f"{category} food photography")

    terms: list[QueryTerm] = []
    seen: set[str] = set()
    for text in texts:
        if len(text) < MIN_TERM_LENGTH or text in seen:
            continue
        seen.add(text)
        terms.append(QueryTerm(text=text, priority=len(terms)))
    return terms
