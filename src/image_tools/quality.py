"""Quality filter for provider candidates.

Rejects images that are too small, not an image file, or whose description
points at a non-food subject.
"""

import re

from src.models.models import Candidate


# Non-food subjects; matched as case-insensitive substrings of the description
BLACKLISTED_TERMS = (
    "person",
    "people",
    "man",
    "woman",
    "child",
    "portrait",
    "selfie",
    "landscape",
    "building",
    "car",
    "animal",
    "text",
    "logo",
)

IMAGE_EXTENSION_RE = re.compile(r"\.(jpg|jpeg|png|webp)$", re.IGNORECASE)

# Minimum sizes per provider family
TEXT_SEARCH_MIN_SIZE = (300, 200)
STOCK_PHOTO_MIN_SIZE = (600, 400)


def is_blacklisted(candidate: Candidate) -> bool:
    """True if the description mentions any blacklisted subject."""
    content = candidate.description_text.lower()
    return any(term in content for term in BLACKLISTED_TERMS)


def meets_min_size(candidate: Candidate, min_width: int, min_height: int) -> bool:
    return candidate.width >= min_width and candidate.height >= min_height


def has_image_extension(url: str) -> bool:
    """True if the URL path ends in a known image file extension."""
    return bool(url) and IMAGE_EXTENSION_RE.search(url) is not None


def is_acceptable(
    candidate: Candidate,
    min_width: int = STOCK_PHOTO_MIN_SIZE[0],
    min_height: int = STOCK_PHOTO_MIN_SIZE[1],
    check_blacklist: bool = True,
) -> bool:
    """Apply the size check and, unless disabled, the subject blacklist.

    Args:
        candidate: Candidate to check.
        min_width: Minimum width in pixels.
        min_height: Minimum height in pixels.
        check_blacklist: False for the text-search provider, whose queries
            already target food dishes.

    Returns:
        True if the candidate may be scored.
    """
    if not meets_min_size(candidate, min_width, min_height):
        return False
    if check_blacklist and is_blacklisted(candidate):
        return False
    return True
