"""Unit tests for the candidate quality filter."""

import pytest

from src.image_tools.quality import (
    STOCK_PHOTO_MIN_SIZE,
    TEXT_SEARCH_MIN_SIZE,
    has_image_extension,
    is_acceptable,
    is_blacklisted,
    meets_min_size,
)
from src.models.models import Candidate


def candidate(description="", width=1200, height=800, url="https://example.com/photo.jpg"):
    return Candidate(url=url, width=width, height=height, description_text=description)


class TestBlacklist:
    def test_portrait_of_a_chef_rejected(self):
        photo = candidate("portrait of a chef", width=4000, height=3000)

        assert is_blacklisted(photo)
        assert not is_acceptable(photo, *STOCK_PHOTO_MIN_SIZE)

    def test_case_insensitive(self):
        assert is_blacklisted(candidate("Restaurant LOGO on the wall"))

    def test_substring_match(self):
        # "man" inside "mango" counts
        assert is_blacklisted(candidate("sliced mango on a plate"))

    def test_food_description_passes(self):
        assert not is_blacklisted(candidate("bowl of ramen with soft egg"))

    def test_empty_description_passes(self):
        assert not is_blacklisted(candidate(""))


class TestSize:
    @pytest.mark.parametrize(
        "width,height,expected",
        [(600, 400, True), (599, 400, False), (600, 399, False), (2000, 1500, True)],
    )
    def test_stock_photo_threshold(self, width, height, expected):
        assert meets_min_size(candidate(width=width, height=height), *STOCK_PHOTO_MIN_SIZE) is expected

    def test_text_search_threshold_is_lower(self):
        photo = candidate(width=300, height=200)

        assert meets_min_size(photo, *TEXT_SEARCH_MIN_SIZE)
        assert not meets_min_size(photo, *STOCK_PHOTO_MIN_SIZE)


class TestImageExtension:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/a.jpg",
            "https://example.com/a.JPEG",
            "https://example.com/a.png",
            "https://example.com/a.webp",
        ],
    )
    def test_known_extensions(self, url):
        assert has_image_extension(url)

    @pytest.mark.parametrize(
        "url",
        ["https://example.com/a.gif", "https://example.com/page", "https://example.com/a.jpg?w=500", ""],
    )
    def test_other_urls(self, url):
        assert not has_image_extension(url)


class TestIsAcceptable:
    def test_blacklist_can_be_skipped(self):
        photo = candidate("people eating noodles", width=400, height=300)

        assert is_acceptable(photo, *TEXT_SEARCH_MIN_SIZE, check_blacklist=False)
        assert not is_acceptable(photo, *TEXT_SEARCH_MIN_SIZE)

    def test_size_checked_before_blacklist(self):
        assert not is_acceptable(candidate("plated pasta", width=100, height=100), check_blacklist=False)

    def test_defaults_to_stock_photo_rules(self):
        assert is_acceptable(candidate("plated pasta", width=600, height=400))
        assert not is_acceptable(candidate("plated pasta", width=500, height=400))
