"""Provider adapters for live image search.

Three adapters, tried by the resolver in this order:

1. GoogleImageSearchProvider: Google Custom Search, image mode
2. UnsplashCollectionProvider: a fixed set of curated food collections
3. UnsplashSearchProvider: Unsplash keyword search

Each adapter turns one query term into Candidates (fetch_candidates), filters
them (accepts), and scores the survivors (search). search() never raises: a
transport failure ends that adapter's attempt and is reported as a
transport_error ProviderResult so the cascade can move on.
"""

from typing import Any, Optional, Sequence

from pydantic import ValidationError

from src.image_tools.http_client import JsonHttpClient
from src.image_tools.quality import (
    STOCK_PHOTO_MIN_SIZE,
    TEXT_SEARCH_MIN_SIZE,
    has_image_extension,
    is_acceptable,
)
from src.image_tools.scoring import DEFAULT_WEIGHTS, ScoringWeights, best_candidate
from src.models.models import Candidate, ProviderResult, QueryTerm, SearchRequest
from src.utils.errors import ProviderTransportError
from src.utils.logger import logger, recipe_logger


class ImageProvider:
    """Base adapter: try terms in order, stop at the first accepted set."""

    name = "provider"
    min_size: tuple[int, int] = STOCK_PHOTO_MIN_SIZE
    check_blacklist = True

    def __init__(
        self,
        http_client: JsonHttpClient,
        timeout: float = 8.0,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self.http_client = http_client
        self.timeout = timeout
        self.weights = weights

    async def fetch_candidates(self, term: QueryTerm, request: SearchRequest) -> list[Candidate]:
        """Run one provider request for a term.

        Raises:
            ProviderTransportError: If the request fails.
        """
        raise NotImplementedError

    def accepts(self, candidate: Candidate, request: SearchRequest) -> bool:
        return is_acceptable(candidate, *self.min_size, check_blacklist=self.check_blacklist)

    async def search(self, request: SearchRequest, terms: Sequence[QueryTerm]) -> ProviderResult:
        """Try each term until one yields acceptable candidates; return the best.

        Args:
            request: Recipe being resolved.
            terms: Query terms in priority order.

        Returns:
            accepted with the best scored candidate, empty if no term produced
            an acceptable image, or transport_error if a request failed.
        """
        log = recipe_logger(request.name, request.cuisine, self.name)
        for term in terms:
            log.debug(f'Searching for: "{term.text}"')
            try:
                candidates = await self.fetch_candidates(term, request)
            except ProviderTransportError as e:
                log.warning(f"Request failed, skipping provider: {e.reason}")
                return ProviderResult.transport_error(e.reason)

            accepted = [candidate for candidate in candidates if self.accepts(candidate, request)]
            log.debug(f'"{term.text}": {len(candidates)} results, {len(accepted)} acceptable')
            if not accepted:
                continue

            best = best_candidate(accepted, request.name, term.text, self.weights)
            log.info(f"Selected image with relevance score {best.score:.1f}: {best.url}")
            return ProviderResult.accepted(best)

        return ProviderResult.empty(f"no acceptable images for {len(terms)} terms")


def _parse_unsplash_photo(photo: Any) -> Optional[Candidate]:
    """Convert an Unsplash photo object to a Candidate; None if it is unusable."""
    if not isinstance(photo, dict):
        return None
    try:
        url = (photo.get("urls") or {}).get("regular")
        if not url:
            return None
        description = photo.get("description") or ""
        alt_description = photo.get("alt_description") or ""
        return Candidate(
            url=url,
            width=photo.get("width") or 0,
            height=photo.get("height") or 0,
            description_text=f"{description} {alt_description}".strip(),
            popularity_signal=photo.get("likes") or 0,
            secondary_popularity_signal=photo.get("downloads") or 0,
        )
    except (ValidationError, AttributeError, TypeError) as e:
        logger.debug(f"Skipping malformed Unsplash photo {photo.get('id', '?')}: {e}")
        return None


def _parse_google_item(item: Any) -> Optional[Candidate]:
    """Convert a Custom Search result item to a Candidate; None without link or size."""
    if not isinstance(item, dict) or not item.get("link") or not isinstance(item.get("image"), dict):
        return None
    image = item["image"]
    try:
        return Candidate(
            url=item["link"],
            width=image.get("width") or 0,
            height=image.get("height") or 0,
            description_text=f"{item.get('title') or ''} {item.get('snippet') or ''}".strip(),
        )
    except (ValidationError, TypeError) as e:
        logger.debug(f"Skipping malformed Google result {item.get('link')}: {e}")
        return None


class GoogleImageSearchProvider(ImageProvider):
    """Google Custom Search JSON API in image mode.

    Results must be a jpg/jpeg/png/webp link of at least 300x200. No subject
    blacklist: the queries already ask for food dishes.
    """

    name = "google"
    min_size = TEXT_SEARCH_MIN_SIZE
    check_blacklist = False

    # Creative-commons licences only
    RIGHTS = "cc_publicdomain,cc_attribute,cc_sharealike,cc_noncommercial,cc_nonderived"

    def __init__(
        self,
        api_key: str,
        search_engine_id: str,
        http_client: JsonHttpClient,
        search_url: str = "https://www.googleapis.com/customsearch/v1",
        timeout: float = 8.0,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        if not api_key or not search_engine_id:
            raise ValueError("GOOGLE_API_KEY and GOOGLE_SEARCH_ENGINE_ID are required")
        super().__init__(http_client, timeout, weights)
        self.api_key = api_key
        self.search_engine_id = search_engine_id
        self.search_url = search_url

    async def fetch_candidates(self, term: QueryTerm, request: SearchRequest) -> list[Candidate]:
        data = await self.http_client.get_json(
            self.search_url,
            params={
                "key": self.api_key,
                "cx": self.search_engine_id,
                "q": term.text,
                "searchType": "image",
                "imgSize": "medium",
                "imgType": "photo",
                "safe": "active",
                "num": 10,
                "fileType": "jpg,jpeg,png",
                "rights": self.RIGHTS,
            },
            timeout=self.timeout,
        )
        items = data.get("items") if isinstance(data, dict) else None
        return [candidate for candidate in map(_parse_google_item, items or []) if candidate]

    def accepts(self, candidate: Candidate, request: SearchRequest) -> bool:
        return has_image_extension(candidate.url) and super().accepts(candidate, request)


class _UnsplashProvider(ImageProvider):
    """Shared Unsplash credentials and request helper."""

    def __init__(
        self,
        access_key: str,
        http_client: JsonHttpClient,
        base_url: str = "https://api.unsplash.com",
        timeout: float = 8.0,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        if not access_key:
            raise ValueError("UNSPLASH_ACCESS_KEY is required")
        super().__init__(http_client, timeout, weights)
        self.access_key = access_key
        self.base_url = base_url.rstrip("/")

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        return await self.http_client.get_json(
            f"{self.base_url}{path}",
            params=params,
            headers={"Authorization": f"Client-ID {self.access_key}", "Accept-Version": "v1"},
            timeout=self.timeout,
        )


class UnsplashCollectionProvider(_UnsplashProvider):
    """Curated Unsplash food collections, filtered locally by recipe words.

    Collection feeds do not depend on the query, so each collection is fetched
    once per resolution and its photos are scored against the primary term.
    A failing collection is skipped; the next one is tried.
    """

    name = "unsplash_collection"

    FOOD_COLLECTIONS = (
        "1114848",  # Food & Drink
        "1065976",  # Food Photography
        "162213",  # Restaurants & Dining
        "1319040",  # Food Styling
        "3178572",  # Gourmet Food
    )
    PER_PAGE = 30

    def __init__(self, *args, collection_ids: Optional[Sequence[str]] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.collection_ids = tuple(collection_ids or self.FOOD_COLLECTIONS)

    async def fetch_collection(self, collection_id: str) -> list[Candidate]:
        data = await self._get(
            f"/collections/{collection_id}/photos",
            {"per_page": self.PER_PAGE, "orientation": "landscape"},
        )
        return [candidate for candidate in map(_parse_unsplash_photo, data if isinstance(data, list) else []) if candidate]

    @staticmethod
    def search_words(request: SearchRequest) -> list[str]:
        """Words from the recipe name and cuisine long enough to match on."""
        words = request.name.lower().split(" ") + (request.cuisine.lower().split(" ") if request.cuisine else [])
        return [word for word in words if len(word) > 3]

    def accepts(self, candidate: Candidate, request: SearchRequest) -> bool:
        content = candidate.description_text.lower()
        if not any(word in content for word in self.search_words(request)):
            return False
        return super().accepts(candidate, request)

    async def search(self, request: SearchRequest, terms: Sequence[QueryTerm]) -> ProviderResult:
        log = recipe_logger(request.name, request.cuisine, self.name)
        if not terms:
            return ProviderResult.empty("no query terms")
        primary_term = terms[0]

        failures = 0
        for collection_id in self.collection_ids:
            log.debug(f'Searching collection {collection_id} for: "{primary_term.text}"')
            try:
                photos = await self.fetch_collection(collection_id)
            except ProviderTransportError as e:
                failures += 1
                log.info(f"Collection {collection_id} failed: {e.reason}")
                continue

            relevant = [photo for photo in photos if self.accepts(photo, request)]
            if not relevant:
                continue

            best = best_candidate(relevant, request.name, primary_term.text, self.weights)
            log.info(f"Selected curated image with relevance score {best.score:.1f}: {best.url}")
            return ProviderResult.accepted(best)

        if failures == len(self.collection_ids):
            return ProviderResult.transport_error(f"all {failures} collections failed")
        return ProviderResult.empty("no relevant curated images")


class UnsplashSearchProvider(_UnsplashProvider):
    """Unsplash keyword search, ordered by relevance.

    Candidates need at least 600x400, MIN_LIKES likes and a description free
    of blacklisted subjects.
    """

    name = "unsplash_search"

    PER_PAGE = 20
    MIN_LIKES = 5

    async def fetch_candidates(self, term: QueryTerm, request: SearchRequest) -> list[Candidate]:
        data = await self._get(
            "/search/photos",
            {
                "query": term.text,
                "per_page": self.PER_PAGE,
                "orientation": "landscape",
                "order_by": "relevant",
                "content_filter": "low",
            },
        )
        results = data.get("results") if isinstance(data, dict) else None
        return [candidate for candidate in map(_parse_unsplash_photo, results or []) if candidate]

    def accepts(self, candidate: Candidate, request: SearchRequest) -> bool:
        return candidate.popularity_signal >= self.MIN_LIKES and super().accepts(candidate, request)
