"""Image resolution cascade for recipes.

resolve_image() always returns a usable URL:

    build terms -> google -> unsplash collections -> unsplash search -> fallback tables

The first provider that returns an accepted candidate wins. Provider errors,
including unexpected exceptions, are logged and treated as "no candidates";
the static fallback stage cannot fail.
"""

import asyncio
from typing import Awaitable, Callable, Iterable, Optional, Sequence

from src.image_tools.fallback import resolve_fallback
from src.image_tools.http_client import JsonHttpClient
from src.image_tools.providers import (
    GoogleImageSearchProvider,
    ImageProvider,
    UnsplashCollectionProvider,
    UnsplashSearchProvider,
)
from src.image_tools.query_terms import build_query_terms
from src.image_tools.validation import validate_image_url
from src.models.models import ImageResolution, ProviderResult, SearchRequest
from src.utils.config import Config, config
from src.utils.errors import safe_execute_async
from src.utils.logger import logger, recipe_logger


UrlValidator = Callable[..., Awaitable[bool]]

FALLBACK_SOURCE = "fallback"


def _to_request(name, cuisine) -> SearchRequest:
    """Build a SearchRequest from arbitrary caller input without raising."""
    name = name if isinstance(name, str) else ""
    cuisine = cuisine if isinstance(cuisine, str) else ""
    return SearchRequest(name=name.strip()[:500], cuisine=cuisine.strip()[:100])


class ImageResolver:
    """Runs the provider cascade for one recipe at a time.

    Holds only the injected providers and settings, so a single instance can
    serve concurrent resolutions.
    """

    def __init__(
        self,
        providers: Sequence[ImageProvider],
        validate_urls: bool = False,
        url_validator: UrlValidator = validate_image_url,
        validation_timeout: float = 3.0,
    ) -> None:
        self.providers = tuple(providers)
        self.validate_urls = validate_urls
        self.url_validator = url_validator
        self.validation_timeout = validation_timeout

    async def _run_provider(self, provider: ImageProvider, request: SearchRequest, terms) -> ProviderResult:
        result = await safe_execute_async(
            provider.search(request, terms),
            f"Unexpected error in {provider.name} provider for '{request.name}'",
            log_level="error",
            default_return=None,
        )
        if result is None:
            return ProviderResult.transport_error("unexpected provider error")
        return result

    async def resolve_image_detailed(self, name: str, cuisine: str = "") -> ImageResolution:
        """Resolve an image and report which stage produced it.

        Args:
            name: Recipe name.
            cuisine: Optional cuisine.

        Returns:
            ImageResolution with a non-empty URL. source is the winning provider
            name, or "fallback".
        """
        request = _to_request(name, cuisine)
        log = recipe_logger(request.name, request.cuisine)
        terms = build_query_terms(request.name, request.cuisine)
        log.debug(f"Built {len(terms)} query terms")

        attempts: list[str] = []
        for provider in self.providers:
            result = await self._run_provider(provider, request, terms)
            attempts.append(f"{provider.name}:{result.status}")
            if not result.is_accepted:
                continue

            candidate = result.candidate
            if self.validate_urls and not await self.url_validator(candidate.url, timeout=self.validation_timeout):
                log.warning(f"{provider.name} image failed validation, trying next provider: {candidate.url}")
                attempts[-1] = f"{provider.name}:invalid_url"
                continue

            log.info(f"Found {provider.name} image: {candidate.url}")
            return ImageResolution(
                url=candidate.url,
                source=provider.name,
                recipe_name=request.name,
                cuisine=request.cuisine,
                score=candidate.score,
                matched_term=candidate.matched_term,
                attempts=attempts,
            )

        url = resolve_fallback(request.name, request.cuisine)
        log.info(f"Using fallback image: {url}")
        return ImageResolution(
            url=url,
            source=FALLBACK_SOURCE,
            recipe_name=request.name,
            cuisine=request.cuisine,
            attempts=attempts,
        )

    async def resolve_image(self, name: str, cuisine: str = "") -> str:
        """Resolve an image URL for a recipe. Never raises, never returns empty."""
        resolution = await self.resolve_image_detailed(name, cuisine)
        return resolution.url

    async def resolve_batch(
        self,
        requests: Iterable[SearchRequest],
        delay_seconds: Optional[float] = None,
    ) -> list[ImageResolution]:
        """Resolve many recipes sequentially, pausing between calls.

        Args:
            requests: Recipes to resolve, in order.
            delay_seconds: Pause between resolutions to respect provider rate
                limits. Defaults to BATCH_DELAY_MS.

        Returns:
            One ImageResolution per request, in input order.
        """
        if delay_seconds is None:
            delay_seconds = config.BATCH_DELAY_MS / 1000
        requests = list(requests)
        logger.info(f"Batch resolving images for {len(requests)} recipes")

        resolutions: list[ImageResolution] = []
        for index, request in enumerate(requests):
            if index and delay_seconds > 0:
                await asyncio.sleep(delay_seconds)
            resolutions.append(await self.resolve_image_detailed(request.name, request.cuisine))
        return resolutions


def create_image_resolver(cfg: Config = config, http_client: Optional[JsonHttpClient] = None) -> ImageResolver:
    """Build a resolver from configuration.

    Providers without credentials are left out; with no credentials at all the
    resolver goes straight to the fallback tables.

    Args:
        cfg: Configuration to read keys, URLs and timeouts from.
        http_client: Shared HTTP client; a new one is created if omitted.

    Returns:
        Configured ImageResolver.
    """
    http_client = http_client or JsonHttpClient()
    providers: list[ImageProvider] = []

    if cfg.google_enabled:
        providers.append(
            GoogleImageSearchProvider(
                api_key=cfg.GOOGLE_API_KEY,
                search_engine_id=cfg.GOOGLE_SEARCH_ENGINE_ID,
                http_client=http_client,
                search_url=cfg.GOOGLE_SEARCH_URL,
                timeout=cfg.GOOGLE_TIMEOUT_SECONDS,
            )
        )
    else:
        logger.info("Google Custom Search disabled or not configured")

    if cfg.unsplash_enabled:
        providers.append(
            UnsplashCollectionProvider(
                cfg.UNSPLASH_ACCESS_KEY,
                http_client,
                base_url=cfg.UNSPLASH_BASE_URL,
                timeout=cfg.UNSPLASH_COLLECTION_TIMEOUT_SECONDS,
            )
        )
        providers.append(
            UnsplashSearchProvider(
                cfg.UNSPLASH_ACCESS_KEY,
                http_client,
                base_url=cfg.UNSPLASH_BASE_URL,
                timeout=cfg.UNSPLASH_SEARCH_TIMEOUT_SECONDS,
            )
        )
    else:
        logger.info("Unsplash disabled or not configured")

    logger.debug(f"Image providers: {[provider.name for provider in providers] or 'fallback only'}")
    return ImageResolver(
        providers,
        validate_urls=cfg.VALIDATE_IMAGE_URLS,
        validation_timeout=cfg.VALIDATION_TIMEOUT_SECONDS,
    )


_default_resolver: Optional[ImageResolver] = None


def get_default_resolver() -> ImageResolver:
    """Process-wide resolver, built from config on first use."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = create_image_resolver()
    return _default_resolver


async def resolve_image(name: str, cuisine: str = "") -> str:
    """Resolve an image URL for a recipe with the process-wide resolver."""
    return await get_default_resolver().resolve_image(name, cuisine)
