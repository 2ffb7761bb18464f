"""Configuration management for Recipe Image Service.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Google Custom Search: primary provider, skipped unless both values are set
        self.USE_GOOGLE_SEARCH: bool = os.getenv("USE_GOOGLE_SEARCH", "true").lower() in ("true", "1", "yes")
        self.GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")
        self.GOOGLE_SEARCH_ENGINE_ID: str = os.getenv("GOOGLE_SEARCH_ENGINE_ID", "")
        self.GOOGLE_SEARCH_URL: str = os.getenv("GOOGLE_SEARCH_URL", "https://www.googleapis.com/customsearch/v1")
        # Unsplash: curated collections and general search, skipped without an access key
        self.USE_UNSPLASH: bool = os.getenv("USE_UNSPLASH", "true").lower() in ("true", "1", "yes")
        self.UNSPLASH_ACCESS_KEY: str = os.getenv("UNSPLASH_ACCESS_KEY", "")
        self.UNSPLASH_BASE_URL: str = os.getenv("UNSPLASH_BASE_URL", "https://api.unsplash.com")
        # Per-request timeouts in seconds. A timeout short-circuits that provider only.
        self.GOOGLE_TIMEOUT_SECONDS: float = float(os.getenv("GOOGLE_TIMEOUT_SECONDS", "8"))
        self.UNSPLASH_COLLECTION_TIMEOUT_SECONDS: float = float(os.getenv("UNSPLASH_COLLECTION_TIMEOUT_SECONDS", "5"))
        self.UNSPLASH_SEARCH_TIMEOUT_SECONDS: float = float(os.getenv("UNSPLASH_SEARCH_TIMEOUT_SECONDS", "8"))
        self.VALIDATION_TIMEOUT_SECONDS: float = float(os.getenv("VALIDATION_TIMEOUT_SECONDS", "3"))
        # Batch Delay: pause between sequential resolutions to respect provider rate limits. Default: 100 ms
        self.BATCH_DELAY_MS: int = int(os.getenv("BATCH_DELAY_MS", "100"))
        # Validate Image URLs: HEAD-check each provider winner before accepting it
        # Adds one request per accepted image; off by default
        self.VALIDATE_IMAGE_URLS: bool = os.getenv("VALIDATE_IMAGE_URLS", "false").lower() in ("true", "1", "yes")

    @property
    def google_enabled(self) -> bool:
        """Whether the Google provider has everything it needs to run."""
        return self.USE_GOOGLE_SEARCH and bool(self.GOOGLE_API_KEY) and bool(self.GOOGLE_SEARCH_ENGINE_ID)

    @property
    def unsplash_enabled(self) -> bool:
        """Whether the Unsplash providers have an access key."""
        return self.USE_UNSPLASH and bool(self.UNSPLASH_ACCESS_KEY)

    def validate(self) -> None:
        """Validate configuration values.

        Missing provider keys are not an error: the provider is skipped and the
        cascade falls through to the next one or to the static fallback tables.

        Raises:
            ValueError: If a value is out of range or Google is half-configured.
        """
        if self.USE_GOOGLE_SEARCH and self.GOOGLE_API_KEY and not self.GOOGLE_SEARCH_ENGINE_ID:
            raise ValueError("GOOGLE_SEARCH_ENGINE_ID environment variable is required when GOOGLE_API_KEY is set")
        for name in (
            "GOOGLE_TIMEOUT_SECONDS",
            "UNSPLASH_COLLECTION_TIMEOUT_SECONDS",
            "UNSPLASH_SEARCH_TIMEOUT_SECONDS",
            "VALIDATION_TIMEOUT_SECONDS",
        ):
            value = getattr(self, name)
            if not (0 < value <= 30):
                raise ValueError(f"{name} must be between 0 and 30 seconds, got: {value}")
        if not (0 <= self.BATCH_DELAY_MS <= 5000):
            raise ValueError(f"BATCH_DELAY_MS must be between 0 and 5000, got: {self.BATCH_DELAY_MS}")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
