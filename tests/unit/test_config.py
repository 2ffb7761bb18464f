"""Unit tests for configuration management."""

import pytest

from src.utils.config import Config


PROVIDER_VARS = (
    "GOOGLE_API_KEY",
    "GOOGLE_SEARCH_ENGINE_ID",
    "UNSPLASH_ACCESS_KEY",
    "USE_GOOGLE_SEARCH",
    "USE_UNSPLASH",
    "GOOGLE_TIMEOUT_SECONDS",
    "UNSPLASH_COLLECTION_TIMEOUT_SECONDS",
    "UNSPLASH_SEARCH_TIMEOUT_SECONDS",
    "VALIDATION_TIMEOUT_SECONDS",
    "BATCH_DELAY_MS",
    "VALIDATE_IMAGE_URLS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in PROVIDER_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfigInitialization:
    """Test Config class initialization and environment variable loading."""

    def test_config_loads_default_values(self, clean_env):
        """Test that Config uses default values when env vars not set."""
        config = Config()

        assert config.GOOGLE_API_KEY == ""
        assert config.UNSPLASH_ACCESS_KEY == ""
        assert config.GOOGLE_SEARCH_URL == "https://www.googleapis.com/customsearch/v1"
        assert config.UNSPLASH_BASE_URL == "https://api.unsplash.com"
        assert config.GOOGLE_TIMEOUT_SECONDS == 8
        assert config.UNSPLASH_COLLECTION_TIMEOUT_SECONDS == 5
        assert config.UNSPLASH_SEARCH_TIMEOUT_SECONDS == 8
        assert config.VALIDATION_TIMEOUT_SECONDS == 3
        assert config.BATCH_DELAY_MS == 100
        assert config.VALIDATE_IMAGE_URLS is False

    def test_config_loads_from_environment(self, clean_env):
        """Test that Config loads values from environment variables."""
        clean_env.setenv("GOOGLE_API_KEY", "g-key")
        clean_env.setenv("GOOGLE_SEARCH_ENGINE_ID", "cx-123")
        clean_env.setenv("UNSPLASH_ACCESS_KEY", "u-key")
        clean_env.setenv("BATCH_DELAY_MS", "250")
        clean_env.setenv("VALIDATE_IMAGE_URLS", "yes")
        clean_env.setenv("GOOGLE_TIMEOUT_SECONDS", "6.5")

        config = Config()

        assert config.GOOGLE_API_KEY == "g-key"
        assert config.GOOGLE_SEARCH_ENGINE_ID == "cx-123"
        assert config.UNSPLASH_ACCESS_KEY == "u-key"
        assert config.BATCH_DELAY_MS == 250
        assert config.VALIDATE_IMAGE_URLS is True
        assert config.GOOGLE_TIMEOUT_SECONDS == 6.5

    def test_config_converts_numeric_types(self, clean_env):
        """Test that Config properly converts numeric environment variables."""
        clean_env.setenv("BATCH_DELAY_MS", "300")
        clean_env.setenv("UNSPLASH_SEARCH_TIMEOUT_SECONDS", "7")

        config = Config()

        assert isinstance(config.BATCH_DELAY_MS, int)
        assert isinstance(config.UNSPLASH_SEARCH_TIMEOUT_SECONDS, float)


class TestProviderSwitches:
    """Test provider enablement derived from keys and USE_* flags."""

    def test_providers_disabled_without_keys(self, clean_env):
        config = Config()

        assert config.google_enabled is False
        assert config.unsplash_enabled is False

    def test_google_needs_both_key_and_engine_id(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "g-key")
        clean_env.setenv("GOOGLE_SEARCH_ENGINE_ID", "cx")

        assert Config().google_enabled is True

    def test_use_flags_turn_providers_off(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "g-key")
        clean_env.setenv("GOOGLE_SEARCH_ENGINE_ID", "cx")
        clean_env.setenv("UNSPLASH_ACCESS_KEY", "u-key")
        clean_env.setenv("USE_GOOGLE_SEARCH", "false")
        clean_env.setenv("USE_UNSPLASH", "0")

        config = Config()

        assert config.google_enabled is False
        assert config.unsplash_enabled is False


class TestConfigValidation:
    """Test Config validation logic."""

    def test_validate_succeeds_without_any_keys(self, clean_env):
        """Missing provider keys only disable providers."""
        Config().validate()  # Should not raise

    def test_validate_raises_for_key_without_engine_id(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "g-key")

        with pytest.raises(ValueError, match="GOOGLE_SEARCH_ENGINE_ID"):
            Config().validate()

    def test_validate_allows_key_without_engine_id_when_google_disabled(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "g-key")
        clean_env.setenv("USE_GOOGLE_SEARCH", "false")

        Config().validate()  # Should not raise

    @pytest.mark.parametrize("value", ["0", "-1", "31"])
    def test_validate_rejects_out_of_range_timeouts(self, clean_env, value):
        clean_env.setenv("UNSPLASH_COLLECTION_TIMEOUT_SECONDS", value)

        with pytest.raises(ValueError, match="UNSPLASH_COLLECTION_TIMEOUT_SECONDS"):
            Config().validate()

    def test_validate_rejects_negative_batch_delay(self, clean_env):
        clean_env.setenv("BATCH_DELAY_MS", "-5")

        with pytest.raises(ValueError, match="BATCH_DELAY_MS"):
            Config().validate()

    def test_validate_rejects_excessive_batch_delay(self, clean_env):
        clean_env.setenv("BATCH_DELAY_MS", "10000")

        with pytest.raises(ValueError, match="BATCH_DELAY_MS"):
            Config().validate()
