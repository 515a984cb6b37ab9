"""Tests for settings loading."""

from zeroex.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_loads_from_environment(self, monkeypatch):
        """Test settings are read from environment variables."""
        monkeypatch.setenv("ZEROEX_API_KEY", "env-key")
        monkeypatch.setenv("ZEROEX_CHAIN_ID", "137")
        monkeypatch.setenv("HTTP_TIMEOUT", "12.5")

        settings = Settings()

        assert settings.zeroex_api_key == "env-key"
        assert settings.zeroex_chain_id == 137
        assert settings.http_timeout == 12.5
        assert settings.has_api_key is True

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        for name in ("ZEROEX_API_KEY", "ZEROEX_CHAIN_ID", "ENVIRONMENT", "DEBUG"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.zeroex_api_key == ""
        assert settings.zeroex_chain_id == 1
        assert settings.zeroex_api_key_header == "0x-api-key"
        assert settings.http_timeout == 30.0
        assert settings.has_api_key is False
        assert settings.is_production is False

    def test_safe_dict_redacts_key(self):
        """Test the API key never appears in the safe dict."""
        settings = Settings(zeroex_api_key="super-secret")

        data = settings.get_safe_dict()

        assert "super-secret" not in str(data)
        assert data["zeroex"]["api_key"] == "***"

    def test_get_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()
