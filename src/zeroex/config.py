"""Client configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # 0x API
    # ======================
    zeroex_api_key: str = Field(default="", description="0x API key")
    zeroex_chain_id: int = Field(default=1, description="Chain id to request quotes on")
    zeroex_api_key_header: str = Field(
        default="0x-api-key", description="Header carrying the 0x API key"
    )

    # ======================
    # HTTP
    # ======================
    http_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def has_api_key(self) -> bool:
        """Check if a 0x API key is configured."""
        return bool(self.zeroex_api_key)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "zeroex": {
                "chain_id": self.zeroex_chain_id,
                "api_key": "***" if self.zeroex_api_key else "(not set)",
                "api_key_header": self.zeroex_api_key_header,
            },
            "http_timeout": self.http_timeout,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
