"""Client configuration using pydantic-settings.

Values are read from ``JUPITER_*`` environment variables or a ``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Swap API client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JUPITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Endpoint
    # ======================
    api_base_url: str = Field(
        default="https://lite-api.jup.ag/swap/v1",
        description="Base URL of the swap API (without trailing slash)",
    )
    api_key: Optional[str] = Field(
        default=None, description="API key sent in the x-api-key header"
    )

    # ======================
    # Transport
    # ======================
    timeout_seconds: float = Field(default=30.0, description="HTTP request timeout")

    # ======================
    # Quote defaults
    # ======================
    default_slippage_bps: int = Field(
        default=50, ge=0, le=10_000, description="Default slippage (50 bps = 0.5%)"
    )

    @property
    def base_url(self) -> str:
        """Base URL normalized without a trailing slash."""
        return self.api_base_url.rstrip("/")

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "api_base_url": self.base_url,
            "api_key": "***" if self.api_key else "(not set)",
            "timeout_seconds": self.timeout_seconds,
            "default_slippage_bps": self.default_slippage_bps,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
