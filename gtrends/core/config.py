"""
Client configuration loaded from environment variables.

Uses pydantic-settings for type-safe env var parsing with automatic
.env file loading. Every field can be overridden with a GTRENDS_-prefixed
variable, e.g. GTRENDS_DEBUG=true.

Wire-level constants (endpoint paths, query parameter names) are not
configurable and live in gtrends.core.constants.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ─── Core ──────────────────────────────────────────────────────
    # Initial debug flag for new clients. Logs request URLs, POST
    # payloads and raw responses at DEBUG level.
    debug: bool = False

    # ─── Upstream endpoints ────────────────────────────────────────
    api_url: str = "https://trends.google.com/trends/api"
    batch_execute_url: str = "https://trends.google.com/_/TrendsUi/data/batchexecute"

    # ─── HTTP ──────────────────────────────────────────────────────
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36"
    )
    # Only applies to an HTTP client the library creates itself.
    # None means no internal timeout: deadlines belong to the caller.
    request_timeout: Optional[float] = None

    default_language: str = "EN"

    model_config = SettingsConfigDict(
        env_prefix="GTRENDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Module-level singleton
settings = Settings()
