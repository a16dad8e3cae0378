"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The OpenAI credential comes from the environment (never hardcoded)
    - Absent credential is valid: chat degrades to fallback replies
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Simulated latencies are settings so tests can zero them without patching asyncio
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # OpenAI
    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_timeout_seconds: int = 30

    @field_validator("openai_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v: str | None) -> str | None:
        """OPENAI_API_KEY= (empty) means not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Upstream failure policy — False swallows into a 200 fallback reply
    strict_upstream_errors: bool = False

    # Mock endpoints
    upi_verify_delay_ms: int = 600
    payment_processing_delay_ms: int = 800

    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def ai_configured(self) -> bool:
        return self.openai_api_key is not None


@lru_cache
def get_settings() -> Settings:
    return Settings()
