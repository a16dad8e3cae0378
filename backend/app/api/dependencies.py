"""Route Dependencies — injected configuration and provider client.

Invariants:
    - get_chat_client returns None when no credential is configured (fallback mode)
    - One ChatProviderClient per (key, model, timeout) per process

Design Decisions:
    - Credential presence modelled as an Optional dependency, overridable in tests
      via app.dependency_overrides
"""

from functools import lru_cache

from fastapi import Depends

from app.config import Settings, get_settings
from app.infrastructure.openai_client import ChatProviderClient


@lru_cache(maxsize=4)
def _client_for(
    api_key: str, model: str, timeout_seconds: int,
) -> ChatProviderClient:
    return ChatProviderClient(
        api_key=api_key, model=model, timeout_seconds=timeout_seconds,
    )


def get_chat_client(
    settings: Settings = Depends(get_settings),
) -> ChatProviderClient | None:
    if not settings.ai_configured:
        return None
    return _client_for(
        settings.openai_api_key,
        settings.openai_model,
        settings.openai_timeout_seconds,
    )
