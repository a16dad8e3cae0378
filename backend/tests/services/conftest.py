"""Service test fixtures — FastAPI test client with dependency overrides.

Invariants:
    - Every test starts with no dependency overrides and the fallback (no key) mode
    - use_chat_client installs a MockChatClient as the injected provider
    - use_settings swaps Settings for a single test (e.g. strict mode)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_chat_client
from app.config import Settings, get_settings
from app.main import app

from tests.services.mock_openai import MockChatClient


@pytest.fixture
async def client():
    """FastAPI test client; overrides cleared afterwards."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def use_chat_client():
    """Install a MockChatClient with the given outcomes; returns it."""

    def install(*outcomes):
        mock = MockChatClient(outcomes)
        app.dependency_overrides[get_chat_client] = lambda: mock
        return mock

    return install


@pytest.fixture
def use_settings():
    """Override Settings for route dependencies; returns the instance."""

    def install(**overrides):
        settings = Settings(
            upi_verify_delay_ms=0, payment_processing_delay_ms=0, **overrides,
        )
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return install
