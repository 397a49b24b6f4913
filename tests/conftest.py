"""Global test configuration and fixtures.

Provides shared fixtures for all test levels including environment setup,
stubbed upstream HTTP sessions and mocked Telegram inline queries.
"""

import json
import os
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

# Test constants
TEST_BOT_TOKEN = os.getenv("TEST_BOT_TOKEN", "123456:test_bot_token_placeholder")


@pytest.fixture(autouse=True)
def test_environment(monkeypatch):
    """Setup test environment variables for all tests."""
    monkeypatch.setenv("BOT_TOKEN", TEST_BOT_TOKEN)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("WEBHOOK_DOMAIN", raising=False)
    monkeypatch.delenv("SHIBE_API_URL", raising=False)


@pytest.fixture
def make_http_session():
    """Build a mocked aiohttp.ClientSession returning a fixed body.

    The returned factory accepts either a JSON-serialisable payload or raw
    bytes for the response body.
    """

    def _make(payload=None, *, body: bytes | None = None) -> MagicMock:
        if body is None:
            body = json.dumps(payload if payload is not None else []).encode()

        response = MagicMock()
        response.status = 200
        response.raise_for_status = MagicMock()
        response.read = AsyncMock(return_value=body)

        session = MagicMock(spec=aiohttp.ClientSession)
        session.get.return_value.__aenter__.return_value = response
        session.get.return_value.__aexit__.return_value = False
        return session

    return _make


@pytest.fixture
def sample_urls():
    """Upstream responses as returned by shibe.online."""
    return {
        "shibes": [
            "https://cdn.shibe.online/shibes/907fed95d0a8ad8a8d8a8d9f5d8a8d8a8d8a8d8a.jpg",
            "https://cdn.shibe.online/shibes/2b2c3f0c7e0d3a3c8f2b4f7f6a2c0d2c1e1f0a9b.jpg",
        ],
        "mixed": ["https://x/a.jpg", "not-a-url", "https://x/b.jpg"],
    }


@pytest.fixture
def mock_inline_update():
    """Mock Telegram update carrying an inline query."""

    def _make(text: str, username: str | None = "test_user", user_id: int = 12345) -> MagicMock:
        update = MagicMock()
        update.inline_query.id = "inline-1"
        update.inline_query.query = text
        update.inline_query.from_user = MagicMock(id=user_id, username=username)
        update.inline_query.answer = AsyncMock()
        return update

    return _make
