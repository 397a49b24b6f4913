"""Client for the shibe.online random image API.

Fetches image URLs for a parsed query and maps them into inline photo
results. A single ``aiohttp.ClientSession`` is created at startup and shared
by all concurrent inline queries; this module never mutates it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import aiohttp
from pydantic import TypeAdapter, ValidationError

from ..config import ApiConfig, config
from ..models import Endpoint, PhotoResult, Query
from .result_mapper import map_urls

logger = logging.getLogger(__name__)

MAX_COUNT: Final[int] = 25

_URL_LIST: Final[TypeAdapter[list[str]]] = TypeAdapter(list[str])


class FetchError(Exception):
    """Upstream images could not be fetched for a query."""


class RequestError(FetchError):
    """Transport failure: connection, timeout or non-success status."""


class DecodeError(FetchError):
    """Response body is not a JSON array of strings."""


def create_http_session(api_config: ApiConfig | None = None) -> aiohttp.ClientSession:
    """Create the shared HTTP session for upstream requests.

    Must be called from a running event loop.

    Args:
        api_config: API settings, defaults to the global configuration.

    Returns:
        Session with fixed connect/total timeouts and the bot's User-Agent.
    """
    api_config = api_config or config.api
    timeout = aiohttp.ClientTimeout(
        total=api_config.total_timeout,
        connect=api_config.connect_timeout,
    )
    return aiohttp.ClientSession(
        timeout=timeout,
        headers={"User-Agent": api_config.user_agent},
    )


class ShibeApiService:
    """Random animal image API client."""

    def __init__(self, base_url: str | None = None, max_count: int = MAX_COUNT):
        """Initialize the service.

        Args:
            base_url: API root, defaults to the configured one.
            max_count: Upper bound for the number of images requested.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.max_count = max_count

    def build_url(self, endpoint: Endpoint) -> str:
        return f"{self.base_url}/{endpoint}"

    async def request_urls(self, query: Query, session: aiohttp.ClientSession) -> list[str]:
        """Request image URLs from upstream.

        Args:
            query: Parsed query; its count is clamped to ``max_count``.
            session: Shared HTTP session.

        Returns:
            Image URLs in the order upstream returned them.

        Raises:
            RequestError: On connection errors, timeouts and non-2xx responses.
            DecodeError: If the body is not a JSON array of strings.
        """
        count = min(query.count, self.max_count)
        url = self.build_url(query.endpoint)
        logger.debug("Requesting %d %s from %s", count, query.endpoint, url)

        try:
            async with session.get(url, params={"count": count}) as response:
                response.raise_for_status()
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RequestError(f"Failed to request {query.endpoint}: {e!r}") from e

        try:
            urls = _URL_LIST.validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response for {query.endpoint}: {e}") from e

        logger.debug("Received %d %s URLs", len(urls), query.endpoint)
        return urls

    async def fetch(self, query: Query, session: aiohttp.ClientSession) -> list[PhotoResult]:
        """Fetch images for a query as inline photo results.

        URLs that cannot be mapped are dropped; an empty list is a valid
        outcome, not an error.

        Args:
            query: Parsed query.
            session: Shared HTTP session.

        Returns:
            Photo results in upstream order.

        Raises:
            RequestError: On transport failures.
            DecodeError: On malformed response bodies.
        """
        urls = await self.request_urls(query, session)
        results = map_urls(urls)
        if len(results) < len(urls):
            logger.debug("Dropped %d of %d image URLs", len(urls) - len(results), len(urls))
        return results


shibe_api = ShibeApiService()
