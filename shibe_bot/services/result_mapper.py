"""Mapping of upstream image URLs to inline photo results.

URLs that cannot be turned into a result are skipped rather than treated as
errors; one bad entry must not cost the user the rest of the answer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import urlparse

from ..models import PhotoResult

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = ".jpg"


def parse_image_id(url: str) -> str | None:
    """Extract the result identifier from an image URL.

    The identifier is the last path segment with a trailing ``.jpg`` removed.
    Other extensions, and ``.jpg`` in any other case, are kept.

    Args:
        url: Absolute image URL.

    Returns:
        Identifier string, or None if the URL has no usable path segment.
    """
    segment = urlparse(url).path.rsplit("/", 1)[-1]
    if not segment:
        return None
    return segment.removesuffix(IMAGE_SUFFIX) or None


def is_absolute_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
        # raises ValueError for a malformed port
        parsed.port
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.hostname)


def map_url(url: str) -> PhotoResult | None:
    """Convert one upstream image URL into a PhotoResult.

    Args:
        url: Image URL as returned by the upstream API.

    Returns:
        PhotoResult using the URL as both photo and thumbnail, or None if the
        URL is invalid or carries no identifier.
    """
    if not is_absolute_url(url):
        logger.warning("Skipping image: invalid image URL %r", url)
        return None

    image_id = parse_image_id(url)
    if image_id is None:
        logger.warning("Failed to parse image ID from URL %s, skipping image", url)
        return None

    return PhotoResult(id=image_id, photo_url=url, thumbnail_url=url)


def map_urls(urls: Iterable[str]) -> list[PhotoResult]:
    """Map URLs in order, keeping only those that produce a result."""
    return [result for result in map(map_url, urls) if result is not None]
