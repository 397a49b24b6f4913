"""Data models for the shibe bot.

Defines the upstream image categories, the parsed inline query and the photo
result handed back to Telegram. Models are immutable value objects: a fresh
instance is built for every inline query and never shared.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field
from telegram import InlineQueryResultPhoto

DEFAULT_COUNT: Final[int] = 5


class Endpoint(str, Enum):
    """Upstream image category.

    The value is the canonical lowercase form, used both for display and as
    the path segment of the upstream URL.
    """

    SHIBES = "shibes"
    CATS = "cats"
    BIRDS = "birds"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> Endpoint:
        return cls.SHIBES

    @classmethod
    def from_alias(cls, token: str) -> Endpoint | None:
        """Resolve a user-typed token to an endpoint.

        Matching is exact and case-sensitive.

        Args:
            token: Single whitespace-free token from the query text.

        Returns:
            Matching Endpoint, or None if the token is not a known alias.
        """
        return ENDPOINT_ALIASES.get(token)


ENDPOINT_ALIASES: Final[dict[str, Endpoint]] = {
    "shibe": Endpoint.SHIBES,
    "shibes": Endpoint.SHIBES,
    "shiba": Endpoint.SHIBES,
    "shibas": Endpoint.SHIBES,
    "cat": Endpoint.CATS,
    "cats": Endpoint.CATS,
    "bird": Endpoint.BIRDS,
    "birds": Endpoint.BIRDS,
}


class Query(BaseModel):
    """Structured inline query.

    Attributes:
        endpoint: Image category to request.
        count: Requested number of images. Not bounded here; the fetcher
            clamps it before calling upstream.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: Endpoint = Field(default_factory=Endpoint.default)
    count: int = Field(default=DEFAULT_COUNT, ge=0)

    @classmethod
    def parse(cls, raw: str) -> Query:
        """Parse free-form inline query text, see ``parse_query``."""
        from .bot.query_parser import parse_query

        return parse_query(raw)

    def __str__(self) -> str:
        return f"{self.count} {self.endpoint}"


class PhotoResult(BaseModel):
    """Single photo candidate for an inline query answer.

    Attributes:
        id: Unique result identifier, derived from the image file name.
        photo_url: Full-size image URL.
        thumbnail_url: Thumbnail URL. Upstream images are small, so the
            full image doubles as its own thumbnail.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    photo_url: str
    thumbnail_url: str

    def to_inline_result(self) -> InlineQueryResultPhoto:
        return InlineQueryResultPhoto(
            id=self.id,
            photo_url=self.photo_url,
            thumbnail_url=self.thumbnail_url,
        )
