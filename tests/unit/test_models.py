"""Tests for endpoint resolution and value models."""

import pytest
from pydantic import ValidationError
from telegram import InlineQueryResultPhoto

from shibe_bot.models import ENDPOINT_ALIASES, Endpoint, PhotoResult, Query


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("shibe", Endpoint.SHIBES),
        ("shibes", Endpoint.SHIBES),
        ("shiba", Endpoint.SHIBES),
        ("shibas", Endpoint.SHIBES),
        ("cat", Endpoint.CATS),
        ("cats", Endpoint.CATS),
        ("bird", Endpoint.BIRDS),
        ("birds", Endpoint.BIRDS),
    ],
)
def test_alias_resolves_to_endpoint(alias: str, expected: Endpoint) -> None:
    assert Endpoint.from_alias(alias) is expected


@pytest.mark.parametrize("token", ["dog", "CATS", "Shibe", "cats!", ""])
def test_unknown_alias_resolves_to_none(token: str) -> None:
    assert Endpoint.from_alias(token) is None


@pytest.mark.parametrize("canonical", ["shibes", "cats", "birds"])
def test_canonical_form_round_trip(canonical: str) -> None:
    endpoint = Endpoint.from_alias(canonical)

    assert endpoint is not None
    assert str(endpoint) == canonical
    assert endpoint.value == canonical


def test_alias_table_covers_every_endpoint() -> None:
    assert set(ENDPOINT_ALIASES.values()) == set(Endpoint)


class TestQuery:
    def test_default(self) -> None:
        query = Query()

        assert query.endpoint is Endpoint.SHIBES
        assert query.count == 5

    def test_count_above_upstream_limit_is_allowed(self) -> None:
        assert Query(count=100).count == 100

    def test_negative_count_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Query(count=-1)

    def test_is_immutable(self) -> None:
        query = Query()

        with pytest.raises(ValidationError):
            query.count = 10

    def test_value_equality_and_hash(self) -> None:
        assert Query(endpoint=Endpoint.CATS, count=3) == Query(endpoint=Endpoint.CATS, count=3)
        assert hash(Query()) == hash(Query())
        assert Query(count=3) != Query(count=4)

    def test_str(self) -> None:
        assert str(Query(endpoint=Endpoint.BIRDS, count=2)) == "2 birds"


def test_photo_result_to_inline_result() -> None:
    url = "https://cdn.shibe.online/shibes/abc123.jpg"
    photo = PhotoResult(id="abc123", photo_url=url, thumbnail_url=url)

    result = photo.to_inline_result()

    assert isinstance(result, InlineQueryResultPhoto)
    assert result.id == "abc123"
    assert result.photo_url == url
    assert result.thumbnail_url == url
