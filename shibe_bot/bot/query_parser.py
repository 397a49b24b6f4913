"""Inline query text parsing.

Turns the free-form text a user types after the bot's username into a
structured ``Query``. Parsing never fails: anything that cannot be understood
falls back to the defaults field by field.

Accepted forms::

    ""            -> 5 shibes
    "10"          -> 10 shibes
    "cats"        -> 5 cats
    "3 birds"     -> 3 birds
    "3 dinosaurs" -> 3 shibes
"""

from __future__ import annotations

import logging
import re
from typing import Final

from ..models import Endpoint, Query

logger = logging.getLogger(__name__)

COUNT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?0*([0-9]{1,20})")
MAX_COUNT_VALUE: Final[int] = 2**64 - 1


def parse_count(token: str) -> int | None:
    """Parse a non-negative decimal count token, None if it is not one.

    Values above the unsigned 64-bit range are not counts.
    """
    match = COUNT_PATTERN.fullmatch(token)
    if match is None:
        return None
    count = int(match.group(1))
    if count > MAX_COUNT_VALUE:
        return None
    return count


def parse_query(raw: str) -> Query:
    """Parse inline query text into a Query.

    The first token is taken as the count if it is a non-negative integer.
    The next token, if it names a known endpoint, selects the endpoint.
    Everything after that is ignored.

    Args:
        raw: Inline query text as received from Telegram.

    Returns:
        Parsed Query, with defaults for any field that was missing or
        unrecognised.
    """
    tokens = raw.split()
    fields: dict[str, object] = {}

    if tokens:
        count = parse_count(tokens[0])
        if count is not None:
            fields["count"] = count
            tokens = tokens[1:]

    if tokens:
        endpoint = Endpoint.from_alias(tokens[0])
        if endpoint is not None:
            fields["endpoint"] = endpoint
        else:
            logger.debug("Unknown endpoint %r, using default", tokens[0])

    return Query(**fields)
