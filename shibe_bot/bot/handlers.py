"""Telegram bot handlers.

The inline query handler parses the query text, fetches matching images from
upstream and answers with photo results. Each inline query is handled
independently; failures affect only the query they happened in.
"""

import logging

import aiohttp
from telegram import Update
from telegram.ext import ContextTypes

from ..services.shibe_api import FetchError, shibe_api
from .query_parser import parse_query
from .utils import extract_username

logger = logging.getLogger(__name__)

HTTP_SESSION_KEY = "http_session"


async def handle_inline_query(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle an inline query.

    Args:
        update: Telegram update carrying the inline query.
        context: Bot context; ``bot_data`` holds the shared HTTP session.
    """
    inline_query = update.inline_query
    if inline_query is None:
        return

    logger.info(
        "Inline query %s received from @%s",
        inline_query.id,
        extract_username(inline_query.from_user),
    )

    query = parse_query(inline_query.query)
    logger.debug('Query %s parsed as "%s"', inline_query.id, query)

    session: aiohttp.ClientSession = context.bot_data[HTTP_SESSION_KEY]

    try:
        photos = await shibe_api.fetch(query, session)
    except FetchError:
        logger.exception("Failed to request %s for inline query %s", query.endpoint, inline_query.id)
        return

    logger.debug("Sending %d results for inline query %s", len(photos), inline_query.id)
    await inline_query.answer([photo.to_inline_result() for photo in photos])


async def log_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised by handlers."""
    logger.error("Exception while handling an update", exc_info=context.error)
