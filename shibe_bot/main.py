"""Application entry point.

Main module that initializes and runs the Telegram bot application. Handles
both webhook mode (when a public domain is configured) and polling mode (for
local development). Configures logging, owns the shared HTTP session and
registers the inline query handler.
"""

import logging

from telegram.ext import Application, InlineQueryHandler

from .bot.handlers import HTTP_SESSION_KEY, handle_inline_query, log_error
from .config import config
from .services.shibe_api import create_http_session

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )
    # python-telegram-bot logs every Bot API request through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def initialize_resources(application: Application) -> None:
    """Create the HTTP session shared by all inline queries."""
    application.bot_data[HTTP_SESSION_KEY] = create_http_session(config.api)
    logger.info("HTTP session created for %s", config.api.base_url)


async def cleanup_resources(application: Application) -> None:
    """Close the shared HTTP session."""
    session = application.bot_data.pop(HTTP_SESSION_KEY, None)
    if session is not None:
        await session.close()
        logger.info("HTTP session closed")


def build_application(bot_token: str) -> Application:
    """Build the bot application with handlers and lifecycle hooks.

    Args:
        bot_token: Telegram bot API token.

    Returns:
        Configured Application, not yet running.
    """
    app = (
        Application.builder()
        .token(bot_token)
        .concurrent_updates(True)
        .post_init(initialize_resources)
        .post_shutdown(cleanup_resources)
        .build()
    )

    app.add_handler(InlineQueryHandler(handle_inline_query))
    app.add_error_handler(log_error)
    return app


def main() -> None:
    """Main application entry point.

    Raises:
        RuntimeError: If BOT_TOKEN environment variable is not set.
    """
    setup_logging(config.bot.log_level)

    if not config.bot.bot_token:
        raise RuntimeError("Set BOT_TOKEN environment variable")

    logger.info("Starting Shibe bot...")
    app = build_application(config.bot.bot_token)

    if config.bot.use_webhook:
        path = f"/{config.bot.bot_token}"
        webhook_url = f"https://{config.bot.webhook_domain}{path}"
        logger.info("Starting webhook at https://%s", config.bot.webhook_domain)
        app.run_webhook(
            listen=config.bot.listen_host,
            port=config.bot.port,
            url_path=path,
            webhook_url=webhook_url,
        )
    else:
        logger.info("No webhook domain configured; falling back to long-polling")
        app.run_polling()


if __name__ == "__main__":
    main()
