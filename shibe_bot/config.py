"""Configuration management for the shibe bot.

Handles environment variables, an optional YAML override file and default
settings. Provides structured configuration classes for the Telegram side of
the bot and for the upstream image API.
"""

from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

USER_AGENT = f"shibe-bot/{__version__}"


class ApiConfig(BaseSettings):
    """Upstream image API settings.

    Timeouts are fixed for the lifetime of the process: the HTTP session is
    created once at startup and never reconfigured.

    Attributes:
        base_url: API root, endpoint names are appended as path segments.
        connect_timeout: Seconds allowed to establish a connection.
        total_timeout: Seconds allowed for the whole request, body included.
        user_agent: User-Agent header sent with every upstream request.
    """
    model_config = SettingsConfigDict(populate_by_name=True)

    base_url: str = Field(default="https://shibe.online/api", validation_alias="SHIBE_API_URL")
    connect_timeout: float = 5.0
    total_timeout: float = 17.0
    user_agent: str = USER_AGENT


class BotConfig(BaseSettings):
    """Main Telegram bot configuration.

    Attributes:
        bot_token: Telegram bot API token from environment.
        log_level: Root logging level name.
        port: Server port for webhook mode.
        webhook_domain: Public domain for webhooks, polling mode if unset.
        listen_host: Interface the webhook server binds to.
    """
    bot_token: str = Field(default="", validation_alias="BOT_TOKEN")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    port: int = Field(default=8000, validation_alias="PORT")
    webhook_domain: str | None = Field(default=None, validation_alias="WEBHOOK_DOMAIN")
    listen_host: str = Field(default="127.0.0.1", validation_alias="BOT_LISTEN_HOST")

    @property
    def use_webhook(self) -> bool:
        """Determine if webhook mode should be used.

        Returns:
            True if webhook domain is configured, False for polling mode.
        """
        return bool(self.webhook_domain)


class Config:
    """Application configuration manager.

    Loads environment-driven settings and applies overrides from
    ``api.yml`` in the configuration directory when that file exists.
    """

    def __init__(self, config_dir: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory, defaults to shibe_bot/config.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = Path(config_dir)

        self.bot = BotConfig()

        api_path = self.config_dir / "api.yml"
        if api_path.exists():
            with open(api_path) as f:
                api_data = yaml.safe_load(f) or {}

            defaults = ApiConfig()
            timeouts = api_data.get("timeouts", {})
            self.api = ApiConfig(
                base_url=api_data.get("base_url", defaults.base_url),
                connect_timeout=timeouts.get("connect", defaults.connect_timeout),
                total_timeout=timeouts.get("total", defaults.total_timeout),
                user_agent=api_data.get("user_agent", defaults.user_agent),
            )
        else:
            self.api = ApiConfig()


# Global configuration instance
config = Config()
