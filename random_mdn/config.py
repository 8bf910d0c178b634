from __future__ import annotations

from dataclasses import dataclass
import os

from random_mdn.errors import ConfigError


DEFAULT_TOPIC_TAGS = ("CSS", "Accessibility", "JavaScript", "HTTP", "HTML", "SVG")


def _env_str(name: str, default: str | None = None) -> str:
    value = os.getenv(name)
    if value is None:
        if default is None:
            raise ConfigError(f"Missing required env: {name}")
        return default
    return value


def _env_int(name: str, default: int | None = None) -> int:
    value = os.getenv(name)
    if value is None:
        if default is None:
            raise ConfigError(f"Missing required env: {name}")
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"Invalid integer env {name}={value!r}") from e


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    return value in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    return tuple(x.strip() for x in value.split(",") if x.strip())


@dataclass(frozen=True)
class Config:
    # Twitter
    consumer_key: str
    consumer_secret: str
    access_token: str
    access_token_secret: str
    live: bool
    max_post_chars: int

    # Sitemap / sampling
    sitemap_url: str
    allowed_prefix: str
    max_attempts: int

    # Message
    topic_tags: tuple[str, ...]
    default_tag: str
    description_max_chars: int
    message_header: str

    # HTTP
    http_timeout_seconds: int
    user_agent: str

    # Logging
    log_level: str
    log_file: str

    def missing_credentials(self) -> list[str]:
        names = {
            "CONSUMER_KEY": self.consumer_key,
            "CONSUMER_SECRET": self.consumer_secret,
            "ACCESS_TOKEN": self.access_token,
            "ACCESS_TOKEN_SECRET": self.access_token_secret,
        }
        return [name for name, value in names.items() if not value]


def load_config(force_dry_run: bool = False) -> Config:
    live = _env_str("APP_ENV", "development").strip().lower() == "production"
    if force_dry_run or _env_bool("DRY_RUN", False):
        live = False

    config = Config(
        consumer_key=_env_str("CONSUMER_KEY", ""),
        consumer_secret=_env_str("CONSUMER_SECRET", ""),
        access_token=_env_str("ACCESS_TOKEN", ""),
        access_token_secret=_env_str("ACCESS_TOKEN_SECRET", ""),
        live=live,
        max_post_chars=_env_int("MAX_POST_CHARS", 280),
        sitemap_url=_env_str("SITEMAP_URL", "https://developer.mozilla.org/sitemaps/en-US/sitemap.xml.gz"),
        allowed_prefix=_env_str("ALLOWED_PREFIX", "https://developer.mozilla.org/en-US/docs/Web/"),
        max_attempts=_env_int("MAX_ATTEMPTS", 25),
        topic_tags=_env_list("TOPIC_TAGS", DEFAULT_TOPIC_TAGS),
        default_tag=_env_str("DEFAULT_TAG", "#webdev"),
        description_max_chars=_env_int("DESCRIPTION_MAX_CHARS", 200),
        message_header=_env_str("MESSAGE_HEADER", "🦖 Random MDN 🦖"),
        http_timeout_seconds=_env_int("HTTP_TIMEOUT_SECONDS", 20),
        user_agent=_env_str("USER_AGENT", "random-mdn-bot/1.0 (+https://developer.mozilla.org)"),
        log_level=_env_str("LOG_LEVEL", "INFO"),
        log_file=_env_str("LOG_FILE", ""),
    )

    if config.max_attempts <= 0:
        raise ConfigError(f"MAX_ATTEMPTS must be positive, got {config.max_attempts}")
    if not config.allowed_prefix:
        raise ConfigError("ALLOWED_PREFIX must not be empty")
    if config.live:
        missing = config.missing_credentials()
        if missing:
            raise ConfigError(f"Live mode requires credentials: {', '.join(missing)}")

    return config
