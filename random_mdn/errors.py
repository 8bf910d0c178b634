from __future__ import annotations


ERROR_CONFIG = "CONFIG"
ERROR_NETWORK = "NETWORK"
ERROR_DECOMPRESS = "DECOMPRESS"
ERROR_MALFORMED_URL = "MALFORMED_URL"
ERROR_PUBLISH = "PUBLISH"
ERROR_NO_CANDIDATES = "NO_CANDIDATES"
ERROR_EXHAUSTED = "EXHAUSTED"


class BotError(Exception):
    error_type = "UNKNOWN"

    def __init__(self, detail: str = ""):
        super().__init__(f"{self.error_type}: {detail}")
        self.detail = detail


class ConfigError(BotError):
    """Configuration is missing or invalid."""

    error_type = ERROR_CONFIG


class NetworkError(BotError):
    """Transport failure or HTTP error status on a sitemap/page fetch."""

    error_type = ERROR_NETWORK


class DecompressionError(BotError):
    """The sitemap payload is not valid gzip."""

    error_type = ERROR_DECOMPRESS


class MalformedUrlError(BotError):
    """The URL has no path segment right after the allowed prefix."""

    error_type = ERROR_MALFORMED_URL


class PublishError(BotError):
    """The posting service rejected the post or could not be reached."""

    error_type = ERROR_PUBLISH


class NoCandidatesError(BotError):
    error_type = ERROR_NO_CANDIDATES


class ResolutionExhaustedError(BotError):
    error_type = ERROR_EXHAUSTED
