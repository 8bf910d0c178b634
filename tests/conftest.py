from __future__ import annotations

import gzip
from dataclasses import replace

import httpx
import pytest

from random_mdn.config import DEFAULT_TOPIC_TAGS, Config


SITEMAP_URL = "https://developer.mozilla.org/sitemaps/en-US/sitemap.xml.gz"
WEB_PREFIX = "https://developer.mozilla.org/en-US/docs/Web/"


def make_config(**overrides) -> Config:
    config = Config(
        consumer_key="",
        consumer_secret="",
        access_token="",
        access_token_secret="",
        live=False,
        max_post_chars=280,
        sitemap_url=SITEMAP_URL,
        allowed_prefix=WEB_PREFIX,
        max_attempts=5,
        topic_tags=DEFAULT_TOPIC_TAGS,
        default_tag="#webdev",
        description_max_chars=200,
        message_header="🦖 Random MDN 🦖",
        http_timeout_seconds=5,
        user_agent="test-agent",
        log_level="INFO",
        log_file="",
    )
    return replace(config, **overrides)


def sitemap_gz(urls: list[str]) -> bytes:
    body = "".join(f"<url><loc>{u}</loc></url>" for u in urls)
    xml = f'<?xml version="1.0" encoding="UTF-8"?><urlset>{body}</urlset>'
    return gzip.compress(xml.encode("utf-8"))


def page(description: str | None) -> str:
    meta = f'<meta name="description" content="{description}">' if description is not None else ""
    return f"<!doctype html><html><head><title>t</title>{meta}</head><body>x</body></html>"


class FakeSite:
    """Serves a sitemap and pages from dicts through httpx.MockTransport."""

    def __init__(self, sitemap: bytes, pages: dict[str, str] | None = None) -> None:
        self.sitemap = sitemap
        self.pages = pages or {}
        self.requests: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url == SITEMAP_URL:
            return httpx.Response(200, content=self.sitemap)
        if url in self.pages:
            return httpx.Response(200, text=self.pages[url])
        return httpx.Response(404, text="not found")

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class RecordingPublisher:
    def __init__(self) -> None:
        self.messages: list[str] = []

    async def publish(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def config() -> Config:
    return make_config()
