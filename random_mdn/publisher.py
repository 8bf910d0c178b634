from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import requests
import tweepy

from random_mdn.config import Config
from random_mdn.errors import PublishError
from random_mdn.utils import weighted_length


logger = logging.getLogger(__name__)


class Publisher(Protocol):
    async def publish(self, message: str) -> None: ...


class TimeoutSession(requests.Session):
    """requests session that applies a default timeout to every call tweepy makes."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__()
        self.timeout_seconds = timeout_seconds

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout_seconds)
        return super().request(method, url, **kwargs)


def build_client(config: Config) -> tweepy.Client:
    client = tweepy.Client(
        consumer_key=config.consumer_key,
        consumer_secret=config.consumer_secret,
        access_token=config.access_token,
        access_token_secret=config.access_token_secret,
    )
    client.session = TimeoutSession(config.http_timeout_seconds)
    return client


class TwitterPublisher:
    def __init__(self, config: Config, client: tweepy.Client | None = None) -> None:
        self._max_chars = config.max_post_chars
        self._client = client or build_client(config)

    async def publish(self, message: str) -> None:
        length = weighted_length(message)
        if length > self._max_chars:
            raise PublishError(f"post too long: {length} > {self._max_chars}")

        try:
            resp = await asyncio.to_thread(self._client.create_tweet, text=message)
        except tweepy.TweepyException as e:
            raise PublishError(str(e)) from e
        except requests.RequestException as e:
            raise PublishError(f"transport failure: {e}") from e

        data = getattr(resp, "data", None) or {}
        logger.info("posted id=%s length=%s", data.get("id"), length)


class LogPublisher:
    """Stand-in for TwitterPublisher outside production: logs instead of posting."""

    async def publish(self, message: str) -> None:
        logger.info("Running in dev mode. Following post would be sent")
        logger.info("Post length: %s (weighted %s)", len(message), weighted_length(message))
        logger.info("%s", message)


def build_publisher(config: Config) -> Publisher:
    if config.live:
        return TwitterPublisher(config)
    return LogPublisher()
