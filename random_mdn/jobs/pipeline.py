from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import httpx

from random_mdn.compose import compose_message
from random_mdn.config import Config
from random_mdn.crawler.http_fetcher import HttpFetcher
from random_mdn.describe import DescriptionResolver
from random_mdn.errors import BotError, NoCandidatesError, ResolutionExhaustedError
from random_mdn.hashtags import derive_hashtags
from random_mdn.publisher import Publisher, build_publisher
from random_mdn.sitemap.fetcher import SitemapFetcher
from random_mdn.sitemap.sampler import UrlSampler


STATE_FETCHING = "FETCHING"
STATE_RESOLVING = "RESOLVING"
STATE_PUBLISHING = "PUBLISHING"
STATE_DONE = "DONE"
STATE_FAILED = "FAILED"


logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    config: Config
    http: HttpFetcher
    sitemap: SitemapFetcher
    sampler: UrlSampler
    resolver: DescriptionResolver
    publisher: Publisher

    async def aclose(self) -> None:
        await self.http.aclose()


@dataclass(frozen=True)
class RunResult:
    ok: bool
    state: str
    attempts: int = 0
    url: str | None = None
    description: str | None = None
    message: str | None = None
    error: BotError | None = None
    failed_in: str | None = None


def build_app_context(
    config: Config,
    publisher: Publisher | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    rng: random.Random | None = None,
) -> AppContext:
    http = HttpFetcher(
        timeout_seconds=config.http_timeout_seconds,
        user_agent=config.user_agent,
        transport=transport,
    )
    return AppContext(
        config=config,
        http=http,
        sitemap=SitemapFetcher(http, config.sitemap_url),
        sampler=UrlSampler(config.allowed_prefix, rng=rng),
        resolver=DescriptionResolver(http, max_chars=config.description_max_chars),
        publisher=publisher or build_publisher(config),
    )


async def run_once(ctx: AppContext) -> RunResult:
    """Fetch the sitemap, resolve a described page, publish it.

    Never raises BotError; the failure is returned in the result for the caller to log.
    """
    state = STATE_FETCHING
    attempts = 0
    url = description = message = None
    try:
        urls = await ctx.sitemap.fetch_urls()

        state = STATE_RESOLVING
        max_attempts = ctx.config.max_attempts
        while description is None:
            if attempts >= max_attempts:
                raise ResolutionExhaustedError(f"no description found after {max_attempts} attempts")

            url = ctx.sampler.sample(urls)
            if url is None:
                raise NoCandidatesError(f"no sitemap url starts with {ctx.sampler.prefix}")

            attempts += 1
            description = await ctx.resolver.resolve_description(url) or None
            if description is None:
                logger.info("attempt %s: %s has no description", attempts, url)
        logger.info("attempt %s: picked %s", attempts, url)

        state = STATE_PUBLISHING
        hashtags = derive_hashtags(
            url,
            ctx.config.allowed_prefix,
            ctx.config.topic_tags,
            default_tag=ctx.config.default_tag,
        )
        message = compose_message(url, description, hashtags, header=ctx.config.message_header)
        await ctx.publisher.publish(message)
    except BotError as e:
        return RunResult(
            ok=False,
            state=STATE_FAILED,
            attempts=attempts,
            url=url,
            description=description,
            message=message,
            error=e,
            failed_in=state,
        )

    return RunResult(
        ok=True,
        state=STATE_DONE,
        attempts=attempts,
        url=url,
        description=description,
        message=message,
    )


async def run(config: Config, publisher: Publisher | None = None) -> RunResult:
    ctx = build_app_context(config, publisher=publisher)
    try:
        return await run_once(ctx)
    finally:
        await ctx.aclose()
