from __future__ import annotations

import gzip
import logging
import zlib

from random_mdn.crawler.http_fetcher import HttpFetcher
from random_mdn.crawler.parser import extract_locs
from random_mdn.errors import DecompressionError


logger = logging.getLogger(__name__)


def decompress_sitemap(payload: bytes) -> str:
    try:
        raw = gzip.decompress(payload)
    except (OSError, EOFError, zlib.error) as e:
        raise DecompressionError(f"sitemap is not valid gzip: {e}") from e
    return raw.decode("utf-8", errors="replace")


class SitemapFetcher:
    def __init__(self, http: HttpFetcher, sitemap_url: str) -> None:
        self._http = http
        self._url = sitemap_url

    async def fetch_urls(self) -> list[str]:
        payload = await self._http.get_bytes(self._url)
        sitemap = decompress_sitemap(payload)
        urls = extract_locs(sitemap)
        logger.info("sitemap %s: %s urls", self._url, len(urls))
        return urls
