from __future__ import annotations

import logging

from random_mdn.crawler.http_fetcher import HttpFetcher
from random_mdn.crawler.parser import extract_meta_description
from random_mdn.utils import truncate


logger = logging.getLogger(__name__)


class DescriptionResolver:
    def __init__(self, http: HttpFetcher, max_chars: int = 200) -> None:
        self._http = http
        self._max_chars = max_chars

    async def resolve_description(self, url: str) -> str | None:
        """Fetch ``url`` and return its meta description, or None when the page has none.

        Transport errors propagate as NetworkError.
        """
        html = await self._http.get_text(url)
        description = extract_meta_description(html)
        if description is None:
            logger.debug("no description: %s", url)
            return None
        return truncate(description, self._max_chars)
