from __future__ import annotations

import random
from typing import Sequence


def filter_urls(urls: Sequence[str], prefix: str) -> list[str]:
    return [u for u in urls if u.startswith(prefix)]


class UrlSampler:
    def __init__(self, prefix: str, rng: random.Random | None = None) -> None:
        self._prefix = prefix
        self._rng = rng or random.Random()
        # the sitemap does not change mid-run, so the filtered view is kept per source list
        self._source: Sequence[str] | None = None
        self._filtered: list[str] = []

    @property
    def prefix(self) -> str:
        return self._prefix

    def candidates(self, urls: Sequence[str]) -> list[str]:
        if urls is not self._source:
            self._source = urls
            self._filtered = filter_urls(urls, self._prefix)
        return self._filtered

    def sample(self, urls: Sequence[str]) -> str | None:
        filtered = self.candidates(urls)
        if not filtered:
            return None
        return filtered[self._rng.randrange(len(filtered))]
