from __future__ import annotations

import logging
import time

import httpx

from random_mdn.errors import NetworkError


logger = logging.getLogger(__name__)


def _redact_detail(detail: str) -> str:
    detail = detail.strip()
    if len(detail) > 240:
        detail = detail[:240] + "…"
    return detail


class HttpFetcher:
    """Plain GETs with a per-request timeout. No retries."""

    def __init__(
        self,
        timeout_seconds: int,
        user_agent: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            follow_redirects=True,
            timeout=httpx.Timeout(timeout_seconds),
            headers={
                "User-Agent": user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            },
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, url: str) -> httpx.Response:
        started = time.perf_counter()
        try:
            resp = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise NetworkError(_redact_detail(f"timeout fetching {url}: {e}")) from e
        except httpx.HTTPError as e:
            raise NetworkError(_redact_detail(f"{url}: {e}")) from e

        if resp.status_code >= 400:
            raise NetworkError(f"{resp.status_code} fetching {url}")

        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.debug("GET %s -> %s in %sms (%s bytes)", url, resp.status_code, duration_ms, len(resp.content))
        return resp

    async def get_bytes(self, url: str) -> bytes:
        resp = await self._get(url)
        return resp.content

    async def get_text(self, url: str) -> str:
        resp = await self._get(url)
        return resp.text
