import asyncio

import httpx
import pytest

from random_mdn.crawler.http_fetcher import HttpFetcher
from random_mdn.describe import DescriptionResolver
from random_mdn.errors import NetworkError

from conftest import page


URL = "https://developer.mozilla.org/en-US/docs/Web/CSS/display"


def _resolve(handler, max_chars: int = 200) -> str | None:
    async def go():
        http = HttpFetcher(timeout_seconds=5, user_agent="t", transport=httpx.MockTransport(handler))
        try:
            return await DescriptionResolver(http, max_chars=max_chars).resolve_description(URL)
        finally:
            await http.aclose()

    return asyncio.run(go())


def test_description_returned():
    assert _resolve(lambda r: httpx.Response(200, text=page("The display property."))) == "The display property."


def test_missing_description_is_none():
    assert _resolve(lambda r: httpx.Response(200, text=page(None))) is None


def test_long_description_truncated_after_decoding():
    text = "&amp;" + "a" * 250
    result = _resolve(lambda r: httpx.Response(200, text=page(text)))
    assert result == "&" + "a" * 199 + "…"
    assert len(result) == 201
    assert result.count("…") == 1


def test_exact_length_not_truncated():
    text = "b" * 200
    assert _resolve(lambda r: httpx.Response(200, text=page(text))) == text


def test_transport_failure_raises():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(NetworkError):
        _resolve(handler)
