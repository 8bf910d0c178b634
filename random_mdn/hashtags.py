from __future__ import annotations

from typing import Iterable

from random_mdn.errors import MalformedUrlError


def section_of(url: str, prefix: str) -> str:
    """Return the path segment directly after ``prefix``.

    >>> section_of("https://developer.mozilla.org/en-US/docs/Web/CSS/display",
    ...            "https://developer.mozilla.org/en-US/docs/Web/")
    'CSS'
    """
    if not url.startswith(prefix):
        raise MalformedUrlError(f"{url} does not start with {prefix}")

    rest = url[len(prefix):]
    if not prefix.endswith("/"):
        if not rest.startswith("/"):
            raise MalformedUrlError(f"no path segment after {prefix} in {url}")
        rest = rest[1:]

    for sep in ("?", "#"):
        rest = rest.split(sep, 1)[0]

    segment = rest.split("/", 1)[0]
    if not segment:
        raise MalformedUrlError(f"no path segment after {prefix} in {url}")
    return segment


def derive_hashtags(
    url: str,
    prefix: str,
    vocabulary: Iterable[str],
    default_tag: str = "#webdev",
) -> list[str]:
    hashtags = [default_tag]
    section = section_of(url, prefix)
    if section in set(vocabulary):
        hashtags.append(f"#{section}")
    return hashtags
