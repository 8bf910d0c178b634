from __future__ import annotations

from typing import Sequence


DEFAULT_HEADER = "🦖 Random MDN 🦖"


def compose_message(
    url: str,
    description: str,
    hashtags: Sequence[str],
    header: str = DEFAULT_HEADER,
) -> str:
    tags = " ".join(hashtags)
    return f"{header}\n\n{description} {tags}\n{url}"
