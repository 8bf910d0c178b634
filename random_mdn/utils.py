from __future__ import annotations

import re


# t.co wraps every link to a fixed length
TCO_URL_LENGTH = 23

_URL_RE = re.compile(r"https?://\S+", flags=re.IGNORECASE)

# Code point ranges counted with weight 1 by the posting service; everything else weighs 2.
_LIGHT_RANGES = (
    (0, 4351),
    (8192, 8205),
    (8208, 8223),
    (8242, 8247),
)


def truncate(text: str, max_chars: int) -> str:
    """Keep ``max_chars`` characters and mark the cut with a single ellipsis."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "…"


def _char_weight(ch: str) -> int:
    cp = ord(ch)
    for lo, hi in _LIGHT_RANGES:
        if lo <= cp <= hi:
            return 1
    return 2


def weighted_length(text: str) -> int:
    """Approximate the length the posting service charges for ``text``."""
    total = 0
    pos = 0
    for m in _URL_RE.finditer(text):
        total += sum(_char_weight(c) for c in text[pos : m.start()])
        total += TCO_URL_LENGTH
        pos = m.end()
    total += sum(_char_weight(c) for c in text[pos:])
    return total
