from __future__ import annotations

import re

from selectolax.parser import HTMLParser


_LOC_RE = re.compile(r"<loc>(.*?)</loc>", flags=re.DOTALL)


def extract_locs(sitemap_xml: str) -> list[str]:
    """Return every ``<loc>`` body in document order, duplicates included."""
    if not sitemap_xml:
        return []
    return [m.group(1).strip() for m in _LOC_RE.finditer(sitemap_xml)]


def extract_meta_description(html: str) -> str | None:
    if not html:
        return None

    tree = HTMLParser(html)
    node = tree.css_first('meta[name="description"]')
    if node is None:
        return None

    # attribute values come back with entities already decoded
    content = (node.attributes.get("content") or "").strip()
    return content or None
