"""Open Graph / Twitter Card extraction."""

from __future__ import annotations

from collections.abc import Mapping

from contentpipe.items import SocialGraph

_OG_PREFIX = "og:"
_TWITTER_PREFIX = "twitter:"


def _prefixed(meta: Mapping[str, str], prefix: str) -> dict[str, str] | None:
    found: dict[str, str] = {}
    for key, value in meta.items():
        key_lower = key.lower()
        if not key_lower.startswith(prefix) or not value:
            continue
        prop = key_lower[len(prefix):]
        if prop and prop not in found:
            found[prop] = value
    return found or None


def extract_social_graph(meta: Mapping[str, str]) -> SocialGraph | None:
    """Split ``og:*`` and ``twitter:*`` entries of *meta* into a SocialGraph.

    Property keys are lower-cased with the prefix removed (``og:title`` →
    ``title``).  Returns None when the page carries neither kind of tag.
    """
    og = _prefixed(meta, _OG_PREFIX)
    twitter = _prefixed(meta, _TWITTER_PREFIX)
    if og is None and twitter is None:
        return None
    return SocialGraph(open_graph=og, twitter=twitter)
