"""Curated title resolution.

Priority chain (highest → lowest):
    Open Graph title → Twitter Card title → <title> element → ""
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from contentpipe.dom import first_non_empty

if TYPE_CHECKING:
    from contentpipe.items import SocialGraph

_WS_RE = re.compile(r"\s+")


def title_candidates(social_graph: SocialGraph | None, document_title: str = "") -> list[str]:
    """Candidate titles in precedence order (empty ones included)."""
    og = (social_graph.open_graph if social_graph else None) or {}
    twitter = (social_graph.twitter if social_graph else None) or {}
    return [
        (og.get("title") or "").strip(),
        (twitter.get("title") or "").strip(),
        (document_title or "").strip(),
    ]


def resolve_title(social_graph: SocialGraph | None, document_title: str = "") -> str:
    return first_non_empty(*title_candidates(social_graph, document_title)) or ""


def standardize_title(title: str) -> str:
    """Trim and collapse internal whitespace; idempotent."""
    return _WS_RE.sub(" ", title or "").strip()
