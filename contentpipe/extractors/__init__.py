"""Extraction sub-package: meta tags, JSON-LD, social graph and title resolution."""

from .meta import collect_meta
from .published import extract_published
from .schemas import SchemaErrorContext, untyped_schemas
from .social import extract_social_graph
from .title import resolve_title, standardize_title

__all__ = [
    "collect_meta",
    "extract_published",
    "extract_social_graph",
    "resolve_title",
    "standardize_title",
    "untyped_schemas",
    "SchemaErrorContext",
]
