"""Pydantic validation schemas: pipeline input, social graph and the
serialisable curation record handed to syndication / indexing consumers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from contentpipe.content import (
    GovernedContent,
    is_curatable_content,
    is_queryable_html_content,
)

# ---------------------------------------------------------------------------
# Pipeline input
# ---------------------------------------------------------------------------

class ContentSource(BaseModel):
    """Raw input to a pipeline run."""

    html_source: str
    uri: str = ""

    @field_validator("uri", mode="before")
    @classmethod
    def strip_uri(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""


# ---------------------------------------------------------------------------
# Social graph
# ---------------------------------------------------------------------------

class SocialGraph(BaseModel):
    """Open Graph and Twitter Card properties, prefixes stripped.

    Both sides are read-only mappings; they serialise as plain dicts.
    """

    model_config = {"frozen": True}

    open_graph: Mapping[str, str] | None = None
    twitter: Mapping[str, str] | None = None

    @field_validator("open_graph", "twitter", mode="after")
    @classmethod
    def read_only(cls, v: Mapping[str, str] | None) -> Mapping[str, str] | None:
        if v is None:
            return None
        return MappingProxyType(dict(v))

    @field_serializer("open_graph", "twitter")
    def as_dict(self, v: Mapping[str, str] | None) -> dict[str, str] | None:
        return dict(v) if v is not None else None


# ---------------------------------------------------------------------------
# Curation record
# ---------------------------------------------------------------------------

class CurationRecord(BaseModel):
    """Canonical output schema for one curated content item."""

    # Identity
    uri: str
    content_type: str = ""

    # Curation
    title: str = ""
    description: str | None = None
    canonical_url: str | None = None
    site_name: str | None = None
    published_at: str | None = None

    # Raw signals
    social_graph: SocialGraph | None = None
    meta: dict[str, str] = Field(default_factory=dict)
    schemas: list[Any] = Field(default_factory=list)
    schema_errors: list[int] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""


def to_curation_record(content: GovernedContent, flatten: bool = True) -> CurationRecord:
    """Summarise any pipeline output as a :class:`CurationRecord`.

    Fields that need a capability *content* lacks are left empty.
    """
    record: dict[str, Any] = {
        "uri": content.uri,
        "content_type": content.content_type,
    }
    if not is_queryable_html_content(content):
        return CurationRecord(**record)

    from contentpipe.extractors.published import extract_published

    errors: list[int] = []
    schemas = content.untyped_schemas(flatten, on_error=lambda _ctx, index: errors.append(index))
    meta = content.meta()
    record.update(
        meta=meta,
        schemas=schemas,
        schema_errors=errors,
        **extract_published(content.document, meta, schemas, content.uri),
    )
    if is_curatable_content(content):
        record.update(title=content.title, social_graph=content.social_graph)
    else:
        record["title"] = content.document_title()
    return CurationRecord(**record)
