"""JSON-LD structured-data extraction.

Every ``<script type="application/ld+json">`` block is decoded on its own.
A block that is not valid JSON never stops the others: it is reported to the
caller's ``on_error`` callback and replaced by a placeholder so that output
positions still line up with the blocks in the document.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup, Tag

from contentpipe import settings
from contentpipe.dom import safe_str

logger = logging.getLogger(__name__)

SchemaFilter = Callable[[Any, int], bool]


@dataclass(frozen=True)
class SchemaErrorContext:
    """Details of one JSON-LD block that failed to decode."""

    index: int
    source: str
    error: Exception
    uri: str = ""

    @property
    def message(self) -> str:
        return str(self.error)


ErrorHandler = Callable[[SchemaErrorContext, int], None]


def placeholder_schema(ctx: SchemaErrorContext) -> dict[str, Any]:
    """Stand-in value emitted at the position of an unparsable block."""
    return {"@type": None, "@error": ctx.message, "@source": ctx.source}


def is_placeholder(schema: Any) -> bool:
    return isinstance(schema, dict) and "@error" in schema and schema.get("@type") is None


def jsonld_blocks(soup: BeautifulSoup, script_type: str = settings.JSONLD_SCRIPT_TYPE) -> list[str]:
    """Raw text of every JSON-LD script, in document order."""
    wanted = script_type.strip().lower()
    blocks: list[str] = []
    for script in soup.find_all("script"):
        if not isinstance(script, Tag):
            continue
        if safe_str(script.get("type"), "").strip().lower() != wanted:
            continue
        blocks.append(script.string if script.string is not None else script.get_text())
    return blocks


def expand_schema(value: Any) -> Iterator[Any]:
    """Yield the entries of an array or `@graph` block, else the value itself."""
    if isinstance(value, list):
        yield from value
    elif isinstance(value, dict) and isinstance(value.get("@graph"), list):
        yield from value["@graph"]
    else:
        yield value


def untyped_schemas(
    soup: BeautifulSoup,
    flatten: bool,
    filter: SchemaFilter | None = None,  # noqa: A002
    on_error: ErrorHandler | None = None,
    *,
    uri: str = "",
    script_type: str = settings.JSONLD_SCRIPT_TYPE,
) -> list[Any]:
    """Decode the JSON-LD blocks of *soup*.

    Args:
        soup:        Parsed document.
        flatten:     Expand top-level arrays and ``@graph`` arrays so each
                     entry becomes its own element (relative order kept).
        filter:      ``filter(schema, block_index)``; elements for which it
                     returns False are dropped.  Applied after decoding and
                     flattening, placeholders included.
        on_error:    ``on_error(context, block_index)``, called once per block
                     that fails to decode.
        uri:         Content URI, carried into error contexts and logs.
        script_type: Script ``type`` identifying JSON-LD blocks.

    Returns:
        The decoded values in document order; ``[]`` when there are none.
        Unparsable blocks appear as :func:`placeholder_schema` values.
    """
    result: list[Any] = []
    for index, source in enumerate(jsonld_blocks(soup, script_type)):
        try:
            parsed = json.loads(source)
        except (json.JSONDecodeError, TypeError) as exc:
            ctx = SchemaErrorContext(index=index, source=source.strip(), error=exc, uri=uri)
            logger.debug("JSON-LD block %d failed to parse for %s: %s", index, uri, exc)
            if on_error is not None:
                on_error(ctx, index)
            candidates: Iterator[Any] = iter((placeholder_schema(ctx),))
        else:
            candidates = expand_schema(parsed) if flatten else iter((parsed,))

        for schema in candidates:
            if filter is None or filter(schema, index):
                result.append(schema)

    return result
