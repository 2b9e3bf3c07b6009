"""Content-type parsing.

Only as much of RFC 9110 media types as the pipeline needs: the essence
(``type/subtype``, lower-cased) and the parameter map.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


class MimeTypeError(ValueError):
    """Raised when a content-type string cannot be parsed."""


class MimeType(NamedTuple):
    """Parsed content type, e.g. ``text/html; charset=utf-8``."""

    type: str
    subtype: str
    parameters: dict[str, str]

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @classmethod
    def parse(cls, content_type: str) -> MimeType:
        """Parse *content_type*.

        Raises:
            MimeTypeError: When the type or subtype is missing or not a token.
        """
        raw = (content_type or "").strip()
        head, _, rest = raw.partition(";")
        type_, slash, subtype = head.strip().partition("/")
        type_, subtype = type_.strip().lower(), subtype.strip().lower()
        if not slash or not _TOKEN_RE.match(type_) or not _TOKEN_RE.match(subtype):
            raise MimeTypeError(f"Invalid content type: {content_type!r}")

        params: dict[str, str] = {}
        for part in rest.split(";"):
            name, eq, value = part.partition("=")
            name = name.strip().lower()
            if not eq or not name or not _TOKEN_RE.match(name) or name in params:
                continue
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            params[name] = value
        return cls(type_, subtype, params)

    def __str__(self) -> str:
        params = "".join(f";{k}={v}" for k, v in self.parameters.items())
        return self.essence + params
