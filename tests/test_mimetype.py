"""Tests for content-type parsing."""

import pytest

from contentpipe.mimetype import MimeType, MimeTypeError
from contentpipe.pipeline import InitContext


def test_essence_lower_cased():
    mt = MimeType.parse("Text/HTML")
    assert mt.essence == "text/html"
    assert mt.parameters == {}


def test_parameters_parsed():
    mt = MimeType.parse('text/html; charset="UTF-8"; q=0.9')
    assert mt.type == "text"
    assert mt.subtype == "html"
    assert mt.parameters == {"charset": "UTF-8", "q": "0.9"}


def test_first_duplicate_parameter_kept():
    assert MimeType.parse("text/html;charset=utf-8;charset=latin1").parameters == {"charset": "utf-8"}


def test_malformed_parameters_skipped():
    assert MimeType.parse("text/html; ; novalue; =x").parameters == {}


@pytest.mark.parametrize("raw", ["", "html", "text/", "/html", "te xt/html"])
def test_invalid_types_rejected(raw):
    with pytest.raises(MimeTypeError):
        MimeType.parse(raw)


def test_str_round_trip():
    assert str(MimeType.parse("text/html; charset=utf-8")) == "text/html;charset=utf-8"


def test_init_context_parses_content_type():
    ctx = InitContext.from_content_type("application/xhtml+xml")
    assert ctx.mime_type.essence == "application/xhtml+xml"
    assert ctx.settings.is_html(ctx.mime_type.essence)


def test_init_context_invalid_type():
    with pytest.raises(MimeTypeError):
        InitContext.from_content_type("nonsense")
