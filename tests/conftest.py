"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from contentpipe.content import GovernedContent
from contentpipe.pipeline import InitContext, standard_pipe

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def news_html() -> str:
    return _read_fixture("news_article.html")


@pytest.fixture
def seo_html() -> str:
    return _read_fixture("seo_blog.html")


@pytest.fixture
def broken_jsonld_html() -> str:
    return _read_fixture("broken_jsonld.html")


@pytest.fixture
def curate() -> Callable[..., GovernedContent]:
    """Run the standard pipeline synchronously over an HTML string."""

    def _curate(html: str, uri: str = "", content_type: str = "text/html") -> GovernedContent:
        return standard_pipe().run(
            {"html_source": html, "uri": uri},
            InitContext.from_content_type(content_type),
        )

    return _curate
