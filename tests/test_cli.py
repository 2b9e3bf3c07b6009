"""Tests for the python -m contentpipe entry point."""

from __future__ import annotations

import json

from contentpipe.__main__ import main


def test_prints_curation_record(tmp_path, capsys, news_html):
    page = tmp_path / "page.html"
    page.write_text(news_html, encoding="utf-8")

    assert main([str(page), "--uri", "https://www.foxnews.com/x", "--log-level", "ERROR"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["uri"] == "https://www.foxnews.com/x"
    assert data["title"] == "Photo of Donald Trump 'look-alike' in Spain goes viral"
    assert [s["@type"] for s in data["schemas"]] == ["NewsArticle", "WebPage"]


def test_no_flatten_keeps_graph(tmp_path, capsys):
    page = tmp_path / "graph.html"
    page.write_text(
        '<html><head><script type="application/ld+json">'
        '{"@graph": [{"@type": "A"}, {"@type": "B"}]}'
        "</script></head><body></body></html>",
        encoding="utf-8",
    )

    assert main([str(page), "--no-flatten", "--log-level", "ERROR"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data["schemas"]) == 1
    assert len(data["schemas"][0]["@graph"]) == 2


def test_missing_file_exits_nonzero(tmp_path):
    assert main([str(tmp_path / "missing.html"), "--log-level", "ERROR"]) == 1


def test_invalid_content_type_exits_nonzero(tmp_path, news_html):
    page = tmp_path / "page.html"
    page.write_text(news_html, encoding="utf-8")
    assert main([str(page), "--content-type", "bogus", "--log-level", "ERROR"]) == 1


def test_malformed_config_exits_nonzero(tmp_path, capsys, news_html):
    page = tmp_path / "page.html"
    page.write_text(news_html, encoding="utf-8")
    config = tmp_path / "bad.yaml"
    config.write_text("a: [unclosed\n", encoding="utf-8")

    assert main([str(page), "--config", str(config), "--log-level", "ERROR"]) == 1
    assert "error: cannot read config" in capsys.readouterr().err
