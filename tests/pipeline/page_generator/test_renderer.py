"""Tests for text escaping and Markdown rendering."""

import pytest

from pageforge.pipeline.page_generator import renderer as r


def test_escape_text_handles_quotes_and_none():
    assert r.escape_text("<a href='x'>&</a>") == "&lt;a href=&#x27;x&#x27;&gt;&amp;&lt;/a&gt;"
    assert r.escape_text(None) == ""


def test_render_markdown_basic():
    html = r.render_markdown("# Title\n\nSome **bold** text")
    assert "<h1>Title</h1>" in html
    assert "<strong>bold</strong>" in html


def test_render_markdown_escapes_raw_html():
    html = r.render_markdown("<script>alert(1)</script>")
    assert "<script>" not in html


def test_render_markdown_uses_configured_extras(monkeypatch):
    seen = {}

    def fake(text, extras=None, safe_mode=None):
        seen["extras"] = extras
        seen["safe_mode"] = safe_mode
        return "<p>ok</p>"

    monkeypatch.setattr("markdown2.markdown", fake)
    assert r.render_markdown("ok") == "<p>ok</p>"
    assert seen == {"extras": ["tables", "fenced-code-blocks"], "safe_mode": "escape"}


def test_clean_html_output():
    raw = "<p>\n</p><p>&nbsp;</p><h1>Title</h1>\n<p><br/></p>\n<br/><br/>"
    cleaned = r.clean_html_output(raw)
    assert cleaned == "<h1>Title</h1><br>"


def test_clean_html_output_type_error():
    with pytest.raises(TypeError):
        r.clean_html_output(123)  # type: ignore[arg-type]
