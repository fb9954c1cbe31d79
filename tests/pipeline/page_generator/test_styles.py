"""Tests for style keyword resolution and color overrides."""

import logging

import pytest

from pageforge.pipeline.page_generator.models import ColorOverrides
from pageforge.pipeline.page_generator.styles import (
    STYLE_TOKENS,
    normalize_style_keyword,
    resolve_layout,
    resolve_style,
)


@pytest.mark.parametrize(
    "style, primary, layout",
    [
        ("minimal", "#000000", "centered"),
        ("colorful", "#ff6b6b", "centered"),
        ("professional", "#2c3e50", "split"),
        ("playful", "#e74c3c", "fullwidth"),
    ],
)
def test_known_styles_resolve_to_their_palette(style, primary, layout):
    token = resolve_style(style)
    assert token.primary == primary
    assert token.layout == layout


def test_professional_uses_serif_font():
    assert resolve_style("professional").font == "Playfair Display, serif"


def test_unknown_style_is_identical_to_minimal(caplog):
    with caplog.at_level(logging.WARNING):
        token = resolve_style("unknown-keyword")
    assert token == resolve_style("minimal")
    assert token is STYLE_TOKENS["minimal"]
    assert "unknown-keyword" in caplog.text


def test_empty_style_falls_back_silently(caplog):
    with caplog.at_level(logging.WARNING):
        assert normalize_style_keyword("") == "minimal"
        assert normalize_style_keyword(None) == "minimal"
    assert caplog.text == ""


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("minimalista", "minimal"),
        ("Colorido", "colorful"),
        (" profissional ", "professional"),
        ("divertido", "playful"),
    ],
)
def test_portuguese_aliases(alias, expected):
    assert normalize_style_keyword(alias) == expected


def test_overrides_replace_only_non_blank_fields():
    token = resolve_style(
        "colorful",
        ColorOverrides(primary=" #123456 ", secondary="", accent="   ", background=None),
    )
    assert token.primary == "#123456"
    assert token.secondary == "#4ecdc4"
    assert token.accent == "#45b7d1"
    assert token.background == "#f8f9fa"
    # Gradient and layout never change with overrides
    assert token.gradient == STYLE_TOKENS["colorful"].gradient
    assert token.layout == "centered"


def test_overrides_do_not_mutate_shared_tokens():
    resolve_style("minimal", ColorOverrides(primary="#abcdef"))
    assert STYLE_TOKENS["minimal"].primary == "#000000"


def test_all_blank_overrides_return_default_token():
    assert resolve_style("playful", ColorOverrides()) is STYLE_TOKENS["playful"]


def test_resolve_layout_prefers_valid_explicit_layout():
    token = resolve_style("professional")
    assert resolve_layout(None, token) == "split"
    assert resolve_layout("fullwidth", token) == "fullwidth"
    assert resolve_layout("  CENTERED ", token) == "centered"


def test_resolve_layout_unknown_falls_back_with_warning(caplog):
    token = resolve_style("playful")
    with caplog.at_level(logging.WARNING):
        assert resolve_layout("diagonal", token) == "fullwidth"
    assert "diagonal" in caplog.text


@pytest.mark.parametrize(
    "value",
    ["#abc", "#A1B2C3", "#a1b2c3d4", "rgb(1, 2, 3)", "hsla(120, 50%, 50%, 0.5)", "teal"],
)
def test_valid_color_overrides_apply(value):
    assert resolve_style("minimal", ColorOverrides(primary=value)).primary == value


@pytest.mark.parametrize(
    "value",
    [
        "red}</style><script>alert(1)</script><style>",
        "red; background: url(x)",
        "#12345",
        "rgb(0,0,0)<",
    ],
)
def test_invalid_color_overrides_keep_default(value, caplog):
    with caplog.at_level(logging.WARNING):
        token = resolve_style("minimal", ColorOverrides(primary=value))
    assert token.primary == STYLE_TOKENS["minimal"].primary
    assert "Ignoring invalid primary color override" in caplog.text
