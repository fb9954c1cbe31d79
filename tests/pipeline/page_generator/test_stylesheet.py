"""Tests for stylesheet synthesis."""

import re

import pytest

from pageforge.pipeline.page_generator.models import FeatureFlags
from pageforge.pipeline.page_generator.styles import resolve_style
from pageforge.pipeline.page_generator.stylesheet import (
    animation_duration,
    generate_stylesheet,
)

ALL_ON = FeatureFlags(
    animations=True,
    carousel=True,
    lightbox=True,
    parallax=True,
    counters=True,
    micro_interactions=True,
)
ALL_OFF = FeatureFlags(animations=False)


def _css(style="minimal", layout=None, intensity="moderate", flags=ALL_ON):
    token = resolve_style(style)
    return generate_stylesheet(token, layout or token.layout, intensity, flags)


@pytest.mark.parametrize(
    "intensity, expected",
    [("subtle", "0.3s"), ("moderate", "0.6s"), ("dynamic", "0.9s"), (None, "0.6s")],
)
def test_intensity_maps_to_duration(intensity, expected):
    assert animation_duration(intensity) == expected
    assert f"--animation-duration: {expected};" in _css(intensity=intensity)


def test_root_defines_token_colors():
    css = _css(style="professional")
    assert "--primary-color: #2c3e50;" in css
    assert "--secondary-color: #3498db;" in css
    assert "--font-family: Playfair Display, serif;" in css
    assert "--gradient: linear-gradient(135deg, #2c3e50, #3498db);" in css


@pytest.mark.parametrize("flags", [ALL_ON, ALL_OFF])
def test_every_referenced_property_is_defined(flags):
    css = _css(flags=flags)
    root = css[css.index(":root {") : css.index("}", css.index(":root {"))]
    defined = set(re.findall(r"(--[a-z-]+):", root))
    referenced = set(re.findall(r"var\((--[a-z-]+)\)", css))
    assert referenced <= defined


@pytest.mark.parametrize("flags", [ALL_ON, ALL_OFF])
def test_reduced_motion_block_is_last(flags):
    css = _css(flags=flags)
    assert "@media (prefers-reduced-motion: reduce)" in css
    assert css.rindex("/* Reduced motion */") > css.rindex("/* Responsive */")


def test_breakpoints_present():
    css = _css()
    assert "@media (max-width: 768px)" in css
    assert "@media (max-width: 480px)" in css


def test_only_selected_layout_rules_emitted():
    css = _css(layout="fullwidth")
    assert "/* Layout: fullwidth */" in css
    assert "/* Layout: centered */" not in css
    assert "/* Layout: split */" not in css


def test_feature_blocks_follow_flags():
    on = _css(flags=ALL_ON)
    off = _css(flags=ALL_OFF)
    for header in (
        "/* Stats */",
        "/* Carousel */",
        "/* Lightbox */",
        "/* Parallax */",
        "/* Micro-interactions */",
        "/* Reveal animations */",
    ):
        assert header in on
        assert header not in off


def test_stylesheet_is_deterministic():
    assert _css() == _css()
