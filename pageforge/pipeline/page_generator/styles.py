"""Style resolution for the page generator.

Maps a style keyword and optional color overrides to the concrete
:class:`StyleToken` every other composer reads. Resolution never fails: an
unknown or missing keyword yields the ``minimal`` token so a page can always
be produced.

Examples
--------
>>> from pageforge.pipeline.page_generator.styles import resolve_style
>>> resolve_style("professional").layout
'split'
>>> resolve_style("no-such-style") == resolve_style("minimal")
True
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from pageforge.config import DEFAULT_STYLE, LAYOUTS, STYLE_ALIASES

from .models import ColorOverrides, StyleToken

logger = logging.getLogger(__name__)

_CSS_COLOR = re.compile(
    r"#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})"
    r"|(?:rgb|rgba|hsl|hsla)\([0-9.,%\s/+-]+\)"
    r"|[a-z]+",
    re.IGNORECASE,
)

STYLE_TOKENS: dict[str, StyleToken] = {
    "minimal": StyleToken(
        primary="#000000",
        secondary="#ffffff",
        accent="#666666",
        background="#ffffff",
        font="Inter, sans-serif",
        layout="centered",
        gradient="linear-gradient(135deg, #000000, #333333)",
    ),
    "colorful": StyleToken(
        primary="#ff6b6b",
        secondary="#4ecdc4",
        accent="#45b7d1",
        background="#f8f9fa",
        font="Inter, sans-serif",
        layout="centered",
        gradient="linear-gradient(135deg, #ff6b6b, #4ecdc4)",
    ),
    "professional": StyleToken(
        primary="#2c3e50",
        secondary="#3498db",
        accent="#e74c3c",
        background="#ffffff",
        font="Playfair Display, serif",
        layout="split",
        gradient="linear-gradient(135deg, #2c3e50, #3498db)",
    ),
    "playful": StyleToken(
        primary="#e74c3c",
        secondary="#f39c12",
        accent="#9b59b6",
        background="#ffeaa7",
        font="Inter, sans-serif",
        layout="fullwidth",
        gradient="linear-gradient(135deg, #e74c3c, #f39c12)",
    ),
}


def normalize_style_keyword(style: str | None) -> str:
    """Return the canonical style name for ``style``.

    Portuguese style names are accepted as aliases of their
    English names. Unknown or empty keywords map to ``DEFAULT_STYLE``.
    """
    keyword = (style or "").strip().lower()
    keyword = STYLE_ALIASES.get(keyword, keyword)
    if keyword in STYLE_TOKENS:
        return keyword
    if not keyword:
        return DEFAULT_STYLE
    logger.warning("Unknown style %r, falling back to %r", style, DEFAULT_STYLE)
    return DEFAULT_STYLE


def is_css_color(value: str) -> bool:
    """Return ``True`` for a hex, ``rgb()``/``hsl()`` or named CSS color.

    Examples
    --------
    >>> is_css_color("#1a2b3c"), is_css_color("rgb(0, 0, 0)"), is_css_color("teal")
    (True, True, True)
    >>> is_css_color("red}</style>")
    False
    """
    return _CSS_COLOR.fullmatch(value) is not None


def _override_value(name: str, value: str | None) -> str | None:
    text = (value or "").strip()
    if not text:
        return None
    if not is_css_color(text):
        logger.warning("Ignoring invalid %s color override %r", name, value)
        return None
    return text


def resolve_style(
    style: str | None, overrides: ColorOverrides | None = None
) -> StyleToken:
    r"""Resolve a style keyword and color overrides into a :class:`StyleToken`.

    Parameters
    ----------
    style : str | None
        Style keyword from ``{minimal, colorful, professional, playful}``.
    overrides : ColorOverrides | None, optional
        Colors replacing the style defaults. Fields that are ``None``,
        blank or not a CSS color keep the default.

    Returns
    -------
    StyleToken
        The resolved, read-only token.

    Raises
    ------
    Never raises; unknown keywords resolve to the ``minimal`` token.

    Examples
    --------
    >>> from pageforge.pipeline.page_generator.models import ColorOverrides
    >>> token = resolve_style("colorful", ColorOverrides(primary="#123456", accent=" "))
    >>> token.primary, token.accent
    ('#123456', '#45b7d1')
    """
    token = STYLE_TOKENS[normalize_style_keyword(style)]
    if overrides is None:
        return token
    candidates = {
        "primary": _override_value("primary", overrides.primary),
        "secondary": _override_value("secondary", overrides.secondary),
        "accent": _override_value("accent", overrides.accent),
        "background": _override_value("background", overrides.background),
    }
    changes = {name: value for name, value in candidates.items() if value}
    return replace(token, **changes) if changes else token


def resolve_layout(explicit_layout: str | None, token: StyleToken) -> str:
    """Return the effective layout: the explicit one if valid, else the style default.

    Examples
    --------
    >>> token = resolve_style("playful")
    >>> resolve_layout(None, token)
    'fullwidth'
    >>> resolve_layout("split", token)
    'split'
    """
    layout = (explicit_layout or "").strip().lower()
    if layout in LAYOUTS:
        return layout
    if layout:
        logger.warning(
            "Unknown layout %r, using style default %r", explicit_layout, token.layout
        )
    return token.layout
