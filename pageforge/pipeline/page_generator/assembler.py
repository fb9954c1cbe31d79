"""Document assembly and preview inlining.

This module is the top of the page generator: ``generate_landing_page``
resolves the style, composes every section, synthesizes the stylesheet and
behavior script, assembles the document and derives the self-contained
preview. It is a pure function of its inputs apart from the footer year,
which defaults to the current date and can be pinned with ``today``.

Usage
-----
>>> from datetime import date
>>> from pageforge.pipeline.page_generator import Configuration, generate_landing_page
>>> artifact = generate_landing_page(Configuration(product_name="Acme"), today=date(2024, 1, 1))
>>> "<title>Acme - Landing Page</title>" in artifact.markup
True
>>> "styles.css" in artifact.preview
False
"""

from __future__ import annotations

import logging
from datetime import date

from pageforge.config import STYLESHEET_LINK_TAG
from pageforge.i18n import html_lang_attribute, translate

from .behavior import generate_script
from .models import Configuration, GeneratedArtifact
from .renderer import escape_text
from .sections import (
    compose_benefits,
    compose_cta,
    compose_faq,
    compose_footer,
    compose_gallery,
    compose_hero,
    compose_lightbox_overlay,
    compose_stats,
    compose_testimonials,
    has_gallery,
)
from .styles import resolve_layout, resolve_style
from .stylesheet import generate_stylesheet

logger = logging.getLogger(__name__)


def assemble_document(
    config: Configuration, sections: list[str], overlay: str, script: str
) -> str:
    r"""Concatenate head metadata, section fragments, overlay and script.

    Parameters
    ----------
    config : Configuration
        Supplies the title, description meta and document language.
    sections : list[str]
        Ordered section fragments; empty fragments are skipped.
    overlay : str
        Lightbox overlay fragment, or ``""``.
    script : str
        Behavior script; a ``<script>`` element is emitted only when it is
        non-empty.

    Returns
    -------
    str
        The complete markup document referencing the external stylesheet.
    """
    title = escape_text(translate("page_title", config.language, name=config.product_name))
    description = escape_text(" ".join(config.product_description.split()))
    body = "".join(fragment for fragment in sections if fragment)
    script_tag = f"\n    <script>\n{script}    </script>" if script else ""
    return f"""<!DOCTYPE html>
<html lang="{html_lang_attribute(config.language)}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <meta name="description" content="{description}">
    {STYLESHEET_LINK_TAG}
</head>
<body>
    <div class="container">{body}
    </div>{overlay}{script_tag}
</body>
</html>
"""


def inline_stylesheet(markup: str, stylesheet: str) -> str:
    """Replace the external stylesheet reference with an inline ``<style>`` block.

    Examples
    --------
    >>> inline_stylesheet('<head><link rel="stylesheet" href="styles.css"></head>', "a{}")
    '<head><style>a{}</style></head>'
    """
    return markup.replace(STYLESHEET_LINK_TAG, f"<style>{stylesheet}</style>", 1)


def generate_landing_page(
    config: Configuration, today: date | None = None
) -> GeneratedArtifact:
    r"""Generate markup, stylesheet, script and preview for ``config``.

    Parameters
    ----------
    config : Configuration
        The complete page configuration. It is never mutated.
    today : datetime.date | None, optional
        Date used for the footer copyright year. Defaults to
        ``date.today()``; pass a fixed date for reproducible output.

    Returns
    -------
    GeneratedArtifact
        The four synchronized outputs.

    Raises
    ------
    Never raises for a well-formed configuration: unknown keywords fall back
    to defaults and empty collections omit their sections.

    Examples
    --------
    >>> from datetime import date
    >>> cfg = Configuration(product_name="Acme", animations=False)
    >>> generate_landing_page(cfg, today=date(2024, 1, 1)).script
    ''
    """
    today = today or date.today()
    token = resolve_style(config.style, config.custom_colors)
    layout = resolve_layout(config.layout, token)
    flags = config.flags

    sections = [
        compose_hero(config, layout),
        compose_benefits(config),
        compose_stats(config),
        compose_testimonials(config),
        compose_faq(config),
        compose_gallery(config),
        compose_cta(config),
        compose_footer(config, today),
    ]
    overlay = (
        compose_lightbox_overlay(config) if flags.lightbox and has_gallery(config) else ""
    )
    stylesheet = generate_stylesheet(token, layout, config.animation_intensity, flags)
    script = generate_script(config)
    markup = assemble_document(config, sections, overlay, script)
    preview = inline_stylesheet(markup, stylesheet)
    logger.debug(
        "Generated page for %r: layout=%s sections=%d script=%s",
        config.product_name,
        layout,
        sum(1 for fragment in sections if fragment),
        bool(script),
    )
    return GeneratedArtifact(
        markup=markup, stylesheet=stylesheet, script=script, preview=preview
    )
