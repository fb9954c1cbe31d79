"""Text-to-HTML helpers for the page generator.

This module turns user-supplied copy into markup-safe fragments: plain
strings are HTML-escaped, Markdown descriptions are converted with
``markdown2`` (raw HTML in the source is escaped, never passed through) and
the converted HTML is normalized by ``clean_html_output``.

System Boundaries
-----------------
- Pure string functions; no file or network access.
- Conversion options come from ``MARKDOWN_EXTRAS`` in ``pageforge/config.py``.

Example
-------
>>> from pageforge.pipeline.page_generator import renderer
>>> renderer.escape_text('<b>"Acme"</b>')
'&lt;b&gt;&quot;Acme&quot;&lt;/b&gt;'
>>> renderer.render_markdown("# Welcome")
'<h1>Welcome</h1>'
"""

from __future__ import annotations

import html
import re
from typing import cast

import markdown2

from pageforge.config import MARKDOWN_EXTRAS


def escape_text(value: str | None) -> str:
    """Escape ``value`` for use in element content and quoted attributes."""
    return html.escape(value or "", quote=True)


def render_markdown(markdown_text: str) -> str:
    r"""Convert Markdown copy to cleaned HTML.

    Parameters
    ----------
    markdown_text : str
        Markdown source written by the page author.

    Returns
    -------
    str
        Cleaned HTML. Inline HTML in the source is escaped.

    See Also
    --------
    clean_html_output : Post-processes the generated HTML.

    Examples
    --------
    >>> render_markdown("Fast **and** cheap")
    '<p>Fast <strong>and</strong> cheap</p>'
    """
    converted = cast(
        str,
        markdown2.markdown(
            markdown_text or "", extras=MARKDOWN_EXTRAS, safe_mode="escape"
        ),
    )
    return clean_html_output(converted)


def clean_html_output(html_content: str) -> str:
    r"""Perform lightweight normalization and cleaning of generated HTML strings.

    Removes empty paragraphs, redundant breaks and whitespace between tags.

    Parameters
    ----------
    html_content : str
        Raw HTML string.

    Returns
    -------
    str
        Cleaned HTML string.

    Raises
    ------
    TypeError
        If input is not str.

    Examples
    --------
    >>> raw = "<p></p><h1>Hi</h1><p>&nbsp;</p><br><br>"
    >>> clean_html_output(raw)
    '<h1>Hi</h1><br>'
    """
    if not isinstance(html_content, str):
        raise TypeError("Input must be a string.")
    html_content = re.sub(r"<p>\s*</p>", "", html_content)
    html_content = re.sub(r"<p>&nbsp;</p>", "", html_content)
    html_content = re.sub(r"<p><br\s*/?>\s*</p>", "", html_content)
    html_content = re.sub(r"(<br\s*/?>\s*){2,}", "<br>", html_content)
    html_content = re.sub(r"\n\s*\n\s*\n+", "\n\n", html_content)
    html_content = re.sub(r">\s+<", "><", html_content)
    return html_content.strip()
