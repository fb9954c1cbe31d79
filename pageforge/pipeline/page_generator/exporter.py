"""File export for generated artifacts.

Writes a :class:`GeneratedArtifact` to disk the way the builder's download
action does: the markup as ``<slug>.html`` next to ``styles.css`` (the name
the markup links to), ``script.js`` when a script was produced, and the
self-contained ``preview.html``. Contents are written verbatim as UTF-8.

Example
-------
>>> from pathlib import Path
>>> from pageforge.pipeline.page_generator.exporter import page_slug
>>> page_slug("My Great  Product!")
'my-great-product'
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pageforge.config import (
    FALLBACK_PAGE_SLUG,
    PREVIEW_FILENAME,
    SCRIPT_FILENAME,
    STYLESHEET_FILENAME,
)
from pageforge.exceptions import ExportError

from .models import GeneratedArtifact

logger = logging.getLogger(__name__)

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")
# Stems of the fixed artifact files; a markup file must never take one.
_RESERVED_STEMS = frozenset(
    Path(name).stem for name in (STYLESHEET_FILENAME, SCRIPT_FILENAME, PREVIEW_FILENAME)
)


def page_slug(product_name: str) -> str:
    """Return a filesystem-safe, lowercase file stem for ``product_name``.

    Runs of characters outside ``[a-z0-9]`` collapse to a single hyphen.
    Names with no usable characters yield ``FALLBACK_PAGE_SLUG``; names
    that would collide with an artifact file gain a ``-page`` suffix.

    Examples
    --------
    >>> page_slug("   ")
    'landing-page'
    >>> page_slug("Café Bar")
    'caf-bar'
    >>> page_slug("Preview")
    'preview-page'
    """
    slug = _SLUG_SEPARATORS.sub("-", product_name.strip().lower()).strip("-")
    if not slug:
        return FALLBACK_PAGE_SLUG
    if slug in _RESERVED_STEMS:
        return f"{slug}-page"
    return slug


def _write(path: Path, content: str) -> Path:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(
            f"Failed to write {path.name}", context={"path": str(path)}
        ) from exc
    logger.debug("Wrote %s (%d chars)", path, len(content))
    return path


def _remove_stale(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        raise ExportError(
            f"Cannot remove stale {path.name}", context={"path": str(path)}
        ) from exc


def export_artifact(
    artifact: GeneratedArtifact,
    output_dir: Path,
    product_name: str,
    write_preview: bool = True,
) -> list[Path]:
    r"""Write the artifact files into ``output_dir``.

    Parameters
    ----------
    artifact : GeneratedArtifact
        Output of :func:`generate_landing_page`.
    output_dir : pathlib.Path
        Destination directory, created if missing.
    product_name : str
        Used to derive the markup file name via :func:`page_slug`.
    write_preview : bool, optional
        Whether to write ``preview.html``. Defaults to ``True``.

    Returns
    -------
    list[pathlib.Path]
        Written files in write order: markup, stylesheet, script (only when
        non-empty), preview (only when requested). A script or preview left
        by an earlier export into the same directory is removed when this
        export does not write it.

    Raises
    ------
    ExportError
        If the directory cannot be created or a file cannot be written.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(
            f"Cannot create output directory: {output_dir}",
            context={"path": str(output_dir)},
        ) from exc

    written = [
        _write(output_dir / f"{page_slug(product_name)}.html", artifact.markup),
        _write(output_dir / STYLESHEET_FILENAME, artifact.stylesheet),
    ]
    if artifact.script:
        written.append(_write(output_dir / SCRIPT_FILENAME, artifact.script))
    else:
        _remove_stale(output_dir / SCRIPT_FILENAME)
    if write_preview:
        written.append(_write(output_dir / PREVIEW_FILENAME, artifact.preview))
    else:
        _remove_stale(output_dir / PREVIEW_FILENAME)
    logger.info("Exported %d files to %s", len(written), output_dir)
    return written


__all__ = ["export_artifact", "page_slug"]
