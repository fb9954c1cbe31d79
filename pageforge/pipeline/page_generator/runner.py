"""Generate and export a landing page from a configuration file.

Headless runner for programmatic use and for the CLI. It loads the JSON
configuration, runs the generator and writes the artifact files.

Usage Examples
--------------
Settings-driven defaults::

    from pathlib import Path
    from pageforge.pipeline.page_generator.runner import run_from_config
    assert run_from_config(Path("page.json")) is True

Explicit output directory, no preview::

    run_from_config(Path("page.json"), output_dir=Path("site"), write_preview=False)
"""

from __future__ import annotations

import logging
from pathlib import Path

from .assembler import generate_landing_page
from .exporter import export_artifact
from .loader import load_configuration
from .settings import GeneratorSettings

logger = logging.getLogger(__name__)


def generate_to_directory(
    config_path: Path,
    output_dir: Path | None = None,
    write_preview: bool | None = None,
) -> list[Path]:
    """Load, generate and export, returning the written paths.

    Unlike :func:`run_from_config` this propagates
    :class:`~pageforge.exceptions.AppError` subclasses to the caller.
    """
    settings = GeneratorSettings()
    target = Path(output_dir) if output_dir is not None else settings.output_dir
    preview = settings.write_preview if write_preview is None else write_preview
    config = load_configuration(Path(config_path), settings.language)
    artifact = generate_landing_page(config)
    return export_artifact(artifact, target, config.product_name, preview)


def run_from_config(
    config_path: Path,
    output_dir: Path | None = None,
    write_preview: bool | None = None,
) -> bool:
    """Generate the landing page described by ``config_path``.

    If ``output_dir`` or ``write_preview`` is ``None``, the value from
    :class:`GeneratorSettings` is used. Returns ``True`` on success and
    ``False`` if an error occurred; exceptions are logged.

    Parameters
    ----------
    config_path : pathlib.Path
        JSON configuration document.
    output_dir : pathlib.Path or None, optional
        Destination directory for the exported files.
    write_preview : bool or None, optional
        Whether to write ``preview.html``.

    Returns
    -------
    bool
        ``True`` if every file was written; ``False`` otherwise.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pageforge.pipeline.page_generator.runner import run_from_config
    >>> run_from_config(Path("/missing/page.json"))
    False
    """
    try:
        generate_to_directory(config_path, output_dir, write_preview)
        return True
    except Exception:
        logger.exception("Failed to generate landing page from %s", config_path)
        return False


__all__ = ["generate_to_directory", "run_from_config"]
