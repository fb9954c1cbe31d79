"""Runtime settings for the page generator.

``GeneratorSettings`` is the boundary between the process environment and
the generator's typed runtime options. Values come from environment
variables, optionally seeded from a ``.env`` file at the project root.

Examples
--------
>>> import os
>>> os.environ["PAGEFORGE_LANG"] = "pt"
>>> from pageforge.pipeline.page_generator.settings import GeneratorSettings
>>> GeneratorSettings().language
'pt'
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

import pageforge.config as _project_config
from pageforge.config import DEFAULT_LANGUAGE, DEFAULT_OUTPUT_DIR

_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorSettings:
    r"""Environment-backed options for a generation run.

    Attributes
    ----------
    output_dir : pathlib.Path
        Directory the exporter writes into (``PAGEFORGE_OUTPUT_DIR``).
    language : str
        Fallback language for generated copy when the configuration document
        does not set one (``PAGEFORGE_LANG``).
    write_preview : bool
        Whether ``preview.html`` is written next to the other artifacts
        (``PAGEFORGE_WRITE_PREVIEW``).
    log_level : str
        Logging level name used by the CLI (``LOG_LEVEL``).

    Notes
    -----
    Instantiate once at process start. No runtime mutation is intended.
    """

    def __init__(self) -> None:
        # Resolved through the module so tests can monkeypatch PROJECT_ROOT.
        env_path = Path(_project_config.PROJECT_ROOT) / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=True)
        self.output_dir: Path = Path(
            os.getenv("PAGEFORGE_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR
        )
        self.language: str = os.getenv("PAGEFORGE_LANG") or DEFAULT_LANGUAGE
        self.write_preview: bool = (
            os.getenv("PAGEFORGE_WRITE_PREVIEW", "1").strip().lower() in _TRUTHY
        )
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
