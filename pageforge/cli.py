"""CLI entrypoint and logging/argument utilities for the page generator.

Parses arguments, configures logging and delegates to
:func:`~pageforge.pipeline.page_generator.runner.generate_to_directory`.
Application errors (see :mod:`pageforge.exceptions`) are logged and mapped
to exit code 1; on success a table of the written files is printed with
Rich.

Examples
--------
CLI usage:

>>> # In shell
>>> pageforge --config page.json --output site --no-preview
>>> python -m pageforge --config page.json --log-level DEBUG

Programmatic usage:

>>> from pageforge.cli import main
>>> main(["--config", "page.json"])  # doctest: +SKIP
0
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from rich.console import Console
from rich.table import Table

from pageforge.config import LOG_DIR, LOG_FILENAME_GENERATE_PAGE, LOG_FORMAT
from pageforge.exceptions import AppError
from pageforge.pipeline.page_generator.runner import generate_to_directory
from pageforge.pipeline.page_generator.settings import GeneratorSettings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure the root logger for CLI runs.

    All existing root handlers are replaced by a stream handler and,
    optionally, a file handler writing to ``LOG_DIR``. A file handler that
    cannot be created is skipped.

    Parameters
    ----------
    level : str, optional
        Logging level name, e.g. "DEBUG" or "WARNING". Unknown names map to
        INFO. Defaults to "INFO".
    enable_file : bool, optional
        Whether to append to the generator log file. Defaults to True.

    Examples
    --------
    >>> from pageforge.cli import configure_logging
    >>> configure_logging("DEBUG", enable_file=False)
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_GENERATE_PAGE, mode="a")
            )
        except OSError:
            logging.getLogger(__name__).debug("File logging unavailable in %s", LOG_DIR)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments with attributes ``config``, ``output``,
        ``no_preview`` and ``log_level``. The log level defaults to
        ``GeneratorSettings().log_level``, so a project `.env` applies.
    """
    parser = argparse.ArgumentParser(
        prog="pageforge",
        description="Generate a landing page from a JSON configuration.",
    )
    parser.add_argument("-c", "--config", type=Path, required=True)
    parser.add_argument("-o", "--output", type=Path, default=None)
    parser.add_argument("--no-preview", action="store_true")
    parser.add_argument(
        "--log-level", type=str, default=GeneratorSettings().log_level
    )
    return parser.parse_args(argv)


def build_summary_table(paths: list[Path]) -> Table:
    """Return a Rich table listing the written files with their sizes in bytes.

    The table title is the output directory; rows show file names only.
    """
    title = str(paths[0].parent) if paths else None
    table = Table(title=title, show_header=True, header_style="bold blue")
    table.add_column("File")
    table.add_column("Bytes", justify="right")
    for path in paths:
        table.add_row(path.name, str(path.stat().st_size))
    return table


def main(argv: list[str] | None = None) -> int:
    """Run the page generator CLI and return the process exit code."""
    args = parse_arguments(argv)
    configure_logging(
        args.log_level, enable_file=not bool(os.environ.get("DISABLE_FILE_LOGS"))
    )
    logger.info("Generating landing page from %s", args.config)
    try:
        paths = generate_to_directory(
            args.config, args.output, False if args.no_preview else None
        )
    except AppError as exc:
        logger.error("Generation failed: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 1
    Console().print(build_summary_table(paths))
    return 0


__all__ = ["build_summary_table", "configure_logging", "main", "parse_arguments"]


if __name__ == "__main__":
    raise SystemExit(main())
