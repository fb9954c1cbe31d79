"""Global configuration constants for the project.

Defines paths, filenames and the fixed presentation constants shared by the
page generator, the exporter and the command-line entry point.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "pageforge"
LOG_DIR: Path = PROJECT_ROOT / "logs"

# CLI defaults and logging
DEFAULT_OUTPUT_DIR: Path = PROJECT_ROOT / "output"
LOG_FILENAME_GENERATE_PAGE: str = "generate_page.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Exported artifact filenames. The markup links STYLESHEET_FILENAME, so the
# exporter must write the stylesheet under exactly this name.
STYLESHEET_FILENAME: str = "styles.css"
SCRIPT_FILENAME: str = "script.js"
PREVIEW_FILENAME: str = "preview.html"
FALLBACK_PAGE_SLUG: str = "landing-page"
STYLESHEET_LINK_TAG: str = f'<link rel="stylesheet" href="{STYLESHEET_FILENAME}">'

# Style resolution
DEFAULT_STYLE: str = "minimal"
STYLE_ALIASES: dict[str, str] = {
    "minimalista": "minimal",
    "colorido": "colorful",
    "profissional": "professional",
    "divertido": "playful",
}
LAYOUTS: tuple[str, ...] = ("centered", "split", "fullwidth")

# Animation timing
DEFAULT_ANIMATION_INTENSITY: str = "moderate"
ANIMATION_DURATIONS: dict[str, str] = {
    "subtle": "0.3s",
    "moderate": "0.6s",
    "dynamic": "0.9s",
}
# Stagger quanta in milliseconds, per section kind.
STAGGER_DELAY_MS: dict[str, int] = {
    "benefits": 100,
    "stats": 100,
    "testimonials": 150,
    "faq": 100,
    "gallery": 100,
}
REVEAL_THRESHOLD: float = 0.1
REVEAL_ROOT_MARGIN: str = "0px 0px -50px 0px"
# Counters run for this many animation durations.
COUNTER_DURATION_MULTIPLIER: int = 3

# Responsive breakpoints
BREAKPOINT_TABLET_PX: int = 768
BREAKPOINT_MOBILE_PX: int = 480

# Section content
BENEFIT_ICONS: tuple[str, ...] = ("✓", "🎯", "⚡", "🚀", "💎", "🏆")
MARKDOWN_EXTRAS: list[str] = ["tables", "fenced-code-blocks"]

# Generated copy
DEFAULT_LANGUAGE: str = "en"
HTML_LANG_ATTRIBUTES: dict[str, str] = {"en": "en", "pt": "pt-BR"}
