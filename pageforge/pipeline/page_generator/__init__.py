"""Landing page generator.

Turns a :class:`Configuration` into a :class:`GeneratedArtifact` holding the
page markup, its stylesheet, its behavior script and a self-contained
preview. The engine modules (``styles``, ``sections``, ``stylesheet``,
``behavior``, ``assembler``) are pure; ``loader``, ``exporter`` and
``runner`` handle files around them.

Usage
-----
>>> from pageforge.pipeline.page_generator import Configuration, generate_landing_page
>>> artifact = generate_landing_page(Configuration(product_name="Acme"))
>>> artifact.markup.startswith("<!DOCTYPE html>")
True
"""

from .assembler import assemble_document, generate_landing_page, inline_stylesheet
from .behavior import generate_script
from .exporter import export_artifact, page_slug
from .loader import configuration_from_mapping, load_configuration
from .models import (
    ColorOverrides,
    Configuration,
    FaqEntry,
    FeatureFlags,
    GeneratedArtifact,
    InteractiveFeatures,
    OptionalSections,
    StatItem,
    StyleToken,
    Testimonial,
)
from .runner import generate_to_directory, run_from_config
from .settings import GeneratorSettings
from .styles import resolve_layout, resolve_style
from .stylesheet import generate_stylesheet

__all__ = [
    "ColorOverrides",
    "Configuration",
    "FaqEntry",
    "FeatureFlags",
    "GeneratedArtifact",
    "GeneratorSettings",
    "InteractiveFeatures",
    "OptionalSections",
    "StatItem",
    "StyleToken",
    "Testimonial",
    "assemble_document",
    "configuration_from_mapping",
    "export_artifact",
    "generate_landing_page",
    "generate_script",
    "generate_stylesheet",
    "generate_to_directory",
    "inline_stylesheet",
    "load_configuration",
    "page_slug",
    "resolve_layout",
    "resolve_style",
    "run_from_config",
]
