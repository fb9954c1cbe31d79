"""Configuration loading for the page generator.

Turns the JSON document produced by the input-collection wizard into a
:class:`Configuration`. Keys are accepted in the wizard's camelCase form
(``productName``, ``optionalSections``...) and in snake_case. Missing keys
take their defaults; values of the wrong shape raise
:class:`~pageforge.exceptions.DataValidationError`, so structural problems
surface here rather than inside the generation engine.

Usage
-----
>>> from pageforge.pipeline.page_generator.loader import configuration_from_mapping
>>> cfg = configuration_from_mapping({"productName": "Acme", "benefits": ["Fast", ""]})
>>> cfg.product_name, cfg.benefits
('Acme', ('Fast', ''))
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Mapping

from pageforge.config import DEFAULT_ANIMATION_INTENSITY, DEFAULT_LANGUAGE, DEFAULT_STYLE
from pageforge.exceptions import ConfigurationError, DataValidationError

from .models import (
    ColorOverrides,
    Configuration,
    FaqEntry,
    InteractiveFeatures,
    OptionalSections,
    StatItem,
    Testimonial,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def _lookup(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return _MISSING


def _as_str(value: Any, field: str, default: str = "") -> str:
    if value is _MISSING or value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise DataValidationError(
        f"Field '{field}' must be a string", context={"field": field}
    )


def _as_bool(value: Any, field: str, default: bool) -> bool:
    if value is _MISSING or value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise DataValidationError(
        f"Field '{field}' must be a boolean", context={"field": field}
    )


def _as_int(value: Any, field: str) -> int:
    if value is _MISSING or value is None:
        return 0
    if isinstance(value, bool):
        raise DataValidationError(
            f"Field '{field}' must be a number", context={"field": field}
        )
    if isinstance(value, int):
        return value
    number = value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            number = None
    if isinstance(number, float) and math.isfinite(number):
        return int(number)
    raise DataValidationError(
        f"Field '{field}' must be a number", context={"field": field}
    )


def _as_list(value: Any, field: str) -> list[Any]:
    if value is _MISSING or value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    raise DataValidationError(
        f"Field '{field}' must be a list", context={"field": field}
    )


def _as_mapping(value: Any, field: str) -> Mapping[str, Any]:
    if value is _MISSING or value is None:
        return {}
    if isinstance(value, Mapping):
        return value
    raise DataValidationError(
        f"Field '{field}' must be an object", context={"field": field}
    )


def _records(value: Any, field: str) -> list[Mapping[str, Any]]:
    return [
        _as_mapping(item, f"{field}[{index}]")
        for index, item in enumerate(_as_list(value, field))
    ]


def _optional_color(value: Any, field: str) -> str | None:
    text = _as_str(value, field)
    return text or None


def configuration_from_mapping(
    data: Mapping[str, Any], default_language: str = DEFAULT_LANGUAGE
) -> Configuration:
    r"""Build a :class:`Configuration` from a decoded JSON object.

    Parameters
    ----------
    data : Mapping[str, Any]
        Wizard output. Both camelCase and snake_case keys are accepted.
    default_language : str, optional
        Language used when the document has no ``language`` field.

    Returns
    -------
    Configuration
        The immutable configuration value.

    Raises
    ------
    DataValidationError
        If ``data`` is not a mapping or a field has the wrong shape (for
        example ``benefits`` given as a string).

    Examples
    --------
    >>> cfg = configuration_from_mapping({
    ...     "style": "playful",
    ...     "optionalSections": {"faq": True},
    ...     "faq": [{"question": "Q?", "answer": "A."}],
    ... })
    >>> cfg.optional_sections.faq, cfg.faq[0].question
    (True, 'Q?')
    """
    if not isinstance(data, Mapping):
        raise DataValidationError(
            "Configuration document must be a JSON object",
            context={"type": type(data).__name__},
        )

    sections = _as_mapping(
        _lookup(data, "optionalSections", "optional_sections"), "optionalSections"
    )
    features = _as_mapping(
        _lookup(data, "interactiveFeatures", "interactive_features"),
        "interactiveFeatures",
    )
    colors_raw = _lookup(data, "customColors", "custom_colors")
    custom_colors = None
    if colors_raw is not _MISSING and colors_raw is not None:
        colors = _as_mapping(colors_raw, "customColors")
        custom_colors = ColorOverrides(
            primary=_optional_color(colors.get("primary"), "customColors.primary"),
            secondary=_optional_color(colors.get("secondary"), "customColors.secondary"),
            accent=_optional_color(colors.get("accent"), "customColors.accent"),
            background=_optional_color(
                colors.get("background"), "customColors.background"
            ),
        )

    layout = _as_str(_lookup(data, "layout"), "layout").strip() or None

    return Configuration(
        product_name=_as_str(_lookup(data, "productName", "product_name"), "productName"),
        product_description=_as_str(
            _lookup(data, "productDescription", "product_description"),
            "productDescription",
        ),
        benefits=tuple(
            _as_str(item, f"benefits[{index}]")
            for index, item in enumerate(_as_list(_lookup(data, "benefits"), "benefits"))
        ),
        call_to_action=_as_str(
            _lookup(data, "callToAction", "call_to_action"), "callToAction"
        ),
        cta_link=_as_str(_lookup(data, "ctaLink", "cta_link"), "ctaLink"),
        contact_info=_as_str(_lookup(data, "contactInfo", "contact_info"), "contactInfo"),
        image=_as_str(_lookup(data, "image"), "image"),
        style=_as_str(_lookup(data, "style"), "style", DEFAULT_STYLE),
        layout=layout,
        animations=_as_bool(_lookup(data, "animations"), "animations", True),
        animation_intensity=_as_str(
            _lookup(data, "animationIntensity", "animation_intensity"),
            "animationIntensity",
            DEFAULT_ANIMATION_INTENSITY,
        ),
        optional_sections=OptionalSections(
            testimonials=_as_bool(sections.get("testimonials"), "testimonials", False),
            faq=_as_bool(sections.get("faq"), "faq", False),
            gallery=_as_bool(sections.get("gallery"), "gallery", False),
            pricing=_as_bool(sections.get("pricing"), "pricing", False),
        ),
        interactive_features=InteractiveFeatures(
            carousel=_as_bool(features.get("carousel"), "carousel", False),
            lightbox=_as_bool(features.get("lightbox"), "lightbox", False),
            parallax=_as_bool(features.get("parallax"), "parallax", False),
            counters=_as_bool(features.get("counters"), "counters", False),
            micro_interactions=_as_bool(
                _lookup(features, "microInteractions", "micro_interactions"),
                "microInteractions",
                False,
            ),
        ),
        testimonials=tuple(
            Testimonial(
                text=_as_str(record.get("text"), "testimonials.text"),
                name=_as_str(record.get("name"), "testimonials.name"),
                role=_as_str(record.get("role"), "testimonials.role"),
            )
            for record in _records(_lookup(data, "testimonials"), "testimonials")
        ),
        faq=tuple(
            FaqEntry(
                question=_as_str(record.get("question"), "faq.question"),
                answer=_as_str(record.get("answer"), "faq.answer"),
            )
            for record in _records(_lookup(data, "faq"), "faq")
        ),
        gallery=tuple(
            _as_str(item, f"gallery[{index}]")
            for index, item in enumerate(_as_list(_lookup(data, "gallery"), "gallery"))
        ),
        stats=tuple(
            StatItem(
                value=_as_int(record.get("value"), "stats.value"),
                suffix=_as_str(record.get("suffix"), "stats.suffix"),
                label=_as_str(record.get("label"), "stats.label"),
            )
            for record in _records(_lookup(data, "stats"), "stats")
        ),
        custom_colors=custom_colors,
        language=_as_str(_lookup(data, "language", "lang"), "language", default_language),
        description_format=_as_str(
            _lookup(data, "descriptionFormat", "description_format"),
            "descriptionFormat",
            "text",
        ),
    )


def load_configuration(
    path: Path, default_language: str = DEFAULT_LANGUAGE
) -> Configuration:
    """Read a JSON configuration document from ``path``.

    Raises
    ------
    ConfigurationError
        If the file cannot be read.
    DataValidationError
        If the file is not UTF-8 encoded JSON or has the wrong shape.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DataValidationError(
            "Configuration file is not valid UTF-8",
            context={"path": str(path), "position": exc.start},
        ) from exc
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read configuration file: {path}", context={"path": str(path)}
        ) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DataValidationError(
            f"Configuration file is not valid JSON: {exc.msg}",
            context={"path": str(path), "line": exc.lineno, "column": exc.colno},
        ) from exc
    config = configuration_from_mapping(data, default_language)
    logger.info("Loaded configuration for %r from %s", config.product_name, path)
    return config
