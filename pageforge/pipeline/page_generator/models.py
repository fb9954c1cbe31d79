"""Value objects consumed and produced by the page generator.

All records are frozen dataclasses: a ``Configuration`` is built once by the
input-collection layer (or by :mod:`pageforge.pipeline.page_generator.loader`)
and passed by value through every composer, and each generation call returns
a fresh ``GeneratedArtifact``. Nothing in the generator mutates these
objects.

Examples
--------
>>> from pageforge.pipeline.page_generator.models import Configuration
>>> cfg = Configuration(product_name="Acme", benefits=("Fast", "Cheap"))
>>> cfg.flags.requires_script
True
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pageforge.config import (
    DEFAULT_ANIMATION_INTENSITY,
    DEFAULT_LANGUAGE,
    DEFAULT_STYLE,
)


@dataclass(frozen=True)
class Testimonial:
    """A single customer quote."""

    text: str = ""
    name: str = ""
    role: str = ""


@dataclass(frozen=True)
class FaqEntry:
    """A question with its answer."""

    question: str = ""
    answer: str = ""


@dataclass(frozen=True)
class StatItem:
    """A figure shown in the stats strip and animated by the counters feature.

    Attributes
    ----------
    value : int
        Target number the counter animates to.
    suffix : str
        Literal text appended to the number (e.g. ``"+"`` or ``"%"``).
    label : str
        Caption displayed under the number.
    """

    value: int = 0
    suffix: str = ""
    label: str = ""


@dataclass(frozen=True)
class ColorOverrides:
    """User-chosen colors replacing a style's defaults when non-blank."""

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    background: str | None = None


@dataclass(frozen=True)
class OptionalSections:
    """Toggles for sections that are only rendered on request."""

    testimonials: bool = False
    faq: bool = False
    gallery: bool = False
    pricing: bool = False


@dataclass(frozen=True)
class InteractiveFeatures:
    """Toggles for interactive behaviors of the generated page."""

    carousel: bool = False
    lightbox: bool = False
    parallax: bool = False
    counters: bool = False
    micro_interactions: bool = False


@dataclass(frozen=True)
class FeatureFlags:
    """Animation and interactivity switches folded into one value.

    Every component that emits behavior-dependent output (markup
    attributes, stylesheet rules, script code) consults this object, so the
    rule deciding whether a page needs a script lives in one place.

    Attributes
    ----------
    animations : bool
        Reveal-on-scroll animations are enabled.
    carousel, lightbox, parallax, counters, micro_interactions : bool
        Interactive features, mirroring :class:`InteractiveFeatures`.
    """

    animations: bool = True
    carousel: bool = False
    lightbox: bool = False
    parallax: bool = False
    counters: bool = False
    micro_interactions: bool = False

    @classmethod
    def from_settings(
        cls, animations: bool, features: InteractiveFeatures
    ) -> FeatureFlags:
        return cls(
            animations=animations,
            carousel=features.carousel,
            lightbox=features.lightbox,
            parallax=features.parallax,
            counters=features.counters,
            micro_interactions=features.micro_interactions,
        )

    @property
    def requires_script(self) -> bool:
        """Return ``True`` when at least one enabled feature needs client code.

        Parallax is rendered purely in CSS and never requires a script.
        """
        return (
            self.animations
            or self.carousel
            or self.lightbox
            or self.counters
            or self.micro_interactions
        )


@dataclass(frozen=True)
class Configuration:
    """Complete input of a single page generation.

    Attributes
    ----------
    product_name, product_description : str
        Product copy shown in the hero and document metadata.
    benefits : tuple[str, ...]
        Ordered benefit statements; blank entries are ignored.
    call_to_action, cta_link : str
        Label and target URL of the call-to-action buttons.
    contact_info : str
        Optional contact line rendered in the call-to-action section.
    image : str
        Optional hero image reference (URL or data URI).
    style : str
        Style keyword; unknown keywords resolve to ``"minimal"``.
    layout : str | None
        Explicit layout keyword; ``None`` defers to the style default.
    animations : bool
        Whether reveal-on-scroll animations are enabled.
    animation_intensity : str
        One of ``"subtle"``, ``"moderate"``, ``"dynamic"``.
    optional_sections : OptionalSections
        Section toggles.
    interactive_features : InteractiveFeatures
        Interactive behavior toggles.
    testimonials, faq, gallery, stats : tuple
        Ordered content collections for the optional sections.
    custom_colors : ColorOverrides | None
        Optional palette overrides.
    language : str
        Language of the generated copy (``"en"`` or ``"pt"``).
    description_format : str
        ``"text"`` or ``"markdown"`` for the hero description.
    """

    product_name: str = ""
    product_description: str = ""
    benefits: tuple[str, ...] = ()
    call_to_action: str = ""
    cta_link: str = ""
    contact_info: str = ""
    image: str = ""
    style: str = DEFAULT_STYLE
    layout: str | None = None
    animations: bool = True
    animation_intensity: str = DEFAULT_ANIMATION_INTENSITY
    optional_sections: OptionalSections = field(default_factory=OptionalSections)
    interactive_features: InteractiveFeatures = field(
        default_factory=InteractiveFeatures
    )
    testimonials: tuple[Testimonial, ...] = ()
    faq: tuple[FaqEntry, ...] = ()
    gallery: tuple[str, ...] = ()
    stats: tuple[StatItem, ...] = ()
    custom_colors: ColorOverrides | None = None
    language: str = DEFAULT_LANGUAGE
    description_format: str = "text"

    @property
    def flags(self) -> FeatureFlags:
        """Return the feature flags derived from this configuration."""
        return FeatureFlags.from_settings(self.animations, self.interactive_features)


@dataclass(frozen=True)
class StyleToken:
    """Resolved visual tokens for one generation call."""

    primary: str
    secondary: str
    accent: str
    background: str
    font: str
    layout: str
    gradient: str


@dataclass(frozen=True)
class GeneratedArtifact:
    """The four synchronized text outputs of a generation call."""

    markup: str
    stylesheet: str
    script: str
    preview: str
