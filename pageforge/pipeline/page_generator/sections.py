"""Section composers for generated landing pages.

Each public ``compose_*`` function turns a :class:`Configuration` into the
markup fragment of one semantic section. Optional sections return ``""``
when their precondition (toggle enabled and non-empty content) fails, so the
assembler can filter and join fragments without ever emitting an empty
container.

Markup conventions shared with the stylesheet and the behavior script:

- every section carries ``data-section="<kind>"``;
- reveal targets carry ``data-animate`` and, inside lists, a
  ``data-delay`` stagger in milliseconds (only when animations are enabled);
- FAQ entries are ``<details>`` elements whose summary carries
  ``data-faq-index``;
- carousel slides carry ``data-slide-index`` and its controls
  ``data-carousel-prev``, ``data-carousel-next`` and
  ``data-carousel-indicator``;
- lightbox-enabled gallery tiles carry ``data-lightbox-index``;
- counters carry ``data-counter`` (target) and ``data-suffix``.
"""

from __future__ import annotations

from datetime import date

from pageforge.config import BENEFIT_ICONS, STAGGER_DELAY_MS
from pageforge.i18n import translate

from .models import Configuration, FaqEntry, FeatureFlags, StatItem, Testimonial
from .renderer import escape_text, render_markdown


def stagger_delay(kind: str, index: int) -> int:
    """Return the reveal delay in milliseconds of the ``index``-th item of ``kind``."""
    return index * STAGGER_DELAY_MS.get(kind, 0)


def benefit_icon(index: int) -> str:
    """Return the decorative icon for the ``index``-th benefit (wrapping around)."""
    return BENEFIT_ICONS[index % len(BENEFIT_ICONS)]


def reveal_attributes(
    flags: FeatureFlags,
    kind: str | None = None,
    index: int | None = None,
    effect: str = "fade-up",
) -> str:
    """Return the reveal attributes for an element, or ``""`` without animations."""
    if not flags.animations:
        return ""
    attrs = f' data-animate="{effect}"'
    if kind is not None and index is not None:
        attrs += f' data-delay="{stagger_delay(kind, index)}"'
    return attrs


def valid_benefits(config: Configuration) -> list[str]:
    return [benefit.strip() for benefit in config.benefits if benefit and benefit.strip()]


def valid_testimonials(config: Configuration) -> list[Testimonial]:
    return [t for t in config.testimonials if t.text.strip() or t.name.strip()]


def valid_faq(config: Configuration) -> list[FaqEntry]:
    return [item for item in config.faq if item.question.strip() or item.answer.strip()]


def valid_gallery(config: Configuration) -> list[str]:
    return [image.strip() for image in config.gallery if image and image.strip()]


def valid_stats(config: Configuration) -> list[StatItem]:
    return [stat for stat in config.stats if stat.label.strip() or stat.value]


def has_testimonials(config: Configuration) -> bool:
    return config.optional_sections.testimonials and bool(valid_testimonials(config))


def has_faq(config: Configuration) -> bool:
    return config.optional_sections.faq and bool(valid_faq(config))


def has_gallery(config: Configuration) -> bool:
    return config.optional_sections.gallery and bool(valid_gallery(config))


def has_stats(config: Configuration) -> bool:
    return config.interactive_features.counters and bool(valid_stats(config))


def compose_hero(config: Configuration, layout: str) -> str:
    """Compose the hero header for the resolved ``layout``.

    The description is rendered from Markdown when
    ``config.description_format`` is ``"markdown"``; otherwise it is escaped
    plain text.
    """
    flags = config.flags
    classes = f"hero hero-{layout}"
    if flags.parallax:
        classes += " hero-parallax"
    name = escape_text(config.product_name)
    if config.description_format == "markdown":
        description = (
            '<div class="hero-description">'
            f"{render_markdown(config.product_description)}</div>"
        )
    else:
        description = (
            f'<p class="hero-description">{escape_text(config.product_description)}</p>'
        )
    image = ""
    if config.image.strip():
        image = f"""
        <div class="hero-image"><img src="{escape_text(config.image.strip())}" alt="{name}" /></div>"""
    return f"""
    <header class="{classes}" data-section="hero"{reveal_attributes(flags)}>
        <div class="hero-content">
            <h1 class="hero-title">{name}</h1>
            {description}
            <div class="hero-cta">
                <a href="{escape_text(config.cta_link)}" class="cta-button primary" target="_blank" rel="noopener">
                    {escape_text(config.call_to_action)}
                </a>
            </div>
        </div>{image}
    </header>"""


def compose_benefits(config: Configuration) -> str:
    """Compose the benefits grid, or ``""`` when no non-blank benefit exists."""
    benefits = valid_benefits(config)
    if not benefits:
        return ""
    flags = config.flags
    title = translate("benefits_title", config.language, name=config.product_name)
    items = "".join(
        f"""
            <div class="benefit-item"{reveal_attributes(flags, "benefits", index)}>
                <div class="benefit-icon" aria-hidden="true">{benefit_icon(index)}</div>
                <p class="benefit-text">{escape_text(benefit)}</p>
            </div>"""
        for index, benefit in enumerate(benefits)
    )
    return f"""
    <section class="benefits" data-section="benefits"{reveal_attributes(flags)}>
        <h2 class="section-title">{escape_text(title)}</h2>
        <div class="benefits-grid">{items}
        </div>
    </section>"""


def compose_stats(config: Configuration) -> str:
    """Compose the animated stats strip (counters feature only).

    The markup shows the final figures so the strip reads correctly before
    the script resets and animates them.
    """
    if not has_stats(config):
        return ""
    flags = config.flags
    items = "".join(
        f"""
            <div class="stat-item"{reveal_attributes(flags, "stats", index)}>
                <span class="stat-value" data-counter="{int(stat.value)}" data-suffix="{escape_text(stat.suffix)}">{int(stat.value)}{escape_text(stat.suffix)}</span>
                <p class="stat-label">{escape_text(stat.label)}</p>
            </div>"""
        for index, stat in enumerate(valid_stats(config))
    )
    return f"""
    <section class="stats" data-section="stats"{reveal_attributes(flags)}>
        <h2 class="section-title">{escape_text(translate("stats_title", config.language))}</h2>
        <div class="stats-grid">{items}
        </div>
    </section>"""


def _testimonial_body(testimonial: Testimonial) -> str:
    role = f"<span>{escape_text(testimonial.role)}</span>" if testimonial.role.strip() else ""
    return f"""
                    <blockquote class="testimonial-text">&ldquo;{escape_text(testimonial.text)}&rdquo;</blockquote>
                    <figcaption class="testimonial-author">
                        <strong>{escape_text(testimonial.name)}</strong>{role}
                    </figcaption>"""


def _testimonials_grid(testimonials: list[Testimonial], flags: FeatureFlags) -> str:
    cards = "".join(
        f"""
            <figure class="testimonial-item"{reveal_attributes(flags, "testimonials", index)}>{_testimonial_body(testimonial)}
            </figure>"""
        for index, testimonial in enumerate(testimonials)
    )
    return f"""
        <div class="testimonials-grid">{cards}
        </div>"""


def _testimonials_carousel(testimonials: list[Testimonial], lang: str) -> str:
    slides = []
    indicators = []
    for index, testimonial in enumerate(testimonials):
        active = index == 0
        slides.append(
            f"""
                <figure class="testimonial-item carousel-slide{' active' if active else ''}" data-slide-index="{index}" aria-hidden="{'false' if active else 'true'}">{_testimonial_body(testimonial)}
                </figure>"""
        )
        label = escape_text(translate("carousel_indicator", lang, number=index + 1))
        indicators.append(
            f"""
                <button type="button" class="carousel-indicator{' active' if active else ''}" data-carousel-indicator="{index}" aria-label="{label}"></button>"""
        )
    previous_label = escape_text(translate("carousel_previous", lang))
    next_label = escape_text(translate("carousel_next", lang))
    return f"""
        <div class="testimonials-carousel" data-carousel>
            <div class="carousel-track">{''.join(slides)}
            </div>
            <button type="button" class="carousel-control carousel-prev" data-carousel-prev aria-label="{previous_label}">&#8249;</button>
            <button type="button" class="carousel-control carousel-next" data-carousel-next aria-label="{next_label}">&#8250;</button>
            <div class="carousel-indicators">{''.join(indicators)}
            </div>
        </div>"""


def compose_testimonials(config: Configuration) -> str:
    """Compose the testimonials section as a carousel or a static grid."""
    if not has_testimonials(config):
        return ""
    flags = config.flags
    testimonials = valid_testimonials(config)
    if flags.carousel:
        body = _testimonials_carousel(testimonials, config.language)
    else:
        body = _testimonials_grid(testimonials, flags)
    title = escape_text(translate("testimonials_title", config.language))
    return f"""
    <section class="testimonials" data-section="testimonials"{reveal_attributes(flags)}>
        <h2 class="section-title">{title}</h2>{body}
    </section>"""


def compose_faq(config: Configuration) -> str:
    """Compose the FAQ accordion.

    Entries are native ``<details>`` elements so answers stay reachable
    without a script; the behavior script adds mutual exclusivity.
    """
    if not has_faq(config):
        return ""
    flags = config.flags
    entries = "".join(
        f"""
            <details class="faq-item" id="faq-{index}"{reveal_attributes(flags, "faq", index)}>
                <summary class="faq-question" data-faq-index="{index}" aria-controls="faq-answer-{index}">
                    {escape_text(item.question)}
                    <span class="faq-icon" aria-hidden="true">+</span>
                </summary>
                <div class="faq-answer" id="faq-answer-{index}">
                    <p>{escape_text(item.answer)}</p>
                </div>
            </details>"""
        for index, item in enumerate(valid_faq(config))
    )
    title = escape_text(translate("faq_title", config.language))
    return f"""
    <section class="faq" data-section="faq"{reveal_attributes(flags)}>
        <h2 class="section-title">{title}</h2>
        <div class="faq-container" data-accordion>{entries}
        </div>
    </section>"""


def compose_gallery(config: Configuration) -> str:
    """Compose the gallery grid; tiles open the lightbox when it is enabled."""
    if not has_gallery(config):
        return ""
    flags = config.flags
    tiles = []
    for index, image in enumerate(valid_gallery(config)):
        alt = escape_text(translate("gallery_image_alt", config.language, number=index + 1))
        reveal = reveal_attributes(flags, "gallery", index, effect="scale-up")
        img = f'<img src="{escape_text(image)}" alt="{alt}" loading="lazy" />'
        if flags.lightbox:
            tiles.append(
                f"""
            <button type="button" class="gallery-item" data-lightbox-index="{index}"{reveal}>
                {img}
            </button>"""
            )
        else:
            tiles.append(
                f"""
            <div class="gallery-item"{reveal}>
                {img}
            </div>"""
            )
    title = escape_text(translate("gallery_title", config.language))
    return f"""
    <section class="gallery" data-section="gallery"{reveal_attributes(flags)}>
        <h2 class="section-title">{title}</h2>
        <div class="gallery-grid">{''.join(tiles)}
        </div>
    </section>"""


def compose_lightbox_overlay(config: Configuration) -> str:
    """Compose the hidden lightbox dialog used by the gallery tiles."""
    lang = config.language
    return f"""
    <div class="lightbox" id="lightbox" data-lightbox hidden role="dialog" aria-modal="true" aria-label="{escape_text(translate("lightbox_dialog", lang))}">
        <button type="button" class="lightbox-close" data-lightbox-close aria-label="{escape_text(translate("lightbox_close", lang))}">&times;</button>
        <button type="button" class="lightbox-nav lightbox-prev" data-lightbox-prev aria-label="{escape_text(translate("lightbox_previous", lang))}">&#8249;</button>
        <img class="lightbox-image" data-lightbox-image alt="" />
        <button type="button" class="lightbox-nav lightbox-next" data-lightbox-next aria-label="{escape_text(translate("lightbox_next", lang))}">&#8250;</button>
    </div>"""


def compose_cta(config: Configuration) -> str:
    flags = config.flags
    contact = ""
    if config.contact_info.strip():
        label = escape_text(translate("contact_label", config.language))
        contact = f"""
        <p class="contact-info">{label} {escape_text(config.contact_info.strip())}</p>"""
    return f"""
    <section class="cta-section" data-section="cta"{reveal_attributes(flags)}>
        <h2 class="cta-title">{escape_text(translate("cta_title", config.language))}</h2>
        <a href="{escape_text(config.cta_link)}" class="cta-button" target="_blank" rel="noopener">
            {escape_text(config.call_to_action)}
        </a>{contact}
    </section>"""


def compose_footer(config: Configuration, today: date) -> str:
    """Compose the footer; the copyright year is taken from ``today``."""
    rights = escape_text(translate("footer_rights", config.language))
    return f"""
    <footer class="footer" data-section="footer">
        <div class="footer-content">
            <p>&copy; {today.year} {escape_text(config.product_name)}. {rights}</p>
        </div>
    </footer>"""
