"""Stylesheet synthesis for generated landing pages.

``generate_stylesheet`` emits one complete stylesheet parameterized by the
resolved :class:`StyleToken`, the effective layout, the animation intensity
and the feature flags. Rules are grouped in blocks that are concatenated in a
fixed order, so identical inputs always produce identical text.

Custom properties defined in ``:root`` are the only ones referenced anywhere
in generated output.
"""

from __future__ import annotations

from pageforge.config import (
    ANIMATION_DURATIONS,
    BREAKPOINT_MOBILE_PX,
    BREAKPOINT_TABLET_PX,
    DEFAULT_ANIMATION_INTENSITY,
)

from .models import FeatureFlags, StyleToken


def animation_duration(intensity: str | None) -> str:
    """Return the ``--animation-duration`` value for an intensity keyword.

    Examples
    --------
    >>> [animation_duration(k) for k in ("subtle", "moderate", "dynamic")]
    ['0.3s', '0.6s', '0.9s']
    >>> animation_duration("unknown")
    '0.6s'
    """
    key = (intensity or "").strip().lower()
    return ANIMATION_DURATIONS.get(key, ANIMATION_DURATIONS[DEFAULT_ANIMATION_INTENSITY])


def _root_block(token: StyleToken, duration: str) -> str:
    return f"""
/* Reset and base */
* {{
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}}

:root {{
    --primary-color: {token.primary};
    --secondary-color: {token.secondary};
    --accent-color: {token.accent};
    --background-color: {token.background};
    --text-color: {token.primary};
    --font-family: {token.font};
    --gradient: {token.gradient};
    --border-radius: 12px;
    --shadow: 0 10px 30px rgba(0, 0, 0, 0.1);
    --animation-duration: {duration};
    --transition: all 0.3s cubic-bezier(0.4, 0, 0.2, 1);
}}

body {{
    font-family: var(--font-family);
    background-color: var(--background-color);
    color: var(--text-color);
    line-height: 1.6;
    scroll-behavior: smooth;
}}

.container {{
    max-width: 1200px;
    margin: 0 auto;
    padding: 0 20px;
}}
"""


_HERO_BASE = """
/* Hero */
.hero {
    min-height: 100vh;
    display: flex;
    align-items: center;
    padding: 80px 0;
    position: relative;
    overflow: hidden;
}

.hero::before {
    content: '';
    position: absolute;
    top: 0;
    left: 0;
    right: 0;
    bottom: 0;
    background: var(--gradient);
    opacity: 0.05;
    z-index: -1;
}

.hero-content {
    z-index: 2;
}

.hero-title {
    font-size: clamp(2.5rem, 5vw, 4rem);
    font-weight: 700;
    margin-bottom: 1.5rem;
    line-height: 1.2;
    background: var(--gradient);
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    background-clip: text;
}

.hero-description {
    font-size: clamp(1.1rem, 2vw, 1.4rem);
    margin-bottom: 2rem;
    opacity: 0.8;
    max-width: 600px;
}

.hero-image img {
    width: 100%;
    height: auto;
    border-radius: var(--border-radius);
    box-shadow: var(--shadow);
}
"""

LAYOUT_RULES: dict[str, str] = {
    "centered": """
/* Layout: centered */
.hero-centered {
    text-align: center;
    flex-direction: column;
    justify-content: center;
}

.hero-centered .hero-description {
    margin-left: auto;
    margin-right: auto;
}

.hero-centered .hero-image {
    max-width: 800px;
    margin-top: 3rem;
}
""",
    "split": """
/* Layout: split */
.hero-split {
    display: grid;
    grid-template-columns: 1fr 1fr;
    gap: 4rem;
    align-items: center;
    padding-left: 5%;
    padding-right: 5%;
}

.hero-split .hero-content {
    text-align: left;
}
""",
    "fullwidth": """
/* Layout: fullwidth */
.hero-fullwidth {
    background: var(--gradient);
    color: white;
    text-align: center;
    flex-direction: column;
    justify-content: center;
    width: 100%;
}

.hero-fullwidth .hero-title {
    color: white;
    -webkit-text-fill-color: white;
}

.hero-fullwidth .hero-description {
    margin-left: auto;
    margin-right: auto;
    opacity: 0.95;
}

.hero-fullwidth .hero-image {
    max-width: 900px;
    margin-top: 3rem;
}
""",
}

_COMPONENTS = """
/* Buttons */
.cta-button {
    display: inline-block;
    background: var(--gradient);
    color: white;
    padding: 1rem 2.5rem;
    border-radius: var(--border-radius);
    text-decoration: none;
    font-size: 1.1rem;
    font-weight: 600;
    transition: var(--transition);
    box-shadow: var(--shadow);
    border: none;
    cursor: pointer;
}

.cta-button:hover {
    transform: translateY(-2px);
    box-shadow: 0 15px 40px rgba(0, 0, 0, 0.2);
}

/* Sections */
.section-title {
    font-size: clamp(2rem, 4vw, 3rem);
    text-align: center;
    margin-bottom: 3rem;
    font-weight: 600;
}

.benefits {
    padding: 80px 0;
    background: rgba(255, 255, 255, 0.5);
    backdrop-filter: blur(10px);
}

.benefits-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
    gap: 2rem;
}

.benefit-item {
    background: white;
    padding: 2rem;
    border-radius: var(--border-radius);
    box-shadow: var(--shadow);
    display: flex;
    align-items: flex-start;
    gap: 1rem;
    transition: var(--transition);
}

.benefit-item:hover {
    transform: translateY(-5px);
    box-shadow: 0 20px 50px rgba(0, 0, 0, 0.15);
}

.benefit-icon {
    width: 48px;
    height: 48px;
    background: var(--gradient);
    color: white;
    border-radius: 50%;
    display: flex;
    align-items: center;
    justify-content: center;
    font-size: 1.2rem;
    flex-shrink: 0;
}

.benefit-text {
    font-size: 1.1rem;
    line-height: 1.6;
}

/* Testimonials */
.testimonials {
    padding: 80px 0;
}

.testimonials-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(350px, 1fr));
    gap: 2rem;
}

.testimonial-item {
    background: white;
    padding: 2rem;
    border-radius: var(--border-radius);
    box-shadow: var(--shadow);
    text-align: center;
}

.testimonial-text {
    font-size: 1.1rem;
    font-style: italic;
    margin-bottom: 1.5rem;
    line-height: 1.6;
}

.testimonial-author strong {
    display: block;
    color: var(--primary-color);
    margin-bottom: 0.25rem;
}

/* FAQ */
.faq {
    padding: 80px 0;
    background: rgba(255, 255, 255, 0.5);
}

.faq-container {
    max-width: 800px;
    margin: 0 auto;
}

.faq-item {
    background: white;
    border-radius: var(--border-radius);
    margin-bottom: 1rem;
    overflow: hidden;
    box-shadow: var(--shadow);
}

.faq-question {
    list-style: none;
    padding: 1.5rem;
    font-size: 1.1rem;
    font-weight: 600;
    cursor: pointer;
    display: flex;
    justify-content: space-between;
    align-items: center;
    transition: var(--transition);
}

.faq-question::-webkit-details-marker {
    display: none;
}

.faq-question:hover {
    background: rgba(0, 0, 0, 0.02);
}

.faq-answer p {
    padding: 0 1.5rem 1.5rem;
    line-height: 1.6;
}

.faq-icon {
    font-size: 1.5rem;
    transition: var(--transition);
}

.faq-item[open] .faq-icon {
    transform: rotate(45deg);
}

/* Gallery */
.gallery {
    padding: 80px 0;
}

.gallery-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
    gap: 1rem;
}

.gallery-item {
    display: block;
    aspect-ratio: 1;
    overflow: hidden;
    border-radius: var(--border-radius);
    border: none;
    padding: 0;
    background: none;
    transition: var(--transition);
}

.gallery-item img {
    width: 100%;
    height: 100%;
    object-fit: cover;
    transition: var(--transition);
}

/* CTA */
.cta-section {
    text-align: center;
    padding: 80px 0;
    background: var(--gradient);
    color: white;
}

.cta-title {
    font-size: clamp(2rem, 4vw, 3rem);
    margin-bottom: 2rem;
    color: white;
}

.contact-info {
    margin-top: 2rem;
    font-size: 1.1rem;
    opacity: 0.9;
}

/* Footer */
.footer {
    background: var(--primary-color);
    color: white;
    text-align: center;
    padding: 2rem 0;
}

.footer-content p {
    margin-bottom: 0.5rem;
}

.footer-content a {
    color: var(--accent-color);
    text-decoration: none;
}

/* Forms */
.field-invalid {
    border-color: #e74c3c;
    outline-color: #e74c3c;
}
"""

_STATS = """
/* Stats */
.stats {
    padding: 80px 0;
}

.stats-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
    gap: 2rem;
    text-align: center;
}

.stat-value {
    display: block;
    font-size: clamp(2.5rem, 5vw, 3.5rem);
    font-weight: 700;
    color: var(--secondary-color);
    font-variant-numeric: tabular-nums;
}

.stat-label {
    font-size: 1.1rem;
    opacity: 0.8;
}
"""

_CAROUSEL = """
/* Carousel */
.testimonials-carousel {
    position: relative;
    max-width: 800px;
    margin: 0 auto;
    padding: 0 3rem;
}

.carousel-slide {
    display: none;
}

.carousel-slide.active {
    display: block;
    animation: carousel-fade var(--animation-duration) ease;
}

.carousel-control {
    position: absolute;
    top: 50%;
    transform: translateY(-50%);
    background: var(--primary-color);
    color: white;
    border: none;
    border-radius: 50%;
    width: 40px;
    height: 40px;
    font-size: 1.5rem;
    cursor: pointer;
    transition: var(--transition);
}

.carousel-prev {
    left: 0;
}

.carousel-next {
    right: 0;
}

.carousel-indicators {
    display: flex;
    justify-content: center;
    gap: 0.5rem;
    margin-top: 1.5rem;
}

.carousel-indicator {
    width: 12px;
    height: 12px;
    border-radius: 50%;
    border: none;
    background: var(--accent-color);
    opacity: 0.4;
    cursor: pointer;
}

.carousel-indicator.active {
    opacity: 1;
}

@keyframes carousel-fade {
    from {
        opacity: 0;
    }
    to {
        opacity: 1;
    }
}
"""

_LIGHTBOX = """
/* Lightbox */
.gallery-item[data-lightbox-index] {
    cursor: pointer;
}

.gallery-item[data-lightbox-index]:hover {
    transform: scale(1.05);
}

.lightbox {
    position: fixed;
    top: 0;
    left: 0;
    width: 100%;
    height: 100%;
    background: rgba(0, 0, 0, 0.9);
    display: flex;
    align-items: center;
    justify-content: center;
    z-index: 1000;
}

.lightbox[hidden] {
    display: none;
}

.lightbox-image {
    max-width: 85%;
    max-height: 85%;
    border-radius: var(--border-radius);
}

.lightbox-close {
    position: absolute;
    top: 20px;
    right: 30px;
    background: none;
    border: none;
    color: white;
    font-size: 2.5rem;
    cursor: pointer;
}

.lightbox-nav {
    position: absolute;
    top: 50%;
    transform: translateY(-50%);
    background: rgba(255, 255, 255, 0.15);
    border: none;
    color: white;
    font-size: 2.5rem;
    width: 56px;
    height: 56px;
    border-radius: 50%;
    cursor: pointer;
}

.lightbox-prev {
    left: 20px;
}

.lightbox-next {
    right: 20px;
}
"""

_PARALLAX = """
/* Parallax */
.hero-parallax::before {
    background-attachment: fixed;
    background-size: 200% 200%;
    opacity: 0.12;
}

.hero-parallax .hero-image img {
    will-change: transform;
}
"""

_MICRO_INTERACTIONS = """
/* Micro-interactions */
.cta-button.is-pressed,
.carousel-control.is-pressed,
.lightbox-nav.is-pressed {
    transform: scale(0.96);
}

.benefit-item:hover .benefit-icon {
    transform: rotate(-8deg) scale(1.1);
    transition: var(--transition);
}
"""

_REVEAL = """
/* Reveal animations */
[data-animate] {
    opacity: 0;
    transform: translateY(30px);
    transition: opacity var(--animation-duration) cubic-bezier(0.4, 0, 0.2, 1),
        transform var(--animation-duration) cubic-bezier(0.4, 0, 0.2, 1);
}

[data-animate].animate {
    opacity: 1;
    transform: translateY(0);
}

[data-animate="scale-up"] {
    transform: scale(0.9);
}

[data-animate="scale-up"].animate {
    transform: scale(1);
}
"""


def _responsive_block() -> str:
    return f"""
/* Responsive */
@media (max-width: {BREAKPOINT_TABLET_PX}px) {{
    .hero-split {{
        grid-template-columns: 1fr;
        text-align: center;
    }}

    .hero-split .hero-content {{
        text-align: center;
    }}

    .benefits-grid,
    .testimonials-grid,
    .stats-grid {{
        grid-template-columns: 1fr;
    }}

    .gallery-grid {{
        grid-template-columns: repeat(2, 1fr);
    }}
}}

@media (max-width: {BREAKPOINT_MOBILE_PX}px) {{
    .container {{
        padding: 0 15px;
    }}

    .hero {{
        padding: 60px 0;
    }}

    .benefits,
    .stats,
    .testimonials,
    .faq,
    .gallery,
    .cta-section {{
        padding: 60px 0;
    }}

    .gallery-grid {{
        grid-template-columns: 1fr;
    }}
}}
"""


_REDUCED_MOTION = """
/* Reduced motion */
@media (prefers-reduced-motion: reduce) {
    :root {
        --animation-duration: 0s;
    }

    *,
    *::before,
    *::after {
        animation-duration: 0s !important;
        animation-delay: 0s !important;
        transition-duration: 0s !important;
        transition-delay: 0s !important;
        scroll-behavior: auto !important;
    }

    [data-animate] {
        opacity: 1;
        transform: none;
    }

    .hero-parallax::before {
        background-attachment: scroll;
    }
}
"""


def generate_stylesheet(
    token: StyleToken,
    layout: str,
    intensity: str | None,
    flags: FeatureFlags,
) -> str:
    r"""Emit the complete stylesheet for one page.

    Parameters
    ----------
    token : StyleToken
        Resolved style token supplying colors, font and gradient.
    layout : str
        Effective layout (``centered``, ``split`` or ``fullwidth``); only the
        structural rules of this layout are emitted.
    intensity : str | None
        Animation intensity keyword mapped by :func:`animation_duration`.
    flags : FeatureFlags
        Feature switches; rules for disabled features are omitted.

    Returns
    -------
    str
        Stylesheet text. The reduced-motion override is always last so it
        wins over every earlier rule.

    Examples
    --------
    >>> from pageforge.pipeline.page_generator.styles import resolve_style
    >>> from pageforge.pipeline.page_generator.models import FeatureFlags
    >>> css = generate_stylesheet(resolve_style("minimal"), "centered", "dynamic", FeatureFlags())
    >>> "--animation-duration: 0.9s;" in css
    True
    """
    blocks = [
        _root_block(token, animation_duration(intensity)),
        _HERO_BASE,
        LAYOUT_RULES.get(layout, LAYOUT_RULES[token.layout]),
        _COMPONENTS,
    ]
    if flags.counters:
        blocks.append(_STATS)
    if flags.carousel:
        blocks.append(_CAROUSEL)
    if flags.lightbox:
        blocks.append(_LIGHTBOX)
    if flags.parallax:
        blocks.append(_PARALLAX)
    if flags.micro_interactions:
        blocks.append(_MICRO_INTERACTIONS)
    if flags.animations:
        blocks.append(_REVEAL)
    blocks.append(_responsive_block())
    blocks.append(_REDUCED_MOTION)
    return "".join(blocks)
