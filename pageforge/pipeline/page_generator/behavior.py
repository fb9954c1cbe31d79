"""Client behavior script synthesis.

``generate_script`` emits the JavaScript embedded in a generated page. The
script is assembled from independent blocks, one per behavior, and only the
blocks whose feature is enabled are included. When no enabled feature needs
client code the result is the empty string and the assembler embeds no
``<script>`` tag at all.

Each block mirrors a state machine from
:mod:`pageforge.pipeline.page_generator.interactions`:

- reveal: elements with ``data-animate`` gain the ``animate`` class once,
  after their ``data-delay``;
- accordion: ``Closed | Open(i)`` over the FAQ ``<details>`` entries;
- carousel: active index with modulo navigation and indicator jumps;
- lightbox: ``Closed | Open(i)`` with modulo navigation, closed by the close
  control, the backdrop or Escape, never by the image;
- counters: count from 0 to ``data-counter`` once, on first visibility.
"""

from __future__ import annotations

import json

from pageforge.config import (
    COUNTER_DURATION_MULTIPLIER,
    REVEAL_ROOT_MARGIN,
    REVEAL_THRESHOLD,
)
from pageforge.i18n import translate

from .models import Configuration
from .sections import has_faq

_PRELUDE = """
    function ready(callback) {
        if (document.readyState === 'loading') {
            document.addEventListener('DOMContentLoaded', callback);
        } else {
            callback();
        }
    }

    function toArray(nodes) {
        return Array.prototype.slice.call(nodes);
    }

    function wrap(index, count) {
        return ((index % count) + count) % count;
    }
"""

_REVEAL = """
    // Reveal on scroll: each element is revealed at most once.
    function initReveal() {
        var targets = toArray(document.querySelectorAll('[data-animate]'));
        if (!('IntersectionObserver' in window)) {
            targets.forEach(function (el) { el.classList.add('animate'); });
            return;
        }
        var observer = new IntersectionObserver(function (entries) {
            entries.forEach(function (entry) {
                if (!entry.isIntersecting) {
                    return;
                }
                var el = entry.target;
                observer.unobserve(el);
                var delay = parseInt(el.getAttribute('data-delay') || '0', 10) || 0;
                window.setTimeout(function () { el.classList.add('animate'); }, delay);
            });
        }, { threshold: REVEAL_THRESHOLD, rootMargin: REVEAL_ROOT_MARGIN });
        targets.forEach(function (el) { observer.observe(el); });
    }
"""

_ACCORDION = """
    // Accordion: opening one entry closes the others; clicking the open one closes it.
    function initAccordion() {
        var items = toArray(document.querySelectorAll('[data-accordion] .faq-item'));
        var openIndex = null;

        function render() {
            items.forEach(function (item) {
                var summary = item.querySelector('[data-faq-index]');
                var index = parseInt(summary.getAttribute('data-faq-index'), 10);
                var isOpen = index === openIndex;
                item.open = isOpen;
                summary.setAttribute('aria-expanded', isOpen ? 'true' : 'false');
            });
        }

        items.forEach(function (item) {
            var summary = item.querySelector('[data-faq-index]');
            if (!summary) {
                return;
            }
            var index = parseInt(summary.getAttribute('data-faq-index'), 10);
            summary.addEventListener('click', function (event) {
                event.preventDefault();
                openIndex = openIndex === index ? null : index;
                render();
            });
        });
        render();
    }
"""

_CAROUSEL = """
    // Carousel: exactly one active slide, wrap-around navigation.
    function initCarousels() {
        toArray(document.querySelectorAll('[data-carousel]')).forEach(function (carousel) {
            var slides = toArray(carousel.querySelectorAll('[data-slide-index]'));
            var indicators = toArray(carousel.querySelectorAll('[data-carousel-indicator]'));
            var count = slides.length;
            var active = 0;
            if (!count) {
                return;
            }

            function show(index) {
                active = wrap(index, count);
                slides.forEach(function (slide, i) {
                    var isActive = i === active;
                    slide.classList.toggle('active', isActive);
                    slide.setAttribute('aria-hidden', isActive ? 'false' : 'true');
                });
                indicators.forEach(function (dot, i) {
                    dot.classList.toggle('active', i === active);
                });
            }

            var prev = carousel.querySelector('[data-carousel-prev]');
            var next = carousel.querySelector('[data-carousel-next]');
            if (prev) {
                prev.addEventListener('click', function () { show(active - 1); });
            }
            if (next) {
                next.addEventListener('click', function () { show(active + 1); });
            }
            indicators.forEach(function (dot) {
                dot.addEventListener('click', function () {
                    var target = parseInt(dot.getAttribute('data-carousel-indicator'), 10);
                    if (target >= 0 && target < count) {
                        show(target);
                    }
                });
            });
            show(0);
        });
    }
"""

_LIGHTBOX = """
    // Lightbox: closed or showing one gallery image.
    function initLightbox() {
        var overlay = document.querySelector('[data-lightbox]');
        var tiles = toArray(document.querySelectorAll('[data-lightbox-index]'));
        if (!overlay || !tiles.length) {
            return;
        }
        var image = overlay.querySelector('[data-lightbox-image]');
        var count = tiles.length;
        var current = null;

        function render() {
            if (current === null) {
                overlay.hidden = true;
                image.removeAttribute('src');
                return;
            }
            var source = tiles[current].querySelector('img');
            image.setAttribute('src', source.getAttribute('src'));
            image.setAttribute('alt', source.getAttribute('alt') || '');
            overlay.hidden = false;
        }

        function open(index) {
            current = index;
            render();
        }

        function close() {
            current = null;
            render();
        }

        function step(delta) {
            if (current === null) {
                return;
            }
            current = wrap(current + delta, count);
            render();
        }

        tiles.forEach(function (tile) {
            tile.addEventListener('click', function () {
                open(parseInt(tile.getAttribute('data-lightbox-index'), 10));
            });
        });
        overlay.querySelector('[data-lightbox-close]').addEventListener('click', function (event) {
            event.stopPropagation();
            close();
        });
        overlay.querySelector('[data-lightbox-prev]').addEventListener('click', function (event) {
            event.stopPropagation();
            step(-1);
        });
        overlay.querySelector('[data-lightbox-next]').addEventListener('click', function (event) {
            event.stopPropagation();
            step(1);
        });
        // Only a click on the backdrop itself closes; clicks on the image do not.
        overlay.addEventListener('click', function (event) {
            if (event.target === overlay) {
                close();
            }
        });
        document.addEventListener('keydown', function (event) {
            if (current === null) {
                return;
            }
            if (event.key === 'Escape') {
                close();
            } else if (event.key === 'ArrowRight') {
                step(1);
            } else if (event.key === 'ArrowLeft') {
                step(-1);
            }
        });
    }
"""

_COUNTERS = """
    // Counters: animate from 0 to the target once, the first time visible.
    function initCounters() {
        var counters = toArray(document.querySelectorAll('[data-counter]'));
        if (!counters.length) {
            return;
        }
        var seconds = parseFloat(
            window.getComputedStyle(document.documentElement).getPropertyValue('--animation-duration')
        ) || 0;
        var duration = seconds * 1000 * COUNTER_DURATION_MULTIPLIER;

        function display(el, value) {
            el.textContent = value + (el.getAttribute('data-suffix') || '');
        }

        function start(el) {
            var target = parseInt(el.getAttribute('data-counter'), 10) || 0;
            if (!(duration > 0)) {
                display(el, target);
                return;
            }
            var startedAt = null;
            function frame(now) {
                if (startedAt === null) {
                    startedAt = now;
                }
                var progress = Math.min((now - startedAt) / duration, 1);
                display(el, progress >= 1 ? target : Math.trunc(target * progress));
                if (progress < 1) {
                    window.requestAnimationFrame(frame);
                }
            }
            window.requestAnimationFrame(frame);
        }

        if (!('IntersectionObserver' in window)) {
            counters.forEach(start);
            return;
        }
        counters.forEach(function (el) { display(el, 0); });
        var observer = new IntersectionObserver(function (entries) {
            entries.forEach(function (entry) {
                var el = entry.target;
                if (!entry.isIntersecting || el.getAttribute('data-counted') === 'true') {
                    return;
                }
                el.setAttribute('data-counted', 'true');
                observer.unobserve(el);
                start(el);
            });
        }, { threshold: REVEAL_THRESHOLD });
        counters.forEach(function (el) { observer.observe(el); });
    }
"""

_MICRO_INTERACTIONS = """
    // Micro-interactions: pressed feedback on buttons.
    function initMicroInteractions() {
        var selector = '.cta-button, .carousel-control, .lightbox-nav';
        document.addEventListener('pointerdown', function (event) {
            var button = event.target.closest ? event.target.closest(selector) : null;
            if (button) {
                button.classList.add('is-pressed');
            }
        });
        ['pointerup', 'pointercancel', 'dragend'].forEach(function (type) {
            document.addEventListener(type, function () {
                toArray(document.querySelectorAll('.is-pressed')).forEach(function (el) {
                    el.classList.remove('is-pressed');
                });
            });
        });
    }
"""

_BASE = """
    // Smooth scrolling for in-page anchors.
    function initAnchors() {
        document.addEventListener('click', function (event) {
            var link = event.target.closest ? event.target.closest('a[href^="#"]') : null;
            if (!link || link.getAttribute('href') === '#') {
                return;
            }
            var target = document.querySelector(link.getAttribute('href'));
            if (target) {
                event.preventDefault();
                target.scrollIntoView({ behavior: 'smooth' });
            }
        });
    }

    // Required-field guard for any form on the page.
    function initFormGuard() {
        toArray(document.querySelectorAll('form')).forEach(function (form) {
            form.addEventListener('submit', function (event) {
                var valid = true;
                toArray(form.querySelectorAll('[required]')).forEach(function (field) {
                    var blank = !String(field.value || '').trim();
                    field.classList.toggle('field-invalid', blank);
                    field.setAttribute('aria-invalid', blank ? 'true' : 'false');
                    if (blank) {
                        valid = false;
                    }
                });
                if (!valid) {
                    event.preventDefault();
                    window.alert(REQUIRED_FIELDS_MESSAGE);
                }
            });
        });
    }
"""


def generate_script(config: Configuration) -> str:
    r"""Emit the behavior script for ``config``, or ``""`` when none is needed.

    Parameters
    ----------
    config : Configuration
        Page configuration; its :class:`FeatureFlags` select the blocks.

    Returns
    -------
    str
        JavaScript source wrapped in an IIFE, or the empty string when
        ``config.flags.requires_script`` is false.

    Notes
    -----
    The accordion block is included only when the FAQ section is rendered.
    The anchor and required-field guard blocks accompany every non-empty
    script.

    Examples
    --------
    >>> from pageforge.pipeline.page_generator.models import Configuration
    >>> generate_script(Configuration(animations=False))
    ''
    >>> "initReveal" in generate_script(Configuration(animations=True))
    True
    """
    flags = config.flags
    if not flags.requires_script:
        return ""

    constants = [
        f"    var REVEAL_THRESHOLD = {json.dumps(REVEAL_THRESHOLD)};",
        f"    var REVEAL_ROOT_MARGIN = {json.dumps(REVEAL_ROOT_MARGIN)};",
        f"    var COUNTER_DURATION_MULTIPLIER = {json.dumps(COUNTER_DURATION_MULTIPLIER)};",
        "    var REQUIRED_FIELDS_MESSAGE = "
        f"{json.dumps(translate('form_required_alert', config.language))};",
    ]
    blocks = [_PRELUDE]
    calls = []
    if flags.animations:
        blocks.append(_REVEAL)
        calls.append("initReveal();")
    if has_faq(config):
        blocks.append(_ACCORDION)
        calls.append("initAccordion();")
    if flags.carousel:
        blocks.append(_CAROUSEL)
        calls.append("initCarousels();")
    if flags.lightbox:
        blocks.append(_LIGHTBOX)
        calls.append("initLightbox();")
    if flags.counters:
        blocks.append(_COUNTERS)
        calls.append("initCounters();")
    if flags.micro_interactions:
        blocks.append(_MICRO_INTERACTIONS)
        calls.append("initMicroInteractions();")
    blocks.append(_BASE)
    calls.extend(["initAnchors();", "initFormGuard();"])

    ready = "\n".join(f"        {call}" for call in calls)
    return (
        "(function () {\n"
        "    'use strict';\n\n"
        + "\n".join(constants)
        + "\n"
        + "".join(blocks)
        + "\n    ready(function () {\n"
        + ready
        + "\n    });\n"
        + "})();\n"
    )
