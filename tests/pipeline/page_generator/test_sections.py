"""Tests for section composers and their preconditions."""

from dataclasses import replace
from datetime import date

import pytest

from pageforge.config import BENEFIT_ICONS
from pageforge.pipeline.page_generator import sections as s
from pageforge.pipeline.page_generator.models import (
    Configuration,
    FaqEntry,
    InteractiveFeatures,
    OptionalSections,
    StatItem,
    Testimonial,
)


def test_stagger_delays_per_kind():
    assert [s.stagger_delay("benefits", i) for i in range(3)] == [0, 100, 200]
    assert s.stagger_delay("testimonials", 2) == 300
    assert s.stagger_delay("unknown", 5) == 0


def test_benefit_icons_wrap_around():
    assert s.benefit_icon(0) == BENEFIT_ICONS[0]
    assert s.benefit_icon(6) == BENEFIT_ICONS[0]
    assert s.benefit_icon(7) == BENEFIT_ICONS[1]


def test_seventh_benefit_reuses_first_icon():
    cfg = Configuration(benefits=tuple(f"B{i}" for i in range(7)))
    html = s.compose_benefits(cfg)
    assert html.count(BENEFIT_ICONS[0]) == 2


def test_benefits_skip_blank_entries():
    cfg = Configuration(product_name="Acme", benefits=("Fast", "Cheap", "", "   "))
    html = s.compose_benefits(cfg)
    assert html.count('class="benefit-item"') == 2
    assert "Why choose Acme?" in html


def test_benefits_all_blank_returns_empty():
    assert s.compose_benefits(Configuration(benefits=("", " "))) == ""


def test_reveal_attributes_only_with_animations():
    cfg = Configuration(benefits=("Fast", "Cheap"))
    html = s.compose_benefits(cfg)
    assert 'data-animate="fade-up"' in html
    assert 'data-delay="100"' in html
    quiet = s.compose_benefits(replace(cfg, animations=False))
    assert "data-animate" not in quiet
    assert "data-delay" not in quiet


def test_hero_uses_layout_and_escapes_text():
    cfg = Configuration(
        product_name="<Acme>", product_description='Say "hi"', call_to_action="Go"
    )
    html = s.compose_hero(cfg, "split")
    assert "hero hero-split" in html
    assert "&lt;Acme&gt;" in html
    assert "&quot;hi&quot;" in html
    assert "hero-image" not in html


def test_hero_image_and_parallax():
    cfg = Configuration(
        image="https://example.com/a.png",
        interactive_features=InteractiveFeatures(parallax=True),
    )
    html = s.compose_hero(cfg, "centered")
    assert "hero-parallax" in html
    assert 'src="https://example.com/a.png"' in html


def test_hero_markdown_description():
    cfg = Configuration(
        product_description="Fast **and** <b>cheap</b>", description_format="markdown"
    )
    html = s.compose_hero(cfg, "centered")
    assert "<strong>and</strong>" in html
    assert "<b>cheap</b>" not in html


@pytest.mark.parametrize(
    "sections, testimonials",
    [
        (OptionalSections(testimonials=False), (Testimonial(text="Hi", name="A"),)),
        (OptionalSections(testimonials=True), ()),
        (OptionalSections(testimonials=True), (Testimonial(),)),
    ],
)
def test_testimonials_omitted_without_toggle_or_content(sections, testimonials):
    cfg = Configuration(optional_sections=sections, testimonials=testimonials)
    assert s.compose_testimonials(cfg) == ""


def test_testimonials_grid_without_carousel():
    cfg = Configuration(
        optional_sections=OptionalSections(testimonials=True),
        testimonials=(Testimonial(text="Great", name="Ana", role="CTO"),),
    )
    html = s.compose_testimonials(cfg)
    assert "testimonials-grid" in html
    assert "data-carousel" not in html
    assert "<span>CTO</span>" in html


def test_testimonials_carousel_marks_first_slide_active():
    cfg = Configuration(
        optional_sections=OptionalSections(testimonials=True),
        interactive_features=InteractiveFeatures(carousel=True),
        testimonials=(Testimonial(text="A", name="1"), Testimonial(text="B", name="2")),
    )
    html = s.compose_testimonials(cfg)
    assert "data-carousel" in html
    assert html.count("carousel-slide active") == 1
    assert 'data-slide-index="1"' in html
    assert html.count("data-carousel-indicator=") == 2
    assert "data-carousel-prev" in html and "data-carousel-next" in html


def test_faq_uses_details_entries():
    cfg = Configuration(
        optional_sections=OptionalSections(faq=True),
        faq=(FaqEntry("Q1?", "A1"), FaqEntry("", ""), FaqEntry("Q2?", "A2")),
    )
    html = s.compose_faq(cfg)
    assert html.count('<details class="faq-item"') == 2
    assert 'data-faq-index="1"' in html
    assert 'aria-controls="faq-answer-1"' in html
    assert "data-accordion" in html


def test_faq_omitted_when_disabled():
    cfg = Configuration(faq=(FaqEntry("Q?", "A"),))
    assert s.compose_faq(cfg) == ""


def test_gallery_tiles_open_lightbox_when_enabled():
    base = Configuration(
        optional_sections=OptionalSections(gallery=True),
        gallery=("a.png", " ", "b.png"),
    )
    plain = s.compose_gallery(base)
    assert plain.count('class="gallery-item"') == 2
    assert "data-lightbox-index" not in plain
    boxed = s.compose_gallery(
        replace(base, interactive_features=InteractiveFeatures(lightbox=True))
    )
    assert 'data-lightbox-index="1"' in boxed
    assert 'data-animate="scale-up"' in boxed


def test_lightbox_overlay_is_hidden_dialog():
    html = s.compose_lightbox_overlay(Configuration())
    assert 'id="lightbox"' in html
    assert " hidden " in html
    for marker in ("data-lightbox-close", "data-lightbox-prev", "data-lightbox-next"):
        assert marker in html


def test_stats_require_counters_feature():
    stats = (StatItem(value=1200, suffix="+", label="Users"),)
    assert s.compose_stats(Configuration(stats=stats)) == ""
    cfg = Configuration(
        stats=stats, interactive_features=InteractiveFeatures(counters=True)
    )
    html = s.compose_stats(cfg)
    assert 'data-counter="1200"' in html
    assert 'data-suffix="+"' in html
    assert ">1200+<" in html


def test_cta_contact_line_optional():
    cfg = Configuration(call_to_action="Buy", cta_link="https://x.test")
    html = s.compose_cta(cfg)
    assert 'href="https://x.test"' in html
    assert "contact-info" not in html
    html = s.compose_cta(replace(cfg, contact_info="a@b.c"))
    assert "Contact: a@b.c" in html


def test_footer_year_from_date():
    html = s.compose_footer(Configuration(product_name="Acme"), date(1999, 1, 1))
    assert "&copy; 1999 Acme." in html


def test_portuguese_copy():
    cfg = Configuration(
        product_name="Acme",
        language="pt",
        optional_sections=OptionalSections(faq=True),
        faq=(FaqEntry("P?", "R"),),
    )
    assert "Perguntas Frequentes" in s.compose_faq(cfg)
    assert "Todos os direitos reservados." in s.compose_footer(cfg, date(2024, 1, 1))
