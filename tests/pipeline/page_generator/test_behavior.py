"""Tests for behavior script synthesis."""

from dataclasses import replace

from pageforge.pipeline.page_generator.behavior import generate_script
from pageforge.pipeline.page_generator.models import (
    Configuration,
    FaqEntry,
    InteractiveFeatures,
    OptionalSections,
)

QUIET = Configuration(animations=False)


def test_no_script_when_nothing_needs_it():
    assert generate_script(QUIET) == ""


def test_parallax_alone_needs_no_script():
    cfg = replace(QUIET, interactive_features=InteractiveFeatures(parallax=True))
    assert generate_script(cfg) == ""


def test_animations_enable_reveal_only():
    script = generate_script(Configuration(animations=True))
    assert script.startswith("(function () {")
    assert "initReveal();" in script
    assert "initCarousels();" not in script
    assert "initLightbox();" not in script
    assert "initCounters();" not in script
    assert "initAnchors();" in script and "initFormGuard();" in script


def test_each_feature_adds_its_block():
    features = {
        "carousel": "initCarousels();",
        "lightbox": "initLightbox();",
        "counters": "initCounters();",
        "micro_interactions": "initMicroInteractions();",
    }
    for name, call in features.items():
        cfg = replace(QUIET, interactive_features=InteractiveFeatures(**{name: True}))
        script = generate_script(cfg)
        assert call in script, name
        assert "initReveal();" not in script


def test_accordion_only_with_rendered_faq():
    base = Configuration(animations=True, faq=(FaqEntry("Q?", "A"),))
    assert "initAccordion" not in generate_script(base)
    cfg = replace(base, optional_sections=OptionalSections(faq=True))
    assert "initAccordion();" in generate_script(cfg)


def test_constants_are_embedded():
    script = generate_script(Configuration())
    assert "var REVEAL_THRESHOLD = 0.1;" in script
    assert 'var REVEAL_ROOT_MARGIN = "0px 0px -50px 0px";' in script
    assert "var COUNTER_DURATION_MULTIPLIER = 3;" in script


def test_counter_reads_animation_duration():
    cfg = Configuration(interactive_features=InteractiveFeatures(counters=True))
    assert "'--animation-duration'" in generate_script(cfg)


def test_lightbox_closes_on_escape():
    cfg = Configuration(interactive_features=InteractiveFeatures(lightbox=True))
    assert "Escape" in generate_script(cfg)


def test_script_is_deterministic():
    cfg = Configuration(interactive_features=InteractiveFeatures(carousel=True))
    assert generate_script(cfg) == generate_script(cfg)
