"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Arms a per-test SIGALRM timeout where the platform supports it.
"""

import os
import signal
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from datetime import date
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from pageforge.pipeline.page_generator.models import (  # noqa: E402
    Configuration,
    FaqEntry,
    InteractiveFeatures,
    OptionalSections,
    StatItem,
    Testimonial,
)

_TEST_TIMEOUT = int(os.environ.get("PYTEST_TEST_TIMEOUT", "10"))


def _timeout_handler(signum, frame):
    """Test Timeout handler."""
    raise TimeoutError(f"Test exceeded {_TEST_TIMEOUT} seconds timeout")


def pytest_runtest_setup(item):
    """Test Pytest runtest setup."""
    if hasattr(signal, "SIGALRM"):
        signal.signal(signal.SIGALRM, _timeout_handler)
        signal.alarm(_TEST_TIMEOUT)


def pytest_runtest_teardown(item, nextitem):
    """Test Pytest runtest teardown."""
    if hasattr(signal, "SIGALRM"):
        signal.alarm(0)


@pytest.fixture
def fixed_day() -> date:
    return date(2024, 5, 17)


@pytest.fixture
def full_config() -> Configuration:
    """A configuration with every optional section and feature enabled."""
    return Configuration(
        product_name="Acme Rockets",
        product_description="Rockets that <always> land.",
        benefits=("Fast", "Cheap", "Reusable"),
        call_to_action="Buy now",
        cta_link="https://example.com/buy",
        contact_info="hello@example.com",
        image="https://example.com/hero.png",
        style="colorful",
        animations=True,
        animation_intensity="dynamic",
        optional_sections=OptionalSections(
            testimonials=True, faq=True, gallery=True, pricing=True
        ),
        interactive_features=InteractiveFeatures(
            carousel=True,
            lightbox=True,
            parallax=True,
            counters=True,
            micro_interactions=True,
        ),
        testimonials=(
            Testimonial(text="Great!", name="Ana", role="CTO"),
            Testimonial(text="Solid.", name="Bo", role=""),
        ),
        faq=(
            FaqEntry(question="Does it fly?", answer="Yes."),
            FaqEntry(question="Does it land?", answer="Always."),
        ),
        gallery=("https://example.com/1.png", "https://example.com/2.png"),
        stats=(StatItem(value=500, suffix="+", label="Launches"),),
    )
