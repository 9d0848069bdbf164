"""Pytest configuration and shared fixtures for the mallardoc test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import pytest

from mallardoc.ast import Document, Paragraph, Section
from mallardoc.options import MallardRendererOptions
from mallardoc.renderers.mallard import MallardRenderer

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def renderer() -> MallardRenderer:
    """Renderer producing body fragments only."""
    return MallardRenderer(MallardRendererOptions(standalone=False))


@pytest.fixture
def page_renderer() -> MallardRenderer:
    """Renderer producing complete pages."""
    return MallardRenderer()


@pytest.fixture
def sample_document() -> Document:
    """Small titled document with one section."""
    return Document(
        title="User Guide",
        has_header=True,
        attributes={"author": "Ada Lovelace", "firstname": "Ada", "lastname": "Lovelace", "revdate": "2025-01-02"},
        blocks=[Section(id="intro", title="Introduction", blocks=[Paragraph(text="Welcome.")])],
    )
