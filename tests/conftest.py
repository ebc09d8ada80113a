"""
Test configuration for articlecore.

Provides shared fixtures for sample documents, configuration and a stop
word provider with predictable counts.
"""

from __future__ import annotations

import pytest
import structlog

from articlecore.config import ExtractionConfig

from tests.helpers import ARTICLE_HTML, ARTICLE_PARAGRAPHS, EveryWordStopWords

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def every_word_stopwords():
    """Provide a stop word provider counting every word."""
    return EveryWordStopWords()


@pytest.fixture
def extraction_config():
    """Provide default extraction configuration."""
    return ExtractionConfig()


@pytest.fixture
def article_html():
    """Provide a small news page with navigation and three paragraphs."""
    return ARTICLE_HTML


@pytest.fixture
def article_paragraphs():
    """Provide the paragraph texts of ``article_html``."""
    return list(ARTICLE_PARAGRAPHS)
