"""Shared pytest fixtures for the full Text Statistics test suite."""

from __future__ import annotations

import pytest

_SAMPLE_HTML_TEXT = "<p>this is a test delicious</p><br />I hope THIS works!"


@pytest.fixture
def sample_html_text() -> str:
    """Provide the canonical markup sample with a block tag and mixed case."""

    return _SAMPLE_HTML_TEXT


@pytest.fixture
def simple_sentence() -> str:
    """Provide a one-sentence text made of one-syllable words."""

    return "The cat sat on the mat."
