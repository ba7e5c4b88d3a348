"""Pytest configuration and fixtures for tracerr tests."""

import pytest

from tracerr import Renderer, SourceLineCache


@pytest.fixture
def cache():
    """Create an isolated source line cache."""
    return SourceLineCache()


@pytest.fixture
def renderer(cache):
    """Create a Renderer backed by an isolated cache."""
    return Renderer(cache)
