"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from structcopy import AccessorCache, ObjectWriter, WriterSettings


@pytest.fixture
def cache():
    """Fresh AccessorCache instance."""
    return AccessorCache()


@pytest.fixture
def settings():
    """Default settings, ignoring any .env file."""
    return WriterSettings(_env_file=None)


@pytest.fixture
def writer(cache, settings):
    """ObjectWriter with its own cache."""
    return ObjectWriter(cache=cache, settings=settings)
