"""Shared fixtures for the whole test suite."""

import pytest

from infrastructure.cache import reset_cache
from modules.translate import reset_translator


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a fresh cache and translator singleton."""
    reset_cache()
    reset_translator()
    yield
    reset_cache()
    reset_translator()
