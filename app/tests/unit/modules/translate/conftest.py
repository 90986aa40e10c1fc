"""Fixtures for translator tests.

Provides sample upstream bodies, a transport spy and a translator factory
wired with an in-memory cache and the fallback seed.
"""

from unittest.mock import MagicMock

import pytest

from infrastructure.cache import InMemoryCache
from infrastructure.clients.http import HttpTransport
from infrastructure.configuration import TranslatorSettings
from modules.translate.seed import FALLBACK_SEED, SeedState, StaticSeedSource
from modules.translate.service import Translator
from modules.translate.token import TokenGenerator


def make_body(
    segments=(("Bonjour", "Hello"),),
    detected="en",
    alternate="en",
    correction=None,
):
    """Build an upstream-shaped response body."""
    body = [
        [[translated, original, None, None, 10] for translated, original in segments],
        None,
        detected,
        None,
        None,
        None,
        0.9,
        correction,
        [[alternate], None, [0.9], [alternate]],
    ]
    return body


@pytest.fixture
def sample_body():
    """Plain en -> fr response for "Hello"."""
    return make_body()


@pytest.fixture
def body_factory():
    """Factory for custom response bodies."""
    return make_body


@pytest.fixture
def transport(sample_body):
    """Transport spy returning the sample body."""
    spy = MagicMock(spec=HttpTransport)
    spy.request.return_value = sample_body
    return spy


@pytest.fixture
def translator_settings():
    return TranslatorSettings()


@pytest.fixture
def token_generator():
    return TokenGenerator(SeedState(StaticSeedSource(FALLBACK_SEED)))


@pytest.fixture
def translator_factory(transport, token_generator, translator_settings):
    """Factory creating Translator instances with injectable parts."""

    def _factory(**overrides):
        parts = {
            "transport": transport,
            "cache": InMemoryCache(),
            "token_generator": token_generator,
            "settings": translator_settings,
        }
        parts.update(overrides)
        return Translator(**parts)

    return _factory
