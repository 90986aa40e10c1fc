"""
Translation service.

Validates languages, consults the result cache, signs and sends the upstream
request, and parses the response. Calls are sequential; batch loading
translates one (language, word) pair at a time so upstream rate limits are
respected.

No retries: transport errors (``requests.RequestException``) propagate to
the caller unchanged.
"""

from typing import Any, Dict, Optional, Sequence

import requests

from infrastructure.cache import CacheKeyBuilder, TranslationCache, get_cache
from infrastructure.clients.http import HttpTransport
from infrastructure.configuration import TranslatorSettings
from infrastructure.logging import get_module_logger
from infrastructure.services import get_http_transport, get_settings
from modules.translate import languages
from modules.translate.exceptions import InvalidArgumentError, UnsupportedLanguageError
from modules.translate.models import TranslationResult
from modules.translate.parser import parse_response
from modules.translate.request import build_request
from modules.translate.seed import HttpSeedSource, SeedState, StaticSeedSource
from modules.translate.token import TokenGenerator

logger = get_module_logger()


class Translator:
    """Translation client with result caching.

    Attributes:
        settings: Translator settings (endpoint, defaults, limits)
    """

    def __init__(
        self,
        transport: HttpTransport,
        cache: TranslationCache,
        token_generator: TokenGenerator,
        settings: Optional[TranslatorSettings] = None,
    ):
        self._transport = transport
        self._cache = cache
        self._token_generator = token_generator
        self.settings = settings or get_settings().translator

    def translate(
        self,
        text: Any,
        from_lang: Optional[str] = None,
        to_lang: Optional[str] = None,
        raw: bool = False,
    ) -> TranslationResult:
        """Translate text.

        Args:
            text: Input text (converted with str())
            from_lang: Source language code or name; auto-detected when unset
            to_lang: Target language code or name; settings default when unset
            raw: Attach the upstream body to the result

        Returns:
            TranslationResult, possibly served from cache

        Raises:
            UnsupportedLanguageError: If from_lang or to_lang is unknown
            ResponseParseError: If the upstream body has an unexpected shape
            requests.RequestException: On transport failure
        """
        text = str(text)

        for lang in (from_lang, to_lang):
            if lang and not languages.is_supported(lang):
                raise UnsupportedLanguageError(lang)

        source = from_lang or self.settings.TRANSLATOR_DEFAULT_FROM
        target = to_lang or self.settings.TRANSLATOR_DEFAULT_TO
        cache_key = CacheKeyBuilder.translation(source, target, text)
        log = logger.bind(source=source, target=target, text_length=len(text))

        cached = self._cache.get(cache_key)
        if cached is not None:
            log.debug("translation_cache_hit")
            return cached

        source_iso = languages.get_iso_code(source)
        target_iso = languages.get_iso_code(target)
        token = self._token_generator.generate(text)

        request = build_request(
            text,
            source_iso,
            target_iso,
            token,
            base_url=self.settings.TRANSLATOR_BASE_URL,
            max_url_length=self.settings.TRANSLATOR_MAX_URL_LENGTH,
        )
        body = self._transport.request(
            request.url,
            method=request.method,
            body=request.body,
            headers=request.headers or None,
        )
        result = parse_response(body, raw=bool(raw))

        self._cache.set(cache_key, result)
        log.info(
            "translation_fetched",
            method=request.method,
            detected=result.from_.language.iso,
        )
        return result

    def load_languages(
        self,
        languages_to_load: Sequence[str],
        words_to_load: Sequence[str],
    ) -> Dict[str, Dict[str, str]]:
        """Pre-warm the cache for every (language, word) combination.

        Args:
            languages_to_load: Target languages
            words_to_load: Words or phrases translated into each language

        Returns:
            Mapping language -> word -> translated text

        Raises:
            InvalidArgumentError: If either argument is not a list or tuple
            UnsupportedLanguageError: On the first unknown language; the
                batch stops there
        """
        if not isinstance(languages_to_load, (list, tuple)) or not isinstance(
            words_to_load, (list, tuple)
        ):
            raise InvalidArgumentError("Parameters must be lists or tuples")

        translations: Dict[str, Dict[str, str]] = {}
        for lang in languages_to_load:
            if not languages.is_supported(lang):
                raise UnsupportedLanguageError(
                    lang, f"Language '{lang}' is not supported"
                )
            translations[lang] = {}

            for word in words_to_load:
                result = self.translate(word, to_lang=lang)
                translations[lang][word] = result.text

        loaded = ", ".join(str(lang) for lang in languages_to_load)
        logger.info(
            "languages_loaded",
            languages=loaded,
            word_count=len(words_to_load),
            message=f'The languages "{loaded}" have been loaded successfully.',
        )
        return translations


# Singleton translator instance
_translator: Optional[Translator] = None


def build_seed_state(
    settings: TranslatorSettings,
    session: Optional[requests.Session] = None,
) -> SeedState:
    """Seed state scraping upstream, or pinned to the fallback when disabled.

    Args:
        settings: Translator settings
        session: Shared HTTP session; a new one with the configured
            User-Agent when unset
    """
    if settings.TRANSLATOR_SEED_REFRESH_ENABLED:
        source = HttpSeedSource(
            settings.TRANSLATOR_SEED_URL,
            timeout=settings.TRANSLATOR_TIMEOUT_SECONDS,
            session=session,
            user_agent=None if session is not None else settings.TRANSLATOR_USER_AGENT,
        )
    else:
        source = StaticSeedSource()
    return SeedState(source=source)


def get_translator() -> Translator:
    """Get the process-wide translator, building it on first use."""
    global _translator

    if _translator is not None:
        return _translator

    settings = get_settings().translator
    transport = get_http_transport()
    _translator = Translator(
        transport=transport,
        cache=get_cache(),
        token_generator=TokenGenerator(build_seed_state(settings, transport.session)),
        settings=settings,
    )
    logger.info("initialized_translator", base_url=settings.TRANSLATOR_BASE_URL)
    return _translator


def reset_translator() -> None:
    """Reset the translator singleton (for testing only)."""
    global _translator
    _translator = None


def translate(
    text: Any,
    from_lang: Optional[str] = None,
    to_lang: Optional[str] = None,
    raw: bool = False,
) -> TranslationResult:
    """Translate text with the process-wide translator."""
    return get_translator().translate(text, from_lang=from_lang, to_lang=to_lang, raw=raw)


def load_languages(
    languages_to_load: Sequence[str],
    words_to_load: Sequence[str],
) -> Dict[str, Dict[str, str]]:
    """Pre-warm the process-wide translator's cache."""
    return get_translator().load_languages(languages_to_load, words_to_load)
