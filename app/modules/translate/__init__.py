"""Translation client.

Usage:

    from modules.translate import translate, load_languages

    result = translate("Ik spreek Engels", to_lang="en")
    result.text                      # "I speak English"
    result.from_.language.iso        # "nl"

    load_languages(["fr", "de"], ["hello", "goodbye"])
"""

from modules.translate import languages
from modules.translate.exceptions import (
    InvalidArgumentError,
    ResponseParseError,
    TranslatorError,
    UnsupportedLanguageError,
)
from modules.translate.models import (
    LanguageInfo,
    SourceInfo,
    TextInfo,
    TranslationRequest,
    TranslationResult,
)
from modules.translate.seed import FALLBACK_SEED, SeedPair, SeedState
from modules.translate.service import (
    Translator,
    get_translator,
    load_languages,
    reset_translator,
    translate,
)
from modules.translate.token import Token, TokenGenerator, generate_token

__all__ = [
    "languages",
    "translate",
    "load_languages",
    "Translator",
    "get_translator",
    "reset_translator",
    "TranslationResult",
    "TranslationRequest",
    "SourceInfo",
    "LanguageInfo",
    "TextInfo",
    "Token",
    "TokenGenerator",
    "generate_token",
    "SeedPair",
    "SeedState",
    "FALLBACK_SEED",
    "TranslatorError",
    "UnsupportedLanguageError",
    "InvalidArgumentError",
    "ResponseParseError",
]
