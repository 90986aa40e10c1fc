"""Translator exceptions.

Transport failures are not wrapped: ``requests.RequestException`` reaches
the caller as raised by the HTTP layer.
"""

from typing import Optional


class TranslatorError(Exception):
    """Base exception for all translator errors."""

    pass


class UnsupportedLanguageError(TranslatorError, ValueError):
    """Raised when a language code or name is not in the language table.

    Recoverable: the caller has to fix its input. Carries an HTTP-style
    ``code`` of 400.

    Example:
        >>> translate("hello", to_lang="xx")
        Traceback (most recent call last):
        ...
        UnsupportedLanguageError: The language 'xx' is not supported.
    """

    code = 400

    def __init__(self, language: Optional[str], message: Optional[str] = None):
        self.language = language
        super().__init__(message or f"The language '{language}' is not supported.")


class InvalidArgumentError(TranslatorError, TypeError):
    """Raised when batch inputs are not lists or tuples."""

    pass


class ResponseParseError(TranslatorError, RuntimeError):
    """Raised when the upstream response does not have the expected shape."""

    pass
