"""Translator feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class TranslatorSettings(FeatureSettings):
    """Configuration for the translation client.

    Environment Variables:
        TRANSLATOR_BASE_URL: Upstream translate endpoint
        TRANSLATOR_DEFAULT_FROM: Source language when none is given (default: auto)
        TRANSLATOR_DEFAULT_TO: Target language when none is given (default: fr)
        TRANSLATOR_TIMEOUT_SECONDS: Per-request timeout (default: 10)
        TRANSLATOR_MAX_URL_LENGTH: Longest GET URL before switching to POST (default: 2048)
        TRANSLATOR_SEED_URL: Page scraped for the hourly token seed
        TRANSLATOR_SEED_REFRESH_ENABLED: Fetch the seed upstream instead of
            always using the static fallback (default: True)
        TRANSLATOR_USER_AGENT: User-Agent header sent upstream

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        timeout = settings.translator.TRANSLATOR_TIMEOUT_SECONDS
        ```
    """

    TRANSLATOR_BASE_URL: str = Field(
        default="https://translate.google.com/translate_a/single",
        alias="TRANSLATOR_BASE_URL",
    )
    TRANSLATOR_DEFAULT_FROM: str = Field(default="auto", alias="TRANSLATOR_DEFAULT_FROM")
    TRANSLATOR_DEFAULT_TO: str = Field(default="fr", alias="TRANSLATOR_DEFAULT_TO")
    TRANSLATOR_TIMEOUT_SECONDS: float = Field(
        default=10, alias="TRANSLATOR_TIMEOUT_SECONDS"
    )
    TRANSLATOR_MAX_URL_LENGTH: int = Field(
        default=2048, alias="TRANSLATOR_MAX_URL_LENGTH"
    )
    TRANSLATOR_SEED_URL: str = Field(
        default="https://translate.google.com", alias="TRANSLATOR_SEED_URL"
    )
    TRANSLATOR_SEED_REFRESH_ENABLED: bool = Field(
        default=True, alias="TRANSLATOR_SEED_REFRESH_ENABLED"
    )
    TRANSLATOR_USER_AGENT: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
        ),
        alias="TRANSLATOR_USER_AGENT",
    )

    @field_validator("TRANSLATOR_TIMEOUT_SECONDS", "TRANSLATOR_MAX_URL_LENGTH")
    @classmethod
    def _must_be_positive(cls, v):
        """Reject zero or negative limits."""
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v
