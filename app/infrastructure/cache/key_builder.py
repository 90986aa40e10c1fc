"""Cache key builder for consistent key generation."""


class CacheKeyBuilder:
    """Build deterministic cache keys.

    Language codes may themselves contain the separator (``zh-tw``), so each
    language part is prefixed with its length. Text is the last part and
    needs no prefix.

    Example:
        >>> CacheKeyBuilder.translation("auto", "fr", "hello")
        '4:auto-2:fr-hello'
    """

    SEPARATOR = "-"

    @staticmethod
    def _prefixed(part: str) -> str:
        return f"{len(part)}:{part}"

    @classmethod
    def translation(cls, source: str, target: str, text: str) -> str:
        """Build the key for one (source, target, text) triple.

        Args:
            source: Requested source language as given by the caller.
            target: Requested target language as given by the caller.
            text: Input text.

        Returns:
            Cache key string, distinct for every distinct triple
        """
        return cls.SEPARATOR.join(
            [cls._prefixed(source), cls._prefixed(target), text]
        )
