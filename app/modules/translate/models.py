"""Translation data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LanguageInfo:
    """Detected source language.

    Attributes:
        did_you_mean: True when upstream's alternate detection disagrees with
            its primary detection; ``iso`` then holds the alternate
        iso: Detected language code
    """

    did_you_mean: bool = False
    iso: str = ""


@dataclass
class TextInfo:
    """Spelling correction of the input text.

    Attributes:
        auto_corrected: Upstream translated the corrected text instead
        value: Corrected text, corrections wrapped in ``[...]``
        did_you_mean: A correction was only suggested
    """

    auto_corrected: bool = False
    value: str = ""
    did_you_mean: bool = False


@dataclass
class SourceInfo:
    language: LanguageInfo = field(default_factory=LanguageInfo)
    text: TextInfo = field(default_factory=TextInfo)


@dataclass
class TranslationResult:
    """Structured translation result.

    Attributes:
        text: Translated text
        from_: What upstream detected about the input
        raw: Upstream body when requested, else empty string
    """

    text: str = ""
    from_: SourceInfo = field(default_factory=SourceInfo)
    raw: Any = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase shape used by JSON consumers."""
        return {
            "text": self.text,
            "from": {
                "language": {
                    "didYouMean": self.from_.language.did_you_mean,
                    "iso": self.from_.language.iso,
                },
                "text": {
                    "autoCorrected": self.from_.text.auto_corrected,
                    "value": self.from_.text.value,
                    "didYouMean": self.from_.text.did_you_mean,
                },
            },
            "raw": self.raw,
        }


@dataclass
class TranslationRequest:
    """Outbound request ready for the transport.

    Attributes:
        url: Full URL with query string
        method: GET, or POST when the text moved into the body
        body: Form-encoded body for POST
        headers: Extra headers for POST
    """

    url: str
    method: str = "GET"
    body: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
