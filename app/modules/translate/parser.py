"""Parser for the upstream nested-array response.

Indices used:
    [0]       translated segments, each ``[translated, original, ...]``
    [2]       detected source language
    [7]       spelling correction ``[html, plain, ..., ..., ..., auto_corrected]``
    [8][0][0] alternate detected source language
"""

from typing import Any, Sequence

from modules.translate.exceptions import ResponseParseError
from modules.translate.models import TranslationResult


def _format_correction(html: str) -> str:
    return html.replace("<b><i>", "[").replace("</i></b>", "]")


def _parse(body: Sequence[Any], raw: bool) -> TranslationResult:
    result = TranslationResult()
    if raw:
        result.raw = body

    result.text = "".join(segment[0] for segment in body[0] if segment and segment[0])

    detected = body[2]
    alternate = body[8][0][0]
    if detected == alternate:
        result.from_.language.iso = detected
    else:
        result.from_.language.did_you_mean = True
        result.from_.language.iso = alternate

    correction = body[7] if len(body) > 7 else None
    if correction and correction[0]:
        result.from_.text.value = _format_correction(correction[0])
        if len(correction) > 5 and correction[5] is True:
            result.from_.text.auto_corrected = True
        else:
            result.from_.text.did_you_mean = True

    return result


def parse_response(body: Any, raw: bool = False) -> TranslationResult:
    """Parse an upstream body into a TranslationResult.

    Args:
        body: Decoded JSON body
        raw: Keep the body on the result

    Raises:
        ResponseParseError: If the body does not have the expected shape
    """
    try:
        return _parse(body, raw)
    except (IndexError, KeyError, TypeError, AttributeError) as e:
        raise ResponseParseError(f"Unexpected translate response: {e}") from e
