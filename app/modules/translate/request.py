"""Upstream request construction."""

from urllib.parse import quote, urlencode

from modules.translate.models import TranslationRequest
from modules.translate.token import Token

MAX_URL_LENGTH = 2048

# Response sections requested from the endpoint
DT_PARAMS = ("at", "bd", "ex", "ld", "md", "qca", "rw", "rm", "ss", "t")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"


def build_query(text: str, source: str, target: str, token: Token) -> dict:
    """Query parameters for one translation, in upstream order."""
    return {
        "client": "gtx",
        "sl": source,
        "tl": target,
        "hl": target,
        "dt": list(DT_PARAMS),
        "ie": "UTF-8",
        "oe": "UTF-8",
        "otf": 1,
        "ssel": 0,
        "tsel": 0,
        "kc": 7,
        "q": text,
        token.name: token.value,
    }


def _encode(params: dict) -> str:
    return urlencode(params, doseq=True, quote_via=quote)


def build_request(
    text: str,
    source: str,
    target: str,
    token: Token,
    base_url: str,
    max_url_length: int = MAX_URL_LENGTH,
) -> TranslationRequest:
    """Build a GET request, or a POST when the URL would be too long.

    A POST drops ``q`` from the query string and sends it form-encoded in
    the body instead.

    Args:
        text: Input text
        source: Resolved source code
        target: Resolved target code
        token: Signing token
        base_url: Endpoint URL without query string
        max_url_length: Longest URL still sent as GET

    Returns:
        TranslationRequest
    """
    params = build_query(text, source, target, token)
    url = f"{base_url}?{_encode(params)}"
    if len(url) <= max_url_length:
        return TranslationRequest(url=url)

    del params["q"]
    return TranslationRequest(
        url=f"{base_url}?{_encode(params)}",
        method="POST",
        body=urlencode({"q": text}),
        headers={"Content-Type": FORM_CONTENT_TYPE},
    )
