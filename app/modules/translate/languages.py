"""Languages supported by the upstream translate endpoint.

Lookups accept an ISO 639-1 code ("fr"), a regional code the endpoint uses
("zh-cn"), a common alias ("zh", "he") or the English language name
("French"), all case-insensitive.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from modules.translate.exceptions import UnsupportedLanguageError

LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "auto": "Automatic",
        "af": "Afrikaans",
        "sq": "Albanian",
        "am": "Amharic",
        "ar": "Arabic",
        "hy": "Armenian",
        "az": "Azerbaijani",
        "eu": "Basque",
        "be": "Belarusian",
        "bn": "Bengali",
        "bs": "Bosnian",
        "bg": "Bulgarian",
        "ca": "Catalan",
        "ceb": "Cebuano",
        "ny": "Chichewa",
        "zh-cn": "Chinese Simplified",
        "zh-tw": "Chinese Traditional",
        "co": "Corsican",
        "hr": "Croatian",
        "cs": "Czech",
        "da": "Danish",
        "nl": "Dutch",
        "en": "English",
        "eo": "Esperanto",
        "et": "Estonian",
        "tl": "Filipino",
        "fi": "Finnish",
        "fr": "French",
        "fy": "Frisian",
        "gl": "Galician",
        "ka": "Georgian",
        "de": "German",
        "el": "Greek",
        "gu": "Gujarati",
        "ht": "Haitian Creole",
        "ha": "Hausa",
        "haw": "Hawaiian",
        "iw": "Hebrew",
        "hi": "Hindi",
        "hmn": "Hmong",
        "hu": "Hungarian",
        "is": "Icelandic",
        "ig": "Igbo",
        "id": "Indonesian",
        "ga": "Irish",
        "it": "Italian",
        "ja": "Japanese",
        "jw": "Javanese",
        "kn": "Kannada",
        "kk": "Kazakh",
        "km": "Khmer",
        "ko": "Korean",
        "ku": "Kurdish (Kurmanji)",
        "ky": "Kyrgyz",
        "lo": "Lao",
        "la": "Latin",
        "lv": "Latvian",
        "lt": "Lithuanian",
        "lb": "Luxembourgish",
        "mk": "Macedonian",
        "mg": "Malagasy",
        "ms": "Malay",
        "ml": "Malayalam",
        "mt": "Maltese",
        "mi": "Maori",
        "mr": "Marathi",
        "mn": "Mongolian",
        "my": "Myanmar (Burmese)",
        "ne": "Nepali",
        "no": "Norwegian",
        "ps": "Pashto",
        "fa": "Persian",
        "pl": "Polish",
        "pt": "Portuguese",
        "pa": "Punjabi",
        "ro": "Romanian",
        "ru": "Russian",
        "sm": "Samoan",
        "gd": "Scots Gaelic",
        "sr": "Serbian",
        "st": "Sesotho",
        "sn": "Shona",
        "sd": "Sindhi",
        "si": "Sinhala",
        "sk": "Slovak",
        "sl": "Slovenian",
        "so": "Somali",
        "es": "Spanish",
        "su": "Sundanese",
        "sw": "Swahili",
        "sv": "Swedish",
        "tg": "Tajik",
        "ta": "Tamil",
        "te": "Telugu",
        "th": "Thai",
        "tr": "Turkish",
        "uk": "Ukrainian",
        "ur": "Urdu",
        "uz": "Uzbek",
        "vi": "Vietnamese",
        "cy": "Welsh",
        "xh": "Xhosa",
        "yi": "Yiddish",
        "yo": "Yoruba",
        "zu": "Zulu",
    }
)

# Codes callers commonly use that the endpoint knows under another code
ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "zh": "zh-cn",
        "he": "iw",
        "jv": "jw",
        "fil": "tl",
        "nb": "no",
    }
)

_NAMES = {name.lower(): code for code, name in LANGUAGES.items()}


def get_code(desired: Optional[str]) -> Optional[str]:
    """Return the canonical code for a code, alias or language name.

    Args:
        desired: e.g. "fr", "FR", "zh", "French"

    Returns:
        Canonical code, or None when empty or unknown
    """
    if not desired or not isinstance(desired, str):
        return None

    key = desired.strip().lower()
    if key in LANGUAGES:
        return key
    if key in ALIASES:
        return ALIASES[key]
    return _NAMES.get(key)


def is_supported(desired: Optional[str]) -> bool:
    """Whether the endpoint accepts this language."""
    return get_code(desired) is not None


def get_iso_code(desired: str) -> str:
    """Return the canonical code.

    Raises:
        UnsupportedLanguageError: If the language is unknown
    """
    code = get_code(desired)
    if code is None:
        raise UnsupportedLanguageError(desired)
    return code
