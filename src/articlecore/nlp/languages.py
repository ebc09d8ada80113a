"""
Character allow-lists used to count words in languages with non-Latin scripts.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Optional, Pattern

DEFAULT_LANGUAGE = "en"

# Latin letters, digits and whitespace.
DEFAULT_ALLOWED_CHARS = r"a-zA-Z0-9\s"

_ARABIC = r"\u0600-\u06ff\ufb50-\ufdff\ufe70-\ufefe"
_CYRILLIC = r"\u0400-\u04ff"
_DEVANAGARI = r"\u0900-\u097f"
_CJK = r"\u3200-\u32ff\u3300-\u33ff\u3400-\u4db5\u4e00-\u9fff\uf900-\ufaff\ufe30-\ufe4f"

LANGUAGES_UNICODE_CHARS: Dict[str, str] = {
    "am": r"\u1200-\u137f",
    "ar": _ARABIC,
    "as": r"\u0980-\u09ff",
    "az": r"\u0600-\u06ff",
    "ba": _CYRILLIC,
    "be": _CYRILLIC,
    "bg": _CYRILLIC,
    "bh": _DEVANAGARI,
    "bn": r"\u0980-\u09ff",
    "bo": r"\u0f00-\u0fff",
    "bs": _CYRILLIC,
    "ce": _CYRILLIC,
    "cv": _CYRILLIC,
    "dz": r"\u0780-\u07bf\u0f00-\u0fff",
    "el": r"\u0370-\u03ff\u1f00-\u1fff",
    "fa": _ARABIC,
    "gu": r"\u0a80-\u0aff",
    "he": r"\u0590-\u05ff",
    "hi": _DEVANAGARI,
    "hy": r"\u0530-\u058f",
    "ja": r"\u3040-\u309f\u30a0-\u30ff\u3190-\u319f" + _CJK,
    "ka": r"\u10a0-\u10ff",
    "kk": _CYRILLIC,
    "km": r"\u1780-\u17ff",
    "kn": r"\u0c80-\u0cff",
    "ko": r"\u1100-\u11ff\u3130-\u318f\uac00-\ud7a3" + _CJK,
    "ks": _ARABIC,
    "ku": r"\u0600-\u06ff",
    "kv": _CYRILLIC,
    "ky": _CYRILLIC + r"\u0600-\u06ff",
    "lo": r"\u0e80-\u0eff",
    "mk": _CYRILLIC,
    "ml": r"\u0d00-\u0d7f",
    "mn": r"\u1800-\u18af" + _CYRILLIC,
    "mr": _DEVANAGARI,
    "my": r"\u1000-\u109f",
    "ne": _DEVANAGARI,
    "or": r"\u0b00-\u0b7f",
    "os": _CYRILLIC,
    "pa": r"\u0a00-\u0a7f",
    "ps": _ARABIC,
    "ru": _CYRILLIC,
    "sd": r"\ufb50-\ufdff\ufe70-\ufefe",
    "si": r"\u0d80-\u0dff",
    "sr": _CYRILLIC,
    "ta": r"\u0b80-\u0bff",
    "te": r"\u0c00-\u0c7f",
    "tg": _CYRILLIC,
    "th": r"\u0e00-\u0e7f",
    "ti": r"\u1200-\u137f",
    "tk": _CYRILLIC + r"\u0600-\u06ff",
    "tt": _CYRILLIC + _ARABIC,
    "ug": _CYRILLIC + _ARABIC,
    "uk": _CYRILLIC,
    "ur": _ARABIC,
    "uz": _CYRILLIC + r"\u0600-\u06ff",
    "yi": r"\u0590-\u05ff",
    "zh": r"\u3100-\u312f\u31a0-\u31bf\ua000-\ua48f\ua490-\ua4cf" + _CJK,
}


def normalize_language(language: Optional[str]) -> str:
    """Reduce a language tag such as ``pt-BR`` to its two-letter base."""
    if not language:
        return DEFAULT_LANGUAGE
    base = re.split(r"[-_]", language.strip().lower(), maxsplit=1)[0]
    return base[:2] or DEFAULT_LANGUAGE


def language_allowed_chars(language: Optional[str]) -> str:
    """Return the character-class body of characters that form words in ``language``."""
    return LANGUAGES_UNICODE_CHARS.get(normalize_language(language), DEFAULT_ALLOWED_CHARS)


@lru_cache(maxsize=128)
def _separator_pattern(language: str) -> Pattern[str]:
    chars = language_allowed_chars(language)
    # Whitespace always separates words, even for scripts whose ranges omit it.
    return re.compile(f"[^{chars}]|\\s")


def count_words(text: str, language: Optional[str] = None) -> int:
    """Count words in ``text``, treating characters outside the allow-list as separators."""
    if not text:
        return 0
    return len(_separator_pattern(normalize_language(language)).sub(" ", text).split())
