"""Language resources: stop words and per-script word counting."""

from .languages import DEFAULT_LANGUAGE, count_words, language_allowed_chars, normalize_language
from .stopwords import StopWords, StopWordsProvider, WordStats, get_stopwords

__all__ = [
    "DEFAULT_LANGUAGE",
    "StopWords",
    "StopWordsProvider",
    "WordStats",
    "count_words",
    "get_stopwords",
    "language_allowed_chars",
    "normalize_language",
]
