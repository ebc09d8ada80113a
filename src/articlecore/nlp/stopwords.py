"""
Stop word counting used as the primary content signal.

The scoring engine only needs a tokenizer and a membership test per language.
Both sit behind ``StopWordsProvider`` so callers can plug in a richer
tokenizer (CJK segmentation, stemming) without touching the engine.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet, List, Optional, Protocol, runtime_checkable

import structlog

from .languages import DEFAULT_LANGUAGE, normalize_language
from .stopword_lists import STOPWORDS

logger = structlog.get_logger(__name__)

_PUNCTUATION_RE = re.compile(r"[^\w\s]", re.UNICODE)


@dataclass
class WordStats:
    """Stop word and word counts for a piece of text."""

    stop_word_count: int = 0
    word_count: int = 0
    stop_words: List[str] = field(default_factory=list)


@runtime_checkable
class StopWordsProvider(Protocol):
    """Per-language tokenizer and stop word membership test."""

    language: str

    def tokenize(self, text: str) -> List[str]:
        ...

    def is_stopword(self, word: str) -> bool:
        ...

    def get_stopword_count(self, text: str) -> WordStats:
        ...


class StopWords:
    """Stop word provider backed by the bundled word lists.

    Unknown languages fall back to English.
    """

    def __init__(self, language: Optional[str] = None, extra_words: Optional[FrozenSet[str]] = None) -> None:
        requested = normalize_language(language)
        if requested not in STOPWORDS:
            logger.debug("No stop words for language, using English", language=requested)
            requested = DEFAULT_LANGUAGE
        self.language = requested
        words = STOPWORDS[requested]
        if extra_words:
            words = words | frozenset(w.lower() for w in extra_words)
        self.stop_words: FrozenSet[str] = words

    def tokenize(self, text: str) -> List[str]:
        """Split ``text`` into words after replacing punctuation by spaces."""
        if not text:
            return []
        return _PUNCTUATION_RE.sub(" ", text).split()

    def is_stopword(self, word: str) -> bool:
        return word.lower() in self.stop_words

    def get_stopword_count(self, text: str) -> WordStats:
        tokens = self.tokenize(text)
        overlap = [token for token in tokens if self.is_stopword(token)]
        return WordStats(stop_word_count=len(overlap), word_count=len(tokens), stop_words=overlap)


@lru_cache(maxsize=64)
def get_stopwords(language: Optional[str] = None) -> StopWords:
    """Return a shared, read-only provider for ``language``."""
    return StopWords(language)
