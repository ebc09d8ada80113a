"""
End-to-end article extraction: parse, locate the body, clean and render it.
"""

from __future__ import annotations

import asyncio
import time
from typing import Dict, Optional

import structlog
from bs4 import BeautifulSoup, Tag

from articlecore.cleaner import DocumentCleaner
from articlecore.config.config import ExtractionConfig, settings
from articlecore.dom.parser import InvalidDocumentError, from_string, outer_html
from articlecore.dom.query import get_block_texts
from articlecore.nlp.languages import normalize_language
from articlecore.nlp.stopwords import StopWordsProvider
from articlecore.observability import histogram, increment

from .body_extractor import BodyExtractor
from .models import ExtractResult
from .protocols import Extractor

logger = structlog.get_logger(__name__)


class ArticleExtractor(Extractor):
    """Gravity-scoring extractor producing cleaned article text and markup."""

    name = "gravity"

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        stopwords: Optional[StopWordsProvider] = None,
        *,
        metrics_enabled: bool = True,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.stopwords = stopwords
        self.metrics_enabled = metrics_enabled
        self.cleaner = DocumentCleaner(self.config.cleaner)
        self._body_extractors: Dict[str, BodyExtractor] = {}
        self.logger = logger.bind(component="ArticleExtractor")

    @classmethod
    def from_settings(cls) -> ArticleExtractor:
        """Build an extractor from the lazily loaded application settings."""
        return cls(settings.extraction, metrics_enabled=settings.monitoring.metrics_enabled)

    def body_extractor(self, language: Optional[str] = None) -> BodyExtractor:
        """Return the cached body extractor for ``language``."""
        if self.stopwords is not None and language is None:
            language = self.stopwords.language
        language = normalize_language(language or self.config.language)
        extractor = self._body_extractors.get(language)
        if extractor is None:
            stopwords = self.stopwords if self.stopwords is not None and self.stopwords.language == language else None
            extractor = BodyExtractor(self.config, stopwords=stopwords, language=language)
            self._body_extractors[language] = extractor
        return extractor

    async def extract(
        self, html: str | bytes, *, url: str | None = None, language: str | None = None
    ) -> ExtractResult:
        """Extract the article body in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: self.extract_sync(html, url=url, language=language))

    def extract_sync(
        self,
        html: str | bytes | BeautifulSoup,
        *,
        url: str | None = None,
        language: str | None = None,
    ) -> ExtractResult:
        """Synchronous extraction; raises ``InvalidDocumentError`` for unusable input."""
        start_time = time.perf_counter()
        with structlog.contextvars.bound_contextvars(document_url=url):
            try:
                doc = html if isinstance(html, BeautifulSoup) else from_string(html, self.config.parser)
            except InvalidDocumentError:
                self._record("invalid", start_time)
                self.logger.warning("Rejected input that is not an HTML document", input_type=type(html).__name__)
                raise

            body_extractor = self.body_extractor(language)
            body = body_extractor.parse(doc)

            node = body.top_node_complemented
            if node is not None and self.config.clean_top_node:
                node = self.cleaner.clean(node)

            text = self.node_to_text(node)
            result = ExtractResult(
                url=url,
                text=text,
                html=outer_html(node),
                language=body_extractor.language,
                candidate_count=len(body.candidates),
                best_score=body.best_score,
            )

            self._record("success" if text else "empty", start_time, len(body.candidates))
            self.logger.debug(
                "Article extracted",
                candidates=result.candidate_count,
                best_score=result.best_score,
                text_length=len(text),
            )
            return result

    def node_to_text(self, node: Optional[Tag]) -> str:
        """Render ``node`` as plain text with one paragraph per block element."""
        if node is None:
            return ""
        return self.cleaner.clean_whitespace("\n".join(get_block_texts(node)))

    def _record(self, outcome: str, start_time: float, candidate_count: Optional[int] = None) -> None:
        if not self.metrics_enabled:
            return
        increment("extractions_total", labels={"outcome": outcome})
        histogram("extraction_duration_seconds", time.perf_counter() - start_time)
        if candidate_count is not None:
            histogram("candidate_nodes", candidate_count)
