"""
Protocols for article body extraction engines.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bs4 import BeautifulSoup

from .models import ExtractResult


@runtime_checkable
class Extractor(Protocol):
    """Engine that turns one news page into its main article body."""

    name: str

    async def extract(
        self, html: str | bytes, *, url: str | None = None, language: str | None = None
    ) -> ExtractResult:
        """Extract the article body without blocking the event loop.

        Args:
            html: Page markup, as text or undecoded bytes
            url: Optional URL, only used for logging and the result
            language: Optional language code overriding the configured one

        Returns:
            ExtractResult with the article text and markup
        """
        ...

    def extract_sync(
        self,
        html: str | bytes | BeautifulSoup,
        *,
        url: str | None = None,
        language: str | None = None,
    ) -> ExtractResult:
        """Extract the article body on the calling thread."""
        ...
