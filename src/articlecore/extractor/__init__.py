"""
Article body extraction.
"""

from .article_extractor import ArticleExtractor
from .body_extractor import BodyExtractor, matches_signature
from .models import BodyResult, ExtractResult
from .protocols import Extractor

__all__ = [
    "ArticleExtractor",
    "BodyExtractor",
    "BodyResult",
    "ExtractResult",
    "Extractor",
    "matches_signature",
]
