"""
articlecore - main content extraction for news article pages.
"""

__version__ = "0.1.0"

from .cleaner import DocumentCleaner
from .config import Config, ExtractionConfig, settings
from .dom import InvalidDocumentError, from_string
from .extractor import ArticleExtractor, BodyExtractor, ExtractResult

__all__ = [
    "ArticleExtractor",
    "BodyExtractor",
    "Config",
    "DocumentCleaner",
    "ExtractResult",
    "ExtractionConfig",
    "InvalidDocumentError",
    "from_string",
    "settings",
    "__version__",
]
