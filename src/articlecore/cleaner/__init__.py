"""
Article node cleaning.
"""

from .document_cleaner import DocumentCleaner

__all__ = ["DocumentCleaner"]
