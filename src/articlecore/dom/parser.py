"""
Parsing, serialisation and node construction helpers built on BeautifulSoup.
"""

from __future__ import annotations

import copy
import re
from typing import Optional

import structlog
from bs4 import BeautifulSoup, Tag

logger = structlog.get_logger(__name__)

DEFAULT_PARSER = "lxml"

_XML_DECLARATION_RE = re.compile(r"<\?.*?\?>", re.DOTALL)


class InvalidDocumentError(ValueError):
    """Raised when the input cannot be treated as an HTML document."""

    pass


def from_string(html: str | bytes, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse ``html`` into a document tree.

    Malformed markup is repaired by the tree builder; only input that is not
    text at all is rejected.
    """
    if html is None:
        raise InvalidDocumentError("document is None")
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    if not isinstance(html, str):
        raise InvalidDocumentError(f"expected HTML text, got {type(html).__name__}")

    if html.lstrip().startswith("<?"):
        html = _XML_DECLARATION_RE.sub("", html)

    return BeautifulSoup(html, parser)


def new_document(parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Create an empty ``<html><body></body></html>`` document."""
    return BeautifulSoup("<html><body></body></html>", parser)


def clone(node: Tag) -> Tag:
    """Return a deep copy of ``node`` that is detached from its tree."""
    return copy.copy(node)


def create_element(tag: str, text: Optional[str] = None, document: Optional[BeautifulSoup] = None) -> Tag:
    """Create a detached element holding ``text`` as its only child."""
    owner = document if document is not None else BeautifulSoup("", "html.parser")
    element = owner.new_tag(tag)
    if text:
        element.string = text
    return element


def outer_html(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return str(node)


def is_document(node: object) -> bool:
    return isinstance(node, BeautifulSoup)


def ensure_document(doc: object) -> BeautifulSoup:
    """Reject handles the engine cannot work on."""
    if doc is None:
        raise InvalidDocumentError("document is None")
    if not isinstance(doc, BeautifulSoup):
        raise InvalidDocumentError(f"expected a parsed document, got {type(doc).__name__}")
    return doc
