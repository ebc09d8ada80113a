"""
Structural pruning of extracted article nodes.

Every pass mutates the given node in place and is idempotent, so the whole
pipeline can be re-applied without further changes to the tree.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List, Optional, Pattern

import structlog
from bs4 import Comment, Tag

from articlecore.config.config import CleanerConfig
from articlecore.constants import DROP_CAP_CLASSES
from articlecore.dom.query import get_attribute

logger = structlog.get_logger(__name__)


def _self_and_descendants(node: Tag, name: Optional[str | List[str]] = None) -> List[Tag]:
    """``node`` itself (when it matches ``name``) followed by its matching descendants."""
    names = [name] if isinstance(name, str) else name
    found = list(node.find_all(name if name else True))
    if names is None or node.name in names:
        return [node] + found
    return found


def _alive(node: Tag) -> bool:
    return not node.decomposed


def _is_article_marker(element: Tag) -> bool:
    if element.name == "article" or element.get("id") == "article":
        return True
    return "articlebody" in (get_attribute(element, "itemprop") or "").lower()


def _contains_article(node: Tag) -> bool:
    return node.find(_is_article_marker) is not None


class DocumentCleaner:
    """
    Removes boilerplate from an article node.

    Features:
    - Attribute scrubbing on <body> and <article>
    - Script, style and comment removal
    - Regex-driven removal of navigation, social, ad and consent widgets
    - Figure collapsing that keeps the contained images
    - Final pruning of empty non-content tags
    """

    def __init__(self, config: Optional[CleanerConfig] = None) -> None:
        self.config = config or CleanerConfig()
        self.logger = logger.bind(component="DocumentCleaner")

        self.remove_nodes_re = re.compile(self.config.remove_nodes_pattern)
        self.remove_nodes_related_re = re.compile(self.config.related_nodes_pattern)
        self.caption_re = re.compile(self.config.caption_pattern)
        self.google_re = re.compile(self.config.google_pattern)
        self.entries_re = re.compile(self.config.entries_pattern)
        self.facebook_re = re.compile(self.config.facebook_pattern)
        self.facebook_broadcasting_re = re.compile(self.config.facebook_broadcasting_pattern)
        self.twitter_re = re.compile(self.config.twitter_pattern)
        self.consent_re = re.compile(self.config.consent_pattern)

    def clean(self, node: Tag) -> Tag:
        """Run every cleaning pass, in order, on ``node`` and return it."""
        node = self.clean_body_classes(node)
        node = self.clean_article_tags(node)
        node = self.clean_em_tags(node)
        node = self.remove_drop_caps(node)
        node = self.remove_scripts_styles(node)
        node = self.clean_bad_tags(node)
        node = self.clean_caption_tags(node)

        node = self.remove_nodes_regex(node, self.google_re)
        node = self.remove_nodes_regex(node, self.entries_re)

        # Social media cards
        node = self.remove_nodes_regex(node, self.facebook_re)
        node = self.remove_nodes_regex(node, self.twitter_re)
        node = self.remove_nodes_regex(node, self.facebook_broadcasting_re)

        # Cookie, consent and GDPR banners
        node = self.remove_nodes_regex(node, self.consent_re)

        node = self.remove_nodes_regex(node, self.remove_nodes_related_re)

        # Containers spared for an article that a later pass removed
        node = self.remove_bad_ids_and_classes(node)

        node = self.clean_para_spans(node)
        node = self.reduce_article(node)
        return node

    @staticmethod
    def clean_whitespace(text: str) -> str:
        """Replace tabs, drop blank lines and separate the remaining lines by blank lines."""
        text = text.replace("\t", " ")
        lines = (line.strip() for line in text.split("\n"))
        return "\n\n".join(line for line in lines if line)

    # --- Passes ---

    def clean_body_classes(self, node: Tag) -> Tag:
        for body in _self_and_descendants(node, "body"):
            body.attrs.pop("class", None)
        return node

    def clean_article_tags(self, node: Tag) -> Tag:
        for article in _self_and_descendants(node, "article"):
            for attr in ("id", "name", "class"):
                article.attrs.pop(attr, None)
        return node

    def clean_em_tags(self, node: Tag) -> Tag:
        for em in node.find_all("em"):
            if em.find("img") is None:
                em.unwrap()
        return node

    def remove_drop_caps(self, node: Tag) -> Tag:
        for span in node.find_all("span"):
            classes = (get_attribute(span, "class") or "").split()
            if any(cls in DROP_CAP_CLASSES for cls in classes):
                span.unwrap()
        return node

    def remove_scripts_styles(self, node: Tag) -> Tag:
        for element in node.find_all(["script", "style"]):
            if _alive(element):
                element.decompose()
        for comment in node.find_all(string=lambda text: isinstance(text, Comment)):
            comment.extract()
        return node

    def remove_bad_ids_and_classes(self, node: Tag) -> Tag:
        """Remove widgets whose id or class looks like boilerplate unless they hold an article."""

        def bad_id_or_class(element: Tag) -> bool:
            for attr in ("id", "class"):
                value = get_attribute(element, attr)
                if value is not None and self.remove_nodes_re.search(value):
                    return not _contains_article(element)
            return False

        self._remove_where(node.find_all(True), bad_id_or_class)
        return node

    def clean_bad_tags(self, node: Tag) -> Tag:
        """Remove navigation, footers and similar widgets recognised by id, class, name or tag."""
        self.remove_bad_ids_and_classes(node)

        def bad_name(element: Tag) -> bool:
            value = get_attribute(element, "name")
            return value is not None and bool(self.remove_nodes_re.search(value))

        self._remove_where(node.find_all(True), bad_name)
        self._remove_where(node.find_all(self.config.bad_tags), lambda element: True)
        return node

    def clean_caption_tags(self, node: Tag) -> Tag:
        """Collapse figures into their images, then remove caption widgets."""
        for figure in node.find_all(["figure", "figcaption"]):
            if not _alive(figure) or figure.parent is None:
                continue
            images = [img.extract() for img in figure.find_all("img")]
            if images:
                figure.replace_with(*images)
            else:
                figure.decompose()

        self.remove_nodes_regex(node, self.caption_re)

        def is_caption(element: Tag) -> bool:
            if (get_attribute(element, "itemprop") or "").lower() == "caption":
                return True
            class_value = get_attribute(element, "class")
            if class_value in ("instagram-media", "image-caption"):
                return True
            return element.name in ("div", "span") and "caption" in (class_value or "")

        self._remove_where(node.find_all(True), is_caption)
        return node

    def remove_nodes_regex(self, node: Tag, pattern: Pattern[str]) -> Tag:
        """Remove descendants whose id or class matches ``pattern``."""

        def matches(element: Tag) -> bool:
            for attr in ("id", "class"):
                value = get_attribute(element, attr)
                if value is not None and pattern.search(value):
                    return True
            return False

        self._remove_where(node.find_all(True), matches)
        return node

    def clean_para_spans(self, node: Tag) -> Tag:
        for span in node.select("p span"):
            span.unwrap()
        return node

    def reduce_article(self, node: Tag) -> Tag:
        """Drop empty tags outside the keep-list, innermost first. Article markers are kept."""
        keep_tags = set(self.config.keep_tags)
        for element in reversed(node.find_all(True)):
            if element.name in keep_tags or not _alive(element) or _is_article_marker(element):
                continue
            if element.find(True) is None and not element.get_text(strip=True):
                element.decompose()
        return node

    # --- Helpers ---

    @staticmethod
    def _remove_where(elements: Iterable[Tag], predicate: Callable[[Tag], bool]) -> None:
        for element in list(elements):
            if _alive(element) and predicate(element):
                element.decompose()
