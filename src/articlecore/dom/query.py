"""
Structural queries over parsed documents.

Every function here is read-only: none of them modifies the tree they are
given. Nodes are compared by identity, never with ``==``, because
BeautifulSoup compares tags structurally.
"""

from __future__ import annotations

import html
import math
import re
from collections import deque
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Sequence

from bs4 import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from articlecore.constants import LINK_TAGS, TEXT_EXCLUDED_TAGS
from articlecore.nlp.languages import count_words

ATTRIBS_MATCH_MODES = ("exact", "substring", "word")

# Elements whose boundaries separate words in the rendered text.
BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt", "figcaption", "figure",
        "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p",
        "pre", "section", "table", "td", "th", "tr", "ul",
    }
)  # fmt: skip

_NON_TEXT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
_TAG_LIKE_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_BLOCK_BREAK = object()


def inner_trim(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _text_pieces(node: Tag, block_separator: str = " ") -> List[str]:
    pieces: List[str] = []
    stack: List[object] = list(reversed(node.contents))
    while stack:
        item = stack.pop()
        if item is _BLOCK_BREAK:
            pieces.append(block_separator)
        elif isinstance(item, Tag):
            if item.name in TEXT_EXCLUDED_TAGS:
                continue
            if item.name in BLOCK_TAGS:
                pieces.append(block_separator)
                stack.append(_BLOCK_BREAK)
            stack.extend(reversed(item.contents))
        elif isinstance(item, NavigableString) and not isinstance(item, _NON_TEXT_STRINGS):
            pieces.append(str(item))
    return pieces


def get_text(node: Optional[Tag]) -> str:
    """Return the visible text of ``node``.

    Script-like elements are skipped, entities unescaped and literal tag-like
    substrings replaced by spaces before whitespace is collapsed.
    """
    if node is None:
        return ""
    if isinstance(node, NavigableString):
        text = str(node)
    elif node.name in TEXT_EXCLUDED_TAGS:
        return ""
    else:
        text = "".join(_text_pieces(node))
    text = html.unescape(text)
    text = _TAG_LIKE_RE.sub(" ", text)
    return inner_trim(text)


def get_block_texts(node: Optional[Tag]) -> List[str]:
    """Visible text of ``node`` split at block-element boundaries, empty blocks dropped."""
    if node is None:
        return []
    if node.name in TEXT_EXCLUDED_TAGS:
        return []
    separator = "\x00"
    blocks = []
    for chunk in "".join(_text_pieces(node, separator)).split(separator):
        text = inner_trim(_TAG_LIKE_RE.sub(" ", html.unescape(chunk)))
        if text:
            blocks.append(text)
    return blocks


def get_level(node: Optional[Tag]) -> int:
    """Number of ancestor steps between ``node`` and the document root."""
    if node is None:
        return 0
    return sum(1 for _ in node.parents)


def get_nodes_at_level(root: Tag, level: int) -> List[Tag]:
    """Elements ``level`` steps below ``root``, breadth-first in document order."""
    if level <= 0:
        return [root]
    results: List[Tag] = []
    queue = deque([(root, 0)])
    while queue:
        element, depth = queue.popleft()
        if depth == level:
            results.append(element)
            continue
        for child in element.children:
            if isinstance(child, Tag):
                queue.append((child, depth + 1))
    return results


def walk_siblings(node: Tag) -> List[Tag]:
    """Preceding element siblings, nearest first."""
    return [sibling for sibling in node.previous_siblings if isinstance(sibling, Tag)]


def get_attribute(node: Tag, name: str) -> Optional[str]:
    """Attribute value as a string; multi-valued attributes are space-joined."""
    value = node.attrs.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def _attr_matches(value: Optional[str], expected: str, attribs_match: str) -> bool:
    if value is None:
        return False
    value = value.lower()
    expected = expected.lower()
    if attribs_match == "exact":
        return value == expected
    if attribs_match == "substring":
        return expected in value
    return expected in value.split()


def get_tags(
    node: Tag,
    tag: Optional[str] = None,
    attribs: Optional[Mapping[str, str]] = None,
    attribs_match: str = "exact",
) -> List[Tag]:
    """Descendants with tag ``tag`` (any tag if None) whose attributes all match ``attribs``.

    Values are compared case-insensitively; ``word`` matches one
    whitespace-separated token of the attribute value.
    """
    if attribs_match not in ATTRIBS_MATCH_MODES:
        raise ValueError(f"attribs_match must be one of {ATTRIBS_MATCH_MODES}, got {attribs_match!r}")
    elements = node.find_all(tag if tag else True)
    if not attribs:
        return list(elements)
    return [
        element
        for element in elements
        if all(_attr_matches(get_attribute(element, key), value, attribs_match) for key, value in attribs.items())
    ]


def get_tags_regex(
    node: Tag,
    tag: Optional[str],
    attribs: Mapping[str, str | Pattern[str]],
    flags: int = 0,
) -> List[Tag]:
    """Descendants with tag ``tag`` whose attributes all contain a match of the given patterns."""
    compiled = {key: re.compile(pattern, flags) for key, pattern in attribs.items()}
    results = []
    for element in node.find_all(tag if tag else True):
        values = {key: get_attribute(element, key) for key in compiled}
        if all(value is not None and compiled[key].search(value) for key, value in values.items()):
            results.append(element)
    return results


def get_elements_by_tags(node: Tag, tags: Sequence[str]) -> List[Tag]:
    """Descendants of ``node`` named in ``tags``, in document order."""
    return list(node.find_all(list(tags)))


def unique_nodes(nodes: Iterable[Tag]) -> List[Tag]:
    """Drop repeated nodes, keeping the first occurrence."""
    seen = set()
    result = []
    for node in nodes:
        if id(node) not in seen:
            seen.add(id(node))
            result.append(node)
    return result


def document_positions(root: Tag) -> Dict[int, int]:
    """Map node identity to its position in document order."""
    return {id(element): index for index, element in enumerate(root.find_all(True))}


def link_density_limit(word_count: float) -> float:
    """Highest acceptable share (in percent) of link words for a text of ``word_count`` words.

    Starts near 70% for short texts and falls towards 35-40% for long ones.
    """
    return 87 - 70 / (1.3 + math.exp(1 - word_count / 200))


def is_high_link_density(node: Tag, language: Optional[str] = None) -> bool:
    """True when links make up too much of the text of ``node``."""
    links = get_elements_by_tags(node, LINK_TAGS)
    if not links:
        return False

    word_count = count_words(get_text(node), language)
    if word_count == 0:
        return True

    link_word_count = sum(count_words(get_text(link), language) for link in links)
    proportion = link_word_count * 100 / word_count

    if proportion > link_density_limit(word_count):
        return True
    if word_count < 50 and len(links) > 2 and proportion > 50:
        return True
    return False
