"""
Per-call scratch storage for scoring state, kept beside the tree instead of on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from bs4 import Tag


@dataclass
class NodeAnnotation:
    """Features and accumulated score of one node for one extraction pass."""

    stop_words: int = 0
    word_count: int = 0
    is_high_link_density: bool = False
    node_level: int = 0
    gravity_score: float = 0.0
    gravity_nodes: int = 0
    has_features: bool = False


class NodeAnnotations:
    """Side-table mapping node identity to its ``NodeAnnotation``.

    The table holds a reference to every annotated node so identities stay
    valid for its lifetime. Create one per extraction pass.
    """

    def __init__(self) -> None:
        self._table: Dict[int, NodeAnnotation] = {}
        self._nodes: Dict[int, Tag] = {}

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, node: object) -> bool:
        return id(node) in self._table

    def get(self, node: Optional[Tag]) -> Optional[NodeAnnotation]:
        if node is None:
            return None
        return self._table.get(id(node))

    def _ensure(self, node: Tag) -> NodeAnnotation:
        key = id(node)
        annotation = self._table.get(key)
        if annotation is None:
            annotation = NodeAnnotation()
            self._table[key] = annotation
            self._nodes[key] = node
        return annotation

    def set_features(
        self,
        node: Tag,
        *,
        stop_words: int,
        word_count: int,
        is_high_link_density: bool,
        node_level: int,
    ) -> NodeAnnotation:
        annotation = self._ensure(node)
        annotation.stop_words = stop_words
        annotation.word_count = word_count
        annotation.is_high_link_density = is_high_link_density
        annotation.node_level = node_level
        annotation.has_features = True
        return annotation

    def add_score(self, node: Optional[Tag], delta: float) -> None:
        if node is None:
            return
        self._ensure(node).gravity_score += delta

    def add_node_count(self, node: Optional[Tag], delta: int) -> None:
        if node is None:
            return
        self._ensure(node).gravity_nodes += delta

    def gravity_score(self, node: Optional[Tag]) -> float:
        annotation = self.get(node)
        return annotation.gravity_score if annotation else 0.0

    def gravity_nodes(self, node: Optional[Tag]) -> int:
        annotation = self.get(node)
        return annotation.gravity_nodes if annotation else 0

    def stop_words(self, node: Optional[Tag]) -> int:
        annotation = self.get(node)
        return annotation.stop_words if annotation and annotation.has_features else 0

    def has_features(self, node: Optional[Tag]) -> bool:
        annotation = self.get(node)
        return bool(annotation and annotation.has_features)

    def annotated_descendants(self, node: Tag) -> Iterator[NodeAnnotation]:
        """Feature annotations of every descendant of ``node`` processed so far."""
        for element in node.find_all(True):
            annotation = self._table.get(id(element))
            if annotation is not None and annotation.has_features:
                yield annotation

    def nodes(self) -> List[Tag]:
        return list(self._nodes.values())
