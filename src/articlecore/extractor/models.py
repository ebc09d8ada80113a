"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import Tag

from articlecore.dom.annotations import NodeAnnotations


@dataclass(slots=True, frozen=True)
class ExtractResult:
    """Result of article body extraction."""

    url: str | None
    text: str
    html: str
    language: str | None
    candidate_count: int = 0
    best_score: float = 0.0


@dataclass
class BodyResult:
    """Nodes chosen by one body extraction pass.

    ``top_node`` belongs to the source tree; ``top_node_complemented`` is a
    detached copy that the caller owns and may mutate.
    """

    top_node: Optional[Tag]
    top_node_complemented: Optional[Tag]
    candidates: List[Tag] = field(default_factory=list)
    annotations: NodeAnnotations = field(default_factory=NodeAnnotations)

    @property
    def best_score(self) -> float:
        return self.annotations.gravity_score(self.top_node)
