"""
Gravity-scoring article body extractor.

Finds the element that most likely holds the article text by scoring every
paragraph-like node on its stop word count and pushing that score up to its
parent and grandparent. The best scoring container is then complemented with
same-level siblings that look like part of the same article.
"""

from __future__ import annotations

import math
import re
from functools import lru_cache
from typing import Dict, List, Optional, Pattern

import structlog
from bs4 import BeautifulSoup, Tag

from articlecore.config.config import ExtractionConfig
from articlecore.constants import ArticleBodyTag
from articlecore.dom.annotations import NodeAnnotations
from articlecore.dom.parser import clone, create_element, ensure_document, is_document, new_document
from articlecore.dom.query import (
    document_positions,
    get_attribute,
    get_level,
    get_nodes_at_level,
    get_tags,
    get_tags_regex,
    get_text,
    is_high_link_density,
    unique_nodes,
    walk_siblings,
)
from articlecore.nlp.languages import normalize_language
from articlecore.nlp.stopwords import StopWordsProvider, get_stopwords

from .models import BodyResult

logger = structlog.get_logger(__name__)

# Best nodes of these kinds already hold the whole article.
SELF_CONTAINED_TAGS = ("body", "article")


@lru_cache(maxsize=64)
def _signature_pattern(pattern: str) -> Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def matches_signature(node: Tag, signature: ArticleBodyTag) -> bool:
    """True when ``node`` carries every attribute of ``signature``."""
    if signature.tag and node.name != signature.tag:
        return False
    for name, expected in signature.attributes().items():
        value = get_attribute(node, name)
        if value is None:
            return False
        if expected.startswith("re:"):
            if not _signature_pattern(expected[3:]).search(value):
                return False
        elif value.strip().lower() != expected.lower():
            return False
    return True


class BodyExtractor:
    """
    Locates the article body of a parsed document.

    The extractor keeps no per-document state: every pass allocates a fresh
    ``NodeAnnotations`` table, so one instance can serve many documents, but
    a single tree must not be processed by two passes at the same time.
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        stopwords: Optional[StopWordsProvider] = None,
        language: Optional[str] = None,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.weights = self.config.scoring
        self.signatures = self.config.signatures
        if language is None:
            language = stopwords.language if stopwords is not None else self.config.language
        self.language = normalize_language(language)
        self.stopwords = stopwords if stopwords is not None else get_stopwords(self.language)
        self.logger = logger.bind(component="BodyExtractor", language=self.language)

    def parse(self, doc: BeautifulSoup) -> BodyResult:
        """Run a full pass: best node selection followed by sibling complementation."""
        doc = ensure_document(doc)
        annotations = NodeAnnotations()
        candidates: List[Tag] = []
        top_node = self.calculate_best_node(doc, annotations, candidates)
        complemented = self.complement_with_siblings(doc, top_node, annotations)

        self.logger.debug(
            "Body extraction finished",
            candidates=len(candidates),
            top_node=top_node.name if top_node is not None else None,
            top_score=annotations.gravity_score(top_node),
        )
        return BodyResult(
            top_node=top_node,
            top_node_complemented=complemented,
            candidates=candidates,
            annotations=annotations,
        )

    # --- Best node selection ---

    def calculate_best_node(
        self,
        doc: BeautifulSoup,
        annotations: Optional[NodeAnnotations] = None,
        candidates: Optional[List[Tag]] = None,
    ) -> Optional[Tag]:
        """Return the highest scoring container, ``<body>`` if nothing scored, or None."""
        doc = ensure_document(doc)
        if annotations is None:
            annotations = NodeAnnotations()

        self.boost_highly_likely_nodes(doc, annotations)
        nodes_with_text = self.compute_features(doc, annotations)
        if candidates is not None:
            candidates.extend(nodes_with_text)

        parent_nodes = self.compute_gravity_scores(doc, nodes_with_text, annotations)

        top_node: Optional[Tag] = None
        if parent_nodes:
            top_node = sorted(parent_nodes, key=annotations.gravity_score, reverse=True)[0]

        if top_node is None:
            top_node = doc.find("body")
            if top_node is None:
                self.logger.debug("Document has no body and no scoring candidates")

        return top_node

    def nodes_to_check(self, doc: BeautifulSoup) -> List[Tag]:
        """Nodes eligible to anchor the article body."""
        nodes: List[Tag] = []
        for tag in self.signatures.candidate_tags:
            if tag != "div":
                nodes.extend(doc.find_all(tag))
                continue

            divs: List[Tag] = []
            for word in self.signatures.article_div_words:
                divs.extend(get_tags(doc, "div", {"id": word}, "word"))
                divs.extend(get_tags(doc, "div", {"class": word}, "word"))
            divs.extend(get_tags_regex(doc, "div", {"class": self.signatures.article_div_class_pattern}))
            if not divs:
                divs = list(doc.find_all("div", limit=self.weights.fallback_div_count))
            nodes.extend(divs)

        for itemprop in self.signatures.article_itemprops:
            nodes.extend(get_tags(doc, None, {"itemprop": itemprop}, "word"))

        return unique_nodes(nodes)

    def compute_features(self, doc: BeautifulSoup, annotations: NodeAnnotations) -> List[Tag]:
        """Annotate nodes deepest first and return those with enough text to score.

        Counts are stored net of what descendants already claimed, so the
        same words are never credited twice.
        """
        nodes = self.nodes_to_check(doc)
        levels: Dict[int, int] = {id(node): get_level(node) for node in nodes}
        nodes.sort(key=lambda node: levels[id(node)], reverse=True)

        candidates: List[Tag] = []
        for node in nodes:
            text = get_text(node)
            if not text:
                continue

            stats = self.stopwords.get_stopword_count(text)
            high_link_density = is_high_link_density(node, self.language)

            children_stop_words = 0
            children_word_count = 0
            for child in annotations.annotated_descendants(node):
                children_stop_words += child.stop_words
                children_word_count += child.word_count

            annotation = annotations.set_features(
                node,
                stop_words=stats.stop_word_count - children_stop_words,
                word_count=stats.word_count - children_word_count,
                is_high_link_density=high_link_density,
                node_level=levels[id(node)],
            )

            if annotation.stop_words > self.weights.min_stopword_count and not high_link_density:
                candidates.append(node)

        return candidates

    def compute_gravity_scores(
        self,
        doc: BeautifulSoup,
        nodes_with_text: List[Tag],
        annotations: NodeAnnotations,
    ) -> List[Tag]:
        """Push candidate scores to parents and grandparents; return the scored containers."""
        weights = self.weights
        nodes_count = len(nodes_with_text)
        bottom_negativescore_nodes = nodes_count * weights.bottom_negativescore_nodes

        positions = document_positions(doc)
        in_document_order = sorted(nodes_with_text, key=lambda node: positions.get(id(node), 0))
        document_rank = {id(node): rank for rank, node in enumerate(in_document_order)}

        negative_scoring = 0.0
        boost_discount = 1.0
        parent_nodes: Dict[int, Tag] = {}

        for node in nodes_with_text:
            boost_score = 0.0
            if self.is_boostable(node, annotations):
                boost_score = weights.boost_score / boost_discount
                boost_discount += 1.0

            if nodes_count > weights.node_count_threshold:
                dist_from_end = nodes_count - document_rank[id(node)]
                if dist_from_end <= bottom_negativescore_nodes:
                    booster = bottom_negativescore_nodes - dist_from_end
                    boost_score = -(booster**2)
                    negscore = abs(boost_score) + negative_scoring
                    if negscore > weights.negative_score_threshold:
                        boost_score = weights.negative_score_boost
                    else:
                        negative_scoring = negscore

            upscore = annotations.stop_words(node) + boost_score

            parent = node.parent
            if parent is None or is_document(parent):
                continue
            annotations.add_score(parent, upscore * weights.parent_node)
            annotations.add_node_count(parent, 1)
            parent_nodes.setdefault(id(parent), parent)

            grandparent = parent.parent
            if grandparent is None or is_document(grandparent):
                continue
            annotations.add_score(grandparent, upscore * weights.parent_parent_node)
            annotations.add_node_count(grandparent, 1)
            parent_nodes.setdefault(id(grandparent), grandparent)

        return list(parent_nodes.values())

    def is_boostable(self, node: Tag, annotations: NodeAnnotations) -> bool:
        """True when one of the nearest preceding same-tag siblings has substantial text.

        The first paragraph is often an image caption; it only earns a boost
        when it is connected to other real paragraphs.
        """
        steps_away = 0
        for sibling in walk_siblings(node):
            if sibling.name != node.name:
                continue
            if steps_away >= self.weights.boost_max_steps_from_node:
                return False
            steps_away += 1
            if annotations.stop_words(sibling) > self.weights.boost_min_stopword_count:
                return True
        return False

    def boost_highly_likely_nodes(self, doc: BeautifulSoup, annotations: NodeAnnotations) -> None:
        """Give nodes that carry article-body markup a head start."""
        for node in unique_nodes(doc.find_all(self.signatures.candidate_tags)):
            boost = self.highly_likely_boost(node)
            if boost > 0:
                annotations.add_score(node, boost * self.weights.parent_node)

    def highly_likely_boost(self, node: Tag) -> float:
        """Largest boost among the article-body signatures ``node`` matches."""
        best = 0
        for signature in self.signatures.article_body_tags:
            if signature.score_boost > best and matches_signature(node, signature):
                best = signature.score_boost
        return float(best)

    # --- Sibling complementation ---

    def complement_with_siblings(
        self,
        doc: BeautifulSoup,
        node: Optional[Tag],
        annotations: NodeAnnotations,
    ) -> Optional[Tag]:
        """Build a detached ``<body>`` from ``node`` and same-level siblings that look like article text."""
        if node is None:
            return None
        if node.name in SELF_CONTAINED_TAGS:
            return clone(node)

        document = new_document(self.config.parser)
        body = document.find("body")

        baseline = self.get_normalized_score(node, annotations)
        if math.isinf(baseline):
            baseline = annotations.gravity_score(node)
        threshold = baseline * self.weights.sibling_baseline_weight

        for candidate in get_nodes_at_level(doc, get_level(node)):
            if candidate is node:
                body.append(clone(candidate))
                continue
            if candidate.name != node.name:
                continue

            score = annotations.gravity_score(candidate)
            if score > threshold and not is_high_link_density(candidate, self.language):
                body.append(clone(candidate))
                continue

            for paragraph in self.get_plausible_content(candidate, baseline, annotations, document):
                body.append(paragraph)

        return body

    def get_normalized_score(self, top_node: Optional[Tag], annotations: NodeAnnotations) -> float:
        """Average positive gravity score of the paragraphs in ``top_node``; ``inf`` when there is none.

        Long articles have many paragraphs, so comparing siblings against the
        total score would be unfair; the per-paragraph average is the baseline.
        """
        if top_node is None:
            return math.inf
        scores = [score for score in map(annotations.gravity_score, top_node.find_all("p")) if score > 0]
        if not scores:
            return math.inf
        return sum(scores) / len(scores)

    def get_plausible_content(
        self,
        node: Tag,
        baseline: float,
        annotations: NodeAnnotations,
        document: Optional[BeautifulSoup] = None,
    ) -> List[Tag]:
        """Paragraphs worth salvaging from a sibling that did not qualify as a whole."""
        if node.name == "p":
            if get_text(node) and not is_high_link_density(node, self.language):
                return [clone(node)]
            return []

        if math.isinf(baseline):
            baseline = annotations.gravity_score(node)
        threshold = baseline * self.weights.sibling_baseline_weight

        paragraphs: List[Tag] = []
        for paragraph in node.find_all("p"):
            stop_words = annotations.stop_words(paragraph)
            if stop_words <= 0:
                continue
            if is_high_link_density(paragraph, self.language):
                continue
            if stop_words > threshold:
                paragraphs.append(create_element("p", get_text(paragraph), document))
        return paragraphs
