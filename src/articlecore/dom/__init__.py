"""
DOM query and annotation layer.
"""

from .annotations import NodeAnnotation, NodeAnnotations
from .parser import (
    InvalidDocumentError,
    clone,
    create_element,
    ensure_document,
    from_string,
    new_document,
    outer_html,
)
from .query import (
    document_positions,
    get_attribute,
    get_block_texts,
    get_level,
    get_nodes_at_level,
    get_tags,
    get_tags_regex,
    get_text,
    inner_trim,
    is_high_link_density,
    link_density_limit,
    unique_nodes,
    walk_siblings,
)

__all__ = [
    "InvalidDocumentError",
    "NodeAnnotation",
    "NodeAnnotations",
    "clone",
    "create_element",
    "document_positions",
    "ensure_document",
    "from_string",
    "get_attribute",
    "get_block_texts",
    "get_level",
    "get_nodes_at_level",
    "get_tags",
    "get_tags_regex",
    "get_text",
    "inner_trim",
    "is_high_link_density",
    "link_density_limit",
    "new_document",
    "outer_html",
    "unique_nodes",
    "walk_siblings",
]
