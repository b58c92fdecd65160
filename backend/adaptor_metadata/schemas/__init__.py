"""
Schemas for adaptor specifiers and metadata tree fragments.
"""

from adaptor_metadata.schemas.adaptor import AdaptorSpecifier
from adaptor_metadata.schemas.metadata import (
    ChildCollection,
    KeyedChildren,
    MetadataNode,
    NodeItem,
    PlainName,
    SequenceChildren,
    SortableItem,
    as_sortable,
    classify_children,
)

__all__ = [
    "AdaptorSpecifier",
    "MetadataNode",
    "ChildCollection",
    "SequenceChildren",
    "KeyedChildren",
    "SortableItem",
    "PlainName",
    "NodeItem",
    "as_sortable",
    "classify_children",
]
