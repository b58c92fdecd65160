"""
Deterministic ordering for adaptor metadata trees.

Metadata trees drive suggestion lists in the editor, so siblings are ordered
alphabetically by name at every level. Children may be a plain list or a
mapping of named groups; both shapes are handled, and may be mixed freely
across subtrees.
"""

import logging
from typing import Any

from adaptor_metadata.exceptions import MalformedTreeShapeError
from adaptor_metadata.schemas.metadata import (
    KeyedChildren,
    MetadataNode,
    NodeItem,
    PlainName,
    SequenceChildren,
    SortableItem,
    as_sortable,
    classify_children,
)

logger = logging.getLogger(__name__)


def effective_key(item: SortableItem) -> str:
    """
    Get the string a sortable item is ordered by.

    Args:
        item: Tagged child element

    Returns:
        The bare name itself, or the node's ``name`` field

    Raises:
        MalformedTreeShapeError: If a node has no string ``name``
    """
    if isinstance(item, PlainName):
        return item.value

    name = item.node.get("name")
    if not isinstance(name, str):
        raise MalformedTreeShapeError(
            f"Metadata node is missing a string 'name': {list(item.node)!r}"
        )
    return name


def _unwrap(item: SortableItem) -> Any:
    if isinstance(item, PlainName):
        return item.value
    return item.node


def sort_items(items: list[Any]) -> list[Any]:
    """
    Normalize each element, then order the list by effective key.

    The sort is stable, so elements sharing a name keep their relative order.

    Args:
        items: Bare names and/or metadata nodes

    Returns:
        New list with every nested node normalized and siblings sorted
    """
    tagged = [as_sortable(element) for element in items]
    for item in tagged:
        if isinstance(item, NodeItem):
            sort_deep(item.node)

    tagged.sort(key=effective_key)
    return [_unwrap(item) for item in tagged]


def sort_deep(node: MetadataNode) -> MetadataNode:
    """
    Recursively order a metadata node's children.

    Descendants are sorted before their parent (post-order). Grouped
    children are rebuilt with their keys in ascending order. The node is
    updated in place and returned; callers should use the return value.

    Args:
        node: Metadata node, possibly with ``children``

    Returns:
        The same node with its subtree normalized
    """
    children = node.get("children")
    if children is None:
        return node

    collection = classify_children(children)
    if isinstance(collection, SequenceChildren):
        node["children"] = sort_items(collection.items)
    elif isinstance(collection, KeyedChildren):
        node["children"] = {
            key: sort_items(list(collection.groups[key]))
            for key in sorted(collection.groups)
        }

    return node


def normalize_metadata(tree: Any) -> Any:
    """
    Normalize a metadata payload received from the host.

    Accepts a full tree, a bare list of children or ``None`` (the host
    reports no metadata for adaptors that do not provide any).

    Args:
        tree: Metadata payload

    Returns:
        Normalized payload, or ``None`` if there was nothing to normalize

    Raises:
        MalformedTreeShapeError: If the payload does not have a tree shape
    """
    if tree is None:
        logger.debug("No metadata to normalize")
        return None

    if isinstance(tree, (list, tuple)):
        logger.debug(f"Normalizing {len(tree)} top-level metadata items")
        return sort_items(list(tree))

    item = as_sortable(tree)
    if isinstance(item, PlainName):
        return item.value

    logger.debug(f"Normalizing metadata tree '{item.node.get('name', '<root>')}'")
    return sort_deep(item.node)
