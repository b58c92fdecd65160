"""
Tagged representations of metadata tree fragments.

Metadata trees arrive from the host as plain JSON-like mappings. A node's
``children`` may be a list of items or a mapping from group key (such as
``dataElements``) to a list of items, and each item may be a bare name or a
nested node. These wrappers make both distinctions explicit so the sorting
code dispatches on a tag instead of re-inspecting payload shapes.
"""

from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from typing import Any

from adaptor_metadata.exceptions import MalformedTreeShapeError

MetadataNode = MutableMapping[str, Any]


@dataclass(frozen=True)
class PlainName:
    """A child given only by its name."""

    value: str


@dataclass(frozen=True)
class NodeItem:
    """A child that is a full metadata node."""

    node: MetadataNode


SortableItem = PlainName | NodeItem


@dataclass(frozen=True)
class SequenceChildren:
    """Children stored as a single ordered list."""

    items: list[Any]


@dataclass(frozen=True)
class KeyedChildren:
    """Children grouped under string keys, each group an ordered list."""

    groups: Mapping[str, Any]


ChildCollection = SequenceChildren | KeyedChildren


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def as_sortable(element: Any) -> SortableItem:
    """
    Wrap a child element in its tag.

    Raises:
        MalformedTreeShapeError: If the element is neither a string nor a mapping
    """
    if isinstance(element, str):
        return PlainName(element)
    if isinstance(element, MutableMapping):
        return NodeItem(element)
    raise MalformedTreeShapeError(
        f"Metadata child must be a name or a node, got {type(element).__name__}"
    )


def classify_children(children: Any) -> ChildCollection:
    """
    Wrap a node's ``children`` value in its tag.

    Raises:
        MalformedTreeShapeError: If the value is neither a list nor a mapping
    """
    if _is_sequence(children):
        return SequenceChildren(list(children))
    if isinstance(children, Mapping):
        for key, group in children.items():
            if not _is_sequence(group):
                raise MalformedTreeShapeError(
                    f"Metadata children group '{key}' must be a list, "
                    f"got {type(group).__name__}"
                )
        return KeyedChildren(children)
    raise MalformedTreeShapeError(
        f"Metadata children must be a list or a mapping, got {type(children).__name__}"
    )
