"""
Node parsing: turn raw document entries into TextNode / SetNode.

A Bard document is a list of blocks. Blocks of type "text" carry a text run
(and marks); every other block is a set whose keys are its sub-fields.
"""

from extractors.marks import parse_marks
from models import (
    LazyText,
    Node,
    RawList,
    RawMapping,
    RawScalar,
    RawString,
    RawValue,
    SetNode,
    TextNode,
    node_type,
)


def parse_node(value: RawValue) -> Node | None:
    """
    Parse one document block.

    Returns:
        TextNode for type "text", SetNode for any other mapping,
        None for anything that isn't a mapping (skipped by callers)
    """
    if not isinstance(value, RawMapping):
        return None

    entries = value.entries
    block_type = node_type(entries)
    if block_type == "text":
        return TextNode(
            text=entries.get("text"),
            marks=parse_marks(entries.get("marks")),
        )
    return SetNode(type=block_type, fields=entries)


def iter_blocks(document: RawValue) -> tuple[RawValue, ...]:
    """The blocks of a document, or () when it isn't iterable."""
    if isinstance(document, RawList):
        return document.items
    if isinstance(document, RawMapping):
        return tuple(document.entries.values())
    return ()


def resolve_text(value: RawValue) -> str:
    """
    Resolve a text node's text to a plain string.

    LazyText holders are unwrapped; collections and null give "".
    """
    if isinstance(value, RawString):
        return value.value
    if isinstance(value, RawScalar):
        return value.text
    if isinstance(value, LazyText):
        return resolve_text(value.resolve())
    return ""


def looks_like_document(value: RawValue) -> bool:
    """
    Check whether a list value is a nested Bard document.

    True when the list is non-empty and its first item is a mapping
    with a "type" key.
    """
    if not isinstance(value, RawList) or not value.items:
        return False
    first = value.items[0]
    return isinstance(first, RawMapping) and "type" in first.entries
