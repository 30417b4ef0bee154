"""
Value Extractor: Pure functions reducing set field values to text.

Set fields can hold anything: plain strings, lists of tags, nested Bard
documents, grids of rows, replicators of further sets. Every value shape in
the RawValue variant has exactly one branch here.

Depth is carried in ExtractionOptions and only increases when descending
into a set's fields, so max_depth bounds the walk however the sets nest.
"""

from collections.abc import Mapping

from extractors.marks import sanitize_marks
from extractors.nodes import looks_like_document, parse_node, resolve_text
from extractors.text import clean_text
from models import (
    ExtractionOptions,
    LazyText,
    MarkdownRenderer,
    RawList,
    RawMapping,
    RawScalar,
    RawString,
    RawValue,
    SetNode,
    TextNode,
    is_empty,
)

# Structural metadata on every set, never content
STRUCTURAL_KEYS = frozenset({"type", "id", "enabled"})


def extract_from_set(
    fields: Mapping[str, RawValue],
    options: ExtractionOptions,
    render: MarkdownRenderer,
) -> str:
    """
    Extract text from a set's named sub-fields.

    Args:
        fields: The set's entries in insertion order (structural keys included)
        options: Current extraction options; returns "" once depth is exhausted
        render: Markdown renderer for nested text runs

    Returns:
        Non-empty field texts joined with single spaces
    """
    if options.depth_exhausted:
        return ""

    child_options = options.descend()
    content: list[str] = []

    for key, value in fields.items():
        if key in STRUCTURAL_KEYS or is_empty(value):
            continue

        text = extract_text_from_value(value, child_options, render)
        if text:
            content.append(text)

    return " ".join(content)


def extract_text_from_value(
    value: RawValue,
    options: ExtractionOptions,
    render: MarkdownRenderer,
) -> str:
    """Reduce any field value to text."""
    if isinstance(value, RawString):
        return clean_text(value.value, options.max_length)

    if isinstance(value, RawList):
        if looks_like_document(value):
            return extract_content_from_bard_array(value.items, options, render)
        return join_values(value.items, options, render)

    if isinstance(value, LazyText):
        return extract_text_from_value(value.resolve(), options, render)

    if isinstance(value, RawMapping):
        # A mapping is set-shaped (grid row, replicator item, group field)
        return extract_from_set(value.entries, options, render)

    if isinstance(value, RawScalar):
        return value.text

    return ""


def extract_content_from_bard_array(
    blocks: tuple[RawValue, ...],
    options: ExtractionOptions,
    render: MarkdownRenderer,
) -> str:
    """
    Extract text from a Bard document nested inside a set field.

    Text runs have their internal links redacted before rendering; other
    blocks go through the set extractor with the same options.
    """
    content: list[str] = []

    for block in blocks:
        node = parse_node(block)

        if isinstance(node, TextNode):
            sanitize_marks(node.marks)
            text = resolve_text(node.text)
            if text:
                rendered = render(text)
                if rendered:
                    content.append(rendered)

        elif isinstance(node, SetNode):
            block_text = extract_from_set(node.fields, options, render)
            if block_text:
                content.append(block_text)

    return " ".join(content)


def join_values(
    items: tuple[RawValue, ...],
    options: ExtractionOptions,
    render: MarkdownRenderer,
) -> str:
    """Extract each item and join the non-empty results."""
    content: list[str] = []
    for item in items:
        text = extract_text_from_value(item, options, render)
        if text:
            content.append(text)
    return " ".join(content)
