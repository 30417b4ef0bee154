"""
Raw Content Processor: schema-agnostic extraction.

Used when the blueprint field can't be found, or when schema-aware
extraction raised. Text blocks are not rendered as markdown here; every
value goes through the generic value extractor.
"""

from extractors.text import clean_text
from extractors.values import join_values
from models import (
    ExtractionOptions,
    LazyText,
    MarkdownRenderer,
    RawList,
    RawMapping,
    RawString,
    RawValue,
)


def process_raw_content(
    content: RawValue,
    options: ExtractionOptions,
    render: MarkdownRenderer,
) -> str:
    """
    Extract cleaned text from content without schema knowledge.

    - A string is cleaned directly
    - A list (or a mapping's values) is extracted item by item, joined, cleaned
    - A LazyText holder is resolved first
    - Anything else gives ""
    """
    if isinstance(content, LazyText):
        content = content.resolve()

    if isinstance(content, RawString):
        return clean_text(content.value, options.max_length)

    if isinstance(content, RawList):
        items = content.items
    elif isinstance(content, RawMapping):
        items = tuple(content.entries.values())
    else:
        return ""

    return clean_text(join_values(items, options, render), options.max_length)
