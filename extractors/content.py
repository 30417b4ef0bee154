"""
Content Extractor: Pure function for walking a top-level Bard document.

Receives the normalized document, returns the text fragments in node order.
Joining and final cleaning happen in the caller.
"""

from extractors.nodes import iter_blocks, parse_node, resolve_text
from extractors.values import extract_from_set
from models import ExtractionOptions, MarkdownRenderer, RawValue, SetNode, TextNode


def extract_content(
    document: RawValue,
    options: ExtractionOptions,
    render: MarkdownRenderer,
) -> list[str]:
    """
    Extract text fragments from a Bard document.

    Text blocks are rendered as markdown. Their marks are not sanitized on
    this path; only nested documents (see extract_content_from_bard_array)
    redact internal links.

    Every other block goes to the set extractor. Blocks whose type is in
    options.set_types and blocks whose type isn't are extracted the same way.

    Args:
        document: Normalized document; anything that isn't a list or mapping
            yields no fragments
        options: Extraction options (depth starts at options.current_depth)
        render: Markdown renderer

    Returns:
        Non-empty fragments in document order
    """
    extracted: list[str] = []

    for block in iter_blocks(document):
        node = parse_node(block)

        if isinstance(node, TextNode):
            text = resolve_text(node.text)
            if text:
                extracted.append(render(text))

        elif isinstance(node, SetNode):
            set_text = extract_from_set(node.fields, options, render)
            if set_text:
                extracted.append(set_text)

    return [fragment for fragment in extracted if fragment]
