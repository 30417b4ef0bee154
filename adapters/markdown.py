"""
Markdown Adapter: renders Bard text runs via Python-Markdown.

Text blocks hold markdown (or HTML, which Python-Markdown passes through).
The rendered HTML is later stripped back to plain text by extractors/text.py,
so the only job here is turning markdown syntax into tags the cleaner knows
how to remove.
"""

from functools import lru_cache

import markdown

__all__ = [
    "render_markdown",
    "get_markdown_converter",
    "clear_markdown_cache",
]

# "extra" covers tables, footnotes, fenced code and attribute lists
MARKDOWN_EXTENSIONS = ["extra"]


@lru_cache(maxsize=1)
def get_markdown_converter() -> markdown.Markdown:
    """Get a configured Markdown converter (cached)."""
    return markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)


def render_markdown(source: str) -> str:
    """
    Render markdown source to HTML.

    Args:
        source: Markdown text

    Returns:
        HTML string ("" for empty input)
    """
    if not source:
        return ""
    converter = get_markdown_converter()
    # Converter keeps footnote/reference state between calls until reset
    return converter.reset().convert(source)


def clear_markdown_cache() -> None:
    """Drop the cached converter (tests that patch extensions)."""
    get_markdown_converter.cache_clear()
