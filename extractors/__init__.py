"""
Extractors: Pure functions for content extraction.

No blueprint lookups, no markdown library, no logging. The renderer is
passed in. Just transform input → output.
Easily testable with fixtures.
"""

from .text import clean_text, strip_tags
from .marks import parse_marks, sanitize_marks, INTERNAL_LINK_PREFIX
from .nodes import parse_node, resolve_text, looks_like_document
from .values import (
    extract_from_set,
    extract_text_from_value,
    extract_content_from_bard_array,
    STRUCTURAL_KEYS,
)
from .content import extract_content
from .raw import process_raw_content

__all__ = [
    "clean_text",
    "strip_tags",
    "parse_marks",
    "sanitize_marks",
    "INTERNAL_LINK_PREFIX",
    "parse_node",
    "resolve_text",
    "looks_like_document",
    "extract_from_set",
    "extract_text_from_value",
    "extract_content_from_bard_array",
    "STRUCTURAL_KEYS",
    "extract_content",
    "process_raw_content",
]
