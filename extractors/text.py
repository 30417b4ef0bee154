"""
Text Cleaner: Pure function for normalizing extracted text for indexing.

Receives a flat string (rendered HTML, raw field values, joined fragments),
returns plain text with markup removed and whitespace collapsed.
No I/O, no logging.
"""

import re

from models import DEFAULT_MAX_LENGTH

# An opening "<" followed by a non-space starts a tag, as in PHP's strip_tags.
# Quoted attribute values may contain ">". An unclosed tag or quote swallows
# the rest of the string.
_COMMENT_PATTERN = re.compile(r"<!--.*?(?:-->|$)", re.DOTALL)
_TAG_PATTERN = re.compile(r"""<[^\s<>](?:"[^"]*(?:"|$)|'[^']*(?:'|$)|[^'">])*(?:>|$)""")
_WHITESPACE_PATTERN = re.compile(r"\s+")

# Literal entity sequences replaced after tag stripping (order matters:
# "&amp;nbsp;" must come out as "&nbsp;", not a space)
_ENTITY_REPLACEMENTS = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
)

_PUNCTUATION_FIXES = (
    (" .", "."),
    (" ,", ","),
    (" ;", ";"),
)


def strip_tags(text: str) -> str:
    """Remove markup tags and comments, keeping the text between them."""
    text = _COMMENT_PATTERN.sub("", text)
    return _TAG_PATTERN.sub("", text)


def clean_text(text: str, max_length: int | None = DEFAULT_MAX_LENGTH) -> str:
    """
    Clean and normalize text for search indexing.

    Pipeline (order affects the result):
    1. Space before every "<" so adjacent tag contents don't merge
    2. Strip tags
    3. Replace &nbsp; and &amp;
    4. Collapse whitespace runs to one space
    5. Drop the space before . , ;
    6. Trim
    7. Truncate to max_length characters (no ellipsis)

    Args:
        text: Input string, possibly containing HTML
        max_length: Character cap. None means the default (90,000).

    Returns:
        Cleaned text, "" for empty input
    """
    if not text:
        return ""

    if max_length is None:
        max_length = DEFAULT_MAX_LENGTH

    text = text.replace("<", " <")
    text = strip_tags(text)
    for entity, replacement in _ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    text = _WHITESPACE_PATTERN.sub(" ", text)
    for spaced, fixed in _PUNCTUATION_FIXES:
        text = text.replace(spaced, fixed)
    text = text.strip()

    return truncate(text, max_length)


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, dropping whitespace left at the cut."""
    if len(text) <= max_length:
        return text
    return text[:max(max_length, 0)].rstrip()
