"""
Mark Sanitizer: Pure functions for inline text annotations.

Internal links (statamic://entry::42) point at other content inside the
authoring system. They mean nothing to a search index, so their hrefs are
redacted before a text run is indexed.
"""

from models import Mark, RawList, RawMapping, RawString, RawValue, node_type

INTERNAL_LINK_PREFIX = "statamic://"


def parse_marks(value: RawValue) -> list[Mark]:
    """
    Build Mark objects from a text node's raw marks value.

    Entries that are not mappings are dropped.
    """
    if not isinstance(value, RawList):
        return []

    marks: list[Mark] = []
    for item in value.items:
        if not isinstance(item, RawMapping):
            continue
        attrs = item.entries.get("attrs")
        marks.append(Mark(
            type=node_type(item.entries),
            attrs=dict(attrs.entries) if isinstance(attrs, RawMapping) else {},
        ))
    return marks


def is_internal_link(mark: Mark) -> bool:
    """True when the mark is a link whose href uses the internal scheme."""
    if mark.type != "link":
        return False
    href = mark.attrs.get("href")
    return isinstance(href, RawString) and href.value.startswith(INTERNAL_LINK_PREFIX)


def sanitize_marks(marks: list[Mark]) -> list[Mark]:
    """
    Redact internal-scheme link hrefs in place.

    Other marks, and links to external URLs, are left untouched.

    Returns:
        The same list, for chaining
    """
    for mark in marks:
        if is_internal_link(mark):
            mark.attrs["href"] = None
    return marks
