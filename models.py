"""
Type definitions for optimus-bard.

Dataclasses defining the contracts between layers:
- to_raw_value() turns caller input into the closed RawValue variant, once
- Extractors consume RawValue / Node structures and return strings
- Tools wire everything together

These types make the boundary → extractor contract explicit and IDE-checkable.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Protocol, Union


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    SCHEMA_UNAVAILABLE = "schema_unavailable"  # Blueprint or field not found
    EXTRACTION_FAILED = "extraction_failed"    # Schema-aware extraction raised
    INVALID_INPUT = "invalid_input"            # Bad parameters or unreadable input
    UNKNOWN = "unknown"                        # Unexpected error


class BardError(Exception):
    """
    Structured error for consistent handling across layers.

    Adapters raise these on collaborator failures.
    The CLI and MCP server format them for output.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for CLI / MCP response."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


# ============================================================================
# RAW VALUES
# ============================================================================

@dataclass(frozen=True)
class RawString:
    """A plain string field value."""
    value: str


@dataclass(frozen=True)
class RawList:
    """An ordered sequence of values (a list of sets, a nested document, tags...)."""
    items: tuple["RawValue", ...]


@dataclass(frozen=True)
class RawMapping:
    """A named collection of values. Key order is the caller's insertion order."""
    entries: dict[str, "RawValue"]


@dataclass(frozen=True)
class LazyText:
    """
    A holder exposing raw(), such as an augmented field value.

    The holder is only unwrapped when a consumer needs its contents.
    """
    holder: Any

    def resolve(self) -> "RawValue":
        return to_raw_value(self.holder.raw())


@dataclass(frozen=True)
class RawScalar:
    """Any other object, stringified as a last resort."""
    text: str


# None covers null plus non-textual scalars (booleans, numbers)
RawValue = Union[RawString, RawList, RawMapping, LazyText, RawScalar, None]


def to_raw_value(value: Any) -> RawValue:
    """
    Convert arbitrary caller input into the closed RawValue variant.

    Shape probing happens here and nowhere else:
    - str → RawString
    - Mapping → RawMapping (keys stringified, order kept)
    - list / tuple → RawList
    - bytes → RawString (decoded as UTF-8)
    - object with raw() → LazyText
    - object with to_dict() / toArray() → converted and normalized
    - any other iterable (generator, deque, set...) → RawList, consumed once
    - None, bool, int, float → None
    - anything else → RawScalar(str(value))
    """
    if value is None or isinstance(value, (bool, int, float)):
        return None
    if isinstance(value, str):
        return RawString(value)
    if isinstance(value, (bytes, bytearray)):
        return RawString(bytes(value).decode("utf-8", errors="replace"))
    if isinstance(value, (RawString, RawList, RawMapping, LazyText, RawScalar)):
        return value
    if isinstance(value, Mapping):
        return RawMapping({str(k): to_raw_value(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return RawList(tuple(to_raw_value(item) for item in value))
    if callable(getattr(value, "raw", None)):
        return LazyText(value)
    for converter in ("to_dict", "toArray"):
        convert = getattr(value, converter, None)
        if callable(convert):
            return to_raw_value(convert())
    if isinstance(value, Iterable):
        return RawList(tuple(to_raw_value(item) for item in value))
    return RawScalar(str(value))


def is_empty(value: RawValue) -> bool:
    """True for null, empty strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, RawString):
        return value.value == ""
    if isinstance(value, RawList):
        return not value.items
    if isinstance(value, RawMapping):
        return not value.entries
    if isinstance(value, RawScalar):
        return value.text == ""
    return False


# ============================================================================
# DOCUMENT NODES
# ============================================================================

@dataclass
class Mark:
    """Inline annotation on a text run (link, bold, ...)."""
    type: str | None
    attrs: dict[str, RawValue] = field(default_factory=dict)


@dataclass
class TextNode:
    """A literal text run. text may still be a LazyText holder."""
    text: RawValue
    marks: list[Mark] = field(default_factory=list)


@dataclass
class SetNode:
    """
    A typed set block.

    fields holds the whole block, structural keys included. The set
    extractor is responsible for skipping them.
    """
    type: str | None
    fields: dict[str, RawValue]


Node = Union[TextNode, SetNode]


def node_type(entries: Mapping[str, RawValue]) -> str | None:
    """Read a block's type as a plain string, if it has one."""
    value = entries.get("type")
    if isinstance(value, RawString):
        return value.value
    if isinstance(value, RawScalar):
        return value.text
    return None


# ============================================================================
# EXTRACTION OPTIONS
# ============================================================================

DEFAULT_MAX_DEPTH = 3
DEFAULT_MAX_LENGTH = 90000
BASE_SET_TYPES: frozenset[str] = frozenset({"text"})


@dataclass(frozen=True)
class ExtractionOptions:
    """
    Per-call extraction configuration.

    Immutable: each recursion level gets its own copy via descend(),
    so depth is never shared between branches or calls.
    """
    set_types: frozenset[str] = BASE_SET_TYPES
    max_depth: int = DEFAULT_MAX_DEPTH
    max_length: int = DEFAULT_MAX_LENGTH
    current_depth: int = 0

    def descend(self) -> "ExtractionOptions":
        return replace(self, current_depth=self.current_depth + 1)

    @property
    def depth_exhausted(self) -> bool:
        return self.current_depth >= self.max_depth


# ============================================================================
# TRANSFORM RESULT
# ============================================================================

@dataclass
class TransformResult:
    """
    Outcome of a transform call.

    text is what transform() returns; the rest tells callers which path
    produced it.
    """
    text: str
    used_fallback: bool = False
    fallback_reason: ErrorKind | None = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "length": len(self.text),
            "used_fallback": self.used_fallback,
            "fallback_reason": self.fallback_reason.value if self.fallback_reason else None,
            "warnings": self.warnings,
        }


# Markdown source → rendered text/HTML. Supplied by adapters.markdown.
MarkdownRenderer = Callable[[str], str]


# ============================================================================
# BLUEPRINT TYPES
# ============================================================================

@dataclass
class Blueprint:
    """
    A content schema: the fields an entry of this type can carry.

    Only field presence matters for extraction. Field configs are kept for
    inspection (cli.py inspect-blueprint).
    """
    handle: str
    title: str | None = None
    fields: dict[str, dict[str, Any]] = field(default_factory=dict)

    # Fieldsets referenced with `import:` that were not expanded
    imports: list[str] = field(default_factory=list)

    def field(self, name: str) -> dict[str, Any] | None:
        return self.fields.get(name)


class BlueprintLookup(Protocol):
    """Anything that can find a blueprint by path (YAML repository, in-memory registry)."""

    def find(self, path: str) -> Blueprint | None: ...
