"""
Shared test helpers for optimus-bard.

Stand-ins for the caller-side objects a Bard value can contain, and for the
two collaborators (markdown renderer, blueprint lookup).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from models import Blueprint

# Project root for fixture loading
PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"
BLUEPRINTS_DIR = FIXTURES_DIR / "blueprints"


# ============================================================================
# Value holders
# ============================================================================


@dataclass
class RawHolder:
    """Object exposing raw(), like an augmented field value."""
    value: Any
    calls: int = 0

    def raw(self) -> Any:
        self.calls += 1
        return self.value


class ExplodingHolder:
    """raw() always raises, pushing both extraction paths into errors."""

    def raw(self) -> Any:
        raise RuntimeError("raw() exploded")


@dataclass
class DictConvertible:
    """Object exposing to_dict(), converted to a mapping at the boundary."""
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return self.data


class Stringable:
    """Object with nothing but __str__."""

    def __init__(self, text: str):
        self.text = text

    def __str__(self) -> str:
        return self.text


# ============================================================================
# Collaborators
# ============================================================================


@dataclass
class RecordingRenderer:
    """Markdown renderer returning its input unchanged.

    Records every source it was asked to render:
        render = RecordingRenderer()
        extract_content(doc, options, render)
        assert render.calls == ["Hello"]
    """
    calls: list[str] = field(default_factory=list)

    def __call__(self, source: str) -> str:
        self.calls.append(source)
        return source


def raising_render(source: str) -> str:
    """Renderer that always fails."""
    raise ValueError(f"cannot render {source!r}")


class RaisingLookup:
    """Blueprint lookup whose find() raises."""

    def __init__(self, error: Exception | None = None):
        self.error = error or ConnectionError("blueprint store unavailable")

    def find(self, path: str) -> Blueprint | None:
        raise self.error


class EmptyLookup:
    """Blueprint lookup that never finds anything."""

    def find(self, path: str) -> Blueprint | None:
        return None
