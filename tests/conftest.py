"""
Shared pytest fixtures for optimus-bard tests.

Fixtures are loaded from the fixtures/ directory at project root.
Bard documents are JSON (the field value as a caller would pass it);
blueprints are YAML under fixtures/blueprints/.
"""

import json
from pathlib import Path
from typing import Any, Generator

import pytest

from adapters.blueprints import InMemoryBlueprints, clear_blueprint_cache
from models import ExtractionOptions
from settings import clear_config_cache
from tests.helpers import BLUEPRINTS_DIR, FIXTURES_DIR, RecordingRenderer


def load_fixture(category: str, name: str) -> Any:
    """
    Load a JSON fixture by category and name.

    Example:
        load_fixture("bard", "article")  # loads fixtures/bard/article.json
    """
    fixture_path = FIXTURES_DIR / category / f"{name}.json"
    with open(fixture_path) as f:
        return json.load(f)


# ============================================================================
# Bard Fixtures
# ============================================================================

@pytest.fixture
def article_document() -> list[dict[str, Any]]:
    """Bard document with text, quote, gallery and a nested accordion."""
    return load_fixture("bard", "article")


@pytest.fixture
def malformed_document() -> list[Any]:
    """Bard document with stray scalars, empty text blocks and untyped blocks."""
    return load_fixture("bard", "malformed")


# ============================================================================
# Collaborators
# ============================================================================

@pytest.fixture
def identity_render() -> RecordingRenderer:
    """Renderer that returns markdown unchanged and records each call."""
    return RecordingRenderer()


@pytest.fixture
def options() -> ExtractionOptions:
    """Default extraction options (depth 0, max_depth 3, max_length 90000)."""
    return ExtractionOptions()


@pytest.fixture
def page_blueprints() -> InMemoryBlueprints:
    """In-memory lookup where collections/pages/page declares a 'content' field."""
    return InMemoryBlueprints({
        "collections/pages/page": {
            "title": "Page",
            "fields": [
                {"handle": "title", "field": {"type": "text"}},
                {"handle": "content", "field": {"type": "bard"}},
            ],
        },
    })


@pytest.fixture
def blueprints_env(monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """
    Point the default blueprint repository at fixtures/blueprints.

    Clears the cached repository and config before and after the test.
    """
    monkeypatch.setenv("OPTIMUS_BARD_BLUEPRINTS", str(BLUEPRINTS_DIR))
    clear_blueprint_cache()
    clear_config_cache()
    yield BLUEPRINTS_DIR
    clear_blueprint_cache()
    clear_config_cache()
