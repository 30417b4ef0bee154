"""
Blueprint Adapter: finds content schemas (blueprints) for field lookups.

Blueprints are YAML files laid out by path, e.g.
    resources/blueprints/collections/pages/page.yaml
and addressed as "collections/pages/page" or "collections.pages.page".

Three layouts are understood:
- tabs → sections → fields   (current)
- sections → fields          (legacy, sections keyed by handle)
- fields                     (flat)

The transform only asks whether a field exists, so field configs are kept
as-is and fieldset imports are recorded but not expanded.
"""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any
import logging

import yaml

from models import Blueprint, BardError, ErrorKind
from settings import get_blueprints_dir

__all__ = [
    "YamlBlueprintRepository",
    "InMemoryBlueprints",
    "parse_blueprint",
    "get_blueprint_repository",
    "clear_blueprint_cache",
]

logger = logging.getLogger(__name__)

BLUEPRINT_SUFFIXES = (".yaml", ".yml")


class YamlBlueprintRepository:
    """Loads blueprints from YAML files under a root directory."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def resolve_path(self, path: str) -> Path | None:
        """
        Map a blueprint path to its YAML file.

        Returns None when no file exists or the path escapes the root.
        """
        if not path or not path.strip():
            return None

        relative = _normalize_path(path)
        root = self.root.resolve()
        for suffix in BLUEPRINT_SUFFIXES:
            candidate = (root / f"{relative}{suffix}").resolve()
            if not candidate.is_relative_to(root):
                logger.warning(f"Blueprint path escapes root: {path!r}")
                return None
            if candidate.is_file():
                return candidate
        return None

    def find(self, path: str) -> Blueprint | None:
        """
        Load the blueprint at path.

        Returns:
            Blueprint, or None if there is no such file

        Raises:
            BardError: EXTRACTION_FAILED if the file isn't valid YAML
        """
        file_path = self.resolve_path(path)
        if file_path is None:
            return None

        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise BardError(
                ErrorKind.EXTRACTION_FAILED,
                f"Invalid blueprint YAML: {file_path.name}",
                details={"path": str(file_path), "error": str(e)},
            ) from e

        return parse_blueprint(file_path.stem, data)


class InMemoryBlueprints:
    """
    Blueprints registered in code.

    Values may be Blueprint objects or raw blueprint dicts in any of the
    YAML layouts.
    """

    def __init__(self, blueprints: Mapping[str, Blueprint | dict[str, Any]] | None = None):
        self._blueprints: dict[str, Blueprint] = {}
        for path, blueprint in (blueprints or {}).items():
            self.register(path, blueprint)

    def register(self, path: str, blueprint: Blueprint | dict[str, Any]) -> None:
        if not isinstance(blueprint, Blueprint):
            blueprint = parse_blueprint(path.replace("/", ".").rsplit(".", 1)[-1], blueprint)
        self._blueprints[_normalize_path(path)] = blueprint

    def find(self, path: str) -> Blueprint | None:
        return self._blueprints.get(_normalize_path(path))


def parse_blueprint(handle: str, data: Any) -> Blueprint:
    """
    Build a Blueprint from parsed YAML.

    Malformed sections and field entries are skipped rather than rejected.
    """
    if not isinstance(data, dict):
        return Blueprint(handle=handle)

    blueprint = Blueprint(handle=handle, title=data.get("title"))

    for field_list in _iter_field_lists(data):
        for entry in field_list:
            _add_field_entry(blueprint, entry)

    return blueprint


def _iter_field_lists(data: dict[str, Any]) -> list[list[Any]]:
    """Collect every `fields:` list from whichever layout the blueprint uses."""
    field_lists: list[list[Any]] = []

    tabs = data.get("tabs")
    if isinstance(tabs, dict):
        for tab in tabs.values():
            if isinstance(tab, dict):
                field_lists.extend(_section_field_lists(tab.get("sections")))

    field_lists.extend(_section_field_lists(data.get("sections")))

    if isinstance(data.get("fields"), list):
        field_lists.append(data["fields"])

    return field_lists


def _section_field_lists(sections: Any) -> list[list[Any]]:
    """Sections are a list under tabs and a handle-keyed dict in legacy blueprints."""
    if isinstance(sections, dict):
        sections = list(sections.values())
    if not isinstance(sections, list):
        return []
    return [
        section["fields"]
        for section in sections
        if isinstance(section, dict) and isinstance(section.get("fields"), list)
    ]


def _add_field_entry(blueprint: Blueprint, entry: Any) -> None:
    if not isinstance(entry, dict):
        return

    if "import" in entry:
        blueprint.imports.append(str(entry["import"]))
        return

    handle = entry.get("handle")
    if not handle:
        return

    config = entry.get("field")
    if isinstance(config, str):
        # Reference to a field inside a fieldset: "common.content"
        config = {"reference": config}
    elif not isinstance(config, dict):
        config = {}

    blueprint.fields[str(handle)] = config


def _normalize_path(path: str) -> str:
    relative = path.strip().strip("/")
    if "/" not in relative:
        relative = relative.replace(".", "/")
    return relative


@lru_cache(maxsize=1)
def get_blueprint_repository() -> YamlBlueprintRepository:
    """Get the default blueprint repository (cached)."""
    return YamlBlueprintRepository(get_blueprints_dir())


def clear_blueprint_cache() -> None:
    """Forget the default repository (after changing OPTIMUS_BARD_BLUEPRINTS)."""
    get_blueprint_repository.cache_clear()
