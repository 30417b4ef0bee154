"""
Blueprint inspection tool.

Lists what a blueprint declares, so callers can check which field handle
to pass to transform() before indexing.
"""

from typing import Any

from adapters.blueprints import get_blueprint_repository
from models import BardError, BlueprintLookup, ErrorKind


def inspect_blueprint(
    schema_path: str,
    blueprints: BlueprintLookup | None = None,
) -> dict[str, Any]:
    """
    Describe a blueprint's fields.

    Returns:
        Dict with handle, title, fields (handle → field type) and imports

    Raises:
        BardError: SCHEMA_UNAVAILABLE if no blueprint exists at schema_path
    """
    lookup = blueprints if blueprints is not None else get_blueprint_repository()
    blueprint = lookup.find(schema_path)
    if blueprint is None:
        raise BardError(
            ErrorKind.SCHEMA_UNAVAILABLE,
            f"Blueprint not found: {schema_path}",
            details={"schema_path": schema_path},
        )

    return {
        "handle": blueprint.handle,
        "title": blueprint.title,
        "fields": {
            handle: config.get("type") or config.get("reference")
            for handle, config in blueprint.fields.items()
        },
        "imports": blueprint.imports,
    }
