#!/usr/bin/env python3
"""
optimus-bard MCP Server

Exposes the transform as an MCP tool so indexing agents can turn Bard
content into search text without importing the package.

Architecture:
- extractors/: Pure functions (no lookups, no logging)
- adapters/: Blueprint YAML and Python-Markdown wrappers
- tools/: Tool implementations (wiring + error boundary)
- server.py: Thin MCP wrappers (this file)
"""

import os
import signal
from typing import Any

from mcp.server.fastmcp import FastMCP

from logging_config import configure_logging
from models import BardError
from tools import inspect_blueprint, transform_with_details

# Initialize MCP server
mcp = FastMCP("optimus-bard")


# ============================================================================
# TOOLS (thin wrappers)
# ============================================================================

@mcp.tool()
def transform(
    document: list[Any] | str,
    blueprint: str,
    field: str,
    set_types: list[str] | None = None,
    max_depth: int = 3,
    max_length: int = 90000,
) -> dict[str, Any]:
    """
    Turn a Bard field value into one cleaned string for search indexing.

    Falls back to schema-agnostic extraction when the blueprint field is
    missing or extraction fails; never errors.

    Args:
        document: The Bard field value (list of blocks) or a plain string
        blueprint: Blueprint path, e.g. "collections/pages/page"
        field: Handle of the Bard field in that blueprint
        set_types: Extra set types to include besides "text"
        max_depth: Set nesting depth limit
        max_length: Output character limit

    Returns:
        text: Cleaned search text
        length: Character count
        used_fallback: True when raw processing produced the text
        fallback_reason: schema_unavailable / extraction_failed / null
        warnings: Option problems that were corrected
    """
    result = transform_with_details(
        document,
        blueprint,
        field,
        set_types or [],
        {"max_depth": max_depth, "max_length": max_length},
    )
    return result.to_dict()


@mcp.tool()
def blueprint_fields(blueprint: str) -> dict[str, Any]:
    """
    List the fields a blueprint declares.

    Args:
        blueprint: Blueprint path, e.g. "collections/pages/page"

    Returns:
        handle, title, fields (handle → type), imports (unexpanded fieldsets)
    """
    try:
        return inspect_blueprint(blueprint)
    except BardError as e:
        return e.to_dict()


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores.
    """
    os._exit(0)


def main() -> None:
    configure_logging(os.environ.get("OPTIMUS_BARD_LOG_LEVEL", "WARNING"))
    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)
    mcp.run()


if __name__ == "__main__":
    main()
