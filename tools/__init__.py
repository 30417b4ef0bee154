"""
Tools: entry points wiring extractors to adapters.

cli.py and server.py provide thin wrappers that call into these.

- transform: Bard field value → cleaned search text
- inspect_blueprint: field handles a blueprint declares
"""

from .transform import transform, transform_with_details, transform_legacy
from .inspect import inspect_blueprint

__all__ = [
    "transform",
    "transform_with_details",
    "transform_legacy",
    "inspect_blueprint",
]
