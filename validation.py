"""
Option validation and normalization.

Handles:
- transform options mapping (max_depth, max_length) → validated integers
- extra set types → frozenset including the base "text" type

Invalid values never raise. They fall back to the configured defaults and
produce a warning string the caller can surface.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from models import ExtractionOptions
from settings import get_transform_config

# =============================================================================
# RECOGNIZED OPTIONS
# =============================================================================

OPTION_MAX_DEPTH = "max_depth"
OPTION_MAX_LENGTH = "max_length"
RECOGNIZED_OPTIONS = frozenset({OPTION_MAX_DEPTH, OPTION_MAX_LENGTH})


# =============================================================================
# INTEGER OPTIONS
# =============================================================================

def coerce_non_negative_int(value: Any) -> int | None:
    """
    Coerce an option value to a non-negative int.

    Accepts ints and digit strings ("5"). Booleans, floats, negatives
    and anything else give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def normalize_options(options: Mapping[str, Any] | None) -> tuple[int, int, list[str]]:
    """
    Validate the caller's options mapping.

    Args:
        options: Mapping with optional max_depth / max_length keys.
            Unknown keys are ignored with a warning.

    Returns:
        Tuple of (max_depth, max_length, warnings)
    """
    config = get_transform_config()
    max_depth: int = config["max_depth"]
    max_length: int = config["max_length"]
    warnings: list[str] = []

    if not options:
        return max_depth, max_length, warnings

    if not isinstance(options, Mapping):
        warnings.append(f"Ignoring options of type {type(options).__name__}; expected a mapping")
        return max_depth, max_length, warnings

    if OPTION_MAX_DEPTH in options:
        coerced = coerce_non_negative_int(options[OPTION_MAX_DEPTH])
        if coerced is None:
            warnings.append(
                f"Invalid max_depth {options[OPTION_MAX_DEPTH]!r}; using {max_depth}"
            )
        else:
            max_depth = coerced

    if OPTION_MAX_LENGTH in options:
        coerced = coerce_non_negative_int(options[OPTION_MAX_LENGTH])
        if coerced is None:
            warnings.append(
                f"Invalid max_length {options[OPTION_MAX_LENGTH]!r}; using {max_length}"
            )
        else:
            max_length = coerced

    unknown = sorted(str(key) for key in options if key not in RECOGNIZED_OPTIONS)
    if unknown:
        warnings.append(f"Unknown options ignored: {', '.join(unknown)}")

    return max_depth, max_length, warnings


# =============================================================================
# SET TYPES
# =============================================================================

def normalize_set_types(extra_set_types: Iterable[Any] | str | None) -> tuple[frozenset[str], list[str]]:
    """
    Merge caller set types with the base types from config.

    A bare string counts as a single set type.

    Returns:
        Tuple of (set_types, warnings)
    """
    base = frozenset(get_transform_config().get("base_set_types", ["text"]))
    warnings: list[str] = []

    if not extra_set_types:
        return base, warnings

    if isinstance(extra_set_types, str):
        extra_set_types = [extra_set_types]
    elif not isinstance(extra_set_types, Iterable):
        warnings.append(f"Ignoring set types of type {type(extra_set_types).__name__}")
        return base, warnings

    extra: set[str] = set()
    for set_type in extra_set_types:
        if isinstance(set_type, str) and set_type.strip():
            extra.add(set_type.strip())
        else:
            warnings.append(f"Ignoring invalid set type {set_type!r}")

    return base | extra, warnings


def build_extraction_options(
    extra_set_types: Iterable[Any] | str | None = None,
    options: Mapping[str, Any] | None = None,
) -> tuple[ExtractionOptions, list[str]]:
    """
    Build the per-call ExtractionOptions from caller input.

    Returns:
        Tuple of (ExtractionOptions at depth 0, warnings)
    """
    max_depth, max_length, warnings = normalize_options(options)
    set_types, set_type_warnings = normalize_set_types(extra_set_types)
    warnings.extend(set_type_warnings)

    return (
        ExtractionOptions(
            set_types=set_types,
            max_depth=max_depth,
            max_length=max_length,
        ),
        warnings,
    )
