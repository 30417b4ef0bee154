"""
Transform tool implementation.

Turns a Bard field value into one cleaned string for search indexing.

Flow:
1. Normalize options and set types (validation.py)
2. Normalize the document into the RawValue variant (models.to_raw_value)
3. Look the field up in its blueprint
4. Field found → schema-aware extraction (extractors.extract_content)
   Field missing → raw processing (extractors.process_raw_content)
5. Any exception in steps 2-4 → raw processing of the same input

Never raises. The worst case is "".
"""

from collections.abc import Iterable, Mapping
from typing import Any
import logging
import warnings

from adapters.blueprints import get_blueprint_repository
from adapters.markdown import render_markdown
from extractors import clean_text, extract_content, process_raw_content
from logging_config import (
    logger as package_logger,
    log_fallback,
    log_schema_lookup,
    log_transform_result,
    log_transform_start,
)
from models import (
    BlueprintLookup,
    ErrorKind,
    ExtractionOptions,
    MarkdownRenderer,
    RawList,
    RawValue,
    TransformResult,
    to_raw_value,
)
from validation import build_extraction_options


def transform(
    document: Any,
    schema_path: str,
    field_name: str,
    extra_set_types: Iterable[str] | str | None = (),
    options: Mapping[str, Any] | None = None,
    *,
    blueprints: BlueprintLookup | None = None,
    render: MarkdownRenderer | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """
    Transform Bard field content into searchable text.

    Args:
        document: The Bard field value (list of blocks), or any other value
        schema_path: Blueprint path, e.g. "collections/pages/page"
        field_name: Handle of the Bard field in that blueprint
        extra_set_types: Set types to include in addition to "text"
        options: Optional max_depth (default 3) and max_length (default 90000)
        blueprints: Blueprint lookup (default: YAML repository from settings)
        render: Markdown renderer (default: Python-Markdown)
        logger: Logger for milestone messages (default: "optimus_bard")

    Returns:
        Cleaned text, possibly ""
    """
    return transform_with_details(
        document,
        schema_path,
        field_name,
        extra_set_types,
        options,
        blueprints=blueprints,
        render=render,
        logger=logger,
    ).text


def transform_with_details(
    document: Any,
    schema_path: str,
    field_name: str,
    extra_set_types: Iterable[str] | str | None = (),
    options: Mapping[str, Any] | None = None,
    *,
    blueprints: BlueprintLookup | None = None,
    render: MarkdownRenderer | None = None,
    logger: logging.Logger | None = None,
) -> TransformResult:
    """
    Same as transform(), returning a TransformResult.

    The result records whether the raw fallback produced the text and why,
    plus any option warnings.
    """
    if _is_empty_document(document):
        return TransformResult(text="")

    render = render or render_markdown
    extraction_options = ExtractionOptions()
    option_warnings: list[str] = []
    # Iterators can only be walked once, so the fallback reuses this when set
    normalized: RawValue = None

    try:
        extraction_options, option_warnings = build_extraction_options(extra_set_types, options)
        raw = normalized = to_raw_value(document)
        block_count = len(raw.items) if isinstance(raw, RawList) else None
        log_transform_start(schema_path, field_name, block_count, logger)

        lookup = blueprints if blueprints is not None else get_blueprint_repository()
        blueprint = lookup.find(schema_path)
        field = blueprint.field(field_name) if blueprint is not None else None
        log_schema_lookup(schema_path, field_name, field is not None, logger)

        if field is None:
            reason = ErrorKind.SCHEMA_UNAVAILABLE
            log_fallback(reason.value, log=logger)
        else:
            fragments = extract_content(raw, extraction_options, render)
            text = clean_text(" ".join(fragments), extraction_options.max_length)
            log_transform_result(len(text), False, logger)
            return TransformResult(text=text, warnings=option_warnings)

    except Exception as e:
        reason = ErrorKind.EXTRACTION_FAILED
        log_fallback(reason.value, e, logger)

    source = normalized if normalized is not None else document
    return _fallback(source, extraction_options, render, reason, option_warnings, logger)


def transform_legacy(
    document: Any,
    schema_path: str,
    field_name: str,
    extra_set_types: Iterable[str] | str | None = (),
) -> str:
    """
    Legacy entry point kept for backward compatibility.

    Deprecated: use transform() instead.
    """
    warnings.warn(
        "transform_legacy() is deprecated; use transform()",
        DeprecationWarning,
        stacklevel=2,
    )
    return transform(document, schema_path, field_name, extra_set_types)


def _fallback(
    document: Any,
    options: ExtractionOptions,
    render: MarkdownRenderer,
    reason: ErrorKind,
    option_warnings: list[str],
    logger: logging.Logger | None,
) -> TransformResult:
    """Run raw processing on the caller's input (or its normalized form). Never raises."""
    try:
        text = process_raw_content(to_raw_value(document), options, render)
    except Exception as e:
        (logger or package_logger).error(f"Raw content processing failed: {e!r}")
        text = ""

    log_transform_result(len(text), True, logger)
    return TransformResult(
        text=text,
        used_fallback=True,
        fallback_reason=reason,
        warnings=option_warnings,
    )


def _is_empty_document(document: Any) -> bool:
    """Null, "" and empty collections have nothing to extract."""
    if document is None:
        return True
    if isinstance(document, (str, list, tuple, Mapping)):
        return len(document) == 0
    return False
