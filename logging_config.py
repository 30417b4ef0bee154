"""
Logging configuration for optimus-bard.

Simple setup that adapters and tools can import.
Extractors should NOT log (they're pure functions).

The package logger carries a NullHandler, so nothing is emitted until the
host application (or cli.py / server.py) configures logging.
"""

import logging
import sys

# Create logger for the package
logger = logging.getLogger("optimus_bard")
logger.addHandler(logging.NullHandler())


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for optimus-bard.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logger.setLevel(getattr(logging, level.upper()))

    # Only add a stream handler if not already configured
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


# NOTE: Call configure_logging() explicitly in cli.py, server.py or test setup.
# We don't auto-configure to avoid side effects on import.


# Convenience functions for the transform milestones.
# Each takes an optional logger so callers can route one transform's
# messages elsewhere.
def log_transform_start(
    schema_path: str,
    field_name: str,
    block_count: int | None,
    log: logging.Logger | None = None,
) -> None:
    """Log the start of a transform."""
    blocks = f"{block_count} blocks" if block_count is not None else "non-list input"
    (log or logger).debug(f"Transform: {schema_path}:{field_name} ({blocks})")


def log_schema_lookup(
    schema_path: str,
    field_name: str,
    found: bool,
    log: logging.Logger | None = None,
) -> None:
    """Log the outcome of the blueprint field lookup."""
    outcome = "found" if found else "not found"
    (log or logger).debug(f"Blueprint: {schema_path} field {field_name!r} {outcome}")


def log_fallback(
    reason: str,
    error: Exception | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Log a switch to raw content processing."""
    if error is not None:
        (log or logger).warning(f"Falling back to raw content ({reason}): {error!r}")
    else:
        (log or logger).info(f"Falling back to raw content ({reason})")


def log_transform_result(
    length: int,
    used_fallback: bool,
    log: logging.Logger | None = None,
) -> None:
    """Log the result summary."""
    path = "raw" if used_fallback else "schema"
    (log or logger).debug(f"Transform: {length} chars via {path} path")
