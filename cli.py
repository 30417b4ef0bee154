#!/usr/bin/env python3
"""
CLI interface for optimus-bard.

Usage:
    optimus-bard transform content.json --blueprint collections/pages/page --field content
    optimus-bard inspect-blueprint collections/pages/page

Bard content is read as JSON (the field value, i.e. a list of blocks).
Use "-" to read from stdin.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from adapters.blueprints import YamlBlueprintRepository
from logging_config import configure_logging
from models import BardError, ErrorKind
from tools import inspect_blueprint, transform_with_details


def _load_document(source: str) -> Any:
    """Read and parse the JSON document from a path or stdin."""
    try:
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise BardError(
            ErrorKind.INVALID_INPUT,
            f"Cannot read {source}: {e.strerror or e}",
            details={"source": source},
        ) from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise BardError(
            ErrorKind.INVALID_INPUT,
            f"Invalid JSON in {source}: {e.msg} (line {e.lineno})",
            details={"source": source},
        ) from e


def _repository(args: argparse.Namespace) -> YamlBlueprintRepository | None:
    return YamlBlueprintRepository(args.blueprints_dir) if args.blueprints_dir else None


def cmd_transform(args: argparse.Namespace) -> None:
    """Transform a Bard document into search text."""
    document = _load_document(args.file)

    options: dict[str, int] = {}
    if args.max_depth is not None:
        options["max_depth"] = args.max_depth
    if args.max_length is not None:
        options["max_length"] = args.max_length

    result = transform_with_details(
        document,
        args.blueprint,
        args.field,
        args.set_types or [],
        options,
        blueprints=_repository(args),
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.text)


def cmd_inspect_blueprint(args: argparse.Namespace) -> None:
    """Show the fields a blueprint declares."""
    result = inspect_blueprint(args.blueprint, blueprints=_repository(args))
    print(json.dumps(result, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="optimus-bard",
        description="Turn Bard field content into search-index text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    optimus-bard transform entry.json --blueprint collections/pages/page --field content
    optimus-bard transform - --blueprint collections.blog.post --field body --set-type quote
    cat entry.json | optimus-bard transform - --blueprint pages/page --field content --json
    optimus-bard inspect-blueprint collections/pages/page --blueprints-dir resources/blueprints
""",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # transform
    transform_p = subparsers.add_parser("transform", help="Extract search text from Bard JSON")
    transform_p.add_argument("file", help="JSON file with the Bard field value, or - for stdin")
    transform_p.add_argument("--blueprint", required=True, help="Blueprint path")
    transform_p.add_argument("--field", required=True, help="Bard field handle")
    transform_p.add_argument(
        "--set-type",
        dest="set_types",
        action="append",
        help="Extra set type to include (repeatable)",
    )
    transform_p.add_argument("--max-depth", type=int, help="Set nesting depth limit (default: 3)")
    transform_p.add_argument(
        "--max-length",
        type=int,
        help="Output character limit (default: 90000)",
    )
    transform_p.add_argument("--blueprints-dir", help="Blueprint root directory")
    transform_p.add_argument(
        "--json",
        action="store_true",
        help="Print the full result (text, fallback info, warnings) as JSON",
    )
    transform_p.set_defaults(func=cmd_transform)

    # inspect-blueprint
    inspect_p = subparsers.add_parser("inspect-blueprint", help="List a blueprint's fields")
    inspect_p.add_argument("blueprint", help="Blueprint path")
    inspect_p.add_argument("--blueprints-dir", help="Blueprint root directory")
    inspect_p.set_defaults(func=cmd_inspect_blueprint)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        args.func(args)
    except BardError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
