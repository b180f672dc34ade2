"""CLI commands for inspecting and running advanced contact filters."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ..domain.filters import FilterConfig
from ..domain.operators import operators_for
from ..models.requests import FilterRequest
from ..wiring import build_filter_service
from .validation import validate_filter_config


def _load_json(path: Path, what: str):
    """Read a JSON file or exit with a message on stderr."""
    if not path.exists():
        print(f"Error: {what} file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            print(f"Error: {what} file is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)


def load_filter_from_file(path: Path) -> FilterConfig:
    """Load a FilterConfig from a JSON file. Exits on missing file or invalid schema."""
    raw = _load_json(path, "filter")
    try:
        return FilterConfig.model_validate(raw)
    except ValidationError as e:
        print(f"Error: invalid filter in {path}: {e}", file=sys.stderr)
        sys.exit(1)


def load_records_from_file(path: Path) -> list[dict]:
    raw = _load_json(path, "records")
    if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
        print("Error: records file must contain a list of objects.", file=sys.stderr)
        sys.exit(1)
    return raw


def load_lookups_from_file(path: Path | None) -> dict:
    if path is None:
        return {}
    raw = _load_json(path, "lookups")
    if not isinstance(raw, dict):
        print("Error: lookups file must contain an object of field -> {id: label}.", file=sys.stderr)
        sys.exit(1)
    return raw


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="crm-filters", description="Evaluate advanced contact filters")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Fields command
    subparsers.add_parser("fields", help="List filterable fields and their operators")

    # Describe command
    describe_parser = subparsers.add_parser("describe", help="Print the banner text for a filter")
    describe_parser.add_argument("--filter", type=Path, required=True, help="Path to filter JSON")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a filter against the field catalog")
    validate_parser.add_argument("--filter", type=Path, required=True, help="Path to filter JSON")

    # Apply command
    apply_parser = subparsers.add_parser("apply", help="Filter records and print the JSON response")
    apply_parser.add_argument("--records", type=Path, required=True, help="Path to records JSON list")
    apply_parser.add_argument("--filter", type=Path, required=True, help="Path to filter JSON")
    apply_parser.add_argument(
        "--lookups",
        type=Path,
        default=None,
        help="Path to lookup maps JSON (field -> {identifier: label})",
    )

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    svc = build_filter_service()

    if args.command == "fields":
        for descriptor in svc.catalog:
            ops = ", ".join(spec.id.value for spec in operators_for(descriptor.semantic_type))
            print(f"{descriptor.key:<20} {descriptor.semantic_type.value:<11} {ops}")
    elif args.command == "describe":
        config = load_filter_from_file(args.filter)
        print(svc.describe(config))
    elif args.command == "validate":
        config = load_filter_from_file(args.filter)
        result = validate_filter_config(config, svc.catalog)
        print(json.dumps({**result.to_dict(), "filter": config.to_payload()}, indent=2))
        return 0 if result.is_valid else 1
    elif args.command == "apply":
        try:
            request = FilterRequest(
                records=load_records_from_file(args.records),
                filter=load_filter_from_file(args.filter),
                lookup_maps=load_lookups_from_file(args.lookups),
            )
        except ValidationError as e:
            print(f"Error: invalid input: {e}", file=sys.stderr)
            return 1
        response = svc.run(request)
        print(json.dumps(response.model_dump(mode="json"), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
