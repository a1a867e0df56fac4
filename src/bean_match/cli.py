"""Command-line interface for bean-match."""

import argparse
import logging
import sys

from bean_match import __version__
from bean_match.catalog import validate_catalog
from bean_match.catalog.types import FLAT_CATEGORIES, HIERARCHICAL_CATEGORIES
from bean_match.exceptions import BeanMatchError
from bean_match.formatting import confidence_level, format_match_result
from bean_match.matcher import CoffeeDataMatcher, MatcherConfig


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "match" and args.scope and args.category not in HIERARCHICAL_CATEGORIES:
        parser.error("--scope only applies to region and farm")

    try:
        matcher = CoffeeDataMatcher(MatcherConfig.from_env())
        if args.command == "match":
            return _run_match(matcher, args)
        if args.command == "options":
            return _run_options(matcher, args)
        return _run_validate(matcher)
    except BeanMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bean-match",
        description="Match coffee attributes against curated catalogs",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log matching details",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bean-match {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    match_parser = subparsers.add_parser("match", help="Find the best catalog entry for a value")
    match_parser.add_argument("category", choices=FLAT_CATEGORIES + HIERARCHICAL_CATEGORIES)
    match_parser.add_argument("text", help="Free text to match")
    match_parser.add_argument(
        "--scope",
        help="Parent scope: country id for region, region name for farm",
    )
    match_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    options_parser = subparsers.add_parser("options", help="List catalog entries")
    options_parser.add_argument("category", choices=FLAT_CATEGORIES)

    subparsers.add_parser("validate", help="Check the catalog for curation problems")
    return parser


def _run_match(matcher: CoffeeDataMatcher, args: argparse.Namespace) -> int:
    if args.category in HIERARCHICAL_CATEGORIES:
        result = matcher.match_hierarchical(args.category, args.text, args.scope)
    else:
        result = matcher.match_flat(args.category, args.text)

    if result is None:
        print("No match", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        _print_formatted(args.category, result)
    return 0


def _run_options(matcher: CoffeeDataMatcher, args: argparse.Namespace) -> int:
    for entity in matcher.catalog.options(args.category):
        print(f"  {entity.id:<22} {entity.name} ({entity.english_name})")
    return 0


def _run_validate(matcher: CoffeeDataMatcher) -> int:
    problems = validate_catalog(matcher.catalog)
    for problem in problems:
        print(f"[catalog-check] ERROR: {problem}")
    if problems:
        return 1
    print(f"[catalog-check] OK ({matcher.catalog.version})")
    return 0


def _print_formatted(category: str, result) -> None:
    """Print result in human-readable format."""
    print()
    print("  bean-match")
    print()

    fields = [
        ("Category", category),
        ("Match", format_match_result(result)),
        ("English Name", result.english_name),
        ("ID", result.id),
        ("Confidence", f"{result.confidence} ({confidence_level(result)})"),
    ]

    for label, value in fields:
        print(f"  {label + ':':<14} {value}")

    print()


if __name__ == "__main__":
    sys.exit(main())
