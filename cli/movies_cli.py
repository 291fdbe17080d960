"""Command-line utility for importing movie lists and querying prize intervals."""

from __future__ import annotations

import argparse
import json
import logging

from app.deps import get_win_store
from app.services.import_service import import_movies
from app.services.interval_service import get_prize_intervals
from app.services.maintenance_service import purge_system
from core.prize.normalizer import DEFAULT_DELIMITER


def cmd_import(args: argparse.Namespace) -> None:
    """Import CSV files and print the import summary."""
    summary = import_movies(args.paths, [], args.delimiter)
    print(json.dumps(summary.to_dict(), indent=2))


def cmd_intervals(_args: argparse.Namespace) -> None:
    """Print the producers with the shortest and longest gaps between wins."""
    print(json.dumps(get_prize_intervals(), indent=2))


def cmd_list(args: argparse.Namespace) -> None:
    store = get_win_store()
    records = store.ordered_winners() if args.winners else store.list_records()
    print(json.dumps([record.to_dict() for record in records], indent=2))


def cmd_purge(_args: argparse.Namespace) -> None:
    """Clear the win store to ensure a clean slate."""
    print(json.dumps(purge_system(), indent=2))


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(prog="movies")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    import_p = sub.add_parser("import")
    import_p.add_argument("paths", nargs="+")
    import_p.add_argument("--delimiter", default=DEFAULT_DELIMITER)
    import_p.set_defaults(func=cmd_import)

    intervals_p = sub.add_parser("intervals")
    intervals_p.set_defaults(func=cmd_intervals)

    list_p = sub.add_parser("list")
    list_p.add_argument("--winners", action="store_true", help="Only winning records, ordered by year")
    list_p.set_defaults(func=cmd_list)

    purge_p = sub.add_parser("purge")
    purge_p.set_defaults(func=cmd_purge)

    return parser


def main(argv=None) -> None:
    """CLI entry point invoked via `python -m cli.movies_cli ...`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()
