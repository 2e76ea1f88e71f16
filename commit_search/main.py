#!/usr/bin/env python3
"""Commit Search - search git history with prefix-annotated queries.

Entry point for the CLI application.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .dates import parse_date_value
from .models import SearchArgs, SearchDimension


def configure_logging(verbose: bool = False):
    """Route all logging through rich on stderr."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
    )
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def date_arg(value: str):
    parsed = parse_date_value(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"invalid date: {value!r}")
    return parsed


def search_args_from_cli(args) -> SearchArgs:
    return SearchArgs(
        search=args.query,
        search_by=SearchDimension(args.by) if args.by else None,
        max_count=args.max_count,
        prefill_only=args.prefill,
        show_in_view=args.in_view,
        sha=args.sha,
        branch=args.branch,
        author=args.author,
        since=args.since,
        before=args.before,
        after=args.after,
        show_merge_commits=args.merge_commits,
    )


def cmd_search(args):
    """Search commits and open the picker."""
    from .commands import Commands, setup_commands
    from .commands.context import PaletteInvocation
    from .config import load_settings
    from .services import build_services

    settings = load_settings()
    services = build_services(settings)
    registry = setup_commands(services, settings)

    command_id = Commands.SEARCH_COMMITS_IN_VIEW if args.in_view else Commands.SEARCH_COMMITS
    invocation = PaletteInvocation(command=command_id, uri=args.repo, editor_path=args.path)

    search_commits = registry.get(command_id)
    asyncio.run(search_commits.pre_execute(invocation, search_args_from_cli(args)))


def cmd_symbols(args):
    """List the search prefix symbols."""
    from .criteria import DIMENSION_LABELS
    from .symbols import SYMBOL_TO_DIMENSION

    print("Search prefixes:")
    for symbol, dimension in SYMBOL_TO_DIMENSION.items():
        print(f"  {symbol}  {DIMENSION_LABELS[dimension]:<14} e.g. {symbol}value")
    print()
    print("Anything else searches commit messages.")


def add_search_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("query", nargs="?", help="Search text, optionally prefixed (@ ~ = : #)")
    parser.add_argument(
        "--by", "-b",
        choices=[d.value for d in SearchDimension],
        help="Dimension the query filters on (skips prefix parsing)",
    )
    parser.add_argument("--prefill", action="store_true", help="Re-encode --by as a prefix and parse the query")
    parser.add_argument("--author", "-a", help="Filter by author")
    parser.add_argument("--branch", help="Search this branch")
    parser.add_argument("--sha", help="Show this commit")
    parser.add_argument("--since", help="Commits since (git date; -1 for none)")
    parser.add_argument("--before", type=date_arg, help="Commits before date (YYYY-MM-DD or 7d, 2w, ...)")
    parser.add_argument("--after", type=date_arg, help="Commits after date (YYYY-MM-DD or 7d, 2w, ...)")
    parser.add_argument("--max-count", "-n", type=int, help="Max commits (0 for all)")
    parser.add_argument(
        "--merge-commits",
        action="store_true",
        default=None,
        help="Include merge commits",
    )
    parser.add_argument("--in-view", action="store_true", help="Offer the results view")
    parser.add_argument("--repo", "-r", type=Path, help="Repository to search")
    parser.add_argument("--path", type=Path, help="File whose repository is searched")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search git commits by message, author, changes, files or sha",
        prog="commit-search",
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    search_parser = subparsers.add_parser("search", help="Search commits (default)")
    add_search_arguments(search_parser)

    subparsers.add_parser("symbols", help="List search prefix symbols")

    return parser


def main(argv=None):
    """Main entry point for commit-search CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__
        print(f"commit-search {__version__}")
        return

    configure_logging(args.verbose)

    if args.command == "symbols":
        cmd_symbols(args)
    elif args.command == "search":
        cmd_search(args)
    else:
        search_args = parser.parse_args(["search"])
        search_args.verbose = args.verbose
        cmd_search(search_args)


if __name__ == "__main__":
    main()
