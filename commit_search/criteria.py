"""Resolve a raw search string and structured filters into search criteria."""

import logging
from dataclasses import replace
from typing import Optional

from .models import CriteriaMap, ResolvedCriteria, SearchArgs, SearchDimension
from .symbols import dimension_to_symbol, parse_prefix

logger = logging.getLogger(__name__)

# Sentinel the UI uses for "no since bound"
NO_SINCE = "-1"

DIMENSION_LABELS = {
    SearchDimension.MESSAGE: "message",
    SearchDimension.AUTHOR: "author",
    SearchDimension.CHANGED_LINES: "changed lines",
    SearchDimension.CHANGES: "changes",
    SearchDimension.FILES: "files",
    SearchDimension.SHA: "sha",
    SearchDimension.BRANCH: "branch",
    SearchDimension.SINCE: "since",
    SearchDimension.BEFORE: "before",
    SearchDimension.AFTER: "after",
}


class CriteriaResolver:
    """Turns SearchArgs into an ordered CriteriaMap.

    Owns the last-search slot: the most recent raw search string that was
    parsed. One resolver lives as long as the search command that owns it.
    """

    def __init__(self):
        self.last_search: Optional[str] = None

    def resolve(self, args: SearchArgs) -> ResolvedCriteria:
        """Resolve args into criteria, the canonical raw search and its dimension.

        Precedence:
            - a prefix parsed from the search text beats an explicit author
            - an explicit sha always overwrites
            - since (unless "-1") excludes before/after
        """
        args = replace(args)
        origin_args = args
        criteria: CriteriaMap = {}

        # Re-encode an already structured search as prefixed text for editing
        if args.prefill_only and args.search and args.search_by is not None:
            symbol = dimension_to_symbol(args.search_by) or ""
            args = replace(args, search=f"{symbol}{args.search}", search_by=None)

        if not args.search or args.search_by is None:
            if not args.search and args.search_by is not None:
                args = replace(args, search=dimension_to_symbol(args.search_by))
            # TODO: fall back to self.last_search when no search text is given
            # once the picker can offer it for editing instead of re-running it

            search = args.search or ""
            args = replace(args, search=search)
            self.last_search = search
            origin_args = replace(origin_args, search=search, search_by=None, prefill_only=False)

            parsed = parse_prefix(search)
            if parsed:
                dimension, value = parsed
                criteria[dimension] = value
            criteria[SearchDimension.MESSAGE] = search
        # A structured search is not re-parsed: its text only reaches the
        # criteria through the message fallback below

        if args.sha:
            criteria[SearchDimension.SHA] = args.sha
        if args.author and SearchDimension.AUTHOR not in criteria:
            criteria[SearchDimension.AUTHOR] = args.author
        if args.branch:
            criteria[SearchDimension.BRANCH] = args.branch

        if args.search_by is None:
            args = replace(args, search_by=SearchDimension.MESSAGE)

        if args.since and args.since != NO_SINCE:
            criteria[SearchDimension.SINCE] = args.since
        else:
            if args.before:
                criteria[SearchDimension.BEFORE] = args.before.isoformat()
            if args.after:
                criteria[SearchDimension.AFTER] = args.after.isoformat()

        if not criteria:
            criteria[SearchDimension.MESSAGE] = args.search or ""

        logger.debug(f"Resolved {args.search!r} to {criteria}")

        return ResolvedCriteria(
            criteria=criteria,
            search=args.search or "",
            search_by=args.search_by,
            args=args,
            origin_args=origin_args,
        )


def build_search_label(criteria: CriteriaMap) -> str:
    """Describe criteria for the progress, picker and view titles."""
    parts = [
        f'{DIMENSION_LABELS[dimension]} "{value}"'
        for dimension, value in criteria.items()
        if value
    ]
    if not parts:
        return "all commits"
    return "commits matching " + ", ".join(parts)
