"""Builders for the continuations offered alongside search results.

Building a continuation never runs it. CommandRegistry.execute does that later,
possibly after the picker that offered it has closed.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

from ..models import CommitLog, ContinuationCommand, SearchArgs, SearchDimension, ShowInViewArgs
from . import Commands

ARROW_BACK = "←"
DASH = "—"


def build_go_back_command(
    uri: Optional[Path],
    origin_args: SearchArgs,
    existing: Optional[ContinuationCommand] = None,
) -> ContinuationCommand:
    """Go back to the search that produced origin_args.

    An existing go-back is passed through, so history chains through the
    continuations themselves rather than a bounded stack.
    """
    if existing is not None:
        return existing

    return ContinuationCommand(
        command=Commands.SEARCH_COMMITS,
        args=origin_args,
        uri=uri,
        label=f"go back {ARROW_BACK}",
        description=f"{DASH} to commit search",
    )


def build_show_all_command(
    uri: Optional[Path],
    args: SearchArgs,
    go_back: Optional[ContinuationCommand],
) -> ContinuationCommand:
    """Re-run a truncated search without a result cap."""
    return ContinuationCommand(
        command=Commands.SEARCH_COMMITS,
        args=replace(args, max_count=0, go_back_command=go_back),
        uri=uri,
        label="↻ Show All Commits",
        description=f"{DASH} this may take a while",
    )


def build_show_in_view_command(
    search: str,
    search_by: SearchDimension,
    log: CommitLog,
    label: str = "",
) -> ContinuationCommand:
    """Hand an already computed result set to the results view."""
    return ContinuationCommand(
        command=Commands.SHOW_SEARCH_RESULTS_IN_VIEW,
        args=ShowInViewArgs(search=search, search_by=search_by, log=log, label=label),
        uri=log.repo_path,
        label="☰ Show in View",
        description=f"{DASH} displays the search results in the results view",
    )
