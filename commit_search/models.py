"""Data model shared by the resolver, the commands and the UI."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class SearchDimension(str, Enum):
    """An axis a commit search can filter on."""

    MESSAGE = "message"
    AUTHOR = "author"
    CHANGED_LINES = "changed-lines"
    CHANGES = "changes"
    FILES = "files"
    SHA = "sha"
    BRANCH = "branch"
    SINCE = "since"
    BEFORE = "before"
    AFTER = "after"


# Insertion order is only used when echoing criteria back to the user
CriteriaMap = dict[SearchDimension, str]


@dataclass(frozen=True)
class ContinuationCommand:
    """A replayable command: target command id plus the arguments to re-run it.

    Holds plain data only, so it can outlive the picker that offered it.
    """

    command: str
    args: Any = None
    uri: Optional[Path] = None

    # Display only, not part of the captured state
    label: str = field(default="", compare=False)
    description: str = field(default="", compare=False)


@dataclass(frozen=True)
class SearchArgs:
    """Arguments of one commit search invocation."""

    search: Optional[str] = None
    search_by: Optional[SearchDimension] = None
    max_count: Optional[int] = None  # None: configured default, 0: unlimited
    prefill_only: bool = False
    show_in_view: bool = False

    go_back_command: Optional[ContinuationCommand] = None

    # Structured filters
    sha: Optional[str] = None
    branch: Optional[str] = None
    author: Optional[str] = None
    since: Optional[str] = None  # "-1" means unset
    before: Optional[date] = None
    after: Optional[date] = None
    show_merge_commits: Optional[bool] = None


@dataclass
class CommitInfo:
    """A single commit returned by a search."""

    sha: str
    short_sha: str
    author_name: str
    author_email: str
    author_date: str
    subject: str
    body: str = ""
    parents: list[str] = field(default_factory=list)

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


@dataclass
class CommitLog:
    """Result set of a commit search."""

    repo_path: Path
    commits: list[CommitInfo]
    max_count: Optional[int] = None
    truncated: bool = False
    criteria: CriteriaMap = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.commits)


@dataclass(frozen=True)
class ShowInViewArgs:
    """Payload of a show-in-view continuation: an already computed result set."""

    search: str
    search_by: SearchDimension
    log: CommitLog
    label: str = ""


@dataclass
class ResolvedCriteria:
    """Output of the criteria resolver."""

    criteria: CriteriaMap
    search: str
    search_by: SearchDimension
    args: SearchArgs  # working copy after resolution
    origin_args: SearchArgs  # replays this resolution when re-invoked
