"""The ways a commit search can be invoked."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..models import ContinuationCommand, SearchDimension


@dataclass(frozen=True)
class SearchResultsNode:
    """A result set shown in the results view, searchable again."""

    search: str
    search_by: SearchDimension
    repo_path: Path


@dataclass(frozen=True)
class ViewInvocation:
    """Invoked from the results view, optionally on a result set."""

    repo_path: Optional[Path] = None
    node: Optional[SearchResultsNode] = None


@dataclass(frozen=True)
class PaletteInvocation:
    """Invoked directly by the user, e.g. from the command line."""

    command: str
    uri: Optional[Path] = None
    editor_path: Optional[Path] = None


@dataclass(frozen=True)
class ContinuationInvocation:
    """Replay of a continuation picked earlier."""

    continuation: ContinuationCommand


Invocation = Union[ViewInvocation, PaletteInvocation, ContinuationInvocation]
