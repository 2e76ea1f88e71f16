"""Collaborators the search commands depend on.

Each collaborator is an abstract base class with one concrete adapter:

    RepositoryResolver  -> git.GitRepositoryResolver
    SearchService       -> git.GitService
    ProgressService     -> progress.ConsoleProgressService
    PickerService       -> ui.TextualPickerService
    ResultsViewService  -> ui.TextualResultsView
    MessageService      -> messages.ConsoleMessages

Commands receive them bundled in a Services instance, so tests can swap in fakes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .config import Settings
from .models import CommitLog, ContinuationCommand, CriteriaMap, ShowInViewArgs


class RepositoryResolver(ABC):
    @abstractmethod
    async def get_repo_path_or_prompt(
        self,
        hint: Optional[Path],
        editor_path: Optional[Path],
        prompt_label: str,
        go_back: Optional[ContinuationCommand] = None,
    ) -> Union[Path, ContinuationCommand, None]:
        """Return the repository to search in, or None if the user cancelled.

        A continuation picked from the prompt (go back) is returned for the
        caller to dispatch.
        """
        ...


class SearchService(ABC):
    @abstractmethod
    async def get_log_for_search(
        self,
        repo_path: Path,
        criteria: CriteriaMap,
        max_count: Optional[int] = None,
        show_merge_commits: Optional[bool] = None,
    ) -> Optional[CommitLog]:
        ...


class ProgressService(ABC):
    @abstractmethod
    def show_progress(self, label: str) -> Any:
        """Start progress indication; the returned handle has cancel()."""
        ...


class PickerService(ABC):
    @abstractmethod
    async def show(
        self,
        log: Optional[CommitLog],
        label: str,
        progress: Any,
        go_back: Optional[ContinuationCommand] = None,
        show_all: Optional[ContinuationCommand] = None,
        show_in_view: Optional[ContinuationCommand] = None,
    ) -> Any:
        """Let the user pick a commit or a continuation. None when dismissed."""
        ...

    @abstractmethod
    async def pick_repository(
        self,
        repositories: list[Path],
        label: str,
        go_back: Optional[ContinuationCommand] = None,
    ) -> Union[Path, ContinuationCommand, None]:
        ...


class ResultsViewService(ABC):
    def reveal(self) -> None:
        """Bring the results view forward before a search starts."""

    @abstractmethod
    async def show(self, args: ShowInViewArgs) -> Any:
        """Display a result set. May return an invocation to search again."""
        ...


class MessageService(ABC):
    @abstractmethod
    def show_generic_error_message(self, message: str) -> None:
        ...


@dataclass
class Services:
    repositories: RepositoryResolver
    search: SearchService
    progress: ProgressService
    picker: PickerService
    results_view: ResultsViewService
    messages: MessageService


def build_services(settings: Settings) -> Services:
    """Wire the real adapters together."""
    from .git import GitRepositoryResolver, GitService
    from .messages import ConsoleMessages
    from .progress import ConsoleProgressService
    from .ui import TextualPickerService, TextualResultsView

    git = GitService(settings)
    picker = TextualPickerService()

    return Services(
        repositories=GitRepositoryResolver(git, picker.pick_repository),
        search=git,
        progress=ConsoleProgressService(),
        picker=picker,
        results_view=TextualResultsView(),
        messages=ConsoleMessages(),
    )
