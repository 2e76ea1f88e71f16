"""Command registry and dispatch."""

import logging
from typing import TYPE_CHECKING, Any, Optional, Protocol

from ..models import ContinuationCommand

if TYPE_CHECKING:
    from ..config import Settings
    from ..services import Services

logger = logging.getLogger(__name__)


class Commands:
    """Command identifiers."""

    SEARCH_COMMITS = "commit-search.searchCommits"
    SEARCH_COMMITS_IN_VIEW = "commit-search.searchCommitsInView"
    SHOW_SEARCH_RESULTS_IN_VIEW = "commit-search.showSearchResultsInView"


class CommandHandler(Protocol):
    async def run(self, continuation: ContinuationCommand) -> Any:
        ...


class CommandRegistry:
    """Maps command identifiers to handler instances.

    Continuations are plain data; this is the only place they get executed.
    """

    def __init__(self):
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, command: str, handler: CommandHandler) -> None:
        if command in self._handlers:
            raise ValueError(f"Command already registered: {command}")
        self._handlers[command] = handler

    def get(self, command: str) -> Optional[CommandHandler]:
        return self._handlers.get(command)

    def __contains__(self, command: str) -> bool:
        return command in self._handlers

    async def execute(self, continuation: ContinuationCommand) -> Any:
        handler = self._handlers.get(continuation.command)
        if handler is None:
            raise KeyError(f"No handler registered for {continuation.command}")
        logger.debug(f"Dispatching {continuation.command}")
        return await handler.run(continuation)


def setup_commands(
    services: "Services",
    settings: "Settings",
    registry: Optional[CommandRegistry] = None,
) -> CommandRegistry:
    """Create the long-lived command instances and register them."""
    from .search_commits import SearchCommitsCommand
    from .show_results import ShowSearchResultsInViewCommand

    registry = registry if registry is not None else CommandRegistry()

    search_commits = SearchCommitsCommand(services, registry, settings)
    registry.register(Commands.SEARCH_COMMITS, search_commits)
    registry.register(Commands.SEARCH_COMMITS_IN_VIEW, search_commits)
    registry.register(
        Commands.SHOW_SEARCH_RESULTS_IN_VIEW,
        ShowSearchResultsInViewCommand(services, search_commits),
    )
    return registry
