"""The commit search flow.

    resolve repository -> resolve criteria -> search -> pick -> dispatch

Everything the user can pick besides a commit is a continuation, which is
dispatched through the registry and usually re-enters this flow.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

from ..config import Settings
from ..criteria import CriteriaResolver, build_search_label
from ..models import ContinuationCommand, SearchArgs
from ..services import Services
from . import CommandRegistry, Commands
from .context import ContinuationInvocation, Invocation, PaletteInvocation, ViewInvocation
from .continuations import build_go_back_command, build_show_all_command, build_show_in_view_command

logger = logging.getLogger(__name__)

REPOSITORY_PROMPT = "Search for commits in which repository…"


class SearchCommitsCommand:
    """Searches commits and presents them in a picker.

    One instance lives per process; its resolver holds the last search.
    """

    origin = "SearchCommitsCommand"

    def __init__(self, services: Services, registry: CommandRegistry, settings: Optional[Settings] = None):
        self.services = services
        self.registry = registry
        self.settings = settings or Settings()
        self.resolver = CriteriaResolver()

    @property
    def last_search(self) -> Optional[str]:
        return self.resolver.last_search

    async def run(self, continuation: ContinuationCommand) -> Any:
        return await self.pre_execute(ContinuationInvocation(continuation))

    async def pre_execute(self, invocation: Invocation, args: Optional[SearchArgs] = None) -> Any:
        """Adjust args for where the search was invoked from, then execute."""
        args = args or SearchArgs()

        if isinstance(invocation, ViewInvocation):
            args = replace(args, show_in_view=True)
            uri = invocation.repo_path
            if invocation.node is not None:
                args = replace(
                    args,
                    search=invocation.node.search,
                    search_by=invocation.node.search_by,
                    prefill_only=True,
                )
                uri = invocation.node.repo_path
            return await self.execute(uri=uri, args=args)

        if isinstance(invocation, ContinuationInvocation):
            continuation = invocation.continuation
            args = continuation.args or args
            if continuation.command == Commands.SEARCH_COMMITS_IN_VIEW:
                args = replace(args, show_in_view=True)
            return await self.execute(uri=continuation.uri, args=args)

        if isinstance(invocation, PaletteInvocation):
            if invocation.command == Commands.SEARCH_COMMITS_IN_VIEW or self.settings.default_in_view:
                args = replace(args, show_in_view=True)
            return await self.execute(uri=invocation.uri, args=args, editor_path=invocation.editor_path)

        raise TypeError(f"Unsupported invocation: {invocation!r}")

    async def execute(
        self,
        uri: Optional[Path] = None,
        args: Optional[SearchArgs] = None,
        editor_path: Optional[Path] = None,
    ) -> Any:
        args = args or SearchArgs()

        repo_path = await self.services.repositories.get_repo_path_or_prompt(
            uri, editor_path, REPOSITORY_PROMPT, args.go_back_command
        )
        if isinstance(repo_path, ContinuationCommand):
            return await self.registry.execute(repo_path)
        if not repo_path:
            return None

        if args.show_in_view:
            self.services.results_view.reveal()

        resolved = self.resolver.resolve(args)
        args = resolved.args
        label = build_search_label(resolved.criteria)

        progress = self.services.progress.show_progress(label)
        try:
            log = await self.services.search.get_log_for_search(
                repo_path,
                resolved.criteria,
                max_count=args.max_count,
                show_merge_commits=args.show_merge_commits,
            )

            # progress.cancelled is not checked: a search whose progress was
            # cancelled still presents its results

            go_back = build_go_back_command(repo_path, resolved.origin_args, args.go_back_command)
            show_all = None
            show_in_view = None
            if log is not None:
                if log.truncated:
                    show_all = build_show_all_command(repo_path, resolved.origin_args, go_back)
                show_in_view = build_show_in_view_command(resolved.search, resolved.search_by, log, label)

            pick = await self.services.picker.show(
                log,
                label,
                progress,
                go_back=go_back,
                show_all=show_all,
                show_in_view=show_in_view,
            )
            if pick is None:
                return None

            if isinstance(pick, ContinuationCommand):
                return await self.registry.execute(pick)

            return None
        except Exception as ex:
            logger.error(f"{self.origin}: {ex}", exc_info=True)
            return self.services.messages.show_generic_error_message("Unable to find commits")
        finally:
            progress.cancel()
