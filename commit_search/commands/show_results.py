"""Show a computed result set in the results view."""

import logging
from typing import TYPE_CHECKING, Any

from ..models import ContinuationCommand, ShowInViewArgs
from ..services import Services
from .context import ViewInvocation

if TYPE_CHECKING:
    from .search_commits import SearchCommitsCommand

logger = logging.getLogger(__name__)


class ShowSearchResultsInViewCommand:
    """Terminal continuation: displays results without searching again."""

    def __init__(self, services: Services, search_commits: "SearchCommitsCommand"):
        self.services = services
        self.search_commits = search_commits

    async def run(self, continuation: ContinuationCommand) -> Any:
        args = continuation.args
        if not isinstance(args, ShowInViewArgs):
            raise TypeError(f"Expected ShowInViewArgs, got {type(args).__name__}")

        logger.debug(f"Showing {args.log.count} commits in view")
        invocation = await self.services.results_view.show(args)

        # The view can ask to search again from one of its result sets
        if isinstance(invocation, ViewInvocation):
            return await self.search_commits.pre_execute(invocation)
        return None
