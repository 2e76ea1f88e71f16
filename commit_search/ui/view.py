"""Results view: browse a computed result set independently of the picker."""

import logging
from typing import Optional

from rich.console import Console
from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, ListView, Static

from ..commands.context import SearchResultsNode, ViewInvocation
from ..models import ShowInViewArgs
from ..services import ResultsViewService
from .styles import APP_CSS
from .widgets import CommitDetailPanel, CommitItem

logger = logging.getLogger(__name__)


class SearchResultsView(App):
    """Split view of search results with commit details.

    Exits with a ViewInvocation when the user asks to search again, else None.
    """

    CSS = APP_CSS

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("s", "search_again", "Search Again"),
        Binding("tab", "focus_detail", "Detail", priority=True),
        Binding("escape", "back_to_list", "Back"),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(self, args: ShowInViewArgs):
        super().__init__()
        self.args = args

    def compose(self) -> ComposeResult:
        log = self.args.log
        header = Text()
        header.append("Search: ", style="bold yellow")
        header.append(self.args.label or self.args.search, style="white")
        header.append(f"  ({log.count}{'+' if log.truncated else ''} commits)", style="dim")

        yield Header(show_clock=True)
        with Horizontal():
            with Vertical(id="left-container"):
                yield Static(header, id="results-header", classes="list-header")
                yield ListView(*[CommitItem(commit) for commit in log.commits], id="results-list")
            with Vertical(id="detail-container"):
                yield CommitDetailPanel(id="detail-panel")
        yield Footer()

    def on_mount(self):
        self.title = "Commit Search Results"
        self.sub_title = str(self.args.log.repo_path)

        results = self.query_one("#results-list", ListView)
        if self.args.log.commits:
            results.index = 0
        else:
            self.query_one("#detail-panel", CommitDetailPanel).clear_display("No commits found")
        results.focus()

    @on(ListView.Highlighted, "#results-list")
    def on_commit_highlighted(self, event: ListView.Highlighted):
        if isinstance(event.item, CommitItem):
            self.query_one("#detail-panel", CommitDetailPanel).show_commit(event.item.commit)

    def action_search_again(self):
        node = SearchResultsNode(
            search=self.args.search,
            search_by=self.args.search_by,
            repo_path=self.args.log.repo_path,
        )
        self.exit(ViewInvocation(repo_path=self.args.log.repo_path, node=node))

    def action_focus_detail(self):
        detail = self.query_one("#detail-panel", CommitDetailPanel)
        if detail.has_focus:
            self.query_one("#results-list", ListView).focus()
        else:
            detail.focus()

    def action_back_to_list(self):
        """Go back to the list, or quit when already there."""
        detail = self.query_one("#detail-panel", CommitDetailPanel)
        if detail.has_focus:
            self.query_one("#results-list", ListView).focus()
        else:
            self.exit(None)

    def action_cursor_down(self):
        self.query_one("#results-list", ListView).action_cursor_down()

    def action_cursor_up(self):
        self.query_one("#results-list", ListView).action_cursor_up()


class TextualResultsView(ResultsViewService):
    """Opens result sets in SearchResultsView."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def reveal(self) -> None:
        self.console.print("[dim]Pick [bold]☰ Show in View[/] to open the results in the results view[/]")

    async def show(self, args: ShowInViewArgs) -> Optional[ViewInvocation]:
        app = SearchResultsView(args)
        return await app.run_async()
