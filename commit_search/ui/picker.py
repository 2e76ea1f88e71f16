"""Interactive pickers: search results and repository selection."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, ListView, Static

from ..models import CommitLog, ContinuationCommand
from ..services import PickerService
from .styles import APP_CSS
from .widgets import CommandItem, CommitDetailPanel, CommitItem, RepositoryItem

logger = logging.getLogger(__name__)


class CommitsPicker(App):
    """Lists search results after the continuations offered with them.

    Exits with the picked CommitInfo or ContinuationCommand, or None.
    """

    CSS = APP_CSS

    BINDINGS = [
        Binding("q", "close", "Close"),
        Binding("escape", "close", "Close"),
        Binding("tab", "focus_detail", "Detail", priority=True),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(
        self,
        log: Optional[CommitLog],
        label: str,
        go_back: Optional[ContinuationCommand] = None,
        show_all: Optional[ContinuationCommand] = None,
        show_in_view: Optional[ContinuationCommand] = None,
    ):
        super().__init__()
        self.commit_log = log
        self.label = label
        self.continuations = [c for c in (go_back, show_in_view, show_all) if c is not None]

    def compose(self) -> ComposeResult:
        items = [CommandItem(command) for command in self.continuations]
        if self.commit_log is not None:
            items.extend(CommitItem(commit) for commit in self.commit_log.commits)

        yield Header()
        with Horizontal():
            with Vertical(id="left-container"):
                yield Static(self._header_text(), id="results-header", classes="list-header")
                yield ListView(*items, id="results-list")
            with Vertical(id="detail-container"):
                yield CommitDetailPanel(id="detail-panel")
        yield Footer()

    def _header_text(self) -> Text:
        text = Text()
        text.append(self.label, style="bold")
        if self.commit_log is None:
            text.append("  (no results)", style="dim")
        else:
            more = "+" if self.commit_log.truncated else ""
            text.append(f"  ({self.commit_log.count}{more} commits)", style="dim")
        return text

    def on_mount(self):
        self.title = "Commit Search"
        self.sub_title = self.label

        results = self.query_one("#results-list", ListView)
        if results.children:
            results.index = 0
        results.focus()

        detail = self.query_one("#detail-panel", CommitDetailPanel)
        if self.commit_log is not None and not self.commit_log.commits:
            detail.clear_display("No commits found")

    @on(ListView.Highlighted, "#results-list")
    def on_result_highlighted(self, event: ListView.Highlighted):
        detail = self.query_one("#detail-panel", CommitDetailPanel)
        if isinstance(event.item, CommitItem):
            detail.show_commit(event.item.commit)
        elif isinstance(event.item, CommandItem):
            detail.show_command(event.item.command)

    @on(ListView.Selected, "#results-list")
    def on_result_selected(self, event: ListView.Selected):
        if isinstance(event.item, CommandItem):
            self.exit(event.item.command)
        elif isinstance(event.item, CommitItem):
            self.exit(event.item.commit)

    def action_close(self):
        self.exit(None)

    def action_focus_detail(self):
        """Toggle focus between the results list and the detail panel."""
        detail = self.query_one("#detail-panel", CommitDetailPanel)
        if detail.has_focus:
            self.query_one("#results-list", ListView).focus()
        else:
            detail.focus()

    def action_cursor_down(self):
        self.query_one("#results-list", ListView).action_cursor_down()

    def action_cursor_up(self):
        self.query_one("#results-list", ListView).action_cursor_up()


class RepositoryPicker(App):
    """Asks which repository to search in. Exits with a Path, a go-back, or None."""

    CSS = APP_CSS

    BINDINGS = [
        Binding("q", "close", "Close"),
        Binding("escape", "close", "Close"),
    ]

    def __init__(
        self,
        repositories: list[Path],
        label: str,
        go_back: Optional[ContinuationCommand] = None,
    ):
        super().__init__()
        self.repositories = repositories
        self.label = label
        self.go_back = go_back

    def compose(self) -> ComposeResult:
        items: list = []
        if self.go_back is not None:
            items.append(CommandItem(self.go_back))
        items.extend(RepositoryItem(path) for path in self.repositories)

        yield Header()
        with Vertical(id="repository-container"):
            yield Static(self.label, classes="list-header")
            yield ListView(*items, id="repository-list")
        yield Footer()

    def on_mount(self):
        self.title = "Commit Search"
        repositories = self.query_one("#repository-list", ListView)
        repositories.index = 0
        repositories.focus()

    @on(ListView.Selected, "#repository-list")
    def on_repository_selected(self, event: ListView.Selected):
        if isinstance(event.item, CommandItem):
            self.exit(event.item.command)
        elif isinstance(event.item, RepositoryItem):
            self.exit(event.item.path)

    def action_close(self):
        self.exit(None)


class TextualPickerService(PickerService):
    """Runs the pickers as full-screen textual apps."""

    async def show(
        self,
        log: Optional[CommitLog],
        label: str,
        progress: Any,
        go_back: Optional[ContinuationCommand] = None,
        show_all: Optional[ContinuationCommand] = None,
        show_in_view: Optional[ContinuationCommand] = None,
    ) -> Any:
        # The spinner must be gone before the app takes over the terminal
        if progress is not None:
            progress.cancel()

        app = CommitsPicker(log, label, go_back=go_back, show_all=show_all, show_in_view=show_in_view)
        pick = await app.run_async()
        logger.debug(f"Picked {pick!r}")
        return pick

    async def pick_repository(
        self,
        repositories: list[Path],
        label: str,
        go_back: Optional[ContinuationCommand] = None,
    ) -> Union[Path, ContinuationCommand, None]:
        app = RepositoryPicker(repositories, label, go_back=go_back)
        return await app.run_async()
