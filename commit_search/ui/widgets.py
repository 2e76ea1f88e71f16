"""UI widgets for the commit search TUI."""

from pathlib import Path
from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import ListItem, Static

from ..models import CommitInfo, ContinuationCommand


def truncate(text: str, max_len: int = 100) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def format_commit_date(iso_date: str) -> str:
    """Shorten an ISO 8601 commit date to 'YYYY-MM-DD HH:MM'."""
    if len(iso_date) < 16:
        return iso_date or "????-??-?? ??:??"
    return iso_date[:10] + " " + iso_date[11:16]


class CommitItem(ListItem):
    """List item for a single commit."""

    def __init__(self, commit: CommitInfo):
        super().__init__()
        self.commit = commit
        self._static: Optional[Static] = None

    def compose(self) -> ComposeResult:
        self._static = Static(self._build_text(100))
        yield self._static

    def on_resize(self, event) -> None:
        """Update text when resized."""
        if self._static:
            self._static.update(self._build_text(self.size.width))

    def _build_text(self, width: int) -> Text:
        """Build the display text based on available width."""
        text = Text()
        text.append(format_commit_date(self.commit.author_date), style="cyan")
        text.append(" │ ", style="dim")
        text.append(f"{self.commit.short_sha:<8}", style="yellow")
        text.append(" │ ", style="dim")
        text.append(f"{self.commit.author_name[:14]:<14}", style="green")
        text.append(" │ ", style="dim")

        prefix_width = 49  # date(16) + sep(3) + sha(8) + sep(3) + author(14) + sep(3) + padding(2)
        desc_width = max(20, width - prefix_width)
        subject = self.commit.subject or "(no message)"
        text.append(truncate(subject, desc_width), style="bold white" if self.commit.is_merge else "white")

        return text


class CommandItem(ListItem):
    """List item for a continuation (go back, show all, show in view)."""

    def __init__(self, command: ContinuationCommand):
        super().__init__()
        self.command = command

    def compose(self) -> ComposeResult:
        text = Text()
        text.append(self.command.label, style="bold magenta")
        if self.command.description:
            text.append(f"  {self.command.description}", style="dim")
        yield Static(text)


class RepositoryItem(ListItem):
    """List item for a repository to search in."""

    def __init__(self, path: Path):
        super().__init__()
        self.path = path

    def compose(self) -> ComposeResult:
        text = Text()
        text.append(f"{self.path.name:<24}", style="bold green")
        text.append(f" {self.path}", style="dim")
        yield Static(text)


class CommitDetailPanel(ScrollableContainer, can_focus=True):
    """Scrollable panel showing commit details."""

    def __init__(self, id: str = None):
        super().__init__(id=id)
        self.commit: Optional[CommitInfo] = None

    def update(self, text: Text) -> None:
        """Update the content (replaces all content)."""
        for child in list(self.children):
            child.remove()
        self.mount(Static(text, markup=False))

    def show_commit(self, commit: CommitInfo):
        """Update display with commit info."""
        self.commit = commit

        text = Text()
        text.append("━━━ Commit Details ━━━\n", style="bold cyan")
        text.append("\n")

        text.append("Commit: ", style="bold")
        text.append(f"{commit.sha}\n", style="yellow")
        text.append("Author: ", style="bold")
        text.append(f"{commit.author_name} <{commit.author_email}>\n", style="green")
        text.append("Date: ", style="bold")
        text.append(f"{format_commit_date(commit.author_date)}\n")
        if commit.is_merge:
            text.append("Merge: ", style="bold")
            text.append(" ".join(p[:8] for p in commit.parents) + "\n", style="dim")
        text.append("\n")

        text.append("┌─ Message ─────────────────────────────\n", style="bold green")
        text.append("│ ", style="green")
        text.append(f"{commit.subject}\n", style="bold")
        if commit.body:
            body = commit.body[:2000]
            text.append("│\n", style="green")
            for line in body.split("\n"):
                text.append("│ ", style="green")
                text.append(f"{line}\n")
            if len(commit.body) > 2000:
                text.append("│ ", style="green")
                text.append("... (truncated)\n", style="dim")
        text.append("└───────────────────────────────────────\n", style="green")

        self.update(text)

    def show_command(self, command: ContinuationCommand):
        """Describe a continuation instead of a commit."""
        self.commit = None
        text = Text()
        text.append(f"{command.label}\n\n", style="bold magenta")
        text.append(command.description.lstrip("— "), style="dim")
        text.append("\n\nPress ", style="dim")
        text.append("Enter", style="bold")
        text.append(" to run", style="dim")
        self.update(text)

    def clear_display(self, message: str = "Select a commit to view details"):
        """Clear the display."""
        self.commit = None
        self.update(Text(message, style="dim"))
