"""Tests for the pickers and the results view."""

import asyncio
from pathlib import Path

from commit_search.commands.context import ViewInvocation
from commit_search.models import (
    CommitInfo,
    CommitLog,
    ContinuationCommand,
    SearchArgs,
    SearchDimension,
    ShowInViewArgs,
)
from commit_search.ui import CommitsPicker, RepositoryPicker, SearchResultsView
from commit_search.ui.widgets import format_commit_date, truncate

REPO = Path("/home/user/project")


def make_log(count=3, truncated=False):
    commits = [
        CommitInfo(
            sha=f"{i:040d}",
            short_sha=f"{i:07d}",
            author_name="Jane",
            author_email="jane@example.org",
            author_date="2024-01-02T03:04:05+00:00",
            subject=f"fix: issue {i}",
        )
        for i in range(count)
    ]
    return CommitLog(repo_path=REPO, commits=commits, truncated=truncated)


async def press(app, *keys):
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press(*keys)
    return app.return_value


class TestWidgetHelpers:
    """Tests for display helpers."""

    def test_truncate(self):
        """Test long text is shortened with an ellipsis."""
        assert truncate("short", 10) == "short"
        assert truncate("a" * 20, 10) == "aaaaaaa..."

    def test_format_commit_date(self):
        """Test ISO dates are shortened to minutes."""
        assert format_commit_date("2024-01-02T03:04:05+00:00") == "2024-01-02 03:04"
        assert format_commit_date("") == "????-??-?? ??:??"


class TestCommitsPicker:
    """Tests for CommitsPicker."""

    def test_pick_first_commit(self):
        """Test enter picks the highlighted commit."""
        log = make_log()
        result = asyncio.run(press(CommitsPicker(log, "all commits"), "enter"))
        assert result is log.commits[0]

    def test_pick_after_moving(self):
        """Test moving down picks the next commit."""
        log = make_log()
        result = asyncio.run(press(CommitsPicker(log, "all commits"), "down", "enter"))
        assert result is log.commits[1]

    def test_continuations_come_first(self):
        """Test go-back is listed before the commits."""
        go_back = ContinuationCommand("commit-search.searchCommits", SearchArgs(search="fix"), REPO, label="go back")
        show_all = ContinuationCommand("commit-search.searchCommits", SearchArgs(max_count=0), REPO, label="all")
        picker = CommitsPicker(make_log(truncated=True), "label", go_back=go_back, show_all=show_all)
        assert asyncio.run(press(picker, "enter")) == go_back

        picker = CommitsPicker(make_log(truncated=True), "label", go_back=go_back, show_all=show_all)
        assert asyncio.run(press(picker, "down", "enter")) == show_all

    def test_dismiss(self):
        """Test escape closes without a pick."""
        assert asyncio.run(press(CommitsPicker(make_log(), "label"), "escape")) is None

    def test_no_results(self):
        """Test the picker opens without a result set."""
        go_back = ContinuationCommand("commit-search.searchCommits", SearchArgs(search="#nope"), REPO)
        assert asyncio.run(press(CommitsPicker(None, "label", go_back=go_back), "enter")) == go_back


class TestRepositoryPicker:
    """Tests for RepositoryPicker."""

    def test_pick_repository(self):
        """Test picking a repository returns its path."""
        repositories = [Path("/src/one"), Path("/src/two")]
        result = asyncio.run(press(RepositoryPicker(repositories, "Which?"), "down", "enter"))
        assert result == Path("/src/two")

    def test_go_back(self):
        """Test go-back is offered first."""
        go_back = ContinuationCommand("commit-search.searchCommits")
        picker = RepositoryPicker([Path("/src/one")], "Which?", go_back=go_back)
        assert asyncio.run(press(picker, "enter")) == go_back


class TestSearchResultsView:
    """Tests for SearchResultsView."""

    def test_search_again(self):
        """Test the view can hand back a search invocation."""
        args = ShowInViewArgs(search="jane", search_by=SearchDimension.AUTHOR, log=make_log())
        result = asyncio.run(press(SearchResultsView(args), "s"))
        assert isinstance(result, ViewInvocation)
        assert result.repo_path == REPO
        assert result.node.search == "jane"
        assert result.node.search_by == SearchDimension.AUTHOR

    def test_quit(self):
        """Test quitting returns nothing."""
        args = ShowInViewArgs(search="fix", search_by=SearchDimension.MESSAGE, log=make_log(count=0))
        assert asyncio.run(press(SearchResultsView(args), "q")) is None
