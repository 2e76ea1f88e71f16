"""Git adapters: commit search via `git log` and repository discovery."""

import asyncio
import logging
import subprocess
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from .config import Settings
from .models import CommitInfo, CommitLog, ContinuationCommand, CriteriaMap, SearchDimension
from .services import RepositoryResolver, SearchService
from .symbols import parse_prefix

logger = logging.getLogger(__name__)

# Fields separated by NUL, each record terminated by NUL + newline
LOG_FORMAT = "%H%x00%h%x00%an%x00%ae%x00%aI%x00%P%x00%s%x00%b%x00"
LOG_FIELDS = 8

RepositoryPrompt = Callable[
    [list[Path], str, Optional[ContinuationCommand]],
    Awaitable[Union[Path, ContinuationCommand, None]],
]


class GitCommandError(Exception):
    """A git invocation exited with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str):
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr.strip()
        super().__init__(f"git {' '.join(args)} failed ({returncode}): {self.stderr}")

    @property
    def is_unknown_revision(self) -> bool:
        stderr = self.stderr.lower()
        return "unknown revision" in stderr or "bad revision" in stderr or "bad object" in stderr


def parse_log_output(output: str) -> list[CommitInfo]:
    """Parse `git log --format=LOG_FORMAT` output into CommitInfo objects."""
    commits = []

    for record in output.strip().split("\x00\n"):
        if not record.strip():
            continue

        fields = record.split("\x00")
        if len(fields) < LOG_FIELDS:
            logger.debug(f"Skipping malformed log record: {record[:80]!r}")
            continue

        commits.append(
            CommitInfo(
                sha=fields[0].strip(),
                short_sha=fields[1],
                author_name=fields[2],
                author_email=fields[3],
                author_date=fields[4],
                parents=fields[5].split(),
                subject=fields[6],
                body=fields[7].strip(),
            )
        )

    return commits


def build_search_args(
    criteria: CriteriaMap,
    limit: Optional[int] = None,
    show_merge_commits: bool = False,
) -> list[str]:
    """Translate criteria into `git log` arguments.

    The message text is not grepped when it is the prefixed form of another
    criterion (`@jane` next to author `jane`), since it then still carries
    the symbol. Empty pickaxe and path values are ignored; an empty author
    matches everyone. Revisions follow `--end-of-options` so a value starting
    with a dash is never read as an option.
    """
    args = ["log", f"--format={LOG_FORMAT}", "--regexp-ignore-case"]

    # One extra commit tells us whether the result was truncated
    if limit is not None:
        args.append(f"-n{limit + 1}")
    if not show_merge_commits:
        args.append("--no-merges")

    parsed = parse_prefix(criteria.get(SearchDimension.MESSAGE, ""))
    prefixed = parsed is not None and parsed[0] in criteria
    paths = []

    for dimension, value in criteria.items():
        if dimension == SearchDimension.MESSAGE:
            if value and not prefixed:
                args.append(f"--grep={value}")
        elif dimension == SearchDimension.AUTHOR:
            args.append(f"--author={value}")
        elif dimension == SearchDimension.CHANGED_LINES:
            if value:
                args.append(f"-G{value}")
        elif dimension == SearchDimension.CHANGES:
            if value:
                args.append(f"-S{value}")
        elif dimension == SearchDimension.FILES:
            if value:
                paths.append(value)
        elif dimension == SearchDimension.SINCE:
            args.append(f"--since={value}")
        elif dimension == SearchDimension.BEFORE:
            args.append(f"--before={value}")
        elif dimension == SearchDimension.AFTER:
            args.append(f"--after={value}")

    if criteria.get(SearchDimension.SHA):
        args.extend(["--no-walk", "--end-of-options", criteria[SearchDimension.SHA]])
    elif criteria.get(SearchDimension.BRANCH):
        args.extend(["--end-of-options", criteria[SearchDimension.BRANCH]])

    args.append("--")
    args.extend(paths)
    return args


class GitService(SearchService):
    """Runs git commands for the search flow."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def run(self, args: list[str], cwd: Path) -> str:
        cmd = [self.settings.git_path, *args]
        logger.debug(f"Running {cmd} in {cwd}")
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
        if result.returncode != 0:
            raise GitCommandError(args, result.returncode, result.stderr)
        return result.stdout

    def get_repo_path(self, path: Path) -> Optional[Path]:
        """Return the top level of the repository containing path, if any."""
        if path.is_file():
            path = path.parent
        try:
            output = self.run(["rev-parse", "--show-toplevel"], cwd=path)
        except (GitCommandError, OSError) as e:
            logger.debug(f"{path} is not in a repository: {e}")
            return None
        return Path(output.strip())

    def find_repositories(self, path: Path) -> list[Path]:
        """Repositories around path: its own, or else those directly below it."""
        repo_path = self.get_repo_path(path)
        if repo_path:
            return [repo_path]
        try:
            return sorted(p for p in path.iterdir() if (p / ".git").exists())
        except OSError:
            return []

    async def get_log_for_search(
        self,
        repo_path: Path,
        criteria: CriteriaMap,
        max_count: Optional[int] = None,
        show_merge_commits: Optional[bool] = None,
    ) -> Optional[CommitLog]:
        """Search the repository's history.

        Returns None when the criteria name a revision that does not exist.
        Any other git failure raises GitCommandError.
        """
        limit = self.settings.resolve_max_count(max_count)
        if show_merge_commits is None:
            show_merge_commits = self.settings.show_merge_commits

        args = build_search_args(criteria, limit, show_merge_commits)
        try:
            output = await asyncio.to_thread(self.run, args, repo_path)
        except GitCommandError as e:
            if e.is_unknown_revision:
                logger.info(f"No such revision in {repo_path}: {e.stderr}")
                return None
            raise

        commits = parse_log_output(output)

        truncated = limit is not None and len(commits) > limit
        if truncated:
            commits = commits[:limit]

        return CommitLog(
            repo_path=repo_path,
            commits=commits,
            max_count=limit,
            truncated=truncated,
            criteria=dict(criteria),
        )


class GitRepositoryResolver(RepositoryResolver):
    """Finds the repository a search runs in, prompting when it is ambiguous."""

    def __init__(
        self,
        git: GitService,
        prompt: RepositoryPrompt,
    ):
        self.git = git
        self.prompt = prompt

    async def get_repo_path_or_prompt(
        self,
        hint: Optional[Path],
        editor_path: Optional[Path],
        prompt_label: str,
        go_back: Optional[ContinuationCommand] = None,
    ) -> Union[Path, ContinuationCommand, None]:
        for candidate in (hint, editor_path):
            if candidate is None:
                continue
            repo_path = await asyncio.to_thread(self.git.get_repo_path, candidate)
            if repo_path:
                return repo_path

        repositories = await asyncio.to_thread(self.git.find_repositories, Path.cwd())
        if not repositories:
            return None
        if len(repositories) == 1:
            return repositories[0]

        return await self.prompt(repositories, prompt_label, go_back)
