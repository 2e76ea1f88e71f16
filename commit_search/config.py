"""User settings for commit search."""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "commit-search" / "config.json"


@dataclass
class Settings:
    """Settings read from the config file and the environment."""

    max_search_items: int = 200
    show_merge_commits: bool = False
    git_path: str = "git"
    default_in_view: bool = False

    def resolve_max_count(self, max_count: Optional[int]) -> Optional[int]:
        """Map a requested cap to the effective one (None = unlimited)."""
        if max_count is None:
            max_count = self.max_search_items
        if max_count <= 0:
            return None
        return max_count


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(path: Path = DEFAULT_CONFIG_PATH, environ: Optional[dict] = None) -> Settings:
    """Load settings from a JSON config file, then apply environment overrides.

    Environment:
        COMMIT_SEARCH_MAX_ITEMS      - default result cap (0 = unlimited)
        COMMIT_SEARCH_GIT            - git executable
        COMMIT_SEARCH_MERGE_COMMITS  - include merge commits by default
    """
    environ = os.environ if environ is None else environ
    settings = Settings()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable config {path}: {e}")
            data = {}

        if isinstance(data, dict):
            known = {f.name for f in fields(Settings)}
            for key, value in data.items():
                if key in known:
                    setattr(settings, key, value)
                else:
                    logger.debug(f"Unknown config key: {key}")

    if "COMMIT_SEARCH_MAX_ITEMS" in environ:
        try:
            settings.max_search_items = int(environ["COMMIT_SEARCH_MAX_ITEMS"])
        except ValueError:
            logger.warning("COMMIT_SEARCH_MAX_ITEMS is not a number, ignoring")
    if environ.get("COMMIT_SEARCH_GIT"):
        settings.git_path = environ["COMMIT_SEARCH_GIT"]
    if "COMMIT_SEARCH_MERGE_COMMITS" in environ:
        settings.show_merge_commits = _parse_bool(environ["COMMIT_SEARCH_MERGE_COMMITS"])

    return settings
