"""UI components for commit search."""

from .picker import CommitsPicker, RepositoryPicker, TextualPickerService
from .styles import APP_CSS
from .view import SearchResultsView, TextualResultsView
from .widgets import (
    CommandItem,
    CommitDetailPanel,
    CommitItem,
    RepositoryItem,
)

__all__ = [
    "CommitsPicker",
    "RepositoryPicker",
    "TextualPickerService",
    "SearchResultsView",
    "TextualResultsView",
    "CommandItem",
    "CommitDetailPanel",
    "CommitItem",
    "RepositoryItem",
    "APP_CSS",
]
