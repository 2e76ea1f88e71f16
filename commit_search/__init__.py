"""Commit Search - prefix-annotated commit search with resumable navigation."""

__version__ = "0.1.0"
