"""Cancellable progress indication shown while a search runs."""

import logging
from typing import Optional

from rich.console import Console

from .services import ProgressService

logger = logging.getLogger(__name__)


class ProgressHandle:
    """A running spinner. cancel() stops it and may be called any number of times."""

    def __init__(self, label: str, console: Console):
        self.label = label
        self._cancelled = False
        self._status = console.status(f"[bold cyan]Searching {label}...[/]", spinner="dots")
        self._status.start()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        if self._cancelled:
            return
        self._cancelled = True
        self._status.stop()
        logger.debug(f"Progress for {self.label!r} cancelled")


class ConsoleProgressService(ProgressService):
    """Shows progress on stderr so stdout stays clean for output."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def show_progress(self, label: str) -> ProgressHandle:
        return ProgressHandle(label, self.console)
