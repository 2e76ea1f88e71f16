"""One-line user facing messages."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from .services import MessageService


class ConsoleMessages(MessageService):
    """Reports failures to the user without technical detail."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def show_generic_error_message(self, message: str) -> None:
        text = Text()
        text.append("✗ ", style="bold red")
        text.append(f"{message}. ", style="red")
        text.append("Run with --verbose for more details.", style="dim")
        self.console.print(text)
