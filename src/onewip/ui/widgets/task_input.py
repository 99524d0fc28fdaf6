"""Text input bar for adding and editing tasks."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

CARET = "█"


class TaskInputBar(Widget):
    """Shows the session's input buffer. Typing is handled by the session."""

    DEFAULT_CSS = """
    TaskInputBar {
        height: 3;
        dock: bottom;
        border: solid $warning;
        display: none;
    }

    TaskInputBar.-visible {
        display: block;
    }

    TaskInputBar .input-text {
        width: 1fr;
        color: $warning;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", classes="input-text")

    def show(self, title: str, buffer: str) -> None:
        """Show the bar with ``buffer`` and a trailing caret."""
        self.border_title = title
        self.add_class("-visible")
        self.query_one(".input-text", Static).update(f"{escape(buffer)}[blink]{CARET}[/]")

    def hide(self) -> None:
        """Hide the bar."""
        self.remove_class("-visible")
