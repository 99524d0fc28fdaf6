"""Focus view: the work-in-progress task on its own."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.widget import Widget
from textual.widgets import Static


class FocusPanel(Widget):
    """Full-screen panel showing only the WIP task."""

    DEFAULT_CSS = """
    FocusPanel {
        align: center middle;
        display: none;
    }

    FocusPanel.-visible {
        display: block;
    }

    FocusPanel > Vertical {
        width: 60%;
        height: auto;
        padding: 1 2;
        border: solid $accent;
    }

    FocusPanel .focus-task {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $accent;
    }

    FocusPanel .focus-hint {
        width: 100%;
        text-align: center;
        color: $text-muted;
        padding-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Center(), Vertical():
            yield Static("", classes="focus-task")
            yield Static("Enter - done    Esc - back", classes="focus-hint")

    def show(self, content: str) -> None:
        """Show the panel with the WIP task's content."""
        self.query_one(Vertical).border_title = "Wip"
        self.query_one(".focus-task", Static).update(escape(content))
        self.add_class("-visible")

    def hide(self) -> None:
        """Hide the panel."""
        self.remove_class("-visible")
