"""Help panel listing the board's keys."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Static

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("h / Left", "Previous column"),
            ("l / Right", "Next column"),
            ("k / Up", "Previous task"),
            ("j / Down", "Next task"),
        ],
    ),
    (
        "Tasks",
        [
            ("H / Shift+Left", "Move task left"),
            ("L / Shift+Right", "Move task right"),
            ("K / Shift+Up", "Move task up"),
            ("J / Shift+Down", "Move task down"),
            ("a", "Add task"),
            ("e", "Edit task"),
            ("d / Delete", "Delete task"),
            ("f / w", "Focus on work in progress"),
        ],
    ),
    (
        "General",
        [
            ("?", "Show this help"),
            ("q / Escape", "Quit"),
        ],
    ),
]


class HelpPanel(Widget):
    """Full-screen panel showing keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpPanel {
        align: center middle;
        display: none;
    }

    HelpPanel.-visible {
        display: block;
    }

    HelpPanel > Vertical {
        width: 60;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    HelpPanel .help-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
        border-bottom: solid $primary-darken-2;
    }

    HelpPanel .help-section {
        height: auto;
        padding: 1 0 0 0;
    }

    HelpPanel .section-title {
        text-style: bold;
        color: $primary;
    }

    HelpPanel .help-row {
        height: 1;
    }

    HelpPanel .help-key {
        width: 18;
        text-style: bold;
    }

    HelpPanel .help-desc {
        width: 1fr;
        color: $text-muted;
    }

    HelpPanel .help-footer {
        text-align: center;
        color: $text-muted;
        padding-top: 1;
        border-top: solid $primary-darken-2;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("Keyboard Shortcuts", classes="help-title")
            for title, rows in HELP_SECTIONS:
                with Vertical(classes="help-section"):
                    yield Static(title, classes="section-title")
                    for key, description in rows:
                        yield self._help_row(key, description)
            yield Static("q / Enter / Escape to close", classes="help-footer")

    def _help_row(self, key: str, description: str) -> Horizontal:
        """Create a help row with key and description."""
        row = Horizontal(classes="help-row")
        row.compose_add_child(Static(key, classes="help-key"))
        row.compose_add_child(Static(description, classes="help-desc"))
        return row

    def show(self) -> None:
        self.add_class("-visible")

    def hide(self) -> None:
        self.remove_class("-visible")
