"""Kanban column widget."""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task

HIGHLIGHT_SYMBOL = "> "


class KanbanColumn(Widget):
    """A single column of the board: header plus task lines."""

    def __init__(self, title: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.title = title
        self._tasks: tuple[Task, ...] = ()
        self._cursor: int | None = None

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header")
        with VerticalScroll(classes="column-content"):
            yield Static(self._body_text, classes="column-tasks")

    @property
    def _header_text(self) -> str:
        """Header text with styled task count."""
        return f"{self.title} [dim]({len(self._tasks)})[/]"

    @property
    def _body_text(self) -> str:
        if not self._tasks:
            return "[dim]No tasks[/]"
        return "\n".join(self.format_lines(self._tasks, self._cursor))

    @staticmethod
    def format_lines(tasks: Sequence[Task], cursor: int | None) -> list[str]:
        """Render task lines, marking the one under the cursor."""
        lines = []
        indent = " " * len(HIGHLIGHT_SYMBOL)
        for index, task in enumerate(tasks):
            content = escape(task.content)
            if index == cursor:
                lines.append(f"[b]{HIGHLIGHT_SYMBOL}{content}[/b]")
            else:
                lines.append(f"{indent}{content}")
        return lines

    def set_tasks(self, tasks: Sequence[Task], cursor: int | None, selected: bool) -> None:
        """Show ``tasks`` with the cursor line highlighted."""
        self._tasks = tuple(tasks)
        self._cursor = cursor
        self.set_class(selected, "-selected")
        if not self.is_mounted:
            return
        self.query_one(".column-header", Static).update(self._header_text)
        self.query_one(".column-tasks", Static).update(self._body_text)
