"""Main kanban board screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Header, Static

from ...models import COLUMN_ORDER, Column, Mode
from ..widgets import FocusPanel, HelpPanel, KanbanColumn, TaskInputBar

if TYPE_CHECKING:
    from ...services import InteractionService

COLUMN_TITLES: dict[Column, str] = {
    Column.TODO: "Todo",
    Column.WIP: "Wip",
    Column.DONE: "Done",
}

MODE_HINTS: dict[Mode, str] = {
    Mode.OVERVIEW: "a add  e edit  d delete  H/L move  f focus  ? help  q quit",
    Mode.ADD: "Enter add  Esc cancel (empty input only)",
    Mode.EDIT: "Enter save  Esc cancel",
    Mode.FOCUS: "Enter done  Esc back",
    Mode.HELP: "q / Enter / Esc close",
}


class BoardScreen(Screen):
    """Board screen: a pure projection of the interaction session.

    Key presses are forwarded to the app, which turns them into intents.
    """

    def compose(self) -> ComposeResult:
        """Create the board layout."""
        yield Header()

        with Container(id="board-container"), Horizontal(id="columns"):
            for column in COLUMN_ORDER:
                yield KanbanColumn(
                    title=COLUMN_TITLES[column],
                    id=f"column-{column.value}",
                )

        yield FocusPanel(id="focus-panel")
        yield HelpPanel(id="help-panel")
        yield TaskInputBar(id="task-input")
        yield Static("", id="mode-hint", classes="mode-hint")

    def on_mount(self) -> None:
        """Draw the session state once the widgets exist."""
        self.call_after_refresh(self.app.refresh_board)  # pyrefly: ignore[missing-attribute]

    def on_key(self, event: events.Key) -> None:
        """Forward every key press to the app's intent dispatch."""
        event.stop()
        event.prevent_default()
        self.app.handle_key(event.key, event.character)  # pyrefly: ignore[missing-attribute]

    def show_session(self, session: InteractionService) -> None:
        """Render the session: columns, input bar, focus and help panels."""
        board = session.board
        mode = session.mode

        for column in COLUMN_ORDER:
            widget = self.query_one(f"#column-{column.value}", KanbanColumn)
            selected = board.selected_column is column
            if column is Column.WIP:
                tasks = (board.wip,) if board.wip is not None else ()
                cursor = 0 if board.wip is not None else None
            else:
                tracked = board.todo if column is Column.TODO else board.done
                tasks, cursor = tracked.items, tracked.cursor
            widget.set_tasks(tasks, cursor, selected)

        board_container = self.query_one("#board-container", Container)
        board_container.display = mode not in (Mode.FOCUS, Mode.HELP)

        input_bar = self.query_one(TaskInputBar)
        if mode is Mode.ADD:
            input_bar.show("Add Task", session.buffer)
        elif mode is Mode.EDIT:
            input_bar.show("Edit Task", session.buffer)
        else:
            input_bar.hide()

        focus_panel = self.query_one(FocusPanel)
        if mode is Mode.FOCUS and board.wip is not None:
            focus_panel.show(board.wip.content)
        else:
            focus_panel.hide()

        help_panel = self.query_one(HelpPanel)
        if mode is Mode.HELP:
            help_panel.show()
        else:
            help_panel.hide()

        self.query_one("#mode-hint", Static).update(f"[dim]{MODE_HINTS[mode]}[/]")
