"""Interaction modes: which intents are legal when, and what they do."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..models import Board, BoardSnapshot, EditTarget, Intent, Mode

logger = logging.getLogger(__name__)

SnapshotSink = Callable[[BoardSnapshot], None]


class InteractionService:
    """State machine over the board session.

    Owns the board, the current mode and the text buffer used while adding
    or editing. Every operation that changes the board hands a fresh
    snapshot to ``on_change``. Intents that are not legal in the current
    mode, or whose precondition fails, do nothing.
    """

    def __init__(
        self,
        board: Board | None = None,
        on_change: SnapshotSink | None = None,
    ) -> None:
        self._board = board if board is not None else Board()
        self._on_change = on_change
        self._mode = Mode.ADD if self._board.is_empty else Mode.OVERVIEW
        self._buffer = ""
        self._edit_target: EditTarget | None = None
        self._handlers: dict[Mode, Callable[[Intent, str | None], bool]] = {
            Mode.OVERVIEW: self._handle_overview,
            Mode.ADD: self._handle_add,
            Mode.EDIT: self._handle_edit,
            Mode.FOCUS: self._handle_focus,
            Mode.HELP: self._handle_help,
        }

    # --- Read-only state for rendering ---

    @property
    def board(self) -> Board:
        return self._board

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def edit_target(self) -> EditTarget | None:
        """Target of the current edit (only set in Edit mode)."""
        return self._edit_target

    # --- Dispatch ---

    def handle(self, intent: Intent, char: str | None = None) -> bool:
        """
        Apply an intent in the current mode.

        Args:
            intent: The user intent
            char: The typed character, for ``Intent.CHAR_INPUT`` only

        Returns:
            False when the session should end, True otherwise.
        """
        if intent is Intent.QUIT and self._mode is Mode.OVERVIEW:
            logger.info("Quit requested")
            return False
        self._handlers[self._mode](intent, char)
        return True

    def _emit(self) -> None:
        if self._on_change is not None:
            self._on_change(self._board.snapshot())

    def _enter(self, mode: Mode) -> None:
        if mode is not self._mode:
            logger.debug("Mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode

    # --- Overview ---

    def _handle_overview(self, intent: Intent, char: str | None) -> bool:
        board = self._board
        if intent is Intent.NAV_UP:
            return board.move_cursor_up()
        if intent is Intent.NAV_DOWN:
            return board.move_cursor_down()
        if intent is Intent.NAV_LEFT:
            return board.select_left()
        if intent is Intent.NAV_RIGHT:
            return board.select_right()

        moves = {
            Intent.MOVE_UP: board.reorder_up,
            Intent.MOVE_DOWN: board.reorder_down,
            Intent.MOVE_LEFT: board.retreat_task,
            Intent.MOVE_RIGHT: board.advance_task,
            Intent.DELETE: board.delete_current,
        }
        if intent in moves:
            changed = moves[intent]()
            if changed:
                self._emit()
            return changed

        if intent is Intent.START_ADD:
            self._buffer = ""
            self._enter(Mode.ADD)
            return True
        if intent is Intent.START_EDIT:
            return self.start_edit()
        if intent is Intent.FOCUS:
            if board.wip is None:
                return False
            self._enter(Mode.FOCUS)
            return True
        if intent is Intent.HELP:
            self._enter(Mode.HELP)
            return True
        return False

    def start_edit(self) -> bool:
        """Enter Edit mode on the current task, preloading the buffer."""
        target = self._board.edit_target()
        task = self._board.current_task()
        if target is None or task is None:
            return False
        self._edit_target = target
        self._buffer = task.content
        self._enter(Mode.EDIT)
        return True

    # --- Text input (Add / Edit) ---

    def _handle_text(self, intent: Intent, char: str | None) -> bool:
        if intent is Intent.CHAR_INPUT and char:
            self._buffer += char
            return True
        if intent is Intent.BACKSPACE:
            if not self._buffer:
                return False
            self._buffer = self._buffer[:-1]
            return True
        return False

    def _handle_add(self, intent: Intent, char: str | None) -> bool:
        if intent is Intent.CONFIRM:
            if not self._buffer.strip():
                return False
            self._board.add_task(self._buffer)
            self._buffer = ""
            self._enter(Mode.OVERVIEW)
            self._emit()
            return True
        if intent is Intent.CANCEL:
            # Typed text is never thrown away by cancel.
            if self._buffer.strip():
                return False
            self._buffer = ""
            self._enter(Mode.OVERVIEW)
            return True
        return self._handle_text(intent, char)

    def _handle_edit(self, intent: Intent, char: str | None) -> bool:
        if intent is Intent.CONFIRM:
            if not self._buffer.strip():
                return False
            target = self._edit_target
            changed = target is not None and self._board.replace_content(target, self._buffer)
            self._leave_edit()
            if changed:
                self._emit()
            return changed
        if intent is Intent.CANCEL:
            self._leave_edit()
            return True
        return self._handle_text(intent, char)

    def _leave_edit(self) -> None:
        self._buffer = ""
        self._edit_target = None
        self._enter(Mode.OVERVIEW)

    # --- Focus / Help ---

    def _handle_focus(self, intent: Intent, char: str | None) -> bool:
        if intent is Intent.CONFIRM:
            changed = self._board.finish_wip()
            self._enter(Mode.OVERVIEW)
            if changed:
                self._emit()
            return changed
        if intent in (Intent.CANCEL, Intent.QUIT):
            self._buffer = ""
            self._enter(Mode.OVERVIEW)
            return True
        return False

    def _handle_help(self, intent: Intent, char: str | None) -> bool:
        if intent in (Intent.QUIT, Intent.CONFIRM, Intent.CANCEL):
            self._enter(Mode.OVERVIEW)
            return True
        return False
