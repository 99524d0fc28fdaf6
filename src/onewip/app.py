"""onewip TUI Application."""

from __future__ import annotations

import logging

from textual.app import App

from .config import Settings
from .models import BoardSnapshot
from .repositories import YamlBoardRepository
from .services import BoardService, InteractionService, PersistenceWorker
from .ui.keymap import intent_for_key
from .ui.screens.board import BoardScreen

logger = logging.getLogger(__name__)


class OneWipApp(App):
    """onewip - Terminal Kanban with a WIP limit of one."""

    TITLE = "onewip"

    CSS_PATH = "ui/styles.tcss"

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(
        self,
        session: InteractionService,
        persistence: PersistenceWorker | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.session = session
        self.persistence = persistence

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.sub_title = str(self.settings.board_file)
        self.push_screen("board")
        self.set_interval(self.settings.tick_interval, self._on_tick)

    def handle_key(self, key: str, character: str | None) -> None:
        """Dispatch a key press to the session as an intent."""
        mapped = intent_for_key(self.session.mode, key, character)
        if mapped is None:
            return

        intent, char = mapped
        if not self.session.handle(intent, char):
            self.exit()
            return
        self.refresh_board()

    def refresh_board(self) -> None:
        """Redraw the board from the session state."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.show_session(self.session)

    def _on_tick(self) -> None:
        """Redraw tick; also surfaces background save failures."""
        self.refresh_board()
        if self.persistence is None:
            return
        error = self.persistence.take_error()
        if error is not None:
            self.notify(f"Failed to save board: {error}", severity="error", timeout=5)


def run(settings: Settings | None = None) -> BoardSnapshot:
    """Run the onewip application.

    Loads the board, runs the TUI, and waits for every pending save before
    returning the final board snapshot.

    Raises:
        BoardLoadError: if the stored board cannot be read.
    """
    settings = settings or Settings()
    repository = YamlBoardRepository(settings.board_file)
    board_service = BoardService(repository)

    worker = PersistenceWorker(
        repository,
        max_pending=settings.save_queue_size,
        retries=settings.save_retries,
    )
    session = board_service.start_session(on_change=worker.submit)

    with worker:
        app = OneWipApp(session, worker, settings)
        app.run()
        logger.info("TUI closed, flushing pending saves")

    return session.board.snapshot()
