"""Service for loading the board and starting a session."""

from __future__ import annotations

import logging

from ..models import Board
from ..repositories import BoardRepositoryProtocol
from .interaction_service import InteractionService, SnapshotSink

logger = logging.getLogger(__name__)


class BoardService:
    """Startup path: read the stored board once and build the session."""

    def __init__(self, repository: BoardRepositoryProtocol) -> None:
        self.repository = repository

    def load_board(self) -> Board | None:
        """
        Load the stored board.

        Returns:
            The board, or None if nothing has been stored yet.

        Raises:
            BoardLoadError: if the stored board is corrupt or unreadable.
        """
        snapshot = self.repository.load()
        if snapshot is None:
            logger.info("No stored board, starting empty")
            return None
        return Board.from_snapshot(snapshot)

    def start_session(self, on_change: SnapshotSink | None = None) -> InteractionService:
        """Load the board and wrap it in an interaction session.

        A missing or empty board starts in Add mode; otherwise Overview.
        """
        board = self.load_board()
        session = InteractionService(board, on_change=on_change)
        logger.info("Session started in %s mode", session.mode.value)
        return session
