"""Repository protocol for board storage backends."""

from typing import Protocol

from ..models import BoardSnapshot


class PersistenceError(Exception):
    """Base exception for board storage errors."""

    pass


class BoardLoadError(PersistenceError):
    """Stored board exists but cannot be read or parsed."""

    pass


class BoardSaveError(PersistenceError):
    """Board could not be written."""

    pass


class BoardRepositoryProtocol(Protocol):
    """Interface for board storage backends.

    The board is stored as a whole: every save overwrites the previous
    state, and the board is read back only once, at startup.
    """

    def load(self) -> BoardSnapshot | None:
        """Load the stored board.

        Returns:
            The stored snapshot, or None if nothing has been stored yet.

        Raises:
            BoardLoadError: if stored data exists but is unreadable or corrupt.
        """
        ...

    def save(self, snapshot: BoardSnapshot) -> None:
        """Replace the stored board with ``snapshot``.

        Raises:
            BoardSaveError: if the write fails.
        """
        ...
