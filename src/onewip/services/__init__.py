"""Service layer for business logic."""

from .board_service import BoardService
from .interaction_service import InteractionService, SnapshotSink
from .persistence_service import PersistenceWorker

__all__ = [
    "BoardService",
    "InteractionService",
    "PersistenceWorker",
    "SnapshotSink",
]
