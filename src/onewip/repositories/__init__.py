"""Repository layer for data access."""

from .protocol import (
    BoardLoadError,
    BoardRepositoryProtocol,
    BoardSaveError,
    PersistenceError,
)
from .yaml_file import YamlBoardRepository

__all__ = [
    "BoardLoadError",
    "BoardRepositoryProtocol",
    "BoardSaveError",
    "PersistenceError",
    "YamlBoardRepository",
]
