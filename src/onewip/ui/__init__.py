"""UI components."""

from .keymap import intent_for_key
from .screens.board import BoardScreen
from .widgets.column import KanbanColumn

__all__ = [
    "BoardScreen",
    "KanbanColumn",
    "intent_for_key",
]
