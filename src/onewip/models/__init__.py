"""Data models."""

from .board import COLUMN_ORDER, Board, BoardSnapshot, EditTarget
from .enums import Column, Intent, Mode
from .task import Task
from .tracked_list import TrackedList

__all__ = [
    "COLUMN_ORDER",
    "Board",
    "BoardSnapshot",
    "Column",
    "EditTarget",
    "Intent",
    "Mode",
    "Task",
    "TrackedList",
]
