"""Widget components."""

from .column import KanbanColumn
from .focus_panel import FocusPanel
from .help_panel import HelpPanel
from .task_input import TaskInputBar

__all__ = [
    "FocusPanel",
    "HelpPanel",
    "KanbanColumn",
    "TaskInputBar",
]
