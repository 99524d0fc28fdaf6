"""onewip - a three-column terminal kanban board with a WIP limit of one."""

__version__ = "0.1.0"
