"""Enums for board columns, interaction modes and user intents."""

from enum import Enum


class Column(str, Enum):
    """The three board columns, left to right."""

    TODO = "todo"
    WIP = "wip"
    DONE = "done"


class Mode(str, Enum):
    """Interaction modes of the board session."""

    OVERVIEW = "overview"
    ADD = "add"
    EDIT = "edit"
    FOCUS = "focus"
    HELP = "help"


class Intent(str, Enum):
    """Abstract user actions, independent of the key that produced them."""

    QUIT = "quit"
    NAV_UP = "nav_up"
    NAV_DOWN = "nav_down"
    NAV_LEFT = "nav_left"
    NAV_RIGHT = "nav_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    START_ADD = "start_add"
    START_EDIT = "start_edit"
    DELETE = "delete"
    FOCUS = "focus"
    HELP = "help"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    CHAR_INPUT = "char_input"
    BACKSPACE = "backspace"
