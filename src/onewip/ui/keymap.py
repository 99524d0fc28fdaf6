"""Translate terminal keys into intents for the current mode."""

from __future__ import annotations

from ..models import Intent, Mode

# Overview keys, matched on the textual key name first, then the character.
OVERVIEW_KEYS: dict[str, Intent] = {
    # quit
    "q": Intent.QUIT,
    "escape": Intent.QUIT,
    # move cursor
    "k": Intent.NAV_UP,
    "j": Intent.NAV_DOWN,
    "h": Intent.NAV_LEFT,
    "l": Intent.NAV_RIGHT,
    "up": Intent.NAV_UP,
    "down": Intent.NAV_DOWN,
    "left": Intent.NAV_LEFT,
    "right": Intent.NAV_RIGHT,
    # move task
    "K": Intent.MOVE_UP,
    "J": Intent.MOVE_DOWN,
    "H": Intent.MOVE_LEFT,
    "L": Intent.MOVE_RIGHT,
    "shift+up": Intent.MOVE_UP,
    "shift+down": Intent.MOVE_DOWN,
    "shift+left": Intent.MOVE_LEFT,
    "shift+right": Intent.MOVE_RIGHT,
    # add / edit / delete
    "a": Intent.START_ADD,
    "A": Intent.START_ADD,
    "e": Intent.START_EDIT,
    "E": Intent.START_EDIT,
    "d": Intent.DELETE,
    "D": Intent.DELETE,
    "backspace": Intent.DELETE,
    "delete": Intent.DELETE,
    # work
    "f": Intent.FOCUS,
    "F": Intent.FOCUS,
    "w": Intent.FOCUS,
    "W": Intent.FOCUS,
    # help
    "?": Intent.HELP,
}

FOCUS_KEYS: dict[str, Intent] = {
    "enter": Intent.CONFIRM,
    "escape": Intent.CANCEL,
    "q": Intent.QUIT,
}

HELP_KEYS: dict[str, Intent] = {
    "enter": Intent.CONFIRM,
    "escape": Intent.CANCEL,
    "q": Intent.QUIT,
}

TEXT_KEYS: dict[str, Intent] = {
    "enter": Intent.CONFIRM,
    "escape": Intent.CANCEL,
    "backspace": Intent.BACKSPACE,
}


def _lookup(table: dict[str, Intent], key: str, character: str | None) -> Intent | None:
    if key in table:
        return table[key]
    if character is not None and character in table:
        return table[character]
    return None


def intent_for_key(
    mode: Mode, key: str, character: str | None = None
) -> tuple[Intent, str | None] | None:
    """
    Map a key press to an intent.

    Args:
        mode: Current interaction mode
        key: Textual key name (e.g. "j", "shift+up", "enter")
        character: Printable character for the key, if any

    Returns:
        (intent, char) where char is set only for typed text, or None if
        the key means nothing in this mode.
    """
    if mode in (Mode.ADD, Mode.EDIT):
        if key in TEXT_KEYS:
            return (TEXT_KEYS[key], None)
        if character is not None and character.isprintable() and len(character) == 1:
            return (Intent.CHAR_INPUT, character)
        return None

    table = {
        Mode.OVERVIEW: OVERVIEW_KEYS,
        Mode.FOCUS: FOCUS_KEYS,
        Mode.HELP: HELP_KEYS,
    }[mode]
    intent = _lookup(table, key, character)
    return (intent, None) if intent is not None else None
