"""Configuration."""

from .settings import DEFAULT_BOARD_FILE, Settings

__all__ = [
    "DEFAULT_BOARD_FILE",
    "Settings",
]
