"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
CROSS = "\u2717"  # ✗


def _supports_color(stream) -> bool:
    """Check if the stream is a terminal that supports color output."""
    return hasattr(stream, "isatty") and stream.isatty()


def _colorize(text: str, color: str, stream=None) -> str:
    """Apply color to text if the target stream supports it."""
    if _supports_color(stream or sys.stdout):
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN)
    print(f"{check} {message}")


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    cross = _colorize(CROSS, RED, sys.stderr)
    print(f"{cross} {message}", file=sys.stderr)
