import os
import sys

DEFAULT_ROWS = 24


def get_terminal_rows(fallback: int = DEFAULT_ROWS) -> int:
    """Return how many lines the terminal shows, or ``fallback`` if stdout is not a tty."""
    if not sys.stdout.isatty():
        return fallback
    try:
        return os.get_terminal_size().lines
    except OSError:
        return fallback
