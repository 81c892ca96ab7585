"""Coloured console logging with per-level markers."""

from __future__ import annotations

import sys
import threading
from enum import IntEnum

COLOR_RED = "\x1b[38;5;196m"
COLOR_PINK = "\x1b[38;5;212m"
COLOR_ORANGE = "\x1b[38;5;202m"
COLOR_BLUE = "\x1b[38;5;32m"
COLOR_GREEN = "\x1b[32m"
COLOR_CYAN = "\x1b[36m"
COLOR_END = "\x1b[0m"

# Longest line that gets written; longer output is cut to this many characters.
MAX_LINE_LENGTH = 2047


class LogType(IntEnum):
    """Kinds of log message, each with its own marker and colour."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    SUCCESS = 5
    WAIT = 6


_PREFIXES = {
    LogType.DEBUG: (COLOR_PINK, "• debug", "    "),
    LogType.INFO: (COLOR_BLUE, "ℹ info", "     "),
    LogType.WARN: (COLOR_ORANGE, "⚠ warning", "  "),
    LogType.ERROR: (COLOR_RED, "⨯ error", "    "),
    LogType.FATAL: (COLOR_RED, "! fatal", "    "),
    LogType.SUCCESS: (COLOR_GREEN, "! success", "  "),
    LogType.WAIT: (COLOR_CYAN, "… waiting", "  "),
}

_lock = threading.Lock()


def format_line(log_type, message):
    """Return the full output line for a message of the given type.

    Raises ValueError if ``log_type`` is not a known log type.
    """
    kind = LogType(log_type)
    color, marker, padding = _PREFIXES[kind]
    return f" {color}{marker}{COLOR_END}{padding}{message}\n"


def log_print(log_type, fmt, *args):
    """Format ``fmt % args`` and write it to stdout as one log line.

    Returns the line written, or None if ``log_type`` is unknown, in which
    case nothing is written.
    """
    try:
        kind = LogType(log_type)
    except ValueError:
        return None
    message = fmt % args if args else fmt
    line = format_line(kind, message)[:MAX_LINE_LENGTH]
    with _lock:
        sys.stdout.write(line)
        sys.stdout.flush()
    return line