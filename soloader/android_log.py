"""Android-style logging calls routed to the console logger."""

from __future__ import annotations

from enum import IntEnum

from soloader.logger import LogType, log_print

# Formatted messages longer than this are cut.
MAX_MESSAGE_LENGTH = 1023


class LogPriority(IntEnum):
    """Android log priorities, in increasing order."""

    UNKNOWN = 0
    DEFAULT = 1
    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    FATAL = 7
    SILENT = 8


class AndroidAssertionError(AssertionError):
    """Raised by android_log_assert after the failure has been logged."""

    def __init__(self, message, tag=None):
        super().__init__(message)
        self.message = message
        self.tag = tag


_PRIORITY_TO_TYPE = {
    LogPriority.INFO: LogType.INFO,
    LogPriority.WARN: LogType.WARN,
    LogPriority.ERROR: LogType.ERROR,
    LogPriority.FATAL: LogType.ERROR,
}


def _log_type_for(prio):
    try:
        priority = LogPriority(prio)
    except ValueError:
        return LogType.DEBUG
    return _PRIORITY_TO_TYPE.get(priority, LogType.DEBUG)


def _format(fmt, args):
    text = fmt % args if args else fmt
    return text[:MAX_MESSAGE_LENGTH]


def android_log_write(prio, tag, text):
    """Log ``text`` under ``tag`` at the level matching ``prio``.

    Returns the line that was written.
    """
    return log_print(_log_type_for(prio), "[ALOG][%s] %s", tag, text)


def android_log_print(prio, tag, fmt, *args):
    """Format ``fmt % args`` and log it like android_log_write."""
    return android_log_write(prio, tag, _format(fmt, args))


def android_log_assert(cond, tag, fmt, *args):
    """Log an assertion failure as fatal and raise AndroidAssertionError.

    If ``fmt`` is given, ``cond`` is ignored; otherwise ``cond`` is reported,
    and if both are None a default message is used.
    """
    if fmt is not None:
        message = _format(fmt, args)
    elif cond is not None:
        message = f"Assertion failed: {cond}"
    else:
        message = "Unspecified assertion failed"
    log_print(LogType.FATAL, "[ALOG][ASSERT] %s", message)
    raise AndroidAssertionError(message, tag)