import pytest

from soloader.android_log import (
    MAX_MESSAGE_LENGTH,
    AndroidAssertionError,
    LogPriority,
    android_log_assert,
    android_log_print,
    android_log_write,
)
from soloader.logger import LogType, format_line


@pytest.mark.parametrize(
    "prio, kind",
    [
        (LogPriority.INFO, LogType.INFO),
        (LogPriority.WARN, LogType.WARN),
        (LogPriority.ERROR, LogType.ERROR),
        (LogPriority.FATAL, LogType.ERROR),
        (LogPriority.VERBOSE, LogType.DEBUG),
        (LogPriority.DEBUG, LogType.DEBUG),
        (LogPriority.SILENT, LogType.DEBUG),
        (99, LogType.DEBUG),
    ],
)
def test_write_maps_priority(prio, kind, capsys):
    line = android_log_write(prio, "tag", "hello")
    assert line == format_line(kind, "[ALOG][tag] hello")
    assert capsys.readouterr().out == line


def test_write_keeps_percent_signs():
    line = android_log_write(LogPriority.INFO, "t", "100% done")
    assert "[ALOG][t] 100% done" in line


def test_print_formats_arguments():
    line = android_log_print(LogPriority.WARN, "game", "value=%d name=%s", 7, "x")
    assert line == format_line(LogType.WARN, "[ALOG][game] value=7 name=x")


def test_print_truncates_long_messages():
    line = android_log_print(LogPriority.INFO, "t", "%s", "a" * 5000)
    assert "a" * MAX_MESSAGE_LENGTH in line
    assert "a" * (MAX_MESSAGE_LENGTH + 1) not in line


def test_assert_with_format():
    with pytest.raises(AndroidAssertionError) as info:
        android_log_assert("ignored", "tag", "bad %s", "thing")
    assert info.value.message == "bad thing"
    assert info.value.tag == "tag"


def test_assert_with_condition(capsys):
    with pytest.raises(AndroidAssertionError) as info:
        android_log_assert("x > 0", "tag", None)
    assert info.value.message == "Assertion failed: x > 0"
    assert "[ALOG][ASSERT] Assertion failed: x > 0" in capsys.readouterr().out


def test_assert_unspecified():
    with pytest.raises(AndroidAssertionError) as info:
        android_log_assert(None, None, None)
    assert str(info.value) == "Unspecified assertion failed"