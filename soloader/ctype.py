"""Character classes and case tables in the bionic layout."""

from __future__ import annotations

from enum import IntFlag

EOF = -1


class CtypeFlag(IntFlag):
    """Classification bits of the character table."""

    NONE = 0
    U = 0x01  # upper case
    L = 0x02  # lower case
    N = 0x04  # digit
    S = 0x08  # space
    P = 0x10  # punctuation
    C = 0x20  # control
    X = 0x40  # hex digit
    B = 0x80  # blank


def _class_of(c):
    F = CtypeFlag
    if 9 <= c <= 13:
        return F.C | F.S
    if c < 32 or c == 127:
        return F.C
    if c == 32:
        return F.S | F.B
    if 48 <= c <= 57:
        return F.N
    if 65 <= c <= 70:
        return F.U | F.X
    if 71 <= c <= 90:
        return F.U
    if 97 <= c <= 102:
        return F.L | F.X
    if 103 <= c <= 122:
        return F.L
    if c < 127:
        return F.P
    return F.NONE


_CTYPE = tuple(_class_of(c) for c in range(256))
_TOLOWER = tuple(c + 32 if 65 <= c <= 90 else c for c in range(256))
_TOUPPER = tuple(c - 32 if 97 <= c <= 122 else c for c in range(256))


def _code(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        c = ord(c)
    if not EOF <= c <= 255:
        raise ValueError(f"character code out of range: {c}")
    return c


def classify(c):
    """Return the class flags of a byte value (or EOF, which has none)."""
    c = _code(c)
    if c == EOF:
        return CtypeFlag.NONE
    return _CTYPE[c]


def to_lower(c):
    """Lower-case an ASCII byte value; other values, and EOF, are unchanged."""
    c = _code(c)
    return EOF if c == EOF else _TOLOWER[c]


def to_upper(c):
    """Upper-case an ASCII byte value; other values, and EOF, are unchanged."""
    c = _code(c)
    return EOF if c == EOF else _TOUPPER[c]