"""File and string helpers."""

from __future__ import annotations

import errno
import hashlib
import os
import time


def current_timestamp_ms():
    """Return the Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def file_exists(path):
    """Return True if something exists at ``path``."""
    return os.path.exists(path)


def file_load(path):
    """Return the contents of a file as bytes.

    Raises FileNotFoundError if the file is missing and ValueError if it is
    empty.
    """
    if not file_exists(path):
        raise FileNotFoundError(errno.ENOENT, "Specified source path does not exist", str(path))
    with open(path, "rb") as handle:
        data = handle.read()
    if not data:
        raise ValueError(f"The specified source file {path!r} is empty")
    return data


def file_mkpath(path, mode=0o755):
    """Create every parent directory of the file at ``path``.

    Directories that already exist are left alone. Raises ValueError on an
    empty path and OSError if a directory cannot be created.
    """
    path = os.fspath(path)
    if not path:
        raise ValueError("file_mkpath: invalid argument")
    prefixes = (path[:index] for index, char in enumerate(path) if index > 0 and char == "/")
    for prefix in prefixes:
        try:
            os.mkdir(prefix, mode)
        except FileExistsError:
            pass


def file_save(path, data):
    """Write ``data`` to ``path``, replacing any existing file."""
    with open(path, "wb") as handle:
        handle.write(data)


def file_copy(path, destination):
    """Copy a file, creating parent directories of ``destination`` as needed."""
    if not file_exists(path):
        raise FileNotFoundError(errno.ENOENT, "Specified source path does not exist", str(path))
    file_mkpath(destination, 0o755)
    file_save(destination, file_load(path))


def file_size(path):
    """Return the size of a file in bytes."""
    if not file_exists(path):
        raise FileNotFoundError(errno.ENOENT, "Specified source path does not exist", str(path))
    return os.path.getsize(path)


def file_sha1sum(path):
    """Return the upper-case hex SHA-1 of a file's contents."""
    return str_sha1sum(file_load(path))


def is_dir(path):
    """Return True if ``path`` is a directory."""
    return os.path.isdir(path)


def str_replace(text, needle, replacement):
    """Replace every non-overlapping ``needle`` in ``text``.

    An empty needle or text leaves the text unchanged.
    """
    if not needle or not text:
        return text
    return text.replace(needle, replacement)


def str_remove(text, needle):
    """Remove every non-overlapping ``needle`` from ``text``."""
    if not needle:
        return text
    return text.replace(needle, "")


def str_starts_with(text, prefix):
    """Return True if ``text`` starts with ``prefix``."""
    return text.startswith(prefix)


def str_ends_with(text, suffix):
    """Return True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def str_sha1sum(data, size=0):
    """Return the upper-case hex SHA-1 of ``data``.

    ``data`` may be str (encoded as UTF-8) or bytes. With ``size`` 0 the data
    is taken up to its first NUL byte; otherwise its first ``size`` bytes.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = bytes(data)
    chunk = data.split(b"\0", 1)[0] if size == 0 else data[:size]
    return hashlib.sha1(chunk).hexdigest().upper()