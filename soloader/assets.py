"""Read-only access to application assets stored under a data directory."""

from __future__ import annotations

import os
from enum import IntEnum

from soloader.logger import LogType, log_print


class AssetMode(IntEnum):
    """How the caller intends to access an asset."""

    UNKNOWN = 0
    RANDOM = 1
    STREAMING = 2
    BUFFER = 3


class Asset:
    """An open asset file.

    Not thread-safe; use one Asset per thread.
    """

    def __init__(self, path, handle, size):
        self.path = path
        self._handle = handle
        self._size = size
        self.bytes_read = 0

    def __repr__(self):
        return f"Asset({self.path!r}, size={self._size})"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def closed(self):
        """True once the asset has been closed."""
        return self._handle.closed

    def read(self, count):
        """Read up to ``count`` bytes from the current offset.

        Returns the bytes read; an empty result means end of file.
        """
        log_print(LogType.DEBUG, "AAsset_read(%s, %i)", self.path, count)
        data = self._handle.read(count)
        self.bytes_read += len(data)
        return data

    def seek(self, offset, whence=os.SEEK_SET):
        """Move the read offset as ``lseek`` would and return the new position.

        Raises OSError or ValueError if the seek is not possible.
        """
        log_print(LogType.DEBUG, "AAsset_seek(%s, %d, %i)", self.path, offset, whence)
        return self._handle.seek(offset, whence)

    def remaining_length(self):
        """Return the total size minus the number of bytes read so far."""
        return self._size - self.bytes_read

    def length(self):
        """Return the total size of the asset in bytes."""
        return self._size

    def close(self):
        """Release the asset; closing twice is harmless."""
        log_print(LogType.DEBUG, "AAsset_close(%s)", self.path)
        self._handle.close()


class AssetManager:
    """Opens assets found in the ``assets`` directory below ``data_path``."""

    def __init__(self, data_path="."):
        self.data_path = os.fspath(data_path)

    def __repr__(self):
        return f"AssetManager({self.data_path!r})"

    def open(self, filename, mode=AssetMode.UNKNOWN):
        """Open the named asset for reading.

        Raises OSError (FileNotFoundError if it is missing) when the asset
        cannot be opened.
        """
        path = os.path.join(self.data_path, "assets", filename)
        try:
            handle = open(path, "rb")
        except OSError:
            log_print(LogType.DEBUG, "[AAssetManager] AAssetManager_open(%s, %i): failed",
                      path, int(mode))
            raise
        size = handle.seek(0, os.SEEK_END)
        handle.seek(0, os.SEEK_SET)
        log_print(LogType.DEBUG, "[AAssetManager] AAssetManager_open(%s, %i): ok",
                  path, int(mode))
        return Asset(path, handle, size)