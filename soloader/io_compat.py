"""File and directory calls returning results in the bionic layout."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from soloader.logger import LogType, log_print


class BionicOpenFlag(IntFlag):
    """``open()`` flags as bionic defines them."""

    RDONLY = 0
    WRONLY = 0o1
    RDWR = 0o2
    CREAT = 0o100
    EXCL = 0o200
    TRUNC = 0o1000
    APPEND = 0o2000
    NONBLOCK = 0o4000
    DIRECTORY = 0o200000
    TMPFILE_BASE = 0o20000000
    TMPFILE = 0o20000000 | 0o200000


class DirentType(IntEnum):
    """Directory entry types."""

    UNKNOWN = 0
    FIFO = 1
    CHR = 2
    DIR = 4
    BLK = 6
    REG = 8
    LNK = 10
    SOCK = 12
    WHT = 14


_DIRENT_LAYOUT = struct.Struct("<hqQB256s")
_NAME_SIZE = 256

_REDIRECTS = {
    "/proc/cpuinfo": "app0:/cpuinfo",
    "/proc/meminfo": "app0:/meminfo",
}


@dataclass
class BionicDirent:
    """A directory entry as bionic lays it out."""

    d_name: str
    d_type: DirentType = DirentType.REG
    d_ino: int = 0
    d_off: int = 0
    d_reclen: int = 0

    def pack(self):
        """Return the packed little-endian record, the name cut to 256 bytes."""
        name = self.d_name.encode("utf-8")[:_NAME_SIZE]
        return _DIRENT_LAYOUT.pack(self.d_ino, self.d_off, self.d_reclen,
                                   int(self.d_type), name)


@dataclass
class BionicStat:
    """File status in bionic's field set; times are ``(sec, nsec)`` pairs."""

    st_dev: int
    st_ino: int
    st_mode: int
    st_nlink: int
    st_uid: int
    st_gid: int
    st_rdev: int
    st_size: int
    st_blksize: int
    st_blocks: int
    st_atim: tuple
    st_mtim: tuple
    st_ctim: tuple

    @property
    def legacy_ino(self):
        """The short inode field, which always equals ``st_ino``."""
        return self.st_ino


def oflags_bionic_to_host(flags):
    """Convert bionic ``open()`` flags to the host's ``os.O_*`` flags."""
    flags = int(flags)
    if flags & BionicOpenFlag.RDWR:
        out = os.O_RDWR
    elif flags & BionicOpenFlag.WRONLY:
        out = os.O_WRONLY
    else:
        out = os.O_RDONLY
    if flags & BionicOpenFlag.NONBLOCK:
        out |= getattr(os, "O_NONBLOCK", 0)
    if flags & BionicOpenFlag.APPEND:
        out |= os.O_APPEND
    if flags & BionicOpenFlag.CREAT or flags & BionicOpenFlag.TMPFILE:
        out |= os.O_CREAT
    if flags & BionicOpenFlag.TRUNC:
        out |= os.O_TRUNC
    if flags & BionicOpenFlag.EXCL:
        out |= os.O_EXCL
    return out


def redirect_path(path):
    """Map the Linux ``/proc`` info files onto their application copies."""
    return _REDIRECTS.get(os.fspath(path), os.fspath(path))


def fopen(filename, mode="r"):
    """Open a file like ``fopen``; raises OSError on failure."""
    target = redirect_path(filename)
    try:
        handle = open(target, mode)
    except OSError:
        log_print(LogType.WARN, "fopen(%s, %s): failed", target, mode)
        raise
    log_print(LogType.DEBUG, "fopen(%s, %s): ok", target, mode)
    return handle


def open_fd(path, oflag, mode=0o666):
    """Open a file descriptor using bionic flags and return it.

    ``mode`` is honoured only when the flags ask for creation; otherwise
    0o666 is used. Raises OSError on failure.
    """
    target = redirect_path(path)
    oflag = int(oflag)
    creating = (oflag & BionicOpenFlag.CREAT) == BionicOpenFlag.CREAT or \
        (oflag & BionicOpenFlag.TMPFILE) == BionicOpenFlag.TMPFILE
    effective_mode = mode if creating else 0o666
    host_flags = oflags_bionic_to_host(oflag)
    try:
        fd = os.open(target, host_flags, effective_mode)
    except OSError:
        log_print(LogType.WARN, "open(%s, %x): failed", target, host_flags)
        raise
    log_print(LogType.DEBUG, "open(%s, %x): %i", target, host_flags, fd)
    return fd


def stat_to_bionic(st):
    """Convert an ``os.stat_result`` into a BionicStat; sub-second parts are 0."""
    return BionicStat(
        st_dev=st.st_dev,
        st_ino=st.st_ino,
        st_mode=st.st_mode,
        st_nlink=st.st_nlink,
        st_uid=st.st_uid,
        st_gid=st.st_gid,
        st_rdev=getattr(st, "st_rdev", 0),
        st_size=st.st_size,
        st_blksize=getattr(st, "st_blksize", 0),
        st_blocks=getattr(st, "st_blocks", 0),
        st_atim=(int(st.st_atime), 0),
        st_mtim=(int(st.st_mtime), 0),
        st_ctim=(int(st.st_ctime), 0),
    )


def dirent_to_bionic(entry):
    """Convert an ``os.DirEntry`` into a BionicDirent (DIR or REG only)."""
    kind = DirentType.DIR if entry.is_dir() else DirentType.REG
    name = entry.name.encode("utf-8")[:_NAME_SIZE].decode("utf-8", "ignore")
    return BionicDirent(d_name=name, d_type=kind)


def stat(path):
    """Return the status of ``path``; raises OSError on failure."""
    result = stat_to_bionic(os.stat(path))
    log_print(LogType.DEBUG, "stat(%s): 0", os.fspath(path))
    return result


def fstat(fd):
    """Return the status of an open descriptor; raises OSError on failure."""
    result = stat_to_bionic(os.fstat(fd))
    log_print(LogType.DEBUG, "fstat(%i): 0", fd)
    return result


def readdir(path):
    """Yield the entries of a directory as BionicDirent records."""
    log_print(LogType.DEBUG, "opendir(\"%s\")", os.fspath(path))
    with os.scandir(path) as entries:
        for entry in entries:
            yield dirent_to_bionic(entry)


def mmap(length):
    """Return a zero-filled buffer of ``length`` bytes.

    Raises ValueError if ``length`` is not positive.
    """
    log_print(LogType.WARN, "mmap(%i)", length)
    if length <= 0:
        raise ValueError(f"mmap length must be positive, got {length}")
    return bytearray(length)