"""Translation between host error numbers and Android (bionic) ones."""

from __future__ import annotations

import errno as _errno
from dataclasses import dataclass
from enum import IntEnum

from soloader.logger import LogType, log_print


class BionicErrno(IntEnum):
    """Error numbers as defined by bionic."""

    EPERM = 1
    ENOENT = 2
    ESRCH = 3
    EINTR = 4
    EIO = 5
    ENXIO = 6
    E2BIG = 7
    ENOEXEC = 8
    EBADF = 9
    ECHILD = 10
    EAGAIN = 11
    ENOMEM = 12
    EACCES = 13
    EFAULT = 14
    ENOTBLK = 15
    EBUSY = 16
    EEXIST = 17
    EXDEV = 18
    ENODEV = 19
    ENOTDIR = 20
    EISDIR = 21
    EINVAL = 22
    ENFILE = 23
    EMFILE = 24
    ENOTTY = 25
    ETXTBSY = 26
    EFBIG = 27
    ENOSPC = 28
    ESPIPE = 29
    EROFS = 30
    EMLINK = 31
    EPIPE = 32
    EDOM = 33
    ERANGE = 34
    EDEADLK = 35
    ENAMETOOLONG = 36
    ENOLCK = 37
    ENOSYS = 38
    ENOTEMPTY = 39
    ELOOP = 40
    EWOULDBLOCK = 11
    ENOMSG = 42
    EIDRM = 43
    ECHRNG = 44
    EL2NSYNC = 45
    EL3HLT = 46
    EL3RST = 47
    ELNRNG = 48
    EUNATCH = 49
    ENOCSI = 50
    EL2HLT = 51
    EBADE = 52
    EBADR = 53
    EXFULL = 54
    ENOANO = 55
    EBADRQC = 56
    EBADSLT = 57
    EDEADLOCK = 35
    EBFONT = 59
    ENOSTR = 60
    ENODATA = 61
    ETIME = 62
    ENOSR = 63
    ENONET = 64
    ENOPKG = 65
    EREMOTE = 66
    ENOLINK = 67
    EADV = 68
    ESRMNT = 69
    ECOMM = 70
    EPROTO = 71
    EMULTIHOP = 72
    EDOTDOT = 73
    EBADMSG = 74
    EOVERFLOW = 75
    ENOTUNIQ = 76
    EBADFD = 77
    EREMCHG = 78
    ELIBACC = 79
    ELIBBAD = 80
    ELIBSCN = 81
    ELIBMAX = 82
    ELIBEXEC = 83
    EILSEQ = 84
    ERESTART = 85
    ESTRPIPE = 86
    EUSERS = 87
    ENOTSOCK = 88
    EDESTADDRREQ = 89
    EMSGSIZE = 90
    EPROTOTYPE = 91
    ENOPROTOOPT = 92
    EPROTONOSUPPORT = 93
    ESOCKTNOSUPPORT = 94
    EOPNOTSUPP = 95
    EPFNOSUPPORT = 96
    EAFNOSUPPORT = 97
    EADDRINUSE = 98
    EADDRNOTAVAIL = 99
    ENETDOWN = 100
    ENETUNREACH = 101
    ENETRESET = 102
    ECONNABORTED = 103
    ECONNRESET = 104
    ENOBUFS = 105
    EISCONN = 106
    ENOTCONN = 107
    ESHUTDOWN = 108
    ETOOMANYREFS = 109
    ETIMEDOUT = 110
    ECONNREFUSED = 111
    EHOSTDOWN = 112
    EHOSTUNREACH = 113
    EALREADY = 114
    EINPROGRESS = 115
    ESTALE = 116
    EUCLEAN = 117
    ENOTNAM = 118
    ENAVAIL = 119
    EISNAM = 120
    EREMOTEIO = 121
    EDQUOT = 122
    ENOMEDIUM = 123
    EMEDIUMTYPE = 124
    ECANCELED = 125
    ENOKEY = 126
    EKEYEXPIRED = 127
    EKEYREVOKED = 128
    EKEYREJECTED = 129
    EOWNERDEAD = 130
    ENOTRECOVERABLE = 131
    ERFKILL = 132
    EHWPOISON = 133
    # On Linux ENOTSUP and EOPNOTSUPP share a value.
    ENOTSUP = 95


@dataclass(frozen=True)
class ErrnoEntry:
    """One row of the translation table."""

    host: int
    bionic: int
    message: str


_TABLE_SPEC = (
    ("EPERM", "Operation not permitted"),
    ("ENOENT", "No such file or directory"),
    ("ESRCH", "No such process"),
    ("EINTR", "Interrupted system call"),
    ("EIO", "I/O error"),
    ("ENXIO", "No such device or address"),
    ("E2BIG", "Argument list too long"),
    ("ENOEXEC", "Exec format error"),
    ("EBADF", "Bad file descriptor"),
    ("ECHILD", "No child processes"),
    ("EAGAIN", "Try again"),
    ("ENOMEM", "Out of memory"),
    ("EACCES", "Permission denied"),
    ("EFAULT", "Bad address"),
    ("ENOTBLK", "Block device required"),
    ("EBUSY", "Device or resource busy"),
    ("EEXIST", "File exists"),
    ("EXDEV", "Cross-device link"),
    ("ENODEV", "No such device"),
    ("ENOTDIR", "Not a directory"),
    ("EISDIR", "Is a directory"),
    ("EINVAL", "Invalid argument"),
    ("ENFILE", "File table overflow"),
    ("EMFILE", "Too many open files"),
    ("ENOTTY", "Inappropriate ioctl for device"),
    ("ETXTBSY", "Text file busy"),
    ("EFBIG", "File too large"),
    ("ENOSPC", "No space left on device"),
    ("ESPIPE", "Illegal seek"),
    ("EROFS", "Read-only file system"),
    ("EMLINK", "Too many links"),
    ("EPIPE", "Broken pipe"),
    ("EDOM", "Math argument out of domain of func"),
    ("ERANGE", "Math result not representable"),
    ("ENOMSG", "No message of desired type"),
    ("EIDRM", "Identifier removed"),
    ("EDEADLK", "Resource deadlock would occur"),
    ("ENOLCK", "No record locks available"),
    ("ENOSTR", "Device not a stream"),
    ("ENODATA", "No data available"),
    ("ETIME", "Timer expired"),
    ("ENOSR", "Out of streams resources"),
    ("EREMOTE", "Object is remote"),
    ("ENOLINK", "Link has been severed"),
    ("EPROTO", "Protocol error"),
    ("EMULTIHOP", "Multihop attempted"),
    ("EBADMSG", "Not a data message"),
    ("ENOSYS", "Function not implemented"),
    ("ENOTEMPTY", "Directory not empty"),
    ("ENAMETOOLONG", "File name too long"),
    ("ELOOP", "Too many symbolic links encountered"),
    ("EOPNOTSUPP", "Operation not supported on transport endpoint"),
    ("EPFNOSUPPORT", "Protocol family not supported"),
    ("ECONNRESET", "Connection reset by peer"),
    ("ENOBUFS", "No buffer space available"),
    ("EAFNOSUPPORT", "Address family not supported by protocol"),
    ("EPROTOTYPE", "Protocol wrong type for socket"),
    ("ENOTSOCK", "Socket operation on non-socket"),
    ("ENOPROTOOPT", "Protocol not available"),
    ("ESHUTDOWN", "Cannot send after transport endpoint shutdown"),
    ("ECONNREFUSED", "Connection refused"),
    ("EADDRINUSE", "Address already in use"),
    ("ECONNABORTED", "Software caused connection abort"),
    ("ENETUNREACH", "Network is unreachable"),
    ("ENETDOWN", "Network is down"),
    ("ETIMEDOUT", "Connection timed out"),
    ("EHOSTDOWN", "Host is down"),
    ("EHOSTUNREACH", "No route to host"),
    ("EINPROGRESS", "Operation now in progress"),
    ("EALREADY", "Operation already in progress"),
    ("EDESTADDRREQ", "Destination address required"),
    ("EMSGSIZE", "Message too long"),
    ("EPROTONOSUPPORT", "Protocol not supported"),
    ("ESOCKTNOSUPPORT", "Socket type not supported"),
    ("EADDRNOTAVAIL", "Cannot assign requested address"),
    ("ENETRESET", "Network dropped connection because of reset"),
    ("EISCONN", "Transport endpoint is already connected"),
    ("ENOTCONN", "Transport endpoint is not connected"),
    ("ETOOMANYREFS", "Too many references: cannot splice"),
    ("EUSERS", "Too many users"),
    ("EDQUOT", "Quota exceeded"),
    ("ESTALE", "Stale NFS file handle"),
    ("ENOTSUP", "Operation not supported"),
    ("EILSEQ", "Illegal byte sequence"),
    ("EOVERFLOW", "Value too large for defined data type"),
    ("ECANCELED", "Operation Canceled"),
    ("ENOTRECOVERABLE", "State not recoverable"),
    ("EOWNERDEAD", "Owner died"),
)


def _build_table():
    entries = [ErrnoEntry(0, 0, "Success")]
    for name, message in _TABLE_SPEC:
        host = getattr(_errno, name, None)
        if host is None:
            continue
        entries.append(ErrnoEntry(host, int(BionicErrno[name]), message))
    return tuple(entries)


ERRNO_TABLE = _build_table()
_SUCCESS = ERRNO_TABLE[0]


class StrerrorRangeError(OSError):
    """The message did not fit into the requested buffer length."""

    def __init__(self, truncated):
        super().__init__(int(BionicErrno.ERANGE), "Math result not representable")
        self.truncated = truncated


def bionic_errno(host_errno):
    """Translate a host error number into its bionic value.

    Unknown numbers are logged and translate to 0.
    """
    for entry in ERRNO_TABLE:
        if entry.host == host_errno:
            return entry.bionic
    log_print(
        LogType.ERROR,
        "Unexpected newlib errno %i, will return 0 instead of translation",
        host_errno,
    )
    return _SUCCESS.bionic


def _unknown_bionic(error_number):
    log_print(
        LogType.WARN,
        "Unexpected bionic errno %i, will return 'Success' instead of translation",
        error_number,
    )
    return _SUCCESS.message


def strerror(error_number):
    """Return the message for a bionic error number (first table match)."""
    for entry in ERRNO_TABLE:
        if entry.bionic == error_number:
            return entry.message
    return _unknown_bionic(error_number)


def strerror_r(error_number, buf_len):
    """Return the message for a bionic error number (last table match).

    The message must fit into ``buf_len`` bytes including a terminator;
    otherwise StrerrorRangeError is raised carrying the truncated text.
    """
    matches = [entry.message for entry in ERRNO_TABLE if entry.bionic == error_number]
    message = matches[-1] if matches else _unknown_bionic(error_number)
    if len(message) >= buf_len:
        raise StrerrorRangeError(message[: max(buf_len - 1, 0)])
    return message