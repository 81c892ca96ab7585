# soloader

A small library of helpers for the runtime conventions that Android-style
native code expects: bionic error numbers and messages, Android log
priorities, the bionic `ctype` tables, time conversion that stays correct
far beyond 2038, fixed EGL query answers for a 960x544 display, an asset
manager rooted in a data directory, and `stat`/`dirent` records in the
bionic layout. It has no dependencies outside the standard library.

## Install

```
pip install .
pip install ".[test]"   # adds pytest for the test suite
```

## Modules

- `soloader.logger` – `LogType` and `format_line(log_type, message)`, which
  builds a coloured line with a per-level marker; `log_print(log_type, fmt,
  *args)` writes `fmt % args` to stdout and returns the line, or returns
  `None` and writes nothing for an unknown type.
- `soloader.errno_map` – `BionicErrno`, the `ErrnoEntry` table rows,
  `bionic_errno(host_errno)` (unknown numbers give 0), `strerror(n)`
  (unknown numbers give `"Success"`) and `strerror_r(n, buf_len)`, which
  raises `StrerrorRangeError` carrying the truncated text when the message
  does not fit.
- `soloader.android_log` – `LogPriority`, `android_log_write`,
  `android_log_print`, and `android_log_assert`, which logs the failure as
  fatal and raises `AndroidAssertionError`.
- `soloader.utils` – `current_timestamp_ms`, file helpers (`file_exists`,
  `file_load`, `file_save`, `file_copy`, `file_mkpath`, `file_size`,
  `file_sha1sum`, `is_dir`) and string helpers (`str_replace`,
  `str_remove`, `str_starts_with`, `str_ends_with`, `str_sha1sum`, which
  returns upper-case hex). `file_load` raises `FileNotFoundError` for a
  missing file and `ValueError` for an empty one.
- `soloader.settings` – the `Settings` dataclass (`sample_setting`,
  `sample_setting2`) with `Settings.load(path)`, `save(path)` and `reset()`.
  The file holds `name value` lines; a missing file gives the defaults.
- `soloader.time64` – `Tm`, `timegm64`, `gmtime64`, `safe_year`, `is_leap`.
  `gmtime64` raises `OverflowError` when the year does not fit a 32-bit
  `tm_year`.
- `soloader.localtime64` – `mktime64`, `timelocal64`, `localtime64`,
  `asctime64`, `ctime64`. Years outside 1971..2037 are mapped onto an
  equivalent year for the host conversion. `asctime64` raises `ValueError`
  for an out-of-range weekday or month or a year beyond 9999.
- `soloader.ctype` – `CtypeFlag`, `classify`, `to_lower`, `to_upper`; each
  takes a byte value, a one-character string, or `EOF` (-1).
- `soloader.egl` – `initialize`, `query_context`, `query_surface`,
  `get_config_attrib`, `query_string`, `choose_config`, `get_configs`,
  `create_context`, `create_window_surface`. Unknown attributes raise
  `EglError`; handles are opaque, distinct objects.
- `soloader.system` – `ClockId`, `clock_gettime` and `clock_getres`
  (returning `(tv_sec, tv_nsec)` pairs at microsecond resolution),
  `AtomicInt` with `inc`, `dec`, `swap` and `cmpxchg`,
  `system_property_get` (always `"psvita"`) and `getpagesize` (4096).
- `soloader.assets` – `AssetMode`; `AssetManager(data_path).open(name)`
  opens `<data_path>/assets/<name>` and returns an `Asset` with `read`,
  `seek`, `length`, `remaining_length` and `close`; it is also a context
  manager.
- `soloader.io_compat` – `BionicOpenFlag`, `oflags_bionic_to_host`,
  `redirect_path` (maps `/proc/cpuinfo` and `/proc/meminfo` to `app0:/`
  copies), `fopen`, `open_fd`, `stat`, `fstat`, `readdir` (a generator of
  `BionicDirent`), `stat_to_bionic`, `dirent_to_bionic`, `BionicStat`,
  `DirentType`, and `mmap(length)`, which returns a zero-filled
  `bytearray`. `BionicDirent.pack()` gives the packed little-endian record.

## Example

```python
from soloader.errno_map import strerror
from soloader.time64 import gmtime64
from soloader.localtime64 import asctime64

print(strerror(2))                   # No such file or directory
print(asctime64(gmtime64(2**33)))    # a date in the year 2242
```

## What it does not do

This is a library only: it has no command-line program. It does not load or
relocate shared objects, draw anything or talk to a GPU (the EGL module
only answers queries with fixed values), show dialogs, or wrap threads,
mutexes and semaphores.

## Tests

```
pytest
```