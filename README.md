# fswatchkit

Building blocks for file system watchers. The package has no dependencies
beyond the standard library.

## Modules

- `fswatchkit.definitions`
  - `Action`: `ADD`, `DELETE`, `MODIFIED`, `MOVED`.
  - `Error`: `NO_ERROR`, `FILE_NOT_FOUND`, `FILE_REPEATED`, `FILE_OUT_OF_SCOPE`,
    `FILE_NOT_READABLE`, `FILE_REMOTE`, `WATCHER_FAILED`, `UNSPECIFIED`.
  - `Option`: `WIN_BUFFER_SIZE`, `WIN_NOTIFY_FILTER`, `MAC_MODIFIED_FILTER`,
    `MAC_SANITIZE_EVENTS`, `LINUX_PRODUCE_SYNTHETIC_EVENTS`.
  - `WatcherOption(option, value)`: a frozen pair of an `Option` and an integer value.
  - `WatchError(error, message="")`: an exception carrying an `Error` code.
  - `ErrorLog`: a thread-safe record of the last error, with `create_last_error()`,
    `last_error_code()`, `last_error_log()` and `clear_last_error()`.
- `fswatchkit.system`
  - `sleep(ms)`: block the current thread for a number of milliseconds.
  - `process_path()`: directory of the running interpreter, ending with a separator.
  - `raise_fd_limit()`: raise the soft open-file limit to the hard limit (once per
    process) and return the limit in effect; returns 60 where `resource` is unavailable.
  - `max_fd()`: the open-file limit, read once and remembered.
- `fswatchkit.utf8`, `fswatchkit.utf16`, `fswatchkit.utf32`: decode and encode single
  code points and convert whole sequences between UTF-8 bytes, UTF-16 code units,
  lists of code points, Latin-1 bytes and Python strings. Invalid characters are
  written as a replacement value, or skipped when the replacement is 0 or empty.
- `fswatchkit.filesystem`
  - `os_slash()`, `is_directory(path)`, `change_working_directory(path)`,
    `current_working_directory()`.
  - `find_mount_point(file)`: mount point of the file system holding a path.
  - `find_device_path(directory, mounts_file="/proc/mounts")`: device mounted on a
    directory according to a mount table, or `None`.
  - `is_local_fuse_directory(directory)`: whether a FUSE mount is backed by a listed device.
  - `is_remote_fs(directory)`: on Windows, true for UNC paths; elsewhere, looks up the
    file system type in `/proc/mounts` and checks it against known network and
    unwatchable types.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Examples

Record and read back an error:

    from fswatchkit.definitions import Error, ErrorLog

    log = ErrorLog()
    log.create_last_error(Error.FILE_NOT_FOUND, "/missing/dir")
    log.last_error_code()   # Error.FILE_NOT_FOUND
    log.last_error_log()    # "/missing/dir"
    log.clear_last_error()

Walk a UTF-8 byte string one code point at a time:

    from fswatchkit import utf8

    data = "héllo".encode("utf-8")
    utf8.count(data)        # 5
    utf8.to_utf32(data)     # [104, 233, 108, 108, 111]

Convert between encodings:

    from fswatchkit import utf16, utf32

    units = utf16.from_utf8("😀".encode("utf-8"))   # [0xD83D, 0xDE00]
    utf32.from_utf16(units)                          # [0x1F600]

Check a directory before watching it:

    from fswatchkit import filesystem

    if filesystem.is_directory("/tmp") and not filesystem.is_remote_fs("/tmp"):
        ...

## What this package does not do

It does not watch anything. There is no watcher object, no background thread,
no listener callbacks and no command-line program: the package provides the
definitions, encoding helpers and file system queries that such a watcher
would be built on.