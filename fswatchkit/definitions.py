"""Core types shared by the file watcher: actions, error codes, options and the error log."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum


class Action(IntEnum):
    """Kind of change reported for a file or directory.

    A rename is reported as a deletion of the old name followed by the
    creation of the new one, unless the backend can report a move.
    """

    ADD = 1
    DELETE = 2
    MODIFIED = 3
    MOVED = 4


class Error(IntEnum):
    """Error codes a watch request can fail with."""

    NO_ERROR = 0
    FILE_NOT_FOUND = -1
    FILE_REPEATED = -2
    FILE_OUT_OF_SCOPE = -3
    FILE_NOT_READABLE = -4
    # The directory lives on a remote file system; use a generic watcher for it.
    FILE_REMOTE = -5
    WATCHER_FAILED = -6
    UNSPECIFIED = -7


class Option(IntEnum):
    """Optional, mostly platform specific, watcher settings."""

    WIN_BUFFER_SIZE = 1
    WIN_NOTIFY_FILTER = 2
    MAC_MODIFIED_FILTER = 3
    MAC_SANITIZE_EVENTS = 4
    LINUX_PRODUCE_SYNTHETIC_EVENTS = 5


@dataclass(frozen=True)
class WatcherOption:
    """A single option and the value it is set to."""

    option: Option
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "option", Option(self.option))
        object.__setattr__(self, "value", int(self.value))


class WatchError(Exception):
    """Raised when a directory cannot be watched."""

    def __init__(self, error: Error, message: str = "") -> None:
        self.error = Error(error)
        self.message = message
        super().__init__(f"{self.error.name}: {message}" if message else self.error.name)


class ErrorLog:
    """Keeps the last error that occurred, safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._code = Error.NO_ERROR
        self._log = ""

    def last_error_log(self) -> str:
        """Return the message of the last error logged."""
        with self._lock:
            return self._log

    def last_error_code(self) -> Error:
        """Return the code of the last error logged."""
        with self._lock:
            return self._code

    def clear_last_error(self) -> None:
        """Forget the last error."""
        with self._lock:
            self._code = Error.NO_ERROR
            self._log = ""

    def create_last_error(self, error: Error, log: str) -> Error:
        """Record an error and return its code."""
        code = Error(error)
        with self._lock:
            self._code = code
            self._log = log
        return code