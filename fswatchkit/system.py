"""Process level helpers: sleeping, locating the executable and file descriptor limits."""

from __future__ import annotations

import os
import sys
import threading
import time

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

# Number of directory reads a single thread handles where descriptors are not limited.
_WINDOWS_MAX_FD = 60

_lock = threading.Lock()
_fd_raised = False
_max_fd_cache: int | None = None


def sleep(ms: float) -> None:
    """Block the current thread for the given number of milliseconds."""
    if ms < 0:
        raise ValueError("sleep time must not be negative")
    time.sleep(ms / 1000.0)


def process_path() -> str:
    """Return the directory of the running executable, ending with a separator."""
    executable = sys.executable
    if not executable:
        return "." + os.sep
    directory = os.path.dirname(os.path.realpath(executable))
    if not directory:
        return "." + os.sep
    return directory.rstrip(os.sep) + os.sep


def _normalise_limit(value: int) -> int:
    if resource is not None and value == resource.RLIM_INFINITY:
        return sys.maxsize
    return value


def raise_fd_limit() -> int:
    """Raise the soft open-file limit to the hard limit, once per process.

    Returns the soft limit in effect afterwards.
    """
    global _fd_raised
    if resource is None:
        return _WINDOWS_MAX_FD
    with _lock:
        soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
        if not _fd_raised:
            try:
                resource.setrlimit(resource.RLIMIT_NOFILE, (hard, hard))
            except (ValueError, OSError):
                pass
            _fd_raised = True
            soft, _ = resource.getrlimit(resource.RLIMIT_NOFILE)
        return _normalise_limit(soft)


def max_fd() -> int:
    """Return the open-file limit, read once and then remembered."""
    global _max_fd_cache
    if resource is None:
        return _WINDOWS_MAX_FD
    with _lock:
        if _max_fd_cache is None:
            soft, _ = resource.getrlimit(resource.RLIMIT_NOFILE)
            _max_fd_cache = _normalise_limit(soft)
        return _max_fd_cache