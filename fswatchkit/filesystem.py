"""File system queries: directories, working directory, mount points and remote file systems."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from typing import NamedTuple

_IS_WINDOWS = os.name == "nt"
_IS_LINUX = os.uname().sysname == "Linux" if hasattr(os, "uname") else False

PROC_MOUNTS = "/proc/mounts"

# File system types that live on another machine, or that cannot be watched
# reliably with native notifications.
_REMOTE_FS_TYPES = frozenset(
    {
        "afs",
        "aufs",
        "beegfs",
        "ceph",
        "cifs",
        "coda",
        "fhgfs",
        "fusectl",
        "gfs",
        "gfs2",
        "gpfs",
        "kafs",
        "lustre",
        "ncp",
        "ncpfs",
        "nfs",
        "nfs4",
        "nfsd",
        "ocfs2",
        "panfs",
        "pipefs",
        "smb",
        "smb3",
        "smbfs",
        "snfs",
        "vmhgfs",
        "vxfs",
    }
)
_FUSEBLK = "fuseblk"

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


class _MountEntry(NamedTuple):
    fsname: str
    directory: str
    fstype: str


def _unescape(field: str) -> str:
    return _OCTAL_ESCAPE.sub(lambda match: chr(int(match.group(1), 8)), field)


def _mount_entries(mounts_file: str) -> Iterator[_MountEntry]:
    try:
        with open(mounts_file, encoding="utf-8", errors="surrogateescape") as handle:
            for line in handle:
                fields = line.split()
                if len(fields) < 3 or fields[0].startswith("#"):
                    continue
                yield _MountEntry(_unescape(fields[0]), _unescape(fields[1]), _unescape(fields[2]))
    except OSError:
        return


def os_slash() -> str:
    """Return the path separator used by the operating system."""
    return "\\" if _IS_WINDOWS else "/"


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` exists and is a directory, following symbolic links."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def change_working_directory(path: str | os.PathLike[str]) -> None:
    """Make ``path`` the current working directory; raises OSError on failure."""
    os.chdir(path)


def current_working_directory() -> str:
    """Return the current working directory."""
    return os.getcwd()


def find_mount_point(file: str | os.PathLike[str]) -> str:
    """Return the mount point of the file system holding ``file``.

    Raises OSError when the path or one of its parents cannot be examined.
    """
    path = os.fspath(file)
    if not is_directory(path):
        path = os.path.dirname(path) or "."
    current = os.path.realpath(path)
    last = os.stat(current)
    while True:
        parent = os.path.dirname(current)
        parent_stat = os.stat(parent)
        if parent_stat.st_dev != last.st_dev or parent_stat.st_ino == last.st_ino:
            return current
        current = parent
        last = parent_stat


def find_device_path(directory: str, mounts_file: str = PROC_MOUNTS) -> str | None:
    """Return the device mounted on ``directory`` according to a mount table.

    Returns None when the directory is not a mount point listed there, or
    when the table cannot be read.
    """
    for entry in _mount_entries(mounts_file):
        if entry.directory == directory:
            return entry.fsname
    return None


def _strip_trailing_slash(directory: str) -> str:
    stripped = directory.rstrip("/\\")
    return stripped if stripped else directory


def is_local_fuse_directory(directory: str | os.PathLike[str]) -> bool:
    """Return True if ``directory`` sits on a FUSE mount backed by a known device."""
    try:
        mount_point = find_mount_point(_strip_trailing_slash(os.fspath(directory)))
    except OSError:
        return False
    return bool(find_device_path(mount_point))


def _filesystem_type(directory: str, mounts_file: str = PROC_MOUNTS) -> str | None:
    try:
        mount_point = find_mount_point(directory)
    except OSError:
        return None
    fstype = None
    for entry in _mount_entries(mounts_file):
        if entry.directory == mount_point:
            fstype = entry.fstype
    return fstype


def _is_unc_path(directory: str) -> bool:
    return len(directory) >= 2 and directory[0] in "\\/" and directory[1] in "\\/"


def is_remote_fs(directory: str | os.PathLike[str]) -> bool:
    """Return True if ``directory`` is on a remote or otherwise unwatchable file system."""
    path = os.fspath(directory)
    if _IS_WINDOWS:
        return _is_unc_path(path)
    fstype = _filesystem_type(path)
    if fstype is None:
        return False
    if fstype == _FUSEBLK:
        if _IS_LINUX:
            return not is_local_fuse_directory(path)
        return True
    return fstype in _REMOTE_FS_TYPES