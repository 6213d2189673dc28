"""File and directory helpers in the manner of PHP's filesystem functions."""

from __future__ import annotations

import glob as _glob
import os
import shutil
import tempfile
from datetime import datetime, timezone
from typing import IO

__all__ = [
    "basename",
    "sys_get_temp_dir",
    "chdir",
    "getcwd",
    "chgrp",
    "chmod",
    "chown",
    "copy",
    "delete",
    "dirname",
    "fclose",
    "file_exists",
    "filemtime",
    "glob",
    "is_dir",
    "is_file",
    "is_readable",
    "is_writable",
    "is_writeable",
    "mkdir",
    "realpath",
    "rename",
    "rmdir",
    "stat",
    "unlink",
    "scandir",
    "file_get_contents",
    "file_put_contents",
]

_SEPARATORS = os.sep + (os.altsep or "")
_CHUNK = 64 * 1024


def basename(path: str) -> str:
    """Return the last element of ``path``, ignoring trailing separators.

    An empty path gives ``"."`` and a path of only separators gives one.
    """
    if path == "":
        return "."
    stripped = path.rstrip(_SEPARATORS)
    if stripped == "":
        return os.sep
    return os.path.basename(stripped)


def sys_get_temp_dir() -> str:
    """Return the directory used for temporary files."""
    configured = os.environ.get("TMPDIR")
    if configured:
        return configured
    return tempfile.gettempdir() if os.name == "nt" else "/tmp"


def chdir(path) -> None:
    """Change the working directory."""
    os.chdir(path)


def getcwd() -> str:
    """Return the working directory."""
    return os.getcwd()


def chgrp(name, uid: int, gid: int) -> None:
    """Change the owner and group of a file; -1 leaves one unchanged."""
    chown(name, uid, gid)


def chmod(name, mode: int) -> None:
    """Change the permission bits of a file."""
    os.chmod(name, mode)


def chown(name, uid: int, gid: int) -> None:
    """Change the owner and group of a file; -1 leaves one unchanged."""
    os.chown(name, uid, gid)


def copy(dst, src) -> int:
    """Copy ``src`` over the start of ``dst`` and return the bytes written.

    ``dst`` is created if missing but not truncated, so a longer
    existing file keeps its tail.
    """
    written = 0
    with open(src, "rb") as source:
        descriptor = os.open(dst, os.O_WRONLY | os.O_CREAT, 0o644)
        with os.fdopen(descriptor, "wb") as target:
            while chunk := source.read(_CHUNK):
                target.write(chunk)
                written += len(chunk)
    return written


def delete(name) -> None:
    """Delete a file."""
    unlink(name)


def _sorted_entries(path) -> list[os.DirEntry]:
    with os.scandir(path) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def dirname(path) -> list[os.DirEntry]:
    """List the entries of a directory, sorted by name."""
    return _sorted_entries(path)


def fclose(handle: IO) -> None:
    """Close an open file."""
    handle.close()


def file_exists(path) -> bool:
    """Tell whether a file or directory exists."""
    return os.path.exists(path)


def filemtime(path) -> datetime | None:
    """Return the modification time in local time, or None if it cannot be read."""
    try:
        seconds = os.stat(path).st_mtime
    except OSError:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()


def glob(pattern: str) -> list[str]:
    """Return the paths matching ``pattern``, sorted."""
    return sorted(_glob.glob(pattern))


def is_dir(name) -> bool:
    """Tell whether ``name`` is a directory."""
    return os.path.isdir(name)


def is_file(name) -> bool:
    """Tell whether ``name`` is a regular file."""
    return os.path.isfile(name)


def _can_open(name, flags: int) -> bool:
    try:
        descriptor = os.open(name, flags)
    except OSError:
        return False
    os.close(descriptor)
    return True


def is_readable(name) -> bool:
    """Tell whether ``name`` can be opened for reading."""
    return _can_open(name, os.O_RDONLY)


def is_writable(name) -> bool:
    """Tell whether ``name`` can be opened for writing."""
    return _can_open(name, os.O_WRONLY)


def is_writeable(name) -> bool:
    """Alias of :func:`is_writable`."""
    return is_writable(name)


def mkdir(name, mode: int = 0o777) -> None:
    """Create one directory."""
    os.mkdir(name, mode)


def realpath(path) -> str:
    """Return the absolute, normalised form of ``path``."""
    return os.path.abspath(path)


def rename(old, new) -> None:
    """Rename a file or directory, replacing an existing target."""
    os.replace(old, new)


def rmdir(path) -> None:
    """Remove ``path`` and everything under it; a missing path is not an error."""
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
        return
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def stat(name) -> os.stat_result:
    """Return information about a file."""
    return os.stat(name)


def unlink(name) -> None:
    """Delete a file."""
    os.remove(name)


def scandir(dirname) -> list[os.DirEntry]:
    """List the entries of a directory, sorted by name."""
    return _sorted_entries(dirname)


def file_get_contents(filename) -> bytes:
    """Read a whole file."""
    with open(filename, "rb") as handle:
        return handle.read()


def file_put_contents(filename, data: bytes | str) -> None:
    """Write ``data`` to a file, creating missing parent directories."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    parent = os.path.dirname(filename)
    if parent:
        os.makedirs(parent, mode=0o755, exist_ok=True)
    descriptor = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    with os.fdopen(descriptor, "wb") as handle:
        handle.write(data)