"""Components that look at files, directories and mounted filesystems."""

from __future__ import annotations

import os

from .util import BUFFER_SIZE, fmt_human, warn_os

_MAX_LINE = BUFFER_SIZE - 2


def cat(path: str) -> str | None:
    """Return the first line of a file without its newline, or None if empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_MAX_LINE)
    except OSError as exc:
        warn_os(f"fopen '{path}'", exc)
        return None

    head, newline, _ = line.rpartition("\n")
    if newline:
        line = head
    return line or None


def num_files(path: str) -> str | None:
    """Return the number of entries in a directory, self and parent excluded."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        warn_os(f"opendir '{path}'", exc)
        return None
    return str(count)


def _statvfs(path: str) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError as exc:
        warn_os(f"statvfs '{path}'", exc)
        return None


def disk_free(path: str) -> str | None:
    """Return the space available to unprivileged users on a filesystem."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str | None:
    """Return the used share of a filesystem in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str | None:
    """Return the total size of a filesystem."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str | None:
    """Return the used space on a filesystem."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)