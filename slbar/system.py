"""Components that report on the running system and the current user."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import sys
import time

from .util import BUFFER_SIZE, read_int, warn, warn_os

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
INFINITY = "\u221e"

_MAX_LINE = BUFFER_SIZE - 2


def datetime(fmt: str) -> str | None:
    """Return the local time formatted with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def entropy(path: str | None = None) -> str | None:
    """Return the kernel's available entropy, or infinity on the BSDs."""
    if path is None:
        if sys.platform.startswith(("openbsd", "freebsd")):
            return INFINITY
        path = ENTROPY_AVAIL
    value = read_int(path)
    return None if value is None else str(value)


def hostname(unused: object = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn_os("gethostname", exc)
        return None


def kernel_release(unused: object = None) -> str | None:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn_os("uname", exc)
        return None


def load_avg(unused: object = None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: float) -> str:
    """Format a number of seconds as hours and minutes."""
    whole = int(seconds)
    hours, rest = divmod(whole, 3600)
    return f"{hours}h {rest // 60}m"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return time.CLOCK_MONOTONIC


def uptime(unused: object = None) -> str | None:
    """Return the system uptime as hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = time.clock_gettime(clock)
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return format_uptime(seconds)


def gid(unused: object = None) -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid(unused: object = None) -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username(unused: object = None) -> str | None:
    """Return the login name belonging to the effective user id."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': No such user")
        return None


def temp(file: str) -> str | None:
    """Return the temperature in whole degrees Celsius from a millidegree file."""
    value = read_int(file)
    return None if value is None else str(value // 1000)


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line it prints."""
    try:
        process = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError as exc:
        warn_os(f"popen '{cmd}'", exc)
        return None

    assert process.stdout is not None
    with process.stdout as stream:
        raw = stream.readline(_MAX_LINE)
    process.wait()

    line = raw.decode("utf-8", errors="replace")
    head, newline, _ = line.rpartition("\n")
    if newline:
        line = head
    return line or None