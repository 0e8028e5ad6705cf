"""RAM and swap components backed by /proc/meminfo."""

from __future__ import annotations

from .util import fmt_human, read_text

MEMINFO = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each field of a meminfo listing to its value in kB."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path: str, *names: str) -> tuple[int, ...] | None:
    text = read_text(path)
    if text is None:
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def _percent(part: int, whole: int) -> int:
    quotient = abs(100 * part) // abs(whole)
    return quotient if (part < 0) == (whole < 0) else -quotient


def ram_free(path: str = MEMINFO) -> str | None:
    """Return the memory available for new processes."""
    values = _fields(path, "MemAvailable")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(path: str = MEMINFO) -> str | None:
    """Return the share of memory in use, buffers and cache excluded."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(_percent((total - free) - (buffers + cached), total))


def ram_total(path: str = MEMINFO) -> str | None:
    """Return the total amount of memory."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(path: str = MEMINFO) -> str | None:
    """Return the memory in use, buffers and cache excluded."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(path: str = MEMINFO) -> str | None:
    """Return the unused swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(path: str = MEMINFO) -> str | None:
    """Return the share of swap in use, swap cache excluded."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_percent(total - free - cached, total))


def swap_total(path: str = MEMINFO) -> str | None:
    """Return the total swap space."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(path: str = MEMINFO) -> str | None:
    """Return the swap space in use, swap cache excluded."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)