"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import os
import re
import sys

BUFFER_SIZE = 1024

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def warn(message: str) -> None:
    """Write a diagnostic line to standard error."""
    sys.stderr.write(f"{message}\n")
    sys.stderr.flush()


def warn_os(prefix: str, exc: OSError) -> None:
    """Write a diagnostic line describing a failed system call."""
    reason = exc.strerror or str(exc)
    warn(f"{prefix}: {reason}")


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` and append an SI (1000) or IEC (1024) prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str | os.PathLike[str]) -> str | None:
    """Return the whole content of a file, or None after a warning if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn_os(f"fopen '{os.fspath(path)}'", exc)
        return None


def read_int(path: str | os.PathLike[str]) -> int | None:
    """Return the integer at the start of a file, or None if there is none."""
    text = read_text(path)
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))