"""Status line configuration: which components to show and how to join them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from . import system
from .util import warn

# Interval between updates, in milliseconds.
INTERVAL = 1000

# Text shown for a component that cannot produce a value.
UNKNOWN_STR = "n/a"

# Maximum length of the status line in bytes, terminator included.
MAXLEN = 2048


@dataclass(frozen=True)
class Arg:
    """One component of the status line.

    ``func`` is called with ``args``, or with no argument when ``args`` is
    None so that the component falls back to its own default. Its result is
    substituted into the printf-style ``fmt``.
    """

    func: Callable[..., str | None]
    fmt: str = "%s"
    args: str | None = None

    def value(self) -> str | None:
        """Return what the component reports right now."""
        if self.args is None:
            return self.func()
        return self.func(self.args)


ARGS: tuple[Arg, ...] = (Arg(system.datetime, "%s", " %F | %l:%M"),)


def render_status(
    args: Iterable[Arg] = ARGS,
    unknown: str = UNKNOWN_STR,
    maxlen: int = MAXLEN,
) -> str:
    """Build the status line from ``args``.

    A component that reports None is shown as ``unknown``. Rendering stops,
    with a warning, at the first component that does not fit in ``maxlen``
    bytes (one byte is kept for the terminator) or whose format is invalid.
    """
    parts: list[str] = []
    length = 0
    for arg in args:
        result = arg.value()
        if result is None:
            result = unknown
        try:
            text = arg.fmt % (result,)
        except (TypeError, ValueError) as exc:
            warn(f"vsnprintf: {exc}")
            break
        size = len(text.encode("utf-8"))
        if length + size >= maxlen:
            warn("vsnprintf: Output truncated")
            break
        parts.append(text)
        length += size
    return "".join(parts)