"""Command line entry point: render the status line periodically."""

from __future__ import annotations

import signal
import sys
import threading
import time
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from . import config
from .config import Arg, render_status

PROG = "slbar"
VERSION = "1.0"
USAGE = f"usage: {PROG} [-v] [-s] [-1]"


class FatalError(Exception):
    """An error that ends the program with exit status 1."""


class UsageError(FatalError):
    """The command line could not be understood."""

    def __init__(self) -> None:
        super().__init__(USAGE)


@dataclass(frozen=True)
class Options:
    """Parsed command line options."""

    stdout: bool = False
    once: bool = False
    version: bool = False


def parse_args(argv: Iterable[str]) -> Options:
    """Parse the arguments that follow the program name."""
    remaining = list(argv)
    stdout = once = False
    while remaining and remaining[0].startswith("-") and len(remaining[0]) > 1:
        arg = remaining.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                return Options(stdout=stdout, once=once, version=True)
            if flag == "1":
                once = True
                stdout = True
            elif flag == "s":
                stdout = True
            else:
                raise UsageError()
    if remaining:
        raise UsageError()
    return Options(stdout=stdout, once=once)


class _LoopState:
    def __init__(self, done: bool) -> None:
        self.done = done
        self.wake = threading.Event()

    def handle(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        self.wake.set()


@contextmanager
def _signal_handlers(state: _LoopState) -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    signals = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    previous = {signo: signal.signal(signo, state.handle) for signo in signals}
    try:
        yield
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler if handler is not None else signal.SIG_DFL)


def run(
    options: Options,
    args: Iterable[Arg] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the status line to ``stream`` every interval until told to stop.

    SIGINT and SIGTERM end the loop after the current line; SIGUSR1 forces an
    immediate update.
    """
    if not options.stdout:
        raise FatalError("XOpenDisplay: Failed to open display")
    components = tuple(config.ARGS if args is None else args)
    out = sys.stdout if stream is None else stream
    state = _LoopState(done=options.once)
    interval = config.INTERVAL / 1000

    with _signal_handlers(state):
        while True:
            start = time.monotonic()
            status = render_status(components, config.UNKNOWN_STR, config.MAXLEN)
            try:
                out.write(status + "\n")
                out.flush()
            except OSError as exc:
                raise FatalError(f"puts: {exc.strerror or exc}") from exc

            if state.done:
                break
            wait = interval - (time.monotonic() - start)
            if wait > 0:
                state.wake.clear()
                state.wake.wait(wait)
            if state.done:
                break


def main(argv: list[str] | None = None) -> int:
    """Run the program and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
        if options.version:
            raise FatalError(f"{PROG}-{VERSION}")
        run(options)
    except FatalError as exc:
        sys.stderr.write(f"{exc}\n")
        sys.stderr.flush()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())