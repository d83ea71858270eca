"""Run a task under a terminal spinner and report how long it took."""

from __future__ import annotations

import itertools
import sys
import threading
import time
from typing import Callable

from anchor.styles import LogLevel

_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
_TICK_SECONDS = 0.1
_MESSAGE = "Processing...."


def _format_duration(seconds: float) -> str:
    """Render a duration with two decimals in the largest fitting unit."""
    nanos = round(seconds * 1_000_000_000)
    if nanos >= 1_000_000_000:
        return f"{nanos / 1_000_000_000:.2f}s"
    if nanos >= 1_000_000:
        return f"{nanos / 1_000_000:.2f}ms"
    if nanos >= 1_000:
        return f"{nanos / 1_000:.2f}µs"
    return f"{nanos:.2f}ns"


class _Spinner:
    """A spinner drawn on stderr while a task runs, if stderr is a terminal."""

    def __init__(self) -> None:
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._stream = sys.stderr

    def _run(self) -> None:
        for frame in itertools.cycle(_FRAMES):
            self._stream.write(f"\r{frame} {_MESSAGE}")
            self._stream.flush()
            if self._stop.wait(_TICK_SECONDS):
                break
        self._stream.write("\r\x1b[2K")
        self._stream.flush()

    def __enter__(self) -> "_Spinner":
        isatty = getattr(self._stream, "isatty", None)
        if isatty is not None and isatty():
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()


def cal_time(func: Callable[[], str]) -> str:
    """Run func under a spinner, print its result and the elapsed time.

    Returns the string func produced.
    """
    with _Spinner():
        start = time.perf_counter()
        result = func()
        elapsed = time.perf_counter() - start
    print(result)
    print(f"{LogLevel.SUCCESS.fmt()} Finished in {_format_duration(elapsed)}")
    return result