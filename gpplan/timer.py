"""Wall-clock stopwatch in milliseconds and ANSI terminal colour codes."""

from __future__ import annotations

import time

__all__ = [
    "Timer",
    "ANSI_RED",
    "ANSI_GREEN",
    "ANSI_YELLOW",
    "ANSI_BLUE",
    "ANSI_MAGENTA",
    "ANSI_CYAN",
    "ANSI_RESET",
]

ANSI_RED = "\033[1m\x1b[31m"
ANSI_GREEN = "\033[1m\x1b[32m"
ANSI_YELLOW = "\033[1m\x1b[33m"
ANSI_BLUE = "\033[1m\x1b[34m"
ANSI_MAGENTA = "\033[1m\x1b[35m"
ANSI_CYAN = "\033[1m\x1b[36m"
ANSI_RESET = "\x1b[0m"

_NS_PER_MS = 1e6


class Timer:
    """Stopwatch that starts on creation; times are in milliseconds."""

    def __init__(self, timeout: float = 0.0) -> None:
        self.timeout = timeout
        self._start_ns = 0
        self.start()

    def start(self) -> None:
        """Restart the stopwatch."""
        self._start_ns = time.perf_counter_ns()

    def elapsed_ms(self) -> float:
        """Milliseconds since the last start."""
        return (time.perf_counter_ns() - self._start_ns) / _NS_PER_MS

    def lap_ms(self) -> float:
        """Return milliseconds since the last start and restart."""
        now = time.perf_counter_ns()
        elapsed = (now - self._start_ns) / _NS_PER_MS
        self._start_ns = now
        return elapsed

    def timed_out(self) -> bool:
        """Whether more than ``timeout`` milliseconds have passed."""
        return self.elapsed_ms() > self.timeout