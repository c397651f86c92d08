"""Frame-stamped console logging.

Every line carries the seconds since startup and the render frame number:

    [  1.234s F000075] [GRADIENT] Active #3 -> (200, 40, 40) / (240, 140, 140)

Modules log through the module-level ``log`` with a bracketed tag prefix.
Set GRADIENT_CAROUSEL_QUIET=1 to silence output (the test suite does).
"""

from __future__ import annotations
import os
import sys
import time
from typing import Optional, TextIO

QUIET_ENV = "GRADIENT_CAROUSEL_QUIET"


class Logger:
    """Writes timestamped lines to a stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None, enabled: bool = True):
        self.stream = stream
        self.enabled = enabled
        self._t0 = time.perf_counter()
        self._frame = 0

    @property
    def frame(self) -> int:
        return self._frame

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self._t0

    def format(self, msg: str) -> str:
        return f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"

    def log(self, msg: str) -> None:
        if not self.enabled:
            return
        line = self.format(msg)
        out = self.stream or sys.stdout
        try:
            out.write(line)
            out.flush()
        except (OSError, ValueError):
            # Closed or detached stdout at interpreter shutdown
            try:
                sys.stderr.write(line)
            except (OSError, ValueError):
                pass

    def __call__(self, msg: str) -> None:
        self.log(msg)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """The process-wide logger, created on first use."""
    global _logger
    if _logger is None:
        _logger = Logger(enabled=os.environ.get(QUIET_ENV, "") in ("", "0"))
    return _logger


def log(msg: str) -> None:
    get_logger().log(msg)


def get_frame() -> int:
    return get_logger().frame


def increment_frame() -> None:
    get_logger().increment_frame()


def now() -> float:
    """Monotonic clock in seconds; the timebase for every tick and input event."""
    return time.perf_counter()
