"""
Logical Clock — the monotonically increasing counter deadlines are measured in.

The hosting environment owns the clock; the registry only reads it.
"""

import time


class LogicalClock:
    """Base clock. Subclasses return a non-decreasing integer from now()."""

    def now(self) -> int:
        raise NotImplementedError


class ManualClock(LogicalClock):
    """Clock advanced explicitly by the host (block height, tick counter, tests)."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError("Clock cannot start below zero")
        self._value = start

    def now(self) -> int:
        return self._value

    def advance(self, steps: int = 1) -> int:
        """Move the clock forward and return the new value."""
        if steps < 0:
            raise ValueError("Logical clock cannot move backwards")
        self._value += steps
        return self._value


class MonotonicClock(LogicalClock):
    """Whole seconds elapsed on the process monotonic clock, plus an offset."""

    def __init__(self, start: int = 0):
        self._start = start
        self._origin = time.monotonic()

    def now(self) -> int:
        return self._start + int(time.monotonic() - self._origin)
