"""
Domain service protocols for delimlog.

The formatter reads two ambient inputs: wall-clock time and a random
draw for sampling. Both are injected through these protocols so tests
can substitute deterministic fakes.
"""

from typing import Protocol, runtime_checkable

__all__ = [
    "Clock",
    "RandomSource",
]


@runtime_checkable
class Clock(Protocol):
    """Provider of the current wall-clock time."""

    def now_millis(self) -> int:
        """
        Current time in milliseconds since the Unix epoch.

        Must be read fresh on every call.
        """
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Provider of uniform random integers for sampling."""

    def next_int(self, bound: int) -> int:
        """
        Draw a uniform random integer.

        Args:
            bound: Exclusive upper bound

        Returns:
            Integer in [0, bound)
        """
        ...
