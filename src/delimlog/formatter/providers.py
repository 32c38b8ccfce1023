"""
Default clock and random source for the record formatter.
"""

import random
import threading
import time

from delimlog.domain.services import Clock, RandomSource

__all__ = ["SystemClock", "ThreadLocalRandomSource"]


class SystemClock(Clock):
    """Wall-clock time read from the operating system on every call."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000


class ThreadLocalRandomSource(RandomSource):
    """
    Random source holding one generator per thread.

    Formatter instances running on different threads never contend
    on a shared generator.
    """

    def __init__(self, seed: int | None = None):
        """
        Initialize the random source.

        Args:
            seed: Optional seed applied to each thread's generator
        """
        self._seed = seed
        self._local = threading.local()

    def _generator(self) -> random.Random:
        generator = getattr(self._local, "generator", None)
        if generator is None:
            generator = random.Random(self._seed)
            self._local.generator = generator
        return generator

    def next_int(self, bound: int) -> int:
        return self._generator().randrange(bound)
