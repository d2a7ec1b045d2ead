# -*- coding: utf-8 -*-
"""
Created on Tue Oct 20 09:14:52 2026

@author: bboyg
"""

import time


class StopWatch:
    """
    Elapsed-time counter.

    clock            : callable returning integer ticks (default: time.perf_counter_ns)
    ticks_per_second : ticks -> seconds conversion (default: 1e9, nanoseconds)

    Elapsed time is never less than one tick, so a dt from reset() is safe
    to divide by.
    """

    def __init__(self, clock=time.perf_counter_ns, ticks_per_second: float = 1e9):
        self.clock = clock
        self.ticks_per_second = float(ticks_per_second)
        self.last = self.clock()

    def _elapsed_ticks(self, now):
        return max(1, now - self.last)

    def reset(self) -> float:
        """Seconds since the last reset; restarts the count."""
        now = self.clock()
        dt = self._elapsed_ticks(now)
        self.last = now
        return dt / self.ticks_per_second

    def get_time(self) -> float:
        """Seconds since the last reset, without restarting."""
        return self._elapsed_ticks(self.clock()) / self.ticks_per_second
