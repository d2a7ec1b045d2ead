# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 09:40:05 2026

@author: bboyg
"""

from collections import deque

from stopwatch import StopWatch


class Filter:
    """
    Base class for filters.

    get(x) -> filtered value
    """
    def get(self, x: float) -> float:
        raise NotImplementedError

    def __call__(self, x: float) -> float:
        return self.get(x)


# ------------------------------------------------------------
# Sliding moving average, O(1) per sample
# ------------------------------------------------------------
class MovingAverage(Filter):
    """
    Average of the last `size` samples.

    The window starts full of zeros, so the first outputs ramp up
    from 0 instead of averaging over a short window.
    """

    def __init__(self, size: int):
        size = int(size)
        if size <= 0:
            raise ValueError("size must be > 0")

        self.size = size
        self.reset()

    def reset(self):
        self.values = deque([0.0] * self.size)
        self.total = 0.0

    def get(self, next_value: float) -> float:
        next_value = float(next_value)
        self.values.append(next_value)
        self.total += next_value

        while len(self.values) > self.size:
            self.total -= self.values.popleft()

        return self.total / len(self.values)


# ------------------------------------------------------------
# Drag smoother: v = (v * drag + x) / (drag + 1)
# ------------------------------------------------------------
class NumberDrag(Filter):
    """
    Exponential smoother. drag = 0 passes input straight through,
    bigger drag follows the input more slowly. Negative drag is treated as 0.
    """

    def __init__(self, drag: float):
        self.drag = max(0.0, float(drag))
        self.value = 0.0

    def get(self, x: float) -> float:
        self.value = (self.value * self.drag + float(x)) / (self.drag + 1.0)
        return self.value


# ------------------------------------------------------------
# Boolean filters
# ------------------------------------------------------------
class DebounceRising(Filter):
    """
    Boolean filter that only lets True through once the input has been
    True for longer than debounce_time seconds. False passes straight
    through and restarts the timer.
    """

    def __init__(self, debounce_time: float, timer: StopWatch = None):
        self.debounce_time = float(debounce_time)
        self.timer = timer if timer is not None else StopWatch()

    def get(self, x: bool) -> bool:
        if not x:
            self.timer.reset()
            return False

        return self.debounce_time < self.timer.get_time()


class FilterChain(Filter):
    """
    Runs a value through each filter left -> right.
    """

    def __init__(self, *filters):
        self.filters = tuple(filters)

    def get(self, x: float) -> float:
        for f in self.filters:
            x = f(x)
        return x
