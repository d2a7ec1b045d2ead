# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 09:25:17 2026

@author: bboyg
"""

import numpy as np

from stream_filters import Filter


class Interpolator(Filter):
    """
    Base class for interpolators.

    evaluate(x) -> y, given the reference points the interpolator was built with.

    Interpolators are filters, so get(x) / calling the object works anywhere
    a filter or a plain float -> float function is expected.
    """
    def evaluate(self, x: float) -> float:
        raise NotImplementedError

    def get(self, x: float) -> float:
        return self.evaluate(x)

    def evaluate_many(self, xs) -> np.ndarray:
        xs = np.asarray(xs, dtype=float)
        out = np.empty_like(xs)
        for idx, x in np.ndenumerate(xs):
            out[idx] = self.evaluate(float(x))
        return out


# ------------------------------------------------------------
# Helpers on reference point sequences
# ------------------------------------------------------------
def lower_bound_index(x: float, points) -> int:
    """
    Index of the rightmost point with point.x <= x, or -1 if x is below
    every point. Assumes points are sorted by x (not checked).
    """
    for i, p in enumerate(points):
        if p.x > x:
            return i - 1
    return len(points) - 1


def sorted_points(points):
    """
    New tuple of points sorted by x, smallest first. Input is left alone.
    """
    return tuple(sorted(points, key=lambda p: p.x))


def find_duplicate_x(points):
    """
    First x value shared by two points, or None.
    """
    seen = set()
    for p in points:
        if p.x in seen:
            return p.x
        seen.add(p.x)
    return None


def check_distinct_x(points, name: str):
    dup = find_duplicate_x(points)
    if dup is not None:
        raise ValueError(f"{name} got more than one reference point at x = {dup}.")
