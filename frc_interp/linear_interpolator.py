# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 11:05:44 2026

@author: bboyg
"""

import numpy as np

from interpolation import Interpolator, check_distinct_x, lower_bound_index, sorted_points
from interval_interpolator import IntervalInterpolator


class LinearInterpolator(Interpolator):
    """
    Piecewise-linear interpolation through N reference points.

    Points are sorted by x, and each neighbouring pair gets its own
    IntervalInterpolator. Below the first point / above the last point the
    end segments are extended (extrapolation), not clamped.

    strict=False with a repeated first/last x leaves a zero width end
    segment, so evaluate() is inf/nan from that knot outward.
    """

    def __init__(self, points, strict: bool = False):
        points = sorted_points(points)

        if len(points) <= 1:
            raise ValueError("LinearInterpolator needs at least 2 or more points")

        if strict:
            check_distinct_x(points, "LinearInterpolator")

        self.points = points
        self.strict = strict
        self.segments = tuple(
            IntervalInterpolator(p1, p2) for p1, p2 in zip(points[:-1], points[1:])
        )

    def segment_index(self, x: float) -> int:
        i = lower_bound_index(x, self.points)
        return int(np.clip(i, 0, len(self.segments) - 1))

    def evaluate(self, x: float) -> float:
        return self.segments[self.segment_index(x)].evaluate(x)
