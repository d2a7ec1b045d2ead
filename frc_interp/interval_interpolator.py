# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 10:31:09 2026

@author: bboyg
"""

import numpy as np

from interpolation import Interpolator, check_distinct_x


class IntervalInterpolator(Interpolator):
    """
    Straight line through two reference points.

        y = slope * x + intercept

    Points are kept as given; the line is the same whichever comes first.
    With point1.x == point2.x the slope is not finite and every evaluate()
    returns inf/nan unless strict=True, which raises ValueError instead.
    """

    def __init__(self, point1, point2, strict: bool = False):
        if strict:
            check_distinct_x((point1, point2), "IntervalInterpolator")

        self.point1 = point1
        self.point2 = point2
        self.strict = strict

        with np.errstate(divide="ignore", invalid="ignore"):
            run = np.float64(point2.x - point1.x)
            self.slope = np.float64(point2.y - point1.y) / run
            self.intercept = point1.y - self.slope * point1.x  # y = mx + b

    def evaluate(self, x: float) -> float:
        with np.errstate(invalid="ignore"):
            return float(self.slope * x + self.intercept)
