# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 10:02:51 2026

@author: bboyg
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from interpolation import Interpolator, check_distinct_x


@dataclass(frozen=True)
class PartialPolynomial:
    """
    One Lagrange basis term:

        L_i(x) = coefficient * (x - zeros[0]) * (x - zeros[1]) * ...

    zeros are the x-coordinates of every OTHER reference point.
    """
    coefficient: float
    zeros: Tuple[float, ...]

    def evaluate(self, x: float) -> float:
        out = np.float64(self.coefficient)
        for zero in self.zeros:
            out *= (x - zero)
        return out


def partial_polynomial(index: int, points) -> PartialPolynomial:
    """
    Partial polynomial for points[index].

    a = y_i / prod_{j != i} (x_i - x_j), accumulated by repeated division.
    Other points are skipped by position, so an identical point elsewhere in
    the list still counts as "other".
    """
    target = points[index]

    # float64 so a duplicate x gives inf/nan instead of ZeroDivisionError
    a = np.float64(target.y)
    zeros = []

    for j, p in enumerate(points):
        if j == index:
            continue
        a /= np.float64(target.x - p.x)
        zeros.append(p.x)

    return PartialPolynomial(float(a), tuple(zeros))


class PolyInterpolator(Interpolator):
    """
    Lagrange polynomial interpolation.

    P(x) = L_0(x) + L_1(x) + ... + L_{n-1}(x)

    P has degree n-1 and passes through every reference point. Evaluating
    outside the points is allowed (the polynomial just extends), but for many
    points the result can swing wildly near the ends (Runge).

    strict=False : duplicate x values are not checked; the result goes inf/nan
    strict=True  : duplicate x values raise ValueError here
    """

    def __init__(self, points, strict: bool = False):
        points = tuple(points)

        if len(points) <= 1:
            raise ValueError("PolyInterpolator needs at least 2 or more points")

        if strict:
            check_distinct_x(points, "PolyInterpolator")

        self.points = points
        self.strict = strict

        with np.errstate(divide="ignore", invalid="ignore"):
            self.partials = tuple(partial_polynomial(i, points) for i in range(len(points)))

    @property
    def degree(self) -> int:
        return len(self.points) - 1

    def evaluate(self, x: float) -> float:
        total = np.float64(0.0)
        with np.errstate(over="ignore", invalid="ignore"):
            for partial in self.partials:
                total += partial.evaluate(x)
        return float(total)
