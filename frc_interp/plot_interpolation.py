# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 14:02:18 2026

@author: bboyg
"""

from dataclasses import dataclass
import numpy as np
import matplotlib.pyplot as plt

from reference_point import ReferencePoint
from poly_interpolator import PolyInterpolator
from interval_interpolator import IntervalInterpolator
from linear_interpolator import LinearInterpolator


@dataclass
class Domain:
    min: float
    max: float


def func_series(func, domain: Domain, capacity: int):
    """
    Sample func at `capacity` evenly spaced x values in [min, max).

    x_i = i * (max - min) / capacity + min, so the right end is not included.
    """
    if capacity <= 0:
        raise ValueError("capacity must be > 0")

    xs = np.arange(capacity) * (domain.max - domain.min) / capacity + domain.min
    ys = np.array([func(float(x)) for x in xs], dtype=float)
    return xs, ys


def plot_interpolators(points, interpolators, domain: Domain, capacity: int = 200, ax=None):
    """Plot each interpolator over the domain, with the reference points on top."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)

    for interp in interpolators:
        xs, ys = func_series(interp, domain, capacity)
        ax.plot(xs, ys, label=type(interp).__name__)

    px = [p.x for p in points]
    py = [p.y for p in points]
    ax.plot(px, py, "ko", label="Reference points")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Interpolation of reference points")
    ax.grid(True)
    ax.legend()
    return ax


def main():
    points = (
        ReferencePoint(0.0, 1.0),
        ReferencePoint(1.0, 3.0),
        ReferencePoint(2.0, 7.0),
        ReferencePoint(3.5, 10.0),
    )

    interps = [
        PolyInterpolator(points),
        LinearInterpolator(points),
        IntervalInterpolator(points[0], points[-1]),
    ]

    plot_interpolators(points, interps, Domain(-1.0, 4.5))
    plt.show()


if __name__ == "__main__":
    main()
