# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 09:12:40 2026

@author: bboyg
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class ReferencePoint:
    """
    Known (x, y) pair used to fit an interpolation function.

    x : input value (e.g. raw sensor reading)
    y : output value (e.g. calibrated units)
    """
    x: float
    y: float

    def __post_init__(self):
        # frozen dataclass -> go through object.__setattr__
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @staticmethod
    def from_array(arr):
        """
        Build a point from a length-2 sequence / array [x, y].
        """
        arr = np.asarray(arr, dtype=float)
        if arr.shape != (2,):
            raise ValueError(f"Reference point needs exactly 2 values, got shape {arr.shape}.")
        return ReferencePoint(arr[0], arr[1])

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


def points_from_arrays(xs, ys):
    """
    Zip matching x / y arrays into a tuple of ReferencePoint.
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)

    if xs.ndim != 1 or ys.ndim != 1:
        raise ValueError("xs and ys must be 1D.")

    if len(xs) != len(ys):
        raise ValueError(f"xs has {len(xs)} values but ys has {len(ys)}.")

    return tuple(ReferencePoint(x, y) for x, y in zip(xs, ys))


def points_from_pairs(pairs):
    """
    Convert an (N,2) array-like of [x, y] rows into ReferencePoints.
    """
    pairs = np.asarray(pairs, dtype=float)

    # empty input is allowed, strategies decide if it is enough
    if pairs.size == 0:
        return ()

    if pairs.ndim != 2 or pairs.shape[1] != 2:
        raise ValueError(f"pairs must have shape (N, 2), got {pairs.shape}.")

    return tuple(ReferencePoint(x, y) for x, y in pairs)
