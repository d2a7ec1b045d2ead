# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 13:20:36 2026

@author: bboyg
"""

from dataclasses import dataclass
import numpy as np
import pandas as pd

from reference_point import points_from_arrays
from interpolation import sorted_points
from poly_interpolator import PolyInterpolator
from interval_interpolator import IntervalInterpolator
from linear_interpolator import LinearInterpolator


METHODS = ("poly", "interval", "linear")


@dataclass
class InterpolationParams:
    """
    Interpolation parameter container.

    method : "poly"     -> Lagrange polynomial through every point
             "interval" -> straight line through exactly 2 points
             "linear"   -> piecewise line through N points
    strict : reject duplicate x values up front (ValueError)
    sort   : sort points by x before fitting ("linear" always sorts)
    """
    method: str = "poly"
    strict: bool = False
    sort: bool = True

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(f"method must be one of {METHODS}, got {self.method!r}.")


def build_interpolator(points, params: InterpolationParams = None):
    if params is None:
        params = InterpolationParams()

    points = tuple(points)
    if params.sort:
        points = sorted_points(points)

    if params.method == "poly":
        return PolyInterpolator(points, strict=params.strict)

    if params.method == "interval":
        if len(points) != 2:
            raise ValueError(f"interval method needs exactly 2 points, got {len(points)}.")
        return IntervalInterpolator(points[0], points[1], strict=params.strict)

    return LinearInterpolator(points, strict=params.strict)


def points_from_frame(df: pd.DataFrame, x_col: str = "x", y_col: str = "y"):
    """
    Reference points from two DataFrame columns. Rows with NaN in either
    column are dropped.
    """
    for col in (x_col, y_col):
        if col not in df.columns:
            raise ValueError(f"DataFrame has no column {col!r}.")

    clean = df[[x_col, y_col]].dropna()
    return points_from_arrays(clean[x_col].to_numpy(), clean[y_col].to_numpy())


class CalibrationTable:
    """
    Reference points plus the interpolator fitted to them.

    Typical use: raw sensor reading -> calibrated value.
    """

    def __init__(self, points, params: InterpolationParams = None):
        self.params = params if params is not None else InterpolationParams()
        self.points = tuple(points)
        self.interpolator = build_interpolator(self.points, self.params)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, x_col: str = "x", y_col: str = "y",
                   params: InterpolationParams = None):
        return cls(points_from_frame(df, x_col, y_col), params)

    def evaluate(self, x: float) -> float:
        return self.interpolator.evaluate(x)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def residuals(self) -> np.ndarray:
        """
        y_i - f(x_i) for every reference point. ~0 for all three methods.
        """
        return np.array([p.y - self.evaluate(p.x) for p in self.points], dtype=float)

    def to_frame(self, xs) -> pd.DataFrame:
        xs = np.asarray(xs, dtype=float)
        return pd.DataFrame({
            "x": xs,
            "y": self.interpolator.evaluate_many(xs),
        })
