# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 16:05:50 2026

@author: bboyg
"""

import numpy as np
import pandas as pd
from reference_point import points_from_arrays
from calibration import CalibrationTable, InterpolationParams, build_interpolator, points_from_frame
from poly_interpolator import PolyInterpolator
from interval_interpolator import IntervalInterpolator
from linear_interpolator import LinearInterpolator

def test_params_reject_unknown_method():
    try:
        InterpolationParams(method="spline")
        assert False, "Expected ValueError"
    except ValueError:
        assert True

def test_build_interpolator_methods():
    pts = points_from_arrays([2, 0, 1], [7, 1, 3])
    assert isinstance(build_interpolator(pts), PolyInterpolator)
    assert isinstance(build_interpolator(pts, InterpolationParams(method="linear")), LinearInterpolator)

    line = build_interpolator(pts[:2], InterpolationParams(method="interval"))
    assert isinstance(line, IntervalInterpolator)
    # sorted first
    assert line.point1.x == 0.0

    try:
        build_interpolator(pts, InterpolationParams(method="interval"))
        assert False, "Expected ValueError"
    except ValueError:
        assert True

def test_build_interpolator_strict():
    pts = points_from_arrays([0, 1, 1], [0, 1, 2])
    try:
        build_interpolator(pts, InterpolationParams(strict=True))
        assert False, "Expected ValueError"
    except ValueError:
        assert True

def test_points_from_frame_drops_nan():
    df = pd.DataFrame({"raw": [0.0, 1.0, np.nan, 2.0], "units": [1.0, 3.0, 5.0, np.nan]})
    pts = points_from_frame(df, "raw", "units")
    assert len(pts) == 2

    try:
        points_from_frame(df, "raw", "missing")
        assert False, "Expected ValueError"
    except ValueError:
        assert True

def test_calibration_table_roundtrip():
    df = pd.DataFrame({"x": [0.0, 1.0, 2.0], "y": [1.0, 3.0, 7.0]})
    table = CalibrationTable.from_frame(df)

    assert abs(table(3.0) - 13.0) < 1e-9
    assert np.max(np.abs(table.residuals())) < 1e-9

    out = table.to_frame([0.5, 1.5])
    assert list(out.columns) == ["x", "y"]
    assert np.allclose(out["y"].to_numpy(), [0.25 + 0.5 + 1.0, 2.25 + 1.5 + 1.0])
