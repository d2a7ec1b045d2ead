# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 14:40:57 2026

@author: bboyg
"""

import numpy as np
import pandas as pd

from calibration import CalibrationTable, InterpolationParams
from stream_filters import FilterChain, MovingAverage


def main():
    # =========================
    # 1) Calibration data (raw -> units)
    # =========================
    # y = x^2 + x + 1 sampled at 3 points
    df_cal = pd.DataFrame({
        "raw": [0.0, 1.0, 2.0],
        "units": [1.0, 3.0, 7.0],
    })

    # =========================
    # 2) One table per method
    # =========================
    tables = {
        "poly": CalibrationTable.from_frame(df_cal, "raw", "units",
                                            InterpolationParams(method="poly")),
        "linear": CalibrationTable.from_frame(df_cal, "raw", "units",
                                              InterpolationParams(method="linear")),
        "interval": CalibrationTable.from_frame(df_cal.iloc[[0, 2]], "raw", "units",
                                                InterpolationParams(method="interval")),
    }

    # =========================
    # 3) Evaluate
    # =========================
    xs = np.array([-1.0, 0.5, 1.5, 3.0])
    out_df = pd.DataFrame({"x": xs})
    for name, table in tables.items():
        out_df[name] = table.interpolator.evaluate_many(xs)

    print(out_df.to_string(index=False))

    for name, table in tables.items():
        print(f"{name:>8s} max |residual|: {np.max(np.abs(table.residuals())):.3e}")

    # =========================
    # 4) Smoothed noisy readings through the poly table
    # =========================
    rng = np.random.default_rng(0)
    raw = 1.5 + rng.normal(0, 0.05, size=20)

    smooth = FilterChain(MovingAverage(5), tables["poly"].interpolator)
    vals = [smooth(r) for r in raw]
    print("Last smoothed value:", round(vals[-1], 4), "(true:", 1.5**2 + 1.5 + 1, ")")


if __name__ == "__main__":
    main()
