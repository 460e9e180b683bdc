# -*- coding: utf-8 -*-
"""
Created on Wed Jan 14 17:52:42 2026

@author: bboyg
"""

import numpy as np
import pandas as pd

from scan_params import ScanParams, MotorRange, MotorPosition, CameraFov
from hemisphere_scan import HemisphereScanner
from scan_order import toroidal_distance
from utils_frames import steps_to_rad


def reference_params() -> ScanParams:
    # 800 x 800 step pan/tilt head, 34.16 x 25.72 deg camera, start at center
    return ScanParams(
        motor_range=MotorRange(h=800, v=800),
        fov=CameraFov(h_deg=34.16, v_deg=25.72),
        initial_position=MotorPosition(h=0, v=0),
        dwell_s=1.0
    )


def run_hemisphere_scan(params: ScanParams, n_steps=100) -> pd.DataFrame:
    """
    Walks a HemisphereScanner n_steps times.

    Returns one row per visited position, starting with the initial one:
        step, t, index, h, v, az_rad, el_rad, ring, jump_steps
    """
    scanner = HemisphereScanner.from_params(params)
    rng = params.motor_range

    # Ring number of each tilt value, lowest elevation = 0
    ring_of = {v: i for i, v in enumerate(sorted({p.v for p in scanner.positions}))}

    rows = []
    prev = None
    for k in range(n_steps + 1):
        if k > 0 and not scanner.advance():
            break

        pos = scanner.current()
        jump = toroidal_distance(prev, pos, rng.h) if prev is not None else 0.0

        rows.append({
            "step": k,
            "t": k * params.dwell_s,
            "index": scanner.index,
            "h": pos.h,
            "v": pos.v,
            "az_rad": steps_to_rad(pos.h, rng.h),
            "el_rad": steps_to_rad(pos.v, rng.v),
            "ring": ring_of[pos.v],
            "jump_steps": jump
        })
        prev = pos

    return pd.DataFrame(rows)


def scan_summary(df: pd.DataFrame) -> dict:
    """
    Headline numbers for a run_hemisphere_scan() output.
    """
    if df.empty:
        return {"visited": 0, "unique_positions": 0, "rings": 0, "max_jump_steps": np.nan}

    return {
        "visited": int(len(df)),
        "unique_positions": int(df[["h", "v"]].drop_duplicates().shape[0]),
        "rings": int(df["ring"].nunique()),
        "max_jump_steps": float(df["jump_steps"].max())
    }
