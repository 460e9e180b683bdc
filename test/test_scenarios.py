# -*- coding: utf-8 -*-
"""
Created on Wed Feb 04 10:12:55 2026

@author: bboyg
"""

import numpy as np
import pandas as pd
import pytest
from scan_params import MotorRange, MotorPosition, CameraFov, ScanParams
from scenarios import reference_params, run_hemisphere_scan, scan_summary

def test_reference_run_columns_and_length():
    df = run_hemisphere_scan(reference_params(), n_steps=100)
    assert isinstance(df, pd.DataFrame)
    assert len(df) == 101
    for col in ("step", "t", "index", "h", "v", "az_rad", "el_rad", "ring", "jump_steps"):
        assert col in df.columns

def test_first_row_is_start_position():
    df = run_hemisphere_scan(reference_params(), n_steps=5)
    first = df.iloc[0]
    assert first["h"] == 0 and first["v"] == 0
    assert first["jump_steps"] == 0.0
    assert first["ring"] == 0

def test_index_advances_cyclically():
    df = run_hemisphere_scan(reference_params(), n_steps=80)
    start = int(df["index"].iloc[0])
    expected = [(start + k) % 35 for k in range(len(df))]
    assert df["index"].tolist() == expected

def test_run_stays_within_bounds():
    df = run_hemisphere_scan(reference_params(), n_steps=100)
    assert df["h"].between(-400, 399).all()
    assert df["v"].between(0, 400).all()
    assert np.all(df["t"].diff().dropna() == 1.0)

def test_summary_covers_whole_sequence():
    df = run_hemisphere_scan(reference_params(), n_steps=100)
    summary = scan_summary(df)
    assert summary["visited"] == 101
    assert summary["unique_positions"] == 35
    assert summary["rings"] == 8
    assert summary["max_jump_steps"] > 0

def test_zero_steps_gives_start_only():
    df = run_hemisphere_scan(reference_params(), n_steps=0)
    assert len(df) == 1

def test_summary_of_empty_frame():
    summary = scan_summary(pd.DataFrame())
    assert summary["visited"] == 0
    assert np.isnan(summary["max_jump_steps"])

def test_scan_params_validation():
    with pytest.raises(ValueError):
        ScanParams(MotorRange(800, 800), CameraFov(34.16, 25.72), dwell_s=0.0)
    with pytest.raises(ValueError):
        CameraFov(h_deg=-1.0, v_deg=25.72)
    params = ScanParams(MotorRange(800, 800), CameraFov(34.16, 25.72))
    assert params.initial_position == MotorPosition(0, 0)
    assert abs(params.fov.h_rad - np.deg2rad(34.16)) < 1e-12
