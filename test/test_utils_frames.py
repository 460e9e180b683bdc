# -*- coding: utf-8 -*-
"""
Created on Wed Jan 14 09:19:52 2026

@author: bboyg
"""

import numpy as np
import pytest
from scan_errors import RangeError, OutOfRangeError
from utils_frames import (
    deg2rad,
    rad2deg,
    angle_wrap,
    round_half_away,
    steps_to_rad,
    rad_to_steps,
    wrap_steps
)

def test_deg_rad_conversion():
    assert abs(deg2rad(180.0) - np.pi) < 1e-12
    assert abs(rad2deg(np.pi / 2) - 90.0) < 1e-12

def test_angle_wrap_half_open():
    assert abs(angle_wrap(np.pi) + np.pi) < 1e-12
    assert abs(angle_wrap(2.0 * np.pi + 0.25) - 0.25) < 1e-12
    assert abs(angle_wrap(-0.25) + 0.25) < 1e-12

@pytest.mark.parametrize("x,expected", [
    (0.0, 0),
    (0.5, 1),
    (-0.5, -1),
    (2.5, 3),
    (-2.5, -3),
    (1.49, 1),
    (-1.6, -2),
])
def test_round_half_away_from_zero(x, expected):
    assert round_half_away(x) == expected

def test_steps_to_rad_basic():
    assert steps_to_rad(0, 800) == 0.0
    assert abs(steps_to_rad(400, 800) - np.pi) < 1e-12
    assert abs(steps_to_rad(-400, 800) + np.pi) < 1e-12
    assert abs(steps_to_rad(-200, 800) + np.pi / 2) < 1e-12

def test_steps_to_rad_single_step_range():
    assert steps_to_rad(0, 1) == 0.0

@pytest.mark.parametrize("total", [0, -800])
def test_non_positive_range_rejected(total):
    with pytest.raises(RangeError):
        steps_to_rad(0, total)
    with pytest.raises(RangeError):
        rad_to_steps(0.0, total)
    with pytest.raises(RangeError):
        wrap_steps(0, total)

@pytest.mark.parametrize("steps", [401, -401, 10000])
def test_steps_outside_half_range_rejected(steps):
    with pytest.raises(OutOfRangeError):
        steps_to_rad(steps, 800)

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        steps_to_rad(401, 800)

def test_rad_to_steps_wraps_any_angle():
    assert rad_to_steps(np.pi / 2, 800) == 200
    assert rad_to_steps(np.pi / 2 + 2.0 * np.pi, 800) == 200
    assert rad_to_steps(np.pi / 2 - 4.0 * np.pi, 800) == 200
    assert rad_to_steps(np.pi, 800) == -400

def test_rad_to_steps_round_trip():
    for total in (2, 7, 800, 801):
        half = total // 2
        for s in range(-half, half):
            assert rad_to_steps(steps_to_rad(s, total), total) == s

def test_upper_boundary_step_wraps_to_lower():
    # +half and -half are the same physical direction
    assert rad_to_steps(steps_to_rad(400, 800), 800) == -400

def test_wrap_steps():
    assert wrap_steps(0, 800) == 0
    assert wrap_steps(399, 800) == 399
    assert wrap_steps(400, 800) == -400
    assert wrap_steps(-401, 800) == 399
    assert wrap_steps(1200, 800) == -400
