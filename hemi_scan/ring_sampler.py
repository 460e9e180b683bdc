# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 10:02:17 2026

@author: bboyg
"""

from typing import List
import numpy as np
from scan_errors import InvalidInitialPositionError
from scan_params import MotorRange, MotorPosition, CameraFov
from utils_frames import (
    steps_to_rad,
    rad_to_steps,
    wrap_steps,
    round_half_away
)


def ring_step_size(range_v: int, fov_v_rad: float) -> int:
    """
    Tilt steps between consecutive elevation rings.

    One vertical FOV expressed in motor steps, never less than 1 step.
    """
    return max(1, round_half_away(range_v * fov_v_rad / (2.0 * np.pi)))


def ring_sample_count(elevation_rad: float, fov_h_rad: float) -> int:
    """
    Number of azimuth samples on the ring at elevation_rad.

    Latitude circles shrink as cos(elevation); samples are spaced at most one
    horizontal FOV apart along the ring. Rings with radius <= 0 get 1 sample.
    """
    radius = np.cos(elevation_rad)
    circumference = 2.0 * np.pi * radius
    return max(1, int(np.ceil(circumference / fov_h_rad)))


def generate_ring_positions(motor_range: MotorRange,
                            fov_h_deg: float,
                            fov_v_deg: float,
                            initial_position: MotorPosition) -> List[MotorPosition]:
    """
    Raw scan positions covering the upper hemisphere.

    Returns positions ring by ring (v ascending), azimuth index ascending
    within each ring. Ordering for traversal happens in scan_order.
    """
    max_vertical_steps = motor_range.v // 2
    if initial_position.v < 0 or initial_position.v > max_vertical_steps:
        raise InvalidInitialPositionError(
            f"Initial position must be in the upper hemisphere "
            f"(v in [0, {max_vertical_steps}]). Got: v={initial_position.v}"
        )

    fov = CameraFov(fov_h_deg, fov_v_deg)
    fov_h_rad = fov.h_rad
    fov_v_rad = fov.v_rad

    v_step = ring_step_size(motor_range.v, fov_v_rad)

    positions = []
    for v in range(0, max_vertical_steps + 1, v_step):
        elevation = steps_to_rad(v, motor_range.v)
        n_az = ring_sample_count(elevation, fov_h_rad)

        for i in range(n_az):
            az = 2.0 * np.pi * i / n_az
            h = wrap_steps(rad_to_steps(az, motor_range.h), motor_range.h)
            positions.append(MotorPosition(h=h, v=v))

    return positions
