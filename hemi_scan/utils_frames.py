# -*- coding: utf-8 -*-
"""
Created on Wed Jan 14 07:48:22 2026

@author: bboyg
"""

import numpy as np
from scan_errors import RangeError, OutOfRangeError


# ============================================================
# Angle utilities
# ============================================================

def deg2rad(deg: float) -> float:
    """
    Converts angle from degrees to radians.

    """
    return deg * np.pi / 180.0


def rad2deg(rad: float) -> float:
    """
    Converts angle from radians to degrees.

    """
    return rad * 180.0 / np.pi


def angle_wrap(ang: float) -> float:
    """
    Wrap angle to [-pi, +pi).
    """
    return (ang + np.pi) % (2.0 * np.pi) - np.pi


def round_half_away(x: float) -> int:
    """
    Nearest integer, exact halves rounded away from zero (2.5 -> 3, -2.5 -> -3).
    Unlike round() and np.round(), which round halves to even.
    """
    a = abs(float(x))
    n = np.floor(a)
    if a - n >= 0.5:
        n += 1.0
    return int(np.copysign(n, x))


# ============================================================
# Motor steps <-> radians
# ============================================================

def steps_to_rad(steps: int, total_steps: int) -> float:
    """
    Signed step offset -> angle in radians.

    Inputs:
        steps       : offset from center, in [-total_steps//2, total_steps//2]
        total_steps : steps for one full revolution of the axis

    Returns:
        angle in [-pi, +pi]
    """
    if total_steps <= 0:
        raise RangeError(f"Steps must be positive. Got: {total_steps}")

    half_steps = total_steps // 2
    if steps < -half_steps or steps > half_steps:
        raise OutOfRangeError(
            f"steps must be in range [{-half_steps}, {half_steps}]. Got: {steps}"
        )

    if half_steps == 0:
        return 0.0
    return float(np.pi * (steps / half_steps))


def rad_to_steps(radians: float, total_steps: int) -> int:
    """
    Angle in radians -> nearest signed step offset.

    Any finite angle is accepted; it is first wrapped to [-pi, +pi).
    Halves round away from zero (see round_half_away).
    """
    if total_steps <= 0:
        raise RangeError(f"Steps must be positive. Got: {total_steps}")

    half_steps = total_steps // 2
    radians = angle_wrap(radians)
    return round_half_away(radians * half_steps / np.pi)


def wrap_steps(steps: int, total_steps: int) -> int:
    """
    Wrap a step offset into [-total_steps//2, total_steps - total_steps//2).
    For even ranges this is [-total_steps/2, total_steps/2).
    """
    if total_steps <= 0:
        raise RangeError(f"Steps must be positive. Got: {total_steps}")

    half_steps = total_steps // 2
    return (steps + half_steps) % total_steps - half_steps
