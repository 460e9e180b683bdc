# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 09:20:05 2026

@author: bboyg
"""

from dataclasses import dataclass, field
import numpy as np
from scan_errors import RangeError


@dataclass(frozen=True)
class MotorRange:
    """
    Total number of discrete motor steps per axis.

    h : steps for one full pan revolution
    v : steps for one full tilt revolution
    """
    h: int
    v: int

    def __post_init__(self):
        if self.h <= 0 or self.v <= 0:
            raise RangeError(
                f"Motor range must be positive on both axes. Got: h={self.h}, v={self.v}"
            )


@dataclass(frozen=True)
class MotorPosition:
    """
    Signed step offsets from the mechanical center.

    h : pan offset, wraps modulo MotorRange.h
    v : tilt offset, 0 at the horizon
    """
    h: int
    v: int


@dataclass(frozen=True)
class CameraFov:
    """
    Camera field of view.

    h_deg : horizontal FOV [deg]
    v_deg : vertical FOV [deg]
    """
    h_deg: float
    v_deg: float

    def __post_init__(self):
        if self.h_deg <= 0 or self.v_deg <= 0:
            raise ValueError(
                f"FOV must be > 0 on both axes. Got: h={self.h_deg}, v={self.v_deg}"
            )

    @property
    def h_rad(self) -> float:
        return float(np.deg2rad(self.h_deg))

    @property
    def v_rad(self) -> float:
        return float(np.deg2rad(self.v_deg))


@dataclass
class ScanParams:
    """
    Scan parameter container.

    motor_range      : MotorRange of the pan/tilt head
    fov              : CameraFov of the mounted camera
    initial_position : MotorPosition the head starts at
    dwell_s          : time spent at each scan position [s]
    """

    motor_range: MotorRange
    fov: CameraFov
    initial_position: MotorPosition = field(default_factory=lambda: MotorPosition(0, 0))
    dwell_s: float = 1.0

    def __post_init__(self):
        if self.dwell_s <= 0:
            raise ValueError(f"dwell_s must be > 0. Got: {self.dwell_s}")
