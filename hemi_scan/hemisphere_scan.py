# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 13:15:09 2026

@author: bboyg
"""

from typing import Optional, Sequence, Tuple
from scan_params import MotorRange, MotorPosition, ScanParams
from utils_frames import wrap_steps
from ring_sampler import generate_ring_positions
from scan_order import snake_order, closest_position_index


class ScanCursor:
    """
    Cyclic cursor over a fixed sequence of scan positions.

    current()   -> position under the cursor, None if the sequence is empty
    advance()   -> step forward (wrapping to the start), False if empty
    """

    def __init__(self, positions: Sequence[MotorPosition], index: int = 0):
        self._positions: Tuple[MotorPosition, ...] = tuple(positions)
        self._index = index % len(self._positions) if self._positions else 0

    def __len__(self):
        return len(self._positions)

    @property
    def positions(self) -> Tuple[MotorPosition, ...]:
        return self._positions

    @property
    def index(self) -> int:
        return self._index

    def current(self) -> Optional[MotorPosition]:
        if not self._positions:
            return None
        return self._positions[self._index]

    def advance(self) -> bool:
        if not self._positions:
            return False
        self._index = (self._index + 1) % len(self._positions)
        return True

    # older name, kept for existing callers
    move_next = advance


class HemisphereScanner(ScanCursor):
    """
    Scan cursor over the upper hemisphere seen by a pan/tilt camera.

    Positions are sampled in elevation rings one vertical FOV apart, each
    ring holding enough azimuth samples to leave no gap wider than one
    horizontal FOV. Rings are visited in snake order and the cursor starts
    at the position nearest to initial_position.

    Frame conventions:
        - h: pan steps, wraps modulo motor_range.h
        - v: tilt steps, 0 at the horizon, motor_range.v/2 at the top of
          the tilt range
    """

    def __init__(self, motor_range: MotorRange, fov_h_deg: float, fov_v_deg: float,
                 initial_position: MotorPosition):
        self.motor_range = motor_range
        self.fov_h_deg = fov_h_deg
        self.fov_v_deg = fov_v_deg

        raw = generate_ring_positions(motor_range, fov_h_deg, fov_v_deg, initial_position)
        positions = snake_order(raw)
        # pan wraps, so compare against the start pan folded into range
        target = MotorPosition(wrap_steps(initial_position.h, motor_range.h), initial_position.v)
        start = closest_position_index(target, positions, motor_range.h)

        super().__init__(positions, start)
        self.start_index = self.index

    @staticmethod
    def from_params(params: ScanParams):
        return HemisphereScanner(
            params.motor_range,
            params.fov.h_deg,
            params.fov.v_deg,
            params.initial_position
        )
