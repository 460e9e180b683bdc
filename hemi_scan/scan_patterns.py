# -*- coding: utf-8 -*-
"""
Created on Wed Jan 14 08:45:33 2026

@author: bboyg
"""

import numpy as np
from scan_params import MotorRange
from utils_frames import steps_to_rad
from hemisphere_scan import ScanCursor


class ScanPattern:
    """
    Base class for scan patterns.

    next_pointing(t) -> (az_rad, el_rad, dwell_s)
    """
    def next_pointing(self, t: float):
        raise NotImplementedError


# ------------------------------------------------------------
# Step scan: hold each hemisphere scan position for one dwell
# ------------------------------------------------------------
class HemisphereStepScan(ScanPattern):
    """
    Drives a scan cursor from a clock instead of explicit advance() calls.

    scanner     : ScanCursor (usually a HemisphereScanner)
    motor_range : MotorRange the scanner's step offsets refer to
    dwell_s     : time spent at each position (s)

    Behavior:
      - Position k = floor(t / dwell_s) after the scanner's current index
      - Wraps around the sequence, so the pattern repeats every
        len(scanner) * dwell_s seconds
      - The scanner itself is never advanced
    """

    def __init__(self, scanner: ScanCursor, motor_range: MotorRange, dwell_s: float):
        if dwell_s <= 0:
            raise ValueError(f"dwell_s must be > 0. Got: {dwell_s}")
        if len(scanner) == 0:
            raise ValueError("Scanner has no positions to step through.")

        # every position must convert; raises OutOfRangeError otherwise
        for pos in scanner.positions:
            steps_to_rad(pos.h, motor_range.h)
            steps_to_rad(pos.v, motor_range.v)

        self.scanner = scanner
        self.motor_range = motor_range
        self.dwell_s = dwell_s
        self.index0 = scanner.index

    @staticmethod
    def from_scanner(scanner, dwell_s: float):
        """
        Step scan over a HemisphereScanner, using its own motor range.
        """
        return HemisphereStepScan(scanner, scanner.motor_range, dwell_s)

    def position_at(self, t: float):
        k = int(np.floor(t / self.dwell_s))
        idx = (self.index0 + k) % len(self.scanner)
        return self.scanner.positions[idx]

    def next_pointing(self, t: float):
        pos = self.position_at(t)

        az = steps_to_rad(pos.h, self.motor_range.h)
        el = steps_to_rad(pos.v, self.motor_range.v)
        return az, el, self.dwell_s
