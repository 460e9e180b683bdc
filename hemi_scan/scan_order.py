# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 11:34:50 2026

@author: bboyg
"""

from typing import Dict, List, Sequence
import numpy as np
from scan_params import MotorPosition


# ------------------------------------------------------------
# Traversal order: snake through the elevation rings
# ------------------------------------------------------------
def group_by_ring(positions: Sequence[MotorPosition]) -> Dict[int, List[MotorPosition]]:
    """
    Bucket positions by tilt step (ring elevation).
    """
    rings: Dict[int, List[MotorPosition]] = {}
    for pos in positions:
        rings.setdefault(pos.v, []).append(pos)
    return rings


def snake_order(positions: Sequence[MotorPosition]) -> List[MotorPosition]:
    """
    Order positions ring by ring, lowest elevation first.

    Each ring is sorted by h; every second ring is reversed (boustrophedon)
    so the head does not swing back across the whole pan range between rings.
    """
    rings = group_by_ring(positions)

    ordered = []
    for i, v in enumerate(sorted(rings)):
        ring = sorted(rings[v], key=lambda pos: pos.h)
        if i % 2 == 1:
            ring.reverse()
        ordered.extend(ring)

    return ordered


# ------------------------------------------------------------
# Nearest position on a pan-wrapping grid
# ------------------------------------------------------------
def toroidal_distance(a: MotorPosition, b: MotorPosition, range_h: int) -> float:
    """
    Step distance between two positions.

    Pan wraps around range_h (shortest way round); tilt does not.
    """
    dh = abs(a.h - b.h) % range_h
    dh = min(dh, range_h - dh)
    dv = abs(a.v - b.v)
    return float(np.sqrt(dh ** 2 + dv ** 2))


def closest_position_index(target: MotorPosition,
                           positions: Sequence[MotorPosition],
                           range_h: int) -> int:
    """
    Index of the position nearest to target.

    Ties go to the lowest index. Returns 0 for an empty sequence, so
    check for emptiness before indexing with the result.
    """
    closest = 0
    min_dist = np.inf

    for i, pos in enumerate(positions):
        d = toroidal_distance(target, pos, range_h)
        if d < min_dist:
            min_dist = d
            closest = i

    return closest
