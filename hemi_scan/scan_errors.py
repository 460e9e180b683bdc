# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 09:12:40 2026

@author: bboyg
"""


class RangeError(ValueError):
    """Raised when a motor step range is not positive."""


class OutOfRangeError(ValueError):
    """Raised when a step offset lies outside [-range/2, range/2]."""


class InvalidInitialPositionError(ValueError):
    """Raised when the start position is outside the upper hemisphere band."""
