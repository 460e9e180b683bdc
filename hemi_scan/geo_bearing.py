# -*- coding: utf-8 -*-
"""
Created on Tue Feb 03 08:41:27 2026

@author: bboyg
"""

from dataclasses import dataclass
import numpy as np
from utils_frames import deg2rad, rad2deg

# 1 degree of latitude is approximately 111.32 km
KM_PER_DEGREE_LATITUDE = 111.32


@dataclass
class GeoCoordinate:
    """
    latitude  : [deg]
    longitude : [deg]
    """
    latitude: float
    longitude: float


def move_north(coord: GeoCoordinate, distance_km: float) -> GeoCoordinate:
    """
    Point distance_km due north of coord (flat-earth latitude step).
    """
    lat_new = coord.latitude + distance_km / KM_PER_DEGREE_LATITUDE
    return GeoCoordinate(lat_new, coord.longitude)


def compass_bearing(start: GeoCoordinate, end: GeoCoordinate) -> float:
    """
    Great-circle initial bearing from start to end.

    Returns:
        bearing in degrees, clockwise from north, [0, 360)
    """
    lat1 = deg2rad(start.latitude)
    lon1 = deg2rad(start.longitude)
    lat2 = deg2rad(end.latitude)
    lon2 = deg2rad(end.longitude)

    dlon = lon2 - lon1

    x = np.sin(dlon) * np.cos(lat2)
    y = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)

    initial_bearing = np.arctan2(x, y)
    return float((rad2deg(initial_bearing) + 360.0) % 360.0)


def bearing_angle(camera: GeoCoordinate, obj: GeoCoordinate) -> float:
    """
    Unsigned angle between the camera's north direction and the object.

    Inputs:
        camera : camera position
        obj    : object position

    Returns:
        angle in radians, [0, pi]
    """
    north = move_north(camera, 1.0)

    bearing_north = compass_bearing(camera, north)
    bearing_obj = compass_bearing(camera, obj)

    diff = abs(bearing_obj - bearing_north)
    angle = min(diff, 360.0 - diff)

    return deg2rad(angle)
